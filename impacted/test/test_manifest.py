"""Tests for impacted.manifest."""

from __future__ import annotations

import json
from pathlib import Path

from impacted.core.result import Err, Ok
from impacted.manifest import Manifest, PackageDirectory, load_manifest, parse_manifest


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestManifest:
    def test_universe_skips_unnamed_directories(self) -> None:
        manifest = Manifest(
            package_directories=(
                PackageDirectory(path="force-app", default=True),
                PackageDirectory(path="pkg-a", package="pkgA"),
                PackageDirectory(path="pkg-b", package="pkgB"),
            )
        )
        assert manifest.universe == ("pkgA", "pkgB")

    def test_package_path_first_match(self) -> None:
        manifest = Manifest(
            package_directories=(
                PackageDirectory(path="pkg-a", package="pkgA"),
                PackageDirectory(path="pkg-a-old", package="pkgA"),
            )
        )
        assert manifest.package_path("pkgA") == "pkg-a"
        assert manifest.package_path("ghost") is None


class TestParseManifest:
    def test_parses_entries(self) -> None:
        result = parse_manifest(
            {
                "packageDirectories": [
                    {"path": "pkg-a", "package": "pkgA", "default": True},
                    {"path": "unpackaged"},
                ]
            }
        )
        assert isinstance(result, Ok)
        assert result.value.package_directories == (
            PackageDirectory(path="pkg-a", package="pkgA", default=True),
            PackageDirectory(path="unpackaged"),
        )

    def test_entries_without_path_join_the_universe(self) -> None:
        result = parse_manifest(
            {
                "packageDirectories": [
                    {"package": "pkgA"},
                    "junk",
                    {"path": "pkg-b", "package": "pkgB"},
                ]
            }
        )
        assert isinstance(result, Ok)
        manifest = result.value
        assert manifest.package_directories == (
            PackageDirectory(package="pkgA"),
            PackageDirectory(path="pkg-b", package="pkgB"),
        )
        assert manifest.universe == ("pkgA", "pkgB")
        assert manifest.package_path("pkgA") is None

    def test_names_and_paths_are_not_trimmed(self) -> None:
        result = parse_manifest({"packageDirectories": [{"path": " pkg-a", "package": "pkgA "}]})
        assert isinstance(result, Ok)
        manifest = result.value
        assert manifest.universe == ("pkgA ",)
        assert manifest.package_path("pkgA") is None
        assert manifest.package_path("pkgA ") == " pkg-a"

    def test_empty_strings_count_as_missing(self) -> None:
        result = parse_manifest({"packageDirectories": [{"path": "", "package": ""}]})
        assert isinstance(result, Ok)
        assert result.value.package_directories == (PackageDirectory(),)
        assert result.value.universe == ()

    def test_root_must_be_object(self) -> None:
        result = parse_manifest(["not", "an", "object"])
        assert isinstance(result, Err)
        assert result.error.kind == "invalid"

    def test_requires_package_directories(self) -> None:
        result = parse_manifest({"namespace": ""})
        assert isinstance(result, Err)
        assert "packageDirectories" in result.error.message


class TestLoadManifest:
    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_manifest(tmp_path / "sfdx-project.json")
        assert isinstance(result, Err)
        assert result.error.kind == "missing"
        assert "sfdx-project.json not found at:" in result.error.message

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "sfdx-project.json"
        path.write_text("{not json", encoding="utf-8")
        result = load_manifest(path)
        assert isinstance(result, Err)
        assert result.error.kind == "invalid"
        assert result.error.path == path

    def test_valid_file(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "sfdx-project.json",
            {"packageDirectories": [{"path": "pkg-a", "package": "pkgA"}]},
        )
        result = load_manifest(path)
        assert isinstance(result, Ok)
        assert result.value.universe == ("pkgA",)
