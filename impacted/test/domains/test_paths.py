"""Tests for impacted.domains.paths."""

from __future__ import annotations

import pytest

from impacted.domains.paths import is_under_package, normalize_path


class TestNormalizePath:
    def test_backslashes(self) -> None:
        assert normalize_path("packages\\pkg\\file.ts") == "packages/pkg/file.ts"

    def test_no_collapsing(self) -> None:
        assert normalize_path("a//b/../c") == "a//b/../c"


class TestIsUnderPackage:
    def test_file_inside_package(self) -> None:
        assert is_under_package("packages/pkg/file.ts", "packages/pkg") is True

    def test_nested_file(self) -> None:
        assert is_under_package("packages/pkg/src/classes/A.cls", "packages/pkg") is True

    def test_sibling_with_shared_prefix(self) -> None:
        assert is_under_package("packages/pkg-extra/file.ts", "packages/pkg") is False

    def test_exact_match_counts(self) -> None:
        assert is_under_package("packages/pkg", "packages/pkg") is True

    def test_parent_directory_is_not_inside(self) -> None:
        assert is_under_package("packages", "packages/pkg") is False

    def test_windows_separators_on_either_side(self) -> None:
        assert is_under_package("packages\\pkg\\file.ts", "packages/pkg") is True
        assert is_under_package("packages/pkg/file.ts", "packages\\pkg") is True

    @pytest.mark.parametrize(
        ("file_path", "package_path"),
        [
            ("Packages/pkg/file.ts", "packages/pkg"),
            ("./packages/pkg/file.ts", "packages/pkg"),
            ("other/packages/pkg/file.ts", "packages/pkg"),
        ],
    )
    def test_literal_comparison_only(self, file_path: str, package_path: str) -> None:
        assert is_under_package(file_path, package_path) is False
