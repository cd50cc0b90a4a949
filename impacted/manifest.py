"""Project manifest (``sfdx-project.json``) loading.

The manifest declares every package directory in the repository. Only
directories that carry a ``package`` name belong to the package universe.
Names and paths are kept exactly as written, whitespace included.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from impacted.core.result import Err, Ok, Result
from impacted.core.structured import as_str_dict, get_bool, get_list, get_text

__all__ = ["Manifest", "ManifestError", "PackageDirectory", "load_manifest", "parse_manifest"]


@dataclass(frozen=True, slots=True)
class ManifestError:
    """Error when the manifest cannot be loaded.

    Attributes:
        kind: ``missing`` when the file does not exist, ``invalid`` otherwise
        message: Human readable description
        path: Manifest path
    """

    kind: str
    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class PackageDirectory:
    """One entry of ``packageDirectories``."""

    path: str | None = None
    package: str | None = None
    default: bool = False


@dataclass(frozen=True, slots=True)
class Manifest:
    """Parsed project manifest."""

    package_directories: tuple[PackageDirectory, ...] = ()

    @property
    def universe(self) -> tuple[str, ...]:
        """Ordered names of all declared packages."""
        return tuple(d.package for d in self.package_directories if d.package)

    def package_path(self, name: str) -> str | None:
        """Path of the first directory declaring ``name``.

        None when no directory declares it, or when that first directory has
        no ``path``.
        """
        for d in self.package_directories:
            if d.package == name:
                return d.path
        return None


def parse_manifest(data: object, path: Path | None = None) -> Result[Manifest, ManifestError]:
    """Build a Manifest from decoded JSON.

    Every object entry is kept. One without a ``path`` still adds its package
    to the universe but can never contain a changed file.
    """
    root = as_str_dict(data)
    if root is None:
        return Err(ManifestError("invalid", "Manifest root must be a JSON object", path))

    entries = get_list(root, "packageDirectories")
    if entries is None:
        return Err(ManifestError("invalid", "Manifest has no packageDirectories list", path))

    directories: list[PackageDirectory] = []
    for entry in entries:
        table = as_str_dict(entry)
        if table is None:
            continue
        directories.append(
            PackageDirectory(
                path=get_text(table, "path"),
                package=get_text(table, "package"),
                default=get_bool(table, "default") or False,
            )
        )

    return Ok(Manifest(package_directories=tuple(directories)))


def load_manifest(path: Path) -> Result[Manifest, ManifestError]:
    """Load and parse the manifest at ``path``.

    Returns:
        Ok(Manifest) on success, Err(ManifestError) on failure
    """
    if not path.is_file():
        return Err(ManifestError("missing", f"sfdx-project.json not found at: {path}", path))

    try:
        data: object = json.loads(path.read_text(encoding="utf-8"))
    except PermissionError:
        return Err(ManifestError("invalid", f"Permission denied reading: {path}", path))
    except (OSError, UnicodeDecodeError) as e:
        return Err(ManifestError("invalid", f"Error reading manifest: {e}", path))
    except json.JSONDecodeError as e:
        return Err(ManifestError("invalid", f"Invalid JSON in {path}: {e}", path))

    return parse_manifest(data, path)
