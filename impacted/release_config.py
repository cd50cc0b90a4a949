"""Release config discovery and parsing.

Each ``release-config-*.yaml`` file defines one release domain. Only
``releaseName`` is required; the artifact lists select which packages the
domain owns.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from impacted.core.result import Err, Ok, Result
from impacted.core.structured import (
    StrDict,
    as_str_dict,
    get_bool,
    get_list,
    get_str,
    get_str_list,
)

__all__ = [
    "ReleaseConfig",
    "ReleaseConfigError",
    "discover_config_files",
    "load_release_config",
    "parse_release_config",
]

# Keys whose shape decides which packages a domain owns.
_SELECTION_KEYS = ("includeOnlyArtifacts", "excludeArtifacts")


@dataclass(frozen=True, slots=True)
class ReleaseConfigError:
    """Error when a single release config cannot be used."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """One release domain definition.

    Only ``include_only_artifacts`` and ``exclude_artifacts`` affect impact
    detection. The dependency and ancillary settings are kept so callers can
    forward the full definition.

    ``include_only_declared`` records that the YAML held a non-empty
    ``includeOnlyArtifacts`` list, even when none of its items were strings.
    Such a domain still resolves by inclusion, to no packages.
    """

    release_name: str
    include_only_artifacts: tuple[str, ...] = ()
    exclude_artifacts: tuple[str, ...] = ()
    exclude_all_package_dependencies: bool = False
    exclude_package_dependencies: tuple[str, ...] = ()
    include_ancillary_artifacts: tuple[str, ...] = ()
    include_only_declared: bool = False

    @property
    def uses_inclusion(self) -> bool:
        """True when the domain is defined by its include list."""
        return self.include_only_declared or bool(self.include_only_artifacts)

    @classmethod
    def from_dict(cls, data: StrDict) -> ReleaseConfig:
        """Create a ReleaseConfig from a mapping (parsed YAML).

        Raises:
            ValueError: If ``releaseName`` is missing or blank, or if an
                artifact selection key holds something other than a list.
        """
        name = _release_name(data)
        if name is None:
            raise ValueError("releaseName is required")

        for key in _SELECTION_KEYS:
            if data.get(key) is not None and get_list(data, key) is None:
                raise ValueError(f"{key} must be a list")

        return cls(
            release_name=name,
            include_only_artifacts=get_str_list(data, "includeOnlyArtifacts"),
            exclude_artifacts=get_str_list(data, "excludeArtifacts"),
            exclude_all_package_dependencies=get_bool(data, "excludeAllPackageDependencies")
            or False,
            exclude_package_dependencies=get_str_list(data, "excludePackageDependencies"),
            include_ancillary_artifacts=get_str_list(data, "includeAncillaryArtifacts"),
            include_only_declared=bool(get_list(data, "includeOnlyArtifacts")),
        )


def _release_name(data: StrDict) -> str | None:
    # YAML reads `releaseName: 2024` as an int.
    value = data.get("releaseName")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return get_str(data, "releaseName")


def parse_release_config(
    text: str, path: Path | None = None
) -> Result[ReleaseConfig, ReleaseConfigError]:
    """Parse YAML text into a ReleaseConfig."""
    try:
        data_obj: object = yaml.safe_load(text)
    except yaml.YAMLError as e:
        return Err(ReleaseConfigError(f"Invalid YAML syntax: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ReleaseConfigError("Release config root must be a mapping", path=path))

    try:
        return Ok(ReleaseConfig.from_dict(data))
    except ValueError as e:
        return Err(ReleaseConfigError(f"Invalid release config: {e}", path=path))


def load_release_config(path: Path) -> Result[ReleaseConfig, ReleaseConfigError]:
    """Load and parse the release config at ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(ReleaseConfigError(f"Release config not found: {path}", path=path))
    except PermissionError:
        return Err(ReleaseConfigError(f"Permission denied reading: {path}", path=path))
    except (OSError, UnicodeDecodeError) as e:
        return Err(ReleaseConfigError(f"Error reading release config: {e}", path=path))

    return parse_release_config(text, path)


def discover_config_files(root: Path, pattern: str) -> list[Path]:
    """Return files under ``root`` matching ``pattern``, sorted by path.

    Absolute patterns are matched relative to the filesystem root.
    """
    pattern_path = Path(pattern).expanduser()
    if pattern_path.is_absolute():
        anchor = Path(pattern_path.anchor)
        relative = str(pattern_path.relative_to(anchor))
        matches = anchor.glob(relative)
    else:
        matches = root.glob(pattern)
    return sorted(p for p in matches if p.is_file())
