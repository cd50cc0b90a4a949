"""Typed detection inputs.

Inputs arrive either as CLI options or, inside a GitHub Actions step, as
``INPUT_<NAME>`` environment variables. Blank values fall back to defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from .structured import get_str

__all__ = [
    "DetectInputs",
    "DEFAULT_RELEASE_CONFIG_PATH",
    "DEFAULT_BASE_REF",
    "DEFAULT_HEAD_REF",
    "DEFAULT_SFDX_PROJECT_PATH",
    "action_input_env",
]

DEFAULT_RELEASE_CONFIG_PATH = "config/release-config-*.yaml"
DEFAULT_BASE_REF = "origin/main"
DEFAULT_HEAD_REF = "HEAD"
DEFAULT_SFDX_PROJECT_PATH = "sfdx-project.json"


def action_input_env(name: str) -> str:
    """Return the env var GitHub Actions uses for an action input.

    The runner upper-cases the name and replaces spaces, but keeps hyphens:
    ``base-ref`` becomes ``INPUT_BASE-REF``.
    """
    return f"INPUT_{name.replace(' ', '_').upper()}"


@dataclass(frozen=True, slots=True)
class DetectInputs:
    """Everything a detection run needs to know about where to look.

    Attributes:
        release_config_path: Glob selecting release config files
        base_ref: Diff base (left side of ``base...head``)
        head_ref: Diff head
        sfdx_project_path: Path to the project manifest
    """

    release_config_path: str = DEFAULT_RELEASE_CONFIG_PATH
    base_ref: str = DEFAULT_BASE_REF
    head_ref: str = DEFAULT_HEAD_REF
    sfdx_project_path: str = DEFAULT_SFDX_PROJECT_PATH

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> DetectInputs:
        """Create inputs from GitHub Actions ``INPUT_*`` variables."""
        env: Mapping[str, object] = environ
        return cls(
            release_config_path=get_str(env, action_input_env("release-config-path"))
            or DEFAULT_RELEASE_CONFIG_PATH,
            base_ref=get_str(env, action_input_env("base-ref")) or DEFAULT_BASE_REF,
            head_ref=get_str(env, action_input_env("head-ref")) or DEFAULT_HEAD_REF,
            sfdx_project_path=get_str(env, action_input_env("sfdx-project-path"))
            or DEFAULT_SFDX_PROJECT_PATH,
        )

    def with_overrides(
        self,
        *,
        release_config_path: str | None = None,
        base_ref: str | None = None,
        head_ref: str | None = None,
        sfdx_project_path: str | None = None,
    ) -> DetectInputs:
        """Return a copy where every non-blank override replaces the current value."""
        changes: dict[str, str] = {}
        for key, value in (
            ("release_config_path", release_config_path),
            ("base_ref", base_ref),
            ("head_ref", head_ref),
            ("sfdx_project_path", sfdx_project_path),
        ):
            if value is not None and value.strip():
                changes[key] = value.strip()
        return replace(self, **changes)

    def manifest_file(self, root: Path) -> Path:
        """Resolve the manifest path against the repository root."""
        path = Path(self.sfdx_project_path).expanduser()
        return path if path.is_absolute() else root / path
