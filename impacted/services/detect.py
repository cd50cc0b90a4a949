"""Detection service: load inputs, resolve domains, match changes.

The service performs all I/O up front (manifest, release configs, git diff)
and hands immutable snapshots to the pure functions in ``impacted.domains``.
It never prints; warnings travel back on the report.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from impacted.core.config import DetectInputs
from impacted.core.result import Err, Ok, Result
from impacted.domains import (
    DetectionOutputs,
    Domain,
    ImpactedDomain,
    build_outputs,
    detect_impacted_domains,
    empty_outputs,
    resolve_domain_packages,
)
from impacted.git.repository import Repository
from impacted.manifest import Manifest, ManifestError, load_manifest
from impacted.release_config import discover_config_files, load_release_config
from impacted.services.errors import DetectError

__all__ = ["DetectService", "DetectionReport", "Outcome"]

Outcome = Literal[
    "no_config_files",
    "no_valid_configs",
    "no_changes",
    "not_impacted",
    "impacted",
]


@dataclass(frozen=True, slots=True)
class DetectionReport:
    """Everything a detection run found.

    ``outcome`` names which stage ended the run. All outcomes except
    ``impacted`` carry the empty outputs.
    """

    inputs: DetectInputs
    outcome: Outcome
    outputs: DetectionOutputs
    manifest: Manifest
    config_files: tuple[str, ...] = ()
    domains: tuple[Domain, ...] = ()
    changed_files: tuple[str, ...] = ()
    impacted: tuple[ImpactedDomain, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def has_changes(self) -> bool:
        return self.outputs.has_changes


def _display_path(path: Path, root: Path) -> str:
    """Path as reported in the matrix: root-relative with ``/`` separators."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def _manifest_error(error: ManifestError) -> DetectError:
    if error.kind == "missing":
        return DetectError(
            kind="manifest_missing",
            message=error.message,
            hint="check out the repository first or pass --sfdx-project-path",
        )
    return DetectError(kind="manifest_invalid", message=error.message)


class DetectService:
    """Detect release domains impacted by the diff between two refs."""

    def __init__(
        self,
        *,
        root: Path,
        inputs: DetectInputs,
        repository: Repository | None = None,
    ) -> None:
        self._root = root
        self._inputs = inputs
        self._repository = repository or Repository(root)

    def load_domains(
        self, manifest: Manifest, config_files: list[Path]
    ) -> tuple[list[Domain], list[str]]:
        """Parse config files into domains, skipping invalid ones.

        Returns:
            (domains, warnings) with domains in config file order
        """
        universe = manifest.universe
        domains: list[Domain] = []
        warnings: list[str] = []
        for path in config_files:
            display = _display_path(path, self._root)
            match load_release_config(path):
                case Err(e):
                    warnings.append(f"Failed to load release config: {display} ({e.message})")
                case Ok(config):
                    domains.append(
                        Domain(
                            name=config.release_name,
                            config_file=display,
                            packages=resolve_domain_packages(config, universe),
                        )
                    )
        return domains, warnings

    def changed_files(self) -> tuple[list[str], list[str]]:
        """Return (changed files, warnings). A failed diff counts as no changes."""
        result = self._repository.changed_files(self._inputs.base_ref, self._inputs.head_ref)
        match result:
            case Err(e):
                return [], [f"git {e.command} failed: {e.message}"]
            case Ok(files):
                return files, []

    def run(self) -> Result[DetectionReport, DetectError]:
        inputs = self._inputs

        manifest_result = load_manifest(inputs.manifest_file(self._root))
        if isinstance(manifest_result, Err):
            return Err(_manifest_error(manifest_result.error))
        manifest = manifest_result.value

        config_paths = discover_config_files(self._root, inputs.release_config_path)
        config_files = tuple(_display_path(p, self._root) for p in config_paths)
        if not config_paths:
            return Ok(
                DetectionReport(
                    inputs=inputs,
                    outcome="no_config_files",
                    outputs=empty_outputs(),
                    manifest=manifest,
                    warnings=(
                        f"No release config files found matching: {inputs.release_config_path}",
                    ),
                )
            )

        domains, warnings = self.load_domains(manifest, config_paths)
        if not domains:
            warnings.append("No valid release configs found")
            return Ok(
                DetectionReport(
                    inputs=inputs,
                    outcome="no_valid_configs",
                    outputs=empty_outputs(),
                    manifest=manifest,
                    config_files=config_files,
                    warnings=tuple(warnings),
                )
            )

        changed, diff_warnings = self.changed_files()
        warnings.extend(diff_warnings)

        impacted = detect_impacted_domains(domains, changed, manifest.package_path)
        if not changed:
            outcome: Outcome = "no_changes"
        elif not impacted:
            outcome = "not_impacted"
        else:
            outcome = "impacted"

        return Ok(
            DetectionReport(
                inputs=inputs,
                outcome=outcome,
                outputs=build_outputs(impacted),
                manifest=manifest,
                config_files=config_files,
                domains=tuple(domains),
                changed_files=tuple(changed),
                impacted=tuple(impacted),
                warnings=tuple(warnings),
            )
        )
