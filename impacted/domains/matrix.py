"""Shape impacted domains into step outputs.

Three outputs are produced:
- ``has-changes``: ``true`` when at least one domain is impacted
- ``impacted-domains``: JSON array of domain names
- ``matrix``: ``{"include": [{"domain": ..., "release-config": ...}]}`` for
  a ``strategy.matrix`` fan-out

JSON is compact and key order is fixed, so identical inputs always give
byte-identical outputs.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field

from .model import ImpactedDomain

__all__ = ["DetectionOutputs", "MatrixEntry", "build_outputs", "empty_outputs"]

MatrixEntry = dict[str, str]


def _compact(obj: object) -> str:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True, slots=True)
class DetectionOutputs:
    """Externally observable result of a detection run."""

    has_changes: bool = False
    impacted_domains: tuple[str, ...] = ()
    matrix_include: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def matrix(self) -> dict[str, list[MatrixEntry]]:
        return {
            "include": [
                {"domain": domain, "release-config": config_file}
                for domain, config_file in self.matrix_include
            ]
        }

    def impacted_domains_json(self) -> str:
        return _compact(list(self.impacted_domains))

    def matrix_json(self) -> str:
        return _compact(self.matrix)

    def as_action_outputs(self) -> dict[str, str]:
        """Return the outputs keyed by their GitHub Actions names."""
        return {
            "has-changes": "true" if self.has_changes else "false",
            "impacted-domains": self.impacted_domains_json(),
            "matrix": self.matrix_json(),
        }


def empty_outputs() -> DetectionOutputs:
    """Outputs for a run with nothing to do."""
    return DetectionOutputs()


def build_outputs(impacted: Sequence[ImpactedDomain]) -> DetectionOutputs:
    """Build outputs from the aggregator result."""
    if not impacted:
        return empty_outputs()
    return DetectionOutputs(
        has_changes=True,
        impacted_domains=tuple(d.name for d in impacted),
        matrix_include=tuple((d.name, d.config_file) for d in impacted),
    )
