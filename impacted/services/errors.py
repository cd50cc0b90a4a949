"""Error types for a detection run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

DetectErrorKind = Literal["manifest_missing", "manifest_invalid"]


@dataclass(frozen=True, slots=True)
class DetectError:
    """A failure that aborts the run.

    Only manifest problems are fatal: without package paths no domain can be
    evaluated. Everything else is reported as a warning on the report.
    """

    kind: DetectErrorKind
    message: str
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
