"""GitHub Actions step outputs and workflow commands."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from impacted.core.result import Err, Ok, Result
from impacted.platform.files import append_text

__all__ = [
    "OutputWriteError",
    "error_command",
    "format_outputs",
    "in_github_actions",
    "write_outputs",
]


@dataclass(frozen=True, slots=True)
class OutputWriteError:
    message: str
    path: Path


def in_github_actions(environ: Mapping[str, str]) -> bool:
    return environ.get("GITHUB_ACTIONS") == "true"


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def error_command(message: str) -> str:
    """Return an ``::error::`` workflow command that annotates the run."""
    return f"::error::{_escape_data(message)}"


def format_outputs(outputs: Mapping[str, str]) -> str:
    """Format outputs in the ``$GITHUB_OUTPUT`` file syntax.

    Single-line values use ``name=value``; multi-line values use the
    delimiter form with a random delimiter.
    """
    lines: list[str] = []
    for name, value in outputs.items():
        if "\n" in value or "\r" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            lines.append(f"{name}<<{delimiter}")
            lines.append(value)
            lines.append(delimiter)
        else:
            lines.append(f"{name}={value}")
    return "\n".join(lines) + "\n"


def write_outputs(path: Path, outputs: Mapping[str, str]) -> Result[None, OutputWriteError]:
    """Append outputs to the ``$GITHUB_OUTPUT`` file at ``path``."""
    try:
        append_text(path, format_outputs(outputs))
    except OSError as e:
        return Err(OutputWriteError(f"Cannot write step outputs to {path}: {e}", path))
    return Ok(None)
