from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import typer

from impacted.core.errors import ErrorCode
from impacted.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    environ: Mapping[str, str]
    console: ConsoleProtocol


def build_context(root: Path | None = None) -> CLIContext:
    try:
        resolved = (root or Path.cwd()).expanduser().resolve()
    except OSError as e:
        typer.echo(f"error: invalid --root: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if not resolved.is_dir():
        typer.echo(f"error: --root '{resolved}' is not a directory", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(
        root=resolved,
        environ=dict(os.environ),
        console=RichConsole(),
    )
