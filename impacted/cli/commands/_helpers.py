"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import NoReturn

import typer

__all__ = ["RULE", "exit_with_code"]

RULE = "-" * 90


def exit_with_code(code: int) -> NoReturn:
    """Exit with given code. Explicit helper for clarity."""
    raise typer.Exit(code=code)
