"""Filesystem helpers."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = ["append_text"]


def append_text(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Append text to path, creating it (and its parent) if needed.

    GitHub Actions hands every step the same ``$GITHUB_OUTPUT`` file, so
    writes must append and never replace.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("a", encoding=encoding, newline="") as handle:
        handle.write(content)
        handle.flush()
        os.fsync(handle.fileno())
