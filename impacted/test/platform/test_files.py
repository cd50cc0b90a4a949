"""Tests for impacted.platform.files."""

from __future__ import annotations

from pathlib import Path

from impacted.platform.files import append_text


def test_append_creates_parent(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "out.txt"
    append_text(path, "a=1\n")
    assert path.read_text(encoding="utf-8") == "a=1\n"


def test_append_keeps_existing_content(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    path.write_text("previous=step\n", encoding="utf-8")
    append_text(path, "a=1\n")
    assert path.read_text(encoding="utf-8") == "previous=step\na=1\n"
