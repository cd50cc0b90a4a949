"""Decide whether a changed file belongs to a package directory.

Matching is textual: no filesystem access, no ``..`` collapsing, no case
folding. Only backslashes are normalized to forward slashes.
"""

from __future__ import annotations

__all__ = ["is_under_package", "normalize_path"]


def normalize_path(path: str) -> str:
    """Convert Windows separators to ``/``."""
    return path.replace("\\", "/")


def is_under_package(file_path: str, package_path: str) -> bool:
    """True if ``file_path`` is ``package_path`` or lies beneath it.

    The ``/`` boundary keeps ``pkg`` from matching ``pkg-extra/file``.
    """
    file_norm = normalize_path(file_path)
    package_norm = normalize_path(package_path)
    return file_norm == package_norm or file_norm.startswith(package_norm + "/")
