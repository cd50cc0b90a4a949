"""Platform seams: files."""

from .files import append_text

__all__ = ["append_text"]
