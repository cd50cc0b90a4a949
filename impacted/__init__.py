"""Detect which release domains are impacted by a git diff."""

__version__ = "1.0.0"
