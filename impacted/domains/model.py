from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Domain:
    """A release domain with its resolved packages."""

    name: str
    config_file: str
    packages: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ImpactedDomain:
    """A domain with at least one changed package."""

    name: str
    config_file: str
    # Subset of Domain.packages, in the domain's order.
    changed_packages: tuple[str, ...]
