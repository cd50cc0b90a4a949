"""Aggregate changed files into impacted release domains."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .model import Domain, ImpactedDomain
from .paths import is_under_package

__all__ = ["PackagePathLookup", "changed_packages", "detect_impacted_domains"]

PackagePathLookup = Callable[[str], str | None]


def changed_packages(
    domain: Domain,
    changed_files: Sequence[str],
    package_path: PackagePathLookup,
) -> tuple[str, ...]:
    """Return the domain's packages containing at least one changed file.

    Packages with no known path are skipped.
    """
    changed: list[str] = []
    for pkg in domain.packages:
        pkg_path = package_path(pkg)
        if not pkg_path:
            continue
        if any(is_under_package(f, pkg_path) for f in changed_files):
            changed.append(pkg)
    return tuple(changed)


def detect_impacted_domains(
    domains: Iterable[Domain],
    changed_files: Sequence[str],
    package_path: PackagePathLookup,
) -> list[ImpactedDomain]:
    """Return the impacted domains in discovery order.

    Args:
        domains: Domains with resolved packages
        changed_files: Paths relative to the repository root
        package_path: Maps a package name to its directory (None if unknown)

    Returns:
        One ImpactedDomain per domain with a changed package. Unaffected
        domains are omitted.
    """
    impacted: list[ImpactedDomain] = []
    for domain in domains:
        changed = changed_packages(domain, changed_files, package_path)
        if changed:
            impacted.append(
                ImpactedDomain(
                    name=domain.name,
                    config_file=domain.config_file,
                    changed_packages=changed,
                )
            )
    return impacted
