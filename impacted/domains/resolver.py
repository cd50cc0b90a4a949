"""Resolve the packages a release domain owns."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from impacted.release_config import ReleaseConfig

__all__ = ["resolve_domain_packages"]


def resolve_domain_packages(config: ReleaseConfig, universe: Sequence[str]) -> tuple[str, ...]:
    """Return the ordered package names selected by ``config``.

    A non-empty ``include_only_artifacts`` wins over ``exclude_artifacts``:
    the include list is kept in its own order, minus names the manifest does
    not declare. Otherwise the whole universe is kept, in manifest order, minus
    excluded names. An empty include list is treated as absent; a non-empty
    one whose items were all dropped at parse time resolves to no packages.
    """
    known = set(universe)

    if config.uses_inclusion:
        return _unique(name for name in config.include_only_artifacts if name in known)

    excluded = set(config.exclude_artifacts)
    return _unique(name for name in universe if name not in excluded)


def _unique(names: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(names))
