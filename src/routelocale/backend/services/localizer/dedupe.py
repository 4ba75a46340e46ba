"""Collapse localized routes that resolve to the same canonical route.

A locale without a translation for any segment of a path regenerates the
original path. Those copies are dropped so only the first locale's route is
kept. A ``resources`` parent only collapses when its whole nested tree is
identical as well, so a locale translating just the nested segments keeps
its own subtree.
"""

from __future__ import annotations

from collections.abc import Iterable

from .declarations import RouteDeclaration

CanonicalKey = tuple[str, str, str, "str | None", tuple["CanonicalKey", ...]]


def canonical_route(route: RouteDeclaration) -> CanonicalKey:
    """Return the identity of ``route`` and its nested routes, ignoring options and source."""

    return (
        route.verb,
        route.path,
        route.target.module,
        route.target.action,
        tuple(canonical_route(child) for child in route.children),
    )


def dedupe(routes: Iterable[RouteDeclaration]) -> list[RouteDeclaration]:
    """Drop routes whose canonical key was already seen, keeping order."""

    seen: set[CanonicalKey] = set()
    unique: list[RouteDeclaration] = []
    for route in routes:
        key = canonical_route(route)
        if key in seen:
            continue
        seen.add(key)
        unique.append(route)
    return unique


__all__ = ["CanonicalKey", "canonical_route", "dedupe"]
