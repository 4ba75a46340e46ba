"""Path segment translation through a route translation catalogue."""

from __future__ import annotations

from typing import Final, Protocol

from .declarations import DYNAMIC_MARKER, PATH_SEPARATOR

ROUTES_DOMAIN: Final = "routes"


class TranslationCatalog(Protocol):
    """Read-only translation lookup.

    Implementations return ``text`` unchanged when no message exists for it.
    """

    def translate(self, catalog_id: str, domain: str, text: str) -> str: ...


def translate_segment(catalog: TranslationCatalog, catalog_id: str, segment: str) -> str:
    """Translate one path segment, leaving empty and dynamic segments alone."""

    if not segment or segment.startswith(DYNAMIC_MARKER):
        return segment
    return catalog.translate(catalog_id, ROUTES_DOMAIN, segment)


def translate_path(catalog: TranslationCatalog, catalog_id: str, path: str) -> str:
    """Translate every literal segment of ``path`` using ``catalog_id``.

    Segment count is preserved, including the empty segments produced by
    leading, trailing or doubled separators.
    """

    return PATH_SEPARATOR.join(
        translate_segment(catalog, catalog_id, segment)
        for segment in path.split(PATH_SEPARATOR)
    )


__all__ = ["ROUTES_DOMAIN", "TranslationCatalog", "translate_path", "translate_segment"]
