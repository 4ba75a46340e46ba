"""Expand route declarations into one localized route per locale.

The expander walks a declaration tree structurally:

* a block of declarations is expanded element by element with the same
  locale selection;
* a single declaration with several locales is localized once per locale
  that has a catalogue, then deduplicated;
* a ``resources`` declaration with a nested block localizes its children for
  the same single locale before the parent itself is localized;
* a leaf declaration gets its path translated and its locale recorded in
  ``assigns`` (or ``private`` for ``live`` routes).

Locales without a catalogue are skipped with a warning. Unsupported verbs
abort the whole expansion.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from .declarations import LOCALIZABLE_VERBS, RouteDeclaration
from .dedupe import dedupe
from .errors import UnsupportedVerbError
from .locales import LocaleDescriptor, LocaleRegistry, LocaleResolver
from .metadata import field_for_verb, inject_locale
from .paths import TranslationCatalog, translate_path

_LOGGER = logging.getLogger(__name__)

LocaleRef = str | LocaleDescriptor
RouteInput = RouteDeclaration | Iterable[RouteDeclaration]


def ensure_localizable(route: RouteDeclaration) -> None:
    """Raise ``UnsupportedVerbError`` if any route in the tree can't be localized."""

    for entry in route.walk():
        if entry.verb not in LOCALIZABLE_VERBS:
            arguments = ", ".join(repr(argument) for argument in entry.arguments())
            raise UnsupportedVerbError(entry.verb, entry.path, arguments, LOCALIZABLE_VERBS)


class RouteTreeExpander:
    """Localize route declarations against a locale registry and catalogue."""

    def __init__(self, registry: LocaleRegistry, catalog: TranslationCatalog) -> None:
        self._resolver = LocaleResolver(registry)
        self._catalog = catalog

    def localize(
        self,
        routes: RouteInput,
        locales: LocaleRef | Sequence[LocaleRef] | None = None,
    ) -> list[RouteDeclaration]:
        """Localize ``routes`` for ``locales``.

        When ``locales`` is omitted every known locale is used, default locale
        first. The result holds each declaration's localized variants in
        locale order, declarations in source order.
        """

        names = self._select_locales(locales)
        if isinstance(routes, RouteDeclaration):
            return self._localize_across(routes, names)

        localized: list[RouteDeclaration] = []
        for route in routes:
            localized.extend(self._localize_across(route, names))
        return localized

    def localize_for_locale(self, routes: RouteInput, locale: LocaleRef) -> list[RouteDeclaration]:
        """Localize ``routes`` for exactly one locale.

        A locale without a catalogue leaves the routes untranslated and logs a
        warning for each of them.
        """

        descriptor = locale if isinstance(locale, LocaleDescriptor) else self._resolver.descriptor(locale)
        if not isinstance(routes, RouteDeclaration):
            localized: list[RouteDeclaration] = []
            for route in routes:
                localized.extend(self.localize_for_locale(route, descriptor))
            return localized

        route = routes
        ensure_localizable(route)

        if descriptor.catalog is None:
            return [self._localize_leaf(route, descriptor)]

        if route.verb == "resources" and route.options.nested_block and not route.options.already_localized:
            children = self.localize_for_locale(route.options.nested_block, descriptor)
            route = route.with_options(
                replace(route.options, nested_block=tuple(children), already_localized=True)
            )

        return [self._localize_leaf(route, descriptor)]

    def _select_locales(self, locales: LocaleRef | Sequence[LocaleRef] | None) -> list[LocaleRef]:
        if locales is None:
            return list(self._resolver.default_locale_names())
        if isinstance(locales, (str, LocaleDescriptor)):
            return [locales]
        return list(locales)

    def _localize_across(self, route: RouteDeclaration, locales: Sequence[LocaleRef]) -> list[RouteDeclaration]:
        ensure_localizable(route)

        localized: list[RouteDeclaration] = []
        for locale in locales:
            descriptor = self._resolver.descriptor(locale)
            if descriptor.catalog is None:
                _LOGGER.warning(
                    "No known catalog for locale %r. No %r localized routes will be generated for %s %r",
                    descriptor.name,
                    descriptor.name,
                    route.verb,
                    route.path,
                )
                continue
            localized.extend(self.localize_for_locale(route, descriptor))

        return dedupe(localized)

    def _localize_leaf(self, route: RouteDeclaration, locale: LocaleDescriptor) -> RouteDeclaration:
        if locale.catalog is None:
            _LOGGER.warning(
                "Locale %r does not have a known catalog. No %r localized routes will be generated for %s %r",
                locale.name,
                locale.name,
                route.verb,
                route.path,
            )
            return route

        translated = translate_path(self._catalog, locale.catalog, route.path)
        options = inject_locale(field_for_verb(route.verb), route.options, locale)
        return replace(route, path=translated, options=options)


__all__ = ["RouteTreeExpander", "ensure_localizable"]
