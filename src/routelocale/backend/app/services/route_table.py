"""Localize the configured route table.

The locale manifest acts as the locale registry and the JSON catalogues as
the translation catalogue. Each configured group is localized for its own
locale selection; unlocalized routes are appended untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from routelocale.backend.app.localization import MappingCatalog, load_catalog
from routelocale.backend.config.route_config import (
    LocaleManifest,
    RouteTableConfig,
    group_declarations,
    load_locale_manifest,
    load_route_table,
    unlocalized_declarations,
)

from routelocale.backend.services.localizer import RouteDeclaration, RouteTreeExpander

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalizedRouteTable:
    """Localized routes ready to be handed to the host router."""

    manifest: LocaleManifest
    routes: Sequence[RouteDeclaration]


def localize_route_table(
    manifest: LocaleManifest,
    table: RouteTableConfig,
    catalog: MappingCatalog,
) -> LocalizedRouteTable:
    expander = RouteTreeExpander(manifest, catalog)

    routes: list[RouteDeclaration] = []
    for group in table.groups:
        routes.extend(expander.localize(group_declarations(group), group.locales))
    routes.extend(unlocalized_declarations(table))

    _LOGGER.info(
        "Localized %d route groups into %d routes for locales %s",
        len(table.groups),
        len(routes),
        ", ".join(manifest.locale_names),
    )
    return LocalizedRouteTable(manifest=manifest, routes=tuple(routes))


def build_route_table(
    config_dir: Path | None = None,
    translations_dir: Path | None = None,
) -> LocalizedRouteTable:
    """Load configuration and catalogues, then localize the route table."""

    manifest = load_locale_manifest(config_dir)
    table = load_route_table(config_dir)
    catalog = load_catalog(translations_dir)
    return localize_route_table(manifest, table, catalog)


__all__ = ["LocalizedRouteTable", "build_route_table", "localize_route_table"]
