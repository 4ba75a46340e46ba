"""Utilities for validating locale and route configuration and surfacing issues."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

from routelocale.backend.app.localization import MappingCatalog, load_catalog
from routelocale.backend.services.localizer import (
    LOCALIZABLE_VERBS,
    ROUTES_DOMAIN,
    RouteDeclaration,
    UnknownLocaleError,
)
from routelocale.backend.services.localizer.declarations import DYNAMIC_MARKER, PATH_SEPARATOR

from .route_config import (
    ConfigurationError,
    LocaleManifest,
    RouteTableConfig,
    group_declarations,
    load_locale_manifest,
    load_route_table,
)


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _literal_segments(routes: Iterable[RouteDeclaration]) -> list[str]:
    segments: list[str] = []
    for route in routes:
        for entry in route.walk():
            for segment in entry.path.split(PATH_SEPARATOR):
                if segment and not segment.startswith(DYNAMIC_MARKER) and segment not in segments:
                    segments.append(segment)
    return segments


def validate_locale_manifest(manifest: LocaleManifest, catalog: MappingCatalog) -> list[str]:
    """Return issues for locales whose catalogue cannot be found."""

    errors: list[str] = []
    available = set(catalog.catalog_ids)

    for entry in manifest.locales:
        if entry.catalog is None:
            continue
        if entry.catalog not in available:
            errors.append(
                _format_scope(
                    f"locales.{entry.name}",
                    f"catalog '{entry.catalog}' has no catalogue file",
                )
            )

    return errors


def _group_locale_names(manifest: LocaleManifest, locales: tuple[str, ...] | str | None) -> list[str]:
    if locales is None:
        return list(manifest.locale_names)
    if isinstance(locales, str):
        return [locales]
    return list(locales)


def validate_route_verbs(table: RouteTableConfig) -> list[str]:
    """Return issues for localized routes declared with an unsupported verb."""

    errors: list[str] = []
    for index, group in enumerate(table.groups):
        for route in group_declarations(group):
            for entry in route.walk():
                if entry.verb not in LOCALIZABLE_VERBS:
                    errors.append(
                        _format_scope(
                            f"groups[{index}]",
                            f"verb '{entry.verb}' for {entry.path!r} cannot be localized",
                        )
                    )
    return errors


def validate_route_translations(
    table: RouteTableConfig,
    manifest: LocaleManifest,
    catalog: MappingCatalog,
) -> list[str]:
    """Return literal path segments with no translation, per locale and group."""

    issues: list[str] = []

    for index, group in enumerate(table.groups):
        segments = _literal_segments(group_declarations(group))
        for name in _group_locale_names(manifest, group.locales):
            try:
                descriptor = manifest.validate_locale(name)
            except UnknownLocaleError as error:
                issues.append(_format_scope(f"groups[{index}]", str(error)))
                continue

            # the default locale usually serves the untranslated paths
            if descriptor.catalog is None or name == manifest.default_locale_name:
                continue

            missing = [
                segment
                for segment in segments
                if not catalog.has_message(descriptor.catalog, ROUTES_DOMAIN, segment)
            ]
            if missing:
                issues.append(
                    _format_scope(
                        f"groups[{index}]",
                        f"locale '{name}' missing {len(missing)} route translations: {', '.join(missing)}",
                    )
                )

    return issues


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate the locale manifest, route table and route translations."
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory holding locales.yaml and routes.yaml (defaults to the packaged data)",
    )
    parser.add_argument(
        "--translations-dir",
        type=Path,
        default=None,
        help="Directory holding <catalog>.json files (defaults to the packaged catalogues)",
    )
    parser.add_argument(
        "--fail-on-missing",
        action="store_true",
        help="Exit with an error if route translations are missing",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)

    try:
        manifest = load_locale_manifest(args.config_dir)
        table = load_route_table(args.config_dir)
    except (FileNotFoundError, ConfigurationError) as error:
        print(f"[config] failed to load configuration: {error}")
        return 1

    catalog = load_catalog(args.translations_dir)

    manifest_issues = validate_locale_manifest(manifest, catalog)
    verb_issues = validate_route_verbs(table)
    missing = validate_route_translations(table, manifest, catalog)

    for issue in manifest_issues:
        print(f"[manifest] {issue}")

    for issue in verb_issues:
        print(f"[verb] {issue}")

    for issue in missing:
        print(f"[missing] {issue}")

    if manifest_issues or verb_issues or (missing and args.fail_on_missing):
        return 1

    if not missing:
        print("OK")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
