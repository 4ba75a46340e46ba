"""Configuration loader wrapping the locale manifest and route table models."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from routelocale.backend.services.localizer import RouteDeclaration

from .schema import (
    ConfigurationError,
    LocaleEntry,
    LocaleManifest,
    RouteGroupSpec,
    RouteSpec,
    RouteTableConfig,
)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
LOCALES_FILE = "locales.yaml"
ROUTES_FILE = "routes.yaml"
CONFIG_DIRECTORY_ENV = "ROUTELOCALE_CONFIG_DIR"


class _RouteLoader(yaml.SafeLoader):
    """Safe loader that records the source line of every route entry."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        mapping = super().construct_mapping(node, deep=deep)
        if any(getattr(key, "value", None) == "verb" for key, _ in node.value):
            mapping.setdefault("line", node.start_mark.line + 1)
        return mapping


def resolve_config_directory(directory: str | Path | None = None) -> Path:
    """Return ``directory``, the ``ROUTELOCALE_CONFIG_DIR`` override or the packaged data."""

    if directory is not None:
        return Path(directory).expanduser()
    override = os.getenv(CONFIG_DIRECTORY_ENV)
    if override:
        return Path(override).expanduser()
    return CONFIG_DIRECTORY


def _load_yaml(path: Path, loader: type[yaml.SafeLoader] = yaml.SafeLoader) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.load(handle, Loader=loader) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


@lru_cache(maxsize=8)
def load_locale_manifest(directory: Path | None = None) -> LocaleManifest:
    """Load and cache the locale manifest."""

    manifest_file = resolve_config_directory(directory) / LOCALES_FILE
    if not manifest_file.exists():
        raise FileNotFoundError(f"Locale manifest not found: {manifest_file}")

    raw_manifest = _load_yaml(manifest_file)

    try:
        return LocaleManifest.model_validate(raw_manifest)
    except ValidationError as error:
        raise ConfigurationError(f"Locale manifest validation failed: {error}") from error


@lru_cache(maxsize=8)
def load_route_table(directory: Path | None = None) -> RouteTableConfig:
    """Load and cache the declared route table."""

    routes_file = resolve_config_directory(directory) / ROUTES_FILE
    if not routes_file.exists():
        raise FileNotFoundError(f"Route table not found: {routes_file}")

    raw_table = _load_yaml(routes_file, loader=_RouteLoader)

    try:
        return RouteTableConfig.model_validate(raw_table)
    except ValidationError as error:
        raise ConfigurationError(f"Route table validation failed: {error}") from error


def group_declarations(group: RouteGroupSpec, source_file: str = ROUTES_FILE) -> list[RouteDeclaration]:
    """Convert the routes of ``group`` into route declarations."""

    return [spec.to_declaration(source_file) for spec in group.routes]


def unlocalized_declarations(
    table: RouteTableConfig, source_file: str = ROUTES_FILE
) -> list[RouteDeclaration]:
    return [spec.to_declaration(source_file) for spec in table.unlocalized]


def clear_config_cache() -> None:
    load_locale_manifest.cache_clear()
    load_route_table.cache_clear()


__all__ = [
    "CONFIG_DIRECTORY",
    "CONFIG_DIRECTORY_ENV",
    "ConfigurationError",
    "LocaleEntry",
    "LocaleManifest",
    "RouteGroupSpec",
    "RouteSpec",
    "RouteTableConfig",
    "clear_config_cache",
    "group_declarations",
    "load_locale_manifest",
    "load_route_table",
    "resolve_config_directory",
    "unlocalized_declarations",
]
