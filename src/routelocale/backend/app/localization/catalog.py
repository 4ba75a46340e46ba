"""Route translation catalogues backed by shared JSON resources.

Each catalogue is a JSON document named ``<catalog id>.json`` whose top-level
keys are translation domains mapping literal text to its translation::

    {"routes": {"pages": "pages_fr", "users": "utilisateurs"}}
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cache
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

_TRANSLATIONS_PACKAGE = "routelocale.translations"
_TRANSLATIONS_ENV = "ROUTELOCALE_TRANSLATIONS_DIR"


@dataclass(frozen=True)
class Catalogue:
    """Messages for one catalogue id, grouped by domain."""

    catalog_id: str
    domains: Mapping[str, Mapping[str, str]]


class MappingCatalog:
    """Translation catalogue over in-memory catalogues.

    Lookups for unknown catalogues, domains or messages return the text
    unchanged.
    """

    def __init__(self, catalogues: Mapping[str, Mapping[str, Mapping[str, str]]]) -> None:
        self._catalogues = {
            catalog_id: Catalogue(
                catalog_id=catalog_id,
                domains={domain: dict(messages) for domain, messages in domains.items()},
            )
            for catalog_id, domains in catalogues.items()
        }

    @property
    def catalog_ids(self) -> tuple[str, ...]:
        return tuple(sorted(self._catalogues))

    def has_message(self, catalog_id: str, domain: str, text: str) -> bool:
        catalogue = self._catalogues.get(catalog_id)
        if catalogue is None:
            return False
        return text in catalogue.domains.get(domain, {})

    def translate(self, catalog_id: str, domain: str, text: str) -> str:
        catalogue = self._catalogues.get(catalog_id)
        if catalogue is None:
            return text
        return catalogue.domains.get(domain, {}).get(text) or text


def _translations_root(directory: str | None) -> Traversable | None:
    if directory:
        return Path(directory).expanduser()
    try:
        return resources.files(_TRANSLATIONS_PACKAGE)
    except ModuleNotFoundError:  # pragma: no cover - packaged data missing
        return None


def _read_catalogue_payload(entry: Traversable) -> dict[str, dict[str, str]]:
    """Load the raw domain payload of a single catalogue file."""

    with entry.open("r", encoding="utf-8") as handle:
        payload: Any = json.load(handle)

    if not isinstance(payload, dict):
        raise ValueError(f"Catalogue {entry.name} must define a mapping of domains")

    domains: dict[str, dict[str, str]] = {}
    for domain, messages in payload.items():
        if not isinstance(messages, dict):
            raise ValueError(f"Catalogue {entry.name} domain {domain!r} must be a mapping")
        domains[str(domain)] = {str(key): str(value) for key, value in messages.items()}
    return domains


@cache
def _load_catalog(directory: str | None) -> MappingCatalog:
    root = _translations_root(directory)
    if root is None or not root.is_dir():
        return MappingCatalog({})

    catalogues = {
        entry.name.removesuffix(".json"): _read_catalogue_payload(entry)
        for entry in root.iterdir()
        if entry.name.endswith(".json") and entry.is_file()
    }
    return MappingCatalog(catalogues)


def load_catalog(directory: str | Path | None = None) -> MappingCatalog:
    """Return the cached catalogue set from ``directory`` or the packaged resources.

    ``ROUTELOCALE_TRANSLATIONS_DIR`` is used when no directory is given.
    """

    selected = directory if directory is not None else os.getenv(_TRANSLATIONS_ENV)
    return _load_catalog(str(selected) if selected else None)


def clear_catalog_cache() -> None:
    _load_catalog.cache_clear()


__all__ = ["Catalogue", "MappingCatalog", "clear_catalog_cache", "load_catalog"]
