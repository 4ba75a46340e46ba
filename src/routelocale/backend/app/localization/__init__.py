"""Translation catalogues consumed by the route localizer."""

from .catalog import Catalogue, MappingCatalog, clear_catalog_cache, load_catalog

__all__ = ["Catalogue", "MappingCatalog", "clear_catalog_cache", "load_catalog"]
