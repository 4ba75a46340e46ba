"""Build-time localization of route declaration trees."""

from .declarations import (
    LOCALIZABLE_VERBS,
    RouteDeclaration,
    RouteOptions,
    SourcePosition,
    Target,
)
from .dedupe import canonical_route, dedupe
from .errors import (
    LocalizationError,
    MalformedOptionsError,
    UnknownLocaleError,
    UnsupportedVerbError,
)
from .expander import RouteTreeExpander, ensure_localizable
from .locales import LocaleDescriptor, LocaleRegistry, LocaleResolver
from .metadata import ASSIGNS_FIELD, LOCALE_KEY, PRIVATE_FIELD, inject_locale, put_locale
from .paths import ROUTES_DOMAIN, TranslationCatalog, translate_path, translate_segment

__all__ = [
    "ASSIGNS_FIELD",
    "LOCALE_KEY",
    "LOCALIZABLE_VERBS",
    "LocaleDescriptor",
    "LocaleRegistry",
    "LocaleResolver",
    "LocalizationError",
    "MalformedOptionsError",
    "PRIVATE_FIELD",
    "ROUTES_DOMAIN",
    "RouteDeclaration",
    "RouteOptions",
    "RouteTreeExpander",
    "SourcePosition",
    "Target",
    "TranslationCatalog",
    "UnknownLocaleError",
    "UnsupportedVerbError",
    "canonical_route",
    "dedupe",
    "ensure_localizable",
    "inject_locale",
    "put_locale",
    "translate_path",
    "translate_segment",
]
