"""Attach locale metadata to a route's option list.

Template verbs carry the locale in ``assigns`` while ``live`` routes carry it
in ``private``. The two fields are read at different points downstream, so
a route only ever gets one of them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from .declarations import RouteOptions
from .errors import MalformedOptionsError
from .locales import LocaleDescriptor

ASSIGNS_FIELD: Final = "assigns"
PRIVATE_FIELD: Final = "private"
LOCALE_KEY: Final = "locale"


def put_locale(existing: Any, locale: LocaleDescriptor) -> dict[str, Any]:
    """Merge ``locale`` into an existing metadata record, or start a new one."""

    if existing is None:
        return {LOCALE_KEY: locale}
    if not isinstance(existing, Mapping):
        raise MalformedOptionsError(
            f"Route metadata must be a mapping to carry a locale, got {existing!r}"
        )
    return {**existing, LOCALE_KEY: locale}


def inject_locale(field: str, options: RouteOptions, locale: LocaleDescriptor) -> RouteOptions:
    """Return ``options`` with ``locale`` recorded under ``field``.

    An existing ``field`` value is merged and moved to the front of the option
    list; the remaining options keep their relative order. Declarations with no
    option list get a fresh one holding only ``field``. The nested block is
    carried over untouched.
    """

    if options.extra_options is None:
        carrier: tuple[tuple[str, Any], ...] = ((field, put_locale(None, locale)),)
    else:
        existing = None
        rest: list[tuple[str, Any]] = []
        for entry in options.extra_options:
            if not isinstance(entry, tuple) or len(entry) != 2 or not isinstance(entry[0], str):
                raise MalformedOptionsError(f"Route options must be key/value pairs, got {entry!r}")
            key, value = entry
            if key == field:
                existing = value
            else:
                rest.append(entry)
        carrier = ((field, put_locale(existing, locale)), *rest)

    return RouteOptions(
        extra_options=carrier,
        nested_block=options.nested_block,
        already_localized=options.already_localized,
    )


def field_for_verb(verb: str) -> str:
    return PRIVATE_FIELD if verb == "live" else ASSIGNS_FIELD


__all__ = [
    "ASSIGNS_FIELD",
    "LOCALE_KEY",
    "PRIVATE_FIELD",
    "field_for_verb",
    "inject_locale",
    "put_locale",
]
