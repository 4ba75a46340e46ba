"""Exceptions raised while localizing route declarations."""

from __future__ import annotations


class LocalizationError(ValueError):
    """Base class for fatal route localization failures."""


class UnsupportedVerbError(LocalizationError):
    """Raised when a declaration uses a verb that cannot be localized."""

    def __init__(self, verb: str, path: str, arguments: str, supported: tuple[str, ...]):
        self.verb = verb
        self.path = path
        self.supported = supported
        super().__init__(
            f"Invalid route for localization: {verb} {path!r}, {arguments}. "
            f"Allowed localizable routes are {list(supported)}"
        )


class MalformedOptionsError(LocalizationError):
    """Raised when a route option list cannot carry locale metadata."""


class UnknownLocaleError(LocalizationError):
    """Raised when a locale name is not declared by the locale registry."""

    def __init__(self, name: str, known: tuple[str, ...]):
        self.name = name
        self.known = known
        super().__init__(f"Unknown locale {name!r}. Known locales are {list(known)}")


__all__ = [
    "LocalizationError",
    "MalformedOptionsError",
    "UnknownLocaleError",
    "UnsupportedVerbError",
]
