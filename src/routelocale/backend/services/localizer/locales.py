"""Locale descriptors and catalogue resolution."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .errors import UnknownLocaleError


@dataclass(frozen=True)
class LocaleDescriptor:
    """A locale name plus the catalogue that translates it, if any."""

    name: str
    catalog: str | None = None

    def __str__(self) -> str:
        return self.name


class LocaleRegistry(Protocol):
    """Collaborator describing the locales an application knows about."""

    def known_locales(self) -> Sequence[LocaleDescriptor]: ...

    def default_locale(self) -> LocaleDescriptor: ...


class LocaleResolver:
    """Map locale names to catalogue identifiers using a ``LocaleRegistry``."""

    def __init__(self, registry: LocaleRegistry) -> None:
        self._registry = registry

    def descriptor(self, locale: str | LocaleDescriptor) -> LocaleDescriptor:
        """Return the registered descriptor for ``locale``.

        Raises ``UnknownLocaleError`` when the registry does not declare it.
        """

        name = locale.name if isinstance(locale, LocaleDescriptor) else str(locale)
        known = self._registry.known_locales()
        for candidate in known:
            if candidate.name == name:
                return candidate
        raise UnknownLocaleError(name, tuple(entry.name for entry in known))

    def resolve(self, locale: str | LocaleDescriptor) -> str | None:
        """Return the catalogue id for ``locale`` or ``None`` when it has none."""

        return self.descriptor(locale).catalog

    def default_locale_names(self) -> list[str]:
        """Return every known locale name with the default locale first."""

        default = self._registry.default_locale().name
        names = [entry.name for entry in self._registry.known_locales() if entry.name != default]
        return [default, *names]


__all__ = ["LocaleDescriptor", "LocaleRegistry", "LocaleResolver"]
