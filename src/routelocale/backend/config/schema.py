"""Pydantic models describing the locale manifest and route table schema."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    computed_field,
    field_validator,
    model_validator,
)

from routelocale.backend.services.localizer import (
    LocaleDescriptor,
    RouteDeclaration,
    RouteOptions,
    SourcePosition,
    Target,
    UnknownLocaleError,
)


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class LocaleEntry(ImmutableModel):
    """A locale declared in the manifest, optionally bound to a catalogue."""

    name: str
    catalog: str | None = None

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ConfigurationError("Locale names must be non-empty strings")
        return stripped

    def to_descriptor(self) -> LocaleDescriptor:
        return LocaleDescriptor(name=self.name, catalog=self.catalog)


class LocaleManifest(ImmutableModel):
    """Known locales and the default locale.

    Implements the locale registry consumed by the route localizer.
    """

    default_locale_name: str = Field(alias="default_locale")
    locales: Sequence[LocaleEntry]

    @model_validator(mode="after")
    def _validate_locales(self) -> LocaleManifest:
        seen: set[str] = set()
        for entry in self.locales:
            if entry.name in seen:
                raise ConfigurationError(
                    f"Duplicate locale {entry.name!r} declared in the locale manifest"
                )
            seen.add(entry.name)

        if self.default_locale_name not in seen:
            raise ConfigurationError(
                f"Default locale {self.default_locale_name!r} is not declared in the locale manifest"
            )
        return self

    @computed_field
    @property
    def locale_names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.locales)

    def known_locales(self) -> tuple[LocaleDescriptor, ...]:
        return tuple(entry.to_descriptor() for entry in self.locales)

    def default_locale(self) -> LocaleDescriptor:
        return self.validate_locale(self.default_locale_name)

    def validate_locale(self, name: str) -> LocaleDescriptor:
        for entry in self.locales:
            if entry.name == name:
                return entry.to_descriptor()
        raise UnknownLocaleError(name, self.locale_names)


class RouteSpec(ImmutableModel):
    """A route entry in ``routes.yaml``."""

    verb: str
    path: str
    target: str
    action: str | None = None
    options: dict[str, Any] | None = None
    routes: tuple[RouteSpec, ...] | None = None
    line: int | None = None

    @field_validator("verb")
    @classmethod
    def _normalise_verb(cls, value: str) -> str:
        return value.strip().lower()

    def to_declaration(self, source_file: str | None = None) -> RouteDeclaration:
        nested = None
        if self.routes is not None:
            nested = [child.to_declaration(source_file) for child in self.routes]

        source = None
        if source_file is not None:
            source = SourcePosition(file=source_file, line=self.line)

        return RouteDeclaration(
            verb=self.verb,
            path=self.path,
            target=Target(module=self.target, action=self.action),
            options=RouteOptions.from_mapping(self.options, nested),
            source=source,
        )


class RouteGroupSpec(ImmutableModel):
    """Routes localized together for the same locale selection."""

    locales: tuple[str, ...] | str | None = None
    routes: tuple[RouteSpec, ...]

    @model_validator(mode="after")
    def _validate_routes(self) -> RouteGroupSpec:
        if not self.routes:
            raise ConfigurationError("Route groups must declare at least one route")
        return self


class RouteTableConfig(ImmutableModel):
    """All route groups plus routes registered without localization."""

    groups: tuple[RouteGroupSpec, ...] = ()
    unlocalized: tuple[RouteSpec, ...] = ()


__all__ = [
    "ConfigurationError",
    "ImmutableModel",
    "LocaleEntry",
    "LocaleManifest",
    "RouteGroupSpec",
    "RouteSpec",
    "RouteTableConfig",
    "ValidationError",
]
