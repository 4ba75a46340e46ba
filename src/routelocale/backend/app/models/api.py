"""Pydantic models describing the route introspection API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from routelocale.backend.services.localizer import (
    LOCALE_KEY,
    LocaleDescriptor,
    RouteDeclaration,
)

__all__ = [
    "RouteEntry",
    "RouteTableResponse",
    "route_locale",
]


def route_locale(route: RouteDeclaration) -> LocaleDescriptor | None:
    """Return the locale recorded on ``route`` by the localizer, if any."""

    for metadata in (route.assigns, route.private):
        locale = metadata.get(LOCALE_KEY) if isinstance(metadata, Mapping) else None
        if isinstance(locale, LocaleDescriptor):
            return locale
    return None


def _json_safe(value: Any) -> Any:
    if isinstance(value, LocaleDescriptor):
        return value.name
    if isinstance(value, Mapping):
        return {str(key): _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


class RouteEntry(BaseModel):
    """A declared route as exposed by the introspection endpoints."""

    model_config = ConfigDict(extra="forbid")

    verb: str
    path: str
    target: str
    action: str | None = None
    locale: str | None = None
    options: dict[str, Any] = Field(default_factory=dict)
    source: str | None = None
    children: list[RouteEntry] = Field(default_factory=list)

    @classmethod
    def from_declaration(cls, route: RouteDeclaration) -> RouteEntry:
        locale = route_locale(route)
        return cls(
            verb=route.verb,
            path=route.path,
            target=route.target.module,
            action=route.target.action,
            locale=locale.name if locale else None,
            options=_json_safe(route.options.as_dict()),
            source=str(route.source) if route.source else None,
            children=[cls.from_declaration(child) for child in route.children],
        )


class RouteTableResponse(BaseModel):
    """Payload for ``GET /api/v1/routes``."""

    model_config = ConfigDict(extra="forbid")

    locale: str | None = None
    default_locale: str
    locales: list[str]
    routes: list[RouteEntry]
