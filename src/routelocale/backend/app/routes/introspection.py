"""Expose the localized route table to API consumers."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, jsonify

from routelocale.backend.app.http import problem_response
from routelocale.backend.app.models import RouteEntry, RouteTableResponse, route_locale
from routelocale.backend.app.services.route_table import LocalizedRouteTable

EXTENSION_KEY = "routelocale"

blueprint = Blueprint("routes", __name__, url_prefix="/api/v1/routes")


def current_route_table() -> LocalizedRouteTable:
    return current_app.extensions[EXTENSION_KEY]


def _table_payload(table: LocalizedRouteTable, locale: str | None = None) -> dict[str, Any]:
    routes = table.routes
    if locale is not None:
        routes = [
            route
            for route in routes
            if (descriptor := route_locale(route)) is not None and descriptor.name == locale
        ]

    response = RouteTableResponse(
        locale=locale,
        default_locale=table.manifest.default_locale_name,
        locales=list(table.manifest.locale_names),
        routes=[RouteEntry.from_declaration(route) for route in routes],
    )
    return response.model_dump(mode="json")


@blueprint.get("")
def list_routes() -> tuple[Any, int]:
    """Return every localized route, in registration order."""

    return jsonify(_table_payload(current_route_table())), 200


@blueprint.get("/<locale>")
def list_locale_routes(locale: str) -> tuple[Any, int]:
    """Return the routes localized for ``locale``."""

    table = current_route_table()
    if locale not in table.manifest.locale_names:
        return problem_response(
            "not_found",
            status=404,
            message=f"Unknown locale {locale!r}",
            locales=list(table.manifest.locale_names),
        ).to_response()

    return jsonify(_table_payload(table, locale)), 200


__all__ = ["EXTENSION_KEY", "blueprint", "current_route_table"]
