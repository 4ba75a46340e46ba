"""Route registrations for the localized route table."""

from collections.abc import Mapping

from flask import Flask

from routelocale.backend.app.services.route_table import LocalizedRouteTable

from .introspection import EXTENSION_KEY
from .introspection import blueprint as introspection_blueprint
from .registry import RegisteredRoute, RouteHandler, register_localized_routes


def register_routes(
    app: Flask,
    table: LocalizedRouteTable,
    handlers: Mapping[str, RouteHandler] | None = None,
) -> list[RegisteredRoute]:
    """Register the introspection blueprint and every localized route."""

    app.extensions[EXTENSION_KEY] = table
    app.register_blueprint(introspection_blueprint)
    return register_localized_routes(app, table.routes, handlers)
