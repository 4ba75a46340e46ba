"""Response models shared by the route introspection blueprint."""

from .api import RouteEntry, RouteTableResponse, route_locale

__all__ = ["RouteEntry", "RouteTableResponse", "route_locale"]
