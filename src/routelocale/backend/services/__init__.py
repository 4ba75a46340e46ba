"""Service-layer helpers for the routelocale backend."""

from .localizer import RouteTreeExpander, dedupe, translate_path

__all__ = [
    "RouteTreeExpander",
    "dedupe",
    "translate_path",
]
