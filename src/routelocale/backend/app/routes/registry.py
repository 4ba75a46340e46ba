"""Register localized route declarations with a Flask application.

Path templates use ``:name`` dynamic segments which become ``<name>`` URL
rule variables. ``resources`` declarations expand into the conventional REST
action set and prefix their nested declarations with the parent member
parameter, e.g. ``/users/:user_id/faces``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Final

from flask import Flask, g, jsonify
from flask.typing import ResponseReturnValue

from routelocale.backend.app.models import route_locale
from routelocale.backend.services.localizer import RouteDeclaration
from routelocale.backend.services.localizer.declarations import DYNAMIC_MARKER, PATH_SEPARATOR

RouteHandler = Callable[..., ResponseReturnValue]

VERB_METHODS: Final[Mapping[str, tuple[str, ...]]] = {
    "get": ("GET",),
    "put": ("PUT",),
    "patch": ("PATCH",),
    "post": ("POST",),
    "delete": ("DELETE",),
    "options": ("OPTIONS",),
    "head": ("HEAD",),
    "connect": ("CONNECT",),
    "live": ("GET",),
}


@dataclass(frozen=True)
class ResourceAction:
    name: str
    methods: tuple[str, ...]
    suffix: str


RESOURCE_ACTIONS: Final = (
    ResourceAction("index", ("GET",), ""),
    ResourceAction("edit", ("GET",), "/:{param}/edit"),
    ResourceAction("new", ("GET",), "/new"),
    ResourceAction("show", ("GET",), "/:{param}"),
    ResourceAction("create", ("POST",), ""),
    ResourceAction("update", ("PATCH", "PUT"), "/:{param}"),
    ResourceAction("delete", ("DELETE",), "/:{param}"),
)


@dataclass(frozen=True)
class ExpandedRoute:
    """One concrete path/method combination derived from a declaration."""

    path: str
    methods: tuple[str, ...]
    action: str | None
    declaration: RouteDeclaration


@dataclass(frozen=True)
class RegisteredRoute:
    rule: str
    methods: tuple[str, ...]
    endpoint: str
    target: str
    action: str | None
    locale: str | None


def to_flask_rule(path: str) -> str:
    """Convert a ``/pages/:id`` template into the ``/pages/<id>`` rule syntax."""

    segments = [
        f"<{segment[len(DYNAMIC_MARKER):]}>" if segment.startswith(DYNAMIC_MARKER) else segment
        for segment in path.split(PATH_SEPARATOR)
    ]
    rule = PATH_SEPARATOR.join(segments)
    return rule if rule.startswith(PATH_SEPARATOR) else PATH_SEPARATOR + rule


def resource_name(module: str) -> str:
    """Derive ``user`` from ``UserController`` or ``app.web.UserController``."""

    base = module.rsplit(".", 1)[-1]
    base = base.removesuffix("Controller") or base
    return re.sub(r"(?<!^)(?=[A-Z])", "_", base).lower()


def _selected_actions(route: RouteDeclaration) -> list[ResourceAction]:
    only = route.options.get("only")
    excluded = set(route.options.get("except") or ())
    return [
        action
        for action in RESOURCE_ACTIONS
        if (only is None or action.name in only) and action.name not in excluded
    ]


def expand_route(route: RouteDeclaration, prefix: str = "") -> Iterator[ExpandedRoute]:
    """Yield every concrete path and method set that ``route`` declares."""

    base = f"{prefix}{route.path}"
    if route.verb != "resources":
        yield ExpandedRoute(base, VERB_METHODS[route.verb], route.target.action, route)
        return

    param = route.options.get("param", "id")
    for action in _selected_actions(route):
        yield ExpandedRoute(base + action.suffix.format(param=param), action.methods, action.name, route)

    nested_prefix = f"{base}/{DYNAMIC_MARKER}{resource_name(route.target.module)}_{param}"
    for child in route.children:
        yield from expand_route(child, nested_prefix)


def _endpoint_name(app: Flask, expanded: ExpandedRoute) -> str:
    locale = route_locale(expanded.declaration)
    base = "_".join(
        (
            resource_name(expanded.declaration.target.module),
            expanded.action or expanded.declaration.verb,
            "_".join(method.lower() for method in expanded.methods),
            locale.name if locale else "default",
        )
    )
    endpoint = base
    counter = 1
    while endpoint in app.view_functions:
        counter += 1
        endpoint = f"{base}_{counter}"
    return endpoint


def _build_view(expanded: ExpandedRoute, handler: RouteHandler | None) -> RouteHandler:
    declaration = expanded.declaration
    assigns = dict(declaration.assigns)
    private = dict(declaration.private)

    def view(**params: Any) -> ResponseReturnValue:
        g.route_assigns = assigns
        g.route_private = private
        if handler is not None:
            return handler(expanded.action, **params)

        locale = route_locale(declaration)
        return jsonify(
            {
                "target": declaration.target.module,
                "action": expanded.action,
                "verb": declaration.verb,
                "locale": locale.name if locale else None,
                "params": params,
            }
        )

    return view


def register_localized_routes(
    app: Flask,
    routes: Iterable[RouteDeclaration],
    handlers: Mapping[str, RouteHandler] | None = None,
) -> list[RegisteredRoute]:
    """Add URL rules for ``routes`` to ``app``.

    ``handlers`` maps a target module name to a callable receiving the action
    name and the path parameters. Targets without a handler answer with a JSON
    description of the matched route.
    """

    registered: list[RegisteredRoute] = []
    expanded_routes = [
        (to_flask_rule(expanded.path), expanded)
        for route in routes
        for expanded in expand_route(route)
    ]
    explicit_options = {rule for rule, expanded in expanded_routes if "OPTIONS" in expanded.methods}
    # werkzeug answers HEAD from GET rules and matches same-path rules in insertion order
    expanded_routes.sort(key=lambda item: "HEAD" not in item[1].methods)

    for rule, expanded in expanded_routes:
        endpoint = _endpoint_name(app, expanded)
        handler = (handlers or {}).get(expanded.declaration.target.module)
        app.add_url_rule(
            rule,
            endpoint=endpoint,
            view_func=_build_view(expanded, handler),
            methods=list(expanded.methods),
            provide_automatic_options=False if rule in explicit_options else None,
        )

        locale = route_locale(expanded.declaration)
        registered.append(
            RegisteredRoute(
                rule=rule,
                methods=expanded.methods,
                endpoint=endpoint,
                target=expanded.declaration.target.module,
                action=expanded.action,
                locale=locale.name if locale else None,
            )
        )
    return registered


__all__ = [
    "RESOURCE_ACTIONS",
    "RegisteredRoute",
    "ResourceAction",
    "RouteHandler",
    "VERB_METHODS",
    "expand_route",
    "register_localized_routes",
    "resource_name",
    "to_flask_rule",
]
