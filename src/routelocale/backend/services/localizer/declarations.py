"""In-memory representation of route declarations consumed by the localizer.

A declaration mirrors what a routing DSL call looks like: a verb, a path
template, the handler target and an ordered option list. ``resources`` routes
may carry a nested block of child declarations which is modelled as a
dedicated field so it always stays positionally last.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Final

LOCALIZABLE_VERBS: Final = (
    "resources",
    "get",
    "put",
    "patch",
    "post",
    "delete",
    "options",
    "head",
    "connect",
    "live",
)

TEMPLATE_VERBS: Final = tuple(verb for verb in LOCALIZABLE_VERBS if verb != "live")

PATH_SEPARATOR: Final = "/"
DYNAMIC_MARKER: Final = ":"


@dataclass(frozen=True)
class SourcePosition:
    """Where a declaration was written, used in diagnostics only."""

    file: str
    line: int | None = None

    def __str__(self) -> str:
        return f"{self.file}:{self.line}" if self.line is not None else self.file


@dataclass(frozen=True)
class Target:
    """Handler reference: a module plus an optional action name."""

    module: str
    action: str | None = None

    def __str__(self) -> str:
        return f"{self.module} :{self.action}" if self.action else self.module


@dataclass(frozen=True)
class RouteOptions:
    """Options attached to a declaration.

    ``extra_options`` is ``None`` when the declaration was written without a
    keyword option list at all, which differs from an empty list.
    """

    extra_options: tuple[tuple[str, Any], ...] | None = None
    nested_block: tuple[RouteDeclaration, ...] | None = None
    already_localized: bool = False

    @classmethod
    def from_mapping(
        cls,
        options: Mapping[str, Any] | None = None,
        nested_block: Iterable[RouteDeclaration] | None = None,
    ) -> RouteOptions:
        extra = tuple(options.items()) if options is not None else None
        nested = tuple(nested_block) if nested_block is not None else None
        return cls(extra_options=extra, nested_block=nested)

    def get(self, key: str, default: Any = None) -> Any:
        for name, value in self.extra_options or ():
            if name == key:
                return value
        return default

    def as_dict(self) -> dict[str, Any]:
        return dict(self.extra_options or ())


@dataclass(frozen=True)
class RouteDeclaration:
    """A single routing DSL call such as ``get "/pages/:id", PageController, :show``."""

    verb: str
    path: str
    target: Target
    options: RouteOptions = field(default_factory=RouteOptions)
    source: SourcePosition | None = None

    @property
    def children(self) -> tuple[RouteDeclaration, ...]:
        return self.options.nested_block or ()

    @property
    def assigns(self) -> Mapping[str, Any]:
        return self.options.get("assigns") or {}

    @property
    def private(self) -> Mapping[str, Any]:
        return self.options.get("private") or {}

    def with_options(self, options: RouteOptions) -> RouteDeclaration:
        return replace(self, options=options)

    def arguments(self) -> list[Any]:
        """Return the positional call arguments after the path.

        The nested block, when present, is always the final argument.
        """

        args: list[Any] = [self.target.module]
        if self.target.action is not None:
            args.append(self.target.action)
        if self.options.extra_options is not None:
            args.append(self.options.as_dict())
        if self.options.nested_block is not None:
            args.append(list(self.options.nested_block))
        return args

    def walk(self) -> Iterator[RouteDeclaration]:
        """Yield this declaration followed by every nested declaration."""

        yield self
        for child in self.children:
            yield from child.walk()


__all__ = [
    "DYNAMIC_MARKER",
    "LOCALIZABLE_VERBS",
    "PATH_SEPARATOR",
    "RouteDeclaration",
    "RouteOptions",
    "SourcePosition",
    "TEMPLATE_VERBS",
    "Target",
]
