"""Value types describing link targets and the options accepted by ``add``."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

#: Option keys that describe routing rather than HTML attributes.
RESERVED_OPTIONS = frozenset({"url", "route", "action", "secure", "parent"})


@dataclass(frozen=True, slots=True)
class UrlTarget:
    """A literal URL, absolute or relative to the application root."""

    url: str
    secure: bool = False


@dataclass(frozen=True, slots=True)
class RouteTarget:
    """A named route plus positional parameters."""

    name: str
    params: Tuple[Any, ...] = ()


@dataclass(frozen=True, slots=True)
class ActionTarget:
    """A controller action identifier plus positional parameters."""

    name: str
    params: Tuple[Any, ...] = ()


LinkTarget = Union[UrlTarget, RouteTarget, ActionTarget, None]


def _named_target(value: Any) -> tuple[str, Tuple[Any, ...]]:
    # Accepts "name" or ["name", param, ...].
    if isinstance(value, Sequence) and not isinstance(value, str):
        if not value:
            raise ValueError("Route and action descriptors need at least a name")
        name, *params = value
        return str(name), tuple(params)
    return str(value), ()


def parse_link_target(options: Any) -> LinkTarget:
    """Decide the link target described by ``options``.

    ``url`` wins over ``route`` which wins over ``action``. Missing, ``None``
    and empty values are ignored, so an options mapping without any of the
    three keys yields ``None``.
    """

    if isinstance(options, (UrlTarget, RouteTarget, ActionTarget)):
        return options
    if options is None:
        return None
    if isinstance(options, str):
        return UrlTarget(options) if options else None
    if not isinstance(options, Mapping):
        raise TypeError(f"Unsupported link descriptor: {options!r}")

    url = options.get("url")
    if url not in (None, ""):
        return UrlTarget(str(url), secure=options.get("secure") is True)
    route = options.get("route")
    if route not in (None, ""):
        return RouteTarget(*_named_target(route))
    action = options.get("action")
    if action not in (None, ""):
        return ActionTarget(*_named_target(action))
    return None


@dataclass(slots=True)
class MenuOptions:
    """The caller supplied options of ``Menu.add`` split into their roles."""

    target: LinkTarget = None
    parent: Optional[int] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def parse(cls, options: Any) -> "MenuOptions":
        """Parse a bare URL string or an options mapping."""

        if isinstance(options, MenuOptions):
            return options
        if options is None or isinstance(options, str):
            return cls(target=parse_link_target(options))
        if not isinstance(options, Mapping):
            raise TypeError(f"Menu options must be a string or a mapping, got {type(options).__name__}")

        parent = options.get("parent")
        return cls(
            target=parse_link_target(options),
            parent=int(parent) if parent is not None else None,
            attributes={key: value for key, value in options.items() if key not in RESERVED_OPTIONS},
        )


__all__ = [
    "ActionTarget",
    "LinkTarget",
    "MenuOptions",
    "RESERVED_OPTIONS",
    "RouteTarget",
    "UrlTarget",
    "parse_link_target",
]
