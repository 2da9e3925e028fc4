"""Exception types raised by the navigation menu package."""

from __future__ import annotations


class MenuError(RuntimeError):
    """Base class for every error raised by :mod:`navmenu`."""


class MenuCycleError(MenuError):
    """Raised when the parent references of a menu form a loop."""

    def __init__(self, item_id: int, trail: list[int] | None = None) -> None:
        self.item_id = item_id
        self.trail = list(trail or [])
        chain = " -> ".join(str(value) for value in [*self.trail, item_id])
        super().__init__(f"Menu item {item_id} is its own ancestor ({chain})")


class MenuDefinitionError(MenuError):
    """Raised when a menu definition file or entry cannot be interpreted."""


class UrlGenerationError(MenuError):
    """Raised when a link target cannot be turned into a URL."""


class RouteNotFoundError(UrlGenerationError):
    """Raised for a named route that was never registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Route [{name}] not defined.")


class ActionNotFoundError(UrlGenerationError):
    """Raised for a controller action that was never registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Action [{name}] not defined.")


__all__ = [
    "ActionNotFoundError",
    "MenuCycleError",
    "MenuDefinitionError",
    "MenuError",
    "RouteNotFoundError",
    "UrlGenerationError",
]
