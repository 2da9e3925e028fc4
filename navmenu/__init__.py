"""Hierarchical navigation menus: build, activate and render to HTML lists."""

from .config import MenuSettings, load_menu_settings
from .errors import (
    ActionNotFoundError,
    MenuCycleError,
    MenuDefinitionError,
    MenuError,
    RouteNotFoundError,
    UrlGenerationError,
)
from .item import Item, Metadata
from .link import Link
from .logging_config import configure_logging
from .menu import Menu
from .models import ActionTarget, LinkTarget, MenuOptions, RouteTarget, UrlTarget
from .urls import RequestContext, UrlGenerator, UrlResolver

__all__ = [
    "ActionNotFoundError",
    "ActionTarget",
    "Item",
    "Link",
    "LinkTarget",
    "Menu",
    "MenuCycleError",
    "MenuDefinitionError",
    "MenuError",
    "MenuOptions",
    "MenuSettings",
    "Metadata",
    "RequestContext",
    "RouteNotFoundError",
    "RouteTarget",
    "UrlGenerationError",
    "UrlGenerator",
    "UrlResolver",
    "UrlTarget",
    "configure_logging",
    "load_menu_settings",
]
