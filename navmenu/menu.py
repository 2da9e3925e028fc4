"""The menu container: item storage, URL dispatch, queries and rendering."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, List, Optional

from . import markup
from .config import MenuSettings
from .errors import MenuCycleError
from .item import Item
from .models import ActionTarget, LinkTarget, RouteTarget, UrlTarget, parse_link_target
from .tracing import log_event
from .urls import RequestContext, UrlGenerator, UrlResolver, is_absolute

_LOGGER = logging.getLogger("navmenu.menu")
_LIST_TYPES = ("ul", "ol")


class Menu:
    """An ordered, flat collection of :class:`Item` objects forming a tree.

    Parameters
    ----------
    url:
        Resolver used to turn link targets into URLs. Defaults to a
        :class:`~navmenu.urls.UrlGenerator` built from ``settings``.
    request:
        The request the menu is rendered for. Items whose URL matches it are
        activated as they are added; without it nothing is activated
        automatically.
    settings:
        Class names and URL defaults, see :class:`~navmenu.config.MenuSettings`.
    """

    _FIELDS = ("items", "last_id", "url", "request", "settings")

    def __init__(
        self,
        url: UrlResolver | None = None,
        request: RequestContext | None = None,
        *,
        settings: MenuSettings | None = None,
    ) -> None:
        self.settings = settings or MenuSettings()
        self.url: UrlResolver = url or UrlGenerator(
            self.settings.base_url,
            routes=self.settings.routes,
            actions=self.settings.actions,
        )
        self.request = request
        self.items: List[Item] = []
        self.last_id = 0

    def make(self) -> "Menu":
        """Return an empty menu sharing resolver, request and settings."""

        return type(self)(self.url, self.request, settings=self.settings)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    def add(self, identifier: str, title: str, options: Any = "") -> Item:
        """Add an item and return it.

        ``options`` is either a URL string or a mapping holding ``url``,
        ``route``, ``action``, ``secure`` and ``parent``; any other key becomes
        an HTML attribute of the item.
        """

        item = Item(self, self._next_id(), identifier, title, options)
        self.items.append(item)
        self.last_id = item.id
        log_event(
            _LOGGER,
            logging.DEBUG,
            "menu.item_added",
            id=item.id,
            slug=item.slug,
            parent=item.parent,
        )
        return item

    def _next_id(self) -> int:
        return self.last_id + 1

    # ------------------------------------------------------------------
    # URL dispatch
    # ------------------------------------------------------------------
    def dispatch(self, target: LinkTarget | Mapping[str, Any] | str) -> Optional[str]:
        """Resolve a link target, or a raw descriptor, to a URL."""

        target = parse_link_target(target)
        if isinstance(target, UrlTarget):
            return self._get_url(target)
        if isinstance(target, RouteTarget):
            return self.url.route(target.name, target.params)
        if isinstance(target, ActionTarget):
            return self.url.action(target.name, target.params)
        return None

    def _get_url(self, target: UrlTarget) -> str:
        if self.is_absolute(target.url):
            return target.url
        return self.url.to(target.url, (), True if target.secure else None)

    @staticmethod
    def is_absolute(url: str) -> bool:
        return is_absolute(url)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def all(self) -> List[Item]:
        return self.items

    def first(self) -> Optional[Item]:
        return self.items[0] if self.items else None

    def last(self) -> Optional[Item]:
        return self.items[-1] if self.items else None

    def item(self, slug: str) -> Optional[Item]:
        """Return the first item with ``slug``."""

        matches = self.where("slug", slug)
        return matches[0] if matches else None

    def find(self, item_id: int) -> Optional[Item]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def active(self) -> List[Item]:
        """Return every item flagged active, in insertion order."""

        return [item for item in self.items if item.data("active")]

    def where(self, attribute: str, value: Any) -> List[Item]:
        """Return items whose metadata or declared field ``attribute`` equals ``value``."""

        return [item for item in self.items if self._matches(item, attribute, value)]

    @staticmethod
    def _matches(item: Item, attribute: str, value: Any) -> bool:
        stored = item.data(attribute)
        if stored is not None and stored == value:
            return True
        if attribute not in Item.QUERYABLE:
            return False
        return getattr(item, attribute) == value

    def children_of(self, parent_id: Optional[int]) -> List[Item]:
        """Return the direct children of ``parent_id``; ``None`` gives the roots."""

        return [item for item in self.items if item.parent == parent_id]

    def filter(self, callback: Callable[[Item], Any]) -> "Menu":
        """Keep only the items for which ``callback`` is truthy."""

        if callable(callback):
            self.items = [item for item in self.items if callback(item)]
        return self

    def get(self, name: str) -> Any:
        """Return a declared field, falling back to the item with slug ``name``."""

        if name in self._FIELDS:
            return getattr(self, name)
        return self.item(name)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def attributes(self, attributes: Mapping[Any, Any] | None) -> str:
        return markup.attributes(attributes)

    @staticmethod
    def format_group_class(new: Mapping[str, Any], old: Mapping[str, Any]) -> Optional[str]:
        return markup.format_group_class(new, old)

    def as_ul(self, attributes: Mapping[Any, Any] | None = None) -> str:
        """Render the menu as an unordered list."""

        return self._as_list("ul", attributes)

    def as_ol(self, attributes: Mapping[Any, Any] | None = None) -> str:
        """Render the menu as an ordered list."""

        return self._as_list("ol", attributes)

    def as_div(self, attributes: Mapping[Any, Any] | None = None) -> str:
        """Render the menu as nested ``div`` blocks."""

        return self._as_list("div", attributes)

    def _as_list(self, type: str, attributes: Mapping[Any, Any] | None) -> str:
        html = f"<{type}{self.attributes(attributes)}>{self.render(type)}</{type}>"
        log_event(_LOGGER, logging.DEBUG, "menu.rendered", type=type, items=len(self.items), length=len(html))
        return html

    def render(self, type: str = "ul", parent: Optional[int] = None, _trail: tuple[int, ...] = ()) -> str:
        """Render the items below ``parent`` and, recursively, their children.

        Raises :class:`~navmenu.errors.MenuCycleError` when an item turns out
        to be its own ancestor.
        """

        if parent is not None:
            if parent in _trail:
                raise MenuCycleError(parent, list(_trail))
            _trail = (*_trail, parent)

        item_tag = "li" if type in _LIST_TYPES else type
        parts: List[str] = []
        for item in self.children_of(parent):
            parts.append(f"<{item_tag}{item.render_attributes()}>")
            if item.link is not None:
                parts.append(self._render_anchor(item))
            else:
                parts.append(item.title)
            if item.has_children():
                parts.append(f"<{type}>{self.render(type, item.id, _trail)}</{type}>")
            parts.append(f"</{item_tag}>")
            if item.divider:
                parts.append(f"<{item_tag}{self.attributes(item.divider)}></{item_tag}>")
        return "".join(parts)

    def _render_anchor(self, item: Item) -> str:
        link_attributes = dict(item.link.attr())
        url = item.url()
        # Items without a target render an anchor without href.
        if url is not None:
            link_attributes.pop("href", None)
            link_attributes["href"] = url
        return f"<a{self.attributes(link_attributes)}>{item.title}</a>"

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __repr__(self) -> str:
        return f"Menu(items={len(self.items)}, last_id={self.last_id})"


__all__ = ["Menu"]
