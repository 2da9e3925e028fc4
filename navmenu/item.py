"""Menu items and their case-insensitive metadata."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping, MutableMapping
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .errors import MenuCycleError
from .link import Link
from .markup import format_group_class
from .models import MenuOptions
from .tracing import log_event
from .utils.slug import make_slug

if TYPE_CHECKING:
    from .menu import Menu

_LOGGER = logging.getLogger("navmenu.item")
_MISSING = object()


class Metadata(MutableMapping):
    """Mapping whose keys are lower-cased on the way in and on lookup."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._data: Dict[str, Any] = {}
        if values:
            self.update(values)

    @staticmethod
    def _key(key: Any) -> str:
        return str(key).lower()

    def __getitem__(self, key: Any) -> Any:
        return self._data[self._key(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._data[self._key(key)] = value

    def __delitem__(self, key: Any) -> None:
        del self._data[self._key(key)]

    def __contains__(self, key: object) -> bool:
        return self._key(key) in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Metadata({self._data!r})"


class Item:
    """A single node of a :class:`~navmenu.menu.Menu`.

    Items are created through :meth:`Menu.add` or :meth:`Item.add`; the menu
    owns them and keeps them in a flat list, the tree shape comes from the
    ``parent`` ids.
    """

    #: Fields :meth:`Menu.where` may compare against.
    QUERYABLE = ("id", "slug", "title", "parent", "divider", "attributes", "link")

    def __init__(self, menu: "Menu", id: int, identifier: str, title: str, options: Any = "") -> None:
        parsed = MenuOptions.parse(options)
        self.menu = menu
        self._id = id
        self.title = title
        self.slug = make_slug(identifier)
        self.attributes: Dict[str, Any] = dict(parsed.attributes)
        self.parent: Optional[int] = parsed.parent
        self.divider: Dict[str, Any] = {}
        self.metadata = Metadata()
        self.link: Optional[Link] = None
        self.configure_link(parsed)

    @property
    def id(self) -> int:
        return self._id

    def configure_link(self, options: Any) -> None:
        """Build the link from the routing options and check for a match."""

        self.link = Link(MenuOptions.parse(options).target)
        self.check_active_status()

    def add(self, identifier: str, title: str, options: Any = "") -> "Item":
        """Add a child item underneath this one."""

        if isinstance(options, Mapping):
            options = dict(options)
        else:
            options = {"url": options}
        options["parent"] = self.id
        return self.menu.add(identifier, title, options)

    def url(self) -> Optional[str]:
        """Return the resolved URL of the item's link."""

        if self.link is None:
            return None
        return self.menu.dispatch(self.link.path)

    def check_active_status(self) -> None:
        """Activate the item when its URL is the one being requested."""

        request = self.menu.request
        if request is None:
            return
        url = self.url()
        if url is None:
            return
        if url == request.url or url == self.menu.url.to(request.path, secure=True):
            self.activate()

    def prepend(self, html: str) -> "Item":
        self.title = f"{html} {self.title}"
        return self

    def append(self, html: str) -> "Item":
        self.title = f"{self.title} {html}"
        return self

    def divide(self, attributes: Mapping[str, Any] | None = None) -> "Item":
        """Render a divider right after this item."""

        divider = dict(attributes or {})
        divider["class"] = format_group_class(divider, {"class": self.menu.settings.divider_class})
        self.divider = divider
        return self

    def has_children(self) -> bool:
        return bool(self.children())

    def children(self) -> List["Item"]:
        return self.menu.children_of(self.id)

    def activate(self, item: Optional["Item"] = None) -> "Item":
        """Mark ``item`` (or this item) active and open all of its ancestors.

        Ancestors get the opened class only; the active class and the
        ``active`` metadata flag stay on the activated item.
        """

        target = item or self
        settings = self.menu.settings
        target.attribute({"class": settings.active_class})
        if target.link is not None:
            target.link.active(settings.active_class)
        target.data("active", True)
        log_event(_LOGGER, logging.DEBUG, "menu.item_activated", id=target.id, slug=target.slug)

        trail = [target.id]
        parent_id = target.parent
        while parent_id is not None:
            if parent_id in trail:
                raise MenuCycleError(parent_id, trail)
            parent = self.menu.find(parent_id)
            if parent is None:
                log_event(_LOGGER, logging.WARNING, "menu.parent_missing", id=trail[-1], parent=parent_id)
                break
            parent.attribute({"class": settings.opened_class})
            trail.append(parent.id)
            parent_id = parent.parent
        return self

    def active(self, pattern: Optional[str] = None) -> "Item":
        """Activate the item when the request path matches ``pattern``.

        A ``/*`` stands for the segment and everything beneath it, so
        ``"users/*"`` matches ``users`` as well as ``users/42/edit``.
        """

        request = self.menu.request
        if pattern is None or request is None:
            return self
        regex = pattern.replace("/*", "(/.*)?").lstrip("/")
        if re.search(rf"{regex}\Z", request.path):
            self.activate()
        return self

    def render_attributes(self) -> str:
        return self.menu.attributes(self.attributes)

    def attribute(self, attribute: Any) -> Any:
        """Merge a mapping of attributes or read a single one.

        A ``class`` entry is merged into the existing classes instead of
        replacing them.
        """

        if isinstance(attribute, Mapping):
            values = dict(attribute)
            if "class" in values:
                self.attributes["class"] = format_group_class({"class": values.pop("class")}, self.attributes)
            self.attributes.update(values)
            return self
        return self.attributes.get(attribute)

    def data(self, key: Any = _MISSING, value: Any = _MISSING) -> Any:
        """Read or write metadata; keys are case-insensitive."""

        if key is _MISSING:
            return dict(self.metadata)
        if isinstance(key, Mapping):
            self.metadata.update(key)
            return self
        if value is not _MISSING:
            self.metadata[key] = value
            return self
        return self.metadata.get(key)

    def is_active(self) -> bool:
        return bool(self.metadata.get("active"))

    def describe(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "slug": self.slug,
            "title": self.title,
            "parent": self.parent,
            "attributes": dict(self.attributes),
            "metadata": dict(self.metadata),
        }

    def __repr__(self) -> str:
        return f"Item(id={self.id!r}, slug={self.slug!r}, parent={self.parent!r})"


__all__ = ["Item", "Metadata"]
