"""The anchor owned by every menu item."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .markup import format_group_class
from .models import LinkTarget

_MISSING = object()


class Link:
    """A link target together with the attributes of its ``<a>`` tag."""

    _FIELDS = ("path", "attributes")

    def __init__(self, path: LinkTarget = None, attributes: Mapping[str, Any] | None = None) -> None:
        self._path = path
        self.attributes: Dict[str, Any] = dict(attributes or {})

    @property
    def path(self) -> LinkTarget:
        """The parsed target; fixed once the link exists."""

        return self._path

    def active(self, class_name: str = "active") -> "Link":
        """Mark the link active by merging ``class_name`` into its class."""

        self.attributes["class"] = format_group_class({"class": class_name}, self.attributes)
        return self

    def attr(self, key: Any = _MISSING, value: Any = _MISSING) -> Any:
        """Read or write anchor attributes.

        ``attr()`` returns every attribute, ``attr({...})`` merges a mapping,
        ``attr(key, value)`` sets one and ``attr(key)`` reads one.
        """

        if key is _MISSING:
            return self.attributes
        if isinstance(key, Mapping):
            self.attributes.update(key)
            return self
        if value is not _MISSING:
            self.attributes[key] = value
            return self
        return self.attributes.get(key)

    def get(self, name: str) -> Any:
        """Return a declared field, falling back to the attribute ``name``."""

        if name in self._FIELDS:
            return getattr(self, name)
        return self.attr(name)

    def describe(self) -> Dict[str, Any]:
        return {"path": self._path, "attributes": dict(self.attributes)}

    def __repr__(self) -> str:
        return f"Link(path={self._path!r}, attributes={self.attributes!r})"


__all__ = ["Link"]
