"""HTML attribute rendering and the class merge policy."""

from __future__ import annotations

import html
from collections.abc import Mapping
from typing import Any, Optional


def escape(value: Any) -> str:
    """Escape ``value`` for use inside a double quoted attribute."""

    return html.escape(str(value), quote=True)


def _is_positional(key: Any) -> bool:
    if isinstance(key, bool):
        return False
    return isinstance(key, int) or (isinstance(key, str) and key.isdigit())


def attribute_element(key: Any, value: Any) -> Optional[str]:
    """Render a single attribute, or ``None`` when it should be left out."""

    # Positional entries carry boolean attributes such as "required" as
    # their value.
    if _is_positional(key):
        return None if value is None else str(value)
    if isinstance(value, bool) and key != "value":
        return str(key) if value else None
    if value is None:
        return None
    if isinstance(value, bool):
        value = "1" if value else ""
    elif isinstance(value, (list, tuple)):
        value = " ".join(str(part) for part in value)
    return f'{key}="{escape(value)}"'


def attributes(values: Mapping[Any, Any] | None) -> str:
    """Build an HTML attribute string with a leading space.

    >>> attributes({"id": "x", "required": True, "hidden": False, "extra": None})
    ' id="x" required'
    """

    rendered = [
        element
        for element in (attribute_element(key, value) for key, value in (values or {}).items())
        if element
    ]
    return " " + " ".join(rendered) if rendered else ""


def format_group_class(new: Mapping[str, Any], old: Mapping[str, Any]) -> Optional[str]:
    """Merge the ``class`` of ``new`` into the one of ``old``.

    Tokens keep the order of their first appearance, ``old`` first. When
    ``new`` has no class the old value is returned untouched.
    """

    if new.get("class") is None:
        return old.get("class")
    combined = f"{str(old.get('class') or '').strip()} {str(new['class']).strip()}"
    return " ".join(dict.fromkeys(combined.split()))


__all__ = ["attribute_element", "attributes", "escape", "format_group_class"]
