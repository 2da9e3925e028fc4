"""Build menus from YAML or JSON definition files."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import MenuDefinitionError
from .item import Item
from .menu import Menu
from .tracing import trace

_LOGGER = logging.getLogger("navmenu.loader")
_YAML_SUFFIXES = {".yml", ".yaml"}


def load_definition(path: Path) -> List[Dict[str, Any]]:
    """Read the list of menu entries stored at ``path``.

    The document is either a list of entries or a mapping with an ``items``
    list. YAML is used for ``.yml``/``.yaml`` files, JSON otherwise.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MenuDefinitionError(f"Unable to read menu definition {path}: {exc}") from exc

    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            document = yaml.safe_load(text)
        else:
            document = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise MenuDefinitionError(f"Unable to parse menu definition {path}: {exc}") from exc

    if isinstance(document, Mapping):
        document = document.get("items")
    if not isinstance(document, list):
        raise MenuDefinitionError(f"Menu definition {path} must hold a list of items")
    return document


def _expect(identifier: str, key: str, value: Any, kind: type) -> None:
    if value is not None and not isinstance(value, kind):
        raise MenuDefinitionError(
            f"Option '{key}' of menu entry '{identifier}' must be a {kind.__name__}, got {value!r}"
        )


def _add_entry(menu: Menu, entry: Any, parent: Optional[Item]) -> Item:
    if not isinstance(entry, Mapping):
        raise MenuDefinitionError(f"Menu entries must be mappings, got {entry!r}")

    options = dict(entry)
    title = options.pop("title", None)
    if title is None:
        raise MenuDefinitionError(f"Menu entry without a title: {dict(entry)!r}")
    identifier = options.pop("id", None) or str(title)
    children = options.pop("children", None) or []
    divider = options.pop("divider", None)
    metadata = options.pop("data", None)
    link_attributes = options.pop("link", None)
    pattern = options.pop("active", None)
    prefix = options.pop("prepend", None)
    suffix = options.pop("append", None)

    _expect(identifier, "active", pattern, str)
    _expect(identifier, "prepend", prefix, str)
    _expect(identifier, "append", suffix, str)
    _expect(identifier, "data", metadata, Mapping)
    _expect(identifier, "link", link_attributes, Mapping)

    try:
        item = parent.add(identifier, str(title), options) if parent else menu.add(identifier, str(title), options)
    except (TypeError, ValueError) as exc:
        raise MenuDefinitionError(f"Invalid options for menu entry '{identifier}': {exc}") from exc

    if prefix:
        item.prepend(prefix)
    if suffix:
        item.append(suffix)
    if metadata:
        item.data(metadata)
    if link_attributes and item.link is not None:
        item.link.attr(link_attributes)
    if divider:
        item.divide(divider if isinstance(divider, Mapping) else None)
    if pattern:
        try:
            item.active(pattern)
        except re.error as exc:
            raise MenuDefinitionError(f"Invalid active pattern for '{identifier}': {exc}") from exc

    if not isinstance(children, Sequence) or isinstance(children, str):
        raise MenuDefinitionError(f"Children of '{identifier}' must be a list")
    for child in children:
        _add_entry(menu, child, item)
    return item


def build_menu(menu: Menu, entries: Sequence[Any]) -> Menu:
    """Add ``entries`` (and their nested ``children``) to ``menu``."""

    with trace("menu.build", logger=_LOGGER, entries=len(entries)) as span:
        for entry in entries:
            _add_entry(menu, entry, None)
        span.note(items=len(menu.items), active=[item.id for item in menu.active()])
    return menu


__all__ = ["build_menu", "load_definition"]
