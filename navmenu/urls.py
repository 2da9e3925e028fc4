"""URL resolution backend and the current request accessor.

Menus only depend on the :class:`UrlResolver` protocol. :class:`UrlGenerator`
is a small default implementation with a route table and an action table,
good enough for static sites, command line rendering and tests; web
applications usually hand in an adapter around their framework's URL builder.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, runtime_checkable
from urllib.parse import quote, urlsplit, urlunsplit

from .errors import ActionNotFoundError, RouteNotFoundError, UrlGenerationError
from .tracing import log_event

_LOGGER = logging.getLogger("navmenu.urls")
_PLACEHOLDER = re.compile(r"\{(\w+)(\?)?\}")


def is_absolute(url: str) -> bool:
    """Return ``True`` when ``url`` carries a scheme such as ``https:``."""

    return bool(urlsplit(str(url)).scheme)


@runtime_checkable
class UrlResolver(Protocol):
    """What a menu needs from the application's URL builder."""

    def to(self, path: str, params: Iterable[Any] = (), secure: Optional[bool] = None) -> str:
        ...

    def route(self, name: str, params: Iterable[Any] = ()) -> str:
        ...

    def action(self, name: str, params: Iterable[Any] = ()) -> str:
        ...


@dataclass(frozen=True, slots=True)
class RequestContext:
    """The URL and path of the request a menu is rendered for.

    ``url`` has no query string and no trailing slash. ``path`` has neither
    leading nor trailing slashes and is ``"/"`` for the site root.
    """

    url: str
    path: str = "/"

    @classmethod
    def from_url(cls, url: str) -> "RequestContext":
        parts = urlsplit(url)
        clean = urlunsplit((parts.scheme, parts.netloc, parts.path, "", "")).rstrip("/")
        return cls(url=clean, path=parts.path.strip("/") or "/")


class UrlGenerator:
    """Compose URLs relative to ``base_url`` and resolve named targets."""

    def __init__(
        self,
        base_url: str = "http://localhost",
        *,
        routes: Mapping[str, str] | None = None,
        actions: Mapping[str, str] | None = None,
    ) -> None:
        if not is_absolute(base_url):
            raise ValueError(f"Base URL must be absolute, got '{base_url}'")
        self.base_url = base_url.rstrip("/")
        self._routes: Dict[str, str] = dict(routes or {})
        self._actions: Dict[str, str] = dict(actions or {})

    def register_route(self, name: str, uri: str) -> "UrlGenerator":
        self._routes[name] = uri
        return self

    def register_action(self, name: str, uri: str) -> "UrlGenerator":
        self._actions[name] = uri
        return self

    def root(self, secure: Optional[bool] = None) -> str:
        """Return the base URL, switching scheme when ``secure`` is given."""

        parts = urlsplit(self.base_url)
        scheme = parts.scheme
        if secure is True:
            scheme = "https"
        elif secure is False:
            scheme = "http"
        return urlunsplit((scheme, parts.netloc, parts.path.rstrip("/"), "", ""))

    def to(self, path: str, params: Iterable[Any] = (), secure: Optional[bool] = None) -> str:
        path = str(path)
        if is_absolute(path) or path.startswith(("#", "//")):
            return path

        tail = "/".join(quote(str(value), safe="") for value in params)
        joined = "/".join(part for part in (path.strip("/"), tail) if part)
        root = self.root(secure)
        return f"{root}/{joined}" if joined else root

    def secure(self, path: str, params: Iterable[Any] = ()) -> str:
        return self.to(path, params, secure=True)

    def route(self, name: str, params: Iterable[Any] = ()) -> str:
        if name not in self._routes:
            log_event(_LOGGER, logging.WARNING, "urls.route_missing", route=name)
            raise RouteNotFoundError(name)
        return self._expand(self._routes[name], params)

    def action(self, name: str, params: Iterable[Any] = ()) -> str:
        if name not in self._actions:
            log_event(_LOGGER, logging.WARNING, "urls.action_missing", action=name)
            raise ActionNotFoundError(name)
        return self._expand(self._actions[name], params)

    def _expand(self, uri: str, params: Iterable[Any]) -> str:
        remaining = list(params)

        def _substitute(match: re.Match[str]) -> str:
            if remaining:
                return quote(str(remaining.pop(0)), safe="")
            if match.group(2):
                return ""
            raise UrlGenerationError(f"Missing required parameter [{match.group(1)}] for URI [{uri}]")

        path = re.sub(r"(?<!:)/{2,}", "/", _PLACEHOLDER.sub(_substitute, uri))
        url = self.to(path)
        if remaining:
            url = f"{url}?{'&'.join(quote(str(value), safe='') for value in remaining)}"
        return url


__all__ = ["RequestContext", "UrlGenerator", "UrlResolver", "is_absolute"]
