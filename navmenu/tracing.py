"""Structured logging helpers used while building and rendering menus.

Events are logged as single-line JSON objects so that menu activity can be
grepped or shipped to a log collector without a custom formatter.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import time
from collections.abc import Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

__all__ = ["MenuSpan", "trace", "log_event", "safe_json"]


def safe_json(value: Any) -> Any:
    """Return ``value`` converted into a JSON-serialisable structure."""

    if value is None or isinstance(value, (str, int, float, bool)):
        return value

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: safe_json(getattr(value, f.name)) for f in dataclasses.fields(value)}

    if isinstance(value, Mapping):
        return {str(key): safe_json(val) for key, val in value.items()}

    if isinstance(value, (list, tuple, set, frozenset)):
        return [safe_json(item) for item in value]

    describe = getattr(value, "describe", None)
    if callable(describe):
        return safe_json(describe())

    return repr(value)


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    *,
    exc_info: bool | BaseException | tuple[Any, Any, Any] | None = None,
    **fields: Any,
) -> None:
    """Emit ``event`` with ``fields`` as a JSON encoded log line."""

    if not logger.isEnabledFor(level):
        return

    payload: Dict[str, Any] = {"event": event}
    payload.update({key: safe_json(value) for key, value in fields.items() if value is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, sort_keys=True), exc_info=exc_info)


@dataclass
class MenuSpan:
    """Bookkeeping for a running :func:`trace` block."""

    name: str
    logger: logging.Logger
    fields: Dict[str, Any] = field(default_factory=dict)
    started: float = field(default_factory=time.perf_counter)

    @property
    def elapsed_ms(self) -> float:
        return round((time.perf_counter() - self.started) * 1000, 2)

    def note(self, **fields: Any) -> None:
        """Attach a debug note to the span."""

        log_event(self.logger, logging.DEBUG, "trace.note", trace=self.name, **{**self.fields, **fields})


@contextmanager
def trace(name: str, *, logger: Optional[logging.Logger] = None, **fields: Any) -> Iterator[MenuSpan]:
    """Log start and end of a stage together with its duration.

    Exceptions are logged with ``trace.error`` and re-raised unchanged.
    """

    span = MenuSpan(name=name, logger=logger or logging.getLogger("navmenu.trace"), fields=dict(fields))
    log_event(span.logger, logging.INFO, "trace.start", trace=name, **fields)
    try:
        yield span
    except Exception as exc:
        log_event(
            span.logger,
            logging.ERROR,
            "trace.error",
            exc_info=True,
            trace=name,
            duration_ms=span.elapsed_ms,
            error=repr(exc),
            **fields,
        )
        raise
    log_event(span.logger, logging.INFO, "trace.end", trace=name, duration_ms=span.elapsed_ms, **fields)
