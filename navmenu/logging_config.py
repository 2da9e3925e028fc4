"""Logging setup for the ``render-menu`` command line tool."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(value: str | int | None, default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""

    if isinstance(value, int):
        return value
    if not value:
        return default
    level = logging.getLevelName(str(value).strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(
    level: str | int | None = logging.INFO,
    stream: logging.Handler | TextIO | None = None,
) -> logging.Handler:
    """Send every log record to a single formatted handler and return it.

    ``level`` takes names (``"debug"``) as well as numbers; unknown names fall
    back to ``INFO``. ``stream`` is either a ready handler or a text stream.
    Records go to ``sys.stderr`` by default because rendered markup is
    written to stdout.
    """

    if isinstance(stream, logging.Handler):
        handler = stream
    else:
        handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    root_logger = logging.getLogger()
    # Repeated calls replace the handler instead of stacking duplicates.
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
    root_logger.setLevel(resolve_level(level))
    root_logger.addHandler(handler)
    return handler


__all__ = ["configure_logging", "resolve_level"]
