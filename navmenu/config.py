"""Configuration helpers for menu rendering."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

_LOGGER = logging.getLogger(__name__)
_ENV_PREFIX = "NAVMENU_"


class MenuSettings(BaseModel):
    """Settings shared by menus, the URL generator and the CLI."""

    base_url: str = Field(
        default="http://localhost",
        description="Absolute root URL relative links are composed on",
    )
    active_class: str = Field(default="active", description="Class added to active items and links")
    opened_class: str = Field(default="opened", description="Class added to ancestors of active items")
    divider_class: str = Field(default="divider", description="Class carried by every divider tag")
    routes: Dict[str, str] = Field(default_factory=dict, description="Named route URIs")
    actions: Dict[str, str] = Field(default_factory=dict, description="Controller action URIs")
    log_level: str = Field(default="INFO", description="Desired logging verbosity")

    @field_validator("base_url", mode="before")
    @classmethod
    def _ensure_base_url(cls, value: str | None) -> str:
        text = str(value or "").strip()
        if "://" not in text:
            raise ValueError(f"base_url must be an absolute URL, got '{value}'")
        return text.rstrip("/")

    @field_validator("active_class", "opened_class", "divider_class", mode="before")
    @classmethod
    def _ensure_class_name(cls, value: str | None) -> str:
        text = str(value or "").strip()
        if not text or len(text.split()) != 1:
            raise ValueError(f"Class names must be a single non-empty token, got '{value}'")
        return text

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: str | None) -> str:
        return (value or "INFO").strip().upper()

    @classmethod
    def load(cls, path: Path | None = None) -> "MenuSettings":
        """Load settings from a JSON file and environment overrides."""

        data: Dict[str, Any] = {}

        if path is not None and path.exists():
            try:
                loaded = json.loads(path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                _LOGGER.warning("Unable to decode menu settings at %s: %s", path, exc)
            else:
                if isinstance(loaded, dict):
                    data = loaded
                else:
                    _LOGGER.warning("Ignoring menu settings at %s: expected a JSON object", path)

        for name in ("base_url", "log_level"):
            env_value = os.environ.get(f"{_ENV_PREFIX}{name.upper()}")
            if env_value is not None:
                data[name] = env_value

        return cls(**{key: value for key, value in data.items() if key in cls.model_fields})


def load_menu_settings(path: Path | None = None) -> MenuSettings:
    """Helper to load the menu settings."""

    return MenuSettings.load(path)


__all__ = ["MenuSettings", "load_menu_settings"]
