"""Shared pytest fixtures for the navmenu test-suite."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from navmenu import Menu, MenuSettings, RequestContext, UrlGenerator

BASE_URL = "http://example.test"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer NAVMENU_* variables out of the tests."""

    monkeypatch.delenv("NAVMENU_BASE_URL", raising=False)
    monkeypatch.delenv("NAVMENU_LOG_LEVEL", raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the root directory containing reusable fixture files."""

    return Path(__file__).parent / "fixtures"


@pytest.fixture
def url_generator() -> UrlGenerator:
    """Return a generator for http://example.test with a few routes and actions."""

    return UrlGenerator(
        BASE_URL,
        routes={
            "home": "/",
            "users.show": "users/{id}",
            "posts.index": "posts/{page?}",
            "docs.page": "docs/{page}",
        },
        actions={
            "UserController@index": "users",
            "ContactController@show": "contact/{topic}",
        },
    )


@pytest.fixture
def menu(url_generator: UrlGenerator) -> Menu:
    """Return an empty menu without a current request."""

    return Menu(url_generator)


@pytest.fixture
def menu_for(url_generator: UrlGenerator) -> Callable[[str], Menu]:
    """Return a factory building an empty menu for a given request URL."""

    def _build(url: str) -> Menu:
        return Menu(url_generator, RequestContext.from_url(url))

    return _build


@pytest.fixture
def settings() -> MenuSettings:
    """Return settings mirroring the url_generator fixture."""

    return MenuSettings(
        base_url=BASE_URL,
        routes={"docs.page": "docs/{page}"},
        actions={"ContactController@show": "contact/{topic}"},
    )
