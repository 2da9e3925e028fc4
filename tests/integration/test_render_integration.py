"""Integration tests for building menus from definitions and rendering them."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

import render_menu
from navmenu import Menu, MenuSettings, RequestContext, UrlGenerator
from navmenu.loader import build_menu, load_definition


@pytest.fixture
def config_path(tmp_path: Path, settings: MenuSettings) -> Path:
    """Write the shared settings to a JSON file for the CLI."""

    path = tmp_path / "menu.json"
    path.write_text(settings.model_dump_json(), encoding="utf-8")
    return path


def _render_main(fixtures_dir: Path, settings: MenuSettings, request_url: str) -> BeautifulSoup:
    generator = UrlGenerator(settings.base_url, routes=settings.routes, actions=settings.actions)
    menu = Menu(generator, RequestContext.from_url(request_url), settings=settings)
    build_menu(menu, load_definition(fixtures_dir / "menus" / "main.yaml"))
    return BeautifulSoup(menu.as_ul({"class": "nav", "id": "main-nav"}), "lxml")


def test_rendered_tree_structure(fixtures_dir: Path, settings: MenuSettings) -> None:
    """Given the main definition When rendered Then every item is one li, nested under its parent."""

    soup = _render_main(fixtures_dir, settings, "http://example.test/")

    top = soup.find("ul", id="main-nav")
    assert top["class"] == ["nav"]
    direct = top.find_all("li", recursive=False)
    assert [li.a.get_text(strip=True) if li.a else None for li in direct] == [
        "Home",
        "Documentation",
        None,
        "Blog",
        "Account",
    ]
    assert len(top.find_all("li")) == 8

    docs = direct[1]
    children = docs.find("ul", recursive=False).find_all("li", recursive=False)
    assert [li.a.get_text() for li in children] == ["Installation", "API Reference"]
    grandchildren = children[1].find("ul", recursive=False).find_all("li", recursive=False)
    assert [li.a["href"] for li in grandchildren] == ["http://example.test/docs/api/menu"]


def test_divider_and_attributes(fixtures_dir: Path, settings: MenuSettings) -> None:
    """Given dividers and attributes When rendered Then they land on the expected tags."""

    soup = _render_main(fixtures_dir, settings, "http://example.test/")

    direct = soup.find("ul", id="main-nav").find_all("li", recursive=False)
    divider = direct[2]
    assert divider["class"] == ["divider"]
    assert divider.get_text() == ""
    assert direct[1].find_next_sibling("li") is divider

    blog = direct[3]
    assert blog["target"] == "_blank"
    assert blog.a["href"] == "https://blog.example.org"

    account = direct[4]
    assert account.a["rel"] == ["nofollow"]
    assert account.a.find("i")["class"] == ["icon-user"]


def test_home_request_activates_only_home(fixtures_dir: Path, settings: MenuSettings) -> None:
    """Given a request for the site root When rendered Then only Home is marked active."""

    soup = _render_main(fixtures_dir, settings, "http://example.test/")

    active = soup.select("li.active")
    assert [li.a.get_text() for li in active] == ["Home"]
    assert not soup.select("li.opened")


def test_nested_request_opens_ancestors(fixtures_dir: Path, settings: MenuSettings) -> None:
    """Given a request for a nested page When rendered Then the page is active and its parent opened."""

    soup = _render_main(fixtures_dir, settings, "http://example.test/docs/install")

    active = soup.select("li.active")
    assert [li.a.get_text() for li in active] == ["Installation"]
    assert active[0].a["class"] == ["active"]

    opened = soup.select("li.opened")
    assert len(opened) == 1
    assert opened[0]["class"] == ["has-dropdown", "opened"]
    assert opened[0].a.get_text() == "Documentation"


def test_cli_renders_definition(
    fixtures_dir: Path,
    config_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Given the CLI When a YAML definition is rendered Then the markup is written to stdout."""

    exit_code = render_menu.main(
        [
            str(fixtures_dir / "menus" / "main.yaml"),
            "--config",
            str(config_path),
            "--request-url",
            "http://example.test/docs/install",
            "--class",
            "navbar-nav",
            "--log-level",
            "WARNING",
        ]
    )

    output = capsys.readouterr().out
    assert exit_code == 0
    assert output.startswith('<ul class="navbar-nav">')
    assert '<li class="active"><a class="active" href="http://example.test/docs/install">Installation</a>' in output


def test_cli_renders_ordered_footer_with_base_url_override(
    fixtures_dir: Path,
    config_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Given --list-type ol and --base-url When rendering JSON Then ol markup with the new base is produced."""

    exit_code = render_menu.main(
        [
            str(fixtures_dir / "menus" / "footer.json"),
            "--config",
            str(config_path),
            "--base-url",
            "https://www.example.test/",
            "--list-type",
            "ol",
        ]
    )

    output = capsys.readouterr().out
    soup = BeautifulSoup(output, "lxml")
    assert exit_code == 0
    assert soup.find("ol") is not None
    assert [a["href"] for a in soup.find_all("a")] == [
        "https://www.example.test/imprint",
        "https://www.example.test/privacy",
        "https://www.example.test/contact/sales",
    ]
    assert '<li class="divider footer-sep"></li>' in output


def test_cli_reports_missing_definition(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a missing definition file When the CLI runs Then it exits with status 1 and no markup."""

    exit_code = render_menu.main([str(tmp_path / "missing.yaml"), "--log-level", "CRITICAL"])

    assert exit_code == 1
    assert capsys.readouterr().out == ""


def test_settings_file_round_trip(config_path: Path) -> None:
    """Given settings written by model_dump_json When loaded back Then the routes survive."""

    loaded = MenuSettings.load(config_path)

    assert loaded.routes == json.loads(config_path.read_text(encoding="utf-8"))["routes"]


@pytest.mark.parametrize(
    "document",
    [
        "items:\n  - title: Docs\n    route: []\n",
        "items:\n  - title: Docs\n    url: docs\n    parent: top\n",
        "items:\n  - title: Docs\n    url: docs\n    active: true\n",
    ],
)
def test_cli_reports_malformed_entries(
    tmp_path: Path,
    document: str,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Given entries the loader cannot interpret When the CLI runs Then it exits with status 1."""

    definition = tmp_path / "menu.yaml"
    definition.write_text(document, encoding="utf-8")

    exit_code = render_menu.main([str(definition), "--log-level", "CRITICAL"])

    assert exit_code == 1
    assert capsys.readouterr().out == ""


def test_cli_rejects_relative_base_url(fixtures_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a --base-url without scheme When the CLI runs Then settings validation fails with status 1."""

    exit_code = render_menu.main(
        [str(fixtures_dir / "menus" / "footer.json"), "--base-url", "foo", "--log-level", "CRITICAL"]
    )

    assert exit_code == 1
    assert capsys.readouterr().out == ""
