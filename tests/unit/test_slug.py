"""Tests for :mod:`navmenu.utils.slug`."""

from __future__ import annotations

import pytest

from navmenu.utils.slug import camel_case, is_slug, make_slug, split_words


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("Main Menu", "mainMenu"),
        ("user_settings", "userSettings"),
        ("about-us", "aboutUs"),
        ("Über uns", "uberUns"),
        ("home", "home"),
        ("HTMLParser", "htmlParser"),
    ],
)
def test_make_slug_camel_cases_words(identifier: str, expected: str) -> None:
    """Given an identifier When slugged Then a camel-cased URL-safe token is returned."""

    assert make_slug(identifier) == expected


@pytest.mark.parametrize(
    "identifier",
    [
        "Account Settings / Billing",
        "a b c",
        "a_b-c",
        "Page x Y",
        "x2Y z",
        "v1 API",
        "2 fast 2 Furious",
        "HTMLParser",
        "Über uns",
    ],
)
def test_make_slug_is_idempotent(identifier: str) -> None:
    """Given a derived slug When it is slugged again Then it stays the same."""

    first = make_slug(identifier)

    assert make_slug(first) == first


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [("a b c", "aBC"), ("Page x Y", "pageXY"), ("x2Y z", "x2YZ")],
)
def test_single_letter_words_survive_a_second_pass(identifier: str, expected: str) -> None:
    """Given single-letter words When slugged twice Then the capital run is kept."""

    assert make_slug(identifier) == expected
    assert make_slug(expected) == expected


def test_is_slug_recognises_camel_case_tokens() -> None:
    """Given various identifiers When checked Then only camel-case tokens count as slugs."""

    assert is_slug("mainMenu")
    assert is_slug("2Fast")
    assert not is_slug("Main menu")
    assert not is_slug("HTMLParser")
    assert not is_slug("")


def test_split_words_breaks_camel_case() -> None:
    """Given a camel-cased identifier When split Then humps become separate words."""

    assert split_words("mainMenuItem") == ["main", "menu", "item"]


def test_camel_case_of_nothing_is_empty() -> None:
    """Given no words When camel-cased Then an empty string is returned."""

    assert camel_case([]) == ""
    assert make_slug("!!!") == ""
