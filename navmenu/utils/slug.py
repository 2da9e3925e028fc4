"""Helpers for deriving lookup slugs from menu identifiers."""

from __future__ import annotations

import re

from slugify import slugify

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
# Shape of everything camel_case returns: lower-case or digit head, then
# letters and digits only.
_SLUG_FORM = re.compile(r"[a-z0-9][a-zA-Z0-9]*")


def split_words(identifier: str) -> list[str]:
    """Return the lower-case, transliterated words of ``identifier``.

    Existing camel case humps count as word boundaries, so ``"mainMenu"`` and
    ``"Main menu"`` both yield ``["main", "menu"]``.
    """

    spaced = _CAMEL_BOUNDARY.sub(" ", str(identifier))
    return [word for word in slugify(spaced, separator=" ").split(" ") if word]


def camel_case(words: list[str]) -> str:
    if not words:
        return ""
    head, *tail = words
    return head + "".join(word[:1].upper() + word[1:] for word in tail)


def is_slug(identifier: str) -> bool:
    """Return ``True`` when ``identifier`` already has the shape of a slug."""

    return _SLUG_FORM.fullmatch(str(identifier)) is not None


def make_slug(identifier: str) -> str:
    """Derive the camel-cased slug used to look an item up by name.

    Identifiers that already look like a slug are returned unchanged, so
    single-letter words such as the ``X`` in ``"pageXY"`` are not merged on
    a second pass.

    >>> make_slug("User settings")
    'userSettings'
    >>> make_slug(make_slug("a b c"))
    'aBC'
    """

    if is_slug(identifier):
        return str(identifier)
    return camel_case(split_words(identifier))


__all__ = ["camel_case", "is_slug", "make_slug", "split_words"]
