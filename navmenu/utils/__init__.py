"""Utility helpers for the navigation menu package."""


from .slug import camel_case, is_slug, make_slug, split_words

__all__ = ["camel_case", "is_slug", "make_slug", "split_words"]
