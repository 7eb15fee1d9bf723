"""Utilities for reusable typed field annotations."""

from .fields import (
    AbsolutePathString,
    BookmarkName,
    JsonDict,
    check_bookmark_name,
    normalize_bookmark_name,
)

__all__ = [
    "AbsolutePathString",
    "BookmarkName",
    "JsonDict",
    "check_bookmark_name",
    "normalize_bookmark_name",
]
