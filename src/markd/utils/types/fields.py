"""Reusable Pydantic field annotations."""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Annotated, TypeAlias

from pydantic import AfterValidator, Field, StrictStr

JsonDict: TypeAlias = dict[str, object]

# `:` separates name and path in plain listings
FORBIDDEN_NAME_CHARS = frozenset(c for c in ("/", "\\", ":", os.sep, os.altsep) if c)


def check_bookmark_name(value: str) -> str:
    """Validate a bookmark name that is already normalized."""
    if not value:
        raise ValueError("bookmark name must not be empty")
    if value != value.strip():
        raise ValueError("bookmark name must not have surrounding whitespace")
    if value != value.lower():
        raise ValueError("bookmark name must be lowercase")
    bad = sorted(FORBIDDEN_NAME_CHARS.intersection(value))
    if bad:
        raise ValueError(f"bookmark name must not contain {' '.join(repr(c) for c in bad)}")
    return value


def normalize_bookmark_name(value: str) -> str:
    """Lower-case and strip a user supplied name, then validate it."""
    return check_bookmark_name(value.strip().lower())


def check_absolute_path(value: str) -> str:
    if not PurePath(value).is_absolute():
        raise ValueError(f"path must be absolute: {value!r}")
    return value


BookmarkName = Annotated[StrictStr, AfterValidator(check_bookmark_name)]

AbsolutePathString = Annotated[StrictStr, Field(min_length=1), AfterValidator(check_absolute_path)]

__all__ = [
    "FORBIDDEN_NAME_CHARS",
    "AbsolutePathString",
    "BookmarkName",
    "JsonDict",
    "check_absolute_path",
    "check_bookmark_name",
    "normalize_bookmark_name",
]
