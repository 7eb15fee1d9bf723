"""Serialization of the bookmarks file.

Two formats exist and are never sniffed:

- current: TOML, read by `parse_document` on every load
- legacy: the flat JSON object older releases kept in ~/dirs.json, read only
  by `parse_legacy` when the user explicitly runs `markd migrate`
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError
from result import Err, Ok, Result, is_err

from markd.common import normalize_bookmark_name
from markd.utils.validation import format_validation_error

from .models import BookmarkDocument, BookmarkParseError


def parse_document(data: bytes, *, source: Path | None = None) -> Result[BookmarkDocument, BookmarkParseError]:
    """Parse the current TOML format. Empty input is an empty document."""
    text = _decode(data, source)
    if is_err(text):
        return text

    try:
        raw = tomllib.loads(text.unwrap())
    except tomllib.TOMLDecodeError as exc:
        return Err(BookmarkParseError(path=source, message=f"Invalid TOML: {exc}"))

    try:
        return Ok(BookmarkDocument.model_validate(raw))
    except ValidationError as exc:
        return Err(BookmarkParseError(path=source, message=format_validation_error("bookmarks file", exc)))


def dump_document(document: BookmarkDocument) -> bytes:
    return tomli_w.dumps(document.to_toml_dict()).encode("utf-8")


def parse_legacy(data: bytes, *, source: Path | None = None) -> Result[dict[str, str], BookmarkParseError]:
    """Parse the legacy flat JSON object of name to path."""
    text = _decode(data, source)
    if is_err(text):
        return text

    if not text.unwrap().strip():
        return Ok({})

    try:
        raw = json.loads(text.unwrap())
    except json.JSONDecodeError as exc:
        return Err(BookmarkParseError(path=source, message=f"Invalid JSON: {exc}"))

    if not isinstance(raw, dict):
        return Err(BookmarkParseError(path=source, message="Legacy bookmarks must be a JSON object of name to path."))

    entries: dict[str, str] = {}
    for name, path in raw.items():
        if not isinstance(path, str):
            return Err(BookmarkParseError(path=source, message=f"Legacy bookmark '{name}' has a non-string path."))
        entries[name] = path
    return Ok(entries)


def migrate(old_format_bytes: bytes, *, source: Path | None = None) -> Result[bytes, BookmarkParseError]:
    """Convert legacy JSON bookmarks to the current TOML format.

    Names are lower-cased; any entry that would be lost, merged or renamed
    beyond that is an error instead.
    """
    legacy = parse_legacy(old_format_bytes, source=source)
    if is_err(legacy):
        return legacy

    bookmarks: dict[str, str] = {}
    for raw_name, path in legacy.unwrap().items():
        try:
            name = normalize_bookmark_name(raw_name)
        except ValueError as exc:
            return Err(BookmarkParseError(path=source, message=f"Legacy bookmark '{raw_name}': {exc}"))
        if name in bookmarks:
            return Err(
                BookmarkParseError(
                    path=source,
                    message=f"Legacy bookmark '{raw_name}' collides with another entry after normalization.",
                )
            )
        bookmarks[name] = path

    try:
        document = BookmarkDocument(bookmarks=bookmarks)
    except ValidationError as exc:
        return Err(BookmarkParseError(path=source, message=format_validation_error("legacy bookmarks", exc)))

    return Ok(dump_document(document))


def _decode(data: bytes, source: Path | None) -> Result[str, BookmarkParseError]:
    try:
        return Ok(data.decode("utf-8"))
    except UnicodeDecodeError as exc:
        return Err(BookmarkParseError(path=source, message=f"File is not valid UTF-8: {exc}"))
