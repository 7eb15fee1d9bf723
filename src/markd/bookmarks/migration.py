"""Explicit, user-invoked conversion of the legacy bookmarks file."""

from __future__ import annotations

from result import Err, Ok, Result, is_err

from markd.common import create_logger
from markd.datastore import DataStore

from .codec import migrate, parse_document
from .models import BookmarkError, BookmarkIOError, BookmarkMigrationError

logger = create_logger("migration")


def migrate_store(legacy: DataStore, target: DataStore, *, force: bool = False) -> Result[int, BookmarkError]:
    """Convert legacy into target and return how many bookmarks were written.

    Refuses to replace a target that already holds bookmarks (or cannot be
    parsed) unless force is set. The legacy file is left untouched.
    """
    logger.info("Migrating bookmarks", source=str(legacy.path), target=str(target.path), force=force)

    legacy_result = legacy.read().map_err(lambda error: BookmarkIOError(path=error.path, message=error.message))
    if is_err(legacy_result):
        return legacy_result

    legacy_bytes = legacy_result.unwrap()
    if legacy_bytes is None:
        return Err(BookmarkMigrationError(path=legacy.path, message=f"No legacy bookmarks file at {legacy.path}"))

    if not force:
        guard = _ensure_target_is_empty(target)
        if is_err(guard):
            return guard

    converted = migrate(legacy_bytes, source=legacy.path)
    if is_err(converted):
        return converted

    data = converted.unwrap()
    count = len(parse_document(data).unwrap().bookmarks)

    return (
        target.write(data)
        .map_err(lambda error: BookmarkIOError(path=error.path, message=error.message))
        .map(lambda _: count)
        .inspect(lambda written: logger.success("Migration complete", count=written, target=str(target.path)))
    )


def _ensure_target_is_empty(target: DataStore) -> Result[None, BookmarkError]:
    current = target.read().map_err(lambda error: BookmarkIOError(path=error.path, message=error.message))
    if is_err(current):
        return current

    raw = current.unwrap()
    if raw is None:
        return Ok(None)

    parsed = parse_document(raw, source=target.path)
    if is_err(parsed):
        return Err(
            BookmarkMigrationError(
                path=target.path,
                message=f"{target.path} exists but cannot be parsed ({parsed.unwrap_err().message})",
            )
        )

    document = parsed.unwrap()
    if document.bookmarks or document.clip is not None:
        return Err(
            BookmarkMigrationError(
                path=target.path,
                message=f"{target.path} already contains {len(document.bookmarks)} bookmark(s)",
            )
        )
    return Ok(None)
