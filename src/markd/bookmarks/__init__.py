"""Bookmark store: named directories persisted to a single TOML file."""

from .codec import dump_document, migrate, parse_document, parse_legacy
from .migration import migrate_store
from .models import (
    Bookmark,
    BookmarkDocument,
    BookmarkDuplicateNameError,
    BookmarkError,
    BookmarkInvalidNameError,
    BookmarkInvalidPathError,
    BookmarkIOError,
    BookmarkMigrationError,
    BookmarkNotFoundError,
    BookmarkParseError,
    PurgeReport,
)
from .store import BookmarkStore

__all__ = [
    "Bookmark",
    "BookmarkDocument",
    "BookmarkDuplicateNameError",
    "BookmarkError",
    "BookmarkIOError",
    "BookmarkInvalidNameError",
    "BookmarkInvalidPathError",
    "BookmarkMigrationError",
    "BookmarkNotFoundError",
    "BookmarkParseError",
    "BookmarkStore",
    "PurgeReport",
    "dump_document",
    "migrate",
    "migrate_store",
    "parse_document",
    "parse_legacy",
]
