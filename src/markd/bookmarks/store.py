"""In-memory bookmark store backed by a single file."""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Self

from result import Err, Ok, Result, is_err

from markd.common import create_logger, expand_directory, normalize_bookmark_name, resolve_working_directory
from markd.datastore import DataStore

from .codec import dump_document, parse_document
from .models import (
    Bookmark,
    BookmarkDocument,
    BookmarkDuplicateNameError,
    BookmarkError,
    BookmarkInvalidNameError,
    BookmarkInvalidPathError,
    BookmarkIOError,
    BookmarkNotFoundError,
    PurgeReport,
)

logger = create_logger("bookmarks")


class BookmarkStore:
    """Name to directory mapping for one process run.

    Open it, apply one operation, `persist()` if `dirty`, discard it.
    Every name is stored lowercase and every path absolute and resolved.
    """

    def __init__(
        self,
        datastore: DataStore,
        bookmarks: Mapping[str, Path] | None = None,
        clip: Path | None = None,
        *,
        working_dir: Path | None = None,
    ) -> None:
        self._datastore = datastore
        self._bookmarks: dict[str, Path] = dict(bookmarks or {})
        self._clip = clip
        self._dirty = False
        self.working_dir = resolve_working_directory(working_dir)

    @classmethod
    def open(cls, datastore: DataStore, *, working_dir: Path | None = None) -> Result[Self, BookmarkError]:
        """Read and parse the backing file; a missing file is an empty store."""
        logger.debug("Opening bookmarks", path=str(datastore.path))

        read_result = datastore.read().map_err(
            lambda error: BookmarkIOError(path=error.path, message=error.message),
        )
        if is_err(read_result):
            return read_result

        raw = read_result.unwrap()
        if raw is None:
            return Ok(cls(datastore, working_dir=working_dir))

        parsed = parse_document(raw, source=datastore.path)
        if is_err(parsed):
            logger.error("Bookmarks file is corrupt", path=str(datastore.path), error=parsed.unwrap_err().message)
            return parsed

        document = parsed.unwrap()
        return Ok(
            cls(
                datastore,
                {name: Path(path) for name, path in document.bookmarks.items()},
                Path(document.clip) if document.clip is not None else None,
                working_dir=working_dir,
            )
        )

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def clip(self) -> Path | None:
        return self._clip

    @property
    def bookmarks(self) -> dict[str, Path]:
        return dict(self._bookmarks)

    def __len__(self) -> int:
        return len(self._bookmarks)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._bookmarks

    def add(
        self,
        path: str | os.PathLike[str] | None = None,
        *,
        alias: str | None = None,
    ) -> Result[Bookmark, BookmarkError]:
        """Bookmark a directory under its basename, or under alias when given."""
        directory = self._validate_directory(path)
        if is_err(directory):
            return directory
        resolved = directory.unwrap()

        raw_name = alias if alias is not None else resolved.name
        try:
            name = normalize_bookmark_name(raw_name)
        except ValueError as exc:
            hint = "" if alias is not None else " (use an alias)"
            return Err(
                BookmarkInvalidNameError(name=raw_name, message=f"Invalid bookmark name '{raw_name}': {exc}{hint}")
            )

        existing = self._bookmarks.get(name)
        if existing is not None:
            return Err(
                BookmarkDuplicateNameError(
                    name=name,
                    existing_path=existing,
                    message=f"'{name}' is already bookmarked as {existing}",
                )
            )

        self._bookmarks[name] = resolved
        self._dirty = True
        logger.info("Bookmark added", name=name, path=str(resolved))
        return Ok(Bookmark(name=name, path=resolved))

    def remove(self, name: str) -> Result[Bookmark, BookmarkError]:
        key = name.strip().lower()
        path = self._bookmarks.pop(key, None)
        if path is None:
            return Err(BookmarkNotFoundError(name=key, message=f"'{key}' is not in bookmarks"))

        self._dirty = True
        logger.info("Bookmark removed", name=key, path=str(path))
        return Ok(Bookmark(name=key, path=path))

    def get(self, name: str = "", *, failsafe: bool = False) -> Result[Path, BookmarkError]:
        """Look up a bookmark; an empty name means the clip slot.

        With failsafe, any miss resolves to the working directory so a shell
        `cd` becomes a no-op instead of a jump somewhere unexpected.
        """
        key = name.strip().lower()
        result = self._lookup(key)

        if is_err(result) and failsafe:
            logger.warning(
                "Lookup failed, falling back to working directory",
                name=key,
                reason=result.unwrap_err().message,
            )
            return Ok(self.working_dir)

        return result

    def list(
        self,
        filter: str | None = None,
        start: str | None = None,
        end: str | None = None,
    ) -> Iterator[Bookmark]:
        """Lazily yield bookmarks in name order matching every given filter.

        filter matches a substring of name or path, case-insensitively.
        start and end bound the name inclusively.
        """
        needle = filter.lower() if filter else None
        low = start.strip().lower() if start else None
        high = end.strip().lower() if end else None

        for name in sorted(self._bookmarks):
            if low is not None and name < low:
                continue
            if high is not None and name > high:
                # sorted, nothing further can match
                return
            path = self._bookmarks[name]
            if needle is not None and needle not in name and needle not in str(path).lower():
                continue
            yield Bookmark(name=name, path=path)

    def purge(self) -> PurgeReport:
        """Drop every bookmark (and the clip) whose path is not an existing directory."""
        removed = [
            Bookmark(name=name, path=path) for name, path in sorted(self._bookmarks.items()) if not path.is_dir()
        ]
        for bookmark in removed:
            del self._bookmarks[bookmark.name]

        stale_clip = self._clip if self._clip is not None and not self._clip.is_dir() else None
        if stale_clip is not None:
            self._clip = None

        report = PurgeReport(removed=removed, clip=stale_clip)
        if report.count:
            self._dirty = True
            logger.info("Purged bookmarks", count=report.count, names=[b.name for b in removed])
        return report

    def set_clip(self, path: str | os.PathLike[str] | None = None) -> Result[Path, BookmarkError]:
        directory = self._validate_directory(path)
        if is_err(directory):
            return directory

        self._clip = directory.unwrap()
        self._dirty = True
        logger.info("Clip set", path=str(self._clip))
        return Ok(self._clip)

    def clear_clip(self) -> Result[Path, BookmarkError]:
        if self._clip is None:
            return Err(BookmarkNotFoundError(name="", message="clip is empty"))

        cleared, self._clip = self._clip, None
        self._dirty = True
        logger.info("Clip cleared", path=str(cleared))
        return Ok(cleared)

    def persist(self) -> Result[None, BookmarkError]:
        """Rewrite the whole backing file atomically."""
        document = BookmarkDocument(
            clip=str(self._clip) if self._clip is not None else None,
            bookmarks={name: str(path) for name, path in self._bookmarks.items()},
        )
        result = self._datastore.write(dump_document(document)).map_err(
            lambda error: BookmarkIOError(path=error.path, message=error.message),
        )
        if is_err(result):
            return result

        self._dirty = False
        logger.debug("Bookmarks persisted", path=str(self._datastore.path), count=len(self._bookmarks))
        return Ok(None)

    def _lookup(self, key: str) -> Result[Path, BookmarkError]:
        if key:
            path = self._bookmarks.get(key)
            label = f"'{key}'"
        else:
            path = self._clip
            label = "clip"

        if path is None:
            message = "clip is empty" if not key else f"{label} is not in bookmarks"
            return Err(BookmarkNotFoundError(name=key, message=message))
        if not path.is_dir():
            message = f"{label} points to {path}, which is no longer a directory"
            return Err(BookmarkNotFoundError(name=key, message=message))
        return Ok(path)

    def _validate_directory(self, path: str | os.PathLike[str] | None) -> Result[Path, BookmarkError]:
        resolved = self.working_dir if path is None else expand_directory(path, self.working_dir)

        if not resolved.exists():
            return Err(BookmarkInvalidPathError(path=resolved, message=f"{resolved} does not exist"))
        if not resolved.is_dir():
            return Err(BookmarkInvalidPathError(path=resolved, message=f"{resolved} is not a directory"))
        try:
            str(resolved).encode("utf-8")
        except UnicodeEncodeError:
            # the bookmarks file is UTF-8 TOML and cannot hold undecodable name bytes
            printable = os.fsencode(resolved).decode("utf-8", "backslashreplace")
            message = f"{printable} is not valid UTF-8 and cannot be stored"
            return Err(BookmarkInvalidPathError(path=resolved, message=message))
        return Ok(resolved)

