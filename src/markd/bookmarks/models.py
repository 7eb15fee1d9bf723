"""Data and error models for Markd bookmarks."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from markd.common import AbsolutePathString, BookmarkName


class Bookmark(BaseModel):
    """A named directory."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: BookmarkName
    path: Path

    @field_validator("path")
    @classmethod
    def _validate_absolute(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError(f"path must be absolute: {value}")
        return value

    def to_plain(self) -> str:
        return f"{self.name}:{self.path}"


class PurgeReport(BaseModel):
    """What `purge` removed."""

    model_config = ConfigDict(frozen=True)

    removed: list[Bookmark] = Field(default_factory=list)
    clip: Path | None = None

    @property
    def count(self) -> int:
        return len(self.removed) + (1 if self.clip is not None else 0)


class BookmarkDocument(BaseModel):
    """On-disk shape of the bookmarks file.

    ```toml
    clip = "/home/me/tmp"

    [bookmarks]
    notes = "/home/me/notes"
    ```
    """

    model_config = ConfigDict(extra="forbid")

    clip: AbsolutePathString | None = None
    bookmarks: dict[BookmarkName, AbsolutePathString] = Field(default_factory=dict)

    def to_toml_dict(self) -> dict[str, object]:
        data: dict[str, object] = {}
        if self.clip is not None:
            data["clip"] = self.clip
        data["bookmarks"] = dict(sorted(self.bookmarks.items()))
        return data


class BookmarkError(BaseModel):
    """Base bookmark error."""

    model_config = ConfigDict(extra="forbid")

    message: str


class BookmarkInvalidPathError(BookmarkError):
    """Path is missing or not a directory."""

    path: Path


class BookmarkInvalidNameError(BookmarkError):
    """Name (or alias) cannot be used as a bookmark name."""

    name: str


class BookmarkDuplicateNameError(BookmarkError):
    """Name is already bookmarked."""

    name: str
    existing_path: Path


class BookmarkNotFoundError(BookmarkError):
    """No usable bookmark under that name. An empty name means the clip slot."""

    name: str


class BookmarkParseError(BookmarkError):
    """Bookmarks file (or legacy file) is malformed."""

    path: Path | None = None


class BookmarkIOError(BookmarkError):
    """Bookmarks file could not be read or written."""

    path: Path


class BookmarkMigrationError(BookmarkError):
    """Legacy migration cannot proceed (missing source, or target already has bookmarks)."""

    path: Path

