"""Errors raised by whole-file stores."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class DataStoreError(BaseModel):
    """A store file could not be read or replaced."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


class DataStoreReadError(DataStoreError):
    """The file exists but its bytes could not be read."""


class DataStoreWriteError(DataStoreError):
    """The replacement file could not be written or moved into place."""
