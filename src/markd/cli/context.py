"""Per-invocation state shared by CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from markd.config import MarkdConfig
from markd.datastore import FileDataStore
from markd.settings import Settings


@dataclass(frozen=True)
class CliContext:
    settings: Settings
    config: MarkdConfig
    working_dir: Path | None = None

    @property
    def bookmarks_file(self) -> Path:
        configured = self.config.bookmarks.file
        return configured.expanduser() if configured else self.settings.default_bookmarks_file()

    @property
    def legacy_file(self) -> Path:
        configured = self.config.bookmarks.legacy_file
        return configured.expanduser() if configured else self.settings.default_legacy_file()

    def datastore(self) -> FileDataStore:
        return FileDataStore(self.bookmarks_file)


def get_cli_context(ctx: typer.Context) -> CliContext:
    obj = ctx.find_object(CliContext)
    if obj is None:  # pragma: no cover - the root callback always sets it
        raise RuntimeError("CLI context is not initialized")
    return obj
