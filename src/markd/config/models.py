"""Pydantic models for Markd configuration and its errors."""

from __future__ import annotations

from pathlib import Path
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from markd.common import LoggingConfig


class ConfigYamlError(BaseModel):
    """YAML parsing error in configuration file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """Schema validation error in configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path | None = None
    field: str | None = None
    message: str


class ConfigIOError(BaseModel):
    """File I/O error reading configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


ConfigError: TypeAlias = ConfigYamlError | ConfigValidationError | ConfigIOError


class BookmarksConfig(BaseModel):
    """Where bookmarks live and how `get` behaves by default."""

    model_config = ConfigDict(extra="forbid")

    file: Path | None = None
    legacy_file: Path | None = None
    failsafe: bool = False


class MarkdConfig(BaseModel):
    """User configuration (~/.config/markd/config.yaml)."""

    model_config = ConfigDict(extra="allow")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    bookmarks: BookmarksConfig = Field(default_factory=BookmarksConfig)
