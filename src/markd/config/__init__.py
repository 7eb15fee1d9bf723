"""Public configuration API for Markd."""

from __future__ import annotations

from .file import ConfigStoreSettings, FileConfigStore
from .models import (
    BookmarksConfig,
    ConfigError,
    ConfigIOError,
    ConfigValidationError,
    ConfigYamlError,
    MarkdConfig,
)
from .protocol import ConfigStore

__all__ = [
    "BookmarksConfig",
    "ConfigError",
    "ConfigIOError",
    "ConfigStore",
    "ConfigStoreSettings",
    "ConfigValidationError",
    "ConfigYamlError",
    "FileConfigStore",
    "MarkdConfig",
]
