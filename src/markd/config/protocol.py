"""Configuration storage protocol."""

from pathlib import Path
from typing import Protocol

from result import Result

from .models import ConfigError, MarkdConfig


class ConfigStore(Protocol):
    """Source of the user's MarkdConfig."""

    @property
    def path(self) -> Path: ...

    def load(self) -> Result[MarkdConfig, ConfigError]:
        """Return the config with MARKD_CONFIG__* overrides applied.

        A missing file is Ok with defaults; a present but broken one is Err.
        """
        ...
