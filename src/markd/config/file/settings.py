"""Where the file config store looks for config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field

from markd.utils.directories import AppDirectories


@dataclass(frozen=True)
class ConfigStoreSettings:
    """Settings for `FileConfigStore`.

    Attributes:
        directories: XDG directory naming; the file lives in the config root
        filename: Config file name inside $XDG_CONFIG_HOME/{app_name}/
    """

    directories: AppDirectories = field(default_factory=AppDirectories)
    filename: str = "config.yaml"

    @property
    def app_name(self) -> str:
        return self.directories.app_name
