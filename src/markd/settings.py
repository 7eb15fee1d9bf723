from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from markd.common import AppDirectories, AppInfo, AppPaths, get_data_directory
from markd.config.file import ConfigStoreSettings


class Settings(BaseSettings):
    """Process-level settings, built once at startup and passed down explicitly."""

    app: AppInfo = AppInfo()
    paths: AppPaths = AppPaths()

    model_config = SettingsConfigDict(
        env_prefix="MARKD_",
        env_nested_delimiter="__",
        case_sensitive=False,
        nested_model_default_partial_update=True,
        extra="ignore",
    )

    def to_app_directories(self) -> AppDirectories:
        return AppDirectories(app_name=self.paths.app_dir_name)

    def to_config_store_settings(self) -> ConfigStoreSettings:
        return ConfigStoreSettings(
            directories=self.to_app_directories(),
            filename=self.paths.config_filename,
        )

    def default_bookmarks_file(self) -> Path:
        return get_data_directory(self.to_app_directories()) / self.paths.bookmarks_filename

    def default_legacy_file(self) -> Path:
        return Path.home() / self.paths.legacy_filename

    def default_log_file(self) -> Path:
        directories = self.to_app_directories()
        return get_data_directory(directories) / directories.logs_dir_name / self.paths.log_filename


__all__ = [
    "AppInfo",
    "AppPaths",
    "Settings",
]
