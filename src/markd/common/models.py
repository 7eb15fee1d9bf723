"""Common models used across Markd."""

from typing import Literal

from pydantic import BaseModel

from markd.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.3.0"
    environment: Literal["test", "dev", "prod"] = "prod"


class AppPaths(BaseModel):
    app_dir_name: str = APP_NAME
    bookmarks_filename: str = "bookmarks.toml"
    legacy_filename: str = "dirs.json"
    config_filename: str = "config.yaml"
    log_filename: str = f"{APP_NAME}.log"
