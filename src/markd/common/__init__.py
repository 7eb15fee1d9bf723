"""Common models and types used across Markd modules."""

from markd.utils import (
    AppDirectories,
    expand_directory,
    get_data_directory,
    get_global_config_root,
    resolve_working_directory,
)
from markd.utils.types import (
    AbsolutePathString,
    BookmarkName,
    JsonDict,
    check_bookmark_name,
    normalize_bookmark_name,
)

from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppInfo, AppPaths

__all__ = [
    "AbsolutePathString",
    "AppDirectories",
    "AppInfo",
    "AppPaths",
    "BookmarkName",
    "JsonDict",
    "LoggingConfig",
    "check_bookmark_name",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "expand_directory",
    "get_data_directory",
    "get_global_config_root",
    "normalize_bookmark_name",
    "resolve_working_directory",
    "setup_cli_logging",
]
