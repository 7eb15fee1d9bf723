from .directories import AppDirectories
from .paths import expand_directory, get_data_directory, get_global_config_root, resolve_working_directory

__all__ = [
    "AppDirectories",
    "expand_directory",
    "get_data_directory",
    "get_global_config_root",
    "resolve_working_directory",
]
