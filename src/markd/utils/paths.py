"""Shared path discovery utilities."""

from __future__ import annotations

import os
from pathlib import Path

from .directories import AppDirectories


def get_global_config_root(directories: AppDirectories) -> Path:
    """Get global config root directory.

    Returns ~/.config/{app_name} (or XDG_CONFIG_HOME/{app_name} if set).
    """
    xdg_base = os.getenv("XDG_CONFIG_HOME")
    base_dir = Path(xdg_base).expanduser() if xdg_base else Path.home() / ".config"
    return base_dir / directories.app_name


def get_data_directory(directories: AppDirectories) -> Path:
    """Get XDG data directory.

    Returns ~/.local/share/{app_name} (or XDG_DATA_HOME/{app_name} if set).
    """
    xdg_data = os.getenv("XDG_DATA_HOME")
    base_dir = Path(xdg_data).expanduser() if xdg_data else Path.home() / ".local" / "share"
    return base_dir / directories.app_name


def resolve_working_directory(working_dir: Path | None) -> Path:
    """Return working_dir (or the cwd) as an absolute directory.

    A cwd deleted out from under the shell falls back to $PWD, then $HOME.
    """
    if working_dir is None:
        try:
            working_dir = Path.cwd()
        except OSError:
            working_dir = Path(os.environ.get("PWD") or Path.home())
    base = working_dir
    if base.is_file():
        base = base.parent
    try:
        return base.resolve(strict=False)
    except OSError:
        return base


def expand_directory(path: str | os.PathLike[str], base: Path) -> Path:
    """Expand ~ and resolve path against base without requiring it to exist."""
    candidate = Path(path).expanduser()
    if not candidate.is_absolute():
        candidate = base / candidate
    try:
        return candidate.resolve(strict=False)
    except OSError:
        return Path(os.path.abspath(candidate))
