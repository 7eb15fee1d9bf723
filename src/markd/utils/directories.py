"""Names of the per-user directories markd keeps its files in."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppDirectories:
    """Directory naming under the XDG base directories.

    - $XDG_CONFIG_HOME/{app_name}/ holds config.yaml
    - $XDG_DATA_HOME/{app_name}/ holds the bookmarks file
    - $XDG_DATA_HOME/{app_name}/{logs_dir_name}/ holds the CLI log
    """

    app_name: str = "markd"
    logs_dir_name: str = "logs"
