from __future__ import annotations

from pathlib import Path

import pytest

from markd.settings import Settings


def test_default_locations_follow_xdg(isolated_env: dict[str, Path]) -> None:
    settings = Settings()

    assert settings.default_bookmarks_file() == isolated_env["XDG_DATA_HOME"] / "markd" / "bookmarks.toml"
    assert settings.default_log_file() == isolated_env["XDG_DATA_HOME"] / "markd" / "logs" / "markd.log"
    assert settings.default_legacy_file() == isolated_env["HOME"] / "dirs.json"


def test_config_store_settings_use_config_filename() -> None:
    store_settings = Settings().to_config_store_settings()

    assert store_settings.app_name == "markd"
    assert store_settings.filename == "config.yaml"


def test_environment_overrides_nested_paths(monkeypatch: pytest.MonkeyPatch, isolated_env: dict[str, Path]) -> None:
    monkeypatch.setenv("MARKD_PATHS__BOOKMARKS_FILENAME", "marks.toml")
    monkeypatch.setenv("MARKD_APP__ENVIRONMENT", "dev")

    settings = Settings()

    assert settings.paths.bookmarks_filename == "marks.toml"
    assert settings.paths.config_filename == "config.yaml"
    assert settings.app.environment == "dev"
    assert settings.default_bookmarks_file() == isolated_env["XDG_DATA_HOME"] / "markd" / "marks.toml"
