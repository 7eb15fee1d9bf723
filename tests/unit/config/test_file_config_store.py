from __future__ import annotations

from pathlib import Path

import pytest
from result import is_err, is_ok

from markd.config import ConfigValidationError, ConfigYamlError, FileConfigStore, MarkdConfig
from markd.config.file import ConfigStoreSettings
from markd.utils.directories import AppDirectories


@pytest.fixture
def store() -> FileConfigStore:
    settings = ConfigStoreSettings(directories=AppDirectories(app_name="markd"))
    return FileConfigStore(settings=settings, environ={})


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_path_follows_xdg_config_home(store: FileConfigStore, isolated_env: dict[str, Path]) -> None:
    assert store.path == isolated_env["XDG_CONFIG_HOME"] / "markd" / "config.yaml"


def test_missing_file_yields_defaults(store: FileConfigStore) -> None:
    result = store.load()

    assert is_ok(result)
    assert result.unwrap() == MarkdConfig()


def test_empty_file_yields_defaults(store: FileConfigStore) -> None:
    _write(store.path, "")

    assert store.load().unwrap() == MarkdConfig()


def test_loads_yaml_file(store: FileConfigStore) -> None:
    _write(
        store.path,
        """
logging:
  log_level: DEBUG
  format: json
bookmarks:
  file: ~/marks.toml
  failsafe: true
""",
    )

    config = store.load().unwrap()

    assert config.logging.log_level == "DEBUG"
    assert config.logging.format == "json"
    assert config.bookmarks.file == Path("~/marks.toml")
    assert config.bookmarks.failsafe is True


def test_unknown_top_level_sections_are_kept(store: FileConfigStore) -> None:
    _write(store.path, "extras:\n  colour: blue\n")

    config = store.load().unwrap()

    assert config.model_extra == {"extras": {"colour": "blue"}}


def test_yaml_error_reports_line(store: FileConfigStore) -> None:
    _write(store.path, "bookmarks:\n  failsafe: [true\n")

    result = store.load()

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, ConfigYamlError)
    assert error.path == store.path
    assert error.line is not None


def test_non_mapping_root_is_rejected(store: FileConfigStore) -> None:
    _write(store.path, "- one\n- two\n")

    error = store.load().unwrap_err()

    assert isinstance(error, ConfigValidationError)
    assert "mapping" in error.message


def test_validation_error_reports_field(store: FileConfigStore) -> None:
    _write(store.path, "logging:\n  log_level: LOUD\n")

    error = store.load().unwrap_err()

    assert isinstance(error, ConfigValidationError)
    assert error.field == "logging.log_level"
    assert error.path == store.path


def test_unknown_bookmarks_key_is_rejected(store: FileConfigStore) -> None:
    _write(store.path, "bookmarks:\n  colour: blue\n")

    error = store.load().unwrap_err()

    assert isinstance(error, ConfigValidationError)
    assert error.field == "bookmarks.colour"


def test_env_overrides_win_over_file() -> None:
    settings = ConfigStoreSettings()
    store = FileConfigStore(settings=settings, environ={"MARKD_CONFIG__BOOKMARKS__FAILSAFE": "true"})
    _write(store.path, "bookmarks:\n  failsafe: false\n")

    assert store.load().unwrap().bookmarks.failsafe is True


def test_env_overrides_read_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARKD_CONFIG__LOGGING__ENABLED", "false")
    store = FileConfigStore(settings=ConfigStoreSettings())

    assert store.load().unwrap().logging.enabled is False
