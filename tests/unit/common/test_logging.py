from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from markd.common import AppInfo, LoggingConfig, create_logger, disable_library_logging, setup_cli_logging


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    yield
    logger.remove()
    disable_library_logging()


def test_text_log_goes_to_default_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "markd.log"

    setup_cli_logging(AppInfo(), LoggingConfig(), default_log_file=log_file)
    create_logger("bookmarks").info("Bookmark added", name="src")
    logger.complete()

    text = log_file.read_text(encoding="utf-8")
    assert "Bookmark added" in text
    assert "bookmarks" in text


def test_configured_log_file_wins(tmp_path: Path) -> None:
    configured = tmp_path / "elsewhere.log"
    config = LoggingConfig(log_file=configured)

    setup_cli_logging(AppInfo(), config, default_log_file=tmp_path / "default.log")
    create_logger("cli").warning("hello")

    assert configured.exists()
    assert not (tmp_path / "default.log").exists()


def test_json_format_serializes_records(tmp_path: Path) -> None:
    log_file = tmp_path / "markd.log"

    setup_cli_logging(AppInfo(), LoggingConfig(format="json"), default_log_file=log_file)
    create_logger("datastore").error("Data file write error", path="/x")

    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    last = records[-1]["record"]
    assert last["message"] == "Data file write error"
    assert last["extra"]["scope"] == "datastore"
    assert last["extra"]["path"] == "/x"


def test_level_filters_records(tmp_path: Path) -> None:
    log_file = tmp_path / "markd.log"

    setup_cli_logging(AppInfo(), LoggingConfig(log_level="WARNING"), default_log_file=log_file)
    create_logger("bookmarks").info("quiet")
    create_logger("bookmarks").warning("loud")

    text = log_file.read_text(encoding="utf-8")
    assert "quiet" not in text
    assert "loud" in text


def test_log_level_is_validated() -> None:
    with pytest.raises(ValueError):
        LoggingConfig.model_validate({"log_level": "LOUD"})
