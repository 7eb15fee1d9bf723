"""Loguru setup for markd.

The CLI logs to a rotating file only. stdout belongs to `markd get`, whose
output the shell feeds straight into `cd`, and stderr carries the error and
hint lines meant for people, so no handler here targets either by default.

Imported as a library, markd stays silent until `markd.enable_logging()`.
"""

import sys
from pathlib import Path
from typing import Any, Literal, TypeAlias

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from markd.constants import APP_NAME

from .models import AppInfo

LogLevel: TypeAlias = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

_TEXT_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[scope]: <10} | {message} | {extra}\n{exception}"
)


class LoggingConfig(BaseModel):
    """The `logging:` section of config.yaml."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True)
    log_level: LogLevel = Field(default="INFO")
    log_file: Path | None = Field(default=None)
    rotation: str = Field(default="1 MB")
    retention: str = Field(default="7 days")
    format: Literal["json", "text"] = Field(default="text")

    def resolve_log_file(self, default: Path) -> Path:
        return self.log_file.expanduser() if self.log_file else default


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig, default_log_file: Path) -> int:
    """Send markd's records to the log file and return the handler id.

    Raises OSError when the log directory cannot be created.
    """
    log_file = config.resolve_log_file(default_log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment, "version": app_info.version})

    sink_options: dict[str, Any] = {"serialize": True} if config.format == "json" else {"format": _TEXT_FORMAT}
    handler_id = logger.add(
        log_file,
        level=config.log_level,
        rotation=config.rotation,
        retention=config.retention,
        encoding="utf-8",
        diagnose=(app_info.environment == "dev"),
        **sink_options,
    )

    logger.debug("CLI logging initialized", log_file=str(log_file), level=config.log_level, format=config.format)
    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: LogLevel = "INFO") -> int:
    """Re-enable markd's records for embedding applications, on stderr."""
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "library"})
    return logger.add(sys.stderr, level=level, format=_TEXT_FORMAT, colorize=False)


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)
