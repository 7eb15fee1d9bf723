"""File-based configuration store implementation."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result

from markd.common import create_logger, get_global_config_root
from markd.utils.validation import first_error_location

from ..models import ConfigError, ConfigIOError, ConfigValidationError, ConfigYamlError, MarkdConfig
from ..protocol import ConfigStore
from ..resolver import apply_env_overrides
from .settings import ConfigStoreSettings

logger = create_logger("config")


class FileConfigStore(ConfigStore):
    def __init__(
        self,
        settings: ConfigStoreSettings,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.settings = settings
        self._environ = environ

    @property
    def path(self) -> Path:
        return get_global_config_root(self.settings.directories) / self.settings.filename

    def load(self) -> Result[MarkdConfig, ConfigError]:
        path = self.path
        logger.debug("Loading config", path=str(path))

        return (
            self._load_file(path)
            .and_then(lambda config: apply_env_overrides(config, self._environ))
            .inspect_err(lambda error: logger.error("Config load failed", error=error.message))
        )

    def _load_file(self, path: Path) -> Result[MarkdConfig, ConfigError]:
        """Load and validate config from YAML file; a missing file means defaults."""
        if not path.exists():
            logger.debug("Config file not found, using defaults", path=str(path))
            return Ok(MarkdConfig())

        try:
            raw_text = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Config file read error", path=str(path), error=str(exc))
            return Err(ConfigIOError(path=path, message=str(exc)))

        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            line = getattr(mark, "line", None)
            column = getattr(mark, "column", None)
            logger.error("Config YAML parse error", path=str(path), line=line, column=column, error=str(exc))
            return Err(
                ConfigYamlError(
                    path=path,
                    line=(line + 1) if line is not None else None,
                    column=(column + 1) if column is not None else None,
                    message=str(exc),
                ),
            )

        if data is None:
            data = {}

        if not isinstance(data, dict):
            logger.error("Config must be a mapping", path=str(path))
            return Err(
                ConfigValidationError(
                    path=path,
                    message="Configuration root must be a mapping of keys to values.",
                ),
            )

        try:
            model = MarkdConfig.model_validate(data)
        except ValidationError as exc:
            details = exc.errors()
            field = first_error_location(exc)
            message = details[0].get("msg", str(exc)) if details else str(exc)
            logger.error("Config validation error", path=str(path), field=field, error=message)
            return Err(ConfigValidationError(path=path, field=field, message=message))

        logger.debug("Config validated", path=str(path))
        return Ok(model)
