"""Environment variable resolution helpers for configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result

from markd.common import JsonDict
from markd.constants import ENV_PREFIX
from markd.utils.dicts import deep_merge, set_nested
from markd.utils.validation import first_error_location

from .models import ConfigValidationError, MarkdConfig


def apply_env_overrides(
    config: MarkdConfig,
    environ: Mapping[str, str] | None = None,
) -> Result[MarkdConfig, ConfigValidationError]:
    """Apply MARKD_CONFIG__SECTION__KEY overrides to config."""
    override_data: JsonDict = {}
    source = os.environ if environ is None else environ

    for key, value in source.items():
        if not key.upper().startswith(ENV_PREFIX):
            continue
        path = key[len(ENV_PREFIX) :].strip("_")
        if not path:
            continue
        segments = [segment.lower() for segment in path.split("__") if segment]
        set_nested(override_data, segments, _parse_env_value(value))

    if not override_data:
        return Ok(config)

    merged = deep_merge(config.model_dump(), override_data)
    try:
        return Ok(MarkdConfig.model_validate(merged))
    except ValidationError as exc:
        details = exc.errors()
        return Err(
            ConfigValidationError(
                field=first_error_location(exc),
                message=f"Invalid environment override: {details[0]['msg'] if details else exc}",
            )
        )


def _parse_env_value(raw: str) -> object:
    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    return parsed
