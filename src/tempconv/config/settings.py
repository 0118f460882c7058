"""Runtime configuration for the tempconv command line"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TEMPCONV_CONFIG"
LOG_LEVEL_ENV_VAR = "TEMPCONV_LOG_LEVEL"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class TempconvConfig(BaseModel):
    """Settings that shape output and diagnostics"""
    quote_error_messages: bool = Field(
        True,
        description="Wrap ParseError messages in double quotes, as existing consumers expect"
    )
    log_level: str = Field("WARNING", description="Level of diagnostics written to stderr")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level


def load_config(path: Optional[Union[str, Path]] = None) -> TempconvConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Config file; falls back to the TEMPCONV_CONFIG environment variable

    Returns:
        TempconvConfig, with defaults when no file is configured

    Raises:
        FileNotFoundError: If the configured file does not exist
        ValueError: If the file is not a YAML mapping or holds invalid settings
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    data = {}

    if path:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(config_path, 'r', encoding='utf-8') as file:
            try:
                data = yaml.safe_load(file) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        logger.debug(f"[config] Loaded {len(data)} setting(s) from {path}")

    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        data["log_level"] = env_level

    try:
        return TempconvConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
