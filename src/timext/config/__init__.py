"""Application configuration helpers."""

from __future__ import annotations

from .cli import LOG_LEVEL_ENV, SATURATE_ENV, CliConfig, get_cli_config
from .env import env_bool, env_log_level
from .errors import ConfigurationError
from .logging import configure_logging

__all__ = [
    "LOG_LEVEL_ENV",
    "SATURATE_ENV",
    "CliConfig",
    "ConfigurationError",
    "configure_logging",
    "env_bool",
    "env_log_level",
    "get_cli_config",
]
