"""Settings for the ``timext`` command line."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from .env import env_bool, env_log_level

LOG_LEVEL_ENV: Final[str] = "TIMEXT_LOG_LEVEL"
SATURATE_ENV: Final[str] = "TIMEXT_SATURATE"


@dataclass(frozen=True, slots=True)
class CliConfig:
    log_level: int = logging.INFO
    saturate: bool = False


def get_cli_config() -> CliConfig:
    return CliConfig(
        log_level=env_log_level(LOG_LEVEL_ENV, default=logging.INFO),
        saturate=env_bool(SATURATE_ENV, default=False),
    )
