"""Environment variable loaders for configuration."""

from __future__ import annotations

import logging
import os
from typing import Final

from .errors import ConfigurationError

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSY: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def env_bool(name: str, *, default: bool) -> bool:
    """Read a boolean flag; blank or unset values fall back to ``default``."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {raw!r}")


def env_log_level(name: str, *, default: int) -> int:
    """Read a logging level given either by name (``DEBUG``) or number (``10``)."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelNamesMapping().get(value.upper())
    if level is None:
        raise ConfigurationError(f"Invalid log level for {name}: {raw!r}")
    return level
