"""Root logger setup for the ``timext`` command line."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .cli import CliConfig

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(config: CliConfig, *, force: bool = False) -> None:
    """Send log records to stderr at ``config.log_level``.

    Results go to stdout, so logging never mixes with them. ``force`` replaces
    handlers installed earlier in the process.
    """

    logging.basicConfig(
        level=config.log_level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
    logging.getLogger(__name__).debug(
        "Logging configured at %s", logging.getLevelName(config.log_level)
    )
