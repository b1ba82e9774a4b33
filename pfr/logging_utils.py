"""Mini README: Application-wide logging helpers for pfr.

Structure:
    * configure_root_logger - attach the stderr handler once and set the level.
    * get_logger - factory returning module loggers with baseline configuration.

Usage:
    Modules import ``get_logger`` at import time. The CLI calls
    ``configure_root_logger`` again once settings are known, which only adjusts
    the level so repeated calls never stack duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.WARNING) -> None:
    """Configure the root logger, adjusting only the level on later calls."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
