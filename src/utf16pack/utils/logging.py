"""Logging setup shared by the CLI and library callers."""

from __future__ import annotations

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..exceptions import ConfigurationError

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ENV = "UTF16PACK_LOG_LEVEL"
PACKAGE_LOGGER = "utf16pack"


def resolve_log_level(level: Optional[str] = None) -> int:
    """Turn *level*, ``$UTF16PACK_LOG_LEVEL`` or the default into a numeric level."""

    name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ConfigurationError(f"Unknown log level {name!r}")
    return value


def configure_logging(level: Optional[str] = None) -> int:
    """Send utf16pack log records to stderr through ``rich`` and return the level used."""

    log_level = resolve_log_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
        logger.propagate = False
    return log_level
