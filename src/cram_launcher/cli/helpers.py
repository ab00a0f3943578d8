"""Support routines for the launcher CLI."""

from __future__ import annotations

import logging
import sys

from cram_launcher.config.settings import LoggingConfig
from cram_launcher.utilities.logger_manager import LoggerConfig, LoggerManager

BOOTSTRAP_LOGGER_NAME = "cram_launcher.bootstrap"


def bootstrap_logger() -> logging.Logger:
    """Plain stderr logger used until the config file has been read."""
    logger = logging.getLogger(BOOTSTRAP_LOGGER_NAME)
    logger.setLevel(logging.INFO)
    for stale in list(logger.handlers):
        logger.removeHandler(stale)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def configure_logging(
    settings: LoggingConfig, *, log_level: str | None = None
) -> LoggerManager:
    """Build the LoggerManager described by the ``logging`` config section."""
    return LoggerManager(
        LoggerConfig(
            log_dir=settings.log_dir,
            log_level=log_level or settings.log_level,
            log_file_name=settings.log_file_name,
            structured_logging=settings.structured_logging,
            file_logging=settings.file_logging,
        )
    )
