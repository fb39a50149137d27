# MIT License (see LICENSE)
"""
Logging configuration for the ``field_explorer`` logger.

Library modules only create module loggers; hosts call setup_logging()
once to attach handlers. The level can be given explicitly or through the
FIELD_EXPLORER_LOG_LEVEL environment variable ("DEBUG", "INFO", ...).
"""
from __future__ import annotations
import logging
import os
import sys

LOGGER_NAME = "field_explorer"
LEVEL_ENV_VAR = "FIELD_EXPLORER_LOG_LEVEL"


def level_from_env(default: int = logging.INFO) -> int:
    """Resolve the log level from the environment, falling back to default."""
    name = os.environ.get(LEVEL_ENV_VAR, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logging(level: int | None = None, log_file: str | None = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level; defaults to the environment or INFO.
        log_file: Optional path to also write logs to.

    Returns:
        The configured ``field_explorer`` logger.
    """
    if level is None:
        level = level_from_env()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # avoid duplicate handlers when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
