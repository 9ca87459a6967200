"""
Logging utilities for vectordist.
"""

import logging
import sys
from typing import Optional

from ..core.exceptions import ConfigurationError


# Default format
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "vectordist"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Module-level logger cache
_loggers: dict = {}


def setup_logger(
    name: str = ROOT_LOGGER,
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Set up and configure a logger.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        log_file: Optional file path for logging

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT,
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _loggers[name] = logger

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """
    Get a logger by name.

    Module loggers (``vectordist.*``) are plain children of the package
    logger and inherit its handlers and level; only the package logger
    itself is configured on first use.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if ROOT_LOGGER not in _loggers:
        setup_logger(ROOT_LOGGER)
    if name in _loggers:
        return _loggers[name]
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return setup_logger(name)


def set_level(level: str, name: str = ROOT_LOGGER) -> None:
    """
    Change the level of an already configured logger.

    Raises:
        ConfigurationError: If level is not a logging level name
    """
    if not isinstance(level, str) or level.upper() not in LEVELS:
        raise ConfigurationError(
            f"Invalid log level {level!r}. Valid options: {list(LEVELS)}"
        )
    get_logger(name).setLevel(getattr(logging, level.upper()))
