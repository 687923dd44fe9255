"""
Logging helpers for Kalkulator Pajak.

All loggers hang below the ``kalkulator_pajak`` package logger, which owns the
single console handler. Reports are written to stdout, log records to stderr.

Usage:
    from kalkulator_pajak.helpers import get_logger

    logger = get_logger("my_module")
    logger.info("This is an info message")
"""

import logging
from typing import Union

PACKAGE_LOGGER = "kalkulator_pajak"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def get_logger(name: str, fallback_level: int = logging.WARNING) -> logging.Logger:
    """
    Get a logger under the package namespace.

    The package logger is configured on first use with a StreamHandler and
    ``fallback_level``; later calls leave an existing configuration alone.

    Args:
        name: The name of the logger, typically the module name
        fallback_level: Level for the package logger when it has no handler yet
    Returns:
        logging.Logger: A configured logger instance
    """
    if name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}."):
        logger_name = name
    else:
        logger_name = f"{PACKAGE_LOGGER}.{name}"

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        package_logger.setLevel(fallback_level)

        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

    return logging.getLogger(logger_name)


def set_log_level(level: Union[int, str]) -> None:
    """Change the level of the package logger, e.g. ``"DEBUG"`` or ``logging.INFO``."""
    if isinstance(level, str):
        level = level.upper()
    get_logger(PACKAGE_LOGGER).setLevel(level)
