"""Logging configuration and utilities."""

import logging
import sys
from pathlib import Path

ROOT_LOGGER = "screen_guard"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: str | int) -> int:
    """Translate a level name or number into a logging level.

    Raises:
        ValueError: If the name is not a standard level
    """
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level: str | int = "INFO", log_file: str | None = None) -> logging.Logger:
    """Configure logging for the screen_guard namespace.

    Calling this again replaces the previous handlers, so the CLI and tests
    can reconfigure freely.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL) or number
        log_file: Optional path to log file

    Returns:
        The configured package logger
    """
    log_level = _resolve_level(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    package_logger = logging.getLogger(ROOT_LOGGER)
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the screen_guard namespace.

    Args:
        name: Module name (typically __name__)
    """
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
