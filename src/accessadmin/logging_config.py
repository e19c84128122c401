"""Logging setup for the accessadmin package."""

import logging
import sys

LOGGER_NAME = "accessadmin"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO, stream=None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling it again replaces the handler instead of stacking a new one,
    so both the CLI and the server can call it on startup.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level
        stream: Output stream (default: stderr)

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger
