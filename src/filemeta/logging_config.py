"""Logging setup for the filemeta command line."""

import logging
import os
import sys

from filemeta.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(name: str = "filemeta", log_level: str | None = None) -> logging.Logger:
    """Set up logging for the given logger hierarchy.

    Args:
        name: Logger name, ``filemeta`` covers every module of the package
        log_level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to the
            FILEMETA_LOG_LEVEL environment variable or WARNING

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)

    level = getattr(logging, log_level.upper(), logging.WARNING)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.addHandler(handler)
    logger.propagate = False

    return logger
