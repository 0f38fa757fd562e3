"""Logging utilities for the media type registry.

Library modules only call get_logger(). configure_logging() is for
applications embedding the registry that want the standard log format.
"""

import logging
import sys


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def configure_logging(level: str = "INFO") -> None:
    """
    Configure logging for applications embedding the registry.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )
