"""
Logging configuration for base16_styling.

Usage:
    from base16_styling.logging import setup_logging, get_logger

    # Once, in an application or CLI entry point
    setup_logging(level="DEBUG", console=True)

    # In any module
    logger = get_logger(__name__)
    logger.debug("Some debug message")
"""

import logging
import sys

LOGGER_NAME = "base16_styling"

_logger = logging.getLogger(LOGGER_NAME)
# Libraries stay silent unless the application configures logging
_logger.addHandler(logging.NullHandler())


def setup_logging(level="WARNING", console=False):
    """
    Configure the base16_styling logger.

    Args:
        level: Log level name ('DEBUG', 'INFO', 'WARNING', ...)
        console: If True, also log to stderr
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    if console:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(numeric_level)
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug(f"Logging configured: level={level}, console={console}")


def get_logger(name):
    """Return a logger under the package namespace."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
