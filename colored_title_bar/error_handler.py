"""Custom exceptions and logging setup."""

import logging
import sys


class ColoredTitleBarError(Exception):
    """Base exception for colored-title-bar."""


class InvalidColorError(ColoredTitleBarError, ValueError):
    """A hex color string could not be parsed."""


class SettingsError(ColoredTitleBarError):
    """A settings, state or color file could not be read."""


def setup_logging(verbose=False):
    """Configure the package logger.

    Args:
        verbose: Log DEBUG messages instead of WARNING and above

    Returns:
        The configured ``colored_title_bar`` logger
    """
    logger = logging.getLogger("colored_title_bar")
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    # Repeated calls only adjust the level
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(console)

    return logger
