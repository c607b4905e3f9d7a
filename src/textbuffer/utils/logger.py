"""Minimal logging utilities for textbuffer.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from textbuffer.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Shared buffer allocated")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "textbuffer." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'textbuffer.mymodule'
    """
    if not (name == "textbuffer" or name.startswith("textbuffer.")):
        name = f"textbuffer.{name}"
    return logging.getLogger(name)
