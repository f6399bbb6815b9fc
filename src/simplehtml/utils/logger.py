"""Minimal logging utilities for simplehtml.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from simplehtml.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Opening <p>")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "simplehtml." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'simplehtml.mymodule'
    """
    if not (name == "simplehtml" or name.startswith("simplehtml.")):
        name = f"simplehtml.{name}"
    return logging.getLogger(name)
