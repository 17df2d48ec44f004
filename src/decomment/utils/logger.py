"""Minimal logging utilities for decomment.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; the CLI does when asked to be verbose.

Example:
    >>> from decomment.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Reading source")
"""

from __future__ import annotations

import logging

_ROOT = "decomment"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "decomment." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'decomment.mymodule'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


def configure_stderr_logging(level: int = logging.DEBUG) -> logging.Handler:
    """Attach a stderr handler to the package logger.

    Used by the CLI's ``--verbose`` flag. Returns the handler so callers
    can remove it again.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
    root = logging.getLogger(_ROOT)
    root.addHandler(handler)
    root.setLevel(level)
    return handler
