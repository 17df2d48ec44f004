"""Utility modules for decomment.

Provides:
- logger: get_logger, configure_stderr_logging for logging
"""

from decomment.utils.logger import configure_stderr_logging, get_logger

__all__ = [
    "configure_stderr_logging",
    "get_logger",
]
