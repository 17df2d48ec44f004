"""Exception classes for decomment.

The scanner itself never raises. These exceptions belong to the command
line layer, which reads the source file and reports failures to the user.
"""

from __future__ import annotations


class DecommentError(Exception):
    """Base exception for all decomment errors.

    Subclass this for specific error categories.
    """

    pass


class UsageError(DecommentError):
    """Error in command line usage (e.g., the source path is missing)."""

    pass


class SourceReadError(DecommentError):
    """Error reading or decoding the source file.

    Raised when the file cannot be opened or is not valid UTF-8.
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize source read error.

        Args:
            path: Path of the file that could not be read
            reason: Description of the underlying failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Could not open file: {reason}")
