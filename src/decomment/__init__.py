"""
decomment — strip ``//`` and ``/* */`` comments from source text

A single-pass scanner that removes line and block comments while leaving
string and character literals, whitespace and non-ASCII text untouched.
Lines that held nothing but a comment disappear entirely.

Quick Start:
    >>> from decomment import strip_comments
    >>> strip_comments('let s = "// kept"; // dropped\\n')
    'let s = "// kept"; \\n'

Recognized constructs:
    - ``// ...`` line comments, up to (not including) the line terminator
    - ``/* ... */`` block comments (not nested)
    - ``'...'`` and ``"..."`` literals, with ``\\`` escaping the next character
    - ``r#"..."#`` raw strings (the zero-hash form only)

Command line:
    decomment path/to/source.rs
"""

from decomment.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from decomment.errors import DecommentError, SourceReadError, UsageError
from decomment.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from decomment.scanner import ParseState, Scanner, ScanMode

__version__ = "0.1.0"


def strip_comments(source: str) -> str:
    """Remove comments from source text.

    Total and deterministic: never raises for any ``str`` input. An
    unterminated comment or literal runs to the end of input.

    Args:
        source: Text to clean

    Returns:
        The text with comments removed

    Example:
        >>> strip_comments("code\\n\\t// only a comment\\nmore")
        'code\\nmore'
    """
    scanner = Scanner(source, trace=get_scan_config().trace)
    result = scanner.scan()

    accumulator = get_scan_accumulator()
    if accumulator is not None:
        accumulator.record_scan(len(source), len(result), scanner.comments_removed)

    return result


strip = strip_comments


__all__ = [
    # Core API
    "strip_comments",
    "strip",
    "Scanner",
    "ParseState",
    "ScanMode",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
    # Errors
    "DecommentError",
    "SourceReadError",
    "UsageError",
    "__version__",
]
