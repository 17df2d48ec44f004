"""Single-pass state-machine scanner for decomment.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner, ParseState, ScanMode
├── core.py              # Scanner class (mode dispatch + transitions)
├── modes.py             # ScanMode enum, ParseState, marker constants
└── lookahead.py         # Pure prefix predicates over (source, pos)

Usage:
    >>> from decomment.scanner import Scanner
    >>> scanner = Scanner("a = 'b' /* c */")
    >>> scanner.scan()
    "a = 'b' "
    >>> scanner.state
    ParseState(BASE)

"""

from decomment.scanner.core import Scanner
from decomment.scanner.modes import ParseState, ScanMode

__all__ = ["ParseState", "ScanMode", "Scanner"]
