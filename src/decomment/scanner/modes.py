"""Scanner operating modes and marker constants.

This module defines the finite state machine for the comment scanner:
a mode tag plus the literal terminator carried by the two string modes.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto


class ScanMode(Enum):
    """Scanner operating modes.

    - BASE: Outside any literal or comment
    - LINE_COMMENT: Inside ``//...``, skipping to end of line
    - MULTI_LINE_COMMENT: Inside ``/*...*/``, skipping to the closing marker
    - ENDING_MULTI_LINE_COMMENT: Absorbs the ``/`` of ``*/``
    - STRING_LITERAL: Inside a quoted or raw-quoted literal
    - STRING_LITERAL_ESCAPED: The character right after a backslash in a literal

    """

    BASE = auto()
    LINE_COMMENT = auto()
    MULTI_LINE_COMMENT = auto()
    ENDING_MULTI_LINE_COMMENT = auto()
    STRING_LITERAL = auto()
    STRING_LITERAL_ESCAPED = auto()


# Modes that carry a literal terminator
LITERAL_MODES = frozenset({ScanMode.STRING_LITERAL, ScanMode.STRING_LITERAL_ESCAPED})

# Fixed markers
LINE_COMMENT_START = "//"
MULTI_LINE_COMMENT_START = "/*"
MULTI_LINE_COMMENT_END = "*/"
ESCAPE_CHAR = "\\"

# Literal openers in detection order, mapped to the terminator that closes them.
# Only the zero-hash raw form is recognized; r##"..."## is not.
LITERAL_OPENERS: tuple[tuple[str, str], ...] = (
    ("'", "'"),
    ('"', '"'),
    ('r#"', '"#'),
)


@dataclass(frozen=True, slots=True)
class ParseState:
    """Current scanner state: a mode tag and, for literal modes, its terminator.

    Instances compare by value, so ``ParseState.literal('"')`` built twice is
    the same state. Use the classmethods rather than the constructor.
    """

    mode: ScanMode
    terminator: str = ""

    @classmethod
    def literal(cls, terminator: str) -> ParseState:
        return cls(ScanMode.STRING_LITERAL, terminator)

    @classmethod
    def escaped(cls, terminator: str) -> ParseState:
        return cls(ScanMode.STRING_LITERAL_ESCAPED, terminator)

    @property
    def in_comment(self) -> bool:
        """True while inside a line or block comment (including its closing slash)."""
        return self.mode in (
            ScanMode.LINE_COMMENT,
            ScanMode.MULTI_LINE_COMMENT,
            ScanMode.ENDING_MULTI_LINE_COMMENT,
        )

    @property
    def in_literal(self) -> bool:
        return self.mode in LITERAL_MODES

    def __repr__(self) -> str:
        if self.terminator:
            return f"ParseState({self.mode.name}, {self.terminator!r})"
        return f"ParseState({self.mode.name})"


BASE = ParseState(ScanMode.BASE)
LINE_COMMENT = ParseState(ScanMode.LINE_COMMENT)
MULTI_LINE_COMMENT = ParseState(ScanMode.MULTI_LINE_COMMENT)
ENDING_MULTI_LINE_COMMENT = ParseState(ScanMode.ENDING_MULTI_LINE_COMMENT)

# Called once per input character with (offset, character, state before it)
TraceHook = Callable[[int, str, ParseState], None]
