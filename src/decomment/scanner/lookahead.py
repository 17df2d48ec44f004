"""Lookahead predicates for the comment scanner.

Pure functions over ``(source, pos)``. They never slice the source: every
check is ``str.startswith`` with a start offset, so lookahead is O(1) in the
marker length and never copies the remaining input.
"""

from __future__ import annotations

from decomment.scanner.modes import (
    ESCAPE_CHAR,
    LINE_COMMENT_START,
    LITERAL_OPENERS,
    MULTI_LINE_COMMENT_END,
    MULTI_LINE_COMMENT_START,
)


def starts_line_comment(source: str, pos: int) -> bool:
    return source.startswith(LINE_COMMENT_START, pos)


def starts_multi_line_comment(source: str, pos: int) -> bool:
    return source.startswith(MULTI_LINE_COMMENT_START, pos)


def ends_multi_line_comment(source: str, pos: int) -> bool:
    return source.startswith(MULTI_LINE_COMMENT_END, pos)


def starts_with_newline(source: str, pos: int) -> bool:
    """Check for a line terminator (``\\n`` or ``\\r\\n``) at pos.

    A lone ``\\r`` is not a terminator.
    """
    return source.startswith("\n", pos) or source.startswith("\r\n", pos)


def is_escape(char: str) -> bool:
    return char == ESCAPE_CHAR


def literal_terminator(source: str, pos: int) -> str | None:
    """Return the terminator of the literal opened at pos, if any.

    Openers are tried in a fixed order: single quote, double quote, then the
    raw ``r#"`` form.

    Args:
        source: Full input text
        pos: Current offset

    Returns:
        The closing marker (``'``, ``"`` or ``"#``), or None if no literal
        starts here.
    """
    for opener, terminator in LITERAL_OPENERS:
        if source.startswith(opener, pos):
            return terminator
    return None
