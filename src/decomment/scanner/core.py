"""State-machine comment scanner with O(n) guaranteed performance.

One left-to-right pass over the source. Each character is handled by the
current mode, which decides whether to copy it to the output and which
state comes next. Lookahead is limited to the fixed markers (``//``,
``/*``, ``*/``, ``r#"`` and the literal terminators).

No regex in the hot path. The scan cannot fail: unterminated comments and
literals simply run to the end of input.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from decomment.buffer import OutputBuffer
from decomment.scanner.lookahead import (
    ends_multi_line_comment,
    is_escape,
    literal_terminator,
    starts_line_comment,
    starts_multi_line_comment,
    starts_with_newline,
)
from decomment.scanner.modes import (
    BASE,
    ENDING_MULTI_LINE_COMMENT,
    LINE_COMMENT,
    MULTI_LINE_COMMENT,
    ParseState,
    ScanMode,
    TraceHook,
)


class Scanner:
    """Comment-stripping automaton.

    Usage:
            >>> Scanner("x = 1  // one\\n").scan()
            'x = 1  \\n'

    After ``scan()`` the final ``state`` tells whether the input ended
    inside a comment or literal, and ``comments_removed`` counts the
    comments that were dropped.

    Thread Safety:
        Scanner instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_state",
        "_output",
        "_trace",
        "_comments_removed",
        "_result",
    )

    def __init__(self, source: str, trace: TraceHook | None = None) -> None:
        """Initialize scanner with source text.

        Args:
            source: Text to strip
            trace: Optional hook called as ``trace(offset, char, state)``
                before each character is handled
        """
        self._source = source
        self._state: ParseState = BASE
        self._output = OutputBuffer()
        self._trace = trace
        self._comments_removed = 0
        self._result: str | None = None

    @property
    def state(self) -> ParseState:
        return self._state

    @property
    def comments_removed(self) -> int:
        return self._comments_removed

    def scan(self) -> str:
        """Strip comments from the source.

        Returns:
            The cleaned text. Repeated calls return the same result.

        Complexity: O(n) where n = len(source)
        """
        if self._result is not None:
            return self._result

        trace = self._trace
        if trace is None:
            for pos, char in enumerate(self._source):
                self._state = self._dispatch_mode(pos, char)
        else:
            for pos, char in enumerate(self._source):
                trace(pos, char, self._state)
                self._state = self._dispatch_mode(pos, char)

        self._result = self._output.build()
        return self._result

    def _dispatch_mode(self, pos: int, char: str) -> ParseState:
        """Handle one character in the current mode.

        Returns:
            The state for the next character.
        """
        state = self._state
        mode = state.mode
        if mode is ScanMode.BASE:
            return self._scan_base(pos, char)
        if mode is ScanMode.LINE_COMMENT:
            if starts_with_newline(self._source, pos):
                self._output.append(char)
                return BASE
            return state
        if mode is ScanMode.MULTI_LINE_COMMENT:
            if ends_multi_line_comment(self._source, pos):
                return ENDING_MULTI_LINE_COMMENT
            return state
        if mode is ScanMode.ENDING_MULTI_LINE_COMMENT:
            return BASE
        if mode is ScanMode.STRING_LITERAL:
            self._output.append(char)
            if self._source.startswith(state.terminator, pos):
                return BASE
            if is_escape(char):
                return ParseState.escaped(state.terminator)
            return state
        # STRING_LITERAL_ESCAPED: the escaped character is always literal content
        self._output.append(char)
        return ParseState.literal(state.terminator)

    def _scan_base(self, pos: int, char: str) -> ParseState:
        source = self._source
        terminator = literal_terminator(source, pos)
        if terminator is not None:
            self._output.append(char)
            return ParseState.literal(terminator)
        if starts_multi_line_comment(source, pos):
            self._enter_comment()
            return MULTI_LINE_COMMENT
        if starts_line_comment(source, pos):
            self._enter_comment()
            return LINE_COMMENT
        self._output.append(char)
        return BASE

    def _enter_comment(self) -> None:
        """Drop the current output line if the comment is all that is on it."""
        self._output.trim_comment_line()
        self._comments_removed += 1
