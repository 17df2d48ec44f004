"""OutputBuffer for O(n) output accumulation with a retroactive line trim.

Appends single characters to a list and joins once at the end: O(n) total
vs O(n²) for repeated string concatenation. The only non-append operation
is ``trim_comment_line``, which walks back over at most the current
unfinished line.

Thread Safety:
OutputBuffer instances are local to each scan. No shared mutable state.

"""

from __future__ import annotations

# Information separators that str.isspace() accepts but that are not
# Unicode White_Space.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def is_inline_space(char: str) -> bool:
    """True for whitespace that is not part of a line terminator."""
    return char.isspace() and char not in "\r\n" and char not in _NOT_WHITESPACE


class OutputBuffer:
    """Append-only character accumulator with one retroactive trim.

    Usage:
            >>> buf = OutputBuffer()
            >>> buf.extend("code\\n  ")
            >>> buf.trim_comment_line()
            True
            >>> buf.build()
            'code'

    Thread Safety:
        Instance is local to each scan.
        No shared mutable state.

    """

    __slots__ = ("_chars",)

    def __init__(self) -> None:
        """Initialize empty OutputBuffer."""
        self._chars: list[str] = []

    def append(self, char: str) -> None:
        """Append one character."""
        self._chars.append(char)

    def extend(self, text: str) -> None:
        """Append every character of text."""
        self._chars.extend(text)

    def trim_comment_line(self) -> bool:
        """Drop the current line if it holds nothing but inline whitespace.

        Looks back past trailing spaces and tabs. If they are preceded by a
        line terminator (``\\n`` or ``\\r\\n``), removes the whitespace and
        that terminator. Otherwise the buffer is left untouched, so the
        whitespace between code and an inline comment survives.

        Returns:
            True if anything was removed
        """
        chars = self._chars
        end = len(chars)
        while end and is_inline_space(chars[end - 1]):
            end -= 1

        if not end or chars[end - 1] != "\n":
            return False
        end -= 1
        if end and chars[end - 1] == "\r":
            end -= 1

        del chars[end:]
        return True

    def build(self) -> str:
        """Join all characters into the final string."""
        return "".join(self._chars)

    def __len__(self) -> int:
        """Return the number of buffered characters."""
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)
