"""Property-based tests for scanner invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from decomment import strip_comments
from decomment.scanner import Scanner

# Plain code: no comment markers, no literal openers, no line breaks
code_text = st.text(
    alphabet=st.characters(exclude_characters="/'\"\\\r\n", exclude_categories=("Cs",)),
    max_size=40,
)
indent_text = st.text(alphabet=" \t", max_size=8)
comment_text = st.text(
    alphabet=st.characters(exclude_characters="\r\n", exclude_categories=("Cs",)),
    max_size=40,
)
literal_body = st.text(
    alphabet=st.characters(exclude_characters="'\"\\", exclude_categories=("Cs",)),
    max_size=60,
)


class TestTotality:
    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_never_raises(self, source: str) -> None:
        assert isinstance(strip_comments(source), str)

    @given(st.text(alphabet="/*'\"\\r#\n\r \tx", max_size=200))
    @settings(max_examples=200)
    def test_marker_soup_never_raises(self, source: str) -> None:
        """Dense combinations of every marker character should not crash."""
        result = strip_comments(source)
        assert len(result) <= len(source)

    @given(st.text(max_size=500))
    @settings(max_examples=100)
    def test_output_never_longer_than_input(self, source: str) -> None:
        assert len(strip_comments(source)) <= len(source)


class TestDeterminism:
    @given(st.text(max_size=300))
    @settings(max_examples=50)
    def test_repeated_strip_identical(self, source: str) -> None:
        assert strip_comments(source) == strip_comments(source)

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_scanner_matches_function(self, source: str) -> None:
        assert Scanner(source).scan() == strip_comments(source)


class TestPreservation:
    @given(st.text(alphabet=st.characters(exclude_characters="/"), max_size=300))
    @settings(max_examples=100)
    def test_text_without_slashes_is_unchanged(self, source: str) -> None:
        """Without a slash no comment can start, so nothing is removed."""
        assert strip_comments(source) == source

    @given(code_text, literal_body, st.sampled_from(["'", '"']))
    @settings(max_examples=100)
    def test_quoted_literal_is_opaque(self, code: str, body: str, quote: str) -> None:
        source = f"{code}{quote}// {body} /* {body} */{quote}"
        assert strip_comments(source) == source

    @given(code_text, st.text(max_size=60).filter(lambda s: '"#' not in s))
    @settings(max_examples=100)
    def test_raw_literal_is_opaque(self, code: str, body: str) -> None:
        source = f'{code}r#"{body} // /* */"#'
        assert strip_comments(source) == source


class TestCommentRemoval:
    @given(code_text, indent_text, comment_text, code_text)
    @settings(max_examples=100)
    def test_comment_only_line_is_elided(
        self, before: str, indent: str, comment: str, after: str
    ) -> None:
        source = f"{before}\n{indent}//{comment}\n{after}"
        assert strip_comments(source) == f"{before}\n{after}"

    @given(code_text, indent_text, comment_text, st.sampled_from(["\n", "\r\n"]))
    @settings(max_examples=100)
    def test_comment_only_line_elided_with_either_terminator(
        self, before: str, indent: str, comment: str, newline: str
    ) -> None:
        source = f"{before}{newline}{indent}//{comment}{newline}"
        assert strip_comments(source) == f"{before}{newline}"

    @given(code_text.filter(lambda s: s and not s[-1].isspace()), comment_text)
    @settings(max_examples=100)
    def test_inline_comment_keeps_code(self, code: str, comment: str) -> None:
        assert strip_comments(f"{code}//{comment}") == code

    @given(
        code_text,
        comment_text.filter(lambda s: "*/" not in s and not s.startswith("/")),
        code_text,
    )
    @settings(max_examples=100)
    def test_inline_block_comment_is_spliced_out(
        self, before: str, comment: str, after: str
    ) -> None:
        """With no line break before it, a block comment never trims output."""
        source = f"{before}/*{comment}*/{after}"
        assert strip_comments(source) == f"{before}{after}"
