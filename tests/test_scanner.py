"""Tests for the span, trivia and string-literal scanners."""

import pytest

from stringsfile.syntax import ErrorKind, Failure, Mismatch, Span
from stringsfile.syntax.lexer import scan_string
from stringsfile.syntax.trivia import (
    block_comment,
    line_comment,
    skip_trivia,
    skip_whitespace,
    trivia,
)


class TestSpan:
    """Tests for position tracking."""

    def test_initial_position(self):
        span = Span("abc")
        assert (span.offset, span.line, span.column) == (0, 1, 1)
        assert not span.is_empty

    def test_advance_same_line(self):
        span = Span("abc").advance(2)
        assert (span.offset, span.line, span.column) == (2, 1, 3)
        assert span.remaining == "c"

    def test_advance_across_newlines(self):
        span = Span("ab\ncd\nef").advance(7)
        assert (span.line, span.column) == (3, 2)

    def test_advance_in_steps_matches_single_advance(self):
        text = "one\ntwo\n\nthree"
        stepped = Span(text)
        for _ in range(len(text)):
            stepped = stepped.advance(1)
        assert stepped == Span(text).advance(len(text))

    def test_advance_is_clamped(self):
        span = Span("ab").advance(10)
        assert span.offset == 2
        assert span.is_empty

    def test_original_unchanged(self):
        span = Span("abc")
        span.advance(1)
        assert span.offset == 0

    def test_take(self):
        text, rest = Span("hello world").take(5)
        assert text == "hello"
        assert rest.offset == 5

    def test_byte_offset(self):
        span = Span("äb").advance(1)
        assert span.offset == 1
        assert span.byte_offset == 2


class TestTrivia:
    """Tests for comments and whitespace."""

    def test_line_comment(self):
        result = line_comment(Span("// note\nrest"))
        assert result.value == " note"
        assert result.rest.remaining == "\nrest"

    def test_empty_line_comment(self):
        result = line_comment(Span("//\n"))
        assert result.value == ""
        assert result.rest.offset == 2

    def test_line_comment_stops_at_carriage_return(self):
        result = line_comment(Span("// a\r\nb"))
        assert result.rest.remaining == "\r\nb"

    def test_block_comment_is_non_greedy(self):
        result = block_comment(Span("/* a */ b /* c */"))
        assert result.value == " a "
        assert result.rest.remaining == " b /* c */"

    def test_block_comment_multiline(self):
        result = block_comment(Span("/* a\nb */x"))
        assert result.rest.line == 2
        assert result.rest.remaining == "x"

    def test_unclosed_block_comment_is_mismatch(self):
        with pytest.raises(Mismatch):
            block_comment(Span("/* never closed"))

    def test_trivia_rejects_other_characters(self):
        with pytest.raises(Mismatch) as exc_info:
            trivia(Span('"key"'))
        assert exc_info.value.offset == 0

    def test_skip_trivia_collects_comments(self):
        result = skip_trivia(Span(' /* one */\n\t// two\r\n"k"'))
        assert result.value == (" one ", " two")
        assert result.rest.remaining == '"k"'

    def test_skip_trivia_zero_matches(self):
        result = skip_trivia(Span('"k"'))
        assert result.value == ()
        assert result.rest.offset == 0

    def test_skip_trivia_stops_at_unclosed_comment(self):
        result = skip_trivia(Span("  /* open"))
        assert result.rest.remaining == "/* open"

    def test_skip_whitespace_ignores_comments(self):
        span = skip_whitespace(Span(" \t/* c */"))
        assert span.remaining == "/* c */"


class TestScanString:
    """Tests for the string-literal scanner."""

    def test_simple_literal(self):
        result = scan_string(Span('"hello" = '))
        assert result.value.text == '"hello"'
        assert result.value.content == "hello"
        assert result.rest.remaining == " = "

    def test_empty_literal(self):
        result = scan_string(Span('""'))
        assert result.value.text == '""'
        assert result.rest.is_empty

    def test_escaped_quote_does_not_close(self):
        result = scan_string(Span(r'"a\"b" tail'))
        assert result.value.text == r'"a\"b"'

    def test_escaped_backslash_before_quote(self):
        result = scan_string(Span(r'"a\\" tail'))
        assert result.value.text == r'"a\\"'
        assert result.rest.remaining == " tail"

    def test_other_escapes_accepted(self):
        result = scan_string(Span(r'"\h\n\t"'))
        assert result.value.text == r'"\h\n\t"'

    def test_valid_unicode_escape(self):
        result = scan_string(Span(r'"\U20AC and \U00e9"'))
        assert result.value.text == r'"\U20AC and \U00e9"'

    def test_multiline_literal(self):
        result = scan_string(Span('"a\nb"x'))
        assert result.rest.line == 2
        assert result.rest.column == 3

    def test_non_ascii_content(self):
        result = scan_string(Span('"Grüße 😀"'))
        assert result.value.content == "Grüße 😀"

    def test_not_a_quote_is_mismatch(self):
        with pytest.raises(Mismatch) as exc_info:
            scan_string(Span("key"))
        assert exc_info.value.kind is ErrorKind.CHAR
        assert not exc_info.value.fatal

    def test_unterminated_is_fatal_at_start(self):
        span = Span('x = "never closed').advance(4)
        with pytest.raises(Failure) as exc_info:
            scan_string(span)
        assert exc_info.value.kind is ErrorKind.EOF
        assert exc_info.value.offset == 4

    def test_escaped_final_quote_is_unterminated(self):
        with pytest.raises(Failure):
            scan_string(Span(r'"abc\"'))

    def test_malformed_unicode_escape_anchored_at_backslash(self):
        with pytest.raises(Failure) as exc_info:
            scan_string(Span(r'"a\Uzzzz"'))
        assert exc_info.value.kind is ErrorKind.CHAR
        assert exc_info.value.offset == 2

    def test_short_unicode_escape_at_end_is_eof(self):
        with pytest.raises(Failure) as exc_info:
            scan_string(Span(r'"\U12'))
        assert exc_info.value.kind is ErrorKind.EOF
        assert exc_info.value.offset == 0

    def test_unicode_escape_cut_by_quote(self):
        with pytest.raises(Failure) as exc_info:
            scan_string(Span(r'"\U12" = "x";'))
        assert exc_info.value.kind is ErrorKind.CHAR

    def test_escaped_lowercase_u_not_checked(self):
        result = scan_string(Span(r'"\uzz"'))
        assert result.value.text == r'"\uzz"'

    def test_long_unterminated_input(self):
        text = '"' + "a" * 100_000
        with pytest.raises(Failure):
            scan_string(Span(text))
