"""The ``"key" = "value";`` production.

Once the key of a declaration has been scanned the rest of it is
committed: any failure after that point aborts the document instead of
letting a caller try something else.
"""

from dataclasses import dataclass

from .errors import ErrorKind, Mismatch, ParseResult, committed
from .lexer import Literal, scan_string
from .span import Span
from .trivia import skip_trivia, skip_whitespace


@dataclass(frozen=True, slots=True)
class Pair:
    """One declaration.

    Attributes:
        key: The key literal.
        value: The value literal.
        comments: Bodies of the comments that follow the terminating ``;``.
    """
    key: Literal
    value: Literal
    comments: tuple[str, ...] = ()


def expect_char(span: Span, char: str) -> Span:
    """Consume ``char`` or raise a Mismatch at ``span``."""
    if span.peek() != char:
        raise Mismatch(ErrorKind.CHAR, span, char)
    return span.advance(1)


def key(span: Span) -> ParseResult[Literal]:
    """Optional whitespace followed by a string literal."""
    return scan_string(skip_whitespace(span))


def value(span: Span) -> ParseResult[tuple[Literal, tuple[str, ...]]]:
    """Parse ``"value" ;`` and the trivia after it, all committed.

    Returns:
        ParseResult with the value literal and the comments found in
        the trailing trivia.

    Raises:
        Failure: On any malformed or missing token.
    """
    with committed():
        literal = key(span)
        rest = expect_char(skip_whitespace(literal.rest), ";")
    trailer = skip_trivia(rest)
    return ParseResult((literal.value, trailer.value), trailer.rest)


def key_value(span: Span) -> ParseResult[Pair]:
    """Parse one declaration.

    Raises:
        Mismatch: Only when ``span`` is already empty; this is the
            "no more pairs" signal for the document loop.
        Failure: On any other problem, including input that does not
            start with a key.
    """
    if span.is_empty:
        raise Mismatch(ErrorKind.EOF, span)

    with committed():
        key_literal = scan_string(span)
        rest = expect_char(skip_whitespace(key_literal.rest), "=")
        parsed = value(rest)

    value_literal, comments = parsed.value
    return ParseResult(Pair(key_literal.value, value_literal, comments), parsed.rest)
