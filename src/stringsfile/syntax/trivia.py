"""Comments and whitespace that may appear between declarations."""

from typing import Optional

from .errors import ErrorKind, Mismatch, ParseResult
from .span import Span

WHITESPACE = " \t\r\n"


def line_comment(span: Span) -> ParseResult[str]:
    """Parse ``//`` up to (not including) the next CR or LF.

    Returns:
        ParseResult with the comment body (without ``//``).

    Raises:
        Mismatch: If the input does not start with ``//``.
    """
    if not span.startswith("//"):
        raise Mismatch(ErrorKind.TAG, span, "//")

    source = span.source
    end = span.offset + 2
    while end < len(source) and source[end] not in "\r\n":
        end += 1

    return ParseResult(source[span.offset + 2:end], span.advance(end - span.offset))


def block_comment(span: Span) -> ParseResult[str]:
    """Parse ``/*`` through the first following ``*/``.

    Returns:
        ParseResult with the comment body (without delimiters).

    Raises:
        Mismatch: If the input does not start with ``/*`` or the comment
            is never closed.
    """
    if not span.startswith("/*"):
        raise Mismatch(ErrorKind.TAG, span, "/*")

    close = span.find("*/", 2)
    if close < 0:
        raise Mismatch(ErrorKind.TAG, span, "*/")

    body = span.source[span.offset + 2:span.offset + close]
    return ParseResult(body, span.advance(close + 2))


def whitespace(span: Span) -> ParseResult[None]:
    """Consume a single space, tab, CR or LF."""
    char = span.peek()
    if not char or char not in WHITESPACE:
        raise Mismatch(ErrorKind.CHAR, span)
    return ParseResult(None, span.advance(1))


def trivia(span: Span) -> ParseResult[Optional[str]]:
    """Parse one piece of trivia, trying each alternative in order.

    Returns:
        ParseResult whose value is the comment body, or None for a
        whitespace character.

    Raises:
        Mismatch: If no alternative matches.
    """
    for alternative in (line_comment, block_comment, whitespace):
        try:
            return alternative(span)
        except Mismatch:
            continue
    raise Mismatch(ErrorKind.CHAR, span)


def skip_trivia(span: Span) -> ParseResult[tuple[str, ...]]:
    """Skip zero or more pieces of trivia.

    Never raises; an unclosed block comment simply stops the repetition
    and is left for the caller to reject.

    Returns:
        ParseResult with the bodies of the comments that were skipped.
    """
    comments = []
    while not span.is_empty:
        try:
            piece = trivia(span)
        except Mismatch:
            break
        if piece.value is not None:
            comments.append(piece.value)
        span = piece.rest
    return ParseResult(tuple(comments), span)


def skip_whitespace(span: Span) -> Span:
    """Skip zero or more whitespace characters (no comments)."""
    source = span.source
    end = span.offset
    while end < len(source) and source[end] in WHITESPACE:
        end += 1
    return span.advance(end - span.offset)
