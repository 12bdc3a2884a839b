"""Scanner for quoted string literals.

The scanner does not decode escapes. It only has to find the closing
quote, so it walks the literal with a two-state automaton: in the
ESCAPE state the next character is taken verbatim and can never close
the literal. ``\\U`` is the one escape that is checked, because its
argument has a fixed shape of exactly four hex digits.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import ErrorKind, Failure, Mismatch, ParseResult
from .span import Span

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
UNICODE_ESCAPE_LEN = 4


class _State(Enum):
    NORMAL = 0
    ESCAPE = 1


@dataclass(frozen=True, slots=True)
class Literal:
    """A quoted string exactly as written, quotes included.

    Attributes:
        text: Source text from the opening through the closing quote.
        span: Position of the opening quote.
    """
    text: str
    span: Span

    @property
    def content(self) -> str:
        """The text between the quotes, escapes still encoded."""
        return self.text[1:-1]

    def __str__(self) -> str:
        return self.text


def scan_string(span: Span) -> ParseResult[Literal]:
    """Scan a double-quoted literal starting at ``span``.

    Args:
        span: Input expected to start with ``"``.

    Returns:
        ParseResult with the Literal and the input after its closing quote.

    Raises:
        Mismatch: The input does not start with ``"``.
        Failure: The literal is never closed (EOF at its start), a
            ``\\U`` escape has fewer than four characters left (EOF at
            its start), or a ``\\U`` escape has a non-hex digit (CHAR at
            the escape's backslash).
    """
    source = span.source
    start = span.offset
    if source[start:start + 1] != '"':
        if start >= len(source):
            raise Failure(ErrorKind.EOF, span, '"')
        raise Mismatch(ErrorKind.CHAR, span, '"')

    state = _State.NORMAL
    index = start + 1
    while index < len(source):
        char = source[index]
        if state is _State.ESCAPE:
            state = _State.NORMAL
            if char == "U":
                _check_unicode_escape(span, index)
        elif char == "\\":
            state = _State.ESCAPE
        elif char == '"':
            text, rest = span.take(index + 1 - start)
            return ParseResult(Literal(text, span), rest)
        index += 1

    raise Failure(ErrorKind.EOF, span, '"')


def _check_unicode_escape(span: Span, u_index: int) -> None:
    """Validate the four hex digits after the ``U`` at ``u_index``."""
    digits = span.source[u_index + 1:u_index + 1 + UNICODE_ESCAPE_LEN]
    if len(digits) < UNICODE_ESCAPE_LEN:
        raise Failure(ErrorKind.EOF, span)
    if not all(digit in HEX_DIGITS for digit in digits):
        backslash = u_index - 1
        raise Failure(ErrorKind.CHAR, span.advance(backslash - span.offset))
