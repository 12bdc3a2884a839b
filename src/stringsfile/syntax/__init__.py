"""Scanner and grammar for .strings documents."""

from .document import parse, parse_pairs
from .errors import ErrorKind, Failure, Mismatch, ParseError, ParseResult
from .grammar import Pair
from .lexer import Literal
from .span import Span

__all__ = [
    "ErrorKind",
    "Failure",
    "Literal",
    "Mismatch",
    "Pair",
    "ParseError",
    "ParseResult",
    "Span",
    "parse",
    "parse_pairs",
]
