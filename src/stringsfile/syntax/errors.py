"""Parse errors and results for the .strings grammar.

Two tiers of failure are used by every scanner and grammar rule:

    Mismatch: the expected token is not at the current position and
        nothing was consumed. Callers may try another alternative.
    Failure: the document is structurally invalid. Nothing catches it
        until it reaches the caller of ``parse``.

A ``Mismatch`` raised inside ``committed()`` becomes a ``Failure``.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterator, Optional, TypeVar

from .span import Span

T = TypeVar("T")


class ErrorKind(Enum):
    """What the failing parser expected to find."""
    CHAR = "character class"
    EOF = "end of input"
    TAG = "tag"


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Successfully parsed value plus the input left after it."""
    value: T
    rest: Span


class ParseError(Exception):
    """Base class for all .strings parse errors.

    Attributes:
        kind: Classification of what was expected.
        span: Input position at which parsing could not proceed.
        expected: The literal token that was expected, if there was one.
    """

    fatal = False

    def __init__(self, kind: ErrorKind, span: Span, expected: Optional[str] = None):
        self.kind = kind
        self.span = span
        self.expected = expected
        super().__init__(self.format_error())

    @property
    def offset(self) -> int:
        return self.span.offset

    @property
    def byte_offset(self) -> int:
        """UTF-8 byte offset of the error position."""
        return self.span.byte_offset

    @property
    def line(self) -> int:
        return self.span.line

    @property
    def column(self) -> int:
        return self.span.column

    @property
    def message(self) -> str:
        if self.expected is not None:
            return f"expected {self.expected!r} ({self.kind.value})"
        return f"unexpected input ({self.kind.value})"

    def format_error(self) -> str:
        """Format the error as ``line:col: message``."""
        return f"{self.line}:{self.column}: {self.message}"

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format the error with numbered source lines and a caret.

        Args:
            context_lines: Number of lines to show before and after the
                offending line.

        Returns:
            Multi-line string ready for display.
        """
        lines = self.span.source.split("\n")
        result = [self.format_error(), ""]

        first = max(1, self.line - context_lines)
        last = min(len(lines), self.line + context_lines)
        for number in range(first, last + 1):
            prefix = f"{number:4} | "
            result.append(prefix + lines[number - 1].rstrip("\r"))
            if number == self.line:
                result.append(" " * (len(prefix) + self.column - 1) + "^")

        return "\n".join(result)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.kind.name}, "
            f"offset={self.offset}, line={self.line}, column={self.column})"
        )


class Mismatch(ParseError):
    """Recoverable: the expected token was absent and no input was consumed."""

    def escalate(self) -> "Failure":
        return Failure(self.kind, self.span, self.expected)


class Failure(ParseError):
    """Unrecoverable: the document is malformed at ``span``."""

    fatal = True


@contextmanager
def committed() -> Iterator[None]:
    """Turn any ``Mismatch`` raised in the block into a ``Failure``."""
    try:
        yield
    except Mismatch as exc:
        raise exc.escalate() from exc
