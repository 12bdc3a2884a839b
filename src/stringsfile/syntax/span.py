"""Position-tracking input for the .strings scanner."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Immutable view over the unconsumed part of a document.

    A span never changes; consuming input returns a new, narrower span
    whose line and column are recomputed from the newlines that were
    skipped over.

    Attributes:
        source: The complete original document.
        offset: Character index of the first unconsumed character.
        line: 1-based line number of ``offset``.
        column: 1-based column number of ``offset``.

    Example:
        >>> span = Span('"a" = "b";\\n"c"')
        >>> span.advance(11).line, span.advance(11).column
        (2, 1)
    """

    source: str
    offset: int = 0
    line: int = 1
    column: int = 1

    @property
    def is_empty(self) -> bool:
        """True once every character has been consumed."""
        return self.offset >= len(self.source)

    @property
    def remaining(self) -> str:
        """The unconsumed text (copies; use for display only)."""
        return self.source[self.offset:]

    @property
    def byte_offset(self) -> int:
        """UTF-8 byte offset of the current position."""
        return len(self.source[:self.offset].encode("utf-8"))

    def peek(self, index: int = 0) -> str:
        """Return the character ``index`` positions ahead, or '' past the end."""
        pos = self.offset + index
        return self.source[pos] if pos < len(self.source) else ""

    def startswith(self, prefix: str) -> bool:
        return self.source.startswith(prefix, self.offset)

    def find(self, needle: str, start: int = 0) -> int:
        """Index of ``needle`` relative to this span, or -1."""
        pos = self.source.find(needle, self.offset + start)
        return pos - self.offset if pos >= 0 else -1

    def advance(self, count: int) -> "Span":
        """Return a new span with ``count`` characters consumed.

        Args:
            count: Number of characters to consume. Clamped to the end
                of the source.

        Returns:
            The successor span with line and column updated.
        """
        end = min(self.offset + count, len(self.source))
        newlines = self.source.count("\n", self.offset, end)
        if newlines:
            line = self.line + newlines
            column = end - self.source.rfind("\n", self.offset, end)
        else:
            line = self.line
            column = self.column + (end - self.offset)
        return Span(self.source, end, line, column)

    def take(self, count: int) -> tuple[str, "Span"]:
        """Split off the next ``count`` characters.

        Returns:
            ``(consumed_text, rest)``.
        """
        rest = self.advance(count)
        return self.source[self.offset:rest.offset], rest
