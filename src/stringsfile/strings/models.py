"""Data models for .strings file entries."""

from dataclasses import dataclass
from typing import Optional

from ..config import ParserConfig
from ..syntax import Pair

# Single-character escapes understood by Foundation
_SIMPLE_ESCAPES = {
    'n': '\n',
    'r': '\r',
    't': '\t',
    '"': '"',
    '\\': '\\',
}


@dataclass
class StringEntry:
    """Represents a single entry in a .strings file.

    Attributes:
        key: The string key/identifier.
        value: The localized string value.
        comment: Optional comment preceding the entry.
        line: 1-based line of the key's opening quote.
        column: 1-based column of the key's opening quote.
    """
    key: str
    value: str
    comment: Optional[str] = None
    line: int = 0
    column: int = 0

    @classmethod
    def from_pair(
        cls,
        pair: Pair,
        comment: Optional[str] = None,
        config: Optional[ParserConfig] = None
    ) -> "StringEntry":
        """Build an entry from a parsed declaration.

        Args:
            pair: The parsed key/value literals.
            comment: Comment to attach, already stripped.
            config: Controls quote stripping and escape decoding.

        Returns:
            A new StringEntry.
        """
        config = config or ParserConfig()
        return cls(
            key=cls._normalize(pair.key.text, config),
            value=cls._normalize(pair.value.text, config),
            comment=comment,
            line=pair.key.span.line,
            column=pair.key.span.column,
        )

    @classmethod
    def _normalize(cls, literal: str, config: ParserConfig) -> str:
        if not config.strip_quotes:
            return literal
        content = literal[1:-1]
        return cls._unescape(content) if config.decode_escapes else content

    @staticmethod
    def _unescape(s: str) -> str:
        """Unescape special characters from .strings format.

        ``\\UXXXX`` is a UTF-16 code unit; surrogate pairs written as two
        escapes are combined. Any other escaped character stands for
        itself, so ``\\h`` is ``h``.
        """
        units = []
        i = 0
        while i < len(s):
            char = s[i]
            if char != '\\' or i + 1 >= len(s):
                units.append(char)
                i += 1
                continue

            next_char = s[i + 1]
            if next_char == 'U' and len(s) >= i + 6:
                units.append(chr(int(s[i + 2:i + 6], 16)))
                i += 6
            else:
                units.append(_SIMPLE_ESCAPES.get(next_char, next_char))
                i += 2

        return (
            ''.join(units)
            .encode('utf-16-le', 'surrogatepass')
            .decode('utf-16-le', 'replace')
        )
