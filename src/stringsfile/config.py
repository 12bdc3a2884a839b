"""Configuration for the .strings parser."""

from dataclasses import dataclass
from typing import Optional


# Byte order marks checked before falling back to UTF-8
UTF16_BOMS = (b'\xff\xfe', b'\xfe\xff')


@dataclass
class ParserConfig:
    """Options controlling how parsed entries are presented.

    The scanner always works on the raw text; these options only affect
    the StringEntry objects built from it.

    Attributes:
        strip_quotes: Remove the surrounding double quotes from keys and values.
        decode_escapes: Decode backslash escapes (``\\n``, ``\\"``, ``\\U20AC``...).
            Only applied when strip_quotes is also set.
        encoding: Encoding used to read files. None means auto-detect
            (UTF-16 BOM, then UTF-8, then UTF-16).
    """
    strip_quotes: bool = True
    decode_escapes: bool = True
    encoding: Optional[str] = None

    @classmethod
    def raw(cls) -> "ParserConfig":
        """Config that keeps keys and values exactly as written."""
        return cls(strip_quotes=False, decode_escapes=False)
