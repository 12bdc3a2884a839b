"""Parser for Apple .strings localization files."""

from .config import ParserConfig
from .strings import StringEntry, StringsParser
from .syntax import ErrorKind, Failure, Mismatch, ParseError, parse

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "Failure",
    "Mismatch",
    "ParserConfig",
    "ParseError",
    "StringEntry",
    "StringsParser",
    "parse",
]
