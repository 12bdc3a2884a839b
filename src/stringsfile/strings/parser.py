"""Parser for Apple .strings files."""

import logging
from pathlib import Path
from typing import Optional

from ..config import ParserConfig, UTF16_BOMS
from ..syntax import parse_pairs
from .models import StringEntry

logger = logging.getLogger(__name__)


class StringsParser:
    """Parser for Apple .strings files.

    Handles both UTF-8 and UTF-16 encoded files, attaches the nearest
    preceding comment to each entry, and normalizes keys and values
    according to a ParserConfig.

    An entry's comment is the last comment between the previous ``;``
    and its key. A comment on the same line after a ``;``, as in
    ``"a" = "b"; // about a``, therefore belongs to the next entry.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        """Initialize the parser.

        Args:
            config: Normalization and encoding options.
        """
        self.config = config or ParserConfig()

    def parse(self, content: str) -> list[StringEntry]:
        """Parse .strings content into StringEntry objects.

        Args:
            content: The content of a .strings file.

        Returns:
            List of StringEntry objects in document order. Duplicate keys
            are all kept.

        Raises:
            ParseError: If the content is malformed.
        """
        leading, pairs = parse_pairs(content)

        entries = []
        comments = leading
        for pair in pairs:
            comment = comments[-1].strip() if comments else None
            entries.append(StringEntry.from_pair(pair, comment, self.config))
            comments = pair.comments

        return entries

    def parse_file(self, path: Path) -> list[StringEntry]:
        """Parse a .strings file.

        Args:
            path: Path to the .strings file.

        Returns:
            List of StringEntry objects.

        Raises:
            ParseError: If the file content is malformed.
            OSError: If the file cannot be read.
        """
        content = self._read_file(path)
        logger.debug("Parsing %s (%d characters)", path, len(content))
        return self.parse(content)

    def parse_to_dict(self, content: str) -> dict[str, StringEntry]:
        """Parse .strings content into a dictionary keyed by string key.

        Later duplicates overwrite earlier ones.

        Args:
            content: The content of a .strings file.

        Returns:
            Dictionary mapping keys to StringEntry objects.
        """
        entries = self.parse(content)
        return {entry.key: entry for entry in entries}

    def _read_file(self, path: Path) -> str:
        """Read a .strings file, detecting the encoding unless configured."""
        raw = path.read_bytes()

        if self.config.encoding:
            return raw.decode(self.config.encoding)

        # Check for UTF-16 BOM
        if raw.startswith(UTF16_BOMS):
            return raw.decode('utf-16')

        try:
            return raw.decode('utf-8-sig')
        except UnicodeDecodeError:
            logger.debug("%s is not valid UTF-8, retrying as UTF-16", path)
            return raw.decode('utf-16')
