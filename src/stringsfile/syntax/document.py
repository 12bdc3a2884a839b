"""Assemble a whole .strings document from its declarations."""

import logging

from .errors import Mismatch
from .grammar import Pair, key_value
from .span import Span
from .trivia import skip_trivia

logger = logging.getLogger(__name__)


def parse_pairs(text: str) -> tuple[tuple[str, ...], list[Pair]]:
    """Parse every declaration in ``text`` in document order.

    Args:
        text: Complete .strings document.

    Returns:
        The comments before the first declaration and the list of
        pairs, duplicates included.

    Raises:
        Failure: If the document is malformed. Nothing parsed before
            the error is returned.
    """
    leading = skip_trivia(Span(text))
    span = leading.rest
    pairs = []

    while True:
        try:
            result = key_value(span)
        except Mismatch:
            break
        pairs.append(result.value)
        span = result.rest

    logger.debug("Parsed %d declarations (%d characters)", len(pairs), len(text))
    return leading.value, pairs


def parse(text: str) -> dict[str, str]:
    """Parse a .strings document into a key to value mapping.

    Keys and values are the literal quoted spans exactly as written,
    quotes included and escapes not decoded. Later duplicates overwrite
    earlier ones.

    Args:
        text: Complete .strings document.

    Returns:
        Mapping of key literal text to value literal text.

    Raises:
        Failure: If the document is malformed.

    Example:
        >>> parse('"a" = "1"; "a" = "2";')
        {'"a"': '"2"'}
    """
    mapping: dict[str, str] = {}
    for pair in parse_pairs(text)[1]:
        mapping[pair.key.text] = pair.value.text
    return mapping
