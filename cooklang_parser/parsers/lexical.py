"""
Lexical primitives for Cooklang markup.

Character classifiers used by the grammar. Classification is Unicode aware:
punctuation is any character in a Unicode `P*` category and whitespace is any
space separator (`Zs`) or a tab. Hyphens and apostrophes are punctuation, so
they end a word; a name like '7-inch pan' is only captured whole by the
multi-word form, which runs up to the amount field.
"""
from __future__ import annotations

import unicodedata

from ..const import SPECIFIERS

# CRLF is matched as a single newline before its parts
BASIC_NEWLINES = frozenset("\n\r")
# VT, FF, NEL, LINE SEPARATOR, PARAGRAPH SEPARATOR
UNICODE_NEWLINES = frozenset("\n\r\x0b\x0c\x85\u2028\u2029")


def is_specifier(char: str) -> bool:
    """Return True for the ingredient, cookware and timer markers."""
    return char in SPECIFIERS


def is_punctuation(char: str) -> bool:
    return unicodedata.category(char).startswith("P")


def is_whitespace(char: str) -> bool:
    return char == "\t" or unicodedata.category(char) == "Zs"


def is_word_break(char: str) -> bool:
    """Return True when a character ends a word token.

    Specifiers always end a word, including `~` which Unicode files under
    math symbols rather than punctuation.
    """
    return is_specifier(char) or is_punctuation(char) or is_whitespace(char)


def newline_chars(permissive: bool) -> frozenset[str]:
    """Return the set of characters that start a line break.

    Args:
        permissive: Whether Unicode line separators count as newlines

    Returns:
        The newline character set for the chosen grammar variant
    """
    return UNICODE_NEWLINES if permissive else BASIC_NEWLINES


def newline_length(text: str, pos: int, newlines: frozenset[str]) -> int:
    """Measure the line break starting at `pos`.

    Args:
        text: The source text
        pos: Offset to inspect
        newlines: Characters accepted as line breaks

    Returns:
        2 for CRLF, 1 for any other accepted newline, 0 for no newline
    """
    if text.startswith("\r\n", pos):
        return 2
    if pos < len(text) and text[pos] in newlines:
        return 1
    return 0
