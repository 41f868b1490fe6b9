"""
Cooklang Recipe Parser.

This module ties the parsing stages together: comment stripping, decoding,
the grammar and the reduction into a Recipe. Parsing never raises; a source
that cannot be parsed yields an empty recipe with `ok` set to False.
"""
from __future__ import annotations

import logging
from typing import Any

from ..config import validate_options
from ..const import CONF_MAX_SOURCE_BYTES, CONF_PERMISSIVE_NEWLINES
from ..models.recipe import ParseResult, Recipe
from .base_parser import BaseRecipeParser
from .comments import strip_comments
from .grammar import parse_document
from .reducer import reduce_document

_LOGGER = logging.getLogger(__name__)


class CooklangParser(BaseRecipeParser):
    """Parses Cooklang markup into Recipe documents.

    A parser holds only its validated options, so one instance can be reused
    for any number of sources.
    """

    def __init__(self, options: dict[str, Any] | None = None) -> None:
        """Initialize the Cooklang parser.

        Args:
            options: Parser options, see `config.PARSER_OPTIONS_SCHEMA`

        Raises:
            ParserConfigError: If the options are invalid
        """
        self.options = validate_options(options)
        _LOGGER.debug("Initialized CooklangParser")

    def parse_recipe(self, name: str, source: bytes) -> ParseResult:
        """Parse Cooklang source bytes.

        Args:
            name: The recipe name, kept even when parsing fails
            source: The raw recipe source

        Returns:
            A ParseResult; the recipe is empty and ok is False on failure
        """
        empty = Recipe(name=name)

        if not source:
            return ParseResult(recipe=empty)

        max_bytes = self.options[CONF_MAX_SOURCE_BYTES]
        if len(source) > max_bytes:
            _LOGGER.warning(
                "Recipe '%s' is too large to parse (%d bytes, limit %d)",
                name,
                len(source),
                max_bytes
            )
            return ParseResult(recipe=empty, ok=False)

        try:
            text = strip_comments(source).decode("utf-8-sig")
        except UnicodeDecodeError as err:
            _LOGGER.warning("Recipe '%s' is not valid UTF-8: %s", name, err)
            return ParseResult(recipe=empty, ok=False)

        _LOGGER.debug("Parsing recipe '%s' (%d characters)", name, len(text))

        document = parse_document(text, self.options[CONF_PERMISSIVE_NEWLINES])
        return ParseResult(recipe=reduce_document(text, name, document))

    def parse_string(self, name: str, source: str) -> ParseResult:
        """Parse Cooklang source held in a string."""
        return self.parse_recipe(name, source.encode("utf-8", "surrogatepass"))


def try_parse(
    name: str, source: bytes, options: dict[str, Any] | None = None
) -> ParseResult:
    """Parse source bytes, reporting whether parsing succeeded.

    Args:
        name: The recipe name
        source: The raw recipe source
        options: Optional parser options

    Returns:
        A ParseResult with the recipe and an ok flag
    """
    return CooklangParser(options).parse_recipe(name, source)


def parse(name: str, source: bytes, options: dict[str, Any] | None = None) -> Recipe:
    """Parse source bytes into a Recipe.

    Returns:
        The parsed recipe, or an empty recipe if the source could not be parsed
    """
    return try_parse(name, source, options).recipe


def parse_string(name: str, source: str, options: dict[str, Any] | None = None) -> Recipe:
    """Parse a source string into a Recipe."""
    return CooklangParser(options).parse_string(name, source).recipe
