"""
Base Recipe Parser.

This module defines the base interface that all recipe parsers must implement.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from ..models.recipe import ParseResult


class BaseRecipeParser(ABC):
    """Abstract base class for recipe parsers.

    All recipe parsers must implement the parse_recipe method to convert
    raw source bytes into a ParseResult.
    """

    @abstractmethod
    def parse_recipe(self, name: str, source: bytes) -> ParseResult:
        """Parse a recipe from its source.

        Args:
            name: The recipe name
            source: The raw recipe source

        Returns:
            A ParseResult holding the recipe and whether parsing succeeded
        """
        pass
