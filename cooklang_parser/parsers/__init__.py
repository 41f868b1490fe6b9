"""Parsers package."""
from .base_parser import BaseRecipeParser
from .cooklang_parser import CooklangParser, parse, parse_string, try_parse
from .quantity import parse_quantity

__all__ = [
    "BaseRecipeParser",
    "CooklangParser",
    "parse",
    "parse_string",
    "parse_quantity",
    "try_parse",
]
