"""
Cooklang recipe parser.

Parses recipes written in Cooklang markup into structured Recipe documents
holding metadata, ingredient, cookware and timer manifests, and ordered steps
made of text and component chunks.
"""
from __future__ import annotations

from .exceptions import CooklangError, ParserConfigError, RecipeDecodeError
from .models.recipe import (
    Chunk,
    Component,
    Cookware,
    CookwareChunk,
    Ingredient,
    IngredientChunk,
    Metadata,
    ParseResult,
    Recipe,
    Step,
    TextChunk,
    Timer,
    TimerChunk,
)
from .parsers import CooklangParser, parse, parse_quantity, parse_string, try_parse
from .services import decode_recipe, encode_recipe, render_recipe

__all__ = [
    "Chunk",
    "Component",
    "CooklangError",
    "CooklangParser",
    "Cookware",
    "CookwareChunk",
    "Ingredient",
    "IngredientChunk",
    "Metadata",
    "ParseResult",
    "ParserConfigError",
    "Recipe",
    "RecipeDecodeError",
    "Step",
    "TextChunk",
    "Timer",
    "TimerChunk",
    "decode_recipe",
    "encode_recipe",
    "parse",
    "parse_quantity",
    "parse_string",
    "render_recipe",
    "try_parse",
]
