"""Models package."""
from .recipe import (
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
    component_chunk,
)

__all__ = [
    "Chunk",
    "Component",
    "Cookware",
    "CookwareChunk",
    "Ingredient",
    "IngredientChunk",
    "Metadata",
    "ParseResult",
    "Recipe",
    "Step",
    "TextChunk",
    "Timer",
    "TimerChunk",
    "component_chunk",
]
