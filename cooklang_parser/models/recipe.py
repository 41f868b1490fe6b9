"""
Recipe data models for the Cooklang parser.

This module defines the Pydantic models that make up a parsed recipe document:
metadata entries, components (ingredients, cookware and timers), the tagged
chunks that steps are built from, and the recipe itself.
"""
from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Metadata(BaseModel):
    """A single `>> tag: body` metadata line.

    Attributes:
        tag: The metadata key, e.g. 'servings'
        body: The metadata value, e.g. '4'
    """

    model_config = ConfigDict(frozen=True)

    tag: str = Field(description="The metadata key, e.g. 'source'")
    body: str = Field(description="The metadata value, e.g. 'grandma'")


class Component(BaseModel):
    """Shared shape of ingredients, cookware and timers.

    Attributes:
        name: The component name, empty for anonymous timers
        qty: The quantity exactly as written (e.g., '1/2', 'a pinch')
        qty_val: The numeric quantity, or None when qty is not a number
        unit: The unit of measurement (e.g., 'cup', 'mins')
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(
        default="",
        description="The component name, e.g. 'frying pan'"
    )
    qty: str = Field(
        default="",
        description="The quantity as written, e.g. '1/2'"
    )
    qty_val: float | None = Field(
        default=None,
        alias="qtyVal",
        description="The parsed quantity, e.g. 0.5, or null when unparsable"
    )
    unit: str = Field(
        default="",
        description="The unit of measurement, e.g. 'cup'"
    )


class Ingredient(Component):
    """An `@ingredient` reference."""


class Cookware(Component):
    """A `#cookware` reference."""


class Timer(Component):
    """A `~timer` reference."""


class TextChunk(BaseModel):
    """Literal text within a step."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["text"] = "text"
    data: str

    def to_text(self) -> str:
        return self.data


class IngredientChunk(BaseModel):
    """An ingredient placed within a step."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["ingredient"] = "ingredient"
    data: Ingredient

    def to_text(self) -> str:
        return self.data.name


class CookwareChunk(BaseModel):
    """A piece of cookware placed within a step."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["cookware"] = "cookware"
    data: Cookware

    def to_text(self) -> str:
        return self.data.name


class TimerChunk(BaseModel):
    """A timer placed within a step."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["timer"] = "timer"
    data: Timer

    def to_text(self) -> str:
        return self.data.name


Chunk = Annotated[
    Union[TextChunk, IngredientChunk, CookwareChunk, TimerChunk],
    Field(discriminator="tag"),
]

Step = tuple[Chunk, ...]


def component_chunk(component: Ingredient | Cookware | Timer) -> Chunk:
    """Wrap a component in the chunk variant matching its type.

    Args:
        component: An ingredient, cookware or timer

    Returns:
        The tagged chunk holding the component
    """
    if isinstance(component, Ingredient):
        return IngredientChunk(data=component)
    if isinstance(component, Cookware):
        return CookwareChunk(data=component)
    if isinstance(component, Timer):
        return TimerChunk(data=component)
    raise TypeError(f"Not a recipe component: {component!r}")


class Recipe(BaseModel):
    """The top-level parsed recipe document.

    The ingredient, cookware and timer lists are manifests: every component
    placed in a step also appears here, in document order, without
    deduplication.

    Attributes:
        name: The recipe name supplied by the caller
        metadata: Metadata entries in document order (repeated tags are kept)
        ingredients: Every ingredient referenced by the steps
        cookware: Every piece of cookware referenced by the steps
        timers: Every timer referenced by the steps
        steps: The recipe steps, each an ordered sequence of chunks
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="The recipe name")
    metadata: tuple[Metadata, ...] = Field(
        default=(),
        description="Metadata entries in document order"
    )
    ingredients: tuple[Ingredient, ...] = Field(
        default=(),
        description="Manifest of referenced ingredients"
    )
    cookware: tuple[Cookware, ...] = Field(
        default=(),
        description="Manifest of referenced cookware"
    )
    timers: tuple[Timer, ...] = Field(
        default=(),
        description="Manifest of referenced timers"
    )
    steps: tuple[Step, ...] = Field(
        default=(),
        description="Ordered steps made of text and component chunks"
    )

    def is_empty(self) -> bool:
        """Return True when the recipe holds no metadata, components or steps."""
        return not (
            self.metadata
            or self.ingredients
            or self.cookware
            or self.timers
            or self.steps
        )

    def step_text(self, index: int) -> str:
        """Join a step's chunks into a readable line.

        Args:
            index: Zero-based step index

        Returns:
            The step text, with components replaced by their names
        """
        return "".join(chunk.to_text() for chunk in self.steps[index])


class ParseResult(BaseModel):
    """A parsed recipe together with whether parsing succeeded.

    Attributes:
        recipe: The parsed recipe, empty when parsing failed
        ok: False when the source could not be parsed at all
    """

    model_config = ConfigDict(frozen=True)

    recipe: Recipe
    ok: bool = True
