"""
Reduction of a parsed document into a Recipe.

Walks metadata and step nodes in document order, merging adjacent text and
recording every component both in its step and in the recipe's manifests.
"""
from __future__ import annotations

import logging

from ..const import TAG_COOKWARE, TAG_INGREDIENT, TAG_TIMER
from ..models.recipe import (
    Chunk,
    Component,
    Cookware,
    Ingredient,
    Metadata,
    Recipe,
    TextChunk,
    Timer,
    component_chunk,
)
from .grammar import (
    AmountNode,
    ComponentNode,
    DocumentNode,
    MetadataNode,
    Span,
    StepNode,
    TextNode,
)
from .quantity import parse_quantity

_LOGGER = logging.getLogger(__name__)

COMPONENT_TYPES: dict[str, type[Component]] = {
    TAG_INGREDIENT: Ingredient,
    TAG_COOKWARE: Cookware,
    TAG_TIMER: Timer,
}


class RecipeReducer:
    """Builds a Recipe from the document node of one source.

    Args:
        text: The comment-stripped source the node offsets point into
        name: The recipe name
    """

    def __init__(self, text: str, name: str) -> None:
        self.text = text
        self.name = name
        self.metadata: list[Metadata] = []
        self.ingredients: list[Ingredient] = []
        self.cookware: list[Cookware] = []
        self.timers: list[Timer] = []
        self.steps: list[tuple[Chunk, ...]] = []

    def _slice(self, span: Span | None) -> str:
        if span is None:
            return ""
        return self.text[span.start:span.end]

    def _amount(self, node: AmountNode | None) -> tuple[str, float | None, str]:
        """Return `(qty, qty_val, unit)` for an amount field."""
        if node is None:
            return "", None, ""

        qty = self._slice(node.quantity).strip()
        unit = self._slice(node.unit).strip()
        return qty, parse_quantity(qty), unit

    def _component(self, node: ComponentNode) -> Ingredient | Cookware | Timer:
        qty, qty_val, unit = self._amount(node.amount)
        component = COMPONENT_TYPES[node.kind](
            name=self._slice(node.name),
            qty=qty,
            qty_val=qty_val,
            unit=unit,
        )

        if isinstance(component, Ingredient):
            self.ingredients.append(component)
        elif isinstance(component, Cookware):
            self.cookware.append(component)
        else:
            self.timers.append(component)
        return component

    def add_metadata(self, node: MetadataNode) -> None:
        self.metadata.append(
            Metadata(
                tag=self._slice(node.key).strip(),
                body=self._slice(node.value).strip(),
            )
        )

    def add_step(self, node: StepNode) -> None:
        """Reduce a step node, joining consecutive text into one chunk."""
        step: list[Chunk] = []
        for chunk_node in node.chunks:
            if isinstance(chunk_node, TextNode):
                text = self._slice(chunk_node.span)
                if step and isinstance(step[-1], TextChunk):
                    step[-1] = TextChunk(data=step[-1].data + text)
                else:
                    step.append(TextChunk(data=text))
            else:
                step.append(component_chunk(self._component(chunk_node)))

        # Lines reduced to nothing are still steps
        self.steps.append(tuple(step))

    def reduce(self, document: DocumentNode) -> Recipe:
        for element in document.elements:
            if isinstance(element, MetadataNode):
                self.add_metadata(element)
            else:
                self.add_step(element)

        _LOGGER.debug(
            "Reduced recipe '%s': %d metadata, %d steps, %d ingredients, "
            "%d cookware, %d timers",
            self.name,
            len(self.metadata),
            len(self.steps),
            len(self.ingredients),
            len(self.cookware),
            len(self.timers),
        )

        return Recipe(
            name=self.name,
            metadata=tuple(self.metadata),
            ingredients=tuple(self.ingredients),
            cookware=tuple(self.cookware),
            timers=tuple(self.timers),
            steps=tuple(self.steps),
        )


def reduce_document(text: str, name: str, document: DocumentNode) -> Recipe:
    """Build the Recipe for a parsed document.

    Args:
        text: The comment-stripped source the document was parsed from
        name: The recipe name
        document: The parsed document node

    Returns:
        The populated Recipe
    """
    return RecipeReducer(text, name).reduce(document)
