"""
Recipe Formatter.

This module renders parsed recipes as plain text listings for terminals.
"""
from __future__ import annotations

from ..models.recipe import Component, Recipe

HEADER_TEMPLATE = "========= {name} ========"
COLUMN_GAP = 4


def format_quantity(quantity: float | None) -> str:
    """Render a parsed quantity to at most two decimal places.

    Trailing zeros are dropped, so `3.0` reads `3` and `0.25` reads `0.25`.
    The no-quantity value renders as an empty string.
    """
    if quantity is None:
        return ""
    return f"{quantity:.2f}".rstrip("0").rstrip(".")


def format_amount(component: Component) -> str:
    """Format a component's amount, preferring the parsed value.

    Falls back to the quantity as written when it is not numeric.
    """
    if component.qty_val is not None:
        qty = format_quantity(component.qty_val)
    else:
        qty = component.qty
    return f"{qty} {component.unit}".strip()


def _format_table(components: tuple[Component, ...]) -> list[str]:
    width = max(len(component.name) for component in components) + COLUMN_GAP
    return [
        f"\t{component.name.ljust(width)}{format_amount(component)}".rstrip()
        for component in components
    ]


def render_recipe(recipe: Recipe) -> str:
    """Render a recipe as a human readable listing.

    Args:
        recipe: The recipe to render

    Returns:
        The listing, with a section for each non-empty part of the recipe
    """
    lines = [HEADER_TEMPLATE.format(name=recipe.name)]

    if recipe.metadata:
        lines.append("Metadata:")
        lines.extend(f"\t{meta.tag}: {meta.body}" for meta in recipe.metadata)
        lines.append("")

    if recipe.ingredients:
        lines.append("Ingredients:")
        lines.extend(_format_table(recipe.ingredients))
        lines.append("")

    if recipe.cookware:
        lines.append("Cookware:")
        lines.extend(_format_table(recipe.cookware))
        lines.append("")

    if recipe.steps:
        lines.append("Steps:")
        lines.extend(
            f"\t{number}. {recipe.step_text(number - 1)}"
            for number in range(1, len(recipe.steps) + 1)
        )
        lines.append("")

    return "\n".join(lines)
