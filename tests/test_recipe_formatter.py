import pytest

from cooklang_parser import Ingredient, Recipe, parse_string
from cooklang_parser.services.recipe_formatter import (
    format_amount,
    format_quantity,
    render_recipe,
)


@pytest.mark.parametrize(
    "given,expected",
    (
        (None, ""),
        (2.0, "2"),
        (2.5, "2.5"),
        (1 / 3, "0.33"),
        (840, "840"),
    ),
)
def test_format_quantity(given: float | None, expected: str) -> None:
    assert format_quantity(given) == expected


def test_format_amount() -> None:
    assert format_amount(Ingredient(name="milk", qty="1/2", qty_val=0.5, unit="cup")) == "0.5 cup"
    assert format_amount(Ingredient(name="salt", qty="a pinch")) == "a pinch"
    assert format_amount(Ingredient(name="salt")) == ""


def test_render_recipe() -> None:
    recipe = parse_string("Milk", ">> source: farm\nPour @milk{1/2%cup} into #glass{}.")
    assert render_recipe(recipe) == "\n".join(
        [
            "========= Milk ========",
            "Metadata:",
            "\tsource: farm",
            "",
            "Ingredients:",
            "\tmilk    0.5 cup",
            "",
            "Cookware:",
            "\tglass",
            "",
            "Steps:",
            "\t1. Pour milk into glass.",
            "",
        ]
    )


def test_render_empty_recipe() -> None:
    assert render_recipe(Recipe(name="Nothing")) == "========= Nothing ========"
