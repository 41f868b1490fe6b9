import pytest
from pydantic import ValidationError

from cooklang_parser import (
    Cookware,
    Ingredient,
    Recipe,
    TextChunk,
    Timer,
    TimerChunk,
    parse_string,
)
from cooklang_parser.models.recipe import component_chunk


def test_recipe_is_frozen() -> None:
    recipe = parse_string("Salt", "@salt{}")
    with pytest.raises(ValidationError):
        recipe.name = "Pepper"
    with pytest.raises(ValidationError):
        recipe.ingredients[0].qty = "2"


def test_components_differ_by_kind() -> None:
    assert Ingredient(name="pan") != Cookware(name="pan")


def test_component_accepts_alias() -> None:
    assert Timer.model_validate({"name": "", "qtyVal": 5}).qty_val == 5.0


def test_component_chunk() -> None:
    timer = Timer(qty="5", qty_val=5.0, unit="min")
    assert component_chunk(timer) == TimerChunk(data=timer)
    with pytest.raises(TypeError):
        component_chunk("salt")


def test_step_text() -> None:
    recipe = Recipe(
        name="Tea",
        steps=((TextChunk(data="Steep for "), TimerChunk(data=Timer(name="tea"))),),
    )
    assert recipe.step_text(0) == "Steep for tea"
    assert not recipe.is_empty()
