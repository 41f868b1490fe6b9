import json
from pathlib import Path

import pytest

from cooklang_parser import RecipeDecodeError, parse_string
from cooklang_parser.services.recipe_service import (
    decode_recipe,
    encode_recipe,
    filepath_to_name,
    read_recipe_file,
)

SOURCE = """>> servings: 2
>> servings: 4
Put @milk{1/2%cup} and @sugar{a pinch} in a #small pot{}.
Simmer for ~simmer{10%minutes}, then ~{1%min} more.
-- nothing here

Serve."""


def test_encode_recipe_shape() -> None:
    got = json.loads(encode_recipe(parse_string("Milk", "@milk{1/2%cup} in #pot{}")))
    milk = {"name": "milk", "qty": "1/2", "qtyVal": 0.5, "unit": "cup"}
    pot = {"name": "pot", "qty": "", "qtyVal": None, "unit": ""}
    assert got == {
        "name": "Milk",
        "metadata": [],
        "ingredients": [milk],
        "cookware": [pot],
        "timers": [],
        "steps": [
            [
                {"tag": "ingredient", "data": milk},
                {"tag": "text", "data": " in "},
                {"tag": "cookware", "data": pot},
            ]
        ],
    }


def test_round_trip() -> None:
    recipe = parse_string("Warm milk", SOURCE)
    assert decode_recipe(encode_recipe(recipe)) == recipe


def test_round_trip_empty_recipe() -> None:
    recipe = parse_string("Nothing", "")
    assert decode_recipe(encode_recipe(recipe)) == recipe


@pytest.mark.parametrize(
    "given",
    (
        "not json",
        '{"metadata": []}',
        '{"name": "x", "steps": [[{"tag": "spoon", "data": "x"}]]}',
        '{"name": "x", "ingredients": [{"qty": 1}]}',
    ),
)
def test_decode_recipe_errors(given: str) -> None:
    with pytest.raises(RecipeDecodeError):
        decode_recipe(given)


@pytest.mark.parametrize(
    "path,expected",
    (
        ("recipes/pink_salt-fries.cook", "pink salt fries"),
        ("Banana Bread.cook", "Banana Bread"),
        (Path("/tmp/soup"), "soup"),
    ),
)
def test_filepath_to_name(path: str | Path, expected: str) -> None:
    assert filepath_to_name(path) == expected


def test_read_recipe_file(tmp_path: Path) -> None:
    path = tmp_path / "warm_milk.cook"
    path.write_text(SOURCE, encoding="utf-8")

    got = read_recipe_file(path)
    assert got.ok
    assert got.recipe.name == "warm milk"
    assert [m.body for m in got.recipe.metadata] == ["2", "4"]
    assert [t.name for t in got.recipe.timers] == ["simmer", ""]
    assert got.recipe.ingredients[1].qty_val is None


def test_read_recipe_file_missing(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_recipe_file(tmp_path / "missing.cook")
