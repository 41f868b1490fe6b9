"""
Recipe Service.

This module holds the operations collaborators run around the parser:
reading recipe files, naming recipes after their paths, and converting
recipes to and from their JSON form.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..exceptions import RecipeDecodeError
from ..models.recipe import ParseResult, Recipe
from ..parsers.cooklang_parser import CooklangParser

_LOGGER = logging.getLogger(__name__)


def filepath_to_name(path: str | Path) -> str:
    """Name a recipe after its file path.

    Args:
        path: Path to a recipe file, e.g. 'recipes/pink_salt-fries.cook'

    Returns:
        The file name without extension, with '_' and '-' as spaces
    """
    stem = Path(path).stem
    return stem.replace("_", " ").replace("-", " ")


def read_recipe_file(path: str | Path, options: dict[str, Any] | None = None) -> ParseResult:
    """Read and parse a recipe file.

    Args:
        path: Path to a `.cook` file
        options: Optional parser options

    Returns:
        The ParseResult for the file's contents

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(path)
    data = path.read_bytes()
    _LOGGER.debug("Read %d bytes from %s", len(data), path)

    result = CooklangParser(options).parse_recipe(filepath_to_name(path), data)
    if not result.ok:
        _LOGGER.warning("Recipe file %s could not be parsed", path)
    return result


def encode_recipe(recipe: Recipe) -> str:
    """Encode a recipe as JSON.

    Steps are arrays of `{"tag": ..., "data": ...}` chunks and components use
    the `qtyVal` key, with null for quantities that are not numeric.
    """
    return recipe.model_dump_json(by_alias=True)


def decode_recipe(obj: str | bytes) -> Recipe:
    """Decode a JSON recipe produced by `encode_recipe`.

    Args:
        obj: The JSON document

    Returns:
        The decoded Recipe

    Raises:
        RecipeDecodeError: If the JSON is malformed or not a recipe
    """
    try:
        return Recipe.model_validate_json(obj)
    except ValidationError as err:
        _LOGGER.debug("Failed to decode JSON recipe: %s", err)
        raise RecipeDecodeError(f"Failed to decode JSON recipe: {err}") from err
