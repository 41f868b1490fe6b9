"""Services package."""
from .recipe_formatter import format_amount, format_quantity, render_recipe
from .recipe_service import (
    decode_recipe,
    encode_recipe,
    filepath_to_name,
    read_recipe_file,
)

__all__ = [
    "decode_recipe",
    "encode_recipe",
    "filepath_to_name",
    "format_amount",
    "format_quantity",
    "read_recipe_file",
    "render_recipe",
]
