"""Exceptions raised by the Cooklang parser package.

Parsing itself never raises: a document that cannot be parsed degrades to an
empty recipe. These exceptions cover the surfaces around the parser.
"""
from __future__ import annotations


class CooklangError(Exception):
    """Base exception for the package."""


class RecipeDecodeError(CooklangError):
    """Raised when a serialized recipe cannot be decoded.

    This covers malformed JSON as well as documents that do not match the
    recipe schema (unknown chunk tags, missing component fields).
    """


class ParserConfigError(CooklangError):
    """Raised when parser options fail validation."""
