"""Parser option handling.

Options are plain dictionaries validated against a voluptuous schema, so the
same keys can come from code, a CLI, or any collaborator's own config file.
"""
from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from .const import (
    CONF_PERMISSIVE_NEWLINES,
    CONF_MAX_SOURCE_BYTES,
    DEFAULT_PERMISSIVE_NEWLINES,
    DEFAULT_MAX_SOURCE_BYTES,
)
from .exceptions import ParserConfigError

_LOGGER = logging.getLogger(__name__)

PARSER_OPTIONS_SCHEMA = vol.Schema(
    {
        vol.Optional(
            CONF_PERMISSIVE_NEWLINES,
            default=DEFAULT_PERMISSIVE_NEWLINES,
        ): bool,
        vol.Optional(
            CONF_MAX_SOURCE_BYTES,
            default=DEFAULT_MAX_SOURCE_BYTES,
        ): vol.All(int, vol.Range(min=1)),
    }
)


def validate_options(options: dict[str, Any] | None = None) -> dict[str, Any]:
    """Validate parser options and fill in defaults.

    Args:
        options: User supplied options, or None for all defaults

    Returns:
        A new dictionary holding every option key

    Raises:
        ParserConfigError: If an option is unknown or has an invalid value
    """
    try:
        validated = PARSER_OPTIONS_SCHEMA(dict(options or {}))
    except vol.Invalid as err:
        _LOGGER.error("Invalid parser options %s: %s", options, err)
        raise ParserConfigError(f"Invalid parser options: {err}") from err

    _LOGGER.debug("Using parser options %s", validated)
    return validated
