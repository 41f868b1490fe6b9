"""Constants for the Cooklang parser."""

# Option keys
CONF_PERMISSIVE_NEWLINES = "permissive_newlines"
CONF_MAX_SOURCE_BYTES = "max_source_bytes"

# Default values
DEFAULT_PERMISSIVE_NEWLINES = True
DEFAULT_MAX_SOURCE_BYTES = 1024 * 1024

# Markup terminals
TIMER = "~"
INGREDIENT = "@"
COOKWARE = "#"
SPECIFIERS = frozenset((TIMER, INGREDIENT, COOKWARE))
AMOUNT_OPEN = "{"
AMOUNT_CLOSE = "}"
UNIT_SEPARATOR = "%"
METADATA_OPENER = ">>"
METADATA_SEPARATOR = ":"

# Component kinds, matching the chunk tags of serialized steps
TAG_INGREDIENT = "ingredient"
TAG_COOKWARE = "cookware"
TAG_TIMER = "timer"

# Environment variables read by the reader CLI
ENV_LOG_LEVEL = "COOKLANG_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
