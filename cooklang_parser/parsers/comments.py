"""
Comment stripping for Cooklang sources.

Runs on the raw bytes before the grammar sees them. Line comments (`-- ...`)
are replaced with a single newline so the line structure survives. Block
comments (`[- ... -]`) may span lines, do not nest, and are removed outright;
an unclosed block runs to the end of the input.
"""
from __future__ import annotations

import re

_COMMENT_RE = re.compile(
    rb"(?P<line>--[^\r\n]*(?:\r\n|\n|\r|\Z))"
    rb"|(?P<block>\[-.*?(?:-\]|\Z))",
    re.DOTALL,
)


def _replace(match: re.Match[bytes]) -> bytes:
    if match.group("line") is not None:
        return b"\n"
    return b""


def strip_comments(data: bytes) -> bytes:
    """Remove line and block comments from a recipe source.

    Args:
        data: Raw recipe bytes

    Returns:
        The source with comment content removed
    """
    return _COMMENT_RE.sub(_replace, data)
