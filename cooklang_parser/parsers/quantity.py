"""
Quantity parsing for component amounts.

Turns the quantity text of an amount field (`{1/2%cup}` -> '1/2') into a
numeric value. Parsing is total: anything that is not a plain decimal or a
simple fraction resolves to None, the no-quantity value. Values too large or
too small to hold as a finite, non-zero float also resolve to None.
"""
from __future__ import annotations

import logging
import math
import re

_LOGGER = logging.getLogger(__name__)

# Non-negative decimals without a leading zero, except for '0.x' and '.x'
_DECIMAL_RE = re.compile(r"0?\.[0-9]+|[1-9][0-9]*(?:\.?[0-9]+)?")
# 'a/b' with a and b positive and free of leading zeros
_FRACTION_RE = re.compile(r"([1-9][0-9]*)\s*/\s*([1-9][0-9]*)")


def parse_fraction(fraction_str: str) -> float | None:
    """Parse a fraction string like '1/2' or '3 / 4'.

    Args:
        fraction_str: A string containing a fraction

    Returns:
        The decimal value of the fraction, or None if it is not a valid
        fraction or its value does not fit a finite, non-zero float
    """
    match = _FRACTION_RE.fullmatch(fraction_str)
    if not match:
        return None

    numerator, denominator = match.groups()
    # float() has no digit limit, unlike int()
    value = float(numerator) / float(denominator)
    if not math.isfinite(value) or value == 0.0:
        return None
    return value


def parse_quantity(quantity_str: str) -> float | None:
    """Parse a trimmed quantity string into a number.

    Args:
        quantity_str: String like '2', '2.5', '.5', '1/2' or 'a pinch'

    Returns:
        Parsed float value, or None if the string is empty or not numeric
    """
    if not quantity_str:
        return None

    if _DECIMAL_RE.fullmatch(quantity_str):
        value = float(quantity_str)
        if math.isfinite(value):
            return value
        _LOGGER.debug("Quantity '%.20s...' overflows a float", quantity_str)
        return None

    value = parse_fraction(quantity_str)
    if value is None:
        _LOGGER.debug("Quantity '%.20s' is not numeric", quantity_str)
    return value
