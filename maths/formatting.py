"""Conversions from a canonical decimal string to display and native types."""

from __future__ import annotations

from decimal import Decimal

import structlog

from maths.constants import DEFAULT_ROUNDING_MODE
from maths.errors import InvalidDecimalPlaces
from maths.normalize import canonicalize
from maths.rounding import RoundingMode, round_decimal

logger = structlog.get_logger()


def _validate_decimal_places(decimal_places: int) -> None:
    if isinstance(decimal_places, bool) or not isinstance(decimal_places, int):
        raise TypeError(f"Decimal places must be an int, got {type(decimal_places).__name__}")
    if decimal_places < 0:
        logger.debug("invalid_decimal_places", decimal_places=decimal_places)
        raise InvalidDecimalPlaces(decimal_places)


def as_string(
    number: str,
    decimal_places: int | None = None,
    thousands_separator: str = "",
) -> str:
    """Render a canonical decimal string for display.

    Without decimal_places the canonical string is returned unchanged and
    thousands_separator is ignored. With decimal_places the value is rounded
    half-up (on its exact decimal digits) and padded to exactly that many
    fractional digits, with integer digits grouped in threes.

    Args:
        number: Canonical decimal string
        decimal_places: Fractional digits to show, or None for all of them
        thousands_separator: Inserted between groups of integer digits

    Returns:
        Formatted string, e.g. "10,000.30"

    Raises:
        InvalidDecimalPlaces: If decimal_places is negative
    """
    if decimal_places is None:
        return number

    _validate_decimal_places(decimal_places)
    rounded = round_decimal(Decimal(number), decimal_places, RoundingMode.HALF_UP)
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return format(rounded, ",f").replace(",", thousands_separator)


def as_float(number: str) -> float:
    """Nearest float to the value. Lossy for long or large values."""
    return float(number)


def as_decimal(number: str) -> Decimal:
    """Exact Decimal of the value."""
    return Decimal(number)


def as_integer(number: str, rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> int:
    """Round the value to a whole number using rounding_mode."""
    return int(round_decimal(Decimal(number), 0, rounding_mode))


def round_to_decimal_places(
    number: str,
    decimal_places: int,
    rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE,
) -> str:
    """Round the value to decimal_places and return the canonical result.

    Unlike as_string(decimal_places), trailing zeros are not kept:
    "1.005" rounded half-down to 2 places is "1", not "1.00".

    Raises:
        InvalidDecimalPlaces: If decimal_places is negative
    """
    _validate_decimal_places(decimal_places)
    rounded = round_decimal(Decimal(number), decimal_places, rounding_mode)
    return canonicalize(format(rounded, "f"))


__all__ = [
    "as_string",
    "as_float",
    "as_decimal",
    "as_integer",
    "round_to_decimal_places",
]
