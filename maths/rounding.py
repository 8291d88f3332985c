"""Rounding modes and exact decimal rounding.

Rounding works on ``Decimal`` values directly so that ties are resolved on
the exact decimal digits, never on a binary float approximation
(``1.005`` rounds half-up to ``1.01``).
"""

from __future__ import annotations

import decimal
from decimal import ROUND_DOWN, ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal
from enum import Enum


class RoundingMode(Enum):
    """Policy for a value exactly halfway between two rounding targets."""

    HALF_UP = "half_up"  # away from zero
    HALF_DOWN = "half_down"  # toward zero
    HALF_EVEN = "half_even"
    HALF_ODD = "half_odd"


_DECIMAL_ROUNDING = {
    RoundingMode.HALF_UP: ROUND_HALF_UP,
    RoundingMode.HALF_DOWN: ROUND_HALF_DOWN,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
}


def _rounding_context(value: Decimal, decimal_places: int) -> decimal.Context:
    """Context wide enough to hold every digit of value at decimal_places."""
    digits = len(value.as_tuple().digits)
    prec = digits + max(value.adjusted(), 0) + decimal_places + 2
    return decimal.Context(prec=prec, Emax=decimal.MAX_EMAX, Emin=decimal.MIN_EMIN)


def _round_half_odd(value: Decimal, quantum: Decimal, decimal_places: int) -> Decimal:
    truncated = value.quantize(quantum, rounding=ROUND_DOWN)
    if abs(value - truncated) != quantum / 2:
        # Not a tie: every half-* mode agrees
        return value.quantize(quantum, rounding=ROUND_HALF_UP)

    if int(truncated.scaleb(decimal_places)) % 2 == 1:
        return truncated
    return truncated + quantum.copy_sign(value)


def round_decimal(
    value: Decimal,
    decimal_places: int,
    mode: RoundingMode = RoundingMode.HALF_UP,
) -> Decimal:
    """Round value to decimal_places fractional digits.

    Args:
        value: Finite decimal to round
        decimal_places: Number of fractional digits to keep (>= 0)
        mode: Tie-breaking policy

    Returns:
        The rounded decimal, quantized to exactly decimal_places digits

    Raises:
        TypeError: If mode is not a RoundingMode
    """
    if not isinstance(mode, RoundingMode):
        raise TypeError(f"Rounding mode must be a RoundingMode, got {type(mode).__name__}")

    quantum = Decimal(1).scaleb(-decimal_places)
    with decimal.localcontext(_rounding_context(value, decimal_places)):
        if mode is RoundingMode.HALF_ODD:
            return _round_half_odd(value, quantum, decimal_places)
        return value.quantize(quantum, rounding=_DECIMAL_ROUNDING[mode])


__all__ = [
    "RoundingMode",
    "round_decimal",
]
