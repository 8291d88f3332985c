"""Decimal arithmetic engine.

Pure functions of (canonical number, operands, precision). Operands are
normalized first, validated eagerly, then handed to the fixed-scale
primitives. Nothing here holds state: the wrappers decide whether a result
replaces their value or becomes a new instance.

All intermediate results are truncated to ``precision`` fractional digits.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from maths import primitives
from maths.constants import PERCENT, ZERO
from maths.errors import DivisionByZero, InvalidExponent, InvalidPowerModulusDivisor
from maths.normalize import Operand, normalize

logger = structlog.get_logger()


def is_whole_number(number: str) -> bool:
    """Check if a canonical decimal string has no fractional part."""
    return "." not in number


def add(number: str, operands: Sequence[Operand], precision: int) -> str:
    """Add operands to number, left to right."""
    for operand in operands:
        number = primitives.add(number, normalize(operand), precision)
    return number


def subtract(number: str, operands: Sequence[Operand], precision: int) -> str:
    """Subtract operands from number, left to right."""
    for operand in operands:
        number = primitives.subtract(number, normalize(operand), precision)
    return number


def multiply(number: str, operands: Sequence[Operand], precision: int) -> str:
    """Multiply number by operands, left to right."""
    for operand in operands:
        number = primitives.multiply(number, normalize(operand), precision)
    return number


def divide(number: str, operands: Sequence[Operand], precision: int) -> str:
    """Divide number by operands, left to right.

    Raises:
        DivisionByZero: If number is zero, or any operand is zero, at precision
    """
    if is_zero(number, precision):
        logger.debug("division_by_zero", dividend=number)
        raise DivisionByZero()

    for operand in operands:
        divisor = normalize(operand)
        if is_zero(divisor, precision):
            logger.debug("division_by_zero", dividend=number, divisor=divisor)
            raise DivisionByZero()
        number = primitives.divide(number, divisor, precision)
    return number


def modulus(number: str, divisor: Operand, precision: int) -> str:
    """Remainder of number divided by divisor."""
    return primitives.modulo(number, normalize(divisor), precision)


def square_root(number: str, precision: int) -> str:
    """Square root of number.

    Raises:
        ValueError: If number is negative
    """
    return primitives.square_root(number, precision)


def _validate_exponent(exponent: Operand) -> str:
    normalized = normalize(exponent)
    if not is_whole_number(normalized):
        logger.debug("invalid_exponent", exponent=normalized)
        raise InvalidExponent(normalized)
    return normalized


def raise_to_power(number: str, exponent: Operand, precision: int) -> str:
    """Raise number to a whole-number (possibly negative) exponent.

    Raises:
        InvalidExponent: If exponent has a fractional part
        DivisionByZero: If number is zero and exponent is negative
    """
    return primitives.power(number, _validate_exponent(exponent), precision)


def raise_to_power_reduce_by_modulus(
    number: str,
    exponent: Operand,
    divisor: Operand,
    precision: int,
) -> str:
    """Compute (number ** exponent) mod divisor.

    The exponent is validated before the divisor.

    Raises:
        InvalidExponent: If exponent has a fractional part
        InvalidPowerModulusDivisor: If divisor has a fractional part
        DivisionByZero: If divisor is zero
        ValueError: If exponent is negative
    """
    exponent_number = _validate_exponent(exponent)

    divisor_number = normalize(divisor)
    if not is_whole_number(divisor_number):
        logger.debug("invalid_power_modulus_divisor", divisor=divisor_number)
        raise InvalidPowerModulusDivisor(divisor_number)

    return primitives.power_mod(number, exponent_number, divisor_number, precision)


def increase_by_percentage(number: str, percent: Operand, precision: int) -> str:
    """number + number * (percent / 100). A negative percent decreases."""
    fraction = primitives.divide(normalize(percent), PERCENT, precision)
    increase = primitives.multiply(number, fraction, precision)
    return primitives.add(number, increase, precision)


def decrease_by_percentage(number: str, percent: Operand, precision: int) -> str:
    """number - number * (percent / 100). A negative percent increases."""
    fraction = primitives.divide(normalize(percent), PERCENT, precision)
    decrease = primitives.multiply(number, primitives.multiply(fraction, "-1", precision), precision)
    return primitives.add(number, decrease, precision)


def compare(number: str, other: Operand, precision: int) -> int:
    """Three-way comparison at precision: -1, 0 or 1."""
    return primitives.compare(number, normalize(other), precision)


def is_less_than(number: str, other: Operand, precision: int) -> bool:
    return compare(number, other, precision) < 0


def is_greater_than(number: str, other: Operand, precision: int) -> bool:
    return compare(number, other, precision) > 0


def is_equal_to(number: str, other: Operand, precision: int) -> bool:
    return compare(number, other, precision) == 0


def is_less_than_or_equal_to(number: str, other: Operand, precision: int) -> bool:
    return compare(number, other, precision) <= 0


def is_greater_than_or_equal_to(number: str, other: Operand, precision: int) -> bool:
    return compare(number, other, precision) >= 0


def is_zero(number: str, precision: int) -> bool:
    """Check if number equals zero once truncated to precision."""
    return primitives.compare(number, ZERO, precision) == 0


__all__ = [
    "is_whole_number",
    "add",
    "subtract",
    "multiply",
    "divide",
    "modulus",
    "square_root",
    "raise_to_power",
    "raise_to_power_reduce_by_modulus",
    "increase_by_percentage",
    "decrease_by_percentage",
    "compare",
    "is_less_than",
    "is_greater_than",
    "is_equal_to",
    "is_less_than_or_equal_to",
    "is_greater_than_or_equal_to",
    "is_zero",
]
