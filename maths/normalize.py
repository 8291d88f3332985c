"""Canonical decimal string normalization.

Every operand accepted by the arithmetic engine is flattened to a canonical
decimal string before use:

- optional "-", then digits, then optionally "." and more digits
- no exponent, no leading zeros (except a lone "0" integer part)
- no trailing fractional zeros and no bare trailing "."
- "0" is the only representation of zero

Dispatch is by operand type (singledispatch). int, float and str are
registered here; the value wrappers register themselves in their own
modules so that their stored canonical string is used as-is.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from functools import singledispatch
from typing import TYPE_CHECKING, Union

import structlog

from maths.errors import NonNumericValue

if TYPE_CHECKING:
    from maths.number import Number
    from maths.number_immutable import NumberImmutable

logger = structlog.get_logger()

# Any value accepted where a number is expected
Operand = Union[int, float, str, "Number", "NumberImmutable"]

# Sign, digits with optional fraction (or a bare fraction), optional exponent
_NUMERIC_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def is_numeric(value: str) -> bool:
    """Check if a string is a numeric string.

    Surrounding whitespace is ignored. Accepts an optional sign, digits with
    an optional fractional part and an optional exponent ("1", "-2.5",
    ".5", "8.431e-05"). Rejects "NaN", "Infinity", "1_000" and "0x1f".
    """
    if not isinstance(value, str):
        return False
    return _NUMERIC_PATTERN.fullmatch(value.strip()) is not None


def _expand_exponent(text: str) -> str:
    """Expand scientific notation into a plain decimal string (exact)."""
    return format(Decimal(text), "f")


def canonicalize(text: str) -> str:
    """Turn a validated numeric string into its canonical form.

    Args:
        text: A string for which is_numeric() is True

    Returns:
        Canonical decimal string
    """
    text = text.strip()
    if "e" in text or "E" in text:
        text = _expand_exponent(text)

    negative = text.startswith("-")
    text = text.lstrip("+-")

    whole, _, fraction = text.partition(".")
    whole = whole.lstrip("0") or "0"
    fraction = fraction.rstrip("0")

    body = f"{whole}.{fraction}" if fraction else whole
    if body == "0":
        return "0"
    return f"-{body}" if negative else body


@singledispatch
def normalize(value: object) -> str:
    """Normalize an operand to its canonical decimal string.

    Args:
        value: int, float, numeric string, or a Number / NumberImmutable

    Returns:
        Canonical decimal string

    Raises:
        NonNumericValue: If a string is not numeric, or a float is NaN/infinite
        TypeError: If the operand type is not supported
    """
    raise TypeError(f"Unsupported operand type: {type(value).__name__}")


@normalize.register(bool)
def _normalize_bool(value: bool) -> str:
    raise TypeError("Unsupported operand type: bool")


@normalize.register(int)
def _normalize_int(value: int) -> str:
    # str(int) is capped by sys.get_int_max_str_digits(); Decimal is not
    return str(Decimal(value))


@normalize.register(str)
def _normalize_str(value: str) -> str:
    if not is_numeric(value):
        logger.debug("non_numeric_value", value=value)
        raise NonNumericValue(value)
    return canonicalize(value)


@normalize.register(float)
def _normalize_float(value: float) -> str:
    if not math.isfinite(value):
        logger.debug("non_finite_float", value=value)
        raise NonNumericValue(value)

    # repr() is the shortest literal that round-trips to the same float,
    # i.e. the decimal the caller wrote, not the binary expansion.
    return canonicalize(repr(value))


__all__ = [
    "Operand",
    "normalize",
    "canonicalize",
    "is_numeric",
]
