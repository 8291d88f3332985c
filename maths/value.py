"""The canonical decimal value held by Number and NumberImmutable."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from functools import singledispatch

from maths import primitives
from maths.normalize import Operand, normalize


@dataclass(frozen=True)
class DecimalValue:
    """A canonical decimal string plus the precision used to operate on it.

    Attributes:
        number: Canonical decimal string (see maths.normalize)
        precision: Fractional digits carried by every operation on this value
    """

    number: str
    precision: int

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise TypeError(f"precision must be an int, got {type(self.precision).__name__}")
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")

    @classmethod
    def from_operand(cls, operand: Operand, precision: int) -> DecimalValue:
        """Normalize operand and pair it with precision.

        Raises:
            NonNumericValue: If operand is a non-numeric string
            TypeError: If operand is not a supported type
        """
        return cls(normalize(operand), precision)

    def with_number(self, number: str) -> DecimalValue:
        """Return a value holding number at the same precision."""
        return DecimalValue(number, self.precision)

    def truncated(self) -> Decimal:
        """The number cut to precision, as an exact Decimal."""
        return Decimal(primitives.truncate(self.number, self.precision))


@singledispatch
def comparison_key(value: object) -> Decimal | None:
    """Exact Decimal that operators (==, <, hash) use for value.

    Wrappers contribute their number truncated to their own precision, ints
    and floats their exact value (0.1 is its binary expansion, as with
    Decimal). Returns None for anything that does not compare, including
    strings, bools and NaN.
    """
    return None


@comparison_key.register(bool)
def _bool_key(value: bool) -> None:
    return None


@comparison_key.register(int)
def _int_key(value: int) -> Decimal:
    return Decimal(value)


@comparison_key.register(float)
def _float_key(value: float) -> Decimal | None:
    if math.isnan(value):
        return None
    return Decimal(value)


__all__ = ["DecimalValue", "comparison_key"]
