"""Error classes for decimal arithmetic.

Every error carries a default message. When the offending value is known
it is appended to the message so callers can see what was rejected.
"""

from __future__ import annotations


class MathsError(ArithmeticError):
    """Base error for decimal arithmetic operations."""

    message = "Maths error."
    detail = ""

    def __init__(self, value: object = None) -> None:
        self.value = value
        if value is None:
            text = self.message
        else:
            text = f"{self.message} {self.detail}{value}"
        super().__init__(text)


class NonNumericValue(MathsError, ValueError):
    """A string operand is not a numeric string."""

    message = "Non-numeric string provided."
    detail = "Value provided: "


class DivisionByZero(MathsError, ZeroDivisionError):
    """The dividend or a divisor is zero."""

    message = "Division by zero."
    detail = "Value provided: "


class InvalidExponent(MathsError, ValueError):
    """Exponent is not a whole number."""

    message = "Exponent must be a whole number."
    detail = "Invalid exponent: "


class InvalidPowerModulusDivisor(MathsError, ValueError):
    """Power-modulus divisor is not a whole number."""

    message = "Divisor must be a whole number."
    detail = "Invalid divisor: "


class InvalidDecimalPlaces(MathsError, ValueError):
    """Requested decimal places is negative."""

    message = "Decimal places must be a whole number greater than or equal to 0."
    detail = "Invalid decimal places number: "


__all__ = [
    "MathsError",
    "NonNumericValue",
    "DivisionByZero",
    "InvalidExponent",
    "InvalidPowerModulusDivisor",
    "InvalidDecimalPlaces",
]
