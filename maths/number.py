"""Mutable decimal number with chainable arithmetic.

Usage pattern:
    from maths import Number

    total = Number("0.333").multiply(1.861, 102.5)
    total.as_string()   # "63.5205825"
    total.as_integer()  # 64

Every arithmetic method updates the number in place and returns it, so
calls chain. Anything holding a reference to the same Number sees the
change. Use NumberImmutable for value semantics.
"""

from __future__ import annotations

from decimal import Decimal

from maths import engine, formatting
from maths.config import DEFAULT_CONFIG, MathsConfig
from maths.normalize import Operand, normalize
from maths.rounding import RoundingMode
from maths.value import DecimalValue, comparison_key


class Number:
    """Arbitrary-precision decimal number, modified in place.

    Operands may be ints, floats, numeric strings (including scientific
    notation), or Number / NumberImmutable instances. Arithmetic carries
    ``precision`` fractional digits and truncates beyond that.

    Validation happens before the held value changes: a method that raises
    leaves the number as it was.

    The is_* methods compare at this number's precision and accept numeric
    strings. Operators (==, <, ...) instead compare exact values: each
    wrapper truncated to its own precision, ints and floats as they are
    (so Number("0.1") != 0.1, like Decimal). Operators are symmetric and
    reject strings.

    Attributes:
        value: The held DecimalValue (read-only)
        precision: Fractional digits carried by arithmetic (read-only)
    """

    __slots__ = ("_value", "_config")
    __hash__ = None  # type: ignore[assignment]  # Unhashable since it is mutable

    def __init__(
        self,
        number: Operand = 0,
        precision: int | None = None,
        *,
        config: MathsConfig = DEFAULT_CONFIG,
    ) -> None:
        """Create a Number.

        Args:
            number: Initial value (default: 0)
            precision: Fractional digits carried by arithmetic
                (default: config.precision)
            config: Default precision and rounding mode

        Raises:
            NonNumericValue: If number is a non-numeric string
            TypeError: If number is not a supported type
            ValueError: If precision is negative
        """
        if precision is None:
            precision = config.precision
        self._value = DecimalValue.from_operand(number, precision)
        self._config = config

    @property
    def value(self) -> DecimalValue:
        """The held canonical value."""
        return self._value

    @property
    def precision(self) -> int:
        """Fractional digits carried by arithmetic."""
        return self._value.precision

    def _update(self, number: str) -> Number:
        self._value = self._value.with_number(number)
        return self

    # --- Arithmetic ---

    def add(self, *numbers: Operand) -> Number:
        """Add one or more numbers, left to right."""
        return self._update(engine.add(self._value.number, numbers, self.precision))

    def subtract(self, *numbers: Operand) -> Number:
        """Subtract one or more numbers, left to right."""
        return self._update(engine.subtract(self._value.number, numbers, self.precision))

    def multiply(self, *numbers: Operand) -> Number:
        """Multiply by one or more numbers, left to right."""
        return self._update(engine.multiply(self._value.number, numbers, self.precision))

    def divide(self, *numbers: Operand) -> Number:
        """Divide by one or more numbers, left to right.

        Raises:
            DivisionByZero: If this number or any divisor is zero
        """
        return self._update(engine.divide(self._value.number, numbers, self.precision))

    def modulus(self, divisor: Operand) -> Number:
        """Replace this number with the remainder of dividing it by divisor.

        The remainder takes the sign of this number.

        Raises:
            DivisionByZero: If divisor is zero
        """
        return self._update(engine.modulus(self._value.number, divisor, self.precision))

    def square_root(self) -> Number:
        """Replace this number with its square root.

        Raises:
            ValueError: If this number is negative
        """
        return self._update(engine.square_root(self._value.number, self.precision))

    def raise_to_power(self, exponent: Operand) -> Number:
        """Raise this number to a whole-number exponent.

        Raises:
            InvalidExponent: If exponent is not a whole number
            DivisionByZero: If this number is zero and exponent is negative
        """
        return self._update(engine.raise_to_power(self._value.number, exponent, self.precision))

    def raise_to_power_reduce_by_modulus(self, exponent: Operand, divisor: Operand) -> Number:
        """Replace this number with (self ** exponent) mod divisor.

        Raises:
            InvalidExponent: If exponent is not a whole number
            InvalidPowerModulusDivisor: If divisor is not a whole number
            DivisionByZero: If divisor is zero
        """
        result = engine.raise_to_power_reduce_by_modulus(
            self._value.number, exponent, divisor, self.precision
        )
        return self._update(result)

    def increase_by_percentage(self, percent: Operand) -> Number:
        """Increase by percent of this number. A negative percent decreases it."""
        return self._update(engine.increase_by_percentage(self._value.number, percent, self.precision))

    def decrease_by_percentage(self, percent: Operand) -> Number:
        """Decrease by percent of this number. A negative percent increases it."""
        return self._update(engine.decrease_by_percentage(self._value.number, percent, self.precision))

    def round_to_decimal_places(
        self,
        decimal_places: int,
        rounding_mode: RoundingMode | None = None,
    ) -> Number:
        """Round this number to decimal_places fractional digits.

        This changes the value; to only display a fixed number of digits use
        as_string(decimal_places).

        Args:
            decimal_places: Fractional digits to keep (>= 0)
            rounding_mode: Tie-breaking policy (default: config.rounding_mode)

        Raises:
            InvalidDecimalPlaces: If decimal_places is negative
        """
        mode = rounding_mode or self._config.rounding_mode
        return self._update(formatting.round_to_decimal_places(self._value.number, decimal_places, mode))

    # --- Comparison ---

    def is_less_than(self, number: Operand) -> bool:
        return engine.is_less_than(self._value.number, number, self.precision)

    def is_greater_than(self, number: Operand) -> bool:
        return engine.is_greater_than(self._value.number, number, self.precision)

    def is_equal_to(self, number: Operand) -> bool:
        return engine.is_equal_to(self._value.number, number, self.precision)

    def is_less_than_or_equal_to(self, number: Operand) -> bool:
        return engine.is_less_than_or_equal_to(self._value.number, number, self.precision)

    def is_greater_than_or_equal_to(self, number: Operand) -> bool:
        return engine.is_greater_than_or_equal_to(self._value.number, number, self.precision)

    def is_zero(self) -> bool:
        """Check if this number is zero at its precision."""
        return engine.is_zero(self._value.number, self.precision)

    # --- Conversion ---

    def as_string(self, decimal_places: int | None = None, thousands_separator: str = "") -> str:
        """Format this number. See maths.formatting.as_string."""
        return formatting.as_string(self._value.number, decimal_places, thousands_separator)

    def as_float(self) -> float:
        return formatting.as_float(self._value.number)

    def as_decimal(self) -> Decimal:
        return formatting.as_decimal(self._value.number)

    def as_integer(self, rounding_mode: RoundingMode | None = None) -> int:
        """Round to a whole number (default mode: config.rounding_mode)."""
        return formatting.as_integer(self._value.number, rounding_mode or self._config.rounding_mode)

    # --- Python protocol ---

    def __str__(self) -> str:
        return self._value.number

    def __repr__(self) -> str:
        return f"Number('{self._value.number}', precision={self.precision})"

    def __float__(self) -> float:
        return self.as_float()

    def __eq__(self, other: object) -> bool:
        key = comparison_key(other)
        if key is None:
            return NotImplemented
        return self._value.truncated() == key

    def __lt__(self, other: object) -> bool:
        key = comparison_key(other)
        if key is None:
            return NotImplemented
        return self._value.truncated() < key

    def __le__(self, other: object) -> bool:
        key = comparison_key(other)
        if key is None:
            return NotImplemented
        return self._value.truncated() <= key

    def __gt__(self, other: object) -> bool:
        key = comparison_key(other)
        if key is None:
            return NotImplemented
        return self._value.truncated() > key

    def __ge__(self, other: object) -> bool:
        key = comparison_key(other)
        if key is None:
            return NotImplemented
        return self._value.truncated() >= key


@normalize.register(Number)
def _normalize_number(value: Number) -> str:
    return value.value.number


@comparison_key.register(Number)
def _number_key(value: Number) -> Decimal:
    return value.value.truncated()


__all__ = ["Number"]
