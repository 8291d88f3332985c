"""Immutable decimal number: every operation returns a new instance."""

from __future__ import annotations

from decimal import Decimal

from maths import engine, formatting
from maths.config import DEFAULT_CONFIG, MathsConfig
from maths.normalize import Operand, normalize
from maths.rounding import RoundingMode
from maths.value import DecimalValue, comparison_key


class NumberImmutable:
    """Arbitrary-precision decimal number with value semantics.

    Same operations and operands as Number, but the receiver never
    changes; results carry the receiver's precision and config. Safe to
    share between threads once constructed.

    Operators and hash use the value truncated to its own precision, with
    ints and floats taken exactly, so equal keys hash alike in sets and
    dicts. The is_* methods compare at the receiver's precision.
    """

    __slots__ = ("_value", "_config")

    def __init__(
        self,
        number: Operand = 0,
        precision: int | None = None,
        *,
        config: MathsConfig = DEFAULT_CONFIG,
    ) -> None:
        if precision is None:
            precision = config.precision
        object.__setattr__(self, "_value", DecimalValue.from_operand(number, precision))
        object.__setattr__(self, "_config", config)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> DecimalValue:
        return self._value

    @property
    def precision(self) -> int:
        return self._value.precision

    def _derive(self, number: str) -> NumberImmutable:
        return NumberImmutable(number, self.precision, config=self._config)

    # --- Arithmetic ---

    def add(self, *numbers: Operand) -> NumberImmutable:
        return self._derive(engine.add(self._value.number, numbers, self.precision))

    def subtract(self, *numbers: Operand) -> NumberImmutable:
        return self._derive(engine.subtract(self._value.number, numbers, self.precision))

    def multiply(self, *numbers: Operand) -> NumberImmutable:
        return self._derive(engine.multiply(self._value.number, numbers, self.precision))

    def divide(self, *numbers: Operand) -> NumberImmutable:
        """Raises DivisionByZero if this number or any divisor is zero."""
        return self._derive(engine.divide(self._value.number, numbers, self.precision))

    def modulus(self, divisor: Operand) -> NumberImmutable:
        return self._derive(engine.modulus(self._value.number, divisor, self.precision))

    def square_root(self) -> NumberImmutable:
        """Raises ValueError for a negative number."""
        return self._derive(engine.square_root(self._value.number, self.precision))

    def raise_to_power(self, exponent: Operand) -> NumberImmutable:
        """Raises InvalidExponent if exponent is not a whole number."""
        return self._derive(engine.raise_to_power(self._value.number, exponent, self.precision))

    def raise_to_power_reduce_by_modulus(
        self, exponent: Operand, divisor: Operand
    ) -> NumberImmutable:
        """(self ** exponent) mod divisor.

        Raises:
            InvalidExponent: If exponent is not a whole number
            InvalidPowerModulusDivisor: If divisor is not a whole number
        """
        result = engine.raise_to_power_reduce_by_modulus(
            self._value.number, exponent, divisor, self.precision
        )
        return self._derive(result)

    def increase_by_percentage(self, percent: Operand) -> NumberImmutable:
        return self._derive(engine.increase_by_percentage(self._value.number, percent, self.precision))

    def decrease_by_percentage(self, percent: Operand) -> NumberImmutable:
        return self._derive(engine.decrease_by_percentage(self._value.number, percent, self.precision))

    def round_to_decimal_places(
        self,
        decimal_places: int,
        rounding_mode: RoundingMode | None = None,
    ) -> NumberImmutable:
        """Raises InvalidDecimalPlaces if decimal_places is negative."""
        mode = rounding_mode or self._config.rounding_mode
        return self._derive(formatting.round_to_decimal_places(self._value.number, decimal_places, mode))

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
        return engine.is_zero(self._value.number, self.precision)

    # --- Conversion ---

    def as_string(self, decimal_places: int | None = None, thousands_separator: str = "") -> str:
        return formatting.as_string(self._value.number, decimal_places, thousands_separator)

    def as_float(self) -> float:
        return formatting.as_float(self._value.number)

    def as_decimal(self) -> Decimal:
        return formatting.as_decimal(self._value.number)

    def as_integer(self, rounding_mode: RoundingMode | None = None) -> int:
        return formatting.as_integer(self._value.number, rounding_mode or self._config.rounding_mode)

    # --- Python protocol ---

    def __str__(self) -> str:
        return self._value.number

    def __repr__(self) -> str:
        return f"NumberImmutable('{self._value.number}', precision={self.precision})"

    def __float__(self) -> float:
        return self.as_float()

    def __hash__(self) -> int:
        # Same key as ==, so equal ints, floats and wrappers share a hash
        return hash(self._value.truncated())

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


@normalize.register(NumberImmutable)
def _normalize_number_immutable(value: NumberImmutable) -> str:
    return value.value.number


@comparison_key.register(NumberImmutable)
def _number_immutable_key(value: NumberImmutable) -> Decimal:
    return value.value.truncated()


__all__ = ["NumberImmutable"]
