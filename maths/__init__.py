"""Arbitrary-precision decimal arithmetic with a chainable API.

Usage:
    from maths import Number, NumberImmutable, RoundingMode

    Number("0.333").multiply(1.861, 102.5).as_string()  # "63.5205825"

    price = NumberImmutable("1.005")
    price.round_to_decimal_places(2, RoundingMode.HALF_DOWN).as_string()  # "1"
    price.as_string()  # "1.005"
"""

from maths.config import DEFAULT_CONFIG, MathsConfig
from maths.constants import DEFAULT_PRECISION, DEFAULT_ROUNDING_MODE
from maths.errors import (
    DivisionByZero,
    InvalidDecimalPlaces,
    InvalidExponent,
    InvalidPowerModulusDivisor,
    MathsError,
    NonNumericValue,
)
from maths.normalize import Operand, is_numeric, normalize
from maths.number import Number
from maths.number_immutable import NumberImmutable
from maths.rounding import RoundingMode
from maths.value import DecimalValue

__version__ = "0.1.0"
__all__ = [
    # Values
    "Number",
    "NumberImmutable",
    "DecimalValue",
    "Operand",
    # Normalization
    "normalize",
    "is_numeric",
    # Config
    "MathsConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_PRECISION",
    "DEFAULT_ROUNDING_MODE",
    "RoundingMode",
    # Errors
    "MathsError",
    "NonNumericValue",
    "DivisionByZero",
    "InvalidExponent",
    "InvalidPowerModulusDivisor",
    "InvalidDecimalPlaces",
    "__version__",
]
