"""Numeric defaults shared by the arithmetic engine and the wrappers."""

from maths.rounding import RoundingMode

# Fractional digits carried internally by every arithmetic operation.
# Results are truncated (not rounded) to this many digits.
DEFAULT_PRECISION = 64

# Tie-breaking policy for as_integer() and round_to_decimal_places()
DEFAULT_ROUNDING_MODE = RoundingMode.HALF_UP

# Divisor that turns a percentage into a fraction
PERCENT = "100"

# Canonical form of zero
ZERO = "0"
