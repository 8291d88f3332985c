"""Arithmetic configuration for decimal values."""

from dataclasses import dataclass

from maths.constants import DEFAULT_PRECISION, DEFAULT_ROUNDING_MODE
from maths.rounding import RoundingMode


@dataclass(frozen=True)
class MathsConfig:
    """Defaults injected into a value at construction time.

    Attributes:
        precision: Fractional digits carried during arithmetic (default: 64)
        rounding_mode: Default tie-breaking policy for as_integer() and
            round_to_decimal_places() (default: HALF_UP)
    """

    precision: int = DEFAULT_PRECISION
    rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise TypeError(f"precision must be an int, got {type(self.precision).__name__}")
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")
        if not isinstance(self.rounding_mode, RoundingMode):
            raise TypeError(
                f"rounding_mode must be a RoundingMode, got {type(self.rounding_mode).__name__}"
            )


# Default configuration instance
DEFAULT_CONFIG = MathsConfig()
