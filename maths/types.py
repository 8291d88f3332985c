"""pydantic types for embedding decimal values in models.

Example:
    from pydantic import BaseModel

    class Invoice(BaseModel):
        total: DecimalString
        precision: Precision = 64

    Invoice(total="1.50e2").total  # "150"
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from maths.normalize import normalize


def validate_decimal_string(value: Any) -> str:
    """Validate and normalize a value to a canonical decimal string.

    Args:
        value: int, float, numeric string, Number or NumberImmutable

    Returns:
        Canonical decimal string

    Raises:
        ValueError: If value is not numeric or not a supported type
    """
    try:
        return normalize(value)
    except TypeError as err:
        raise ValueError(str(err)) from err


# Canonical decimal string (validated and normalized)
DecimalString = Annotated[
    str,
    BeforeValidator(validate_decimal_string),
    Field(description="Canonical decimal string"),
]

# Fractional digits carried by arithmetic
Precision = Annotated[int, Field(ge=0, description="Fractional digits carried by arithmetic")]
