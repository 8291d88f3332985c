"""Fixed-scale decimal arithmetic on canonical decimal strings.

Each function takes canonical decimal strings plus a ``scale`` (number of
fractional digits in the result) and returns a canonical decimal string.
Results are exact up to ``scale`` digits and truncated toward zero beyond
it, never rounded.

Values are held as scaled integers: "12.345" is (12345, 3). Python ints are
unbounded, so no intermediate step loses digits. Conversions between ints
and digit strings go through Decimal, which is not subject to the
interpreter's int/str digit limit.
"""

from __future__ import annotations

import math
from decimal import Decimal

from maths.errors import DivisionByZero
from maths.normalize import canonicalize


def _parse(number: str) -> tuple[int, int]:
    """Split a canonical decimal string into (unscaled, scale)."""
    whole, _, fraction = number.partition(".")
    return int(Decimal(whole + fraction)), len(fraction)


def _format(unscaled: int, scale: int) -> str:
    """Render (unscaled, scale) as a canonical decimal string."""
    sign = "-" if unscaled < 0 else ""
    digits = str(Decimal(abs(unscaled)))
    if scale == 0:
        return canonicalize(sign + digits)
    digits = digits.rjust(scale + 1, "0")
    return canonicalize(f"{sign}{digits[:-scale]}.{digits[-scale:]}")


def _div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // rounds toward negative infinity; decimal truncation needs
    -7 / 3 == -2, not -3.

    Raises:
        DivisionByZero: If b is zero
    """
    if b == 0:
        raise DivisionByZero()
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def _rescale(unscaled: int, scale: int, target: int) -> int:
    """Express unscaled/10^scale at target scale, truncating toward zero."""
    if scale <= target:
        return unscaled * 10 ** (target - scale)
    return _div_trunc(unscaled, 10 ** (scale - target))


def _align(a: str, b: str) -> tuple[int, int, int]:
    """Parse two numbers onto a common scale: (unscaled_a, unscaled_b, scale)."""
    ua, sa = _parse(a)
    ub, sb = _parse(b)
    scale = max(sa, sb)
    return ua * 10 ** (scale - sa), ub * 10 ** (scale - sb), scale


def _whole(number: str, name: str) -> int:
    unscaled, scale = _parse(number)
    if scale != 0:
        raise ValueError(f"{name} must be a whole number, got {number}")
    return unscaled


def add(a: str, b: str, scale: int) -> str:
    """a + b truncated to scale."""
    ua, ub, common = _align(a, b)
    return _format(_rescale(ua + ub, common, scale), scale)


def subtract(a: str, b: str, scale: int) -> str:
    """a - b truncated to scale."""
    ua, ub, common = _align(a, b)
    return _format(_rescale(ua - ub, common, scale), scale)


def multiply(a: str, b: str, scale: int) -> str:
    """a * b truncated to scale."""
    ua, sa = _parse(a)
    ub, sb = _parse(b)
    return _format(_rescale(ua * ub, sa + sb, scale), scale)


def divide(a: str, b: str, scale: int) -> str:
    """a / b truncated to scale.

    Raises:
        DivisionByZero: If b is zero
    """
    ua, sa = _parse(a)
    ub, sb = _parse(b)
    quotient = _div_trunc(ua * 10 ** (sb + scale), ub * 10**sa)
    return _format(quotient, scale)


def modulo(a: str, b: str, scale: int) -> str:
    """Remainder of a / b truncated to scale.

    The quotient is truncated to a whole number, so the remainder takes the
    sign of a: modulo("-5", "3", 0) == "-2".

    Raises:
        DivisionByZero: If b is zero
    """
    ua, ub, common = _align(a, b)
    quotient = _div_trunc(ua, ub)
    return _format(_rescale(ua - ub * quotient, common, scale), scale)


def square_root(a: str, scale: int) -> str:
    """Square root of a, truncated to scale.

    Raises:
        ValueError: If a is negative
    """
    ua, sa = _parse(a)
    if ua < 0:
        raise ValueError(f"Square root of negative number: {a}")
    # floor(sqrt(x)) at scale == isqrt(x at 2 * scale)
    return _format(math.isqrt(_rescale(ua, sa, 2 * scale)), scale)


def power(a: str, exponent: str, scale: int) -> str:
    """a raised to a whole-number exponent, truncated to scale.

    Negative exponents give the truncated reciprocal of a ** -exponent.

    Raises:
        ValueError: If exponent is not a whole number
        DivisionByZero: If a is zero and exponent is negative
    """
    e = _whole(exponent, "Exponent")
    ua, sa = _parse(a)
    if e >= 0:
        return _format(_rescale(ua**e, sa * e, scale), scale)

    denominator = ua ** (-e)
    return _format(_div_trunc(10 ** (sa * -e + scale), denominator), scale)


def power_mod(a: str, exponent: str, modulus: str, scale: int) -> str:
    """(a ** exponent) mod modulus, truncated to scale.

    The remainder takes the sign of a ** exponent, as in modulo().

    Raises:
        ValueError: If exponent or modulus is not a whole number, or the
            exponent is negative
        DivisionByZero: If modulus is zero
    """
    e = _whole(exponent, "Exponent")
    m = _whole(modulus, "Modulus")
    if e < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")
    if m == 0:
        raise DivisionByZero()

    ua, sa = _parse(a)
    if sa == 0:
        remainder = pow(ua, e, abs(m))
        if ua < 0 and e % 2 == 1 and remainder != 0:
            remainder -= abs(m)
        return _format(_rescale(remainder, 0, scale), scale)

    raised, raised_scale = ua**e, sa * e
    divisor = m * 10**raised_scale
    remainder = raised - divisor * _div_trunc(raised, divisor)
    return _format(_rescale(remainder, raised_scale, scale), scale)


def truncate(a: str, scale: int) -> str:
    """a truncated toward zero to scale."""
    unscaled, current = _parse(a)
    return _format(_rescale(unscaled, current, scale), scale)


def compare(a: str, b: str, scale: int) -> int:
    """Three-way comparison of a and b, both truncated to scale.

    Returns:
        -1 if a < b, 0 if equal, 1 if a > b
    """
    ua, sa = _parse(a)
    ub, sb = _parse(b)
    ta = _rescale(ua, sa, scale)
    tb = _rescale(ub, sb, scale)
    return (ta > tb) - (ta < tb)


__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "modulo",
    "square_root",
    "power",
    "power_mod",
    "compare",
    "truncate",
]
