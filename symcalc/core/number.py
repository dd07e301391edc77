"""Exact numeric values carried by Number nodes.

Integers and fractions stay exact; floats are accepted but any operation
involving one produces a float. Helpers return None when a result cannot be
represented exactly (for example a fractional power of a rational).
"""

from __future__ import annotations

import math
from fractions import Fraction
from numbers import Rational
from typing import Optional, Union

NumericValue = Union[int, Fraction, float]

# Exact powers whose numerator or denominator would exceed this many bits are not folded
MAX_EXACT_POWER_BITS = 65536


def normalize(value: object) -> NumericValue:
    """Coerce a Python number into the canonical stored form.

    Raises:
        TypeError: If value is not an int, Fraction or float (bool is rejected)
        ValueError: If value is a non-finite float
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a number")
    if isinstance(value, int):
        return int(value)
    if isinstance(value, Fraction):
        return value.numerator if value.denominator == 1 else value
    if isinstance(value, Rational):
        return normalize(Fraction(value.numerator, value.denominator))
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"non-finite float: {value}")
        return value
    raise TypeError(f"unsupported number type: {type(value).__name__}")


def is_exact(value: NumericValue) -> bool:
    return not isinstance(value, float)


def add_values(a: NumericValue, b: NumericValue) -> NumericValue:
    return normalize(a + b)


def mul_values(a: NumericValue, b: NumericValue) -> NumericValue:
    return normalize(a * b)


def reciprocal(value: NumericValue) -> Optional[NumericValue]:
    """1/value, or None for zero."""
    if value == 0:
        return None
    if isinstance(value, float):
        return 1.0 / value
    return normalize(Fraction(1) / Fraction(value))


def pow_values(base: NumericValue, exponent: NumericValue) -> Optional[NumericValue]:
    """base**exponent when it has an exact (or float) answer, else None.

    Exact powers larger than MAX_EXACT_POWER_BITS are also None, so the caller
    keeps the unfolded Pow.
    """
    if isinstance(exponent, int):
        if base == 0 and exponent < 0:
            return None
        if isinstance(base, float):
            try:
                return normalize(base ** exponent)
            except (OverflowError, ValueError):
                return None
        exact = Fraction(base)
        if abs(exact) != 1 and exact != 0:
            width = max(exact.numerator.bit_length(), exact.denominator.bit_length())
            if width * abs(exponent) > MAX_EXACT_POWER_BITS:
                return None
        return normalize(exact ** exponent)
    if isinstance(base, float) or isinstance(exponent, float):
        if base < 0:
            return None
        try:
            result = float(base) ** float(exponent)
        except OverflowError:
            return None
        return normalize(result) if math.isfinite(result) else None
    return None
