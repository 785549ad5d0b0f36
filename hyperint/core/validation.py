"""
Input coercion and overflow pre-checks.

The overflow checks decide whether a result would leave the allowed range
without materialising it, so doomed operations fail before doing the
expensive work.
"""

import math
import numbers
import re
from typing import Any

from .constants import ERROR_MESSAGES, MAX_BIT_VALUE, MAX_BITS, MAX_SAFE_INTEGER, MIN_SAFE_INTEGER
from .errors import ArithmeticOverflowError, ArithmeticUnderflowError, ValidationError

_INTEGER_STRING = re.compile(r"-?\d+")


def is_valid_number_string(value: str) -> bool:
    return _INTEGER_STRING.fullmatch(value) is not None


def to_int(value: Any) -> int:
    """
    Coerce ``value`` to a Python int.

    Accepts ints (including NumPy integer scalars), decimal strings matching
    ``-?\\d+`` and finite integral floats.

    Raises:
        ValidationError: For bools, malformed strings, non-finite or
            non-integral floats and unsupported types
    """
    if isinstance(value, bool):
        raise ValidationError("Cannot convert bool to integer")
    if isinstance(value, int):
        return value
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, str):
        if not is_valid_number_string(value):
            raise ValidationError(f"Invalid number string: {value!r}")
        try:
            return int(value)
        except ValueError as exc:
            # Interpreter digit limit for str -> int conversion
            raise ValidationError(str(exc)) from exc
    if isinstance(value, numbers.Real):
        as_float = float(value)
        if not math.isfinite(as_float):
            raise ValidationError(f"Cannot convert non-finite number {value!r} to integer")
        if not as_float.is_integer():
            raise ValidationError(f"Cannot convert non-integer number {value!r} to integer")
        return int(as_float)
    raise ValidationError(f"Cannot convert {type(value).__name__} to integer")


def validate_non_negative(value: int, message: str = "Value must be non-negative") -> int:
    if value < 0:
        raise ValidationError(message)
    return value


def validate_positive(value: int, message: str = "Value must be positive") -> int:
    if value <= 0:
        raise ValidationError(message)
    return value


def is_in_range(value: int, low: int, high: int) -> bool:
    return low <= value <= high


def check_range(value: int, upper: int = MAX_SAFE_INTEGER, lower: int = MIN_SAFE_INTEGER) -> int:
    """Raise if ``value`` lies outside ``[lower, upper]``."""
    if value > upper:
        raise ArithmeticOverflowError()
    if value < lower:
        raise ArithmeticUnderflowError()
    return value


def check_addition_overflow(a: int, b: int, upper: int = MAX_SAFE_INTEGER,
                            lower: int = MIN_SAFE_INTEGER) -> None:
    """Raise if ``a + b`` would leave ``[lower, upper]``."""
    if a > upper - b:
        raise ArithmeticOverflowError("Addition would overflow")
    if a < lower - b:
        raise ArithmeticUnderflowError("Addition would underflow")


def check_multiplication_overflow(a: int, b: int, upper: int = MAX_SAFE_INTEGER,
                                  lower: int = MIN_SAFE_INTEGER) -> None:
    """Raise if ``a * b`` would leave ``[lower, upper]``."""
    if a == 0 or b == 0:
        return
    # Exact for positive magnitudes: |a| * |b| > L  <=>  |a| > L // |b|
    if (a < 0) == (b < 0):
        if abs(a) > upper // abs(b):
            raise ArithmeticOverflowError("Multiplication would overflow")
    elif abs(a) > (-lower) // abs(b):
        raise ArithmeticUnderflowError("Multiplication would underflow")


def check_power_overflow(base: int, exponent: int, max_bits: int = MAX_BITS) -> None:
    """
    Raise if ``base ** exponent`` certainly needs more than ``max_bits`` bits.

    Uses the lower bound ``2**((bit_length(|base|) - 1) * exponent)`` so only
    results that are guaranteed to be too large are rejected here; the
    multiplication loop performs the exact checks.
    """
    if exponent < 0:
        raise ValidationError(ERROR_MESSAGES["NEGATIVE_EXPONENT"])
    magnitude = abs(base)
    if magnitude <= 1 or exponent == 0:
        return
    if (magnitude.bit_length() - 1) * exponent + 1 > max_bits:
        if base < 0 and exponent % 2 == 1:
            raise ArithmeticUnderflowError("Exponentiation would underflow")
        raise ArithmeticOverflowError("Exponentiation would overflow")


def check_bit_bound(a: int, b: int) -> None:
    """Multiplication check against the ``MAX_BITS`` bound used by the power module."""
    check_multiplication_overflow(a, b, MAX_BIT_VALUE, -MAX_BIT_VALUE)
