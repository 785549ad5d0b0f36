"""
Overflow-checked arithmetic on arbitrary-precision integers.

Every binary operation coerces its inputs with :func:`to_int` and, when
``check_overflow`` is set, verifies that the result stays inside
``[MIN_SAFE_INTEGER, MAX_SAFE_INTEGER]`` before computing it.
"""

from typing import Any, Mapping, Optional, Union

from . import power as _power
from .errors import DivisionByZeroError
from .options import ArithmeticOptions, resolve_options
from .precision import scaled_division
from .validation import (
    check_addition_overflow,
    check_multiplication_overflow,
    check_range,
    to_int,
)

Number = Union[int, str, float]
Options = Optional[Union[ArithmeticOptions, Mapping[str, Any]]]


def add(a: Number, b: Number, options: Options = None) -> int:
    """
    Add two values.

    With ``precision > 0`` both operands are read as scaled values at that
    precision; the sum is exact at the same precision.
    """
    opts = resolve_options(options)
    a, b = to_int(a), to_int(b)
    if opts.check_overflow:
        check_addition_overflow(a, b)
    return a + b


def subtract(a: Number, b: Number, options: Options = None) -> int:
    opts = resolve_options(options)
    a, b = to_int(a), to_int(b)
    if opts.check_overflow:
        check_addition_overflow(a, -b)
    return a - b


def multiply(a: Number, b: Number, options: Options = None) -> int:
    """
    Multiply two values.

    Exact at precision 0. With ``precision = p > 0`` the raw product has
    ``2p`` fractional digits and is rounded back to ``p`` per the rounding
    mode. The overflow check applies to the raw product.
    """
    opts = resolve_options(options)
    a, b = to_int(a), to_int(b)
    if opts.check_overflow:
        check_multiplication_overflow(a, b)
    product = a * b
    if opts.precision == 0:
        return product
    return scaled_division(product, 10**opts.precision, 0, opts.rounding_mode)


def divide(numerator: Number, denominator: Number, options: Options = None) -> int:
    """
    Divide with ``precision`` fractional digits, rounding per the options.

    Operands sharing a precision cancel their scale, so the quotient of two
    scaled values at ``p`` is ``scaled_division(a, b, p)``.

    Raises:
        DivisionByZeroError: If ``denominator`` is zero
    """
    opts = resolve_options(options)
    numerator, denominator = to_int(numerator), to_int(denominator)
    if denominator == 0:
        raise DivisionByZeroError()
    quotient = scaled_division(numerator, denominator, opts.precision, opts.rounding_mode)
    if opts.check_overflow:
        check_range(quotient)
    return quotient


def remainder(a: Number, b: Number, options: Options = None) -> int:
    """
    Euclidean remainder: ``0 <= remainder(a, b) < abs(b)``.

    Raises:
        DivisionByZeroError: If ``b`` is zero
    """
    resolve_options(options)  # validate only; the remainder is scale-independent
    a, b = to_int(a), to_int(b)
    if b == 0:
        raise DivisionByZeroError("Division by zero in remainder operation")
    return a % abs(b)


def power(base: Number, exponent: Number, options: Options = None) -> int:
    """Binary exponentiation, see :func:`hyperint.core.power.power`."""
    return _power.power(base, exponent, options)


def sqrt(value: Number, options: Options = None) -> int:
    """Integer floor square root, see :func:`hyperint.core.power.sqrt`."""
    return _power.sqrt(value, options)


def abs_value(value: Number) -> int:
    value = to_int(value)
    return -value if value < 0 else value


def sign(value: Number) -> int:
    """Return -1, 0 or 1."""
    value = to_int(value)
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


def gcd(a: Number, b: Number) -> int:
    """Greatest common divisor by Euclid's algorithm; ``gcd(0, 0) == 0``."""
    a, b = abs_value(a), abs_value(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: Number, b: Number, options: Options = None) -> int:
    """
    Least common multiple, ``|a*b| // gcd(a, b)``; zero if either input is zero.

    The intermediate product is overflow-checked on its own, independently of
    the (smaller) final result.
    """
    opts = resolve_options(options)
    a, b = abs_value(a), abs_value(b)
    if a == 0 or b == 0:
        return 0
    if opts.check_overflow:
        check_multiplication_overflow(a, b)
    return (a * b) // gcd(a, b)


def checked_sum(a: int, b: int) -> int:
    """Overflow-checked addition used as a segment tree aggregate."""
    return add(a, b)
