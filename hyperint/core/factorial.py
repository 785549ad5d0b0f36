"""
Factorials and related products.

Each product is accumulated one factor at a time. With ``check_overflow``
every multiplication is checked against the ``MAX_BITS`` bound used by the
power module, and every loop counts against ``max_steps``. Inputs above
``MAX_FACTORIAL_INPUT`` are rejected before any work is done.
"""

import logging
import math
from typing import Any, Iterable, Mapping, Optional, Union

import numpy as np

from .constants import MAX_FACTORIAL_INPUT
from .errors import ComputationLimitError, ValidationError
from .options import ArithmeticOptions, integer_only, resolve_options
from .validation import check_bit_bound, to_int, validate_non_negative, validate_positive

logger = logging.getLogger(__name__)

Number = Union[int, str, float]
Options = Optional[Union[ArithmeticOptions, Mapping[str, Any]]]


def _check_input(n: int, operation: str) -> None:
    if n > MAX_FACTORIAL_INPUT:
        raise ComputationLimitError(
            f"{operation} input too large: maximum allowed is {MAX_FACTORIAL_INPUT}"
        )


def _product(factors: Iterable[int], opts: ArithmeticOptions, operation: str) -> int:
    """Multiply ``factors`` together under the step and bit bounds."""
    result = 1
    steps = 0
    for factor in factors:
        steps += 1
        if steps > opts.max_steps:
            raise ComputationLimitError(f"{operation} exceeded maximum computation steps")
        if opts.check_overflow:
            check_bit_bound(result, factor)
        result *= factor
    logger.debug("%s: %d factors, %d bits", operation, steps, result.bit_length())
    return result


def factorial(value: Number, options: Options = None) -> int:
    """
    Compute ``n! = 1 * 2 * ... * n``.

    Raises:
        ValidationError: If ``n`` is negative
        ComputationLimitError: If ``n`` exceeds ``MAX_FACTORIAL_INPUT`` or the
            product needs more than ``max_steps`` multiplications
        ArithmeticOverflowError: If the product would exceed ``MAX_BITS`` bits
    """
    opts = integer_only(resolve_options(options), "factorial")
    n = validate_non_negative(to_int(value), "Factorial is undefined for negative numbers")
    _check_input(n, "Factorial")
    return _product(range(2, n + 1), opts, "factorial")


def binomial(n: Number, k: Number, options: Options = None) -> int:
    """
    Binomial coefficient ``C(n, k)`` by the multiplicative formula.

    Each step ``result * (n - i) // (i + 1)`` divides exactly, so no
    factorial is ever formed. ``k`` is replaced by ``n - k`` when that is
    smaller.

    Example:
        >>> binomial(10, 3)
        120
    """
    opts = integer_only(resolve_options(options), "binomial")
    n = validate_non_negative(to_int(n), "Binomial n must be non-negative")
    k = validate_non_negative(to_int(k), "Binomial k must be non-negative")
    if k > n:
        raise ValidationError("k cannot be greater than n in binomial coefficient")
    k = min(k, n - k)

    result = 1
    for i in range(k):
        if i + 1 > opts.max_steps:
            raise ComputationLimitError("binomial exceeded maximum computation steps")
        if opts.check_overflow:
            check_bit_bound(result, n - i)
        result = result * (n - i) // (i + 1)
    return result


def subfactorial(value: Number, options: Options = None) -> int:
    """
    Number of derangements of ``n`` elements, ``!n``.

    Uses the recurrence ``!n = n * !(n-1) + (-1)**n`` from ``!0 = 1``.
    """
    opts = integer_only(resolve_options(options), "subfactorial")
    n = validate_non_negative(to_int(value), "Subfactorial is undefined for negative numbers")
    _check_input(n, "Subfactorial")

    result = 1
    for i in range(1, n + 1):
        if i > opts.max_steps:
            raise ComputationLimitError("subfactorial exceeded maximum computation steps")
        if opts.check_overflow:
            check_bit_bound(result, i)
        result = result * i + (1 if i % 2 == 0 else -1)
    return result


def rising_factorial(x: Number, n: Number, options: Options = None) -> int:
    """Pochhammer product ``x * (x+1) * ... * (x+n-1)``; ``1`` for ``n == 0``."""
    opts = integer_only(resolve_options(options), "rising_factorial")
    x = to_int(x)
    n = validate_non_negative(to_int(n), "Rising factorial length must be non-negative")
    _check_input(n, "Rising factorial")
    return _product((x + i for i in range(n)), opts, "rising_factorial")


def falling_factorial(x: Number, n: Number, options: Options = None) -> int:
    """Product ``x * (x-1) * ... * (x-n+1)``; ``1`` for ``n == 0``."""
    opts = integer_only(resolve_options(options), "falling_factorial")
    x = to_int(x)
    n = validate_non_negative(to_int(n), "Falling factorial length must be non-negative")
    _check_input(n, "Falling factorial")
    return _product((x - i for i in range(n)), opts, "falling_factorial")


def multi_factorial(value: Number, k: Number = 2, options: Options = None) -> int:
    """
    Multifactorial ``n * (n-k) * (n-2k) * ...`` over the positive terms.

    ``k = 2`` gives the double factorial ``n!!``.
    """
    opts = integer_only(resolve_options(options), "multi_factorial")
    n = validate_non_negative(to_int(value), "Multifactorial is undefined for negative numbers")
    k = validate_positive(to_int(k), "Multifactorial step must be positive")
    _check_input(n, "Multifactorial")
    return _product(range(n, 0, -k), opts, "multi_factorial")


def primes_up_to(n: int) -> np.ndarray:
    """Sieve of Eratosthenes; returns the primes ``<= n`` as an int64 array."""
    if n < 2:
        return np.empty(0, dtype=np.int64)
    sieve = np.ones(n + 1, dtype=bool)
    sieve[:2] = False
    for i in range(2, math.isqrt(n) + 1):
        if sieve[i]:
            sieve[i * i::i] = False
    return np.flatnonzero(sieve).astype(np.int64)


def primorial(value: Number, options: Options = None) -> int:
    """Product of all primes ``<= n``; ``1`` for ``n < 2``."""
    opts = integer_only(resolve_options(options), "primorial")
    n = validate_non_negative(to_int(value), "Primorial is undefined for negative numbers")
    _check_input(n, "Primorial")
    return _product((int(p) for p in primes_up_to(n)), opts, "primorial")
