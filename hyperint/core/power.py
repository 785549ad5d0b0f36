"""
Power operations: binary exponentiation, integer roots and tetration.

All algorithms run on Python ints and are bounded by ``max_steps`` and the
limits in :mod:`hyperint.core.constants`; when a bound is hit they raise
instead of returning an approximation.
"""

import logging
import math
from typing import Any, Mapping, Optional, Union

from .constants import (
    ERROR_MESSAGES,
    MAX_BITS,
    MAX_POWER_BASE,
    MAX_POWER_EXPONENT,
    MAX_TETRATION_HEIGHT,
)
from .errors import (
    ArithmeticOverflowError,
    ArithmeticUnderflowError,
    ComputationLimitError,
    ValidationError,
)
from .options import ArithmeticOptions, integer_only, resolve_options
from .precision import scaled_division
from .validation import (
    check_bit_bound,
    check_power_overflow,
    to_int,
    validate_non_negative,
    validate_positive,
)

logger = logging.getLogger(__name__)

Number = Union[int, str, float]
Options = Optional[Union[ArithmeticOptions, Mapping[str, Any]]]


def _integer_power(base: int, exponent: int, opts: ArithmeticOptions) -> int:
    """Square-and-multiply on raw integers; ``exponent`` is non-negative."""
    if exponent == 0:
        return 1
    if exponent == 1 or base in (0, 1):
        return base
    if base == -1:
        return 1 if exponent % 2 == 0 else -1

    if abs(base) > MAX_POWER_BASE:
        raise ComputationLimitError(f"Power base exceeds limit of {MAX_POWER_BASE}")
    if exponent > MAX_POWER_EXPONENT:
        raise ComputationLimitError(f"Power exponent exceeds limit of {MAX_POWER_EXPONENT}")

    check = opts.check_overflow
    if check:
        check_power_overflow(base, exponent)

    result = 1
    square = base
    remaining = exponent
    steps = 0
    while True:
        steps += 1
        if steps > opts.max_steps:
            raise ComputationLimitError("Power operation exceeded maximum computation steps")
        if remaining & 1:
            if check:
                check_bit_bound(result, square)
            result *= square
        remaining >>= 1
        if not remaining:
            break
        # Reached only while bits remain, so the square divides the final result
        if check:
            check_bit_bound(square, square)
        square *= square
    return result


def power(base: Number, exponent: Number, options: Options = None) -> int:
    """
    Raise ``base`` to a non-negative integer ``exponent``.

    Uses binary exponentiation, so at most ``2 * log2(exponent)``
    multiplications are performed. With ``precision = p > 0`` the base is a
    scaled value at ``p`` and so is the result.

    Args:
        base: Base, any value accepted by :func:`to_int`
        exponent: Non-negative exponent
        options: Arithmetic options

    Returns:
        ``base ** exponent``

    Raises:
        ValidationError: If ``exponent`` is negative
        ComputationLimitError: If base or exponent exceed the power limits
        ArithmeticOverflowError: If the result would exceed ``MAX_BITS`` bits
    """
    opts = resolve_options(options)
    base = to_int(base)
    exponent = to_int(exponent)
    if exponent < 0:
        raise ValidationError(ERROR_MESSAGES["NEGATIVE_EXPONENT"])

    precision = opts.precision
    if precision == 0:
        return _integer_power(base, exponent, opts)
    if exponent == 0:
        return 10**precision
    raw = _integer_power(base, exponent, opts)
    # raw is at scale precision * exponent; bring it back to precision
    return scaled_division(raw, 10**(precision * (exponent - 1)), 0, opts.rounding_mode)


def _integer_root(value: int, n: int, max_steps: int) -> int:
    """Floor of the ``n``-th root of a non-negative ``value`` by Newton's method."""
    if value < 2 or n == 1:
        return value
    if n >= value.bit_length():
        return 1

    # 2**ceil(bits / n) is strictly above the root, so the iteration descends
    x = 1 << -(-value.bit_length() // n)
    steps = 0
    while True:
        steps += 1
        if steps > max_steps:
            raise ComputationLimitError("Root operation exceeded maximum computation steps")
        y = ((n - 1) * x + value // x**(n - 1)) // n
        if y >= x:
            break
        x = y
    logger.debug("nth_root(n=%d, bits=%d) converged in %d steps", n, value.bit_length(), steps)
    return x


def nth_root(value: Number, n: Number, options: Options = None) -> int:
    """
    Integer floor of the ``n``-th root of ``value``.

    Iterates ``x' = ((n-1)*x + value // x**(n-1)) // n`` from a guess above the
    root until the sequence stops decreasing. The result ``r`` satisfies
    ``r**n <= value < (r+1)**n``. With ``precision = p > 0`` the value is a
    scaled value at ``p`` and the floor root is returned at ``p``.

    Raises:
        ValidationError: If ``value`` is negative or ``n`` is not positive
        ComputationLimitError: If Newton's method does not converge within
            ``max_steps`` iterations, or the scaled operand would exceed
            ``MAX_BITS`` bits
    """
    opts = resolve_options(options)
    value = to_int(value)
    n = to_int(n)
    validate_positive(n, "Root index must be positive")
    if value < 0:
        raise ValidationError(ERROR_MESSAGES["NEGATIVE_ROOT"])
    if opts.precision and value:
        digits = opts.precision * (n - 1)
        # Lower bound on the bit length of value * 10**digits
        if value.bit_length() - 1 + digits * math.log2(10) >= MAX_BITS:
            raise ComputationLimitError(
                f"Scaled root operand would exceed {MAX_BITS} bits "
                f"(precision={opts.precision}, n={n})"
            )
        value *= 10**digits
    return _integer_root(value, n, opts.max_steps)


def sqrt(value: Number, options: Options = None) -> int:
    """Integer floor square root, see :func:`nth_root`."""
    return nth_root(value, 2, options)


def tetration(base: Number, height: Number, options: Options = None) -> int:
    """
    Compute the power tower ``base↑↑height = base^(base^(...^base))``.

    The tower is evaluated right-associatively with :func:`power`, so the
    power limits apply at every level.

    Raises:
        ValidationError: If ``base`` or ``height`` is negative
        ComputationLimitError: If ``height`` exceeds ``MAX_TETRATION_HEIGHT``
            or an intermediate power exceeds the power limits
    """
    opts = integer_only(resolve_options(options), "tetration")
    base = to_int(base)
    height = to_int(height)
    validate_non_negative(height, "Tetration height must be non-negative")
    validate_non_negative(base, "Tetration base must be non-negative")

    if height == 0:
        return 1
    if height == 1:
        return base
    if base == 0:
        return 1 if height % 2 == 0 else 0
    if base == 1:
        return 1
    if height > MAX_TETRATION_HEIGHT:
        raise ComputationLimitError(f"Tetration height exceeds limit of {MAX_TETRATION_HEIGHT}")

    result = base
    for _ in range(height - 1):
        result = power(base, result, opts)
    return result


def super_root(value: Number, height: Number, options: Options = None) -> int:
    """
    Inverse of :func:`tetration`: the largest ``x`` with ``x↑↑height <= value``.

    Tetration is not smooth enough for Newton's method, so the root is found
    by binary search over ``[1, value]``. Probes whose tower exceeds the power
    limits count as too large.

    Example:
        >>> super_root(16, 3)
        2

    Raises:
        ValidationError: If ``value < 1`` or ``height < 1``
        ComputationLimitError: If ``height`` exceeds ``MAX_TETRATION_HEIGHT``
            or the search takes more than ``max_steps`` probes
    """
    opts = integer_only(resolve_options(options), "super_root")
    value = to_int(value)
    height = to_int(height)
    if height < 1:
        raise ValidationError("Super-root height must be at least 1")
    if value < 1:
        raise ValidationError("Value must be at least 1 for super-root")

    if value == 1:
        return 1
    if height == 1:
        return value
    if height > MAX_TETRATION_HEIGHT:
        raise ComputationLimitError(f"Tetration height exceeds limit of {MAX_TETRATION_HEIGHT}")

    left, right = 1, value
    steps = 0
    while left <= right:
        steps += 1
        if steps > opts.max_steps:
            raise ComputationLimitError("Super-root operation exceeded maximum computation steps")
        mid = (left + right) // 2
        try:
            probe = tetration(mid, height, opts)
        except (ComputationLimitError, ArithmeticOverflowError, ArithmeticUnderflowError):
            right = mid - 1
            continue
        if probe == value:
            logger.debug("super_root found exact root %d after %d probes", mid, steps)
            return mid
        if probe < value:
            left = mid + 1
        else:
            right = mid - 1
    logger.debug("super_root settled on floor root %d after %d probes", right, steps)
    return right
