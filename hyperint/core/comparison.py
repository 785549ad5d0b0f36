"""
Comparison helpers and segment-tree combine operators.

Combine operators take two aggregates and return their combination; ``None``
stands for an empty range and is the identity of every operator.
"""

from functools import reduce
from typing import Callable, Optional, Union

from .arithmetic import checked_sum, gcd
from .errors import ValidationError
from .validation import is_in_range, to_int

Combine = Callable[[Optional[int], Optional[int]], Optional[int]]


def compare(a, b, tolerance: int = 0) -> int:
    """
    Three-way comparison returning -1, 0 or 1.

    Values whose difference is at most ``tolerance`` compare equal.
    """
    a, b = to_int(a), to_int(b)
    tolerance = to_int(tolerance)
    if tolerance < 0:
        raise ValidationError("Tolerance must be non-negative")
    diff = a - b
    if diff > tolerance:
        return 1
    if diff < -tolerance:
        return -1
    return 0


def equals(a, b, tolerance: int = 0) -> bool:
    return compare(a, b, tolerance) == 0


def less_than(a, b) -> bool:
    return compare(a, b) < 0


def less_equal(a, b) -> bool:
    return compare(a, b) <= 0


def greater_than(a, b) -> bool:
    return compare(a, b) > 0


def greater_equal(a, b) -> bool:
    return compare(a, b) >= 0


def between(value, low, high) -> bool:
    """Inclusive range check."""
    return is_in_range(to_int(value), to_int(low), to_int(high))


def clamp(value, low, high) -> int:
    low, high = to_int(low), to_int(high)
    if low > high:
        raise ValidationError("Lower bound must not exceed upper bound")
    return min(max(to_int(value), low), high)


def max_value(*values) -> int:
    if not values:
        raise ValidationError("max_value() requires at least one value")
    return max(to_int(v) for v in values)


def min_value(*values) -> int:
    if not values:
        raise ValidationError("min_value() requires at least one value")
    return min(to_int(v) for v in values)


def _skip_empty(operator: Callable[[int, int], int]) -> Combine:
    def combine(a, b):
        if a is None:
            return b
        if b is None:
            return a
        return operator(a, b)
    combine.__name__ = getattr(operator, "__name__", "combine")
    return combine


max_combine = _skip_empty(max)
min_combine = _skip_empty(min)
sum_combine = _skip_empty(checked_sum)
gcd_combine = _skip_empty(gcd)

_NAMED_COMBINES = {
    "max": max_combine,
    "min": min_combine,
    "sum": sum_combine,
    "gcd": gcd_combine,
}


def resolve_combine(combine: Union[str, Callable[[int, int], int]]) -> Combine:
    """
    Resolve a combine operator by name or wrap a callable.

    Callables only ever see non-empty operands; ``None`` handling is added.
    The operator must be associative for range queries to be meaningful.
    """
    if isinstance(combine, str):
        try:
            return _NAMED_COMBINES[combine.lower()]
        except KeyError:
            raise ValidationError(f"Unknown combine operator: {combine!r}") from None
    if not callable(combine):
        raise ValidationError(f"Combine operator must be a name or callable, got {combine!r}")
    return _skip_empty(combine)


def fold(values, combine: Union[str, Callable[[int, int], int]] = "max") -> Optional[int]:
    """Combine ``values`` left to right; ``None`` for an empty iterable."""
    return reduce(resolve_combine(combine), values, None)
