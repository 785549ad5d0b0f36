"""
Property-based tests for the arithmetic kernel and precision engine.

Tests exactness, overflow boundaries, rounding and root bounds.
"""

import math

import pytest
from hypothesis import assume, given, settings, strategies as st
from hypothesis.strategies import composite

from hyperint.core import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    ArithmeticOverflowError,
    ArithmeticUnderflowError,
    DivisionByZeroError,
    RoundingMode,
    add,
    compare,
    divide,
    gcd,
    lcm,
    multiply,
    nth_root,
    power,
    remainder,
    round_scaled,
    scaled_division,
    sqrt,
    subtract,
)


# ============================================================================
# Hypothesis Strategies
# ============================================================================

safe_ints = st.integers(min_value=MIN_SAFE_INTEGER, max_value=MAX_SAFE_INTEGER)
big_ints = st.integers(min_value=-(10**60), max_value=10**60)
rounding_modes = st.sampled_from(list(RoundingMode))


@composite
def summable_pairs(draw):
    """Pairs whose sum stays inside the safe range."""
    a = draw(safe_ints)
    low = max(MIN_SAFE_INTEGER - a, MIN_SAFE_INTEGER)
    high = min(MAX_SAFE_INTEGER - a, MAX_SAFE_INTEGER)
    b = draw(st.integers(min_value=low, max_value=high))
    return a, b


# ============================================================================
# Kernel properties
# ============================================================================

@given(summable_pairs())
def test_add_subtract_inverse(pair):
    a, b = pair
    total = add(a, b)
    assert total == a + b
    assert subtract(total, b) == a


@given(safe_ints, safe_ints)
def test_add_commutative_or_fails_symmetrically(a, b):
    try:
        forward = add(a, b)
    except (ArithmeticOverflowError, ArithmeticUnderflowError) as exc:
        with pytest.raises(type(exc)):
            add(b, a)
        assert not MIN_SAFE_INTEGER <= a + b <= MAX_SAFE_INTEGER
    else:
        assert forward == add(b, a)


@given(safe_ints, safe_ints)
def test_multiply_checks_exactly_at_bound(a, b):
    product = a * b
    if MIN_SAFE_INTEGER <= product <= MAX_SAFE_INTEGER:
        assert multiply(a, b) == product
    elif product > MAX_SAFE_INTEGER:
        with pytest.raises(ArithmeticOverflowError):
            multiply(a, b)
    else:
        with pytest.raises(ArithmeticUnderflowError):
            multiply(a, b)


@given(safe_ints, safe_ints)
def test_multiply_commutative(a, b):
    opts = {"check_overflow": False}
    assert multiply(a, b, opts) == multiply(b, a, opts)


@given(big_ints, big_ints)
def test_unchecked_arithmetic_is_exact(a, b):
    opts = {"check_overflow": False}
    assert add(a, b, opts) == a + b
    assert subtract(a, b, opts) == a - b
    assert multiply(a, b, opts) == a * b


@given(big_ints, big_ints.filter(lambda v: v != 0))
def test_remainder_is_euclidean(a, b):
    r = remainder(a, b)
    assert 0 <= r < abs(b)
    assert (a - r) % b == 0


@given(big_ints)
def test_division_by_zero_always_raises(a):
    with pytest.raises(DivisionByZeroError):
        divide(a, 0)
    with pytest.raises(DivisionByZeroError):
        remainder(a, 0)


@given(st.integers(min_value=1, max_value=10**6), st.integers(min_value=1, max_value=10**6))
def test_gcd_lcm_product(a, b):
    assert gcd(a, b) * lcm(a, b, {"check_overflow": False}) == a * b
    assert a % gcd(a, b) == 0 and b % gcd(a, b) == 0


@given(big_ints, big_ints)
def test_compare_antisymmetric(a, b):
    assert compare(a, b) == -compare(b, a)
    assert compare(a, b) == (a > b) - (a < b)


# ============================================================================
# Power and roots
# ============================================================================

@given(st.integers(min_value=-1000, max_value=1000), st.integers(min_value=0, max_value=20))
def test_power_matches_repeated_multiplication(base, exponent):
    expected = 1
    for _ in range(exponent):
        expected *= base
    assert power(base, exponent) == expected


@given(st.integers(min_value=0, max_value=10**80))
def test_sqrt_floor_bounds(value):
    r = sqrt(value)
    assert r == math.isqrt(value)
    assert r * r <= value < (r + 1) * (r + 1)


@given(st.integers(min_value=0, max_value=10**80), st.integers(min_value=1, max_value=12))
@settings(max_examples=200)
def test_nth_root_floor_bounds(value, n):
    r = nth_root(value, n)
    assert r**n <= value < (r + 1) ** n


# ============================================================================
# Rounding
# ============================================================================

@given(big_ints, st.integers(min_value=0, max_value=30), rounding_modes)
def test_round_scaled_idempotent(value, precision, mode):
    once = round_scaled(value, precision, mode)
    assert once % 10**precision == 0
    assert round_scaled(once, precision, mode) == once


@given(big_ints, st.integers(min_value=0, max_value=30), rounding_modes)
def test_round_scaled_moves_less_than_one_unit(value, precision, mode):
    rounded = round_scaled(value, precision, mode)
    assert abs(rounded - value) < 10**precision


@given(big_ints, st.integers(min_value=1, max_value=30))
def test_directed_modes_bracket_value(value, precision):
    floor = round_scaled(value, precision, RoundingMode.FLOOR)
    ceil = round_scaled(value, precision, RoundingMode.CEIL)
    assert floor <= value <= ceil
    assert ceil - floor in (0, 10**precision)


@given(big_ints, big_ints, st.integers(min_value=0, max_value=10))
def test_scaled_division_floor_matches_floor_division(a, b, precision):
    assume(b != 0)
    expected = (a * 10**precision) // b
    assert scaled_division(a, b, precision, RoundingMode.FLOOR) == expected
