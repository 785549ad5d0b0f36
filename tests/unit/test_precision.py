"""Unit tests for the fixed-point precision engine."""

import pytest

from hyperint.core import (
    MAX_PRECISION,
    DivisionByZeroError,
    PrecisionError,
    RoundingMode,
    ScaledValue,
    ValidationError,
    calculate_required_precision,
    equal_within_precision,
    get_fractional_part,
    normalize_precision,
    round_scaled,
    scale_by_power_of_ten,
    scaled_division,
    significant_digits,
    truncate_to_significant_digits,
)


class TestRoundingMode:
    """Test rounding mode resolution."""

    def test_coerce_member_and_name(self):
        assert RoundingMode.coerce(RoundingMode.CEIL) is RoundingMode.CEIL
        assert RoundingMode.coerce("half_up") is RoundingMode.HALF_UP
        assert RoundingMode.coerce(" FLOOR ") is RoundingMode.FLOOR

    def test_coerce_invalid(self):
        with pytest.raises(ValidationError):
            RoundingMode.coerce("sideways")
        with pytest.raises(ValidationError):
            RoundingMode.coerce(3)

    def test_directed_flag(self):
        assert RoundingMode.FLOOR.is_directed
        assert not RoundingMode.HALF_EVEN.is_directed


class TestRoundScaled:
    """Test rounding of the discarded digits."""

    def test_half_even_ties(self):
        """Ties go to the even retained digit."""
        assert round_scaled(25, 1, RoundingMode.HALF_EVEN) == 20
        assert round_scaled(35, 1, RoundingMode.HALF_EVEN) == 40
        assert round_scaled(-25, 1, RoundingMode.HALF_EVEN) == -20
        assert round_scaled(-35, 1, RoundingMode.HALF_EVEN) == -40

    def test_half_even_non_ties(self):
        assert round_scaled(24, 1) == 20
        assert round_scaled(26, 1) == 30
        assert round_scaled(1249, 2) == 1200
        assert round_scaled(1251, 2) == 1300

    def test_half_up_and_half_down(self):
        assert round_scaled(25, 1, RoundingMode.HALF_UP) == 30
        assert round_scaled(-25, 1, RoundingMode.HALF_UP) == -30
        assert round_scaled(25, 1, RoundingMode.HALF_DOWN) == 20
        assert round_scaled(-25, 1, RoundingMode.HALF_DOWN) == -20
        assert round_scaled(26, 1, RoundingMode.HALF_DOWN) == 30

    @pytest.mark.parametrize(
        "value, mode, expected",
        [
            (21, RoundingMode.UP, 30),
            (-21, RoundingMode.UP, -30),
            (29, RoundingMode.DOWN, 20),
            (-29, RoundingMode.DOWN, -20),
            (21, RoundingMode.CEIL, 30),
            (-29, RoundingMode.CEIL, -20),
            (29, RoundingMode.FLOOR, 20),
            (-21, RoundingMode.FLOOR, -30),
        ],
    )
    def test_directed_modes(self, value, mode, expected):
        assert round_scaled(value, 1, mode) == expected

    def test_exact_values_unchanged(self):
        for mode in RoundingMode:
            assert round_scaled(1200, 2, mode) == 1200
            assert round_scaled(-1200, 2, mode) == -1200

    def test_precision_zero_is_identity(self):
        assert round_scaled(12345, 0, RoundingMode.UP) == 12345

    def test_mode_by_name(self):
        assert round_scaled(25, 1, "HALF_UP") == 30

    def test_invalid_precision(self):
        with pytest.raises(PrecisionError):
            round_scaled(1, -1)
        with pytest.raises(PrecisionError):
            round_scaled(1, MAX_PRECISION + 1)

    def test_large_values(self):
        value = 10**60 + 5 * 10**29
        assert round_scaled(value, 30, RoundingMode.HALF_EVEN) == 10**60
        assert round_scaled(value, 30, RoundingMode.HALF_UP) == 10**60 + 10**30


class TestScaledDivision:
    """Test division at a target precision."""

    def test_fractional_digits(self):
        assert scaled_division(1, 3, 2) == 33
        assert scaled_division(2, 3, 2) == 67
        assert scaled_division(-2, 3, 2) == -67
        assert scaled_division(10, 4, 1) == 25

    def test_ties_at_precision_zero(self):
        assert scaled_division(7, 2, 0) == 4
        assert scaled_division(5, 2, 0) == 2
        assert scaled_division(5, 2, 0, RoundingMode.HALF_UP) == 3

    def test_signs_with_directed_modes(self):
        assert scaled_division(-5, 2, 0, RoundingMode.FLOOR) == -3
        assert scaled_division(-5, 2, 0, RoundingMode.CEIL) == -2
        assert scaled_division(5, -2, 0, RoundingMode.DOWN) == -2
        assert scaled_division(-5, -2, 0, RoundingMode.UP) == 3

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            scaled_division(1, 0, 2)
        # Also catchable as the builtin
        with pytest.raises(ZeroDivisionError):
            scaled_division(1, 0)


class TestScaling:
    """Test power-of-ten scaling and precision normalisation."""

    def test_scale_by_power_of_ten(self):
        assert scale_by_power_of_ten(123, 2) == 12300
        assert scale_by_power_of_ten(12345, -2) == 123
        assert scale_by_power_of_ten(-12345, -2) == -123
        assert scale_by_power_of_ten(5, 0) == 5

    def test_normalize_precision(self):
        assert normalize_precision(15, 250, 1, 2) == (150, 250)
        assert normalize_precision(7, 3, 0, 0) == (7, 3)
        assert normalize_precision(-1, 1, 3, 0) == (-1, 1000)

    def test_normalize_rejects_bad_precision(self):
        with pytest.raises(PrecisionError):
            normalize_precision(1, 1, 0, MAX_PRECISION + 1)


class TestIntrospection:
    """Test precision introspection helpers."""

    def test_required_precision(self):
        assert calculate_required_precision(12300) == 2
        assert calculate_required_precision(-500) == 2
        assert calculate_required_precision(7) == 0
        assert calculate_required_precision(0) == 0

    def test_significant_digits(self):
        assert significant_digits(1200) == 2
        assert significant_digits(-10203) == 5
        assert significant_digits(1000) == 1
        assert significant_digits(0) == 0

    def test_truncate_to_significant_digits(self):
        assert truncate_to_significant_digits(12345, 3) == 12300
        assert truncate_to_significant_digits(1234500, 3) == 1230000
        assert truncate_to_significant_digits(995, 2) == 1000
        assert truncate_to_significant_digits(120, 2) == 120
        assert truncate_to_significant_digits(-12355, 3, RoundingMode.DOWN) == -12300

    def test_truncate_long_values(self):
        """Values with more digits than MAX_PRECISION are still truncated."""
        value = 7 * 10**150 + 1
        assert truncate_to_significant_digits(value, 1) == 7 * 10**150

    def test_truncate_invalid_digits(self):
        with pytest.raises(ValidationError):
            truncate_to_significant_digits(123, 0)

    def test_equal_within_precision(self):
        assert equal_within_precision(1005, 1000, 1)
        assert not equal_within_precision(1010, 1000, 1)
        assert equal_within_precision(5, 5, 0)
        assert not equal_within_precision(5, 6, 0)

    def test_fractional_part(self):
        assert get_fractional_part(12345, 2) == 45
        assert get_fractional_part(-12345, 2) == -45
        assert get_fractional_part(123, 0) == 0


class TestScaledValue:
    """Test the fixed-point value type."""

    def test_value_equality_across_precisions(self):
        assert ScaledValue(150, 2) == ScaledValue(15, 1)
        assert hash(ScaledValue(150, 2)) == hash(ScaledValue(15, 1))
        assert ScaledValue(0, 3) == ScaledValue(0)

    def test_ordering(self):
        assert ScaledValue(1, 1) < ScaledValue(11, 2)
        assert ScaledValue(-5, 0) <= ScaledValue(-50, 1)
        assert ScaledValue(2, 0) > ScaledValue(199, 2)

    def test_rescale(self):
        assert ScaledValue(1234, 2).rescale(1) == ScaledValue(123, 1)
        assert ScaledValue(1235, 2).rescale(1, RoundingMode.HALF_UP).unscaled == 124
        assert ScaledValue(123, 1).rescale(4).unscaled == 123000

    def test_normalize(self):
        a, b = ScaledValue(15, 1).normalize(ScaledValue(250, 2))
        assert (a.unscaled, a.precision) == (150, 2)
        assert (b.unscaled, b.precision) == (250, 2)

    def test_parts(self):
        value = ScaledValue(-1234, 2)
        assert value.integer_part == -12
        assert value.fractional_part == -34

    def test_invariants(self):
        with pytest.raises(PrecisionError):
            ScaledValue(1, MAX_PRECISION + 1)
        with pytest.raises(ValidationError):
            ScaledValue("12", 0)

    def test_immutable(self):
        value = ScaledValue(1, 0)
        with pytest.raises(AttributeError):
            value.unscaled = 2
