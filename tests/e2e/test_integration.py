"""End-to-end integration tests for hyperint."""

import time

import numpy as np
import pytest

import hyperint
from hyperint import (
    ArithmeticOptions,
    ArithmeticOverflowError,
    BigArray,
    ComputationLimitError,
    HyperintError,
    RoundingMode,
    ScaledValue,
    divide,
    multiply,
    nth_root,
    power,
    super_root,
    tetration,
)
from hyperint.bridge import from_numpy, to_int64, to_numpy


class TestBasicIntegration:
    """Test basic integration scenarios."""

    def test_power_table_pipeline(self):
        """Compute a table of powers, store it and query it."""
        arr = BigArray(combine="max")
        for exponent in range(0, 200, 10):
            assert arr.push(power(3, exponent))

        assert arr.size == 20
        assert arr.query_range(0, 19).value == 3**190
        assert arr.query_range(0, 4).value == 3**40

        # Every entry has an exact integer root back to the base power
        for i, value in enumerate(arr):
            if i:
                assert nth_root(value, 10 * i) == 3

    def test_fixed_point_pipeline(self):
        """Money-style arithmetic at two decimal places."""
        opts = ArithmeticOptions(precision=2, rounding_mode=RoundingMode.HALF_UP)
        price = 1999        # 19.99
        quantity = 300      # 3.00
        rate = 825          # 8.25 (percent)

        subtotal = multiply(price, quantity, opts)
        assert subtotal == 5997
        # 59.97 * 8.25 = 494.7525 -> 494.75, then / 100 -> 4.9475 -> 4.95
        tax = divide(multiply(subtotal, rate, opts), 100, opts.replace(precision=0))
        assert tax == 495
        assert ScaledValue(subtotal + tax, 2) == ScaledValue(649200, 4)

    def test_tower_round_trip(self):
        for base, height in [(2, 3), (2, 4), (3, 3), (4, 2)]:
            tower = tetration(base, height)
            assert super_root(tower, height) == base
            assert super_root(tower - 1, height) == base - 1


class TestNumpyIntegration:
    """Test moving data between NumPy and BigArray."""

    def test_numpy_round_trip(self):
        source = np.arange(-50, 50, dtype=np.int64)
        arr = from_numpy(source, combine="sum")
        assert arr.query_range(0, arr.size - 1).value == int(source.sum())

        arr.sort(ascending=False)
        back = to_int64(arr)
        np.testing.assert_array_equal(back, np.sort(source)[::-1])

    def test_values_beyond_int64(self):
        arr = BigArray.from_values([2**70, -(2**70), 5])
        objects = to_numpy(arr)
        assert objects.tolist() == [2**70, -(2**70), 5]
        with pytest.raises(ArithmeticOverflowError):
            to_int64(arr)


class TestErrorHandling:
    """Test that failures surface as hyperint errors and leave state intact."""

    def test_failures_are_reported_not_raised(self):
        arr = BigArray(combine="sum")
        results = [arr.push(v) for v in (1, "two", 3, 2**53, 4.5)]
        assert [bool(r) for r in results] == [True, False, True, False, False]
        assert all(isinstance(r.error, HyperintError) for r in results if not r)
        assert arr.to_array() == [1, 3]
        assert arr.query_range(0, 1).value == 4

    def test_limits_raise(self):
        with pytest.raises(ComputationLimitError):
            tetration(2, 5)
        with pytest.raises(HyperintError):
            power(2, 5000)


class TestPerformance:
    """Test performance characteristics."""

    def test_bulk_operations(self):
        n = 2000
        start = time.time()
        arr = BigArray()
        for i in range(n):
            arr.push(10**30 + i)
        for i in range(0, n, 7):
            arr.set(i, -i)
        for i in range(0, n - 50, 13):
            arr.query_range(i, i + 50)
        elapsed = time.time() - start

        assert arr.size == n
        assert arr.query_range(0, n - 1).value == 10**30 + n - 1
        assert elapsed < 10.0

    def test_lazy_submodules(self):
        assert hyperint.bridge.from_numpy is from_numpy
        assert callable(hyperint.utils.enable_console_logging)
