"""Basic usage example of the hyperint library.

This example walks through checked arithmetic, fixed-point precision,
the power module and BigArray range queries.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import hyperint as hi


def demonstrate_checked_arithmetic():
    """Show overflow-checked integer arithmetic."""
    print("=== Checked Arithmetic ===\n")

    print(f"add(2**52, 12345) = {hi.add(2**52, 12345)}")
    print(f"multiply('123456789', 1000) = {hi.multiply('123456789', 1000)}")
    print(f"remainder(-7, 3) = {hi.remainder(-7, 3)}")
    print(f"gcd(2**40, 6**20) = {hi.gcd(2**40, 6**20)}")

    # The safe range is +/- (2**53 - 1); leaving it raises before computing
    try:
        hi.multiply(2**52, 4)
    except hi.ArithmeticOverflowError as exc:
        print(f"multiply(2**52, 4) -> {type(exc).__name__}: {exc}")

    unchecked = hi.ArithmeticOptions(check_overflow=False)
    print(f"multiply(2**52, 4, unchecked) = {hi.multiply(2**52, 4, unchecked)}")


def demonstrate_fixed_point():
    """Show scaled-value arithmetic and rounding modes."""
    print("\n=== Fixed-Point Precision ===\n")

    opts = hi.ArithmeticOptions(precision=4)
    third = hi.ScaledValue(hi.divide(1, 3, opts), 4)
    print(f"1 / 3 at precision 4 = {third.integer_part}.{abs(third.fractional_part):04d}")

    for mode in hi.RoundingMode:
        print(f"  round_scaled(-25, 1, {mode.name:<9}) = {hi.round_scaled(-25, 1, mode)}")

    a, b = hi.ScaledValue(150, 2), hi.ScaledValue(15, 1)
    print(f"\nScaledValue(150, 2) == ScaledValue(15, 1): {a == b}")
    print(f"truncate_to_significant_digits(987654, 3) = {hi.truncate_to_significant_digits(987654, 3)}")


def demonstrate_powers():
    """Show exponentiation, roots and towers."""
    print("\n=== Power Module ===\n")

    big = hi.power(7, 300)
    print(f"7**300 has {len(str(big))} digits")
    print(f"nth_root(7**300, 300) = {hi.nth_root(big, 300)}")
    print(f"sqrt(2 * 10**40) = {hi.sqrt(2 * 10**40)}")
    print(f"tetration(2, 4) = {hi.tetration(2, 4)}")
    print(f"super_root(65536, 4) = {hi.super_root(65536, 4)}")
    print(f"super_root(100, 2) = {hi.super_root(100, 2)}  (floor: 3**3 = 27 <= 100 < 4**4)")

    try:
        hi.tetration(3, 4)
    except hi.ComputationLimitError as exc:
        print(f"tetration(3, 4) -> {type(exc).__name__}: {exc}")


def demonstrate_products_and_bits():
    """Show factorial-style products and bit operations."""
    print("\n=== Factorials and Bits ===\n")

    print(f"factorial(25) = {hi.factorial(25)}")
    print(f"binomial(60, 30) = {hi.binomial(60, 30)}")
    print(f"subfactorial(10) = {hi.subfactorial(10)}")
    print(f"primorial(50) = {hi.primorial(50)}")

    try:
        hi.factorial(200)
    except hi.ArithmeticOverflowError as exc:
        print(f"factorial(200) -> {type(exc).__name__}: {exc}")

    word = {"max_bits": 8}
    print(f"rotate_left(0b10010001, 2, 8 bits) = {hi.core.rotate_left(0b10010001, 2, word):#010b}")
    print(f"pop_count(2**100 - 1) = {hi.pop_count(2**100 - 1)}")
    print(f"get_bit(10**30, 99) = {hi.get_bit(10**30, 99)}")


def demonstrate_big_array():
    """Show BigArray with range queries and result values."""
    print("\n=== BigArray ===\n")

    arr = hi.BigArray(initial_capacity=4, combine="max")
    for value in [5, 10**30, -(10**25), 42, 7]:
        arr.push(value)
    print(f"{arr}: {arr.to_array()}")
    print(f"max over [0, 4] = {arr.query_range(0, 4).value}")
    print(f"max over [2, 4] = {arr.query_range(2, 4).value}")

    arr.fill(1, 2, 100)
    print(f"after fill(1, 2, 100): {arr.to_array()}")

    result = arr.get(10)
    print(f"get(10) -> success={result.success}, error={result.message!r}")

    arr.sort(ascending=False)
    print(f"sorted descending: {arr.to_array()}")

    totals = hi.BigArray.from_values(range(1, 101), combine="sum")
    print(f"sum over [0, 99] = {totals.query_range(0, 99).value}")


def main():
    """Run all demonstrations."""
    print("hyperint Library - Basic Usage Examples")
    print("=" * 50)

    demonstrate_checked_arithmetic()
    demonstrate_fixed_point()
    demonstrate_powers()
    demonstrate_products_and_bits()
    demonstrate_big_array()

    print("\n" + "=" * 50)
    print("Examples completed successfully!")


if __name__ == "__main__":
    main()
