# MIT License
# See LICENSE file in the project root for full license text.
"""
hyperint: exact, overflow-checked arithmetic on arbitrarily large integers.

The package provides a fixed-point precision engine, an arithmetic kernel
with overflow pre-checks, bounded power algorithms (binary exponentiation,
Newton roots, tetration and super-roots), factorial-style products, bit
operations and BigArray, a growable array with segment-tree range queries.
"""

import logging

__version__ = "0.1.0"

# Keep top-level import lightweight: the NumPy bridge and utilities are
# loaded on first access (e.g. `hyperint.bridge.to_numpy`).
from .core import (
    ArithmeticOptions,
    ArithmeticOverflowError,
    ArithmeticUnderflowError,
    ArrayIndexError,
    ComputationLimitError,
    DataStructureError,
    DivisionByZeroError,
    HeapPropertyError,
    HyperintError,
    PrecisionError,
    RoundingMode,
    ScaledValue,
    TreeError,
    ValidationError,
    abs_value,
    add,
    binomial,
    bit_and,
    bit_not,
    bit_or,
    bit_xor,
    calculate_required_precision,
    compare,
    divide,
    equal_within_precision,
    factorial,
    falling_factorial,
    gcd,
    get_bit,
    get_fractional_part,
    lcm,
    left_shift,
    multi_factorial,
    multiply,
    normalize_precision,
    nth_root,
    pop_count,
    power,
    primorial,
    remainder,
    right_shift,
    rising_factorial,
    round_scaled,
    scale_by_power_of_ten,
    scaled_division,
    sign,
    significant_digits,
    set_bit,
    sqrt,
    subfactorial,
    subtract,
    super_root,
    tetration,
    to_int,
    truncate_to_significant_digits,
)
from .structures import BigArray, ComparatorHeap, OperationResult, SegmentTree

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "HyperintError",
    "ValidationError",
    "ArithmeticOverflowError",
    "ArithmeticUnderflowError",
    "DivisionByZeroError",
    "PrecisionError",
    "ComputationLimitError",
    "DataStructureError",
    "ArrayIndexError",
    "HeapPropertyError",
    "TreeError",
    # Precision engine
    "RoundingMode",
    "ScaledValue",
    "scale_by_power_of_ten",
    "round_scaled",
    "scaled_division",
    "normalize_precision",
    "calculate_required_precision",
    "significant_digits",
    "truncate_to_significant_digits",
    "equal_within_precision",
    "get_fractional_part",
    # Arithmetic
    "ArithmeticOptions",
    "to_int",
    "add",
    "subtract",
    "multiply",
    "divide",
    "remainder",
    "abs_value",
    "sign",
    "gcd",
    "lcm",
    "compare",
    # Power
    "power",
    "sqrt",
    "nth_root",
    "tetration",
    "super_root",
    # Factorials
    "factorial",
    "binomial",
    "subfactorial",
    "rising_factorial",
    "falling_factorial",
    "multi_factorial",
    "primorial",
    # Bitwise
    "bit_and",
    "bit_or",
    "bit_xor",
    "bit_not",
    "left_shift",
    "right_shift",
    "pop_count",
    "get_bit",
    "set_bit",
    # Structures
    "BigArray",
    "ComparatorHeap",
    "OperationResult",
    "SegmentTree",
    # Submodules (exposed lazily via __getattr__)
    "bridge",
    "utils",
]


def __getattr__(name):  # Lazy import optional submodules on demand
    if name in {"bridge", "utils"}:
        import importlib

        return importlib.import_module(f"{__name__}.{name}")
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
