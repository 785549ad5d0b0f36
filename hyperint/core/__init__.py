"""Core arithmetic: precision engine, kernel, comparisons, powers, factorials and bit operations."""

from .constants import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    MAX_PRECISION,
    MAX_COMPUTATION_STEPS,
    MAX_BITS,
    MAX_POWER_BASE,
    MAX_POWER_EXPONENT,
    MAX_TETRATION_HEIGHT,
    MAX_FACTORIAL_INPUT,
    MAX_ARRAY_SIZE,
    ERROR_MESSAGES,
)

from .errors import (
    HyperintError,
    ValidationError,
    ArithmeticOverflowError,
    ArithmeticUnderflowError,
    DivisionByZeroError,
    PrecisionError,
    ComputationLimitError,
    DataStructureError,
    ArrayIndexError,
    HeapPropertyError,
    TreeError,
    is_hyperint_error,
    wrap_error,
)

from .precision import (
    RoundingMode,
    ScaledValue,
    scale_by_power_of_ten,
    round_scaled,
    scaled_division,
    normalize_precision,
    calculate_required_precision,
    significant_digits,
    truncate_to_significant_digits,
    equal_within_precision,
    get_fractional_part,
)

from .options import ArithmeticOptions, DEFAULT_OPTIONS, resolve_options
from .validation import to_int

from .arithmetic import (
    add,
    subtract,
    multiply,
    divide,
    remainder,
    abs_value,
    sign,
    gcd,
    lcm,
    checked_sum,
)

from .power import power, sqrt, nth_root, tetration, super_root

from .factorial import (
    factorial,
    binomial,
    subfactorial,
    rising_factorial,
    falling_factorial,
    multi_factorial,
    primorial,
)

from .bitwise import (
    BitwiseOptions,
    bit_and,
    bit_or,
    bit_xor,
    bit_not,
    left_shift,
    right_shift,
    unsigned_right_shift,
    rotate_left,
    rotate_right,
    pop_count,
    trailing_zeros,
    leading_zeros,
    get_bit,
    set_bit,
    clear_bit,
    toggle_bit,
)

from .comparison import (
    compare,
    equals,
    less_than,
    less_equal,
    greater_than,
    greater_equal,
    between,
    clamp,
    max_value,
    min_value,
    resolve_combine,
    fold,
)

__all__ = [
    # Constants
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    "MAX_PRECISION",
    "MAX_COMPUTATION_STEPS",
    "MAX_BITS",
    "MAX_POWER_BASE",
    "MAX_POWER_EXPONENT",
    "MAX_TETRATION_HEIGHT",
    "MAX_FACTORIAL_INPUT",
    "MAX_ARRAY_SIZE",
    "ERROR_MESSAGES",

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
    "is_hyperint_error",
    "wrap_error",

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

    # Options and coercion
    "ArithmeticOptions",
    "DEFAULT_OPTIONS",
    "resolve_options",
    "to_int",

    # Arithmetic kernel
    "add",
    "subtract",
    "multiply",
    "divide",
    "remainder",
    "abs_value",
    "sign",
    "gcd",
    "lcm",
    "checked_sum",

    # Power module
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
    "BitwiseOptions",
    "bit_and",
    "bit_or",
    "bit_xor",
    "bit_not",
    "left_shift",
    "right_shift",
    "unsigned_right_shift",
    "rotate_left",
    "rotate_right",
    "pop_count",
    "trailing_zeros",
    "leading_zeros",
    "get_bit",
    "set_bit",
    "clear_bit",
    "toggle_bit",

    # Comparison
    "compare",
    "equals",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "between",
    "clamp",
    "max_value",
    "min_value",
    "resolve_combine",
    "fold",
]
