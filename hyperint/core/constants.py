"""
Numeric bounds and shared messages for hyperint.

All limits are plain Python ints so they can be compared against
arbitrary-precision values without conversion.
"""

# Safe integer range used by the arithmetic kernel's overflow checks
MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -(2**53 - 1)

MAX_PRECISION = 100
MAX_COMPUTATION_STEPS = 1000
MAX_BITS = 1024
MAX_BIT_VALUE = 2**MAX_BITS - 1

# Power operation limits
MAX_POWER_BASE = 2**53
MAX_POWER_EXPONENT = 1000
MAX_TETRATION_HEIGHT = 4

# Largest n accepted by factorial-style products
MAX_FACTORIAL_INPUT = 1000

# Array configuration
MIN_ARRAY_CAPACITY = 16
DEFAULT_ARRAY_GROWTH_FACTOR = 2
MAX_ARRAY_SIZE = 1_000_000

ERROR_MESSAGES = {
    "OVERFLOW": "Operation would result in overflow",
    "UNDERFLOW": "Operation would result in underflow",
    "NEGATIVE_ROOT": "Cannot compute root of negative number",
    "NEGATIVE_EXPONENT": "Negative exponents not supported for integers",
    "DIVISION_BY_ZERO": "Division by zero",
    "INVALID_PRECISION": f"Precision must be non-negative and not exceed {MAX_PRECISION}",
    "COMPUTATION_LIMIT": "Computation exceeded maximum allowed steps",
    "INDEX_OUT_OF_RANGE": "Index out of bounds",
    "EMPTY_ARRAY": "Array is empty",
    "INVALID_RANGE": "Invalid range",
    "INVALID_HEAP_PROPERTY": "Heap property violation detected",
    "TREE_EMPTY": "Segment tree has no leaves",
}
