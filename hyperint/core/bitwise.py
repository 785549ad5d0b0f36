"""
Bit-level operations on arbitrary-precision integers.

Python ints behave as two's complement numbers with unbounded sign
extension, so ``&``, ``|``, ``^`` and ``~`` need no width. Operations that do
need one (unsigned shifts, rotations, bit counts of negative values) work on
the low ``max_bits`` bits, and in strict mode shift amounts and bit positions
must stay below ``max_bits``.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union

from .constants import MAX_BITS
from .errors import ValidationError
from .validation import to_int, validate_non_negative

Number = Union[int, str, float]


@dataclass(frozen=True)
class BitwiseOptions:
    """
    Options for width-dependent bit operations.

    Attributes:
        max_bits: Word width for unsigned shifts, rotations and bit counts
        strict: Reject shift amounts and bit positions ``>= max_bits``
    """
    max_bits: int = MAX_BITS
    strict: bool = True

    def __post_init__(self):
        if isinstance(self.max_bits, bool) or not isinstance(self.max_bits, int) or self.max_bits <= 0:
            raise ValidationError(f"max_bits must be a positive integer, got {self.max_bits!r}")
        object.__setattr__(self, "strict", bool(self.strict))

    @property
    def mask(self) -> int:
        return (1 << self.max_bits) - 1


DEFAULT_BITWISE_OPTIONS = BitwiseOptions()

BitOptions = Optional[Union[BitwiseOptions, Mapping[str, Any]]]


def resolve_bitwise_options(options: BitOptions = None) -> BitwiseOptions:
    """Normalise ``None``, a BitwiseOptions or a mapping (``maxBits`` accepted)."""
    if options is None:
        return DEFAULT_BITWISE_OPTIONS
    if isinstance(options, BitwiseOptions):
        return options
    if isinstance(options, Mapping):
        known = {f.name for f in fields(BitwiseOptions)}
        kwargs = {}
        for key, value in options.items():
            name = "max_bits" if key == "maxBits" else key
            if name not in known:
                raise ValidationError(f"Unknown bitwise option: {key!r}")
            kwargs[name] = value
        return BitwiseOptions(**kwargs)
    raise ValidationError(f"Invalid bitwise options: {options!r}")


def _validate_shift(shift: int, opts: BitwiseOptions) -> int:
    if shift < 0:
        raise ValidationError("Shift amount cannot be negative")
    if opts.strict and shift >= opts.max_bits:
        raise ValidationError(f"Shift amount exceeds maximum of {opts.max_bits} bits")
    return shift


def _validate_position(position: int, opts: BitwiseOptions) -> int:
    validate_non_negative(position, "Bit position cannot be negative")
    if opts.strict and position >= opts.max_bits:
        raise ValidationError(f"Bit position exceeds maximum of {opts.max_bits} bits")
    return position


def _unsigned(value: int, opts: BitwiseOptions) -> int:
    # Negative values are read as max_bits-wide two's complement words
    return value if value >= 0 else value & opts.mask


def bit_and(a: Number, b: Number) -> int:
    return to_int(a) & to_int(b)


def bit_or(a: Number, b: Number) -> int:
    return to_int(a) | to_int(b)


def bit_xor(a: Number, b: Number) -> int:
    return to_int(a) ^ to_int(b)


def bit_not(value: Number) -> int:
    """Two's complement negation, ``-value - 1``."""
    return ~to_int(value)


def left_shift(value: Number, shift: Number, options: BitOptions = None) -> int:
    opts = resolve_bitwise_options(options)
    return to_int(value) << _validate_shift(to_int(shift), opts)


def right_shift(value: Number, shift: Number, options: BitOptions = None) -> int:
    """Arithmetic right shift; negative values round towards negative infinity."""
    opts = resolve_bitwise_options(options)
    return to_int(value) >> _validate_shift(to_int(shift), opts)


def unsigned_right_shift(value: Number, shift: Number, options: BitOptions = None) -> int:
    """Logical right shift of the ``max_bits``-wide word holding ``value``."""
    opts = resolve_bitwise_options(options)
    shift = _validate_shift(to_int(shift), opts)
    return _unsigned(to_int(value), opts) >> shift


def _rotate(value: int, rotation: int, opts: BitwiseOptions) -> int:
    width = opts.max_bits
    word = value & opts.mask
    rotation %= width
    if not rotation:
        return word
    return ((word << rotation) | (word >> (width - rotation))) & opts.mask


def rotate_left(value: Number, rotation: Number, options: BitOptions = None) -> int:
    """
    Rotate the low ``max_bits`` bits of ``value`` left.

    The rotation amount is taken modulo ``max_bits`` and the result always lies
    in ``[0, 2**max_bits)``.
    """
    opts = resolve_bitwise_options(options)
    rotation = validate_non_negative(to_int(rotation), "Rotation amount cannot be negative")
    return _rotate(to_int(value), rotation, opts)


def rotate_right(value: Number, rotation: Number, options: BitOptions = None) -> int:
    """Rotate the low ``max_bits`` bits of ``value`` right, see :func:`rotate_left`."""
    opts = resolve_bitwise_options(options)
    rotation = validate_non_negative(to_int(rotation), "Rotation amount cannot be negative")
    width = opts.max_bits
    return _rotate(to_int(value), width - rotation % width, opts)


def pop_count(value: Number, options: BitOptions = None) -> int:
    """Number of set bits; negative values count within a ``max_bits`` word."""
    opts = resolve_bitwise_options(options)
    return bin(_unsigned(to_int(value), opts)).count("1")


def trailing_zeros(value: Number, options: BitOptions = None) -> int:
    """Number of zero bits below the lowest set bit; ``max_bits`` for zero."""
    opts = resolve_bitwise_options(options)
    value = to_int(value)
    if value == 0:
        return opts.max_bits
    return (value & -value).bit_length() - 1


def leading_zeros(value: Number, options: BitOptions = None) -> int:
    """Zero bits above the highest set bit in a ``max_bits`` word; ``0`` if wider."""
    opts = resolve_bitwise_options(options)
    value = to_int(value)
    if value == 0:
        return opts.max_bits
    return max(0, opts.max_bits - _unsigned(value, opts).bit_length())


def get_bit(value: Number, position: Number, options: BitOptions = None) -> bool:
    opts = resolve_bitwise_options(options)
    position = _validate_position(to_int(position), opts)
    return bool((to_int(value) >> position) & 1)


def set_bit(value: Number, position: Number, options: BitOptions = None) -> int:
    opts = resolve_bitwise_options(options)
    position = _validate_position(to_int(position), opts)
    return to_int(value) | (1 << position)


def clear_bit(value: Number, position: Number, options: BitOptions = None) -> int:
    opts = resolve_bitwise_options(options)
    position = _validate_position(to_int(position), opts)
    return to_int(value) & ~(1 << position)


def toggle_bit(value: Number, position: Number, options: BitOptions = None) -> int:
    opts = resolve_bitwise_options(options)
    position = _validate_position(to_int(position), opts)
    return to_int(value) ^ (1 << position)
