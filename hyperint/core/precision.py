"""
Fixed-point precision engine.

A scaled value is an integer paired with a number of fractional decimal
digits: ``(1234, 2)`` stands for ``12.34``. Every function here works on
Python ints only, so results never depend on float rounding or locale.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .constants import MAX_PRECISION
from .errors import DivisionByZeroError, PrecisionError, ValidationError


class RoundingMode(Enum):
    """Rounding modes applied when discarded digits are non-zero."""
    FLOOR = "FLOOR"          # toward negative infinity
    CEIL = "CEIL"            # toward positive infinity
    DOWN = "DOWN"            # toward zero
    UP = "UP"                # away from zero
    HALF_EVEN = "HALF_EVEN"  # nearest, ties to even
    HALF_UP = "HALF_UP"      # nearest, ties away from zero
    HALF_DOWN = "HALF_DOWN"  # nearest, ties toward zero

    @classmethod
    def coerce(cls, mode: Union["RoundingMode", str]) -> "RoundingMode":
        """
        Resolve a rounding mode given as a member or its name.

        Raises:
            ValidationError: If ``mode`` names no rounding mode
        """
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            try:
                return cls[mode.strip().upper()]
            except KeyError:
                pass
        raise ValidationError(f"Invalid rounding mode: {mode!r}")

    @property
    def is_directed(self) -> bool:
        return not self.name.startswith("HALF_")


def validate_precision(precision: int) -> int:
    """Return ``precision`` if it lies in ``[0, MAX_PRECISION]``."""
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise PrecisionError(f"Precision must be an integer, got {precision!r}")
    if precision < 0 or precision > MAX_PRECISION:
        raise PrecisionError()
    return precision


def _round_quotient(quotient: int, remainder: int, divisor: int,
                    negative: bool, mode: RoundingMode) -> int:
    """
    Round a truncated magnitude ``quotient`` given the discarded remainder.

    ``quotient``, ``remainder`` and ``divisor`` are non-negative magnitudes;
    ``negative`` is the sign of the exact result.
    """
    if remainder:
        if mode is RoundingMode.DOWN:
            bump = False
        elif mode is RoundingMode.UP:
            bump = True
        elif mode is RoundingMode.FLOOR:
            bump = negative
        elif mode is RoundingMode.CEIL:
            bump = not negative
        else:
            twice = 2 * remainder
            if twice != divisor:
                bump = twice > divisor
            elif mode is RoundingMode.HALF_UP:
                bump = True
            elif mode is RoundingMode.HALF_DOWN:
                bump = False
            else:
                bump = quotient % 2 == 1
        if bump:
            quotient += 1
    return -quotient if negative else quotient


def scale_by_power_of_ten(value: int, power: int) -> int:
    """
    Multiply ``value`` by ``10**power``.

    Negative powers divide, truncating toward zero; no rounding mode is applied.
    """
    if power == 0:
        return value
    if power > 0:
        return value * 10**power
    magnitude = abs(value) // 10**(-power)
    return -magnitude if value < 0 else magnitude


def round_scaled(value: int, precision: int = 0,
                 mode: Union[RoundingMode, str] = RoundingMode.HALF_EVEN) -> int:
    """
    Round ``value`` to a multiple of ``10**precision``.

    The last ``precision`` digits are discarded according to ``mode`` and
    replaced with zeros, so the result stays at the scale of the input.

    Example:
        >>> round_scaled(25, 1, RoundingMode.HALF_EVEN)
        20
        >>> round_scaled(-25, 1, RoundingMode.HALF_UP)
        -30

    Raises:
        PrecisionError: If ``precision`` is outside ``[0, MAX_PRECISION]``
    """
    validate_precision(precision)
    return _round_digits(value, precision, RoundingMode.coerce(mode))


def _round_digits(value: int, digits: int, mode: RoundingMode) -> int:
    if digits == 0:
        return value
    scale = 10**digits
    quotient, remainder = divmod(abs(value), scale)
    return _round_quotient(quotient, remainder, scale, value < 0, mode) * scale


def scaled_division(numerator: int, denominator: int, precision: int = 0,
                    mode: Union[RoundingMode, str] = RoundingMode.HALF_EVEN) -> int:
    """
    Compute ``numerator / denominator`` with ``precision`` fractional digits.

    Args:
        numerator: Dividend
        denominator: Divisor
        precision: Number of fractional digits in the result
        mode: How to round the discarded remainder

    Returns:
        The quotient scaled by ``10**precision``

    Raises:
        DivisionByZeroError: If ``denominator`` is zero
    """
    validate_precision(precision)
    mode = RoundingMode.coerce(mode)
    if denominator == 0:
        raise DivisionByZeroError()
    scaled = scale_by_power_of_ten(numerator, precision)
    quotient, remainder = divmod(abs(scaled), abs(denominator))
    negative = (scaled < 0) != (denominator < 0)
    return _round_quotient(quotient, remainder, abs(denominator), negative, mode)


def normalize_precision(a: int, b: int, precision_a: int,
                        precision_b: int) -> Tuple[int, int]:
    """Rescale the lower-precision operand so both share the higher precision."""
    validate_precision(precision_a)
    validate_precision(precision_b)
    target = max(precision_a, precision_b)
    return (
        scale_by_power_of_ten(a, target - precision_a),
        scale_by_power_of_ten(b, target - precision_b),
    )


def calculate_required_precision(value: int) -> int:
    """Number of trailing decimal zeros, i.e. digits removable without loss."""
    if value == 0:
        return 0
    digits = str(abs(value))
    return len(digits) - len(digits.rstrip("0"))


def significant_digits(value: int) -> int:
    """Digits between the first and last non-zero digit, inclusive."""
    if value == 0:
        return 0
    return len(str(abs(value)).rstrip("0"))


def truncate_to_significant_digits(value: int, digits: int,
                                   mode: Union[RoundingMode, str] = RoundingMode.HALF_EVEN) -> int:
    """Keep ``digits`` significant digits, rounding the rest per ``mode``."""
    if digits <= 0:
        raise ValidationError("Number of significant digits must be positive")
    if significant_digits(value) <= digits:
        return value
    drop = len(str(abs(value))) - digits
    # Rounding may carry into a new leading digit (995 -> 1000)
    return _round_digits(value, drop, RoundingMode.coerce(mode))


def equal_within_precision(a: int, b: int, precision: int) -> bool:
    """True when ``a`` and ``b`` differ by less than ``10**precision``."""
    validate_precision(precision)
    return abs(a - b) < 10**precision


def get_fractional_part(value: int, precision: int) -> int:
    """The last ``precision`` digits of ``value``, carrying its sign."""
    if precision <= 0:
        return 0
    validate_precision(precision)
    fraction = abs(value) % 10**precision
    return -fraction if value < 0 else fraction


@dataclass(frozen=True, eq=False)
class ScaledValue:
    """
    Fixed-point decimal ``unscaled / 10**precision``.

    Equality and ordering compare numeric values, so ``ScaledValue(150, 2)``
    equals ``ScaledValue(15, 1)``.
    """
    unscaled: int
    precision: int = 0

    def __post_init__(self):
        if isinstance(self.unscaled, bool) or not isinstance(self.unscaled, int):
            raise ValidationError(f"Unscaled value must be an integer, got {self.unscaled!r}")
        validate_precision(self.precision)

    def rescale(self, precision: int,
                mode: Union[RoundingMode, str] = RoundingMode.HALF_EVEN) -> "ScaledValue":
        """Return this value at ``precision`` fractional digits."""
        validate_precision(precision)
        if precision >= self.precision:
            return ScaledValue(scale_by_power_of_ten(self.unscaled, precision - self.precision), precision)
        divisor = 10**(self.precision - precision)
        return ScaledValue(scaled_division(self.unscaled, divisor, 0, mode), precision)

    def normalize(self, other: "ScaledValue") -> Tuple["ScaledValue", "ScaledValue"]:
        target = max(self.precision, other.precision)
        return self.rescale(target), other.rescale(target)

    @property
    def integer_part(self) -> int:
        return scale_by_power_of_ten(self.unscaled, -self.precision)

    @property
    def fractional_part(self) -> int:
        return get_fractional_part(self.unscaled, self.precision)

    def _key(self, other: "ScaledValue") -> Tuple[int, int]:
        return normalize_precision(self.unscaled, other.unscaled, self.precision, other.precision)

    def __eq__(self, other):
        if not isinstance(other, ScaledValue):
            return NotImplemented
        a, b = self._key(other)
        return a == b

    def __lt__(self, other):
        if not isinstance(other, ScaledValue):
            return NotImplemented
        a, b = self._key(other)
        return a < b

    def __le__(self, other):
        if not isinstance(other, ScaledValue):
            return NotImplemented
        a, b = self._key(other)
        return a <= b

    def __gt__(self, other):
        if not isinstance(other, ScaledValue):
            return NotImplemented
        a, b = self._key(other)
        return a > b

    def __ge__(self, other):
        if not isinstance(other, ScaledValue):
            return NotImplemented
        a, b = self._key(other)
        return a >= b

    def __hash__(self):
        # Strip trailing zeros so equal values hash equally
        unscaled, precision = self.unscaled, self.precision
        while precision and unscaled % 10 == 0:
            unscaled //= 10
            precision -= 1
        return hash((unscaled, precision))
