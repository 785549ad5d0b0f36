"""
Per-call arithmetic options.

Options are immutable values passed to each operation. Nothing here keeps
process-wide state: deriving a variant returns a new object.
"""

import warnings
from dataclasses import dataclass, fields, replace as _replace
from typing import Any, Mapping, Optional, Union

from .constants import MAX_COMPUTATION_STEPS
from .errors import ValidationError
from .precision import RoundingMode, validate_precision


# camelCase names used by external configuration layers
_KEY_ALIASES = {
    "roundingMode": "rounding_mode",
    "checkOverflow": "check_overflow",
    "maxSteps": "max_steps",
}


@dataclass(frozen=True)
class ArithmeticOptions:
    """
    Options shared by the arithmetic kernel and the power module.

    Attributes:
        precision: Fractional decimal digits of scaled operands and results
        rounding_mode: How discarded digits are rounded
        check_overflow: Whether results are range-checked before computing
        max_steps: Upper bound on iterations of any iterative algorithm
    """
    precision: int = 0
    rounding_mode: RoundingMode = RoundingMode.HALF_EVEN
    check_overflow: bool = True
    max_steps: int = MAX_COMPUTATION_STEPS

    def __post_init__(self):
        validate_precision(self.precision)
        # Frozen dataclass: normalise string modes in place via object.__setattr__
        object.__setattr__(self, "rounding_mode", RoundingMode.coerce(self.rounding_mode))
        if isinstance(self.max_steps, bool) or not isinstance(self.max_steps, int) or self.max_steps <= 0:
            raise ValidationError(f"max_steps must be a positive integer, got {self.max_steps!r}")
        object.__setattr__(self, "check_overflow", bool(self.check_overflow))

    def replace(self, **changes: Any) -> "ArithmeticOptions":
        """Return a copy with ``changes`` applied."""
        return _replace(self, **changes)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ArithmeticOptions":
        """
        Build options from a mapping with snake_case or camelCase keys.

        Raises:
            ValidationError: If the mapping contains unknown keys
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in mapping.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                raise ValidationError(f"Unknown arithmetic option: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)


DEFAULT_OPTIONS = ArithmeticOptions()


def resolve_options(
    options: Optional[Union[ArithmeticOptions, Mapping[str, Any]]] = None,
) -> ArithmeticOptions:
    """Normalise ``None``, an options object or a mapping to ArithmeticOptions."""
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, ArithmeticOptions):
        return options
    if isinstance(options, Mapping):
        return ArithmeticOptions.from_mapping(options)
    raise ValidationError(f"Invalid options: {options!r}")


def integer_only(opts: ArithmeticOptions, operation: str) -> ArithmeticOptions:
    """Drop a non-zero precision from ``opts``, warning the caller of ``operation``."""
    if opts.precision:
        warnings.warn(
            f"{operation} operates on integers only; precision={opts.precision} is ignored",
            UserWarning,
            stacklevel=3,
        )
        return opts.replace(precision=0)
    return opts
