"""
Exception taxonomy for hyperint.

Every error derives from :class:`HyperintError` and, where one fits, from the
closest builtin exception so that generic ``except ValueError`` or
``except ZeroDivisionError`` handlers keep working.
"""

from .constants import ERROR_MESSAGES


class HyperintError(Exception):
    """Base class for all hyperint errors."""


class ValidationError(HyperintError, ValueError):
    """Malformed or out-of-domain input."""


class ArithmeticOverflowError(HyperintError, OverflowError):
    """Result would exceed the configured upper bound."""

    def __init__(self, message: str = ERROR_MESSAGES["OVERFLOW"]):
        super().__init__(message)


class ArithmeticUnderflowError(HyperintError, ArithmeticError):
    """Result would fall below the configured negative bound."""

    def __init__(self, message: str = ERROR_MESSAGES["UNDERFLOW"]):
        super().__init__(message)


class DivisionByZeroError(HyperintError, ZeroDivisionError):
    def __init__(self, message: str = ERROR_MESSAGES["DIVISION_BY_ZERO"]):
        super().__init__(message)


class PrecisionError(HyperintError, ValueError):
    """Precision outside ``[0, MAX_PRECISION]``."""

    def __init__(self, message: str = ERROR_MESSAGES["INVALID_PRECISION"]):
        super().__init__(message)


class ComputationLimitError(HyperintError, RuntimeError):
    """An iteration, input-size or container-size bound was exceeded."""

    def __init__(self, message: str = ERROR_MESSAGES["COMPUTATION_LIMIT"]):
        super().__init__(message)


class DataStructureError(HyperintError):
    """Invalid operation on a container."""


class ArrayIndexError(DataStructureError, IndexError):
    def __init__(self, message: str = ERROR_MESSAGES["INDEX_OUT_OF_RANGE"]):
        super().__init__(message)


class HeapPropertyError(DataStructureError):
    def __init__(self, message: str = ERROR_MESSAGES["INVALID_HEAP_PROPERTY"]):
        super().__init__(message)


class TreeError(DataStructureError):
    def __init__(self, message: str = ERROR_MESSAGES["TREE_EMPTY"]):
        super().__init__(message)


def is_hyperint_error(error: BaseException) -> bool:
    return isinstance(error, HyperintError)


def wrap_error(error: BaseException) -> HyperintError:
    """
    Convert an arbitrary exception into a :class:`HyperintError`.

    hyperint errors are returned unchanged; anything else is wrapped with its
    message preserved and the original chained as ``__cause__``.
    """
    if isinstance(error, HyperintError):
        return error
    wrapped = HyperintError(str(error) or type(error).__name__)
    wrapped.__cause__ = error
    return wrapped
