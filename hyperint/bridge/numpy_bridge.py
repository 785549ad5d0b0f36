"""
NumPy bridge for large-integer containers.

Values beyond 64 bits cannot live in a native NumPy integer dtype, so the
lossless conversion uses ``object`` arrays of Python ints. :func:`to_int64`
gives a native array when every value fits and raises otherwise.
"""

from typing import Any, Iterable, Union

import numpy as np

from ..core.errors import ArithmeticOverflowError, ArithmeticUnderflowError, ValidationError
from ..core.validation import check_range, to_int
from ..structures.big_array import BigArray

INT64_MAX = int(np.iinfo(np.int64).max)
INT64_MIN = int(np.iinfo(np.int64).min)


def to_numpy(values: Union[BigArray, Iterable[Any]]) -> np.ndarray:
    """
    Convert to a 1-D ``object`` array of Python ints.

    Args:
        values: A BigArray or any iterable of integer-convertible values

    Returns:
        NumPy array with ``dtype=object``
    """
    if isinstance(values, BigArray):
        items = values.to_array()
    else:
        items = [to_int(v) for v in values]
    return np.array(items, dtype=object)


def to_int64(values: Union[BigArray, Iterable[Any]]) -> np.ndarray:
    """
    Convert to a native ``int64`` array.

    Raises:
        ArithmeticOverflowError: If a value is above the int64 range
        ArithmeticUnderflowError: If a value is below the int64 range
    """
    items = to_numpy(values)
    for value in items:
        try:
            check_range(value, INT64_MAX, INT64_MIN)
        except (ArithmeticOverflowError, ArithmeticUnderflowError) as exc:
            raise type(exc)(f"{value} does not fit in int64") from None
    return items.astype(np.int64)


def from_numpy(array: Any, **kwargs) -> BigArray:
    """
    Build a :class:`BigArray` from a 1-D NumPy array.

    Integer, integral float and ``object`` arrays are accepted; every
    element must be convertible by :func:`to_int`.

    Raises:
        ValidationError: If the array is not one-dimensional or holds
            non-integral values
    """
    array = np.asarray(array)
    if array.ndim != 1:
        raise ValidationError(f"Expected a 1-D array, got shape {array.shape}")
    if array.dtype.kind not in "iufO":
        raise ValidationError(f"Unsupported dtype for integer conversion: {array.dtype}")
    return BigArray.from_values(array.tolist(), **kwargs)
