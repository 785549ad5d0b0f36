"""
Growable array of large integers with segment-tree range queries.

The segment tree spans the whole backing storage; slots past ``size`` hold
``None``, the identity of every combine operator, so appending is a single
leaf update and only capacity changes require a rebuild.
"""

import logging
from typing import Any, Callable, Iterable, Iterator, List, Optional, Union

from ..core.comparison import compare, resolve_combine
from ..core.constants import (
    DEFAULT_ARRAY_GROWTH_FACTOR,
    ERROR_MESSAGES,
    MAX_ARRAY_SIZE,
    MIN_ARRAY_CAPACITY,
)
from ..core.errors import (
    ArrayIndexError,
    ComputationLimitError,
    HyperintError,
    ValidationError,
)
from ..core.validation import to_int
from .heap import ComparatorHeap
from .result import OperationResult
from .segment_tree import SegmentTree

logger = logging.getLogger(__name__)


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class BigArray:
    """
    Resizable sequence of arbitrary-precision integers.

    Mutating and query operations return :class:`OperationResult` values
    instead of raising; constructor arguments are validated eagerly.

    Args:
        initial_capacity: Starting capacity, also the floor when shrinking
        growth_factor: Integer factor applied when capacity changes
        combine: Range aggregate, ``"max"``, ``"min"``, ``"sum"``, ``"gcd"``
            or an associative callable
        comparator: Three-way comparator used by :meth:`to_heap` and :meth:`sort`
        max_size: Upper bound on capacity

    Example:
        >>> arr = BigArray(combine="max")
        >>> for v in (3, 10**40, 7):
        ...     _ = arr.push(v)
        >>> arr.query_range(0, 2).value == 10**40
        True
    """

    def __init__(
        self,
        initial_capacity: int = MIN_ARRAY_CAPACITY,
        growth_factor: int = DEFAULT_ARRAY_GROWTH_FACTOR,
        combine: Union[str, Callable[[int, int], int]] = "max",
        comparator: Callable[[int, int], int] = compare,
        max_size: int = MAX_ARRAY_SIZE,
    ):
        if not _is_index(initial_capacity) or initial_capacity < 1:
            raise ValidationError("initial_capacity must be a positive integer")
        if not _is_index(growth_factor) or growth_factor < 2:
            raise ValidationError("growth_factor must be an integer >= 2")
        if not _is_index(max_size) or max_size < initial_capacity:
            raise ValidationError("max_size must be an integer >= initial_capacity")
        if not callable(comparator):
            raise ValidationError("comparator must be callable")

        self._initial_capacity = initial_capacity
        self._growth_factor = growth_factor
        self._max_size = max_size
        self._combine = resolve_combine(combine)
        self._comparator = comparator

        self._size = 0
        self._capacity = initial_capacity
        self._data: List[Optional[int]] = [None] * initial_capacity
        self._tree = SegmentTree(self._data, self._combine)

    @classmethod
    def from_values(cls, values: Iterable[Any], **kwargs) -> "BigArray":
        """
        Build an array holding ``values`` with a single tree build.

        Raises:
            ValidationError: If a value cannot be coerced to an integer
            ComputationLimitError: If the values do not fit in ``max_size``
        """
        array = cls(**kwargs)
        items = [to_int(v) for v in values]
        capacity = array._initial_capacity
        while capacity < len(items):
            capacity *= array._growth_factor
        if capacity > array._max_size:
            raise ComputationLimitError(
                f"{len(items)} values need capacity {capacity}, above maximum array size {array._max_size}"
            )
        array._capacity = capacity
        array._size = len(items)
        array._data = items + [None] * (capacity - len(items))
        array._rebuild()
        return array

    # ------------------------------------------------------------------
    # Introspection

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def growth_factor(self) -> int:
        return self._growth_factor

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return iter(self._data[:self._size])

    def __repr__(self) -> str:
        return f"BigArray(size={self._size}, capacity={self._capacity})"

    # ------------------------------------------------------------------
    # Internal helpers

    def _rebuild(self) -> None:
        self._tree.rebuild(self._data)

    def _set_capacity(self, capacity: int) -> None:
        if capacity > self._capacity:
            self._data.extend([None] * (capacity - self._capacity))
        else:
            del self._data[capacity:]
        self._capacity = capacity

    def _resize(self, new_capacity: int) -> Optional[HyperintError]:
        """
        Change capacity and rebuild; restore the old layout on failure.

        A new capacity regroups the leaves, so a combine such as ``"sum"`` can
        overflow on a partial aggregate the old tree never formed.
        """
        old_capacity = self._capacity
        logger.debug("BigArray resize %d -> %d (size=%d)", old_capacity, new_capacity, self._size)
        self._set_capacity(new_capacity)
        try:
            self._rebuild()
        except HyperintError as exc:
            logger.debug("BigArray resize to %d failed: %s", new_capacity, exc)
            self._set_capacity(old_capacity)
            self._rebuild()
            return exc
        return None

    def _check_index(self, index: Any) -> Optional[HyperintError]:
        if not _is_index(index):
            return ValidationError(f"Index must be an integer, got {index!r}")
        if index < 0 or index >= self._size:
            return ArrayIndexError(f"Index {index} out of bounds for size {self._size}")
        return None

    def _check_range(self, start: Any, end: Any) -> Optional[HyperintError]:
        if not _is_index(start) or not _is_index(end):
            return ValidationError("Range bounds must be integers")
        if start < 0 or end >= self._size or start > end:
            return ArrayIndexError(f"{ERROR_MESSAGES['INVALID_RANGE']} [{start}, {end}] for size {self._size}")
        return None

    def _write(self, index: int, value: Optional[int]) -> Optional[HyperintError]:
        """Write one slot and update the tree; restore the slot on failure."""
        previous = self._data[index]
        self._data[index] = value
        try:
            self._tree.update(index, value)
        except HyperintError as exc:
            # The previous contents were consistent, so a rebuild restores the tree
            self._data[index] = previous
            self._rebuild()
            return exc
        return None

    # ------------------------------------------------------------------
    # Operations

    def push(self, value: Any) -> OperationResult[int]:
        """Append ``value``; returns the new index."""
        try:
            value = to_int(value)
        except ValidationError as exc:
            return OperationResult.fail(exc)

        if self._size == self._capacity:
            new_capacity = self._capacity * self._growth_factor
            if new_capacity > self._max_size:
                return OperationResult.fail(ComputationLimitError(
                    f"Growing to capacity {new_capacity} would exceed maximum array size {self._max_size}"
                ))
            error = self._resize(new_capacity)
            if error is not None:
                return OperationResult.fail(error)

        index = self._size
        error = self._write(index, value)
        if error is not None:
            return OperationResult.fail(error)
        self._size += 1
        return OperationResult.ok(index)

    def pop(self) -> OperationResult[int]:
        """Remove and return the last element."""
        if not self._size:
            return OperationResult.fail(ArrayIndexError(ERROR_MESSAGES["EMPTY_ARRAY"]))

        index = self._size - 1
        value = self._data[index]
        error = self._write(index, None)
        if error is not None:
            return OperationResult.fail(error)
        self._size -= 1

        if (self._capacity > self._initial_capacity
                and self._size < self._capacity / (2 * self._growth_factor)):
            error = self._resize(self._capacity // self._growth_factor)
            if error is not None:
                # The leaf update cannot fail: it restores aggregates the tree already held
                self._write(index, value)
                self._size += 1
                return OperationResult.fail(error)
        return OperationResult.ok(value)

    def get(self, index: int) -> OperationResult[int]:
        error = self._check_index(index)
        if error is not None:
            return OperationResult.fail(error)
        return OperationResult.ok(self._data[index])

    def set(self, index: int, value: Any) -> OperationResult[int]:
        """Replace the element at ``index``; returns the previous value."""
        error = self._check_index(index)
        if error is not None:
            return OperationResult.fail(error)
        try:
            value = to_int(value)
        except ValidationError as exc:
            return OperationResult.fail(exc)

        previous = self._data[index]
        error = self._write(index, value)
        if error is not None:
            return OperationResult.fail(error)
        return OperationResult.ok(previous)

    def fill(self, start: int, end: int, value: Any) -> OperationResult[int]:
        """Assign ``value`` to every index in ``[start, end]``; returns the count."""
        error = self._check_range(start, end)
        if error is not None:
            return OperationResult.fail(error)
        try:
            value = to_int(value)
        except ValidationError as exc:
            return OperationResult.fail(exc)

        previous = self._data[start:end + 1]
        self._data[start:end + 1] = [value] * len(previous)
        try:
            self._tree.assign_range(start, end, value)
        except HyperintError as exc:
            self._data[start:end + 1] = previous
            self._rebuild()
            return OperationResult.fail(exc)
        return OperationResult.ok(len(previous))

    def query_range(self, start: int, end: int) -> OperationResult[int]:
        """Aggregate over ``[start, end]`` inclusive."""
        error = self._check_range(start, end)
        if error is not None:
            return OperationResult.fail(error)
        try:
            return OperationResult.ok(self._tree.query(start, end))
        except HyperintError as exc:
            return OperationResult.fail(exc)

    # ------------------------------------------------------------------
    # Bulk operations

    def to_heap(self, is_min: bool = True) -> ComparatorHeap:
        return ComparatorHeap(self._comparator, is_min, self.to_array())

    def sort(self, ascending: bool = True) -> OperationResult[int]:
        """Sort in place by the comparator; returns the number of elements."""
        previous = self.to_array()
        self._data[:self._size] = self.to_heap(is_min=ascending).drain()
        try:
            self._rebuild()
        except HyperintError as exc:
            self._data[:self._size] = previous
            self._rebuild()
            return OperationResult.fail(exc)
        return OperationResult.ok(self._size)

    def to_array(self) -> List[int]:
        return self._data[:self._size]
