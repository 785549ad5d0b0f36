"""Binary heap ordered by a caller-supplied comparator."""

import heapq
from functools import cmp_to_key
from itertools import count
from typing import Any, Callable, Iterable, List, Tuple

from ..core.comparison import compare
from ..core.errors import DataStructureError, HeapPropertyError

Comparator = Callable[[Any, Any], int]


class ComparatorHeap:
    """
    Min- or max-heap over arbitrary values.

    One class covers both orderings: ``is_min`` flips the comparator instead
    of selecting a subclass. Equal values pop in insertion order.
    """

    def __init__(self, comparator: Comparator = compare, is_min: bool = True,
                 values: Iterable[Any] = ()):
        self.is_min = is_min
        self._comparator = comparator
        if is_min:
            self._key = cmp_to_key(comparator)
        else:
            self._key = cmp_to_key(lambda a, b: comparator(b, a))
        self._counter = count()
        self._entries: List[Tuple[Any, int, Any]] = [
            (self._key(v), next(self._counter), v) for v in values
        ]
        heapq.heapify(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def push(self, value: Any) -> None:
        heapq.heappush(self._entries, (self._key(value), next(self._counter), value))

    def pop(self) -> Any:
        if not self._entries:
            raise DataStructureError("Heap is empty")
        return heapq.heappop(self._entries)[2]

    def peek(self) -> Any:
        if not self._entries:
            raise DataStructureError("Heap is empty")
        return self._entries[0][2]

    def drain(self) -> List[Any]:
        """Pop every value, returning them in heap order."""
        return [self.pop() for _ in range(len(self._entries))]

    def validate(self) -> None:
        """Raise :class:`HeapPropertyError` if a parent sorts after its child."""
        for child in range(1, len(self._entries)):
            parent = (child - 1) // 2
            if self._entries[child] < self._entries[parent]:
                raise HeapPropertyError(f"Heap property violated at index {child}")
