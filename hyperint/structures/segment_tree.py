"""
Array-backed segment tree with lazy range assignment.

Node ``i`` has children ``2i + 1`` and ``2i + 2``. A node with a ``pending``
value has an up-to-date aggregate while its children are stale; the pending
assignment is pushed one level down whenever a traversal descends through
the node.

``None`` is the empty aggregate and the identity of every combine operator,
so unused leaves can be stored as ``None``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional

from ..core.errors import TreeError

Combine = Callable[[Any, Any], Any]


@dataclass
class SegmentTreeNode:
    """Aggregate over ``[start, end]`` plus an optional pending assignment."""
    aggregate: Any
    pending: Any = None
    start: int = 0
    end: int = 0

    @property
    def is_leaf(self) -> bool:
        return self.start == self.end

    @property
    def width(self) -> int:
        return self.end - self.start + 1


class SegmentTree:
    """
    Range-aggregate tree over a fixed number of leaves.

    Args:
        values: Initial leaf values (``None`` for empty leaves)
        combine: Associative binary operator treating ``None`` as identity
    """

    def __init__(self, values: Iterable[Any], combine: Combine):
        self._combine = combine
        self._nodes: List[Optional[SegmentTreeNode]] = []
        self._size = 0
        self.rebuild(values)

    def __len__(self) -> int:
        return self._size

    @property
    def root(self) -> Any:
        """Aggregate over all leaves."""
        if not self._size:
            return None
        return self._nodes[0].aggregate

    def rebuild(self, values: Iterable[Any]) -> None:
        """Discard the current tree and build a new one in O(n)."""
        values = list(values)
        self._size = len(values)
        self._nodes = [None] * (4 * max(self._size, 1))
        if self._size:
            self._build(0, 0, self._size - 1, values)

    def _build(self, index: int, start: int, end: int, values: List[Any]) -> None:
        if start == end:
            self._nodes[index] = SegmentTreeNode(values[start], None, start, end)
            return
        mid = (start + end) // 2
        left, right = 2 * index + 1, 2 * index + 2
        self._build(left, start, mid, values)
        self._build(right, mid + 1, end, values)
        aggregate = self._combine(self._nodes[left].aggregate, self._nodes[right].aggregate)
        self._nodes[index] = SegmentTreeNode(aggregate, None, start, end)

    def _repeat(self, value: Any, count: int) -> Any:
        """Aggregate of ``count`` copies of ``value`` by repeated doubling."""
        result = None
        chunk = value
        while count:
            if count & 1:
                result = self._combine(result, chunk)
            count >>= 1
            if count:
                chunk = self._combine(chunk, chunk)
        return result

    def _apply(self, index: int, value: Any) -> None:
        node = self._nodes[index]
        node.aggregate = self._repeat(value, node.width)
        if not node.is_leaf:
            node.pending = value

    def _push_down(self, index: int) -> None:
        node = self._nodes[index]
        if node.pending is None:
            return
        self._apply(2 * index + 1, node.pending)
        self._apply(2 * index + 2, node.pending)
        node.pending = None

    def _check_range(self, start: int, end: int) -> None:
        if not self._size:
            raise TreeError()
        if start < 0 or end >= self._size or start > end:
            raise TreeError(f"Invalid range [{start}, {end}] for {self._size} leaves")

    def update(self, position: int, value: Any) -> None:
        """Set leaf ``position`` to ``value`` in O(log n)."""
        self._check_range(position, position)
        self._update(0, position, value)

    def _update(self, index: int, position: int, value: Any) -> None:
        node = self._nodes[index]
        if node.is_leaf:
            node.aggregate = value
            return
        self._push_down(index)
        left, right = 2 * index + 1, 2 * index + 2
        if position <= (node.start + node.end) // 2:
            self._update(left, position, value)
        else:
            self._update(right, position, value)
        node.aggregate = self._combine(self._nodes[left].aggregate, self._nodes[right].aggregate)

    def assign_range(self, start: int, end: int, value: Any) -> None:
        """Set every leaf in ``[start, end]`` to ``value`` in O(log n)."""
        if value is None:
            raise TreeError("Range assignment requires a value")
        self._check_range(start, end)
        self._assign(0, start, end, value)

    def _assign(self, index: int, start: int, end: int, value: Any) -> None:
        node = self._nodes[index]
        if end < node.start or start > node.end:
            return
        if start <= node.start and node.end <= end:
            self._apply(index, value)
            return
        self._push_down(index)
        left, right = 2 * index + 1, 2 * index + 2
        self._assign(left, start, end, value)
        self._assign(right, start, end, value)
        node.aggregate = self._combine(self._nodes[left].aggregate, self._nodes[right].aggregate)

    def query(self, start: int, end: int) -> Any:
        """Aggregate over ``[start, end]`` inclusive in O(log n)."""
        self._check_range(start, end)
        return self._query(0, start, end)

    def _query(self, index: int, start: int, end: int) -> Any:
        node = self._nodes[index]
        if end < node.start or start > node.end:
            return None
        if start <= node.start and node.end <= end:
            return node.aggregate
        self._push_down(index)
        return self._combine(
            self._query(2 * index + 1, start, end),
            self._query(2 * index + 2, start, end),
        )

    def validate(self) -> None:
        """
        Check that every internal node without a pending assignment
        aggregates its children.

        Raises:
            TreeError: On the first inconsistent node
        """
        if self._size:
            self._validate(0)

    def _validate(self, index: int) -> None:
        node = self._nodes[index]
        if node.is_leaf or node.pending is not None:
            return
        left, right = 2 * index + 1, 2 * index + 2
        self._validate(left)
        self._validate(right)
        expected = self._combine(self._nodes[left].aggregate, self._nodes[right].aggregate)
        if node.aggregate != expected:
            raise TreeError(f"Node [{node.start}, {node.end}] aggregate {node.aggregate!r} != {expected!r}")
