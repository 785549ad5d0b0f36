"""Containers for large-integer values."""

from .result import OperationResult
from .segment_tree import SegmentTree, SegmentTreeNode
from .heap import ComparatorHeap
from .big_array import BigArray

__all__ = [
    "OperationResult",
    "SegmentTree",
    "SegmentTreeNode",
    "ComparatorHeap",
    "BigArray",
]
