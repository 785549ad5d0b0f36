"""Bridges between hyperint containers and numerical libraries."""

from .numpy_bridge import INT64_MAX, INT64_MIN, from_numpy, to_int64, to_numpy

__all__ = [
    "from_numpy",
    "to_numpy",
    "to_int64",
    "INT64_MAX",
    "INT64_MIN",
]
