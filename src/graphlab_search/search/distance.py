"""Integer distance metrics between node coordinates.

Each metric is used both as edge cost and, for A*, as the heuristic
estimate.  All results are truncated toward zero.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from ..graph.types import SearchNode

DistanceFn = Callable[[SearchNode, SearchNode], int]


def root_manhattan_distance(start: SearchNode, end: SearchNode) -> int:
    """Square root of the Manhattan distance, truncated."""
    return int(math.sqrt(abs(start.x - end.x) + abs(start.y - end.y)))


def euclidean_distance(start: SearchNode, end: SearchNode) -> int:
    return int(math.hypot(start.x - end.x, start.y - end.y))


def manhattan_distance(start: SearchNode, end: SearchNode) -> int:
    return abs(start.x - end.x) + abs(start.y - end.y)


__all__ = [
    "DistanceFn",
    "root_manhattan_distance",
    "euclidean_distance",
    "manhattan_distance",
]
