"""Frontier containers: the discovered-but-unprocessed working set.

Public API:
    FrontierDiscipline: FIFO (breadth-first) or LIFO (depth-first).
    DequeFrontier: Double-ended frontier used by uninformed search.
    PriorityFrontier: Min-cost frontier used by cost search.
"""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from enum import Enum

from ..graph.types import SearchNode


class FrontierDiscipline(Enum):
    """Which end of the deque nodes are removed from."""

    FIFO = "fifo"
    LIFO = "lifo"


class DequeFrontier:
    """One deque, two explicit push/pop pairs selected by discipline.

    Both disciplines push on the right; FIFO pops from the left and LIFO
    pops from the right.
    """

    def __init__(self, discipline: FrontierDiscipline) -> None:
        self._discipline = discipline
        self._items: deque[SearchNode] = deque()

    @property
    def discipline(self) -> FrontierDiscipline:
        return self._discipline

    def push(self, node: SearchNode) -> None:
        self._items.append(node)

    def pop(self) -> SearchNode:
        """Remove the next node.

        Raises:
            IndexError: If the frontier is empty.
        """
        if self._discipline is FrontierDiscipline.FIFO:
            return self._items.popleft()
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


class PriorityFrontier:
    """Heap ordered by ``path_cost`` with lazy invalidation.

    Instead of a decrease-key operation, ``requeue`` marks the node's
    current heap entry stale and pushes a fresh one; ``pop`` skips stale
    entries.  Pops always return the node with the lowest current cost.
    Equal costs pop in insertion order, but callers must not rely on that.
    """

    _STALE = None

    def __init__(self) -> None:
        self._heap: list[list] = []
        # node key -> live entry [cost, seq, node]
        self._entries: dict[str, list] = {}
        self._counter = itertools.count()

    def push(self, node: SearchNode) -> None:
        """Add *node* at its current cost, replacing any live entry."""
        if node.key in self._entries:
            self._entries.pop(node.key)[-1] = self._STALE
        entry = [node.path_cost, next(self._counter), node]
        self._entries[node.key] = entry
        heapq.heappush(self._heap, entry)

    def requeue(self, node: SearchNode) -> bool:
        """Reorder *node* if its cost changed since it was queued.

        Returns:
            True if a fresh entry was pushed.
        """
        entry = self._entries.get(node.key)
        if entry is None or entry[0] == node.path_cost:
            return False
        self.push(node)
        return True

    def pop(self) -> SearchNode:
        """Remove and return the lowest-cost live node.

        Raises:
            IndexError: If the frontier is empty.
        """
        while self._heap:
            _, _, node = heapq.heappop(self._heap)
            if node is not self._STALE:
                del self._entries[node.key]
                return node
        raise IndexError("pop from an empty frontier")

    def peek_cost(self) -> int | None:
        """Cost of the entry ``pop`` would return next, or None."""
        while self._heap and self._heap[0][-1] is self._STALE:
            heapq.heappop(self._heap)
        return self._heap[0][0] if self._heap else None

    def __contains__(self, node: object) -> bool:
        return isinstance(node, SearchNode) and node.key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


__all__ = ["FrontierDiscipline", "DequeFrontier", "PriorityFrontier"]
