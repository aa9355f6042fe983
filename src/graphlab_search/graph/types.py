"""Graph data structures carrying per-node search state.

Public API:
    NodeStatus: Traversal status of a node.
    SearchNode: Mutable node with coordinates, flags and search state.
    SearchEdge: Immutable directed edge between two nodes.
    PATH_COST_INFINITY: Sentinel cost for nodes not yet reached.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum

# Python ints never overflow, so this stays above any accumulated cost.
PATH_COST_INFINITY = sys.maxsize


class NodeStatus(Enum):
    """Traversal status of a node within one search."""

    UNKNOWN = "unknown"
    DISCOVERED = "discovered"
    PROCESSED = "processed"


@dataclass(eq=False)
class SearchNode:
    """A graph node plus the state a traversal writes onto it.

    Nodes compare and hash by identity, so they can sit in sets and dict
    keys while their search state changes.

    Attributes:
        key: Unique identifier of the node within its graph.
        x: Horizontal coordinate, used only by distance metrics.
        y: Vertical coordinate, used only by distance metrics.
        status: Where the node is in the current traversal.
        path_cost: Best known cost from the start node, or
            ``PATH_COST_INFINITY`` when unreached.
        parent_key: Key of the node this one was reached from, or None.
        is_start: Whether the traversal starts here.
        is_target: Whether this is the searched-for node.
        edges: Outgoing edges, in insertion order.
    """

    key: str
    x: int = 0
    y: int = 0
    status: NodeStatus = NodeStatus.UNKNOWN
    path_cost: int = PATH_COST_INFINITY
    parent_key: str | None = None
    is_start: bool = False
    is_target: bool = False
    edges: list[SearchEdge] = field(default_factory=list, repr=False)

    @property
    def is_searched(self) -> bool:
        """Alias of ``is_target``."""
        return self.is_target

    @property
    def neighbors(self) -> list[SearchNode]:
        """Destinations of the outgoing edges, in edge order."""
        return [edge.destination for edge in self.edges]


@dataclass(frozen=True)
class SearchEdge:
    """A directed edge. Traversals only follow ``destination``.

    Edges carry no weight; costs are derived from node coordinates.
    """

    source: SearchNode
    destination: SearchNode

    @property
    def source_key(self) -> str:
        return self.source.key

    @property
    def destination_key(self) -> str:
        return self.destination.key


__all__ = ["NodeStatus", "SearchNode", "SearchEdge", "PATH_COST_INFINITY"]
