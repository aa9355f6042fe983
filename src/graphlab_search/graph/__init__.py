"""Graph model for traversal: nodes, edges, per-node search state.

Public API:
    NodeStatus: Traversal status of a node.
    SearchNode: Mutable node with coordinates, flags and search state.
    SearchEdge: Immutable directed edge.
    SearchGraph: Node collection traversals run over.
    KuzuGraphStore: Kuzu-backed persistence for search graphs.
    PATH_COST_INFINITY: Sentinel cost for unreached nodes.
"""

from __future__ import annotations

from .kuzu_store import KuzuGraphStore
from .model import SearchGraph
from .types import PATH_COST_INFINITY, NodeStatus, SearchEdge, SearchNode

__all__ = [
    "NodeStatus",
    "SearchNode",
    "SearchEdge",
    "SearchGraph",
    "KuzuGraphStore",
    "PATH_COST_INFINITY",
]
