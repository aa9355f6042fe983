"""Observer callbacks invoked by the traversal engine.

The engine calls three slots synchronously, in order, from its own loop:

* ``on_visited_node(node)`` -- a popped node becomes discovered.
* ``on_visited_edge(edge)`` -- an edge's destination is first discovered.
  This slot may raise; the exception aborts the traversal.
* ``on_processed_node(node)`` -- all outgoing edges of a node were examined.

Public API:
    SearchObserver: Protocol grouping the three slots on one object.
    SearchRecorder: Observer that records the callback stream.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from ..graph.types import SearchEdge, SearchNode

NodeCallback = Callable[[SearchNode], None]
EdgeCallback = Callable[[SearchEdge], None]


def ignore(_item: object) -> None:
    """Default no-op callback."""


@runtime_checkable
class SearchObserver(Protocol):
    """Object form of the three callback slots."""

    def on_visited_node(self, node: SearchNode) -> None:
        ...

    def on_visited_edge(self, edge: SearchEdge) -> None:
        ...

    def on_processed_node(self, node: SearchNode) -> None:
        ...


class SearchRecorder:
    """Records every callback in arrival order.

    Attributes:
        visited_nodes: Nodes passed to ``on_visited_node``.
        visited_edges: Edges passed to ``on_visited_edge``.
        processed_nodes: Nodes passed to ``on_processed_node``.
        events: ``(slot, key)`` tuples across all three slots, where key
            is the node key or a ``(source, destination)`` key pair.
    """

    def __init__(self) -> None:
        self.visited_nodes: list[SearchNode] = []
        self.visited_edges: list[SearchEdge] = []
        self.processed_nodes: list[SearchNode] = []
        self.events: list[tuple[str, object]] = []

    def on_visited_node(self, node: SearchNode) -> None:
        self.visited_nodes.append(node)
        self.events.append(("visited_node", node.key))

    def on_visited_edge(self, edge: SearchEdge) -> None:
        self.visited_edges.append(edge)
        self.events.append(("visited_edge", (edge.source_key, edge.destination_key)))

    def on_processed_node(self, node: SearchNode) -> None:
        self.processed_nodes.append(node)
        self.events.append(("processed_node", node.key))

    @property
    def visited_keys(self) -> list[str]:
        return [node.key for node in self.visited_nodes]

    @property
    def processed_keys(self) -> list[str]:
        return [node.key for node in self.processed_nodes]

    @property
    def edge_keys(self) -> list[tuple[str, str]]:
        return [(e.source_key, e.destination_key) for e in self.visited_edges]

    def clear(self) -> None:
        self.visited_nodes.clear()
        self.visited_edges.clear()
        self.processed_nodes.clear()
        self.events.clear()

    def __repr__(self) -> str:
        return (
            f"SearchRecorder(visited={len(self.visited_nodes)}, "
            f"edges={len(self.visited_edges)}, processed={len(self.processed_nodes)})"
        )


__all__ = ["SearchObserver", "SearchRecorder", "NodeCallback", "EdgeCallback"]
