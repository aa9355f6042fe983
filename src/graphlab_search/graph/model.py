"""SearchGraph -- the node collection every traversal runs over.

Public API:
    SearchGraph: Owns nodes by key; each node owns its outgoing edges.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..exceptions import DuplicateNodeError, NodeNotFoundError
from .types import PATH_COST_INFINITY, NodeStatus, SearchEdge, SearchNode


class SearchGraph:
    """A mutable directed graph of ``SearchNode`` objects.

    Construction and editing belong to the caller; traversals only write
    ``status``, ``path_cost`` and ``parent_key`` on the nodes.

    Args:
        graph_id: Human-readable identifier, used as the storage key when
            the graph is persisted.
    """

    def __init__(self, graph_id: str = "default") -> None:
        self._graph_id = graph_id
        self._nodes: dict[str, SearchNode] = {}

    @property
    def graph_id(self) -> str:
        return self._graph_id

    # ── nodes ─────────────────────────────────────────────────

    def add_node(
        self,
        key: str,
        x: int = 0,
        y: int = 0,
        *,
        is_start: bool = False,
        is_target: bool = False,
    ) -> SearchNode:
        """Create a node and return it.

        Raises:
            DuplicateNodeError: If *key* is already in the graph.
        """
        if key in self._nodes:
            raise DuplicateNodeError(f"Node already exists: {key}")
        node = SearchNode(key=key, x=x, y=y, is_start=is_start, is_target=is_target)
        self._nodes[key] = node
        return node

    def get_node(self, key: str) -> SearchNode | None:
        """Return the node for *key*, or None if not found."""
        return self._nodes.get(key)

    def node(self, key: str) -> SearchNode:
        """Return the node for *key*.

        Raises:
            NodeNotFoundError: If *key* is not in the graph.
        """
        try:
            return self._nodes[key]
        except KeyError:
            raise NodeNotFoundError(f"Node not found: {key}") from None

    @property
    def nodes(self) -> list[SearchNode]:
        return list(self._nodes.values())

    @property
    def edges(self) -> list[SearchEdge]:
        return [edge for node in self._nodes.values() for edge in node.edges]

    # ── edges ─────────────────────────────────────────────────

    def add_edge(self, source_key: str, destination_key: str) -> SearchEdge:
        """Append a directed edge to the source node's edge list.

        Raises:
            NodeNotFoundError: If either endpoint does not exist.
        """
        source = self.node(source_key)
        destination = self.node(destination_key)
        edge = SearchEdge(source=source, destination=destination)
        source.edges.append(edge)
        return edge

    # ── start / target flags ──────────────────────────────────

    def set_start(self, key: str) -> SearchNode:
        """Make *key* the only start node."""
        chosen = self.node(key)
        for node in self._nodes.values():
            node.is_start = False
        chosen.is_start = True
        return chosen

    def set_target(self, key: str) -> SearchNode:
        """Make *key* the only target node."""
        chosen = self.node(key)
        for node in self._nodes.values():
            node.is_target = False
        chosen.is_target = True
        return chosen

    @property
    def start_node(self) -> SearchNode | None:
        return next((n for n in self._nodes.values() if n.is_start), None)

    @property
    def target_node(self) -> SearchNode | None:
        return next((n for n in self._nodes.values() if n.is_target), None)

    # ── search state ──────────────────────────────────────────

    def reset_search_state(self, reset_costs: bool = False) -> None:
        """Forget everything a previous traversal wrote.

        Args:
            reset_costs: Also set every path cost back to infinity.
        """
        for node in self._nodes.values():
            node.status = NodeStatus.UNKNOWN
            node.parent_key = None
            if reset_costs:
                node.path_cost = PATH_COST_INFINITY

    def path_to(self, key: str) -> list[SearchNode]:
        """Walk parent pointers from *key* back to the start node.

        Returns:
            Nodes from start to *key*, or an empty list when the parent
            chain does not lead to the start node.
        """
        node: SearchNode | None = self.node(key)
        path: list[SearchNode] = []
        seen: set[str] = set()
        while node is not None and node.key not in seen:
            seen.add(node.key)
            path.append(node)
            if node.is_start:
                path.reverse()
                return path
            node = self._nodes.get(node.parent_key) if node.parent_key else None
        return []

    def shortest_path(self) -> list[SearchNode]:
        """Path from the start node to the target node, if one was recorded."""
        target = self.target_node
        if target is None:
            return []
        return self.path_to(target.key)

    # ── container protocol ────────────────────────────────────

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(list(self._nodes.values()))

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __repr__(self) -> str:
        return f"SearchGraph(graph_id={self._graph_id!r}, nodes={len(self._nodes)})"


__all__ = ["SearchGraph"]
