"""Traversal engine: breadth-first, depth-first, uniform-cost and A* search.

All four strategies run over a ``SearchGraph`` from its start node,
write ``status``, ``path_cost`` and ``parent_key`` onto the nodes, and
report each step through the three observer slots described in
``graphlab_search.search.observer``.

Termination is always a normal return: frontier exhausted, target
reached, or cancellation observed after a node was processed.  The only
way a traversal fails is an exception raised by a callback, which
propagates unchanged and leaves the graph exactly as far as it got.

Public API:
    SearchKind: The four strategies.
    SearchOutcome: Why a traversal returned.
    RelaxationPolicy: How cost search updates a child's path cost.
    SearchResult: Summary of one traversal.
    traverse_uninformed: Generic FIFO/LIFO frontier search.
    traverse_cost: Generic priority frontier search.
    bfs, dfs, ucs, astar: Strategy entry points.
    run_search: Dispatch on ``SearchKind`` with an observer object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..graph.model import SearchGraph
from ..graph.types import NodeStatus
from .cancellation import CancelSignal
from .distance import DistanceFn, root_manhattan_distance
from .frontier import DequeFrontier, FrontierDiscipline, PriorityFrontier
from .observer import EdgeCallback, NodeCallback, SearchObserver, ignore

logger = logging.getLogger(__name__)


class SearchKind(Enum):
    """Traversal strategies."""

    BFS = "bfs"
    DFS = "dfs"
    UCS = "ucs"
    ASTAR = "astar"


class SearchOutcome(Enum):
    """Why a traversal returned."""

    EXHAUSTED = "exhausted"
    TARGET_REACHED = "target_reached"
    CANCELLED = "cancelled"
    NO_START = "no_start"
    NO_TARGET = "no_target"


class RelaxationPolicy(Enum):
    """How cost search treats a child's previously recorded cost.

    OVERWRITE replaces the cost on every examined edge, even when the new
    value is worse.  IMPROVE_ONLY updates only on a strict improvement,
    which is the textbook uniform-cost / A* rule.
    """

    OVERWRITE = "overwrite"
    IMPROVE_ONLY = "improve_only"


@dataclass
class SearchResult:
    """Summary of one traversal.

    Attributes:
        kind: Strategy that ran.
        outcome: Why it returned.
        target_cost: Path cost of the target when a cost search popped it.
        nodes_visited: Number of ``on_visited_node`` calls.
        edges_visited: Number of ``on_visited_edge`` calls.
        nodes_processed: Number of ``on_processed_node`` calls.
    """

    kind: SearchKind
    outcome: SearchOutcome = SearchOutcome.EXHAUSTED
    target_cost: int | None = None
    nodes_visited: int = 0
    edges_visited: int = 0
    nodes_processed: int = 0

    @property
    def reached_target(self) -> bool:
        return self.outcome is SearchOutcome.TARGET_REACHED


def _is_cancelled(cancel: CancelSignal | None) -> bool:
    return cancel is not None and cancel.is_set()


# ── uninformed search ─────────────────────────────────────────


def traverse_uninformed(
    graph: SearchGraph,
    discipline: FrontierDiscipline,
    on_visited_node: NodeCallback | None = None,
    on_visited_edge: EdgeCallback | None = None,
    on_processed_node: NodeCallback | None = None,
    cancel: CancelSignal | None = None,
    stop_at_target: bool = False,
) -> SearchResult:
    """Breadth-first (FIFO) or depth-first (LIFO) traversal.

    Edges are expanded in edge-list order.  A node is marked discovered
    when it is pushed, so it enters the frontier at most once.

    Args:
        graph: Graph to traverse; its start node is the root.
        discipline: FIFO for breadth-first, LIFO for depth-first.
        on_visited_node: Called when a node is popped.
        on_visited_edge: Called when an edge discovers its destination.
        on_processed_node: Called after a node's edges were examined.
        cancel: Polled once per popped node, after it is processed.
        stop_at_target: Return as soon as the target node is popped,
            before any callback fires for it.

    Returns:
        A ``SearchResult``; ``NO_START`` when the graph has no start node.
    """
    kind = SearchKind.BFS if discipline is FrontierDiscipline.FIFO else SearchKind.DFS
    visit_node = on_visited_node or ignore
    visit_edge = on_visited_edge or ignore
    process_node = on_processed_node or ignore
    result = SearchResult(kind=kind)

    graph.reset_search_state()
    start = graph.start_node
    if start is None:
        logger.debug("%s: no start node, nothing to do", kind.value)
        result.outcome = SearchOutcome.NO_START
        return result

    logger.debug("%s: starting from %s", kind.value, start.key)
    frontier = DequeFrontier(discipline)
    frontier.push(start)

    while frontier:
        node = frontier.pop()
        if stop_at_target and node.is_target:
            result.outcome = SearchOutcome.TARGET_REACHED
            break

        node.status = NodeStatus.DISCOVERED
        result.nodes_visited += 1
        visit_node(node)

        for edge in node.edges:
            child = edge.destination
            if child.status is NodeStatus.UNKNOWN:
                frontier.push(child)
                child.status = NodeStatus.DISCOVERED
                child.parent_key = node.key
                result.edges_visited += 1
                visit_edge(edge)

        node.status = NodeStatus.PROCESSED
        result.nodes_processed += 1
        process_node(node)

        if _is_cancelled(cancel):
            result.outcome = SearchOutcome.CANCELLED
            break

    logger.debug(
        "%s: %s after %d nodes", kind.value, result.outcome.value, result.nodes_processed,
    )
    return result


# ── cost search ───────────────────────────────────────────────


def traverse_cost(
    graph: SearchGraph,
    on_visited_node: NodeCallback | None = None,
    on_visited_edge: EdgeCallback | None = None,
    on_processed_node: NodeCallback | None = None,
    cancel: CancelSignal | None = None,
    use_heuristic: bool = False,
    distance: DistanceFn = root_manhattan_distance,
    relaxation: RelaxationPolicy = RelaxationPolicy.OVERWRITE,
) -> SearchResult:
    """Uniform-cost or A* traversal from the start node to the target.

    Each examined edge yields ``distance(node, child) + node.path_cost``
    plus, with *use_heuristic*, ``distance(start, child)``.  How that value
    replaces the child's recorded cost is decided by *relaxation*.  A child
    already waiting in the frontier is reordered when its cost changes.

    Parent pointers are written together with the cost, but only while
    the child has not been popped yet, so ``SearchGraph.shortest_path``
    always follows an acyclic chain back to the start.

    Returns:
        A ``SearchResult``; ``NO_START`` / ``NO_TARGET`` when either flag
        is missing, ``TARGET_REACHED`` with ``target_cost`` on success.
    """
    kind = SearchKind.ASTAR if use_heuristic else SearchKind.UCS
    visit_node = on_visited_node or ignore
    visit_edge = on_visited_edge or ignore
    process_node = on_processed_node or ignore
    result = SearchResult(kind=kind)

    graph.reset_search_state(reset_costs=True)
    start = graph.start_node
    target = graph.target_node
    if start is None:
        logger.debug("%s: no start node, nothing to do", kind.value)
        result.outcome = SearchOutcome.NO_START
        return result
    if target is None:
        logger.debug("%s: no target node, nothing to do", kind.value)
        result.outcome = SearchOutcome.NO_TARGET
        return result

    logger.debug("%s: searching %s -> %s", kind.value, start.key, target.key)
    start.path_cost = 0
    frontier = PriorityFrontier()
    frontier.push(start)

    while frontier:
        node = frontier.pop()
        if node.is_target:
            result.outcome = SearchOutcome.TARGET_REACHED
            result.target_cost = node.path_cost
            break

        node.status = NodeStatus.DISCOVERED
        result.nodes_visited += 1
        visit_node(node)

        for edge in node.edges:
            child = edge.destination
            edge_cost = distance(node, child)
            heuristic = distance(start, child) if use_heuristic else 0
            new_cost = edge_cost + node.path_cost + heuristic

            waiting = child.status is NodeStatus.UNKNOWN or child in frontier
            if relaxation is RelaxationPolicy.OVERWRITE or new_cost < child.path_cost:
                child.path_cost = new_cost
                if waiting:
                    child.parent_key = node.key

            if child.status is NodeStatus.UNKNOWN:
                frontier.push(child)
                child.status = NodeStatus.DISCOVERED
                result.edges_visited += 1
                visit_edge(edge)
            elif child in frontier:
                frontier.requeue(child)

        node.status = NodeStatus.PROCESSED
        result.nodes_processed += 1
        process_node(node)

        if _is_cancelled(cancel):
            result.outcome = SearchOutcome.CANCELLED
            break

    logger.debug(
        "%s: %s after %d nodes (target cost %s)",
        kind.value, result.outcome.value, result.nodes_processed, result.target_cost,
    )
    return result


# ── entry points ──────────────────────────────────────────────


def bfs(
    graph: SearchGraph,
    on_visited_node: NodeCallback | None = None,
    on_visited_edge: EdgeCallback | None = None,
    on_processed_node: NodeCallback | None = None,
    cancel: CancelSignal | None = None,
    stop_at_target: bool = False,
) -> SearchResult:
    """Breadth-first traversal; see ``traverse_uninformed``."""
    return traverse_uninformed(
        graph, FrontierDiscipline.FIFO,
        on_visited_node, on_visited_edge, on_processed_node,
        cancel, stop_at_target,
    )


def dfs(
    graph: SearchGraph,
    on_visited_node: NodeCallback | None = None,
    on_visited_edge: EdgeCallback | None = None,
    on_processed_node: NodeCallback | None = None,
    cancel: CancelSignal | None = None,
    stop_at_target: bool = False,
) -> SearchResult:
    """Depth-first traversal; see ``traverse_uninformed``."""
    return traverse_uninformed(
        graph, FrontierDiscipline.LIFO,
        on_visited_node, on_visited_edge, on_processed_node,
        cancel, stop_at_target,
    )


def ucs(
    graph: SearchGraph,
    on_visited_node: NodeCallback | None = None,
    on_visited_edge: EdgeCallback | None = None,
    on_processed_node: NodeCallback | None = None,
    cancel: CancelSignal | None = None,
    **options: Any,
) -> SearchResult:
    """Uniform-cost search; see ``traverse_cost``."""
    return traverse_cost(
        graph, on_visited_node, on_visited_edge, on_processed_node,
        cancel, use_heuristic=False, **options,
    )


def astar(
    graph: SearchGraph,
    on_visited_node: NodeCallback | None = None,
    on_visited_edge: EdgeCallback | None = None,
    on_processed_node: NodeCallback | None = None,
    cancel: CancelSignal | None = None,
    **options: Any,
) -> SearchResult:
    """A* search; see ``traverse_cost``."""
    return traverse_cost(
        graph, on_visited_node, on_visited_edge, on_processed_node,
        cancel, use_heuristic=True, **options,
    )


def run_search(
    graph: SearchGraph,
    kind: SearchKind | str,
    observer: SearchObserver | None = None,
    cancel: CancelSignal | None = None,
    stop_at_target: bool = False,
    **options: Any,
) -> SearchResult:
    """Run the strategy named by *kind*, wiring *observer* into the slots.

    Args:
        graph: Graph to traverse.
        kind: A ``SearchKind`` or its string value (e.g. ``"astar"``).
        observer: Object providing the three callback methods.
        cancel: Cancellation signal polled once per node.
        stop_at_target: Only meaningful for BFS and DFS.
        **options: ``distance`` / ``relaxation`` for UCS and A*.

    Raises:
        ValueError: If *kind* is not a known strategy.
    """
    kind = SearchKind(kind)
    slots: dict[str, Any] = {}
    if observer is not None:
        slots = {
            "on_visited_node": observer.on_visited_node,
            "on_visited_edge": observer.on_visited_edge,
            "on_processed_node": observer.on_processed_node,
        }

    if kind is SearchKind.BFS:
        return bfs(graph, cancel=cancel, stop_at_target=stop_at_target, **slots)
    if kind is SearchKind.DFS:
        return dfs(graph, cancel=cancel, stop_at_target=stop_at_target, **slots)
    if kind is SearchKind.UCS:
        return ucs(graph, cancel=cancel, **slots, **options)
    return astar(graph, cancel=cancel, **slots, **options)


__all__ = [
    "SearchKind",
    "SearchOutcome",
    "RelaxationPolicy",
    "SearchResult",
    "traverse_uninformed",
    "traverse_cost",
    "bfs",
    "dfs",
    "ucs",
    "astar",
    "run_search",
]
