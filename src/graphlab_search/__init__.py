"""graphlab-search: Observable, cancelable graph traversal (BFS, DFS, UCS, A*)."""

__version__ = "0.1.0"

from .exceptions import (
    DuplicateNodeError,
    GraphNotFoundError,
    GraphSearchError,
    NodeNotFoundError,
)
from .graph import (
    PATH_COST_INFINITY,
    KuzuGraphStore,
    NodeStatus,
    SearchEdge,
    SearchGraph,
    SearchNode,
)
from .search import (
    CancellationToken,
    CancelSignal,
    DequeFrontier,
    FrontierDiscipline,
    PriorityFrontier,
    RelaxationPolicy,
    SearchKind,
    SearchObserver,
    SearchOutcome,
    SearchRecorder,
    SearchResult,
    SearchWorker,
    astar,
    bfs,
    dfs,
    euclidean_distance,
    manhattan_distance,
    root_manhattan_distance,
    run_search,
    traverse_cost,
    traverse_uninformed,
    ucs,
)

__all__ = [
    # Graph model
    "SearchGraph",
    "SearchNode",
    "SearchEdge",
    "NodeStatus",
    "PATH_COST_INFINITY",
    # Persistence
    "KuzuGraphStore",
    # Traversal engine
    "bfs",
    "dfs",
    "ucs",
    "astar",
    "run_search",
    "traverse_uninformed",
    "traverse_cost",
    "SearchKind",
    "SearchOutcome",
    "SearchResult",
    "RelaxationPolicy",
    "FrontierDiscipline",
    "DequeFrontier",
    "PriorityFrontier",
    "root_manhattan_distance",
    "euclidean_distance",
    "manhattan_distance",
    # Observers and cancellation
    "SearchObserver",
    "SearchRecorder",
    "CancelSignal",
    "CancellationToken",
    "SearchWorker",
    # Exceptions
    "GraphSearchError",
    "NodeNotFoundError",
    "DuplicateNodeError",
    "GraphNotFoundError",
]
