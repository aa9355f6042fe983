"""Traversal engine, frontiers, observers and cancellation.

Public API:
    bfs, dfs, ucs, astar: Strategy entry points.
    run_search: Dispatch on SearchKind with an observer object.
    traverse_uninformed: Generic FIFO/LIFO frontier search.
    traverse_cost: Generic priority frontier search.
    SearchKind, SearchOutcome, RelaxationPolicy, SearchResult: Engine types.
    FrontierDiscipline, DequeFrontier, PriorityFrontier: Frontier containers.
    SearchObserver, SearchRecorder: Callback slots and a recording observer.
    CancelSignal, CancellationToken: Cooperative cancellation.
    SearchWorker: Background driver for one traversal.
"""

from __future__ import annotations

from .cancellation import CancellationToken, CancelSignal
from .distance import euclidean_distance, manhattan_distance, root_manhattan_distance
from .engine import (
    RelaxationPolicy,
    SearchKind,
    SearchOutcome,
    SearchResult,
    astar,
    bfs,
    dfs,
    run_search,
    traverse_cost,
    traverse_uninformed,
    ucs,
)
from .frontier import DequeFrontier, FrontierDiscipline, PriorityFrontier
from .observer import SearchObserver, SearchRecorder
from .worker import DEFAULT_STEP_DELAY, SearchWorker

__all__ = [
    "bfs",
    "dfs",
    "ucs",
    "astar",
    "run_search",
    "traverse_uninformed",
    "traverse_cost",
    "SearchKind",
    "SearchOutcome",
    "RelaxationPolicy",
    "SearchResult",
    "FrontierDiscipline",
    "DequeFrontier",
    "PriorityFrontier",
    "SearchObserver",
    "SearchRecorder",
    "CancelSignal",
    "CancellationToken",
    "SearchWorker",
    "DEFAULT_STEP_DELAY",
    "root_manhattan_distance",
    "euclidean_distance",
    "manhattan_distance",
]
