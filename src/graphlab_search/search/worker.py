"""SearchWorker -- runs one traversal in the background for a presentation layer.

The worker records the callback stream, exposes a progress percentage,
paces the traversal with a cancellation-aware delay after every visited
edge, and reports failures instead of letting them escape the thread.

Public API:
    SearchWorker: Background driver for a single traversal.
    DEFAULT_STEP_DELAY: Default pause between steps, in seconds.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from ..graph.model import SearchGraph
from ..graph.types import SearchEdge, SearchNode
from .cancellation import CancellationToken
from .engine import SearchKind, SearchResult, run_search
from .observer import SearchObserver, SearchRecorder

logger = logging.getLogger(__name__)

DEFAULT_STEP_DELAY = 0.0


class SearchWorker:
    """Drive one traversal on a daemon thread.

    Args:
        graph: Graph to search.
        kind: Strategy to run.
        stop_at_target: Stop BFS/DFS when the target is popped.
        step_delay: Seconds to pause after each visited edge.  The pause
            ends early when the worker is cancelled.
        observer: Optional extra observer; every callback is forwarded to
            it after being recorded.
        on_finished: Called with the worker once the run ends, whether it
            completed, was cancelled or failed.  ``join`` returns only
            after it has run.
        **search_options: Passed through to the engine (``distance``,
            ``relaxation``).
    """

    def __init__(
        self,
        graph: SearchGraph,
        kind: SearchKind | str,
        *,
        stop_at_target: bool = True,
        step_delay: float = DEFAULT_STEP_DELAY,
        observer: SearchObserver | None = None,
        on_finished: Callable[[SearchWorker], None] | None = None,
        **search_options: Any,
    ) -> None:
        self._graph = graph
        self._kind = SearchKind(kind)
        self._stop_at_target = stop_at_target
        self._step_delay = step_delay
        self._observer = observer
        self._on_finished = on_finished
        self._search_options = search_options

        self._token = CancellationToken()
        self._recorder = SearchRecorder()
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self._started = False
        self._done = threading.Event()
        self._progress = 0

        self.result: SearchResult | None = None
        self.error: BaseException | None = None

    # ── properties ────────────────────────────────────────────

    @property
    def kind(self) -> SearchKind:
        return self._kind

    @property
    def recorder(self) -> SearchRecorder:
        return self._recorder

    @property
    def token(self) -> CancellationToken:
        return self._token

    @property
    def progress(self) -> int:
        """Visited nodes as a percentage of the graph size."""
        with self._lock:
            return self._progress

    @property
    def is_running(self) -> bool:
        return self._started and not self._done.is_set()

    @property
    def is_finished(self) -> bool:
        return self._done.is_set()

    # ── lifecycle ─────────────────────────────────────────────

    def start(self) -> None:
        """Run the traversal on a background thread.

        Raises:
            RuntimeError: If the worker was already started.
        """
        self._claim()
        self._thread = threading.Thread(
            target=self._execute,
            name=f"search-{self._kind.value}",
            daemon=True,
        )
        self._thread.start()

    def run(self) -> SearchResult | None:
        """Run the traversal on the calling thread and return its result.

        Raises:
            RuntimeError: If the worker was already started.
        """
        self._claim()
        self._execute()
        return self.result

    def cancel(self) -> None:
        """Ask the traversal to stop after the node it is processing."""
        self._token.cancel()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the run to end. Returns True if it has finished."""
        return self._done.wait(timeout)

    def _claim(self) -> None:
        with self._lock:
            if self._started:
                raise RuntimeError("SearchWorker can only be started once")
            self._started = True

    # ── traversal ─────────────────────────────────────────────

    def _execute(self) -> None:
        self._recorder.clear()
        try:
            self.result = run_search(
                self._graph,
                self._kind,
                observer=self,
                cancel=self._token,
                stop_at_target=self._stop_at_target,
                **self._search_options,
            )
        except Exception as e:
            self.error = e
            logger.error("%s search on %s failed: %s", self._kind.value, self._graph.graph_id, e)
        finally:
            with self._lock:
                self._progress = 0
            try:
                if self._on_finished is not None:
                    self._on_finished(self)
            finally:
                self._done.set()

    # ── observer slots ────────────────────────────────────────

    def on_visited_node(self, node: SearchNode) -> None:
        self._recorder.on_visited_node(node)
        total = len(self._graph)
        with self._lock:
            self._progress = int(len(self._recorder.visited_nodes) / total * 100) if total else 0
        if self._observer is not None:
            self._observer.on_visited_node(node)

    def on_visited_edge(self, edge: SearchEdge) -> None:
        self._recorder.on_visited_edge(edge)
        if self._observer is not None:
            self._observer.on_visited_edge(edge)
        if self._step_delay > 0:
            self._token.wait(self._step_delay)

    def on_processed_node(self, node: SearchNode) -> None:
        self._recorder.on_processed_node(node)
        if self._observer is not None:
            self._observer.on_processed_node(node)

    def __repr__(self) -> str:
        state = "finished" if self.is_finished else ("running" if self._started else "idle")
        return f"SearchWorker(kind={self._kind.value!r}, state={state})"


__all__ = ["SearchWorker", "DEFAULT_STEP_DELAY"]
