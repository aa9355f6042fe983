"""Cooperative cancellation for traversals.

Public API:
    CancelSignal: Protocol for anything the engine can poll.
    CancellationToken: Thread-safe, settable cancellation flag.
"""

from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable


@runtime_checkable
class CancelSignal(Protocol):
    """Anything with an ``is_set()`` method, e.g. ``threading.Event``."""

    def is_set(self) -> bool:
        ...


class CancellationToken:
    """A shared flag a driver sets and a traversal polls between nodes.

    Cancellation is never preemptive: a callback that is already running
    always completes.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Sleep up to *timeout* seconds, waking early on cancellation.

        Returns:
            True if the token was cancelled.
        """
        return self._event.wait(timeout)

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"


__all__ = ["CancelSignal", "CancellationToken"]
