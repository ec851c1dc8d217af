"""Transport – MessageQueue.

Unbounded FIFO of formatted lines shared by any number of producer threads
and a single drain worker.  One lock guards every access.
"""
from __future__ import annotations

import threading
from collections import deque


class MessageQueue:
    """Thread-safe FIFO that is emptied in one atomic ``drain_all`` call.

    ``enqueue`` never blocks beyond the critical section and never fails.
    Nothing here waits for messages to appear; the drain worker polls.
    """

    def __init__(self) -> None:
        self._items: deque[str] = deque()
        self._lock = threading.Lock()

    def enqueue(self, message: str) -> None:
        with self._lock:
            self._items.append(message)

    def drain_all(self) -> list[str]:
        """Remove and return every queued message, oldest first."""
        with self._lock:
            if not self._items:
                return []
            drained = list(self._items)
            self._items.clear()
        return drained

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __bool__(self) -> bool:
        return len(self) > 0


__all__ = ["MessageQueue"]
