"""Transport – DrainWorker.

A background thread that wakes every ``interval`` seconds, drains the whole
:class:`MessageQueue` in one step and sends each message through its
:class:`Sender`.  A failed send is written to the diagnostics stream and the
batch moves on to the next message; nothing is re-queued.

The worker is an owned handle: ``stop()`` signals the loop, joins the
thread, flushes whatever is still queued and closes the sender.
"""
from __future__ import annotations

import dataclasses
import threading
import time
from typing import Any

from udp_logger.diagnostics import get_diagnostic_logger
from udp_logger.kernel.errors import InvalidIntervalError
from udp_logger.transport.queue import MessageQueue
from udp_logger.transport.sender import Sender

DEFAULT_DRAIN_INTERVAL = 0.05


@dataclasses.dataclass(frozen=True)
class DrainReport:
    """Outcome of one drain cycle."""

    sent: int = 0
    failed: int = 0

    @property
    def attempted(self) -> int:
        return self.sent + self.failed


class DrainWorker:
    """Single consumer of a :class:`MessageQueue`.

    Parameters
    ----------
    queue:
        The queue producers enqueue into.
    sender:
        Exclusively owned by the worker from construction on; closed by
        :meth:`stop`.
    interval:
        Seconds to sleep between drain cycles.
    diagnostics:
        structlog-style logger for send failures.  Defaults to
        :func:`get_diagnostic_logger`.
    """

    def __init__(
        self,
        queue: MessageQueue,
        sender: Sender,
        *,
        interval: float = DEFAULT_DRAIN_INTERVAL,
        diagnostics: Any = None,
        name: str = "udp-logger-drain",
    ) -> None:
        if interval <= 0:
            raise InvalidIntervalError(interval)
        self._queue = queue
        self._sender = sender
        self._interval = interval
        self._diagnostics = diagnostics or get_diagnostic_logger(__name__)
        self._name = name
        self._stop_event = threading.Event()
        self._lifecycle_lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self._stopped = False
        # Guards the cycle counter and the in-flight flag used by flush waits.
        self._cycle = threading.Condition()
        self._cycles = 0
        self._busy = False

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def sender(self) -> Sender:
        return self._sender

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def stopped(self) -> bool:
        return self._stopped

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start the drain thread.  Calling it again is a no-op."""
        with self._lifecycle_lock:
            if self._thread is not None or self._stopped:
                return
            self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
            self._thread.start()

    def submit(self, message: str) -> bool:
        """Enqueue *message* unless the worker has been stopped.

        Checked under the lifecycle lock, so anything accepted here is
        already queued when :meth:`stop` runs its final drain.
        """
        with self._lifecycle_lock:
            if self._stopped:
                return False
            self._queue.enqueue(message)
        return True

    def stop(self, timeout: float | None = None) -> bool:
        """Stop the loop, flush remaining messages and close the sender.

        Returns ``False`` when the thread did not finish within *timeout*;
        in that case the final flush is skipped so the queue keeps a single
        consumer, and the sender is left open for the still-running cycle.
        """
        with self._lifecycle_lock:
            if self._stopped:
                return True
            self._stopped = True
            thread = self._thread
        self._stop_event.set()
        if thread is not None:
            thread.join(timeout)
            if thread.is_alive():
                self._diagnostics.warning(
                    "udp_logger.stop_timeout",
                    destination=str(self._sender.destination),
                    pending=len(self._queue),
                )
                return False
        self.drain_once()
        self._sender.close()
        return True

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval):
            self.drain_once()

    # ------------------------------------------------------------------
    # Drain cycle
    # ------------------------------------------------------------------

    def drain_once(self) -> DrainReport:
        """Run one drain cycle on the calling thread."""
        with self._cycle:
            self._busy = True
        sent = failed = 0
        try:
            for message in self._queue.drain_all():
                if self._send(message):
                    sent += 1
                else:
                    failed += 1
        finally:
            with self._cycle:
                self._busy = False
                self._cycles += 1
                self._cycle.notify_all()
        return DrainReport(sent=sent, failed=failed)

    def _send(self, message: str) -> bool:
        payload = message.encode("utf-8")
        try:
            result = self._sender.send(payload)
        except Exception as exc:  # noqa: BLE001
            self._diagnostics.error(
                "udp_logger.send_failed",
                destination=str(self._sender.destination),
                error=repr(exc),
                payload_size=len(payload),
            )
            return False
        if result.is_err():
            self._diagnostics.error(
                "udp_logger.send_failed",
                destination=str(self._sender.destination),
                error=result.error.message,
                payload_size=len(payload),
            )
            return False
        return True

    def wait_until_drained(self, timeout: float | None = None) -> bool:
        """Block until a cycle that started after this call has emptied the queue.

        Returns ``True`` when the queue was observed empty with no cycle in
        flight, ``False`` on timeout.  When the thread is not running the
        result simply reports whether the queue is empty.
        """
        if not self.is_running:
            return not self._queue
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._cycle:
            target = self._cycles
            while True:
                if self._cycles > target and not self._busy and not self._queue:
                    return True
                if not self.is_running:
                    return not self._queue
                remaining = None if deadline is None else deadline - time.monotonic()
                if remaining is not None and remaining <= 0:
                    return False
                # Wake at least once per interval in case the thread exits.
                wait_for = self._interval * 2 if remaining is None else min(remaining, self._interval * 2)
                self._cycle.wait(wait_for)


__all__ = ["DEFAULT_DRAIN_INTERVAL", "DrainReport", "DrainWorker"]
