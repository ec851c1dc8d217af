"""Transport – writer strategies.

``Writer`` is a tagged union of the two strategies a :class:`UdpLogger`
can be built with:

* :class:`UnbufferedWriter` sends on the calling thread and returns only
  once ``sendto`` has returned.
* :class:`BufferedWriter` enqueues and returns immediately; its
  :class:`DrainWorker` sends in the background.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from udp_logger.kernel.errors import TransmissionError
from udp_logger.kernel.types import OK_NONE, Err, Result
from udp_logger.transport.destination import DestinationLike, resolve_destination
from udp_logger.transport.queue import MessageQueue
from udp_logger.transport.sender import DatagramSender, Sender
from udp_logger.transport.worker import DEFAULT_DRAIN_INTERVAL, DrainWorker


@runtime_checkable
class WriterProtocol(Protocol):
    """Contract shared by both strategies."""

    def push(self, message: str) -> Result[None, TransmissionError]: ...

    def close(self) -> None: ...


class UnbufferedWriter:
    """Sends each message synchronously through an owned sender."""

    def __init__(self, sender: Sender) -> None:
        self._sender = sender

    @classmethod
    def connect(cls, destination: DestinationLike) -> UnbufferedWriter:
        """Resolve *destination* and bind a fresh sender for it."""
        return cls(DatagramSender(resolve_destination(destination)))

    @property
    def sender(self) -> Sender:
        return self._sender

    def push(self, message: str) -> Result[None, TransmissionError]:
        return self._sender.send(message.encode("utf-8"))

    def flush(self, timeout: float | None = None) -> bool:  # noqa: ARG002
        return True

    def close(self) -> None:
        self._sender.close()

    def __enter__(self) -> UnbufferedWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class BufferedWriter:
    """Enqueues messages for a background :class:`DrainWorker`.

    The writer only holds the queue and the worker handle; the sender
    lives inside the worker.
    """

    def __init__(self, queue: MessageQueue, worker: DrainWorker) -> None:
        self._queue = queue
        self._worker = worker

    @classmethod
    def connect(
        cls,
        destination: DestinationLike,
        *,
        interval: float = DEFAULT_DRAIN_INTERVAL,
        diagnostics: Any = None,
    ) -> BufferedWriter:
        """Resolve *destination*, bind the sender once and start the worker."""
        sender = DatagramSender(resolve_destination(destination))
        try:
            return cls.start(sender, interval=interval, diagnostics=diagnostics)
        except BaseException:
            sender.close()
            raise

    @classmethod
    def start(
        cls,
        sender: Sender,
        *,
        interval: float = DEFAULT_DRAIN_INTERVAL,
        diagnostics: Any = None,
    ) -> BufferedWriter:
        """Hand *sender* to a new worker, start it and return the writer."""
        queue = MessageQueue()
        worker = DrainWorker(queue, sender, interval=interval, diagnostics=diagnostics)
        worker.start()
        return cls(queue, worker)

    @property
    def queue(self) -> MessageQueue:
        return self._queue

    @property
    def worker(self) -> DrainWorker:
        return self._worker

    def push(self, message: str) -> Result[None, TransmissionError]:
        if not self._worker.submit(message):
            return Err(
                TransmissionError(
                    str(self._worker.sender.destination),
                    "Buffered writer is closed",
                )
            )
        return OK_NONE

    def flush(self, timeout: float | None = None) -> bool:
        """Wait until the worker has sent everything queued so far."""
        return self._worker.wait_until_drained(timeout)

    def close(self, timeout: float | None = None) -> bool:
        """Stop the worker; remaining messages are flushed first."""
        return self._worker.stop(timeout)

    def __enter__(self) -> BufferedWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


type Writer = UnbufferedWriter | BufferedWriter

__all__ = ["BufferedWriter", "UnbufferedWriter", "Writer", "WriterProtocol"]
