"""Transport – DatagramSender.

Owns one UDP socket bound once to an ephemeral local endpoint and a fixed
remote destination.  ``send`` is best-effort: failures come back as
``Err(TransmissionError)`` and are never raised.
"""
from __future__ import annotations

import logging
import socket
from typing import Protocol

from udp_logger.kernel.errors import BindError, TransmissionError
from udp_logger.kernel.types import OK_NONE, Err, Result
from udp_logger.transport.destination import Destination

logger = logging.getLogger(__name__)


class Sender(Protocol):
    """Port: one-datagram-per-call transmitter."""

    @property
    def destination(self) -> Destination: ...

    def send(self, payload: bytes) -> Result[None, TransmissionError]: ...

    def close(self) -> None: ...


class DatagramSender:
    """UDP sender bound once for its whole lifetime.

    Parameters
    ----------
    destination:
        Already resolved remote address.
    bind_address:
        Local endpoint to bind.  Defaults to the ephemeral wildcard address
        of the destination's family.
    """

    def __init__(self, destination: Destination, *, bind_address: tuple[str, int] | None = None) -> None:
        self._destination = destination
        local = bind_address or destination.bind_address
        sock = socket.socket(destination.family, socket.SOCK_DGRAM)
        try:
            sock.bind(local)
        except OSError as exc:
            sock.close()
            raise BindError(local, cause=exc) from exc
        self._sock = sock
        self._closed = False
        logger.debug("udp sender bound to %s, sending to %s", self.local_address, destination)

    @property
    def destination(self) -> Destination:
        return self._destination

    @property
    def local_address(self) -> tuple[str, int]:
        host, port = self._sock.getsockname()[:2]
        return (host, port)

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, payload: bytes) -> Result[None, TransmissionError]:
        """Transmit *payload* as a single datagram."""
        try:
            self._sock.sendto(payload, self._destination.sockaddr)
        except OSError as exc:
            return Err(
                TransmissionError(
                    str(self._destination),
                    f"Failed to send datagram to {self._destination}: {exc}",
                    payload_size=len(payload),
                    cause=exc,
                )
            )
        return OK_NONE

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._sock.close()

    def __enter__(self) -> DatagramSender:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["DatagramSender", "Sender"]
