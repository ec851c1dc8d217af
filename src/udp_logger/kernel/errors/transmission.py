"""Transmission errors — per-datagram, reported and dropped."""

from __future__ import annotations

from typing import Any

from udp_logger.kernel.errors.base import BaseError


class TransmissionError(BaseError):
    """A single datagram could not be sent.

    Never raised out of a logging call; it travels as ``Err(...)`` and ends
    up in the diagnostics stream.
    """

    default_code = "transmission_error"

    def __init__(
        self,
        destination: str,
        message: str | None = None,
        *,
        payload_size: int | None = None,
        **kwargs: Any,
    ) -> None:
        detail: dict[str, Any] = {"destination": destination}
        if payload_size is not None:
            detail["payload_size"] = payload_size
        super().__init__(
            message or f"Failed to send datagram to {destination}",
            detail=detail,
            **kwargs,
        )
        self.destination = destination
        self.payload_size = payload_size


__all__ = ["TransmissionError"]
