"""Logging – line formatting for the UDP wire format."""
from __future__ import annotations

from udp_logger.kernel.time import Clock, SystemClock
from udp_logger.logging.level import Level

_SYSTEM_CLOCK = SystemClock()


def format_line(level: Level, message: str, clock: Clock | None = None) -> str:
    """Render ``"<LEVEL> [<RFC3339 timestamp>] <message>\\n"``.

    The timestamp is the clock's current UTC time in ISO 8601 / RFC 3339
    form, e.g. ``2026-01-01T12:00:00.000000+00:00``.
    """
    now = (clock or _SYSTEM_CLOCK).now()
    return f"{level.name} [{now.isoformat(timespec='microseconds')}] {message}\n"


__all__ = ["format_line"]
