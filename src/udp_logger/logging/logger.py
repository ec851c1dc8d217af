"""Logging – UdpLogger, the façade adapter in front of a writer.

The logger owns exactly one writer and a severity threshold, both fixed at
construction.  ``log`` filters, formats and pushes; it never raises to the
caller.
"""
from __future__ import annotations

from typing import Any

from udp_logger.diagnostics import get_diagnostic_logger
from udp_logger.kernel.time import Clock, SystemClock
from udp_logger.logging.formatter import format_line
from udp_logger.logging.level import Level
from udp_logger.transport import (
    DEFAULT_DRAIN_INTERVAL,
    BufferedWriter,
    DestinationLike,
    UnbufferedWriter,
    Writer,
)


class UdpLogger:
    """Forwards level-filtered, formatted lines to a :data:`Writer`.

    Typical usage::

        with UdpLogger.buffered("127.0.0.1:1999", Level.INFO) as log:
            log.log(Level.INFO, "service started")

    Parameters
    ----------
    writer:
        Either strategy; the logger takes ownership and closes it.
    level:
        Threshold.  Events less severe than this are dropped before
        formatting.
    clock:
        Source of the capture timestamp.
    diagnostics:
        structlog-style logger for unbuffered send failures.
    """

    def __init__(
        self,
        writer: Writer,
        level: Level = Level.INFO,
        *,
        clock: Clock | None = None,
        diagnostics: Any = None,
    ) -> None:
        self._writer = writer
        self._level = Level.parse(level)
        self._clock = clock or SystemClock()
        self._diagnostics = diagnostics or get_diagnostic_logger(__name__)

    @classmethod
    def unbuffered(cls, destination: DestinationLike, level: Level | str = Level.INFO, **kwargs: Any) -> UdpLogger:
        threshold = Level.parse(level)
        return cls._owning(UnbufferedWriter.connect(destination), threshold, **kwargs)

    @classmethod
    def buffered(
        cls,
        destination: DestinationLike,
        level: Level | str = Level.INFO,
        *,
        interval: float = DEFAULT_DRAIN_INTERVAL,
        **kwargs: Any,
    ) -> UdpLogger:
        # Parse before connect(); the worker thread starts there.
        threshold = Level.parse(level)
        writer = BufferedWriter.connect(destination, interval=interval, diagnostics=kwargs.get("diagnostics"))
        return cls._owning(writer, threshold, **kwargs)

    @classmethod
    def _owning(cls, writer: Writer, threshold: Level, **kwargs: Any) -> UdpLogger:
        try:
            return cls(writer, threshold, **kwargs)
        except BaseException:
            writer.close()
            raise

    @property
    def level(self) -> Level:
        return self._level

    @property
    def writer(self) -> Writer:
        return self._writer

    def enabled(self, level: Level) -> bool:
        return self._level.allows(level)

    def log(self, level: Level, message: str) -> None:
        if not self.enabled(level):
            return
        result = self._writer.push(format_line(level, message, self._clock))
        if result.is_err():
            self._diagnostics.error("udp_logger.push_failed", level=level.name, error=result.error.message)

    def error(self, message: str) -> None:
        self.log(Level.ERROR, message)

    def warn(self, message: str) -> None:
        self.log(Level.WARN, message)

    warning = warn

    def info(self, message: str) -> None:
        self.log(Level.INFO, message)

    def debug(self, message: str) -> None:
        self.log(Level.DEBUG, message)

    def trace(self, message: str) -> None:
        self.log(Level.TRACE, message)

    def flush(self, timeout: float | None = None) -> bool:
        """Wait for buffered messages to go out; immediate for unbuffered writers."""
        return self._writer.flush(timeout)

    def close(self) -> None:
        self._writer.close()

    def __enter__(self) -> UdpLogger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["UdpLogger"]
