"""Logging – UdpLoggerBuilder.

One-call setup: build a :class:`UdpLogger`, attach it to the stdlib logging
tree and hand the owned logger back to the caller.  Every setup failure
(bad address, unknown level, bind failure, sink already registered) raises
here.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from udp_logger.logging.handler import install
from udp_logger.logging.level import Level
from udp_logger.logging.logger import UdpLogger
from udp_logger.transport import DEFAULT_DRAIN_INTERVAL, DestinationLike

if TYPE_CHECKING:
    from udp_logger.config.settings import UdpLoggerSettings


class UdpLoggerBuilder:
    """Initialise a UDP sink for the stdlib :mod:`logging` macros.

    Example::

        import logging
        from udp_logger import Level, UdpLoggerBuilder

        udp = UdpLoggerBuilder.try_buffered_init("127.0.0.1:1999", Level.INFO)
        logging.getLogger(__name__).info("This will get sent via UDP!")
        udp.close()
    """

    @staticmethod
    def try_init(
        destination: DestinationLike,
        level: Level | str = Level.INFO,
        *,
        target: logging.Logger | str | None = None,
        **kwargs: Any,
    ) -> UdpLogger:
        """Install an unbuffered logger; each record is sent on the logging thread."""
        return UdpLoggerBuilder.init(UdpLogger.unbuffered(destination, level, **kwargs), target=target)

    @staticmethod
    def try_buffered_init(
        destination: DestinationLike,
        level: Level | str = Level.INFO,
        *,
        interval: float = DEFAULT_DRAIN_INTERVAL,
        target: logging.Logger | str | None = None,
        **kwargs: Any,
    ) -> UdpLogger:
        """Install a buffered logger; records are sent by a background worker."""
        udp = UdpLogger.buffered(destination, level, interval=interval, **kwargs)
        return UdpLoggerBuilder.init(udp, target=target)

    @staticmethod
    def from_settings(
        settings: UdpLoggerSettings,
        *,
        target: logging.Logger | str | None = None,
        **kwargs: Any,
    ) -> UdpLogger:
        if settings.buffered:
            return UdpLoggerBuilder.try_buffered_init(
                settings.destination,
                settings.level,
                interval=settings.interval,
                target=target,
                **kwargs,
            )
        return UdpLoggerBuilder.try_init(settings.destination, settings.level, target=target, **kwargs)

    @staticmethod
    def init(udp: UdpLogger, *, target: logging.Logger | str | None = None) -> UdpLogger:
        """Attach an already built logger; closes it if registration fails."""
        try:
            install(udp, target=target)
        except Exception:
            udp.close()
            raise
        return udp


__all__ = ["UdpLoggerBuilder"]
