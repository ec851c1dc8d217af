"""Logging – bridge into the stdlib :mod:`logging` tree.

:class:`UdpLogHandler` is an ordinary :class:`logging.Handler` that feeds a
:class:`UdpLogger`.  :func:`install` attaches it to a stdlib logger, which
acts as the single registration slot; attaching a second one fails.
"""
from __future__ import annotations

import logging

from udp_logger.kernel.errors import SinkAlreadyRegisteredError
from udp_logger.logging.level import Level
from udp_logger.logging.logger import UdpLogger


class UdpLogHandler(logging.Handler):
    """Hand stdlib log records to a :class:`UdpLogger`.

    Level filtering happens in the :class:`UdpLogger`; the handler itself
    stays at ``NOTSET`` unless told otherwise.
    """

    def __init__(self, udp_logger: UdpLogger, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._udp_logger = udp_logger
        # Level of the target logger before install(); restored by uninstall().
        self.previous_level: int | None = None

    @property
    def udp_logger(self) -> UdpLogger:
        return self._udp_logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = Level.from_stdlib(record.levelno)
            if not self._udp_logger.enabled(level):
                return
            self._udp_logger.log(level, self._render(record))
        except Exception:  # noqa: BLE001
            self.handleError(record)

    def _render(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            if not record.exc_text:
                record.exc_text = logging.Formatter().formatException(record.exc_info)
        if record.exc_text:
            message = f"{message}\n{record.exc_text}"
        if record.stack_info:
            message = f"{message}\n{record.stack_info}"
        return message

    def flush(self) -> None:
        self._udp_logger.flush()

    def close(self) -> None:
        try:
            self._udp_logger.close()
        finally:
            super().close()


def _resolve_target(target: logging.Logger | str | None) -> logging.Logger:
    if isinstance(target, logging.Logger):
        return target
    return logging.getLogger(target)


def find_handler(target: logging.Logger | str | None = None) -> UdpLogHandler | None:
    """Return the :class:`UdpLogHandler` attached to *target*, if any."""
    for handler in _resolve_target(target).handlers:
        if isinstance(handler, UdpLogHandler):
            return handler
    return None


def install(udp_logger: UdpLogger, *, target: logging.Logger | str | None = None) -> UdpLogHandler:
    """Attach *udp_logger* to *target* (root logger by default).

    If the target's effective level would filter out records the sink
    accepts, the target is lowered to the sink's threshold.  It is never
    raised, and :func:`uninstall` puts the previous level back.

    Raises :class:`SinkAlreadyRegisteredError` when a UDP sink is already
    attached to the target.
    """
    target_logger = _resolve_target(target)
    if find_handler(target_logger) is not None:
        raise SinkAlreadyRegisteredError(target_logger.name if target_logger is not logging.root else "")
    handler = UdpLogHandler(udp_logger)
    handler.previous_level = target_logger.level
    target_logger.addHandler(handler)
    threshold = udp_logger.level.to_stdlib()
    if threshold < target_logger.getEffectiveLevel():
        target_logger.setLevel(threshold)
    return handler


def uninstall(target: logging.Logger | str | None = None) -> bool:
    """Detach and close the UDP sink on *target*.  Returns ``False`` if none was attached."""
    target_logger = _resolve_target(target)
    handler = find_handler(target_logger)
    if handler is None:
        return False
    target_logger.removeHandler(handler)
    if handler.previous_level is not None:
        target_logger.setLevel(handler.previous_level)
    handler.close()
    return True


__all__ = ["UdpLogHandler", "find_handler", "install", "uninstall"]
