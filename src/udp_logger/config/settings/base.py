"""Config settings – Settings base class and UdpLoggerSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from udp_logger.config.validation import InvalidSettingValueError
from udp_logger.kernel.errors import AddressResolutionError, InvalidLevelError
from udp_logger.logging.level import Level
from udp_logger.transport.destination import split_host_port
from udp_logger.transport.worker import DEFAULT_DRAIN_INTERVAL


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class UdpLoggerSettings(Settings):
    """Everything needed to build a UDP sink.

    ``destination`` is only checked for shape here (``host:port``); name
    resolution happens when the writer is built.
    """

    _prefix: ClassVar[str] = "UDP_LOGGER"

    destination: str
    level: str = "INFO"
    buffered: bool = True
    interval: float = DEFAULT_DRAIN_INTERVAL

    def _validate(self) -> None:
        try:
            split_host_port(self.destination)
        except AddressResolutionError as exc:
            raise InvalidSettingValueError("destination", self.destination, exc.message) from exc
        try:
            Level.parse(self.level)
        except InvalidLevelError as exc:
            raise InvalidSettingValueError("level", self.level, exc.message) from exc
        if self.interval <= 0:
            raise InvalidSettingValueError("interval", self.interval, "must be positive")

    @property
    def threshold(self) -> Level:
        return Level.parse(self.level)


__all__ = ["Settings", "UdpLoggerSettings"]
