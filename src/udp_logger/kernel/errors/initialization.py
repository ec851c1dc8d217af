"""Initialization errors — fatal to setup, raised to the caller synchronously."""

from __future__ import annotations

from typing import Any

from udp_logger.kernel.errors.base import BaseError


class InitializationError(BaseError):
    """The logger could not be set up."""

    default_code = "initialization_error"


class AddressResolutionError(InitializationError):
    """The destination could not be parsed or resolved to a socket address."""

    default_code = "address_resolution_error"

    def __init__(
        self,
        destination: object,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"Could not resolve destination {destination!r}",
            detail={"destination": str(destination)},
            **kwargs,
        )
        self.destination = destination


class BindError(InitializationError):
    """The local sending endpoint could not be bound."""

    default_code = "bind_error"

    def __init__(
        self,
        local_address: tuple[str, int],
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        host, port = local_address
        super().__init__(
            message or f"Could not bind UDP socket to {host}:{port}",
            detail={"local_address": f"{host}:{port}"},
            **kwargs,
        )
        self.local_address = local_address


class SinkAlreadyRegisteredError(InitializationError):
    """A UDP sink is already attached to the target logger."""

    default_code = "sink_already_registered"

    def __init__(self, logger_name: str) -> None:
        display = logger_name or "root"
        super().__init__(
            f"A UDP log sink is already registered on logger '{display}'",
            detail={"logger": display},
        )
        self.logger_name = logger_name


class InvalidLevelError(InitializationError, ValueError):
    """A severity threshold name or number was not recognised."""

    default_code = "invalid_level"

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Unknown log level {value!r}",
            detail={"level": str(value)},
        )
        self.value = value


class InvalidIntervalError(InitializationError, ValueError):
    """The drain interval was not a positive number of seconds."""

    default_code = "invalid_interval"

    def __init__(self, interval: object) -> None:
        super().__init__(
            f"Drain interval must be positive, got {interval!r}",
            detail={"interval": str(interval)},
        )
        self.interval = interval


__all__ = [
    "AddressResolutionError",
    "BindError",
    "InitializationError",
    "InvalidIntervalError",
    "InvalidLevelError",
    "SinkAlreadyRegisteredError",
]
