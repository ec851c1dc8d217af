"""Transport – Destination value object and address resolution.

A destination is resolved exactly once, when a writer is built, and is
never re-resolved afterwards.
"""
from __future__ import annotations

import dataclasses
import socket
from typing import Any

from udp_logger.kernel.errors import AddressResolutionError


@dataclasses.dataclass(frozen=True)
class Destination:
    """Resolved remote address of the log receiver."""

    host: str
    port: int
    family: socket.AddressFamily = socket.AF_INET

    @property
    def sockaddr(self) -> tuple[str, int]:
        return (self.host, self.port)

    @property
    def bind_address(self) -> tuple[str, int]:
        """Ephemeral local endpoint matching the destination's family."""
        if self.family == socket.AF_INET6:
            return ("::", 0)
        return ("0.0.0.0", 0)  # noqa: S104

    def __str__(self) -> str:
        if self.family == socket.AF_INET6:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


type DestinationLike = str | tuple[str, int] | Destination


def _checked_port(destination: object, port: object) -> int:
    if isinstance(port, bool) or not isinstance(port, int):
        raise AddressResolutionError(destination, f"Invalid port in {destination!r}")
    if not 0 < port < 65536:
        raise AddressResolutionError(destination, f"Port out of range in {destination!r}")
    return port


def split_host_port(value: str) -> tuple[str, int]:
    """Split ``"host:port"`` or ``"[v6]:port"`` into its parts.

    Raises :class:`AddressResolutionError` when no valid port is present.
    """
    text = value.strip()
    if text.startswith("["):
        host, sep, rest = text[1:].partition("]")
        if not sep or not rest.startswith(":"):
            raise AddressResolutionError(value, f"Malformed IPv6 destination {value!r}")
        port_text = rest[1:]
    else:
        host, sep, port_text = text.rpartition(":")
        if not sep:
            raise AddressResolutionError(value, f"Destination {value!r} has no port")
    if not host:
        raise AddressResolutionError(value, f"Destination {value!r} has no host")
    try:
        port = int(port_text)
    except ValueError as exc:
        raise AddressResolutionError(value, f"Invalid port in {value!r}", cause=exc) from exc
    return host, _checked_port(value, port)


def resolve_destination(destination: DestinationLike) -> Destination:
    """Resolve *destination* to the first address ``getaddrinfo`` returns."""
    if isinstance(destination, Destination):
        return destination
    if isinstance(destination, tuple):
        if len(destination) != 2 or not isinstance(destination[0], str) or not destination[0]:
            raise AddressResolutionError(destination, f"Expected a (host, port) pair, got {destination!r}")
        host, port = destination[0], _checked_port(destination, destination[1])
    elif isinstance(destination, str):
        host, port = split_host_port(destination)
    else:
        raise AddressResolutionError(destination, f"Unsupported destination type {type(destination).__name__}")

    try:
        infos: list[tuple[Any, ...]] = socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)
    except (OSError, UnicodeError) as exc:
        raise AddressResolutionError(destination, cause=exc) from exc
    if not infos:
        raise AddressResolutionError(destination)

    family, _, _, _, sockaddr = infos[0]
    return Destination(host=sockaddr[0], port=sockaddr[1], family=family)


__all__ = ["Destination", "DestinationLike", "resolve_destination", "split_host_port"]
