"""Testing fixtures – transport doubles and a live UDP listener."""
from __future__ import annotations

import logging
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from udp_logger.logging.handler import uninstall
from udp_logger.testing.fakes import RecordingSender, UdpListener


@pytest.fixture
def recording_sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture
def diagnostics() -> MagicMock:
    """Stand-in for the structlog diagnostics logger."""
    return MagicMock(name="diagnostics")


@pytest.fixture
def udp_listener() -> Iterator[UdpListener]:
    """A UDP socket bound to an ephemeral port on 127.0.0.1."""
    with UdpListener() as listener:
        yield listener


@pytest.fixture
def isolated_logger(request: pytest.FixtureRequest) -> Iterator[logging.Logger]:
    """A stdlib logger unique to the test; any UDP sink on it is removed afterwards."""
    target = logging.getLogger(f"udp_logger.tests.{request.node.name}")
    target.propagate = False
    yield target
    uninstall(target)


__all__ = ["diagnostics", "isolated_logger", "recording_sender", "udp_listener"]
