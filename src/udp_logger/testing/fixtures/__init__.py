"""Testing fixtures – pytest fixtures for fake doubles.

Enable in ``conftest.py``::

    pytest_plugins = ["udp_logger.testing.fixtures"]
"""
from udp_logger.testing.fixtures.clock import fake_clock
from udp_logger.testing.fixtures.transport import diagnostics, isolated_logger, recording_sender, udp_listener

__all__ = ["diagnostics", "fake_clock", "isolated_logger", "recording_sender", "udp_listener"]
