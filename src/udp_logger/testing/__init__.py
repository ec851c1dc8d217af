"""Testing support – fakes, chaos senders and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["udp_logger.testing.fixtures"]
"""

from udp_logger.testing.chaos import FailingSender, SlowSender
from udp_logger.testing.fakes import FakeClock, RecordingSender, UdpListener

__all__ = ["FailingSender", "FakeClock", "RecordingSender", "SlowSender", "UdpListener"]
