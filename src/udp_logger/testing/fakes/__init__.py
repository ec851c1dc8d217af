"""Testing fakes – deterministic doubles for clock and transport."""
from udp_logger.testing.fakes.clock import FakeClock
from udp_logger.testing.fakes.sender import RecordingSender, UdpListener

__all__ = ["FakeClock", "RecordingSender", "UdpListener"]
