"""Testing chaos – senders that fail or stall on purpose."""
from udp_logger.testing.chaos.failure import FailingSender
from udp_logger.testing.chaos.latency import SlowSender

__all__ = ["FailingSender", "SlowSender"]
