"""Shared pytest configuration."""

pytest_plugins = ["udp_logger.testing.fixtures"]
