"""Logging – levels, formatting, the UdpLogger façade and the stdlib bridge."""
from udp_logger.logging.builder import UdpLoggerBuilder
from udp_logger.logging.formatter import format_line
from udp_logger.logging.handler import UdpLogHandler, find_handler, install, uninstall
from udp_logger.logging.level import TRACE_LEVELNO, Level
from udp_logger.logging.logger import UdpLogger

__all__ = [
    "TRACE_LEVELNO",
    "Level",
    "UdpLogHandler",
    "UdpLogger",
    "UdpLoggerBuilder",
    "find_handler",
    "format_line",
    "install",
    "uninstall",
]
