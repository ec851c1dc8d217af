"""udp-logger – forward stdlib log records as UDP datagrams.

Two strategies are available:

* unbuffered – each record is sent on the thread that logged it;
* buffered   – records are queued and a background worker sends them
  every 50 ms.

Quick start::

    import logging
    from udp_logger import Level, UdpLoggerBuilder

    udp = UdpLoggerBuilder.try_buffered_init("127.0.0.1:1999", Level.INFO)
    logging.getLogger(__name__).info("This will get sent via UDP!")
    udp.close()  # flushes what is still queued
"""

from udp_logger.kernel.errors import (
    AddressResolutionError,
    BaseError,
    BindError,
    InitializationError,
    SinkAlreadyRegisteredError,
    TransmissionError,
)
from udp_logger.logging import Level, UdpLogger, UdpLoggerBuilder, UdpLogHandler, format_line, install, uninstall
from udp_logger.transport import BufferedWriter, DatagramSender, MessageQueue, UnbufferedWriter, Writer

__version__ = "0.1.0"

__all__ = [
    "AddressResolutionError",
    "BaseError",
    "BindError",
    "BufferedWriter",
    "DatagramSender",
    "InitializationError",
    "Level",
    "MessageQueue",
    "SinkAlreadyRegisteredError",
    "TransmissionError",
    "UdpLogHandler",
    "UdpLogger",
    "UdpLoggerBuilder",
    "UnbufferedWriter",
    "Writer",
    "__version__",
    "format_line",
    "install",
    "uninstall",
]
