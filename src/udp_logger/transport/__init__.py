"""Transport – UDP sender, message queue, drain worker and writers."""
from udp_logger.transport.destination import Destination, DestinationLike, resolve_destination, split_host_port
from udp_logger.transport.queue import MessageQueue
from udp_logger.transport.sender import DatagramSender, Sender
from udp_logger.transport.worker import DEFAULT_DRAIN_INTERVAL, DrainReport, DrainWorker
from udp_logger.transport.writers import BufferedWriter, UnbufferedWriter, Writer, WriterProtocol

__all__ = [
    "DEFAULT_DRAIN_INTERVAL",
    "BufferedWriter",
    "DatagramSender",
    "Destination",
    "DestinationLike",
    "DrainReport",
    "DrainWorker",
    "MessageQueue",
    "Sender",
    "UnbufferedWriter",
    "Writer",
    "WriterProtocol",
    "resolve_destination",
    "split_host_port",
]
