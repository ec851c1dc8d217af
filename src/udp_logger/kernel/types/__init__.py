"""Kernel types."""
from udp_logger.kernel.types.result import OK_NONE, Err, Ok, Result

__all__ = ["OK_NONE", "Err", "Ok", "Result"]
