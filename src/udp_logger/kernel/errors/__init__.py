"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── InitializationError        (initialization.py)
    │   ├── AddressResolutionError
    │   ├── BindError
    │   ├── SinkAlreadyRegisteredError
    │   ├── InvalidLevelError
    │   └── InvalidIntervalError
    ├── TransmissionError          (transmission.py)
    └── ConfigError                (udp_logger.config.validation)
"""

from udp_logger.kernel.errors.base import BaseError
from udp_logger.kernel.errors.initialization import (
    AddressResolutionError,
    BindError,
    InitializationError,
    InvalidIntervalError,
    InvalidLevelError,
    SinkAlreadyRegisteredError,
)
from udp_logger.kernel.errors.transmission import TransmissionError

__all__ = [
    "AddressResolutionError",
    "BaseError",
    "BindError",
    "InitializationError",
    "InvalidIntervalError",
    "InvalidLevelError",
    "SinkAlreadyRegisteredError",
    "TransmissionError",
]
