"""Logging – severity levels.

Lower rank means more severe: ``ERROR < WARN < INFO < DEBUG < TRACE``.
An event passes a threshold when ``event_level <= threshold``.
"""
from __future__ import annotations

import enum
import logging

from udp_logger.kernel.errors import InvalidLevelError

TRACE_LEVELNO = 5

_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "ERROR",
    "FATAL": "ERROR",
}


class Level(enum.IntEnum):
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    def __str__(self) -> str:
        return self.name

    def allows(self, event_level: Level) -> bool:
        """``True`` when *event_level* is at least as severe as this threshold."""
        return event_level <= self

    @classmethod
    def parse(cls, value: str | int | Level) -> Level:
        """Accept a :class:`Level`, a stdlib level number or a level name."""
        if isinstance(value, Level):
            return value
        if isinstance(value, int):
            return cls.from_stdlib(value)
        name = value.strip().upper()
        name = _ALIASES.get(name, name)
        try:
            return cls[name]
        except KeyError:
            raise InvalidLevelError(value) from None

    @classmethod
    def from_stdlib(cls, levelno: int) -> Level:
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE

    def to_stdlib(self) -> int:
        return _TO_STDLIB[self]


_TO_STDLIB = {
    Level.ERROR: logging.ERROR,
    Level.WARN: logging.WARNING,
    Level.INFO: logging.INFO,
    Level.DEBUG: logging.DEBUG,
    Level.TRACE: TRACE_LEVELNO,
}

__all__ = ["TRACE_LEVELNO", "Level"]
