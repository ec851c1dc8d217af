"""Diagnostics – structlog logger for the package's own failures.

Send failures and other internal problems are written straight to stderr
through a :class:`structlog.PrintLogger`.  They never go through the stdlib
:mod:`logging` tree, so a failing UDP sink cannot feed its own errors back
into itself.
"""
from __future__ import annotations

import sys
from typing import IO, Any

import structlog


def get_diagnostic_logger(name: str | None = None, *, file: IO[str] | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger that renders ``key=value`` lines to stderr.

    Parameters
    ----------
    name:
        Bound as ``logger`` on every event (typically ``__name__``).
    file:
        Output stream.  Defaults to :data:`sys.stderr` at call time.
    **initial_values:
        Extra key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(
        structlog.PrintLogger(file=file if file is not None else sys.stderr),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(
                key_order=["timestamp", "level", "event", "logger"],
                drop_missing=True,
            ),
        ],
        wrapper_class=structlog.BoundLogger,
        context_class=dict,
    )
    if name is not None:
        initial_values["logger"] = name
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_diagnostic_logger"]
