"""Unit tests for Level."""

from __future__ import annotations

import logging

import pytest

from udp_logger.kernel.errors import InitializationError
from udp_logger.logging import TRACE_LEVELNO, Level


class TestLevelOrdering:
    def test_more_severe_is_lower(self) -> None:
        assert Level.ERROR < Level.WARN < Level.INFO < Level.DEBUG < Level.TRACE

    @pytest.mark.parametrize(
        ("threshold", "event", "expected"),
        [
            (Level.INFO, Level.ERROR, True),
            (Level.INFO, Level.WARN, True),
            (Level.INFO, Level.INFO, True),
            (Level.INFO, Level.DEBUG, False),
            (Level.INFO, Level.TRACE, False),
            (Level.ERROR, Level.INFO, False),
            (Level.ERROR, Level.ERROR, True),
            (Level.TRACE, Level.TRACE, True),
        ],
    )
    def test_allows(self, threshold: Level, event: Level, expected: bool) -> None:
        assert threshold.allows(event) is expected

    def test_str_is_name(self) -> None:
        assert str(Level.WARN) == "WARN"


class TestLevelParse:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("info", Level.INFO),
            ("INFO", Level.INFO),
            (" debug ", Level.DEBUG),
            ("warn", Level.WARN),
            ("warning", Level.WARN),
            ("critical", Level.ERROR),
            ("fatal", Level.ERROR),
            ("trace", Level.TRACE),
            (Level.ERROR, Level.ERROR),
            (logging.WARNING, Level.WARN),
        ],
    )
    def test_accepted_values(self, raw: str | int | Level, expected: Level) -> None:
        assert Level.parse(raw) is expected

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="verbose"):
            Level.parse("verbose")

    def test_unknown_name_is_an_initialization_error(self) -> None:
        with pytest.raises(InitializationError) as exc_info:
            Level.parse("verbose")
        assert exc_info.value.code == "invalid_level"


class TestStdlibMapping:
    @pytest.mark.parametrize(
        ("levelno", "expected"),
        [
            (logging.CRITICAL, Level.ERROR),
            (logging.ERROR, Level.ERROR),
            (logging.WARNING, Level.WARN),
            (logging.INFO, Level.INFO),
            (logging.DEBUG, Level.DEBUG),
            (TRACE_LEVELNO, Level.TRACE),
            (logging.NOTSET, Level.TRACE),
            (25, Level.INFO),
        ],
    )
    def test_from_stdlib(self, levelno: int, expected: Level) -> None:
        assert Level.from_stdlib(levelno) is expected

    @pytest.mark.parametrize("level", list(Level))
    def test_to_stdlib_maps_back(self, level: Level) -> None:
        assert Level.from_stdlib(level.to_stdlib()) is level
