"""Unit tests for the Result type."""

from __future__ import annotations

import pytest

from udp_logger.kernel.errors import TransmissionError
from udp_logger.kernel.types import OK_NONE, Err, Ok


class TestOk:
    def test_flags(self) -> None:
        r = Ok(1)
        assert r.is_ok()
        assert not r.is_err()

    def test_unwrap(self) -> None:
        assert Ok("v").unwrap() == "v"

    def test_unwrap_or_ignores_default(self) -> None:
        assert Ok(1).unwrap_or(2) == 1

    def test_equality(self) -> None:
        assert Ok(None) == OK_NONE

    def test_is_frozen(self) -> None:
        with pytest.raises((AttributeError, TypeError)):
            Ok(1).value = 2  # type: ignore[misc]


class TestErr:
    def test_flags(self) -> None:
        r = Err(TransmissionError("h:1"))
        assert r.is_err()
        assert not r.is_ok()

    def test_unwrap_raises_wrapped_error(self) -> None:
        error = TransmissionError("h:1")
        with pytest.raises(TransmissionError) as exc_info:
            Err(error).unwrap()
        assert exc_info.value is error

    def test_unwrap_or_returns_default(self) -> None:
        assert Err(ValueError("x")).unwrap_or("fallback") == "fallback"

    def test_error_accessible(self) -> None:
        error = ValueError("x")
        assert Err(error).error is error
