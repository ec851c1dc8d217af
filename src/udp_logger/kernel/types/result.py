"""Result[T, E] — Ok and Err variants returned by send operations."""

from __future__ import annotations

import dataclasses
from typing import Generic, NoReturn, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclasses.dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying the exception instead of raising it."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default


type Result[T, E] = Ok[T] | Err[E]

OK_NONE: Ok[None] = Ok(None)

__all__ = ["OK_NONE", "Err", "Ok", "Result"]
