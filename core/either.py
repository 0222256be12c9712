"""Two-outcome result type returned by write use cases."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

L = TypeVar("L")
R = TypeVar("R")
A = TypeVar("A")
B = TypeVar("B")


class Either(ABC, Generic[L, R]):
    """Left carries a failure, Right carries a success."""

    @property
    @abstractmethod
    def is_left(self) -> bool:
        ...

    @property
    def is_right(self) -> bool:
        return not self.is_left

    @staticmethod
    def attempt(fn: Callable[[], R]) -> "Either[Exception, R]":
        try:
            return Right(fn())
        except Exception as exc:
            return Left(exc)

    @abstractmethod
    def fold(self, on_left: Callable[[L], A], on_right: Callable[[R], A]) -> A:
        ...

    def map(self, fn: Callable[[R], B]) -> "Either[L, B]":
        return self.fold(Left, lambda value: Right(fn(value)))

    def map_left(self, fn: Callable[[L], A]) -> "Either[A, R]":
        return self.fold(lambda error: Left(fn(error)), Right)

    def bimap(self, on_left: Callable[[L], A], on_right: Callable[[R], B]) -> "Either[A, B]":
        return self.fold(lambda error: Left(on_left(error)), lambda value: Right(on_right(value)))

    def flat_map(self, fn: Callable[[R], "Either[L, B]"]) -> "Either[L, B]":
        return self.fold(Left, fn)

    def get_or_else(self, default: Any) -> Any:
        return self.fold(lambda _error: default, lambda value: value)

    def get(self) -> R:
        if self.is_left:
            raise ValueError("get() called on a Left")
        return self.value

    def get_left(self) -> L:
        if self.is_right:
            raise ValueError("get_left() called on a Right")
        return self.value


@dataclass(frozen=True)
class Left(Either[L, Any]):
    value: L

    @property
    def is_left(self) -> bool:
        return True

    def fold(self, on_left, on_right):
        return on_left(self.value)


@dataclass(frozen=True)
class Right(Either[Any, R]):
    value: R

    @property
    def is_left(self) -> bool:
        return False

    def fold(self, on_left, on_right):
        return on_right(self.value)


__all__ = ["Either", "Left", "Right"]
