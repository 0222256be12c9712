from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

IN = TypeVar("IN")
OUT = TypeVar("OUT")


class UseCase(ABC, Generic[IN, OUT]):
    @abstractmethod
    def execute(self, command: IN) -> OUT:
        ...


class UnitUseCase(ABC, Generic[IN]):
    @abstractmethod
    def execute(self, command: IN) -> None:
        ...


__all__ = ["UseCase", "UnitUseCase"]
