from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    message: str


class ValidationHandler(ABC):
    """
    Sink for validation errors.

    Aggregates validate themselves against whichever handler the caller
    supplies: ThrowsValidationHandler aborts on the first error, Notification
    collects all of them.
    """

    @abstractmethod
    def append(self, error: Union[Error, "ValidationHandler"]) -> "ValidationHandler":
        ...

    @abstractmethod
    def validate(self, fn: Callable[[], T]) -> Optional[T]:
        ...

    @abstractmethod
    def get_errors(self) -> List[Error]:
        ...

    @property
    def errors(self) -> List[Error]:
        return self.get_errors()

    def has_error(self) -> bool:
        errors = self.get_errors()
        return errors is not None and len(errors) > 0

    def first_error(self) -> Optional[Error]:
        errors = self.get_errors()
        return errors[0] if errors else None


class Validator(ABC):
    def __init__(self, handler: ValidationHandler):
        self._handler = handler

    @property
    def validation_handler(self) -> ValidationHandler:
        return self._handler

    @abstractmethod
    def validate(self) -> None:
        ...


__all__ = ["Error", "ValidationHandler", "Validator"]
