from __future__ import annotations

from typing import Callable, List, Optional, TypeVar, Union

from core.domain.validation import Error, ValidationHandler
from core.exceptions import DomainError

T = TypeVar("T")


class ThrowsValidationHandler(ValidationHandler):
    """Fail-fast handler: the first appended error aborts the caller."""

    def append(self, error: Union[Error, ValidationHandler]) -> "ThrowsValidationHandler":
        if isinstance(error, ValidationHandler):
            raise DomainError.with_errors(error.get_errors())
        raise DomainError.with_error(error)

    def validate(self, fn: Callable[[], T]) -> Optional[T]:
        try:
            return fn()
        except Exception as exc:
            raise DomainError.with_error(Error(str(exc))) from exc

    def get_errors(self) -> List[Error]:
        return []


class Notification(ValidationHandler):
    """Accumulating handler: keeps every error in detection order."""

    def __init__(self, errors: Optional[List[Error]] = None):
        self._errors: List[Error] = list(errors or [])

    @classmethod
    def create(cls, *errors: Error) -> "Notification":
        return cls(list(errors))

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Notification":
        return cls([Error(str(exc))])

    def append(self, error: Union[Error, ValidationHandler]) -> "Notification":
        if isinstance(error, ValidationHandler):
            self._errors.extend(error.get_errors())
        else:
            self._errors.append(error)
        return self

    def validate(self, fn: Callable[[], T]) -> Optional[T]:
        try:
            return fn()
        except DomainError as exc:
            self._errors.extend(exc.errors)
        except Exception as exc:
            self._errors.append(Error(str(exc)))
        return None

    def get_errors(self) -> List[Error]:
        return list(self._errors)

    def __repr__(self) -> str:
        return f"Notification(errors={self._errors!r})"


__all__ = ["ThrowsValidationHandler", "Notification"]
