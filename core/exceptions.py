# core/exceptions.py
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from core.domain.identifiers import Identifier
    from core.domain.validation import Error


class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        errors: Iterable["Error"] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.errors: list["Error"] = list(errors or [])

    @classmethod
    def with_error(cls, error: "Error") -> "DomainError":
        return cls(error.message, errors=[error])

    @classmethod
    def with_errors(cls, errors: Iterable["Error"]) -> "DomainError":
        collected = list(errors)
        message = collected[0].message if len(collected) == 1 else ""
        return cls(message, errors=collected)


class ValidationError(DomainError):
    """Raised when data is invalid or violates constraints."""


class NotFoundError(DomainError):
    """Raised when an aggregate is not found."""

    def __init__(self, message: str, *, aggregate: str | None = None, id: str | None = None, **kwargs):
        kwargs.setdefault("code", "NOT_FOUND")
        super().__init__(message, **kwargs)
        self.aggregate = aggregate
        self.id = id

    @classmethod
    def with_id(cls, aggregate: type | str, identifier: "Identifier | str") -> "NotFoundError":
        name = aggregate if isinstance(aggregate, str) else aggregate.__name__
        raw_id = identifier if isinstance(identifier, str) else identifier.value
        from core.domain.validation import Error

        message = f"{name} with ID {raw_id} was not found"
        return cls(message, aggregate=name, id=raw_id, errors=[Error(message)])


class NotificationError(DomainError):
    """Raised by self-validating aggregates carrying every collected error."""

    def __init__(self, message: str, notification=None, **kwargs):
        if notification is not None:
            kwargs.setdefault("errors", notification.get_errors())
        super().__init__(message, **kwargs)
