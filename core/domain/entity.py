from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from core.domain.identifiers import Identifier
from core.domain.validation import ValidationHandler

ID = TypeVar("ID", bound=Identifier)


class Entity(ABC, Generic[ID]):
    id: ID

    @abstractmethod
    def validate(self, handler: ValidationHandler) -> None:
        ...


class AggregateRoot(Entity[ID]):
    pass


__all__ = ["Entity", "AggregateRoot"]
