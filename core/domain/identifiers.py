from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar, Union
from uuid import UUID, uuid4

IdProvider = Callable[[], str]
TId = TypeVar("TId", bound="Identifier")


def generate_id() -> str:
    return str(uuid4())


@dataclass(frozen=True)
class Identifier:
    value: str

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError(f"{type(self).__name__} value should not be None")

    @classmethod
    def unique(cls: type[TId], id_provider: IdProvider = generate_id) -> TId:
        return cls(id_provider())

    @classmethod
    def from_value(cls: type[TId], value: Union[str, UUID]) -> TId:
        if isinstance(value, UUID):
            return cls(str(value).lower())
        return cls(value)

    def __str__(self) -> str:
        return self.value


class CategoryID(Identifier):
    pass


class GenreID(Identifier):
    pass


__all__ = ["generate_id", "IdProvider", "Identifier", "CategoryID", "GenreID"]
