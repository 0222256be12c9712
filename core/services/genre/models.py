from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional

from core.domain.genre import Genre


@dataclass(frozen=True)
class CreateGenreCommand:
    name: Optional[str]
    is_active: bool = True
    categories: List[str] = field(default_factory=list)

    @staticmethod
    def with_(
        name: Optional[str],
        is_active: bool = True,
        categories: Optional[Iterable[str]] = None,
    ) -> "CreateGenreCommand":
        return CreateGenreCommand(name=name, is_active=is_active, categories=list(categories or []))


@dataclass(frozen=True)
class UpdateGenreCommand:
    id: str
    name: Optional[str]
    is_active: bool = True
    categories: List[str] = field(default_factory=list)

    @staticmethod
    def with_(
        id: str,
        name: Optional[str],
        is_active: bool = True,
        categories: Optional[Iterable[str]] = None,
    ) -> "UpdateGenreCommand":
        return UpdateGenreCommand(id=id, name=name, is_active=is_active, categories=list(categories or []))


@dataclass(frozen=True)
class CreateGenreOutput:
    id: str

    @staticmethod
    def from_genre(genre: Genre) -> "CreateGenreOutput":
        return CreateGenreOutput(id=genre.id.value)


@dataclass(frozen=True)
class UpdateGenreOutput:
    id: str

    @staticmethod
    def from_genre(genre: Genre) -> "UpdateGenreOutput":
        return UpdateGenreOutput(id=genre.id.value)


@dataclass(frozen=True)
class GenreOutput:
    id: str
    name: Optional[str]
    is_active: bool
    categories: List[str]
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime]

    @staticmethod
    def from_genre(genre: Genre) -> "GenreOutput":
        return GenreOutput(
            id=genre.id.value,
            name=genre.name,
            is_active=genre.active,
            categories=[cid.value for cid in genre.categories],
            created_at=genre.created_at,
            updated_at=genre.updated_at,
            deleted_at=genre.deleted_at,
        )


@dataclass(frozen=True)
class GenreListOutput:
    id: str
    name: Optional[str]
    is_active: bool
    categories: List[str]
    created_at: datetime
    deleted_at: Optional[datetime]

    @staticmethod
    def from_genre(genre: Genre) -> "GenreListOutput":
        return GenreListOutput(
            id=genre.id.value,
            name=genre.name,
            is_active=genre.active,
            categories=[cid.value for cid in genre.categories],
            created_at=genre.created_at,
            deleted_at=genre.deleted_at,
        )


__all__ = [
    "CreateGenreCommand",
    "UpdateGenreCommand",
    "CreateGenreOutput",
    "UpdateGenreOutput",
    "GenreOutput",
    "GenreListOutput",
]
