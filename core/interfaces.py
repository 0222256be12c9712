"""Gateway capabilities consumed by the use cases and implemented in infra."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from core.domain.category import Category
from core.domain.genre import Genre
from core.domain.identifiers import CategoryID, GenreID
from core.domain.pagination import Pagination, SearchQuery


class CategoryGateway(ABC):
    @abstractmethod
    def create(self, category: Category) -> Category:
        ...

    @abstractmethod
    def update(self, category: Category) -> Category:
        ...

    @abstractmethod
    def delete_by_id(self, category_id: CategoryID) -> bool:
        """Removes the category; an unknown id is a no-op that returns False."""

    @abstractmethod
    def find_by_id(self, category_id: CategoryID) -> Optional[Category]:
        ...

    @abstractmethod
    def find_all(self, query: SearchQuery) -> Pagination[Category]:
        """
        Case-insensitive substring match of ``query.terms`` against name and
        description, ordered by ``query.sort``/``query.direction``.
        ``total`` counts every match, not just the returned page.
        """

    @abstractmethod
    def exists_by_ids(self, category_ids: Iterable[CategoryID]) -> List[CategoryID]:
        """Returns the subset of ``category_ids`` that are stored, in input order."""


class GenreGateway(ABC):
    @abstractmethod
    def create(self, genre: Genre) -> Genre:
        ...

    @abstractmethod
    def update(self, genre: Genre) -> Genre:
        ...

    @abstractmethod
    def delete_by_id(self, genre_id: GenreID) -> bool:
        """True when a stored genre was removed."""

    @abstractmethod
    def find_by_id(self, genre_id: GenreID) -> Optional[Genre]:
        ...

    @abstractmethod
    def find_all(self, query: SearchQuery) -> Pagination[Genre]:
        ...


__all__ = ["CategoryGateway", "GenreGateway"]
