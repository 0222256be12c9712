from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, List, TypeVar

from core.domain.validation import Error
from core.exceptions import ValidationError

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE = 0
DEFAULT_PER_PAGE = 10
DEFAULT_SORT = "name"
DIRECTIONS = ("asc", "desc")


@dataclass(frozen=True)
class SearchQuery:
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE
    terms: str = ""
    sort: str = DEFAULT_SORT
    direction: str = "asc"

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", self.terms or "")
        object.__setattr__(self, "direction", (self.direction or "asc").strip().lower())

        errors: list[Error] = []
        if self.page is None or self.page < 0:
            errors.append(Error("'page' must be greater than or equal to 0"))
        if self.per_page is None or self.per_page <= 0:
            errors.append(Error("'per_page' must be greater than 0"))
        if not (self.sort or "").strip():
            errors.append(Error("'sort' should not be empty"))
        if self.direction not in DIRECTIONS:
            errors.append(Error("'direction' must be one of: asc, desc"))
        if errors:
            raise ValidationError(
                "Invalid search query.",
                code="INVALID_SEARCH_QUERY",
                errors=errors,
            )

    @property
    def offset(self) -> int:
        return self.page * self.per_page


@dataclass(frozen=True)
class Pagination(Generic[T]):
    current_page: int
    per_page: int
    total: int
    items: List[T] = field(default_factory=list)

    @staticmethod
    def empty(query: SearchQuery) -> "Pagination":
        return Pagination(query.page, query.per_page, 0, [])

    def map(self, fn: Callable[[T], U]) -> "Pagination[U]":
        return Pagination(
            current_page=self.current_page,
            per_page=self.per_page,
            total=self.total,
            items=[fn(item) for item in self.items],
        )


__all__ = ["SearchQuery", "Pagination", "DEFAULT_PAGE", "DEFAULT_PER_PAGE", "DEFAULT_SORT"]
