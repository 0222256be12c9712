from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence, TypeVar

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from core.domain.pagination import Pagination, SearchQuery
from core.domain.validation import Error
from core.exceptions import ValidationError

T = TypeVar("T")


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_page(
    session: Session,
    orm_type: type[Any],
    query: SearchQuery,
    *,
    term_columns: Sequence[Any],
    sort_columns: Mapping[str, Any],
    mapper: Callable[[Any], T],
) -> Pagination[T]:
    """Filter by terms, count, order, then slice one page."""
    sort_column = sort_columns.get(query.sort)
    if sort_column is None:
        raise ValidationError(
            f"Invalid sort field: {query.sort}",
            code="INVALID_SORT_FIELD",
            errors=[Error(f"'sort' must be one of: {', '.join(sorted(sort_columns))}")],
        )

    stmt = select(orm_type)
    terms = query.terms.strip()
    if terms:
        pattern = f"%{_escape_like(terms)}%"
        stmt = stmt.where(or_(*[column.ilike(pattern, escape="\\") for column in term_columns]))

    total = session.execute(select(func.count()).select_from(stmt.subquery())).scalar_one()

    ordering = sort_column.desc() if query.direction == "desc" else sort_column.asc()
    stmt = stmt.order_by(ordering, orm_type.id.asc()).offset(query.offset).limit(query.per_page)
    rows = session.execute(stmt).scalars().all()
    return Pagination(
        current_page=query.page,
        per_page=query.per_page,
        total=int(total),
        items=[mapper(row) for row in rows],
    )


__all__ = ["search_page"]
