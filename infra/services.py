from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from sqlalchemy.orm import Session

from core.services.category import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryByIdUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from core.services.genre import (
    CreateGenreUseCase,
    DeleteGenreUseCase,
    GetGenreByIdUseCase,
    ListGenresUseCase,
    UpdateGenreUseCase,
)
from infra.db.repositories import SqlAlchemyCategoryGateway, SqlAlchemyGenreGateway
from infra.operational_support import bind_trace_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    category_gateway: SqlAlchemyCategoryGateway
    genre_gateway: SqlAlchemyGenreGateway
    create_category: CreateCategoryUseCase
    update_category: UpdateCategoryUseCase
    delete_category: DeleteCategoryUseCase
    get_category: GetCategoryByIdUseCase
    list_categories: ListCategoriesUseCase
    create_genre: CreateGenreUseCase
    update_genre: UpdateGenreUseCase
    delete_genre: DeleteGenreUseCase
    get_genre: GetGenreByIdUseCase
    list_genres: ListGenresUseCase

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "category_gateway": self.category_gateway,
            "genre_gateway": self.genre_gateway,
            "create_category": self.create_category,
            "update_category": self.update_category,
            "delete_category": self.delete_category,
            "get_category": self.get_category,
            "list_categories": self.list_categories,
            "create_genre": self.create_genre,
            "update_genre": self.update_genre,
            "delete_genre": self.delete_genre,
            "get_genre": self.get_genre,
            "list_genres": self.list_genres,
        }


def build_service_graph(session: Session) -> ServiceGraph:
    category_gateway = SqlAlchemyCategoryGateway(session)
    genre_gateway = SqlAlchemyGenreGateway(session)

    return ServiceGraph(
        session=session,
        category_gateway=category_gateway,
        genre_gateway=genre_gateway,
        create_category=CreateCategoryUseCase(category_gateway),
        update_category=UpdateCategoryUseCase(category_gateway),
        delete_category=DeleteCategoryUseCase(category_gateway),
        get_category=GetCategoryByIdUseCase(category_gateway),
        list_categories=ListCategoriesUseCase(category_gateway),
        create_genre=CreateGenreUseCase(category_gateway, genre_gateway),
        update_genre=UpdateGenreUseCase(category_gateway, genre_gateway),
        delete_genre=DeleteGenreUseCase(genre_gateway),
        get_genre=GetGenreByIdUseCase(genre_gateway),
        list_genres=ListGenresUseCase(genre_gateway),
    )


@contextmanager
def request_scope(
    session_factory: Callable[[], Session] | None = None,
    trace_id: str | None = None,
) -> Iterator[ServiceGraph]:
    """One session and one trace id per request; the session is closed on exit."""
    if session_factory is None:
        from infra.db.base import SessionLocal

        session_factory = SessionLocal

    with bind_trace_id(trace_id) as bound_trace_id:
        session = session_factory()
        logger.debug("Opened request scope %s", bound_trace_id)
        try:
            yield build_service_graph(session)
        finally:
            session.close()
            logger.debug("Closed request scope %s", bound_trace_id)


__all__ = ["ServiceGraph", "build_service_graph", "request_scope"]
