from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from core.domain.genre import Genre
from core.domain.identifiers import GenreID
from core.domain.pagination import Pagination, SearchQuery
from core.exceptions import NotFoundError
from core.interfaces import GenreGateway
from infra.db.genre.mapper import genre_from_orm, genre_to_orm
from infra.db.models import GenreCategoryORM, GenreORM
from infra.db.search import search_page

SORT_COLUMNS = {
    "name": GenreORM.name,
    "created_at": GenreORM.created_at,
    "createdAt": GenreORM.created_at,
    "updated_at": GenreORM.updated_at,
    "updatedAt": GenreORM.updated_at,
    "active": GenreORM.active,
    "is_active": GenreORM.active,
}


class SqlAlchemyGenreGateway(GenreGateway):
    def __init__(self, session: Session):
        self.session = session

    def create(self, genre: Genre) -> Genre:
        try:
            self.session.add(genre_to_orm(genre))
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return self._reload(genre.id)

    def update(self, genre: Genre) -> Genre:
        obj = self.session.get(GenreORM, genre.id.value)
        if obj is None:
            raise NotFoundError.with_id(Genre, genre.id)
        try:
            obj.name = genre.name
            obj.active = genre.active
            obj.created_at = genre.created_at
            obj.updated_at = genre.updated_at
            obj.deleted_at = genre.deleted_at
            self._sync_categories(obj, genre)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return self._reload(genre.id)

    def delete_by_id(self, genre_id: GenreID) -> bool:
        obj = self.session.get(GenreORM, genre_id.value)
        if obj is None:
            return False
        try:
            self.session.delete(obj)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return True

    def find_by_id(self, genre_id: GenreID) -> Optional[Genre]:
        obj = self.session.get(GenreORM, genre_id.value)
        return genre_from_orm(obj) if obj else None

    def find_all(self, query: SearchQuery) -> Pagination[Genre]:
        return search_page(
            self.session,
            GenreORM,
            query,
            term_columns=(GenreORM.name,),
            sort_columns=SORT_COLUMNS,
            mapper=genre_from_orm,
        )

    @staticmethod
    def _sync_categories(obj: GenreORM, genre: Genre) -> None:
        wanted = [cid.value for cid in genre.categories]
        existing = {link.category_id: link for link in obj.categories}

        for category_id, link in existing.items():
            if category_id not in wanted:
                obj.categories.remove(link)
        for position, category_id in enumerate(wanted):
            link = existing.get(category_id)
            if link is None:
                obj.categories.append(
                    GenreCategoryORM(genre_id=obj.id, category_id=category_id, position=position)
                )
            else:
                link.position = position

    def _reload(self, genre_id: GenreID) -> Genre:
        obj = self.session.get(GenreORM, genre_id.value, populate_existing=True)
        if obj is None:
            raise NotFoundError.with_id(Genre, genre_id)
        return genre_from_orm(obj)


__all__ = ["SqlAlchemyGenreGateway", "SORT_COLUMNS"]
