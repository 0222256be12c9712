from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.domain.category import Category
from core.domain.identifiers import CategoryID
from core.domain.pagination import Pagination, SearchQuery
from core.exceptions import NotFoundError
from core.interfaces import CategoryGateway
from infra.db.category.mapper import category_from_orm, category_to_orm
from infra.db.models import CategoryORM
from infra.db.search import search_page

SORT_COLUMNS = {
    "name": CategoryORM.name,
    "description": CategoryORM.description,
    "created_at": CategoryORM.created_at,
    "createdAt": CategoryORM.created_at,
    "updated_at": CategoryORM.updated_at,
    "updatedAt": CategoryORM.updated_at,
    "active": CategoryORM.active,
    "is_active": CategoryORM.active,
}


class SqlAlchemyCategoryGateway(CategoryGateway):
    def __init__(self, session: Session):
        self.session = session

    def create(self, category: Category) -> Category:
        try:
            self.session.add(category_to_orm(category))
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return self._reload(category.id)

    def update(self, category: Category) -> Category:
        obj = self.session.get(CategoryORM, category.id.value)
        if obj is None:
            raise NotFoundError.with_id(Category, category.id)
        try:
            obj.name = category.name
            obj.description = category.description
            obj.active = category.active
            obj.created_at = category.created_at
            obj.updated_at = category.updated_at
            obj.deleted_at = category.deleted_at
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return self._reload(category.id)

    def delete_by_id(self, category_id: CategoryID) -> bool:
        try:
            deleted = self.session.query(CategoryORM).filter_by(id=category_id.value).delete()
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return bool(deleted)

    def find_by_id(self, category_id: CategoryID) -> Optional[Category]:
        obj = self.session.get(CategoryORM, category_id.value)
        return category_from_orm(obj) if obj else None

    def find_all(self, query: SearchQuery) -> Pagination[Category]:
        return search_page(
            self.session,
            CategoryORM,
            query,
            term_columns=(CategoryORM.name, CategoryORM.description),
            sort_columns=SORT_COLUMNS,
            mapper=category_from_orm,
        )

    def exists_by_ids(self, category_ids: Iterable[CategoryID]) -> List[CategoryID]:
        requested = [cid for cid in category_ids if cid is not None]
        if not requested:
            return []
        stmt = select(CategoryORM.id).where(CategoryORM.id.in_([cid.value for cid in requested]))
        stored = set(self.session.execute(stmt).scalars().all())
        return [cid for cid in requested if cid.value in stored]

    def _reload(self, category_id: CategoryID) -> Category:
        obj = self.session.get(CategoryORM, category_id.value, populate_existing=True)
        if obj is None:
            raise NotFoundError.with_id(Category, category_id)
        return category_from_orm(obj)


__all__ = ["SqlAlchemyCategoryGateway", "SORT_COLUMNS"]
