from __future__ import annotations

from core.domain.category import Category
from core.domain.identifiers import CategoryID
from infra.db.models import CategoryORM
from infra.db.timestamps import as_utc


def category_to_orm(category: Category) -> CategoryORM:
    return CategoryORM(
        id=category.id.value,
        name=category.name,
        description=category.description,
        active=category.active,
        created_at=category.created_at,
        updated_at=category.updated_at,
        deleted_at=category.deleted_at,
    )


def category_from_orm(obj: CategoryORM) -> Category:
    return Category(
        id=CategoryID.from_value(obj.id),
        name=obj.name,
        description=obj.description,
        active=obj.active,
        created_at=as_utc(obj.created_at),
        updated_at=as_utc(obj.updated_at),
        deleted_at=as_utc(obj.deleted_at),
    )


__all__ = ["category_to_orm", "category_from_orm"]
