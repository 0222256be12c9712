from infra.db.category.mapper import category_from_orm, category_to_orm
from infra.db.category.repository import SqlAlchemyCategoryGateway

__all__ = [
    "category_to_orm",
    "category_from_orm",
    "SqlAlchemyCategoryGateway",
]
