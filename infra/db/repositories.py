from infra.db.category.repository import SqlAlchemyCategoryGateway
from infra.db.genre.repository import SqlAlchemyGenreGateway

__all__ = [
    "SqlAlchemyCategoryGateway",
    "SqlAlchemyGenreGateway",
]
