from infra.db.genre.mapper import genre_from_orm, genre_to_orm
from infra.db.genre.repository import SqlAlchemyGenreGateway

__all__ = [
    "genre_to_orm",
    "genre_from_orm",
    "SqlAlchemyGenreGateway",
]
