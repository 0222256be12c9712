from __future__ import annotations

from core.domain.genre import Genre
from core.domain.identifiers import CategoryID, GenreID
from infra.db.models import GenreCategoryORM, GenreORM
from infra.db.timestamps import as_utc


def genre_to_orm(genre: Genre) -> GenreORM:
    return GenreORM(
        id=genre.id.value,
        name=genre.name,
        active=genre.active,
        created_at=genre.created_at,
        updated_at=genre.updated_at,
        deleted_at=genre.deleted_at,
        categories=[
            GenreCategoryORM(genre_id=genre.id.value, category_id=cid.value, position=index)
            for index, cid in enumerate(genre.categories)
        ],
    )


def genre_from_orm(obj: GenreORM) -> Genre:
    return Genre.restore(
        id=GenreID.from_value(obj.id),
        name=obj.name,
        active=obj.active,
        categories=[CategoryID.from_value(link.category_id) for link in obj.categories],
        created_at=as_utc(obj.created_at),
        updated_at=as_utc(obj.updated_at),
        deleted_at=as_utc(obj.deleted_at),
    )


__all__ = ["genre_to_orm", "genre_from_orm"]
