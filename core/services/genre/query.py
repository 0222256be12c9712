from __future__ import annotations

from core.domain.genre import Genre
from core.domain.identifiers import GenreID
from core.domain.pagination import Pagination, SearchQuery
from core.exceptions import NotFoundError
from core.interfaces import GenreGateway
from core.services.common.base import UseCase
from core.services.genre.models import GenreListOutput, GenreOutput


class GetGenreByIdUseCase(UseCase[str, GenreOutput]):
    def __init__(self, genre_gateway: GenreGateway):
        if genre_gateway is None:
            raise ValueError("genre_gateway is required")
        self._genre_gateway = genre_gateway

    def execute(self, genre_id: str) -> GenreOutput:
        identifier = GenreID.from_value(genre_id)
        genre = self._genre_gateway.find_by_id(identifier)
        if genre is None:
            raise NotFoundError.with_id(Genre, identifier)
        return GenreOutput.from_genre(genre)


class ListGenresUseCase(UseCase[SearchQuery, Pagination[GenreListOutput]]):
    def __init__(self, genre_gateway: GenreGateway):
        if genre_gateway is None:
            raise ValueError("genre_gateway is required")
        self._genre_gateway = genre_gateway

    def execute(self, query: SearchQuery) -> Pagination[GenreListOutput]:
        return self._genre_gateway.find_all(query).map(GenreListOutput.from_genre)


__all__ = ["GetGenreByIdUseCase", "ListGenresUseCase"]
