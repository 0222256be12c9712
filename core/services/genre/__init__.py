from core.services.genre.lifecycle import CreateGenreUseCase, DeleteGenreUseCase, UpdateGenreUseCase
from core.services.genre.models import (
    CreateGenreCommand,
    CreateGenreOutput,
    GenreListOutput,
    GenreOutput,
    UpdateGenreCommand,
    UpdateGenreOutput,
)
from core.services.genre.query import GetGenreByIdUseCase, ListGenresUseCase

__all__ = [
    "CreateGenreUseCase",
    "UpdateGenreUseCase",
    "DeleteGenreUseCase",
    "GetGenreByIdUseCase",
    "ListGenresUseCase",
    "CreateGenreCommand",
    "UpdateGenreCommand",
    "CreateGenreOutput",
    "UpdateGenreOutput",
    "GenreOutput",
    "GenreListOutput",
]
