from .category import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryByIdUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from .genre import (
    CreateGenreUseCase,
    DeleteGenreUseCase,
    GetGenreByIdUseCase,
    ListGenresUseCase,
    UpdateGenreUseCase,
)

__all__ = [
    "CreateCategoryUseCase",
    "UpdateCategoryUseCase",
    "DeleteCategoryUseCase",
    "GetCategoryByIdUseCase",
    "ListCategoriesUseCase",
    "CreateGenreUseCase",
    "UpdateGenreUseCase",
    "DeleteGenreUseCase",
    "GetGenreByIdUseCase",
    "ListGenresUseCase",
]
