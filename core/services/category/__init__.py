from core.services.category.lifecycle import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    UpdateCategoryUseCase,
)
from core.services.category.models import (
    CategoryListOutput,
    CategoryOutput,
    CreateCategoryCommand,
    CreateCategoryOutput,
    UpdateCategoryCommand,
    UpdateCategoryOutput,
)
from core.services.category.query import GetCategoryByIdUseCase, ListCategoriesUseCase

__all__ = [
    "CreateCategoryUseCase",
    "UpdateCategoryUseCase",
    "DeleteCategoryUseCase",
    "GetCategoryByIdUseCase",
    "ListCategoriesUseCase",
    "CreateCategoryCommand",
    "UpdateCategoryCommand",
    "CreateCategoryOutput",
    "UpdateCategoryOutput",
    "CategoryOutput",
    "CategoryListOutput",
]
