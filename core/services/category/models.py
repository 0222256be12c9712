from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.category import Category


@dataclass(frozen=True)
class CreateCategoryCommand:
    name: Optional[str]
    description: Optional[str]
    is_active: bool = True

    @staticmethod
    def with_(name: Optional[str], description: Optional[str], is_active: bool = True) -> "CreateCategoryCommand":
        return CreateCategoryCommand(name=name, description=description, is_active=is_active)


@dataclass(frozen=True)
class UpdateCategoryCommand:
    id: str
    name: Optional[str]
    description: Optional[str]
    is_active: bool = True

    @staticmethod
    def with_(
        id: str,
        name: Optional[str],
        description: Optional[str],
        is_active: bool = True,
    ) -> "UpdateCategoryCommand":
        return UpdateCategoryCommand(id=id, name=name, description=description, is_active=is_active)


@dataclass(frozen=True)
class CreateCategoryOutput:
    id: str

    @staticmethod
    def from_category(category: Category) -> "CreateCategoryOutput":
        return CreateCategoryOutput(id=category.id.value)


@dataclass(frozen=True)
class UpdateCategoryOutput:
    id: str

    @staticmethod
    def from_category(category: Category) -> "UpdateCategoryOutput":
        return UpdateCategoryOutput(id=category.id.value)


@dataclass(frozen=True)
class CategoryOutput:
    id: str
    name: Optional[str]
    description: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime]

    @staticmethod
    def from_category(category: Category) -> "CategoryOutput":
        return CategoryOutput(
            id=category.id.value,
            name=category.name,
            description=category.description,
            is_active=category.active,
            created_at=category.created_at,
            updated_at=category.updated_at,
            deleted_at=category.deleted_at,
        )


@dataclass(frozen=True)
class CategoryListOutput:
    id: str
    name: Optional[str]
    description: Optional[str]
    is_active: bool
    created_at: datetime
    deleted_at: Optional[datetime]

    @staticmethod
    def from_category(category: Category) -> "CategoryListOutput":
        return CategoryListOutput(
            id=category.id.value,
            name=category.name,
            description=category.description,
            is_active=category.active,
            created_at=category.created_at,
            deleted_at=category.deleted_at,
        )


__all__ = [
    "CreateCategoryCommand",
    "UpdateCategoryCommand",
    "CreateCategoryOutput",
    "UpdateCategoryOutput",
    "CategoryOutput",
    "CategoryListOutput",
]
