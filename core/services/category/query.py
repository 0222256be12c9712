from __future__ import annotations

from core.domain.category import Category
from core.domain.identifiers import CategoryID
from core.domain.pagination import Pagination, SearchQuery
from core.exceptions import NotFoundError
from core.interfaces import CategoryGateway
from core.services.common.base import UseCase
from core.services.category.models import CategoryListOutput, CategoryOutput


class GetCategoryByIdUseCase(UseCase[str, CategoryOutput]):
    def __init__(self, category_gateway: CategoryGateway):
        if category_gateway is None:
            raise ValueError("category_gateway is required")
        self._category_gateway = category_gateway

    def execute(self, category_id: str) -> CategoryOutput:
        identifier = CategoryID.from_value(category_id)
        category = self._category_gateway.find_by_id(identifier)
        if category is None:
            raise NotFoundError.with_id(Category, identifier)
        return CategoryOutput.from_category(category)


class ListCategoriesUseCase(UseCase[SearchQuery, Pagination[CategoryListOutput]]):
    def __init__(self, category_gateway: CategoryGateway):
        if category_gateway is None:
            raise ValueError("category_gateway is required")
        self._category_gateway = category_gateway

    def execute(self, query: SearchQuery) -> Pagination[CategoryListOutput]:
        return self._category_gateway.find_all(query).map(CategoryListOutput.from_category)


__all__ = ["GetCategoryByIdUseCase", "ListCategoriesUseCase"]
