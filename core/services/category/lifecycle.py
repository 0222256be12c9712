from __future__ import annotations

import logging

from core.domain.category import Category
from core.domain.handlers import Notification
from core.domain.identifiers import CategoryID
from core.either import Either, Left
from core.events.domain_events import domain_events
from core.exceptions import NotFoundError
from core.interfaces import CategoryGateway
from core.services.common.base import UnitUseCase, UseCase
from core.services.category.models import (
    CreateCategoryCommand,
    CreateCategoryOutput,
    UpdateCategoryCommand,
    UpdateCategoryOutput,
)

logger = logging.getLogger(__name__)


def _persisted(category: Category) -> Category:
    domain_events.category_changed.emit(category.id.value)
    return category


def _write_failed(exc: Exception) -> Notification:
    logger.error("Category gateway write failed: %s", exc)
    return Notification.from_exception(exc)


class CreateCategoryUseCase(UseCase[CreateCategoryCommand, Either[Notification, CreateCategoryOutput]]):
    def __init__(self, category_gateway: CategoryGateway):
        if category_gateway is None:
            raise ValueError("category_gateway is required")
        self._category_gateway = category_gateway

    def execute(self, command: CreateCategoryCommand) -> Either[Notification, CreateCategoryOutput]:
        category = Category.create(command.name, command.description, command.is_active)

        notification = Notification.create()
        category.validate(notification)
        if notification.has_error():
            logger.info("Rejected category creation with %d error(s)", len(notification.errors))
            return Left(notification)

        result = Either.attempt(lambda: _persisted(self._category_gateway.create(category)))
        if result.is_right:
            logger.info("Created category %s - %s", category.id, category.name)
        return result.bimap(_write_failed, CreateCategoryOutput.from_category)


class UpdateCategoryUseCase(UseCase[UpdateCategoryCommand, Either[Notification, UpdateCategoryOutput]]):
    def __init__(self, category_gateway: CategoryGateway):
        if category_gateway is None:
            raise ValueError("category_gateway is required")
        self._category_gateway = category_gateway

    def execute(self, command: UpdateCategoryCommand) -> Either[Notification, UpdateCategoryOutput]:
        category_id = CategoryID.from_value(command.id)
        category = self._category_gateway.find_by_id(category_id)
        if category is None:
            raise NotFoundError.with_id(Category, category_id)

        notification = Notification.create()
        category.update(command.name, command.description, command.is_active).validate(notification)
        if notification.has_error():
            logger.info("Rejected update of category %s with %d error(s)", category_id, len(notification.errors))
            return Left(notification)

        result = Either.attempt(lambda: _persisted(self._category_gateway.update(category)))
        if result.is_right:
            logger.info("Updated category %s", category_id)
        return result.bimap(_write_failed, UpdateCategoryOutput.from_category)


class DeleteCategoryUseCase(UnitUseCase[str]):
    def __init__(self, category_gateway: CategoryGateway):
        if category_gateway is None:
            raise ValueError("category_gateway is required")
        self._category_gateway = category_gateway

    def execute(self, category_id: str) -> None:
        if not self._category_gateway.delete_by_id(CategoryID.from_value(category_id)):
            logger.debug("Category %s was already absent", category_id)
            return
        logger.info("Deleted category %s", category_id)
        domain_events.category_changed.emit(category_id)


__all__ = ["CreateCategoryUseCase", "UpdateCategoryUseCase", "DeleteCategoryUseCase"]
