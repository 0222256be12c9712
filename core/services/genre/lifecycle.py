from __future__ import annotations

import logging

from core.domain.genre import Genre
from core.domain.handlers import Notification
from core.domain.identifiers import GenreID
from core.either import Either, Left
from core.events.domain_events import domain_events
from core.exceptions import NotFoundError
from core.interfaces import CategoryGateway, GenreGateway
from core.services.common.base import UnitUseCase, UseCase
from core.services.genre.models import (
    CreateGenreCommand,
    CreateGenreOutput,
    UpdateGenreCommand,
    UpdateGenreOutput,
)
from core.services.genre.validation import GenreValidationMixin

logger = logging.getLogger(__name__)


def _persisted(genre: Genre) -> Genre:
    domain_events.genre_changed.emit(genre.id.value)
    return genre


def _write_failed(exc: Exception) -> Notification:
    logger.error("Genre gateway write failed: %s", exc)
    return Notification.from_exception(exc)


class CreateGenreUseCase(GenreValidationMixin, UseCase[CreateGenreCommand, Either[Notification, CreateGenreOutput]]):
    def __init__(self, category_gateway: CategoryGateway, genre_gateway: GenreGateway):
        if category_gateway is None or genre_gateway is None:
            raise ValueError("category_gateway and genre_gateway are required")
        self._category_gateway = category_gateway
        self._genre_gateway = genre_gateway

    def execute(self, command: CreateGenreCommand) -> Either[Notification, CreateGenreOutput]:
        categories = self._to_category_ids(command.categories)

        notification = Notification.create()
        notification.append(self._validate_categories(categories))
        genre = notification.validate(lambda: Genre.create(command.name, command.is_active))
        if notification.has_error():
            logger.info("Rejected genre creation with %d error(s)", len(notification.errors))
            return Left(notification)

        genre.add_categories(categories)
        result = Either.attempt(lambda: _persisted(self._genre_gateway.create(genre)))
        if result.is_right:
            logger.info("Created genre %s - %s", genre.id, genre.name)
        return result.bimap(_write_failed, CreateGenreOutput.from_genre)


class UpdateGenreUseCase(GenreValidationMixin, UseCase[UpdateGenreCommand, Either[Notification, UpdateGenreOutput]]):
    def __init__(self, category_gateway: CategoryGateway, genre_gateway: GenreGateway):
        if category_gateway is None or genre_gateway is None:
            raise ValueError("category_gateway and genre_gateway are required")
        self._category_gateway = category_gateway
        self._genre_gateway = genre_gateway

    def execute(self, command: UpdateGenreCommand) -> Either[Notification, UpdateGenreOutput]:
        genre_id = GenreID.from_value(command.id)
        genre = self._genre_gateway.find_by_id(genre_id)
        if genre is None:
            raise NotFoundError.with_id(Genre, genre_id)

        categories = self._to_category_ids(command.categories)

        notification = Notification.create()
        notification.append(self._validate_categories(categories))
        notification.validate(lambda: genre.update(command.name, command.is_active, categories))
        if notification.has_error():
            logger.info("Rejected update of genre %s with %d error(s)", genre_id, len(notification.errors))
            return Left(notification)

        result = Either.attempt(lambda: _persisted(self._genre_gateway.update(genre)))
        if result.is_right:
            logger.info("Updated genre %s", genre_id)
        return result.bimap(_write_failed, UpdateGenreOutput.from_genre)


class DeleteGenreUseCase(UnitUseCase[str]):
    def __init__(self, genre_gateway: GenreGateway):
        if genre_gateway is None:
            raise ValueError("genre_gateway is required")
        self._genre_gateway = genre_gateway

    def execute(self, genre_id: str) -> None:
        if not self._genre_gateway.delete_by_id(GenreID.from_value(genre_id)):
            logger.debug("Genre %s was already absent", genre_id)
            return
        logger.info("Deleted genre %s", genre_id)
        domain_events.genre_changed.emit(genre_id)


__all__ = ["CreateGenreUseCase", "UpdateGenreUseCase", "DeleteGenreUseCase"]
