from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional

from core.domain import clock
from core.domain.entity import AggregateRoot
from core.domain.genre_validator import GenreValidator
from core.domain.handlers import Notification
from core.domain.identifiers import CategoryID, GenreID, IdProvider, generate_id
from core.domain.validation import ValidationHandler
from core.exceptions import NotificationError


@dataclass
class Genre(AggregateRoot[GenreID]):
    """
    Genre aggregate.

    Unlike Category, a Genre validates itself on creation and on every
    update, raising NotificationError with all collected errors.
    """

    id: GenreID
    name: Optional[str]
    active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None
    _categories: List[CategoryID] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.created_at is None:
            raise ValueError("'created_at' should not be None")
        if self.updated_at is None:
            raise ValueError("'updated_at' should not be None")
        self._categories = list(self._categories or [])

    @staticmethod
    def create(
        name: Optional[str],
        is_active: bool,
        *,
        id_provider: IdProvider = generate_id,
    ) -> "Genre":
        now = clock.utc_now()
        genre = Genre(
            id=GenreID.unique(id_provider),
            name=name,
            active=is_active,
            created_at=now,
            updated_at=now,
            deleted_at=None if is_active else now,
        )
        genre._self_validate()
        return genre

    @staticmethod
    def restore(
        id: GenreID,
        name: Optional[str],
        active: bool,
        categories: Iterable[CategoryID],
        created_at: datetime,
        updated_at: datetime,
        deleted_at: Optional[datetime],
    ) -> "Genre":
        return Genre(
            id=id,
            name=name,
            active=active,
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=deleted_at,
            _categories=list(categories),
        )

    @property
    def categories(self) -> List[CategoryID]:
        return list(self._categories)

    def copy(self) -> "Genre":
        return dataclasses.replace(self, _categories=list(self._categories))

    def validate(self, handler: ValidationHandler) -> None:
        GenreValidator(self, handler).validate()

    def activate(self) -> "Genre":
        self.deleted_at = None
        self.active = True
        self.updated_at = clock.utc_now()
        return self

    def deactivate(self) -> "Genre":
        if self.deleted_at is None:
            self.deleted_at = clock.utc_now()
        self.active = False
        self.updated_at = clock.utc_now()
        return self

    def update(
        self,
        name: Optional[str],
        is_active: bool,
        categories: Optional[Iterable[CategoryID]],
    ) -> "Genre":
        if is_active:
            self.activate()
        else:
            self.deactivate()
        self.name = name
        self._categories = list(dict.fromkeys(cid for cid in (categories or []) if cid is not None))
        self.updated_at = clock.utc_now()
        self._self_validate()
        return self

    def add_category(self, category_id: Optional[CategoryID]) -> "Genre":
        if category_id is None or category_id in self._categories:
            return self
        self._categories.append(category_id)
        self.updated_at = clock.utc_now()
        return self

    def add_categories(self, category_ids: Optional[Iterable[CategoryID]]) -> "Genre":
        new_ids = [cid for cid in (category_ids or []) if cid is not None and cid not in self._categories]
        if not new_ids:
            return self
        for cid in new_ids:
            if cid not in self._categories:
                self._categories.append(cid)
        self.updated_at = clock.utc_now()
        return self

    def remove_category(self, category_id: Optional[CategoryID]) -> "Genre":
        if category_id is None or category_id not in self._categories:
            return self
        self._categories.remove(category_id)
        self.updated_at = clock.utc_now()
        return self

    def _self_validate(self) -> None:
        notification = Notification.create()
        self.validate(notification)
        if notification.has_error():
            raise NotificationError("Failed to create a Aggregate Genre", notification)


__all__ = ["Genre"]
