from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain import clock
from core.domain.category_validator import CategoryValidator
from core.domain.entity import AggregateRoot
from core.domain.identifiers import CategoryID, IdProvider, generate_id
from core.domain.validation import ValidationHandler


@dataclass
class Category(AggregateRoot[CategoryID]):
    id: CategoryID
    name: Optional[str]
    description: Optional[str]
    active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.created_at is None:
            raise ValueError("'created_at' should not be None")
        if self.updated_at is None:
            raise ValueError("'updated_at' should not be None")

    @staticmethod
    def create(
        name: Optional[str],
        description: Optional[str],
        is_active: bool,
        *,
        id_provider: IdProvider = generate_id,
    ) -> "Category":
        now = clock.utc_now()
        return Category(
            id=CategoryID.unique(id_provider),
            name=name,
            description=description,
            active=is_active,
            created_at=now,
            updated_at=now,
            deleted_at=None if is_active else now,
        )

    def copy(self) -> "Category":
        return dataclasses.replace(self)

    def validate(self, handler: ValidationHandler) -> None:
        CategoryValidator(self, handler).validate()

    def activate(self) -> "Category":
        self.deleted_at = None
        self.active = True
        self.updated_at = clock.utc_now()
        return self

    def deactivate(self) -> "Category":
        if self.deleted_at is None:
            self.deleted_at = clock.utc_now()
        self.active = False
        self.updated_at = clock.utc_now()
        return self

    def update(self, name: Optional[str], description: Optional[str], is_active: bool) -> "Category":
        self.name = name
        self.description = description
        if is_active:
            self.activate()
        else:
            self.deactivate()
        self.updated_at = clock.utc_now()
        return self


__all__ = ["Category"]
