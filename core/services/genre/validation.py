from __future__ import annotations

from typing import List

from core.domain.handlers import Notification
from core.domain.identifiers import CategoryID
from core.domain.validation import Error
from core.interfaces import CategoryGateway


class GenreValidationMixin:
    _category_gateway: CategoryGateway

    def _validate_categories(self, category_ids: List[CategoryID]) -> Notification:
        notification = Notification.create()
        if not category_ids:
            return notification

        found = set(self._category_gateway.exists_by_ids(category_ids))
        missing = [cid.value for cid in category_ids if cid not in found]
        if missing:
            notification.append(Error("Some categories could not be found: " + ", ".join(missing)))
        return notification

    @staticmethod
    def _to_category_ids(raw_ids: List[str]) -> List[CategoryID]:
        return [CategoryID.from_value(raw) for raw in raw_ids or [] if raw]


__all__ = ["GenreValidationMixin"]
