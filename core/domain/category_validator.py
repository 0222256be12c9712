from __future__ import annotations

from typing import TYPE_CHECKING

from core.domain.validation import Error, ValidationHandler, Validator

if TYPE_CHECKING:
    from core.domain.category import Category

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255


class CategoryValidator(Validator):
    def __init__(self, category: "Category", handler: ValidationHandler):
        super().__init__(handler)
        self._category = category

    def validate(self) -> None:
        self._check_name_constraints()

    def _check_name_constraints(self) -> None:
        # At most one name error per pass: null, then blank, then length.
        name = self._category.name
        if name is None:
            self.validation_handler.append(Error("'name' should not be null."))
            return
        if not name.strip():
            self.validation_handler.append(Error("'name' should not be empty."))
            return
        length = len(name.strip())
        if length < NAME_MIN_LENGTH or length > NAME_MAX_LENGTH:
            self.validation_handler.append(
                Error(f"'name' must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH}.")
            )


__all__ = ["CategoryValidator", "NAME_MIN_LENGTH", "NAME_MAX_LENGTH"]
