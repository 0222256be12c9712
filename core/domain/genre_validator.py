from __future__ import annotations

from typing import TYPE_CHECKING

from core.domain.validation import Error, ValidationHandler, Validator

if TYPE_CHECKING:
    from core.domain.genre import Genre

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 255


class GenreValidator(Validator):
    def __init__(self, genre: "Genre", handler: ValidationHandler):
        super().__init__(handler)
        self._genre = genre

    def validate(self) -> None:
        self._check_name_constraints()

    def _check_name_constraints(self) -> None:
        name = self._genre.name
        if name is None:
            self.validation_handler.append(Error("'name' should not be null"))
            return
        if not name.strip():
            self.validation_handler.append(Error("'name' should not be empty"))
            return
        length = len(name.strip())
        if length < NAME_MIN_LENGTH or length > NAME_MAX_LENGTH:
            self.validation_handler.append(
                Error(f"'name' must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters")
            )


__all__ = ["GenreValidator"]
