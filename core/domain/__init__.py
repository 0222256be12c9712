from core.domain.category import Category
from core.domain.category_validator import CategoryValidator
from core.domain.genre import Genre
from core.domain.genre_validator import GenreValidator
from core.domain.handlers import Notification, ThrowsValidationHandler
from core.domain.identifiers import CategoryID, GenreID, Identifier, generate_id
from core.domain.pagination import Pagination, SearchQuery
from core.domain.validation import Error, ValidationHandler, Validator

__all__ = [
    "generate_id",
    "Identifier",
    "CategoryID",
    "GenreID",
    "Error",
    "ValidationHandler",
    "Validator",
    "ThrowsValidationHandler",
    "Notification",
    "Category",
    "CategoryValidator",
    "Genre",
    "GenreValidator",
    "SearchQuery",
    "Pagination",
]
