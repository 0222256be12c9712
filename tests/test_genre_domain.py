import pytest

from core.domain.genre import Genre
from core.domain.identifiers import CategoryID
from core.domain.validation import Error
from core.exceptions import NotificationError


def test_create_genre_is_self_validated():
    genre = Genre.create("Ação", True)

    assert genre.id is not None
    assert genre.name == "Ação"
    assert genre.active is True
    assert genre.categories == []
    assert genre.deleted_at is None
    assert genre.updated_at == genre.created_at


def test_create_inactive_genre_sets_deleted_at():
    genre = Genre.create("Ação", False)
    assert genre.active is False
    assert genre.deleted_at == genre.created_at


@pytest.mark.parametrize(
    "name, expected",
    [
        (None, "'name' should not be null"),
        (" ", "'name' should not be empty"),
        ("x" * 256, "'name' must be between 1 and 255 characters"),
    ],
)
def test_create_genre_with_invalid_name_raises_notification_error(name, expected):
    with pytest.raises(NotificationError) as exc:
        Genre.create(name, True)

    assert exc.value.errors == [Error(expected)]


def test_update_genre_replaces_categories_and_lifecycle(ticking_clock):
    genre = Genre.create("Acao", True)
    updated_at = genre.updated_at
    series = CategoryID("series")

    genre.update("Ação", False, [series])

    assert genre.name == "Ação"
    assert genre.active is False
    assert genre.deleted_at is not None
    assert genre.categories == [series]
    assert genre.updated_at > updated_at

    genre.update("Ação", True, None)
    assert genre.active is True
    assert genre.deleted_at is None
    assert genre.categories == []


def test_update_genre_with_invalid_name_raises():
    genre = Genre.create("Ação", True)
    with pytest.raises(NotificationError):
        genre.update("", True, [])


def test_category_list_operations(ticking_clock):
    genre = Genre.create("Ação", True)
    filmes = CategoryID("filmes")
    series = CategoryID("series")

    genre.add_category(filmes)
    genre.add_category(filmes)
    genre.add_category(None)
    assert genre.categories == [filmes]

    before = genre.updated_at
    genre.add_categories([])
    genre.add_categories(None)
    assert genre.updated_at == before

    genre.add_categories([series, filmes, series])
    assert genre.categories == [filmes, series]
    assert genre.updated_at > before

    genre.remove_category(filmes)
    genre.remove_category(CategoryID("unknown"))
    assert genre.categories == [series]


def test_categories_are_exposed_as_a_copy():
    genre = Genre.create("Ação", True)
    exposed = genre.categories
    exposed.append(CategoryID("sneaky"))

    assert genre.categories == []


def test_update_genre_drops_repeated_and_missing_category_ids():
    genre = Genre.create("Ação", True)
    filmes = CategoryID("filmes")
    series = CategoryID("series")

    genre.update("Ação", True, [series, None, filmes, series, filmes])

    assert genre.categories == [series, filmes]
