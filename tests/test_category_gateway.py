from datetime import timezone

import pytest

from core.domain.category import Category
from core.domain.identifiers import CategoryID
from core.domain.pagination import SearchQuery
from core.exceptions import NotFoundError, ValidationError
from core.services.genre.models import CreateGenreCommand, UpdateGenreCommand
from infra.db.models import CategoryORM, GenreCategoryORM


def _seed(gateway, *names, description=None):
    return [gateway.create(Category.create(name, description, True)) for name in names]


def test_create_and_find_by_id_round_trip_timestamps_as_utc(services):
    gateway = services["category_gateway"]
    category = Category.create("Filmes", "A categoria mais assistida", False)

    stored = gateway.create(category)
    found = gateway.find_by_id(category.id)

    assert stored == found
    assert found.name == "Filmes"
    assert found.active is False
    assert found.created_at == category.created_at
    assert found.deleted_at == category.deleted_at
    assert found.created_at.tzinfo is timezone.utc


def test_create_returns_a_copy(services):
    gateway = services["category_gateway"]
    category = Category.create("Filmes", None, True)

    stored = gateway.create(category)
    stored.update("Series", None, True)

    assert gateway.find_by_id(category.id).name == "Filmes"


def test_find_by_id_returns_none_for_unknown(services):
    assert services["category_gateway"].find_by_id(CategoryID("missing")) is None


def test_update_overwrites_stored_row(services, ticking_clock):
    gateway = services["category_gateway"]
    category = gateway.create(Category.create("Film", None, True))

    category.update("Filmes", "A categoria mais assistida", False)
    gateway.update(category)
    found = gateway.find_by_id(category.id)

    assert found.name == "Filmes"
    assert found.description == "A categoria mais assistida"
    assert found.active is False
    assert found.deleted_at == category.deleted_at
    assert found.updated_at == category.updated_at


def test_update_of_unknown_category_raises_not_found(services):
    with pytest.raises(NotFoundError):
        services["category_gateway"].update(Category.create("Filmes", None, True))


def test_failed_write_rolls_back_and_reraises(services):
    gateway = services["category_gateway"]
    category = gateway.create(Category.create("Filmes", None, True))

    with pytest.raises(Exception):
        gateway.create(category)

    assert services["session"].query(CategoryORM).count() == 1
    assert gateway.find_by_id(category.id).name == "Filmes"


def test_delete_by_id_is_a_no_op_for_unknown_ids(services):
    gateway = services["category_gateway"]
    category = gateway.create(Category.create("Filmes", None, True))

    assert gateway.delete_by_id(CategoryID("missing")) is False
    assert gateway.find_by_id(category.id) is not None

    assert gateway.delete_by_id(category.id) is True
    assert gateway.delete_by_id(category.id) is False
    assert gateway.find_by_id(category.id) is None


def test_find_all_pages_with_total_of_all_matches(services):
    gateway = services["category_gateway"]
    _seed(gateway, "Filmes", "Series", "Documentários", "Kids")

    first = gateway.find_all(SearchQuery(page=0, per_page=2))
    last = gateway.find_all(SearchQuery(page=1, per_page=2))
    beyond = gateway.find_all(SearchQuery(page=5, per_page=2))

    assert first.total == last.total == beyond.total == 4
    assert [c.name for c in first.items] == ["Documentários", "Filmes"]
    assert [c.name for c in last.items] == ["Kids", "Series"]
    assert beyond.items == []
    assert (first.current_page, first.per_page) == (0, 2)


def test_find_all_sorts_descending(services):
    gateway = services["category_gateway"]
    _seed(gateway, "Filmes", "Series", "Kids")

    page = gateway.find_all(SearchQuery(sort="name", direction="desc"))

    assert [c.name for c in page.items] == ["Series", "Kids", "Filmes"]


def test_find_all_sorts_by_creation_time(services, ticking_clock):
    gateway = services["category_gateway"]
    _seed(gateway, "Series", "Filmes", "Kids")

    page = gateway.find_all(SearchQuery(sort="createdAt", direction="asc"))

    assert [c.name for c in page.items] == ["Series", "Filmes", "Kids"]


def test_find_all_matches_terms_on_name_and_description(services):
    gateway = services["category_gateway"]
    gateway.create(Category.create("Filmes", "A categoria mais assistida", True))
    gateway.create(Category.create("Documentários", "Historias reais", True))
    gateway.create(Category.create("Series", None, True))

    by_name = gateway.find_all(SearchQuery(terms="DOC"))
    by_description = gateway.find_all(SearchQuery(terms="assistida"))
    wildcard = gateway.find_all(SearchQuery(terms="%"))

    assert [c.name for c in by_name.items] == ["Documentários"]
    assert by_name.total == 1
    assert [c.name for c in by_description.items] == ["Filmes"]
    assert wildcard.total == 0


def test_find_all_rejects_unknown_sort_field(services):
    with pytest.raises(ValidationError) as exc:
        services["category_gateway"].find_all(SearchQuery(sort="popularity"))

    assert exc.value.code == "INVALID_SORT_FIELD"


def test_exists_by_ids_preserves_input_order(services):
    gateway = services["category_gateway"]
    filmes, series = _seed(gateway, "Filmes", "Series")

    found = gateway.exists_by_ids([series.id, CategoryID("missing"), filmes.id])

    assert found == [series.id, filmes.id]
    assert gateway.exists_by_ids([]) == []


@pytest.mark.parametrize("terms", ["DOCUMENTÁRIOS", "entários", "Ação"])
def test_find_all_folds_case_of_accented_letters(services, terms):
    gateway = services["category_gateway"]
    gateway.create(Category.create("Documentários", "Filmes de ação", True))
    gateway.create(Category.create("Series", None, True))

    page = gateway.find_all(SearchQuery(terms=terms))

    assert page.total == 1
    assert [c.name for c in page.items] == ["Documentários"]


def test_deleting_a_category_drops_it_from_linked_genres(services):
    categories = services["category_gateway"]
    filmes = categories.create(Category.create("Filmes", None, True))
    series = categories.create(Category.create("Series", None, True))
    created = services["create_genre"].execute(
        CreateGenreCommand.with_("Ação", True, [filmes.id.value, series.id.value])
    ).get()

    services["delete_category"].execute(filmes.id.value)

    genre = services["get_genre"].execute(created.id)
    assert genre.categories == [series.id.value]
    assert services["session"].query(GenreCategoryORM).count() == 1

    result = services["update_genre"].execute(
        UpdateGenreCommand.with_(created.id, "Ação", True, genre.categories)
    )
    assert result.is_right
