import pytest

from core.domain.pagination import Pagination, SearchQuery
from core.exceptions import ValidationError


def test_search_query_defaults_and_normalization():
    query = SearchQuery()
    assert (query.page, query.per_page, query.terms, query.sort, query.direction) == (0, 10, "", "name", "asc")

    normalized = SearchQuery(page=2, per_page=5, terms=None, sort="createdAt", direction="DESC")
    assert normalized.terms == ""
    assert normalized.direction == "desc"
    assert normalized.offset == 10


def test_search_query_is_immutable():
    query = SearchQuery()
    with pytest.raises(AttributeError):
        query.page = 3


def test_search_query_rejects_invalid_values_with_all_errors():
    with pytest.raises(ValidationError) as exc:
        SearchQuery(page=-1, per_page=0, terms="", sort=" ", direction="up")

    assert exc.value.code == "INVALID_SEARCH_QUERY"
    assert len(exc.value.errors) == 4


def test_pagination_map_preserves_metadata_and_order():
    page = Pagination(current_page=1, per_page=3, total=7, items=[1, 2, 3])

    mapped = page.map(lambda item: f"#{item}")

    assert mapped.current_page == 1
    assert mapped.per_page == 3
    assert mapped.total == 7
    assert mapped.items == ["#1", "#2", "#3"]
    assert page.items == [1, 2, 3]


def test_empty_pagination_for_query():
    query = SearchQuery(page=4, per_page=25)

    page = Pagination.empty(query)

    assert page == Pagination(4, 25, 0, [])
    assert page.map(str).items == []
