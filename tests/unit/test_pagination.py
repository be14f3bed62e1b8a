import pytest

from worldscribe.db.pagination import MAX_SQL_INTEGER, normalize_page_params, paginate, paginate_sequence
from worldscribe.utils.settings import refresh_settings

LETTERS = [f"Item {c}" for c in "ABCDEFGHIJ"]


@pytest.mark.parametrize(
    "page,size,expected",
    [
        (None, None, (1, 10)),
        (2, None, (2, 10)),
        (None, 3, (1, 3)),
        (0, 0, (1, 1)),
        (-4, -1, (1, 1)),
        (3, 1000, (3, 100)),
    ],
)
def test_normalize_page_params_defaults_and_clamping(page, size, expected):
    assert normalize_page_params(page, size) == expected


def test_normalize_page_params_follows_settings(monkeypatch):
    monkeypatch.setenv("WORLDSCRIBE_DEFAULT_PAGE_SIZE", "4")
    monkeypatch.setenv("WORLDSCRIBE_MAX_PAGE_SIZE", "6")
    refresh_settings()
    assert normalize_page_params(None, None) == (1, 4)
    assert normalize_page_params(1, 50) == (1, 6)


def test_paginate_sequence_windows():
    second = paginate_sequence(LETTERS, 2, 3)
    assert second.items == ["Item D", "Item E", "Item F"]
    assert second.has_more is True

    last = paginate_sequence(LETTERS, 4, 3)
    assert last.items == ["Item J"]
    assert last.has_more is False

    beyond = paginate_sequence(LETTERS, 5, 3)
    assert beyond.items == []
    assert beyond.has_more is False


def test_paginate_sequence_exact_fit_has_no_more():
    page = paginate_sequence(LETTERS[:6], 2, 3)
    assert page.items == ["Item D", "Item E", "Item F"]
    assert page.has_more is False


class RecordingQuery:
    """Stand-in for an ORM query that records the window it was asked for."""

    def __init__(self, rows=()):
        self.rows = list(rows)
        self.offset_value = None
        self.limit_value = None

    def order_by(self, *clauses):
        return self

    def offset(self, value):
        self.offset_value = value
        return self

    def limit(self, value):
        self.limit_value = value
        return self

    def all(self):
        return self.rows


def test_paginate_passes_offset_and_lookahead_limit():
    query = RecordingQuery(rows=["a", "b", "c", "d"])
    page = paginate(query, 2, 3)
    assert (query.offset_value, query.limit_value) == (3, 4)
    assert page.items == ["a", "b", "c"]
    assert page.has_more is True


def test_paginate_clamps_offset_to_sql_integer_range():
    query = RecordingQuery()
    page = paginate(query, 10 ** 19, 3)
    assert query.offset_value == MAX_SQL_INTEGER - 4
    assert query.offset_value + query.limit_value <= MAX_SQL_INTEGER
    assert page.items == []
    assert page.has_more is False
