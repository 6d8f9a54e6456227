"""Tests for the deterministic GraphQL builder (allowlists + string escaping)."""

from __future__ import annotations

import itertools

import pytest

from src.gql.builder import build_query, build_selection, build_where, escape_string
from src.intent.schema import DEFAULT_FIELDS, Filters, Intent, intent_from_obj

_DEFAULT_SELECTION = "ids title year rating directors { name } actors { name } genres { type }"

_ALL_FILTERS = {
    "year": 2012,
    "rating": {"op": "GTE", "value": 7},
    "genre": "drama",
    "actor": "Hanks",
    "titleExact": "Cast Away",
    "year_GTE": 2000,
    "director": "Zemeckis",
    "ids": "12",
}

_EXPECTED_ALL = (
    '{ ids: "12", title: "Cast Away", directors_SOME: { name_CONTAINS: "Zemeckis" }, '
    'actors_SOME: { name_CONTAINS: "Hanks" }, genres_SOME: { type_CONTAINS: "drama" }, '
    "rating_GTE: 7, year_GTE: 2000, year: 2012 }"
)


def test_no_filters_means_no_where() -> None:
    built = build_query(Intent(fields=DEFAULT_FIELDS))
    assert built.where is None
    assert built.document == f"query {{ movies {{ {_DEFAULT_SELECTION} }} }}"


def test_fragment_order_is_fixed() -> None:
    assert build_where(Filters.model_validate(_ALL_FILTERS)) == _EXPECTED_ALL


# A spread of the 8! insertion orders.
_KEY_ORDERS = list(itertools.islice(itertools.permutations(_ALL_FILTERS), 0, None, 997))


@pytest.mark.parametrize("keys", _KEY_ORDERS)
def test_fragment_order_ignores_key_insertion_order(keys: tuple[str, ...]) -> None:
    filters = Filters.model_validate({k: _ALL_FILTERS[k] for k in keys})
    assert build_where(filters) == _EXPECTED_ALL


def test_title_exact_wins_over_contains() -> None:
    where = build_where(Filters.model_validate({"title": "Cast", "titleExact": "Cast Away"}))
    assert where == '{ title: "Cast Away" }'


def test_title_contains() -> None:
    assert build_where(Filters(title="Matrix")) == '{ title_CONTAINS: "Matrix" }'


def test_double_quotes_are_escaped() -> None:
    where = build_where(Filters(title='He said "hi"'))
    assert where == '{ title_CONTAINS: "He said \\"hi\\"" }'


def test_escape_only_touches_double_quotes() -> None:
    assert escape_string("O'Brien \\ {x}") == "O'Brien \\ {x}"
    assert escape_string('a"b') == 'a\\"b'


@pytest.mark.parametrize(
    ("op", "expected"),
    [("GT", "rating_GT: 8"), ("gte", "rating_GTE: 8"), ("LT", "rating_LT: 8"),
     ("LTE", "rating_LTE: 8"), ("EQ", "rating_EQ: 8"), ("BETWEEN", "rating_GT: 8")],
)
def test_rating_suffixes(op: str, expected: str) -> None:
    filters = Filters.model_validate({"rating": {"op": op, "value": 8}})
    assert build_where(filters) == f"{{ {expected} }}"


def test_rating_keeps_fraction() -> None:
    where = build_where(Filters.model_validate({"rating": {"op": "GT", "value": "7.5"}}))
    assert where == "{ rating_GT: 7.5 }"


def test_non_numeric_values_are_dropped() -> None:
    filters = Filters.model_validate(
        {"rating": {"op": "GT", "value": "great"}, "year": "recent", "year_GTE": "the nineties"}
    )
    assert build_where(filters) is None


def test_numeric_strings_for_years_are_coerced() -> None:
    filters = Filters.model_validate({"year": "1999", "year_GTE": 1990.0})
    assert build_where(filters) == "{ year_GTE: 1990, year: 1999 }"


def test_selection_keeps_request_order_and_drops_unknown() -> None:
    assert build_selection(["genres", "title", "budget", "directors"]) == (
        "genres { type } title directors { name }"
    )


def test_selection_deduplicates() -> None:
    assert build_selection(["title", "title", "actors", "actors"]) == "title actors { name }"


def test_selection_falls_back_to_default() -> None:
    assert build_selection([]) == _DEFAULT_SELECTION
    assert build_selection(["budget", "poster"]) == _DEFAULT_SELECTION


def test_end_to_end_scenario_document() -> None:
    intent = intent_from_obj(
        {
            "filters": {"genre": "action", "rating": {"op": "GT", "value": 8.0}, "year_GTE": 2010},
            "fields": list(DEFAULT_FIELDS),
            "top_n": 5,
        }
    )
    built = build_query(intent)
    assert built.where == (
        '{ genres_SOME: { type_CONTAINS: "action" }, rating_GT: 8, year_GTE: 2010 }'
    )
    assert built.document == (
        "query { movies(where: "
        '{ genres_SOME: { type_CONTAINS: "action" }, rating_GT: 8, year_GTE: 2010 }'
        f") {{ {_DEFAULT_SELECTION} }} }}"
    )


_HUGE_INT = int("1" + "0" * 400)


@pytest.mark.parametrize(
    "filters",
    [
        {"year": _HUGE_INT, "genre": "drama"},
        {"year_GTE": _HUGE_INT, "genre": "drama"},
        {"rating": {"op": "GT", "value": _HUGE_INT}, "genre": "drama"},
    ],
)
def test_numbers_too_large_for_a_float_are_dropped(filters: dict) -> None:
    assert build_where(Filters.model_validate(filters)) == (
        '{ genres_SOME: { type_CONTAINS: "drama" } }'
    )
