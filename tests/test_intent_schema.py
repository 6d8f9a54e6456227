"""Tests for the lenient Intent Pydantic schema."""

from __future__ import annotations

from src.intent.schema import DEFAULT_FIELDS, Filters, Intent, RatingFilter, intent_from_obj


def test_missing_fields_default_to_zero_values() -> None:
    intent = intent_from_obj({})
    assert intent.intent == ""
    assert intent.filters == Filters()
    assert intent.fields == ()
    assert intent.top_n is None


def test_json_keys_map_to_filter_fields() -> None:
    intent = intent_from_obj(
        {
            "intent": "query",
            "filters": {
                "titleExact": "Avatar",
                "year_GTE": 2005,
                "rating": {"op": "GTE", "value": 7.5},
            },
            "fields": ["title", "year"],
            "top_n": 3,
        }
    )
    assert intent.filters.title_exact == "Avatar"
    assert intent.filters.year_gte == 2005
    assert intent.filters.rating == RatingFilter(op="GTE", value=7.5)
    assert intent.fields == ("title", "year")
    assert intent.top_n == 3


def test_unknown_filter_keys_are_dropped() -> None:
    intent = intent_from_obj({"filters": {"language": "French", "genre": "drama"}})
    assert intent.filters.genre == "drama"
    assert "language" not in intent.filters.model_dump()


def test_numeric_ids_become_strings() -> None:
    intent = intent_from_obj({"filters": {"ids": 42}})
    assert intent.filters.ids == "42"


def test_wrongly_shaped_values_fall_back_to_unset() -> None:
    intent = intent_from_obj(
        {
            "filters": {"rating": "high", "director": ["a", "b"]},
            "fields": "title",
            "top_n": "lots",
        }
    )
    assert intent.filters.rating is None
    assert intent.filters.director is None
    assert intent.fields == ()
    assert intent.top_n is None


def test_null_filters_become_empty() -> None:
    assert intent_from_obj({"filters": None}).filters == Filters()


def test_non_string_field_names_are_skipped() -> None:
    intent = intent_from_obj({"fields": ["title", 3, None, "genres"]})
    assert intent.fields == ("title", "genres")


def test_default_fields_cover_seven_projections() -> None:
    assert DEFAULT_FIELDS == ("ids", "title", "year", "rating", "directors", "actors", "genres")
    assert Intent(fields=DEFAULT_FIELDS).fields == DEFAULT_FIELDS
