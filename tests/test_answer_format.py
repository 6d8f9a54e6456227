"""Tests for prose rendering of result rows."""

from __future__ import annotations

import pytest

from src.answer.format import NO_MOVIES_FOUND, format_movie, format_movies

_AVATAR = {
    "ids": "1",
    "title": "Avatar",
    "year": 2009,
    "rating": 7.8,
    "directors": [{"name": "James Cameron"}],
    "actors": [{"name": "Sam Worthington"}, {"name": "Zoe Saldana"}],
    "genres": [{"type": "Action"}, {"type": "Sci-Fi"}],
}


@pytest.mark.parametrize("rows", [None, []])
def test_no_rows(rows: list | None) -> None:
    assert format_movies(rows) == "No movies found."
    assert NO_MOVIES_FOUND == "No movies found."


def test_full_row() -> None:
    assert format_movie(_AVATAR) == (
        "- Avatar (2009) [id: 1] — directors: James Cameron — rating: 7.8"
        " — genres: Action, Sci-Fi — actors: Sam Worthington, Zoe Saldana"
    )


def test_genres_and_actors_are_optional() -> None:
    row = {"ids": "7", "title": "Heat", "year": 1995, "rating": 8, "directors": [], "genres": []}
    assert format_movie(row) == "- Heat (1995) [id: 7] — directors:  — rating: 8"


def test_integral_float_rating_prints_without_fraction() -> None:
    row = dict(_AVATAR, rating=8.0, actors=[], genres=[])
    assert format_movie(row).endswith("rating: 8")


def test_missing_scalars() -> None:
    assert format_movie({"title": "Untitled"}) == (
        "- Untitled (n/a) [id: n/a] — directors:  — rating: n/a"
    )


def test_rows_keep_received_order() -> None:
    rows = [
        {"ids": "2", "title": "B", "year": 2001, "rating": 5},
        {"ids": "1", "title": "A", "year": 2000, "rating": 6},
    ]
    lines = format_movies(rows).split("\n")
    assert [line.split(" (")[0] for line in lines] == ["- B", "- A"]
