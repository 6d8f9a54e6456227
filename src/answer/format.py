"""Prose rendering of `movies` rows."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

NO_MOVIES_FOUND = "No movies found."

_SEPARATOR = " — "


def _format_scalar(value: Any) -> str:
    if value is None:
        return "n/a"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _join_names(items: Any, key: str) -> str:
    if not isinstance(items, list):
        return ""
    names = (item.get(key) for item in items if isinstance(item, Mapping))
    return ", ".join(str(name) for name in names if name is not None)


def format_movie(row: Mapping[str, Any]) -> str:
    """Render one row as `- Title (year) [id: ..] — directors: .. — rating: ..`.

    Genres and actors are appended only when the row has any.
    """

    line = (
        f"- {_format_scalar(row.get('title'))} ({_format_scalar(row.get('year'))}) "
        f"[id: {_format_scalar(row.get('ids'))}]"
        f"{_SEPARATOR}directors: {_join_names(row.get('directors'), 'name')}"
        f"{_SEPARATOR}rating: {_format_scalar(row.get('rating'))}"
    )

    genres = _join_names(row.get("genres"), "type")
    if genres:
        line += f"{_SEPARATOR}genres: {genres}"

    actors = _join_names(row.get("actors"), "name")
    if actors:
        line += f"{_SEPARATOR}actors: {actors}"

    return line


def format_movies(rows: Iterable[Mapping[str, Any]] | None) -> str:
    """Render rows in the order received, one line each, or the "no results" sentence."""

    lines = [format_movie(row) for row in rows or ()]
    if not lines:
        return NO_MOVIES_FOUND
    return "\n".join(lines)
