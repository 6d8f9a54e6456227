"""Deterministic GraphQL builder.

The builder converts an enriched `Intent` into a `movies` query for the Neo4j GraphQL backend.
Field names and predicate suffixes are allowlisted; user-provided strings only ever appear inside
double-quoted literals with `"` escaped.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from src.gql.fields import RELATIONSHIP_SELECTIONS, SCALAR_FIELDS
from src.intent.schema import DEFAULT_FIELDS, Filters, Intent, RatingFilter, RatingOp


@dataclass(frozen=True)
class BuiltQuery:
    """A compiled `movies` query: the `where` object (if any) and the selection set."""

    where: str | None
    selection: str

    @property
    def document(self) -> str:
        if self.where is None:
            return f"query {{ movies {{ {self.selection} }} }}"
        return f"query {{ movies(where: {self.where}) {{ {self.selection} }} }}"


def escape_string(value: Any) -> str:
    """Escape a value for embedding inside a double-quoted GraphQL string."""

    return str(value).replace('"', '\\"')


def _quoted(value: Any) -> str:
    return f'"{escape_string(value)}"'


def _coerce_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def format_number(number: float) -> str:
    """Render a number as a GraphQL literal (`8.0` -> `8`, `7.5` -> `7.5`)."""

    if number.is_integer():
        return str(int(number))
    return repr(number)


def _rating_fragment(rating: RatingFilter) -> str | None:
    value = _coerce_number(rating.value)
    if value is None:
        return None

    op_name = str(rating.op or RatingOp.GT.value).strip().upper()
    op = RatingOp.__members__.get(op_name, RatingOp.GT)
    return f"rating_{op.value}: {format_number(value)}"


def _year_fragment(name: str, raw: Any) -> str | None:
    value = _coerce_number(raw)
    if value is None:
        return None
    return f"{name}: {format_number(value)}"


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


def build_where(filters: Filters) -> str | None:
    """Build the `where` input object, or `None` when nothing filters the query.

    Fragment order is fixed: ids, title (exact or contains), director, actor, genre, rating,
    year_GTE, year.
    """

    parts: list[str] = []

    if _is_set(filters.ids):
        parts.append(f"ids: {_quoted(filters.ids)}")

    if _is_set(filters.title_exact):
        parts.append(f"title: {_quoted(filters.title_exact)}")
    elif _is_set(filters.title):
        parts.append(f"title_CONTAINS: {_quoted(filters.title)}")

    if _is_set(filters.director):
        parts.append(f"directors_SOME: {{ name_CONTAINS: {_quoted(filters.director)} }}")
    if _is_set(filters.actor):
        parts.append(f"actors_SOME: {{ name_CONTAINS: {_quoted(filters.actor)} }}")
    if _is_set(filters.genre):
        parts.append(f"genres_SOME: {{ type_CONTAINS: {_quoted(filters.genre)} }}")

    optional_parts = (
        _rating_fragment(filters.rating) if filters.rating is not None else None,
        _year_fragment("year_GTE", filters.year_gte) if _is_set(filters.year_gte) else None,
        _year_fragment("year", filters.year) if _is_set(filters.year) else None,
    )
    parts.extend(p for p in optional_parts if p is not None)

    if not parts:
        return None
    return "{ " + ", ".join(parts) + " }"


def build_selection(fields: Iterable[str]) -> str:
    """Build the selection set for the requested fields (unknown names are dropped)."""

    out: list[str] = []
    for field in fields:
        if field in SCALAR_FIELDS:
            selection = field
        elif field in RELATIONSHIP_SELECTIONS:
            selection = RELATIONSHIP_SELECTIONS[field]
        else:
            continue
        if selection not in out:
            out.append(selection)

    if not out:
        return build_selection(DEFAULT_FIELDS)
    return " ".join(out)


def build_query(intent: Intent) -> BuiltQuery:
    """Compile an enriched Intent into a GraphQL `movies` query."""

    return BuiltQuery(where=build_where(intent.filters), selection=build_selection(intent.fields))
