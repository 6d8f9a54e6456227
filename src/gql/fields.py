"""Allowlisted GraphQL selections.

Every field name emitted into a query document must come from these mappings; field names asked
for by the model are only ever used as lookup keys.
"""

from __future__ import annotations

SCALAR_FIELDS: tuple[str, ...] = ("ids", "title", "year", "rating")

RELATIONSHIP_SELECTIONS: dict[str, str] = {
    "directors": "directors { name }",
    "actors": "actors { name }",
    "genres": "genres { type }",
}
