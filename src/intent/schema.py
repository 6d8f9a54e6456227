"""Intent JSON schema (Pydantic models).

This schema is the contract between the model output (plus the enrichment rules) and the
deterministic GraphQL builder. Validation is deliberately lenient: the model is free-form and only
structural JSON validity is enforced. Unknown keys are dropped, and values of the wrong shape fall
back to "unset" instead of failing the request.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_FIELDS: tuple[str, ...] = (
    "ids",
    "title",
    "year",
    "rating",
    "directors",
    "actors",
    "genres",
)


class RatingOp(StrEnum):
    """Supported rating comparison suffixes."""

    GT = "GT"
    GTE = "GTE"
    LT = "LT"
    LTE = "LTE"
    EQ = "EQ"


class RatingFilter(BaseModel):
    """A numeric rating comparison.

    `value` is kept as received; the builder drops the predicate if it is not numeric.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    op: str | None = RatingOp.GT.value
    value: Any = None

    @field_validator("op", mode="before")
    @classmethod
    def drop_non_text_op(cls, value: Any) -> Any:
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            return value
        return None


class Filters(BaseModel):
    """Movie filters combined using logical AND.

    Field names mirror the JSON keys the model is asked to produce (`titleExact`, `year_GTE`).
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        str_strip_whitespace=True,
    )

    ids: str | None = None
    title: str | None = None
    title_exact: str | None = Field(default=None, alias="titleExact")
    director: str | None = None
    actor: str | None = None
    genre: str | None = None
    rating: RatingFilter | None = None
    year: Any = None
    year_gte: Any = Field(default=None, alias="year_GTE")

    @field_validator("rating", mode="before")
    @classmethod
    def drop_non_mapping_rating(cls, value: Any) -> Any:
        """A rating that is not an object carries no usable operator; treat it as unset."""

        if isinstance(value, (dict, RatingFilter)):
            return value
        return None

    @field_validator("ids", "title", "title_exact", "director", "actor", "genre", mode="before")
    @classmethod
    def drop_non_scalar_text(cls, value: Any) -> Any:
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            return value
        return None


class Intent(BaseModel):
    """A decoded (and later enriched) query intent."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    intent: str = ""
    filters: Filters = Field(default_factory=Filters)
    fields: tuple[str, ...] = ()
    top_n: int | None = None

    @field_validator("intent", mode="before")
    @classmethod
    def default_intent(cls, value: Any) -> Any:
        return value if isinstance(value, str) else ""

    @field_validator("filters", mode="before")
    @classmethod
    def default_filters(cls, value: Any) -> Any:
        if isinstance(value, (dict, Filters)):
            return value
        return {}

    @field_validator("fields", mode="before")
    @classmethod
    def keep_string_fields(cls, value: Any) -> Any:
        """Keep only string entries; anything that is not a list means "no fields requested"."""

        if not isinstance(value, (list, tuple)):
            return ()
        return tuple(f for f in value if isinstance(f, str))

    @field_validator("top_n", mode="before")
    @classmethod
    def coerce_top_n(cls, value: Any) -> Any:
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError):
            return None


def intent_from_obj(obj: Any) -> Intent:
    """Validate and parse an Intent from an arbitrary decoded JSON object."""

    return Intent.model_validate(obj)
