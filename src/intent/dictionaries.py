"""English vocabularies used by the enrichment rules.

These mappings should remain small and deterministic; anything not listed here is left for the
model to fill.
"""

from __future__ import annotations

import re

from src.intent.schema import RatingOp

GENRE_TERMS: tuple[str, ...] = (
    "action",
    "drama",
    "comedy",
    "thriller",
    "horror",
    "romance",
    "sci-fi",
    "adventure",
)

# `sci-fi` is also written `scifi` or `sci fi`.
_GENRE_PATTERN = "|".join(
    r"sci[- ]?fi" if term == "sci-fi" else re.escape(term) for term in GENRE_TERMS
)
GENRE_RE = re.compile(rf"\b({_GENRE_PATTERN})\b", flags=re.IGNORECASE)

RATING_SYMBOL_TO_OP: dict[str, RatingOp] = {
    ">": RatingOp.GT,
    ">=": RatingOp.GTE,
    "<": RatingOp.LT,
    "<=": RatingOp.LTE,
    "=": RatingOp.EQ,
}


def rating_op_for_symbol(symbol: str | None) -> RatingOp:
    """Map a comparison symbol to its rating suffix (unknown symbols compare as `GT`)."""

    return RATING_SYMBOL_TO_OP.get((symbol or "").strip(), RatingOp.GT)


def detect_genre(text: str) -> str | None:
    """Return the first known genre token in the text, exactly as the user wrote it."""

    match = GENRE_RE.search(text or "")
    if not match:
        return None
    return match.group(1)
