"""Rules-based intent enrichment.

Small models often return an intent with empty filters even when the question is explicit. The
rules below re-read the *original* user text and fill the slots the model left empty.

Every rule is a pure `(intent, text) -> intent` step and only ever writes a slot that is still
unset, so anything the model produced wins over the heuristics.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from src.intent.dictionaries import detect_genre, rating_op_for_symbol
from src.intent.schema import DEFAULT_FIELDS, Intent, RatingFilter, RatingOp

EnrichRule = Callable[[Intent, str], Intent]

_EXPLICIT_TITLE_RE = re.compile(r"title\s*(?:is|:|=)?\s*[\"']([^\"']+)[\"']", flags=re.IGNORECASE)
_QUOTED_RE = re.compile(r"[\"']([^\"']{2,200})[\"']")
_TITLE_WORD_RE = re.compile(r"\b(?:title|movie)\b", flags=re.IGNORECASE)

_DIRECTOR_RE = re.compile(
    r"\bdirector\b\s*(?:is\b|=|:)?\s*([a-z][a-z .'\-]*)",
    flags=re.IGNORECASE,
)
_ACTOR_RE = re.compile(
    r"\bactor\b\s*(?:is\b|=|:)?\s*([a-z][a-z .'\-]*)",
    flags=re.IGNORECASE,
)

# Case-sensitive: "ID" in prose is not a movie id reference.
_ID_RE = re.compile(r"\bid\s*([0-9]+)\b")

_NUMBER = r"(\d+(?:\.\d+)?)"
_RATING_CMP_RE = re.compile(rf"rating\s*(>=|>|<=|<|=)\s*{_NUMBER}", flags=re.IGNORECASE)
_RATING_ABOVE_RE = re.compile(rf"with\s+rating\s+(?:above|over)\s*{_NUMBER}", flags=re.IGNORECASE)

_AFTER_YEAR_RE = re.compile(r"\bafter\s+(\d{4})\b", flags=re.IGNORECASE)
_FROM_YEAR_RE = re.compile(r"\bfrom\s+(\d{4})\b", flags=re.IGNORECASE)

_TOP_N_RE = re.compile(r"\btop\s+([0-9]+)\b", flags=re.IGNORECASE)


def _is_unset(value: Any) -> bool:
    return value is None or value == ""


def _fill_filter(intent: Intent, field: str, value: Any) -> Intent:
    """Return `intent` with `filters.<field>` set to `value`, unless it is already set."""

    if value is None or not _is_unset(getattr(intent.filters, field)):
        return intent
    filters = intent.filters.model_copy(update={field: value})
    return intent.model_copy(update={"filters": filters})


def fill_title(intent: Intent, text: str) -> Intent:
    """Quoted titles become exact-title filters.

    `title "Avatar"` (or `title is / : / = ...`) always counts. Otherwise a lone quoted string is
    used only when the text talks about a "title" or "movie".
    """

    filters = intent.filters
    if not _is_unset(filters.title) or not _is_unset(filters.title_exact):
        return intent

    match = _EXPLICIT_TITLE_RE.search(text)
    if match:
        return _fill_filter(intent, "title_exact", match.group(1).strip() or None)

    quoted = _QUOTED_RE.findall(text)
    if len(quoted) == 1 and _TITLE_WORD_RE.search(text):
        return _fill_filter(intent, "title_exact", quoted[0].strip() or None)
    return intent


def _person_rule(field: str, pattern: re.Pattern[str]) -> EnrichRule:
    def rule(intent: Intent, text: str) -> Intent:
        if not _is_unset(getattr(intent.filters, field)):
            return intent
        match = pattern.search(text)
        if not match:
            return intent
        return _fill_filter(intent, field, match.group(1).strip() or None)

    rule.__name__ = f"fill_{field}"
    return rule


fill_director = _person_rule("director", _DIRECTOR_RE)
fill_actor = _person_rule("actor", _ACTOR_RE)


def fill_genre(intent: Intent, text: str) -> Intent:
    return _fill_filter(intent, "genre", detect_genre(text))


def fill_ids(intent: Intent, text: str) -> Intent:
    match = _ID_RE.search(text)
    return _fill_filter(intent, "ids", match.group(1) if match else None)


def _match_rating(text: str) -> RatingFilter | None:
    match = _RATING_CMP_RE.search(text)
    if match:
        op = rating_op_for_symbol(match.group(1))
        return RatingFilter(op=op.value, value=float(match.group(2)))

    # "with rating above/over N" carries no symbol; it always means strictly greater.
    match = _RATING_ABOVE_RE.search(text)
    if match:
        return RatingFilter(op=RatingOp.GT.value, value=float(match.group(1)))
    return None


def fill_rating(intent: Intent, text: str) -> Intent:
    if intent.filters.rating is not None:
        return intent
    return _fill_filter(intent, "rating", _match_rating(text))


def fill_year_gte(intent: Intent, text: str) -> Intent:
    match = _AFTER_YEAR_RE.search(text) or _FROM_YEAR_RE.search(text)
    return _fill_filter(intent, "year_gte", int(match.group(1)) if match else None)


def fill_top_n(intent: Intent, text: str) -> Intent:
    if intent.top_n is not None:
        return intent
    match = _TOP_N_RE.search(text)
    if not match:
        return intent
    return intent.model_copy(update={"top_n": int(match.group(1))})


def fill_default_fields(intent: Intent, text: str) -> Intent:
    if intent.fields:
        return intent
    return intent.model_copy(update={"fields": DEFAULT_FIELDS})


ENRICH_RULES: tuple[EnrichRule, ...] = (
    fill_title,
    fill_director,
    fill_actor,
    fill_genre,
    fill_ids,
    fill_rating,
    fill_year_gte,
    fill_top_n,
    fill_default_fields,
)


def enrich_intent(intent: Intent, text: str) -> Intent:
    """Apply every enrichment rule, in order, to the intent decoded from the model."""

    raw = (text or "").strip()
    for rule in ENRICH_RULES:
        intent = rule(intent, raw)
    return intent
