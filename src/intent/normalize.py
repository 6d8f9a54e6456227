"""Model response normalization.

The text-generation service returns an envelope whose shape depends on the backend (and sometimes
on the model). This module reduces any decoded envelope to the single best candidate text payload.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping
from typing import Any

# Checked in this order; `response` is what Ollama's /api/generate uses.
_TEXT_KEYS: tuple[str, ...] = ("response", "output", "text")
_ARRAY_KEY = "response"

_MAX_VISITED_NODES = 10_000


def _from_text_keys(envelope: Mapping[str, Any]) -> str | None:
    for key in _TEXT_KEYS:
        value = envelope.get(key)
        if isinstance(value, str):
            return value
    return None


def _from_response_array(envelope: Mapping[str, Any]) -> str | None:
    entries = envelope.get(_ARRAY_KEY)
    if not isinstance(entries, list):
        return None

    for entry in entries:
        if isinstance(entry, str):
            return entry
        if isinstance(entry, Mapping) and isinstance(entry.get("content"), str):
            return entry["content"]
    return None


def _first_string_breadth_first(envelope: Any) -> str:
    queue: deque[Any] = deque([envelope])
    visited = 0

    while queue and visited < _MAX_VISITED_NODES:
        current = queue.popleft()
        visited += 1

        if isinstance(current, Mapping):
            children = current.values()
        elif isinstance(current, list):
            children = current
        else:
            continue

        for value in children:
            if isinstance(value, str) and value.strip():
                return value
            if isinstance(value, (Mapping, list)):
                queue.append(value)

    return ""


def extract_model_text(envelope: Any) -> str:
    """Return the best-effort text payload of a model response envelope.

    Priority:
        1) a string envelope is returned verbatim;
        2) the first string among `response`, `output`, `text`;
        3) a `response` array: first string entry, else first entry with a string `content`;
        4) breadth-first search for the first non-blank string anywhere in the envelope.

    Never raises; returns `""` when the envelope carries no text at all.
    """

    if envelope is None:
        return ""
    if isinstance(envelope, str):
        return envelope
    if not isinstance(envelope, (Mapping, list)):
        return ""

    if isinstance(envelope, Mapping):
        text = _from_text_keys(envelope)
        if text is not None:
            return text

        text = _from_response_array(envelope)
        if text is not None:
            return text

    return _first_string_breadth_first(envelope)
