"""Balanced-brace JSON object extraction.

Small models rarely return *only* JSON: they wrap it in prose, code fences or trailing remarks.
`extract_first_json_object` finds the first balanced `{...}` block without trying to decode it.
"""

from __future__ import annotations

_QUOTES = frozenset({'"', "'"})


def extract_first_json_object(text: str | None) -> str | None:
    """Return the first balanced `{...}` substring of `text`, or `None`.

    Braces inside string literals (single or double quoted, with backslash escapes) do not count
    towards the nesting depth. The scan stops at the brace that closes the first object, so any
    following objects or prose are ignored.
    """

    if not text or not isinstance(text, str):
        return None

    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    quote: str | None = None
    escaped = False

    for idx in range(start, len(text)):
        ch = text[idx]

        if quote is not None:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
            continue

        if ch in _QUOTES:
            quote = ch
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start: idx + 1]

    return None
