"""Intent parsing from a raw model response.

envelope -> text payload -> first balanced JSON object -> decoded `Intent`.
Each failure has its own exception type so the pipeline can log the cause precisely while still
replying with a single generic message.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from src.intent.extract import extract_first_json_object
from src.intent.normalize import extract_model_text
from src.intent.schema import Intent, intent_from_obj


class IntentParserError(ValueError):
    """Raised when the model response cannot be turned into an Intent."""


class NoExtractableTextError(IntentParserError):
    """The model envelope contained no text at all."""


class NoJsonFoundError(IntentParserError):
    """The model text contained no balanced JSON object."""


class MalformedJsonError(IntentParserError):
    """A balanced object was found but did not decode into an Intent."""


def parse_intent_json(extracted: str) -> Intent:
    """Decode an extracted JSON object into an Intent.

    Raises:
        MalformedJsonError: If decoding fails or the top-level value is not an object.
    """

    try:
        obj = json.loads(extracted)
    except json.JSONDecodeError as exc:
        raise MalformedJsonError(f"invalid JSON: {exc.msg} at pos {exc.pos}") from exc
    except ValueError as exc:
        # Oversized integer literals fail conversion, not parsing.
        raise MalformedJsonError(f"invalid JSON: {exc}") from exc

    if not isinstance(obj, dict):
        raise MalformedJsonError("intent JSON is not an object")

    try:
        return intent_from_obj(obj)
    except ValidationError as exc:
        raise MalformedJsonError(f"intent JSON does not match schema: {exc}") from exc


def parse_intent_from_envelope(envelope: Any) -> Intent:
    """Parse a model response envelope into an (unenriched) Intent.

    Raises:
        NoExtractableTextError: If the envelope has no text payload.
        NoJsonFoundError: If the text has no balanced JSON object.
        MalformedJsonError: If the object does not decode.
    """

    text = extract_model_text(envelope).strip()
    if not text:
        raise NoExtractableTextError("model response has no text")

    extracted = extract_first_json_object(text)
    if extracted is None:
        raise NoJsonFoundError("no JSON object in model response")

    return parse_intent_json(extracted)
