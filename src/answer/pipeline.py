"""End-to-end answering pipeline.

Hard contract: `answer` never raises for pipeline failures. Every failure is logged with its cause
and converted to one fixed, user-facing sentence; the cause itself is never shown to the user.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from time import monotonic
from typing import Any, Protocol

from src.answer.format import format_movies
from src.gql.builder import BuiltQuery, build_query
from src.gql.executor import QueryExecutionError
from src.intent.enrich import enrich_intent
from src.intent.llm_gateway import ModelGatewayError
from src.intent.parser import (
    IntentParserError,
    MalformedJsonError,
    parse_intent_from_envelope,
)
from src.intent.schema import Intent

logger = logging.getLogger(__name__)

EMPTY_INPUT_REPLY = "Please provide input."
UNREADABLE_INTENT_REPLY = "No result — could not read intent JSON."
INTERNAL_ERROR_REPLY = "Internal server error."


class IntentSource(Protocol):
    def request_intent(self, user_text: str) -> Any: ...


class QueryRunner(Protocol):
    def execute(self, document: str) -> list[dict[str, Any]] | None: ...


@dataclass(frozen=True)
class AnswerResult:
    """The pipeline reply plus the intermediate artifacts, when the pipeline got that far."""

    output: str
    intent: Intent | None = None
    query: BuiltQuery | None = None


def compile_question(envelope: Any, user_text: str) -> tuple[Intent, BuiltQuery]:
    """Parse a model envelope, enrich it from `user_text` and compile the GraphQL query.

    Raises:
        IntentParserError: If no intent can be read from the envelope.
    """

    intent = enrich_intent(parse_intent_from_envelope(envelope), user_text)
    return intent, build_query(intent)


def answer(text: str | None, *, gateway: IntentSource, executor: QueryRunner) -> AnswerResult:
    """Answer a natural-language movie question."""

    started = monotonic()
    raw_text = text or ""
    if not raw_text.strip():
        return AnswerResult(output=EMPTY_INPUT_REPLY)

    logger.debug("question text=%r", raw_text)

    intent: Intent | None = None
    query: BuiltQuery | None = None
    try:
        envelope = gateway.request_intent(raw_text)
        intent, query = compile_question(envelope, raw_text)
        logger.info("compiled query=%s", query.document)

        rows = executor.execute(query.document)
        output = format_movies(rows)

        latency_ms = int((monotonic() - started) * 1000)
        logger.info(
            "handled rows=%d top_n=%s latency_ms=%d",
            len(rows or ()),
            intent.top_n,
            latency_ms,
        )
        return AnswerResult(output=output, intent=intent, query=query)
    except MalformedJsonError as exc:
        logger.warning("malformed intent JSON reason=%s", exc)
        return AnswerResult(output=UNREADABLE_INTENT_REPLY)
    except IntentParserError as exc:
        # No text or no JSON object in the model response.
        logger.info("unreadable intent reason=%s", exc)
        return AnswerResult(output=UNREADABLE_INTENT_REPLY)
    except ModelGatewayError as exc:
        logger.error("model gateway failed reason=%s", exc)
        return AnswerResult(output=INTERNAL_ERROR_REPLY, intent=intent, query=query)
    except QueryExecutionError as exc:
        logger.error(
            "query execution failed reason=%s query=%s",
            exc,
            query.document if query else None,
        )
        return AnswerResult(output=INTERNAL_ERROR_REPLY, intent=intent, query=query)
    except Exception:
        # Pipeline boundary: any internal error becomes the generic reply without leaking details.
        logger.exception("answer pipeline failed")
        return AnswerResult(output=INTERNAL_ERROR_REPLY, intent=intent, query=query)
