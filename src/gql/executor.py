"""GraphQL query execution.

The graph store is only reached through its GraphQL endpoint; this module posts a compiled query
document and returns the `movies` rows. Store-side errors are not swallowed (the caller decides how
to handle them).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen


class QueryExecutionError(RuntimeError):
    """Raised when the GraphQL endpoint is unreachable or returns an error payload."""


@dataclass(frozen=True)
class GraphQLConfig:
    """Configuration for the GraphQL endpoint."""

    url: str = "http://localhost:4000/graphql"
    timeout_s: float = 30.0


def _error_messages(decoded: Any) -> list[str]:
    if not isinstance(decoded, dict) or not decoded.get("errors"):
        return []
    errors = decoded["errors"]
    if not isinstance(errors, list):
        return [str(errors)]
    return [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors]


def _read_rows(decoded: Any) -> list[dict[str, Any]] | None:
    """Return `data.movies` from a decoded GraphQL response.

    Contract:
        - A non-empty `errors` entry raises `QueryExecutionError`.
        - Missing `data` / `movies` yields `None` (formatted as "no results").
    """

    if not isinstance(decoded, dict):
        raise QueryExecutionError("unexpected GraphQL response format")

    messages = _error_messages(decoded)
    if messages:
        raise QueryExecutionError("GraphQL errors: " + "; ".join(messages))

    data = decoded.get("data")
    if not isinstance(data, dict):
        return None

    movies = data.get("movies")
    if not isinstance(movies, list):
        return None
    return [row for row in movies if isinstance(row, dict)]


@dataclass(frozen=True)
class GraphExecutor:
    """Runs compiled query documents against the movie GraphQL endpoint."""

    config: GraphQLConfig

    def execute(self, document: str) -> list[dict[str, Any]] | None:
        req = Request(
            self.config.url,
            method="POST",
            headers={"Content-Type": "application/json", "Accept": "application/json"},
            data=json.dumps({"query": document}).encode(),
        )

        try:
            with urlopen(req, timeout=self.config.timeout_s) as resp:  # noqa: S310 (configured endpoint)
                body = resp.read()
        except HTTPError as exc:
            # GraphQL servers report validation errors with a 400 and a JSON `errors` body.
            detail = "; ".join(_error_messages(_decode_or_none(exc.read())))
            raise QueryExecutionError(f"GraphQL HTTP error: {exc.code} {detail}".rstrip()) from exc
        except (URLError, OSError) as exc:
            raise QueryExecutionError(f"GraphQL connection error: {exc}") from exc

        try:
            decoded = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise QueryExecutionError("GraphQL endpoint did not return valid JSON") from exc

        return _read_rows(decoded)


def _decode_or_none(body: bytes) -> Any:
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
