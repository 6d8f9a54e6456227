"""Pytest configuration.

The repository uses a flat `src/` layout. This conftest ensures tests can import from the `src.*`
namespace when running `pytest` locally without installing the package, and provides fake
collaborators for the two outbound HTTP calls.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure `import src...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


class FakeGateway:
    """Returns a canned model envelope and records the questions it was asked."""

    def __init__(self, envelope: Any = None, error: Exception | None = None) -> None:
        self.envelope = envelope
        self.error = error
        self.questions: list[str] = []

    def request_intent(self, user_text: str) -> Any:
        self.questions.append(user_text)
        if self.error is not None:
            raise self.error
        return self.envelope


class FakeExecutor:
    """Returns canned rows and records the documents it was asked to run."""

    def __init__(self, rows: list[dict[str, Any]] | None = None, error: Exception | None = None):
        self.rows = rows
        self.error = error
        self.documents: list[str] = []

    def execute(self, document: str) -> list[dict[str, Any]] | None:
        self.documents.append(document)
        if self.error is not None:
            raise self.error
        return self.rows


@pytest.fixture
def empty_intent_envelope() -> dict[str, Any]:
    """An Ollama-style envelope whose intent has no filters at all."""

    return {
        "model": "phi3",
        "response": 'Sure! {"intent": "query", "filters": {}, "fields": [], "top_n": null}',
        "done": True,
    }


@pytest.fixture
def make_gateway() -> type[FakeGateway]:
    return FakeGateway


@pytest.fixture
def make_executor() -> type[FakeExecutor]:
    return FakeExecutor
