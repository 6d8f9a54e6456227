"""Ollama-style text generation gateway.

The model is only asked to produce **Intent JSON**; whatever comes back is treated as untrusted
text and goes through `src.intent.parser`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from src.intent.prompt import build_prompt


class ModelGatewayError(RuntimeError):
    """Raised when the text-generation service cannot be reached or answers with an HTTP error."""


@dataclass(frozen=True)
class LLMConfig:
    """Configuration for the `/api/generate` call."""

    host: str = "http://localhost:11434"
    model: str = "phi3"
    timeout_s: float = 60.0


def _generate_url(host: str) -> str:
    return host.rstrip("/") + "/api/generate"


def _decode_envelope(body: bytes) -> Any:
    """Decode the response body; a non-JSON body is passed on as plain text."""

    text = body.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


@dataclass(frozen=True)
class ModelGateway:
    """Sends prompts to the text-generation service and returns the raw response envelope."""

    config: LLMConfig

    def generate(self, prompt: str) -> Any:
        payload = {"model": self.config.model, "prompt": prompt, "stream": False}
        req = Request(
            _generate_url(self.config.host),
            method="POST",
            headers={"Content-Type": "application/json"},
            data=json.dumps(payload).encode(),
        )

        try:
            with urlopen(req, timeout=self.config.timeout_s) as resp:  # noqa: S310 (configured endpoint)
                body = resp.read()
        except HTTPError as exc:
            raise ModelGatewayError(f"LLM HTTP error: {exc.code}") from exc
        except (URLError, OSError) as exc:
            raise ModelGatewayError(f"LLM connection error: {exc}") from exc

        return _decode_envelope(body)

    def request_intent(self, user_text: str) -> Any:
        """Ask the model for the intent of `user_text`; returns the undecoded envelope."""

        return self.generate(build_prompt(user_text))
