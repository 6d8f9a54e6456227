"""Intent extraction prompt."""

from __future__ import annotations

from pathlib import Path

PROMPT_PATH = Path(__file__).resolve().parent / "prompt_intent_v1.md"


def _load_template() -> str:
    return PROMPT_PATH.read_text(encoding="utf-8").strip()


def build_prompt(user_text: str) -> str:
    """Embed the raw user text into the fixed intent-extraction instructions."""

    return f"{_load_template()}\n\nUser: {user_text}\nJSON:\n"
