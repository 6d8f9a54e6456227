"""aiogram message handlers.

Hard contract: every incoming message produces exactly one text reply. On unsupported input or any
internal error the user gets a fixed sentence; details are only logged.
"""

from __future__ import annotations

import asyncio
import logging

from aiogram.types import Message

from src.answer.pipeline import EMPTY_INPUT_REPLY, INTERNAL_ERROR_REPLY, answer
from src.app import App

logger = logging.getLogger(__name__)

# Telegram rejects messages longer than this.
_MAX_REPLY_CHARS = 4096


def _is_command_text(text: str) -> bool:
    return text.lstrip().startswith("/")


def _sanitize_reply(text: str) -> str:
    """Return a non-empty reply that fits in a single Telegram message."""

    value = (text or "").strip()
    if not value:
        return INTERNAL_ERROR_REPLY
    if len(value) <= _MAX_REPLY_CHARS:
        return value

    cut = value.rfind("\n", 0, _MAX_REPLY_CHARS)
    return value[: cut if cut > 0 else _MAX_REPLY_CHARS]


async def handle_message(message: Message, app: App) -> None:
    """Handle any incoming Telegram message and reply with the pipeline answer."""

    result_text = INTERNAL_ERROR_REPLY

    # noinspection PyBroadException
    try:
        raw_text = (message.text or message.caption or "")
        if not raw_text.strip() or _is_command_text(raw_text):
            await message.answer(EMPTY_INPUT_REPLY)
            return

        # The pipeline blocks on two HTTP calls; keep the event loop free for other chats.
        result = await asyncio.to_thread(
            answer,
            raw_text,
            gateway=app.gateway,
            executor=app.executor,
        )
        result_text = result.output
    except Exception:
        # Handler boundary: never let an error escape without replying.
        logger.exception("handler failed")

    await message.answer(_sanitize_reply(result_text))
