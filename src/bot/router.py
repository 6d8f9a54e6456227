"""Bot router composition."""

from __future__ import annotations

from aiogram import Router

from src.bot.handlers import handle_message

# Every message (text, captions, commands) goes to the same handler; it decides how to reply.
router = Router(name="movies")
router.message.register(handle_message)
