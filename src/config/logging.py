"""Logging configuration for the bot and CLI processes."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# aiogram logs every update and polling cycle at INFO.
_NOISY_LOGGERS: tuple[str, ...] = ("aiogram.event", "aiogram.dispatcher")


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    Logs carry the compiled queries and failure causes for diagnostics; none of it is ever sent
    back to the user. At DEBUG level the raw questions are logged too.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    if logging.getLogger().getEffectiveLevel() > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
