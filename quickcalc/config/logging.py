"""Logging configuration for the calculator bot."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Chatty third-party loggers capped at WARNING.
QUIET_LOGGERS: tuple[str, ...] = ("aiogram.event", "aiogram.dispatcher")


def configure_logging(level: str | None = None) -> None:
    """Configure process logging once at startup.

    `level` falls back to `LOG_LEVEL` and then `INFO`. Resolver non-matches are logged at DEBUG, so
    they only show up when explicitly asked for. Nothing logged here is ever sent to the chat user.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
