"""aiogram message handlers.

Contract: every incoming message gets exactly one reply. Resolver answers (including "Ungültiges
Datum" / "Unbekannte Einheit") are sent verbatim; an empty answer or an internal error is replied
with the configured "no result" text.
"""

from __future__ import annotations

import logging
from time import monotonic

from aiogram.types import Message

from quickcalc.app import App
from quickcalc.intent.resolver import HELP_TEXT, resolve_with_intent

logger = logging.getLogger(__name__)

HELP_COMMANDS: tuple[str, ...] = ("start", "help")


def _command_name(text: str) -> str | None:
    """Return the command (without bot mention) if `text` is a command."""

    value = text.strip()
    if not value.startswith("/"):
        return None
    head = value.split(maxsplit=1)[0]
    return head[1:].split("@", 1)[0].lower()


async def handle_help(message: Message) -> None:
    """Reply with the list of supported inputs."""

    await message.answer(HELP_TEXT)


async def handle_message(message: Message, app: App) -> None:
    """Handle any incoming Telegram message and reply exactly once."""

    started = monotonic()
    no_result = app.settings.no_result_reply
    reply = no_result

    # noinspection PyBroadException
    try:
        raw_text = message.text or message.caption or ""
        command = _command_name(raw_text)
        if command is not None:
            await message.answer(HELP_TEXT if command in HELP_COMMANDS else no_result)
            return

        result = resolve_with_intent(raw_text, now=app.now())
        reply = result.text or no_result

        latency_ms = int((monotonic() - started) * 1000)
        logger.info("handled kind=%s latency_ms=%d", result.intent.kind, latency_ms)
    except Exception:
        # Handler boundary: any internal error still results in a single reply.
        logger.exception("handler failed")

    await message.answer(reply)
