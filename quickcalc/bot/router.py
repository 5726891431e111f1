"""Bot router composition.

Help commands are registered first so they never reach the resolver.
"""

from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command

from quickcalc.bot.handlers import HELP_COMMANDS, handle_help, handle_message

router = Router(name="quickcalc")
router.message.register(handle_help, Command(*HELP_COMMANDS))
router.message.register(handle_message)
