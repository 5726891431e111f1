"""Application composition root.

This module wires together configuration and the reference clock for the bot runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from quickcalc.config.settings import Settings


@dataclass(frozen=True)
class App:
    """Shared application dependencies for handlers."""

    settings: Settings
    tz: ZoneInfo

    def now(self) -> datetime:
        """Current time in the configured timezone ("today" for the resolver)."""

        return datetime.now(self.tz)


def create_app(settings: Settings) -> App:
    """Create the application container."""

    return App(settings=settings, tz=ZoneInfo(settings.timezone))
