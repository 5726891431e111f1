"""Resolver orchestration: classify one input line, evaluate it, return display text.

Result contract:
    - `""`: nothing to show (empty input, unknown shape, rejected or non-finite arithmetic),
    - "Ungültiges Datum" / "Unbekannte Einheit": the input was recognized but is impossible,
    - anything else: the answer.

No exception escapes `resolve`, whatever the input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime

from quickcalc.intent import dates
from quickcalc.intent.arith import eval_math
from quickcalc.intent.convert import convert
from quickcalc.intent.rules_parser import parse_intent
from quickcalc.intent.schema import (
    AbsoluteDateAdd,
    ArithmeticExpression,
    DaysUntil,
    NoMatch,
    ParsedIntent,
    RelativeDateAdd,
    UnitConversion,
    WeekdayQuery,
)

logger = logging.getLogger(__name__)

HELP_TEXT = "\n".join(
    (
        "Schnellrechner - unterstützte Eingaben:",
        "24.12.2025: Wochentag eines Datums",
        "today to 31.12.2025: Tage bis zu einem Datum",
        "2weeks + today: Datum in 2 Wochen",
        "today - 3days: Datum vor 3 Tagen",
        "24.12.2025 + 1month: Datum relativ zu einem Datum",
        "3cm in m: Einheiten umrechnen (Länge, Gewicht, Volumen, Fläche, Zeit, °C/°F/K)",
        "(2+3)*4^2: Rechnen mit + - * / % ^ und Klammern",
        "Einheiten für Datumsrechnung: day(s), week(s), month(s), year(s)",
    )
)


@dataclass(frozen=True)
class ResolveResult:
    """Display text plus the intent it was computed from."""

    intent: ParsedIntent
    text: str


def _today(now: datetime | date | None) -> date:
    if now is None:
        return datetime.now().astimezone().date()
    if isinstance(now, datetime):
        return now.date()
    return now


def evaluate_intent(intent: ParsedIntent, *, today: date) -> str:
    """Evaluate a classified intent into display text."""

    if isinstance(intent, WeekdayQuery):
        return dates.describe_weekday(
            intent.day, intent.month, intent.year, day_text=intent.day_text
        )
    if isinstance(intent, DaysUntil):
        return dates.describe_days_until(intent.day, intent.month, intent.year, today=today)
    if isinstance(intent, RelativeDateAdd):
        return dates.describe_offset(intent.base_date, intent.signed_amount, intent.unit)
    if isinstance(intent, AbsoluteDateAdd):
        return dates.describe_offset_from(
            intent.day, intent.month, intent.year, intent.signed_amount, intent.unit
        )
    if isinstance(intent, UnitConversion):
        return convert(intent.value, intent.from_unit, intent.to_unit)
    if isinstance(intent, ArithmeticExpression):
        return eval_math(intent.raw)
    return ""


def resolve_with_intent(text: str | None, now: datetime | date | None = None) -> ResolveResult:
    """Resolve `text` and also return the intent that produced the answer."""

    today = _today(now)
    intent: ParsedIntent = NoMatch()
    try:
        intent = parse_intent(text, today=today)
        result = evaluate_intent(intent, today=today)
    except (ArithmeticError, ValueError, RecursionError):
        # Last-resort guard; every branch reports its own errors as values.
        logger.warning("resolver failed kind=%s", intent.kind, exc_info=True)
        result = ""

    if not result:
        logger.debug("no result kind=%s", intent.kind)
    return ResolveResult(intent=intent, text=result)


def resolve(text: str | None, now: datetime | date | None = None) -> str:
    """Resolve one line of input into display text.

    Args:
        text: Raw user input.
        now: Reference time for "today"; defaults to the local wall clock.
    """

    return resolve_with_intent(text, now).text
