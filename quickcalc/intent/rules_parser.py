"""Rules-based input classifier.

Shapes are tested strictly in order and the first structural match wins, even if the matched input
later turns out to be semantically impossible (e.g. `30.2.2023`). Anything that matches no shape
falls through to the arithmetic whitelist; if that rejects it too, the result is `NoMatch`.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from quickcalc.intent.arith import is_safe_expression
from quickcalc.intent.normalize import normalize_text
from quickcalc.intent.schema import (
    AbsoluteDateAdd,
    ArithmeticExpression,
    DateUnit,
    DaysUntil,
    NoMatch,
    ParsedIntent,
    RelativeDateAdd,
    UnitConversion,
    WeekdayQuery,
)

_DATE = r"(?P<day>\d{1,2})\.(?P<month>\d{1,2})\.(?P<year>\d{4})"
_OFFSET = r"(?P<amount>\d+)(?P<unit>days?|weeks?|months?|years?)"
_UNIT_TOKEN = r"°?[a-z2]+"
_NUMBER = r"\d+(?:\.\d*)?|\.\d+"

_FLAGS = re.IGNORECASE | re.ASCII

# Any larger amount is far outside the supported calendar range.
_AMOUNT_CAP = 10 ** 18


@dataclass(frozen=True)
class _Shape:
    """One input shape: a full-match pattern and the intent it produces."""

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str], date], ParsedIntent]


def _date_parts(match: re.Match[str]) -> dict[str, int]:
    return {
        "day": int(match.group("day")),
        "month": int(match.group("month")),
        "year": int(match.group("year")),
    }


def _signed_amount(match: re.Match[str]) -> int:
    digits = match.group("amount").lstrip("0") or "0"
    amount = int(digits) if len(digits) <= 18 else _AMOUNT_CAP
    sign = match.groupdict().get("sign") or "+"
    return -amount if sign == "-" else amount


def _build_weekday(match: re.Match[str], _today: date) -> ParsedIntent:
    return WeekdayQuery(**_date_parts(match), day_text=match.group("day"))


def _build_days_until(match: re.Match[str], _today: date) -> ParsedIntent:
    return DaysUntil(**_date_parts(match))


def _build_relative_add(match: re.Match[str], today: date) -> ParsedIntent:
    return RelativeDateAdd(
        base_date=today,
        signed_amount=_signed_amount(match),
        unit=DateUnit.from_token(match.group("unit")),
    )


def _build_absolute_add(match: re.Match[str], _today: date) -> ParsedIntent:
    return AbsoluteDateAdd(
        **_date_parts(match),
        signed_amount=_signed_amount(match),
        unit=DateUnit.from_token(match.group("unit")),
    )


def _build_conversion(match: re.Match[str], _today: date) -> ParsedIntent:
    return UnitConversion(
        value=float(match.group("value")),
        from_unit=match.group("from"),
        to_unit=match.group("to"),
    )


SHAPES: tuple[_Shape, ...] = (
    _Shape("weekday", re.compile(_DATE, _FLAGS), _build_weekday),
    _Shape("days_until", re.compile(rf"today\s+to\s+{_DATE}", _FLAGS), _build_days_until),
    _Shape("offset_plus_today", re.compile(rf"{_OFFSET}\s*\+\s*today", _FLAGS), _build_relative_add),
    _Shape(
        "today_offset",
        re.compile(rf"today\s*(?P<sign>[+-])\s*{_OFFSET}", _FLAGS),
        _build_relative_add,
    ),
    _Shape(
        "date_offset",
        re.compile(rf"{_DATE}\s*(?P<sign>[+-])\s*{_OFFSET}", _FLAGS),
        _build_absolute_add,
    ),
    _Shape(
        "unit_conversion",
        re.compile(
            rf"(?P<value>{_NUMBER})\s*(?P<from>{_UNIT_TOKEN})\s+in\s+(?P<to>{_UNIT_TOKEN})",
            _FLAGS,
        ),
        _build_conversion,
    ),
)


def parse_intent(text: str | None, *, today: date) -> ParsedIntent:
    """Classify one input line.

    Args:
        text: Raw user input.
        today: The calendar date "today" refers to.

    Returns:
        The intent of the first matching shape, an `ArithmeticExpression` if the input passes the
        arithmetic whitelist, or `NoMatch`.
    """

    value = normalize_text(text)
    if not value:
        return NoMatch()

    for shape in SHAPES:
        match = shape.pattern.fullmatch(value)
        if match:
            return shape.build(match, today)

    if is_safe_expression(value):
        return ArithmeticExpression(raw=value)
    return NoMatch()
