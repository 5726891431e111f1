"""Tests for the ordered shape cascade that classifies input lines."""

from __future__ import annotations

from datetime import date

import pytest

from quickcalc.intent.rules_parser import SHAPES, parse_intent
from quickcalc.intent.schema import (
    AbsoluteDateAdd,
    ArithmeticExpression,
    DateUnit,
    DaysUntil,
    NoMatch,
    RelativeDateAdd,
    UnitConversion,
    WeekdayQuery,
)

TODAY = date(2025, 1, 15)


def test_shape_priority_order() -> None:
    assert [shape.name for shape in SHAPES] == [
        "weekday",
        "days_until",
        "offset_plus_today",
        "today_offset",
        "date_offset",
        "unit_conversion",
    ]


def test_bare_date() -> None:
    assert parse_intent("24.12.2025", today=TODAY) == WeekdayQuery(
        day=24, month=12, year=2025, day_text="24"
    )


def test_impossible_date_still_consumes_weekday_shape() -> None:
    assert parse_intent("30.2.2023", today=TODAY) == WeekdayQuery(
        day=30, month=2, year=2023, day_text="30"
    )


def test_date_requires_four_digit_year() -> None:
    intent = parse_intent("1.1.25", today=TODAY)
    assert not isinstance(intent, WeekdayQuery)


def test_days_until_is_case_insensitive() -> None:
    assert parse_intent("TODAY  To 1.1.2026", today=TODAY) == DaysUntil(day=1, month=1, year=2026)


def test_offset_plus_today() -> None:
    intent = parse_intent("2weeks + today", today=TODAY)
    assert intent == RelativeDateAdd(base_date=TODAY, signed_amount=2, unit=DateUnit.week)


def test_today_minus_offset() -> None:
    intent = parse_intent("today-3Days", today=TODAY)
    assert intent == RelativeDateAdd(base_date=TODAY, signed_amount=-3, unit=DateUnit.day)


def test_unicode_minus_is_normalized() -> None:
    intent = parse_intent("today − 2days", today=TODAY)
    assert intent == RelativeDateAdd(base_date=TODAY, signed_amount=-2, unit=DateUnit.day)


def test_offset_from_explicit_date() -> None:
    intent = parse_intent("24.12.2025 + 1month", today=TODAY)
    assert intent == AbsoluteDateAdd(
        day=24, month=12, year=2025, signed_amount=1, unit=DateUnit.month
    )


def test_offset_amount_is_capped() -> None:
    intent = parse_intent("today + " + "9" * 30 + "years", today=TODAY)
    assert isinstance(intent, RelativeDateAdd)
    assert intent.signed_amount == 10**18


def test_offset_amount_with_leading_zeros() -> None:
    intent = parse_intent("today + " + "0" * 40 + "7days", today=TODAY)
    assert isinstance(intent, RelativeDateAdd)
    assert intent.signed_amount == 7


def test_unit_conversion() -> None:
    assert parse_intent("3cm in m", today=TODAY) == UnitConversion(
        value=3.0, from_unit="cm", to_unit="m"
    )


def test_unit_conversion_with_space_and_degree_sign() -> None:
    assert parse_intent("20 °C in °F", today=TODAY) == UnitConversion(
        value=20.0, from_unit="°c", to_unit="°f"
    )


def test_inch_unit_does_not_confuse_in_keyword() -> None:
    assert parse_intent("5in in cm", today=TODAY) == UnitConversion(
        value=5.0, from_unit="in", to_unit="cm"
    )


def test_arithmetic_fallback() -> None:
    assert parse_intent("2 + 2", today=TODAY) == ArithmeticExpression(raw="2 + 2")


@pytest.mark.parametrize(
    "text",
    ["", "   ", None, "hello", "2 weeks + today", "1.2.3cm in m", "2x+3", "today", "import os"],
)
def test_no_match(text: str | None) -> None:
    assert parse_intent(text, today=TODAY) == NoMatch()
