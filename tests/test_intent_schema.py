"""Tests for the ParsedIntent Pydantic models and their discriminated union."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from quickcalc.intent.schema import (
    ConversionResult,
    DateUnit,
    NoMatch,
    RelativeDateAdd,
    UnitConversion,
    WeekdayQuery,
    intent_from_obj,
)


@pytest.mark.parametrize(
    ("token", "expected"),
    [("day", DateUnit.day), ("Days", DateUnit.day), ("WEEKS", DateUnit.week), ("month", DateUnit.month), ("years", DateUnit.year)],
)
def test_date_unit_from_token(token: str, expected: DateUnit) -> None:
    assert DateUnit.from_token(token) == expected


def test_date_unit_rejects_unknown_token() -> None:
    with pytest.raises(ValueError):
        DateUnit.from_token("fortnight")


def test_intent_from_obj_weekday() -> None:
    intent = intent_from_obj({"kind": "weekday", "day": 29, "month": 2, "year": 2024})
    assert isinstance(intent, WeekdayQuery)
    assert (intent.day, intent.month, intent.year) == (29, 2, 2024)


def test_intent_from_obj_relative_add() -> None:
    intent = intent_from_obj(
        {"kind": "relative_date_add", "base_date": "2025-01-15", "signed_amount": -3, "unit": "day"}
    )
    assert isinstance(intent, RelativeDateAdd)
    assert intent.base_date == date(2025, 1, 15)
    assert intent.signed_amount == -3
    assert intent.unit == DateUnit.day


def test_intent_from_obj_rejects_unknown_kind() -> None:
    with pytest.raises(ValidationError):
        intent_from_obj({"kind": "weather"})


def test_intent_forbids_extra_fields() -> None:
    with pytest.raises(ValidationError):
        WeekdayQuery(day=1, month=1, year=2025, hour=3)  # type: ignore[call-arg]


def test_intent_is_frozen() -> None:
    intent = WeekdayQuery(day=1, month=1, year=2025)
    with pytest.raises(ValidationError):
        intent.day = 2  # type: ignore[misc]


def test_unit_conversion_lowercases_units() -> None:
    intent = UnitConversion(value=3, from_unit="CM", to_unit="°F")
    assert intent.from_unit == "cm"
    assert intent.to_unit == "°f"


def test_no_match_dump() -> None:
    assert NoMatch().model_dump() == {"kind": "no_match"}


def test_intent_round_trips_through_json() -> None:
    intent = RelativeDateAdd(base_date=date(2025, 1, 15), signed_amount=2, unit=DateUnit.week)
    assert intent_from_obj(intent.model_dump(mode="json")) == intent


def test_conversion_result_is_frozen() -> None:
    result = ConversionResult(value=0.03, text="0.03 m")
    with pytest.raises(ValidationError):
        result.text = "x"  # type: ignore[misc]
