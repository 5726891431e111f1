"""Parsed intent models (Pydantic).

Every input line is classified into exactly one of these variants before anything is evaluated. The
models are frozen and strict; `kind` is the discriminator of the `ParsedIntent` union.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class DateUnit(StrEnum):
    """Calendar units accepted by date arithmetic."""

    day = "day"
    week = "week"
    month = "month"
    year = "year"

    @classmethod
    def from_token(cls, token: str) -> DateUnit:
        """Map a user token (`days`, `Week`, ...) to its unit."""

        return cls(token.lower().removesuffix("s"))


class _IntentModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class WeekdayQuery(_IntentModel):
    """`D.M.YYYY`: which weekday is this date?"""

    kind: Literal["weekday"] = "weekday"
    day: int
    month: int
    year: int
    day_text: str | None = None


class DaysUntil(_IntentModel):
    """`today to D.M.YYYY`: signed number of days from today."""

    kind: Literal["days_until"] = "days_until"
    day: int
    month: int
    year: int


class RelativeDateAdd(_IntentModel):
    """Offset from today (`2weeks + today`, `today - 3days`)."""

    kind: Literal["relative_date_add"] = "relative_date_add"
    base_date: date
    signed_amount: int
    unit: DateUnit


class AbsoluteDateAdd(_IntentModel):
    """Offset from an explicit date (`24.12.2025 + 2weeks`)."""

    kind: Literal["absolute_date_add"] = "absolute_date_add"
    day: int
    month: int
    year: int
    signed_amount: int
    unit: DateUnit


class UnitConversion(_IntentModel):
    """`<number><unit> in <unit>`."""

    kind: Literal["unit_conversion"] = "unit_conversion"
    value: float
    from_unit: str
    to_unit: str

    @field_validator("from_unit", "to_unit")
    @classmethod
    def lower_unit(cls, value: str) -> str:
        """Unit symbols are looked up lower-cased."""

        return value.lower()


class ArithmeticExpression(_IntentModel):
    """Anything that passed the arithmetic character whitelist."""

    kind: Literal["arithmetic"] = "arithmetic"
    raw: str


class NoMatch(_IntentModel):
    """Nothing to show for this input."""

    kind: Literal["no_match"] = "no_match"


ParsedIntent = Annotated[
    WeekdayQuery
    | DaysUntil
    | RelativeDateAdd
    | AbsoluteDateAdd
    | UnitConversion
    | ArithmeticExpression
    | NoMatch,
    Field(discriminator="kind"),
]

_PARSED_INTENT_ADAPTER: TypeAdapter[ParsedIntent] = TypeAdapter(ParsedIntent)


class ConversionResult(BaseModel):
    """A converted value together with its display text."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: float
    text: str


def intent_from_obj(obj: Any) -> ParsedIntent:
    """Validate and parse a ParsedIntent from an arbitrary decoded JSON object."""

    return _PARSED_INTENT_ADAPTER.validate_python(obj)
