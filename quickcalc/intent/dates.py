"""German calendar helpers: weekday lookup, days-until and date offsets.

All functions work on `datetime.date` (proleptic Gregorian calendar, years 1..9999). Impossible
dates and results outside that range are reported as "Ungültiges Datum", never raised.
"""

from __future__ import annotations

from datetime import date, timedelta

from quickcalc.intent.schema import DateUnit

INVALID_DATE = "Ungültiges Datum"

# Indexed 0=Sunday, like the display table of the web calculator.
WEEKDAYS: tuple[str, ...] = (
    "Sonntag",
    "Montag",
    "Dienstag",
    "Mittwoch",
    "Donnerstag",
    "Freitag",
    "Samstag",
)

MONTHS: tuple[str, ...] = (
    "Januar",
    "Februar",
    "März",
    "April",
    "Mai",
    "Juni",
    "Juli",
    "August",
    "September",
    "Oktober",
    "November",
    "Dezember",
)


def weekday_name(value: date) -> str:
    """German weekday name of `value`."""

    # isoweekday(): Monday=1 .. Sunday=7
    return WEEKDAYS[value.isoweekday() % 7]


def make_date(day: int, month: int, year: int) -> date | None:
    """Build a date from a day/month/year triple, or `None` if the triple is impossible."""

    try:
        return date(year, month, day)
    except ValueError:
        return None


def describe_weekday(day: int, month: int, year: int, *, day_text: str | None = None) -> str:
    """`"<Weekday>, <day>. <MonthName> <year>"`, e.g. `"Donnerstag, 29. Februar 2024"`.

    `day_text` is the day as the user typed it (`"01"`) and is echoed instead of `day`.
    """

    value = make_date(day, month, year)
    if value is None:
        return INVALID_DATE
    label = day_text or str(value.day)
    return f"{weekday_name(value)}, {label}. {MONTHS[value.month - 1]} {value.year:04d}"


def days_between(today: date, target: date) -> int:
    """Signed whole days from `today` to `target`."""

    return (target - today).days


def format_days_until(days: int) -> str:
    if days == 0:
        return "Heute"
    if days == 1:
        return "1 Tag"
    if days == -1:
        return "Gestern"
    if days < 0:
        return f"{-days} Tage vergangen"
    return f"{days} Tage"


def describe_days_until(day: int, month: int, year: int, *, today: date) -> str:
    """Human-readable distance from `today` to the given date ("Heute", "3 Tage", ...)."""

    target = make_date(day, month, year)
    if target is None:
        return INVALID_DATE
    return format_days_until(days_between(today, target))


def add_months(value: date, months: int) -> date:
    """Shift `value` by whole months.

    A day past the end of the target month rolls over into the following month (31 Jan + 1 month
    is 3 Mar in a common year).

    Raises:
        ValueError: If the result falls outside the supported year range.
    """

    total = value.year * 12 + (value.month - 1) + months
    year, month_index = divmod(total, 12)
    if not date.min.year <= year <= date.max.year:
        raise ValueError("year is out of range")
    return date(year, month_index + 1, 1) + timedelta(days=value.day - 1)


def shift_date(value: date, amount: int, unit: DateUnit) -> date:
    """Apply a signed offset in `unit` to `value`.

    Raises:
        OverflowError, ValueError: If the result is not a representable date.
    """

    if unit == DateUnit.day:
        return value + timedelta(days=amount)
    if unit == DateUnit.week:
        return value + timedelta(weeks=amount)
    if unit == DateUnit.month:
        return add_months(value, amount)
    return add_months(value, amount * 12)


def format_shifted(value: date) -> str:
    """`"DD.MM.YYYY (<Weekday>)"`."""

    return f"{value.day:02d}.{value.month:02d}.{value.year:04d} ({weekday_name(value)})"


def describe_offset(base: date, amount: int, unit: DateUnit) -> str:
    """Shift `base` and format the result, or "Ungültiges Datum" if it leaves the calendar."""

    try:
        shifted = shift_date(base, amount, unit)
    except (OverflowError, ValueError):
        return INVALID_DATE
    return format_shifted(shifted)


def describe_offset_from(day: int, month: int, year: int, amount: int, unit: DateUnit) -> str:
    """Like `describe_offset`, anchored at an explicit day/month/year."""

    base = make_date(day, month, year)
    if base is None:
        return INVALID_DATE
    return describe_offset(base, amount, unit)
