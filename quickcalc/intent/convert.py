"""Unit conversion with category inference."""

from __future__ import annotations

import math

from quickcalc.intent.formatting import format_integer, strip_zeros, to_exponential, to_fixed
from quickcalc.intent.schema import ConversionResult
from quickcalc.intent.units import find_category, find_temperature_rule

UNKNOWN_UNIT = "Unbekannte Einheit"


def format_quantity(value: float) -> str:
    """Format a converted (non-temperature) value.

    - below 0.01: scientific notation with two decimals,
    - whole numbers: no decimal point,
    - otherwise: up to four decimals without trailing zeros.
    """

    if abs(value) < 0.01:
        return to_exponential(value, 2)
    if value.is_integer():
        return format_integer(value)
    return strip_zeros(to_fixed(value, 4))


def category_for(from_unit: str, to_unit: str) -> str | None:
    """Return the name of the category both units belong to (e.g. "Länge")."""

    category = find_category(from_unit.lower(), to_unit.lower())
    return category.name if category else None


def convert_value(value: float, from_unit: str, to_unit: str) -> ConversionResult | None:
    """Convert `value` between two units.

    Returns:
        The converted value and its display text, or `None` if the unit pair is unknown.
    """

    src = from_unit.lower()
    dst = to_unit.lower()

    category = find_category(src, dst)
    if category is not None:
        result = value * category.factor(src) / category.factor(dst)
        if not math.isfinite(result):
            return ConversionResult(value=result, text="")
        return ConversionResult(value=result, text=f"{format_quantity(result)} {dst}")

    rule = find_temperature_rule(src, dst)
    if rule is not None:
        result = rule.formula(value)
        if not math.isfinite(result):
            return ConversionResult(value=result, text="")
        return ConversionResult(value=result, text=f"{to_fixed(result, rule.decimals)} {rule.symbol}")

    return None


def convert(value: float, from_unit: str, to_unit: str) -> str:
    """Convert and return display text ("Unbekannte Einheit" for unknown pairs).

    Non-finite values produce an empty string.
    """

    if not math.isfinite(value):
        return ""

    converted = convert_value(value, from_unit, to_unit)
    if converted is None:
        return UNKNOWN_UNIT
    return converted.text
