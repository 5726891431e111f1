"""Unit table for conversions.

Each category maps lower-case unit symbols to a factor relative to the category's base unit
(meter, kilogram, liter, square meter, second). Categories are scanned in the order below; the first
one that knows both units wins. Temperatures are affine and live in a separate rule list.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class UnitCategory:
    """A named group of units sharing one implicit base unit."""

    name: str
    factors: Mapping[str, float]

    def __post_init__(self) -> None:
        if any(factor <= 0 for factor in self.factors.values()):
            raise ValueError(f"unit factors of {self.name} must be positive")

    def __contains__(self, unit: str) -> bool:
        return unit in self.factors

    def factor(self, unit: str) -> float:
        return self.factors[unit]


def _category(name: str, factors: dict[str, float]) -> UnitCategory:
    return UnitCategory(name=name, factors=MappingProxyType(dict(factors)))


LENGTH = _category(
    "Länge",
    {
        "mm": 0.001,
        "cm": 0.01,
        "m": 1,
        "km": 1000,
        "in": 0.0254,
        "ft": 0.3048,
        "yd": 0.9144,
        "mi": 1609.344,
    },
)

WEIGHT = _category(
    "Gewicht",
    {
        "mg": 0.000001,
        "g": 0.001,
        "kg": 1,
        "t": 1000,
        "oz": 0.0283495,
        "lb": 0.453592,
    },
)

VOLUME = _category(
    "Volumen",
    {
        "ml": 0.001,
        "cl": 0.01,
        "dl": 0.1,
        "l": 1,
        "gal": 3.78541,
        "pt": 0.473176,
        "qt": 0.946353,
    },
)

AREA = _category(
    "Fläche",
    {
        "mm2": 0.000001,
        "cm2": 0.0001,
        "m2": 1,
        "km2": 1000000,
        "ha": 10000,
        "ac": 4046.86,
        "sqft": 0.092903,
        "sqin": 0.00064516,
    },
)

TIME = _category(
    "Zeit",
    {
        "ms": 0.001,
        "s": 1,
        "min": 60,
        "h": 3600,
        "d": 86400,
        "week": 604800,
    },
)

CATEGORIES: tuple[UnitCategory, ...] = (LENGTH, WEIGHT, VOLUME, AREA, TIME)


@dataclass(frozen=True)
class TemperatureRule:
    """An affine conversion between two temperature scales."""

    from_units: frozenset[str]
    to_units: frozenset[str]
    formula: Callable[[float], float]
    decimals: int
    symbol: str

    def applies(self, from_unit: str, to_unit: str) -> bool:
        return from_unit in self.from_units and to_unit in self.to_units


_CELSIUS = frozenset({"c", "°c"})
_FAHRENHEIT = frozenset({"f", "°f"})
_KELVIN = frozenset({"k"})

# No Fahrenheit <-> Kelvin rule.
TEMPERATURE_RULES: tuple[TemperatureRule, ...] = (
    TemperatureRule(_CELSIUS, _FAHRENHEIT, lambda c: c * 9 / 5 + 32, 1, "°F"),
    TemperatureRule(_FAHRENHEIT, _CELSIUS, lambda f: (f - 32) * 5 / 9, 1, "°C"),
    TemperatureRule(_CELSIUS, _KELVIN, lambda c: c + 273.15, 2, "K"),
    TemperatureRule(_KELVIN, _CELSIUS, lambda k: k - 273.15, 2, "°C"),
)


def find_category(from_unit: str, to_unit: str) -> UnitCategory | None:
    """Return the first category containing both units."""

    for category in CATEGORIES:
        if from_unit in category and to_unit in category:
            return category
    return None


def find_temperature_rule(from_unit: str, to_unit: str) -> TemperatureRule | None:
    """Return the temperature rule for this unit pair, if any."""

    for rule in TEMPERATURE_RULES:
        if rule.applies(from_unit, to_unit):
            return rule
    return None
