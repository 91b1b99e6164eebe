# src/units.py
"""Yksikkömuunnokset: metrinen raakadata → käyttäjän valitsema näyttöyksikkö.

Kaikki funktiot ovat puhtaita: tulos riippuu vain arvosta ja UnitPreference-oliosta.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

MS_TO_KMH = 3.6
KMH_TO_MPH = 0.621371
MM_TO_INCH = 0.0393701


class TemperatureUnit(str, Enum):
    CELSIUS = "Celsius (°C)"
    FAHRENHEIT = "Fahrenheit (°F)"


class WindUnit(str, Enum):
    KMH = "km/h"
    MPH = "mph"


class PrecipitationUnit(str, Enum):
    MM = "Millimeters (mm)"
    INCHES = "Inches (in)"


@dataclass(frozen=True)
class UnitPreference:
    """Session-scoped display units. Replace, don't mutate."""

    temperature: TemperatureUnit = TemperatureUnit.CELSIUS
    wind: WindUnit = WindUnit.KMH
    precipitation: PrecipitationUnit = PrecipitationUnit.MM


class DisplayValue(NamedTuple):
    value: int | float | str
    unit: str


def js_round(x: float) -> int:
    """Pyöristys kuten JavaScriptin Math.round: puolikkaat ylöspäin (-0.5 → 0, 2.5 → 3)."""
    return int(math.floor(x + 0.5))


def convert_temperature(celsius: float, pref: UnitPreference) -> DisplayValue:
    if pref.temperature is TemperatureUnit.FAHRENHEIT:
        return DisplayValue(js_round(celsius * 9 / 5 + 32), "°F")
    return DisplayValue(js_round(celsius), "°C")


def convert_wind(speed_ms: float, pref: UnitPreference) -> DisplayValue:
    """Input is m/s. Rounded once, after the final conversion."""
    kmh = speed_ms * MS_TO_KMH
    if pref.wind is WindUnit.MPH:
        return DisplayValue(js_round(kmh * KMH_TO_MPH), "mph")
    return DisplayValue(js_round(kmh), "km/h")


def convert_precipitation(mm: float | None, pref: UnitPreference) -> DisplayValue:
    mm = mm or 0
    if pref.precipitation is PrecipitationUnit.INCHES:
        return DisplayValue(f"{mm * MM_TO_INCH:.2f}", "in")
    return DisplayValue(mm, "mm")


def format_temperature(celsius: float, pref: UnitPreference) -> str:
    """Lyhyt näyttömuoto kortteihin: '21°'."""
    return f"{convert_temperature(celsius, pref).value}°"
