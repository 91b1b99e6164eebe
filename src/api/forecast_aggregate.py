# src/api/forecast_aggregate.py
"""
Ennusteen koonti kortteja varten.

3 h välein tuleva aikajana (OpenWeather /forecast) puretaan kahdeksi näkymäksi:
  * tuntilista: 8 ensimmäistä pistettä sellaisenaan (~24 h)
  * päivälista: enintään 5 kalenteripäivää, min/max ja edustava ikoni
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timezone, tzinfo
from enum import Enum

from src.api.weather_models import RawSample
from src.config import DAILY_DAYS, HOURLY_SLOTS
from src.units import UnitPreference, format_temperature


class IconCategory(str, Enum):
    SUN = "sun"
    MOON = "moon"
    CLOUD = "cloud"
    CLOUD_MOON = "cloud-moon"
    CLOUD_SUN = "cloud-sun"
    CLOUD_RAIN = "cloud-rain"
    CLOUD_LIGHTNING = "cloud-lightning"
    CLOUD_SNOW = "cloud-snow"


@dataclass(frozen=True)
class HourlyEntry:
    time: str
    temp: str
    icon: IconCategory


@dataclass(frozen=True)
class DailyEntry:
    name: str
    icon: IconCategory
    high: str
    low: str


@dataclass(frozen=True)
class ForecastView:
    hourly: list[HourlyEntry] = field(default_factory=list)
    daily: list[DailyEntry] = field(default_factory=list)


def is_night(icon_code: str | None) -> bool:
    """OpenWeatherin ikonikoodi päättyy 'n'-kirjaimeen yöllä ('01n'), muuten päivä."""
    return bool(icon_code) and icon_code.endswith("n")


def icon_category(condition: str | None, icon_code: str | None) -> IconCategory:
    night = is_night(icon_code)

    if condition == "Clear":
        return IconCategory.MOON if night else IconCategory.SUN
    if condition == "Clouds":
        return IconCategory.CLOUD_MOON if night else IconCategory.CLOUD
    if condition in ("Rain", "Drizzle"):
        return IconCategory.CLOUD_RAIN
    if condition == "Thunderstorm":
        return IconCategory.CLOUD_LIGHTNING
    if condition == "Snow":
        return IconCategory.CLOUD_SNOW
    # Mist, Fog, Haze, ...
    return IconCategory.CLOUD_MOON if night else IconCategory.CLOUD_SUN


def format_hour(timestamp: int, tz: tzinfo = timezone.utc) -> str:
    """12 h kello ilman minuutteja: '3 PM', '12 AM'."""
    dt = datetime.fromtimestamp(timestamp, tz)
    hour = dt.hour % 12 or 12
    return f"{hour} {'AM' if dt.hour < 12 else 'PM'}"


def _date_key(sample: RawSample, tz: tzinfo) -> str:
    if sample.date_text:
        return sample.date_text.split(" ")[0]
    return datetime.fromtimestamp(sample.timestamp, tz).date().isoformat()


def group_by_date(
    timeline: Sequence[RawSample], tz: tzinfo = timezone.utc
) -> dict[str, list[RawSample]]:
    """Päivämäärä → pisteet. Dictin järjestys = ensimmäisen esiintymän järjestys."""
    groups: dict[str, list[RawSample]] = {}
    for sample in timeline:
        groups.setdefault(_date_key(sample, tz), []).append(sample)
    return groups


def weekday_short(date_key: str) -> str:
    return date.fromisoformat(date_key).strftime("%a")


def build_hourly(
    timeline: Sequence[RawSample],
    pref: UnitPreference,
    tz: tzinfo = timezone.utc,
    slots: int = HOURLY_SLOTS,
) -> list[HourlyEntry]:
    return [
        HourlyEntry(
            time=format_hour(s.timestamp, tz),
            temp=format_temperature(s.temp, pref),
            icon=icon_category(s.condition, s.icon),
        )
        for s in timeline[:slots]
    ]


def build_daily(
    timeline: Sequence[RawSample],
    pref: UnitPreference,
    tz: tzinfo = timezone.utc,
    days: int = DAILY_DAYS,
) -> list[DailyEntry]:
    """
    Päiväkohtainen yhteenveto.

    Edustava ikoni otetaan päivän ryhmän keskimmäisestä pisteestä (indeksi len // 2).
    Tämä on tietoinen likiarvo keskipäivälle: osittaisina päivinä (ensimmäinen tai
    viimeinen) valittu piste voi osua aamuun tai iltaan.
    """
    daily: list[DailyEntry] = []
    for date_key, readings in list(group_by_date(timeline, tz).items())[:days]:
        low = min(r.temp_min for r in readings)
        high = max(r.temp_max for r in readings)
        mid = readings[len(readings) // 2]
        daily.append(
            DailyEntry(
                name=weekday_short(date_key),
                icon=icon_category(mid.condition, mid.icon),
                high=format_temperature(high, pref),
                low=format_temperature(low, pref),
            )
        )
    return daily


def aggregate_forecast(
    timeline: Sequence[RawSample],
    pref: UnitPreference,
    tz: tzinfo = timezone.utc,
) -> ForecastView:
    return ForecastView(
        hourly=build_hourly(timeline, pref, tz),
        daily=build_daily(timeline, pref, tz),
    )
