# src/api/weather_models.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from src.api.weather_utils import as_float, as_int, as_str, dig

logger = logging.getLogger("weathernow")


@dataclass(frozen=True)
class RawSample:
    """Yksi 3 h ennustepiste OpenWeatherin /forecast-listasta."""

    timestamp: int
    temp: float
    temp_min: float
    temp_max: float
    condition: str
    icon: str | None = None
    humidity: int | None = None
    wind_speed: float | None = None
    precipitation: float | None = None
    date_text: str | None = None  # "YYYY-MM-DD HH:MM:SS"


@dataclass(frozen=True)
class CurrentConditions:
    name: str
    country: str
    timestamp: int
    temp: float
    feels_like: float
    humidity: int | None
    wind_speed: float
    condition: str
    description: str
    icon: str | None
    precipitation: float | None
    tz_offset_s: int = 0


@dataclass(frozen=True)
class PlaceCandidate:
    name: str
    country: str
    lat: float
    lon: float
    state: str | None = None

    @property
    def key(self) -> str:
        """UI-avain: koordinaattipari on yksilöivä."""
        return f"{self.lat}-{self.lon}"

    @property
    def query(self) -> str:
        return f"{self.name}, {self.country}"

    @property
    def label(self) -> str:
        return f"{self.state}, {self.country}" if self.state else self.country


def parse_sample(item: dict[str, Any]) -> RawSample | None:
    """Palauttaa None, jos pisteeltä puuttuu aikaleima tai lämpötila."""
    ts = as_int(dig(item, "dt"))
    temp = as_float(dig(item, "main", "temp"))
    if ts is None or temp is None:
        return None

    temp_min = as_float(dig(item, "main", "temp_min"))
    temp_max = as_float(dig(item, "main", "temp_max"))
    rain = dig(item, "rain", "3h")
    if rain is None:
        rain = dig(item, "rain", "1h")

    return RawSample(
        timestamp=ts,
        temp=temp,
        temp_min=temp if temp_min is None else temp_min,
        temp_max=temp if temp_max is None else temp_max,
        condition=as_str(dig(item, "weather", 0, "main")) or "",
        icon=as_str(dig(item, "weather", 0, "icon")),
        humidity=as_int(dig(item, "main", "humidity")),
        wind_speed=as_float(dig(item, "wind", "speed")),
        precipitation=as_float(rain),
        date_text=as_str(dig(item, "dt_txt")),
    )


def parse_timeline(payload: dict[str, Any]) -> list[RawSample]:
    """Provider order is kept as-is, no sorting."""
    items = dig(payload, "list") or []
    samples: list[RawSample] = []
    skipped = 0
    for item in items:
        sample = parse_sample(item) if isinstance(item, dict) else None
        if sample is None:
            skipped += 1
            continue
        samples.append(sample)

    if skipped:
        logger.warning("parse_timeline: skipped %s unusable forecast entries", skipped)
    return samples


def timeline_tz_offset(payload: dict[str, Any]) -> int:
    """Sijainnin UTC-siirtymä sekunteina (city.timezone)."""
    return as_int(dig(payload, "city", "timezone")) or 0


def parse_current(payload: dict[str, Any]) -> CurrentConditions:
    ts = as_int(dig(payload, "dt"))
    temp = as_float(dig(payload, "main", "temp"))
    if ts is None or temp is None:
        raise ValueError("current conditions payload lacks dt/main.temp")

    feels_like = as_float(dig(payload, "main", "feels_like"))

    return CurrentConditions(
        name=as_str(dig(payload, "name")) or "",
        country=as_str(dig(payload, "sys", "country")) or "",
        timestamp=ts,
        temp=temp,
        feels_like=temp if feels_like is None else feels_like,
        humidity=as_int(dig(payload, "main", "humidity")),
        wind_speed=as_float(dig(payload, "wind", "speed")) or 0.0,
        condition=as_str(dig(payload, "weather", 0, "main")) or "",
        description=as_str(dig(payload, "weather", 0, "description")) or "",
        icon=as_str(dig(payload, "weather", 0, "icon")),
        precipitation=as_float(dig(payload, "rain", "1h")),
        tz_offset_s=as_int(dig(payload, "timezone")) or 0,
    )


def parse_candidates(payload: Any) -> list[PlaceCandidate]:
    if not isinstance(payload, list):
        return []

    out: list[PlaceCandidate] = []
    for item in payload:
        lat = as_float(dig(item, "lat"))
        lon = as_float(dig(item, "lon"))
        name = as_str(dig(item, "name"))
        if lat is None or lon is None or not name:
            continue
        out.append(
            PlaceCandidate(
                name=name,
                country=as_str(dig(item, "country")) or "",
                lat=lat,
                lon=lon,
                state=as_str(dig(item, "state")),
            )
        )
    return out
