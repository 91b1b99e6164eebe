# src/api/weather_client.py
"""Ohut asiakas sääproxylle (/weather, /forecast, /search).

Proxy välittää kyselyt OpenWeatherMapiin (units=metric) ja palauttaa raakadatan.
"""

from __future__ import annotations

import logging
from typing import Any

from src.api.errors import SearchFailure, WeatherApiError
from src.api.http import http_get_json
from src.api.weather_models import (
    CurrentConditions,
    PlaceCandidate,
    RawSample,
    parse_candidates,
    parse_current,
    parse_timeline,
    timeline_tz_offset,
)
from src.config import WEATHER_PROXY_URL

logger = logging.getLogger("weathernow")

# kaupungin nimi tai (lat, lon)
LocationQuery = str | tuple[float, float]


def _location_params(query: LocationQuery) -> dict[str, Any]:
    if isinstance(query, str):
        return {"city": query}
    lat, lon = query
    return {"lat": lat, "lon": lon}


def fetch_current_raw(query: LocationQuery) -> dict[str, Any]:
    return http_get_json(f"{WEATHER_PROXY_URL}/weather", params=_location_params(query))


def fetch_forecast_raw(query: LocationQuery) -> dict[str, Any]:
    return http_get_json(f"{WEATHER_PROXY_URL}/forecast", params=_location_params(query))


def fetch_current(query: LocationQuery) -> CurrentConditions:
    """Nykysää. Raises LocationNotFound / TransportFailure (ValueError for a broken payload)."""
    return parse_current(fetch_current_raw(query))


def fetch_forecast(query: LocationQuery) -> tuple[list[RawSample], int]:
    """Palauttaa (ennusteaikajana, sijainnin UTC-siirtymä sekunteina)."""
    data = fetch_forecast_raw(query)
    return parse_timeline(data), timeline_tz_offset(data)


def search_places(text: str) -> list[PlaceCandidate]:
    """Paikkahaku vapaalla tekstillä. Kaikki virheet → SearchFailure."""
    try:
        data = http_get_json(f"{WEATHER_PROXY_URL}/search", params={"q": text})
    except WeatherApiError as e:
        raise SearchFailure(f"search '{text}' failed: {e}") from e
    candidates = parse_candidates(data)
    logger.debug("search_places(%r): %s candidates", text, len(candidates))
    return candidates
