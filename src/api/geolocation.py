# src/api/geolocation.py
from __future__ import annotations

import logging

from src.api.http import api_request_with_retry
from src.api.weather_utils import as_str
from src.config import GEOLOCATION_URL

logger = logging.getLogger("weathernow")


def detect_city() -> str | None:
    """
    IP-pohjainen sijainti ilman selaimen lupakyselyä.
    Palauttaa kaupungin nimen tai None, jos tunnistus ei onnistu.
    """
    data = api_request_with_retry(GEOLOCATION_URL, retry_count=1)
    if not isinstance(data, dict):
        logger.info("IP geolocation unavailable")
        return None

    city = as_str(data.get("city"))
    if not city:
        logger.info("IP geolocation returned no city")
        return None
    return city
