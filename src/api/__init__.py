# src/api/__init__.py
from .errors import (
    LocationNotFound as LocationNotFound,
    SearchFailure as SearchFailure,
    TransportFailure as TransportFailure,
    WeatherApiError as WeatherApiError,
)
from .geolocation import detect_city as detect_city
from .weather_client import (
    fetch_current as fetch_current,
    fetch_forecast as fetch_forecast,
    search_places as search_places,
)
