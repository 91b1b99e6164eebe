# config.py
"""Configuration settings for the Weather Now application."""

import os

HTTP_TIMEOUT_S: float = float(os.environ.get("HTTP_TIMEOUT_S", "8.0"))

DEV: bool = os.environ.get("DEV", "0") == "1"

# ------------------- ENDPOINTS -------------------

WEATHER_PROXY_URL: str = os.environ.get("WEATHER_PROXY_URL", "http://localhost:5000/api").rstrip("/")
"""Base URL of the proxy that forwards /weather, /forecast and /search to OpenWeatherMap."""

GEOLOCATION_URL: str = os.environ.get("GEOLOCATION_URL", "https://ipapi.co/json/")
"""IP-based geolocation lookup (no browser prompt)."""

# ------------------- LOCATION -------------------

DEFAULT_CITY: str = os.environ.get("DEFAULT_CITY", "Berlin")
"""Used when geolocation fails or nothing has been loaded successfully yet."""

# ------------------- SEARCH -------------------

SEARCH_DEBOUNCE_S: float = 0.5
"""Pause after the last keystroke before a place search is issued."""

SEARCH_MIN_CHARS: int = 3
"""Queries shorter than this never hit the network."""

SEARCH_POLL_S: float = 0.25
"""How often the suggestion list is redrawn while a search is pending."""

# ------------------- FORECAST -------------------

HOURLY_SLOTS: int = 8
"""3 h samples shown in the hourly list (8 x 3 h = next 24 h)."""

DAILY_DAYS: int = 5
"""Calendar dates shown in the daily forecast."""

CLOCK_REFRESH_S: float = 1.0
"""Refresh cadence of the live clock on the current-weather card."""

FETCH_ERROR_MESSAGE: str = "Failed to fetch weather data. Please try again."

# ------------------- UI COLORS -------------------

COLOR_ACCENT: str = "#f5a623"
"""Line color of the hourly temperature chart."""

COLOR_TEXT_GRAY: str = "#d0d0d0"
"""Gray color for text elements."""

# ------------------- PLOTLY CONFIG -------------------

PLOTLY_CONFIG: dict = {
    "displayModeBar": False,
    "responsive": True,
}
