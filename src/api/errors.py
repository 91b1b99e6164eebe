# src/api/errors.py
"""Virhetyypit sää- ja hakurajapinnoille."""

from __future__ import annotations


class WeatherApiError(Exception):
    """Base class for failures talking to the weather proxy."""


class LocationNotFound(WeatherApiError):
    """The provider does not know the requested place (HTTP 404 / cod 404)."""


class TransportFailure(WeatherApiError):
    """Network error, timeout, non-404 HTTP error or an unreadable response body."""


class SearchFailure(WeatherApiError):
    """Place search failed. Soft error: only hides the suggestion list."""
