# tests/test_geolocation.py
from __future__ import annotations

import src.api.geolocation as geo


def test_detect_city_returns_city(monkeypatch):
    monkeypatch.setattr(geo, "api_request_with_retry", lambda url, retry_count=1: {"city": "Tampere"})
    assert geo.detect_city() == "Tampere"


def test_detect_city_none_on_failure(monkeypatch):
    monkeypatch.setattr(geo, "api_request_with_retry", lambda url, retry_count=1: None)
    assert geo.detect_city() is None


def test_detect_city_none_when_city_missing(monkeypatch):
    monkeypatch.setattr(geo, "api_request_with_retry", lambda url, retry_count=1: {"city": "  "})
    assert geo.detect_city() is None
