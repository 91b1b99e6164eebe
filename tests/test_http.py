# tests/test_http.py
from unittest.mock import MagicMock

import pytest

import src.api.http as http
from src.api.errors import LocationNotFound, TransportFailure

# ---------- api_request_with_retry ----------


def test_api_request_with_retry_success(monkeypatch):
    mock_resp = MagicMock()
    mock_resp.json.return_value = {"ok": True}
    mock_resp.raise_for_status.return_value = None

    monkeypatch.setattr("requests.request", lambda *a, **kw: mock_resp)

    result = http.api_request_with_retry("https://x", "GET", retry_count=3)
    assert result == {"ok": True}


def test_api_request_with_retry_retries_then_success(monkeypatch):
    calls = {"n": 0}
    monkeypatch.setattr(http.time, "sleep", lambda s: None)

    def fake_request(*a, **kw):
        calls["n"] += 1
        if calls["n"] < 2:
            raise http.requests.exceptions.RequestException("temporary fail")
        mock = MagicMock()
        mock.raise_for_status.return_value = None
        mock.json.return_value = {"ok": True}
        return mock

    monkeypatch.setattr("requests.request", fake_request)
    result = http.api_request_with_retry("https://example.com", retry_count=3)
    assert result == {"ok": True}
    assert calls["n"] == 2  # first fail, second success


def test_api_request_with_retry_all_fail(monkeypatch):
    monkeypatch.setattr(http.time, "sleep", lambda s: None)

    def always_fail(*a, **kw):
        raise http.requests.exceptions.RequestException("fail")

    monkeypatch.setattr("requests.request", always_fail)

    result = http.api_request_with_retry("https://x", retry_count=2)
    assert result is None


def test_api_request_with_retry_sets_default_timeout(monkeypatch):
    seen = {}

    def fake_request(method, url, **kw):
        seen.update(kw)
        mock = MagicMock()
        mock.json.return_value = {}
        return mock

    monkeypatch.setattr("requests.request", fake_request)
    http.api_request_with_retry("https://x")
    assert seen["timeout"] == http.HTTP_TIMEOUT_S


# ---------- http_get_json ----------


def _resp(status=200, payload=None):
    mock_resp = MagicMock()
    mock_resp.status_code = status
    mock_resp.json.return_value = payload if payload is not None else {}
    if status >= 400:
        mock_resp.raise_for_status.side_effect = http.requests.HTTPError(f"{status}")
    else:
        mock_resp.raise_for_status.return_value = None
    return mock_resp


def test_http_get_json_success_passes_params(monkeypatch):
    seen = {}

    def fake_get(url, params=None, **kw):
        seen["params"] = params
        seen["headers"] = kw["headers"]
        return _resp(200, {"value": 123})

    monkeypatch.setattr("requests.get", fake_get)

    out = http.http_get_json("https://api.test", params={"city": "Berlin"})
    assert out == {"value": 123}
    assert seen["params"] == {"city": "Berlin"}
    assert "WeatherNow" in seen["headers"]["User-Agent"]


def test_http_get_json_retries_on_429(monkeypatch):
    call_count = {"n": 0}
    monkeypatch.setattr(http.time, "sleep", lambda s: None)

    def fake_get(url, *a, **kw):
        call_count["n"] += 1
        if call_count["n"] == 1:
            return _resp(429)
        return _resp(200, {"ok": True})

    monkeypatch.setattr("requests.get", fake_get)
    out = http.http_get_json("https://api.test")
    assert out == {"ok": True}
    assert call_count["n"] == 2


def test_http_get_json_404_is_location_not_found(monkeypatch):
    monkeypatch.setattr(http, "report_error", lambda ctx, e: None)
    monkeypatch.setattr("requests.get", lambda *a, **kw: _resp(404, {"error": "city not found"}))

    with pytest.raises(LocationNotFound):
        http.http_get_json("https://api.test/weather", params={"city": "Atlantis"})


def test_http_get_json_provider_cod_404_in_body(monkeypatch):
    monkeypatch.setattr("requests.get", lambda *a, **kw: _resp(200, {"cod": "404", "message": "city not found"}))

    with pytest.raises(LocationNotFound, match="city not found"):
        http.http_get_json("https://api.test/weather")


def test_http_get_json_server_error_is_transport_failure(monkeypatch):
    monkeypatch.setattr(http, "report_error", lambda ctx, e: None)
    monkeypatch.setattr("requests.get", lambda *a, **kw: _resp(500))

    with pytest.raises(TransportFailure):
        http.http_get_json("https://api.test")


def test_http_get_json_raises_and_reports(monkeypatch):
    captured = {}

    def fake_report_error(ctx, e):
        captured["ctx"] = ctx
        captured["err"] = str(e)

    def fake_get(*a, **kw):
        raise http.requests.ConnectionError("boom")

    monkeypatch.setattr(http, "report_error", fake_report_error)
    monkeypatch.setattr("requests.get", fake_get)

    with pytest.raises(TransportFailure):
        http.http_get_json("https://badurl")

    assert "http_get_json:" in captured["ctx"]
    assert "boom" in captured["err"]


def test_http_get_json_bad_json_is_transport_failure(monkeypatch):
    monkeypatch.setattr(http, "report_error", lambda ctx, e: None)
    resp = _resp(200)
    resp.json.side_effect = ValueError("not json")
    monkeypatch.setattr("requests.get", lambda *a, **kw: resp)

    with pytest.raises(TransportFailure):
        http.http_get_json("https://api.test")
