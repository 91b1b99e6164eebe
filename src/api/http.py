# src/api/http.py
import logging
import time
from typing import Any

import requests
from requests.exceptions import RequestException

from src.api.errors import LocationNotFound, TransportFailure
from src.config import HTTP_TIMEOUT_S
from src.utils import report_error

logger = logging.getLogger("weathernow")

USER_AGENT = "WeatherNow/1.0 (+https://github.com/weathernow/weathernow)"


def api_request_with_retry(
    url: str, method: str = "GET", retry_count: int = 3, **kwargs
) -> dict[Any, Any] | None:
    kwargs.setdefault("timeout", HTTP_TIMEOUT_S)
    for attempt in range(retry_count):
        try:
            resp = requests.request(method, url, **kwargs)
            resp.raise_for_status()
            return resp.json()
        except (RequestException, ValueError) as e:
            logger.warning("API request failed (%s/%s): %s", attempt + 1, retry_count, e)
            if attempt + 1 == retry_count:
                return None
            time.sleep(2**attempt)
    return None


def _provider_error(payload: Any) -> str | None:
    """OpenWeather palauttaa joskus virheen 200-vastauksessa: {"cod": "404", "message": ...}."""
    if not isinstance(payload, dict):
        return None
    cod = str(payload.get("cod", ""))
    if cod == "404":
        return str(payload.get("message") or "not found")
    return None


def http_get_json(
    url: str, params: dict[str, Any] | None = None, timeout: float = HTTP_TIMEOUT_S
) -> Any:
    """GET + JSON. Raises LocationNotFound for 404, TransportFailure for everything else."""
    headers = {"User-Agent": USER_AGENT}
    try:
        resp = requests.get(url, params=params, timeout=timeout, headers=headers)
        if resp.status_code in (429, 403):
            time.sleep(0.8)
            resp = requests.get(url, params=params, timeout=timeout, headers=headers)
        if resp.status_code == 404:
            raise LocationNotFound(f"{url} {params or ''}: 404")
        resp.raise_for_status()
        payload = resp.json()
    except LocationNotFound as e:
        report_error(f"http_get_json: {url}", e)
        raise
    except (RequestException, ValueError) as e:
        report_error(f"http_get_json: {url}", e)
        raise TransportFailure(str(e)) from e

    message = _provider_error(payload)
    if message is not None:
        raise LocationNotFound(message)
    return payload
