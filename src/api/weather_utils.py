# src/api/weather_utils.py
"""Sietävät tyypinmuunnokset OpenWeather-JSONin lukemiseen."""

from __future__ import annotations

from typing import Any

import pandas as pd


def _cast_to_float(value: Any) -> float | None:
    """Muunna arvo float-tyypiksi, tai palauta None jos muunnos epäonnistuu."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")

    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _cast_to_int(value: Any) -> int | None:
    """Muunna arvo int-tyypiksi, tai palauta None jos muunnos epäonnistuu."""
    f = _cast_to_float(value)
    if f is None or f != f:  # NaN
        return None
    return int(f)


def _cast_to_str(value: Any) -> str | None:
    s = str(value).strip()
    return s or None


def _normalize_scalar(value: Any) -> Any | None:
    """
    Yhtenäinen esikäsittely:
    - None → None
    - pandas NA / NaN → None
    - numpy-scalar tms. → .item()
    """
    if value is None:
        return None

    if isinstance(value, (dict, list, tuple)):
        return value

    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass

    if hasattr(value, "item"):
        try:
            value = value.item()
        except (TypeError, ValueError):
            pass

    return value


def safe_cast(value: Any, type_: type) -> Any | None:
    """
    Turvallinen muunnos annetuksi tyypiksi (int, float, str).
    Palauttaa None, jos muunnos ei onnistu.
    """
    value = _normalize_scalar(value)
    if value is None:
        return None

    dispatch = {
        int: _cast_to_int,
        float: _cast_to_float,
        str: _cast_to_str,
    }
    caster = dispatch.get(type_)
    if caster is None:
        raise TypeError(f"safe_cast: unsupported type {type_!r}")
    return caster(value)


def as_int(x: Any) -> int | None:
    return safe_cast(x, int)


def as_float(x: Any) -> float | None:
    return safe_cast(x, float)


def as_str(x: Any) -> str | None:
    return safe_cast(x, str)


def dig(data: Any, *keys: str | int) -> Any | None:
    """Sisäkkäinen haku: dig(item, "weather", 0, "main"). Puuttuva polku → None."""
    cur = data
    for key in keys:
        if isinstance(key, int):
            if not isinstance(cur, (list, tuple)) or not -len(cur) <= key < len(cur):
                return None
            cur = cur[key]
        else:
            if not isinstance(cur, dict):
                return None
            cur = cur.get(key)
        if cur is None:
            return None
    return cur
