# tests/test_weather_utils.py
from __future__ import annotations

import math

import pandas as pd
import pytest

import src.api.weather_utils as wu


def test_as_int_and_as_float():
    assert wu.as_int(10) == 10
    assert wu.as_int(10.9) == 10
    assert wu.as_int("12") == 12
    assert wu.as_int(None) is None
    assert wu.as_int("abc") is None

    assert wu.as_float(10) == 10.0
    assert wu.as_float("10.5") == 10.5
    assert wu.as_float("12,5") == 12.5
    assert wu.as_float(None) is None


def test_na_values_become_none():
    assert wu.as_float(float("nan")) is None
    assert wu.as_int(pd.NA) is None
    assert wu.as_float(pd.Series([1.5]).iloc[0]) == 1.5


def test_bool_is_not_a_number():
    assert wu.as_float(True) is None


def test_as_str():
    assert wu.as_str(" Berlin ") == "Berlin"
    assert wu.as_str("") is None
    assert wu.as_str(None) is None


def test_safe_cast_unsupported_type():
    with pytest.raises(TypeError):
        wu.safe_cast("x", bytes)


def test_dig_nested_paths():
    data = {"weather": [{"main": "Clear"}], "main": {"temp": 0}}
    assert wu.dig(data, "weather", 0, "main") == "Clear"
    assert wu.dig(data, "main", "temp") == 0
    assert wu.dig(data, "weather", 1, "main") is None
    assert wu.dig(data, "rain", "3h") is None
    assert wu.dig({"weather": []}, "weather", 0) is None
    assert wu.dig("not a dict", "x") is None
    assert not math.isnan(wu.as_float(wu.dig(data, "main", "temp")))
