# tests/test_weather_icons.py
from pathlib import Path

import src.weather_icons as wi
from src.api.forecast_aggregate import IconCategory


def _write_dummy_png(path: Path):
    # kirjaa yksinkertainen, kelvollinen PNG header
    path.write_bytes(
        b"\x89PNG\r\n\x1a\n"
        b"\x00\x00\x00\rIHDR"
        b"\x00\x00\x00\x01\x00\x00\x00\x01"
        b"\x08\x02\x00\x00\x00\x90wS\xde"
        b"\x00\x00\x00\nIDATx\xdac``\x00\x00\x00\x02\x00\x01"
        b"\x0d\n-\xb4\x00\x00\x00\x00IEND\xaeB`\x82"
    )


def test_every_category_has_svg():
    for category in IconCategory:
        svg = wi.svg_icon(category, size=32)
        assert svg.startswith("<svg")
        assert 'width="32"' in svg
        assert svg.endswith("</svg>")


def test_render_icon_falls_back_to_svg(monkeypatch, tmp_path):
    wi._ICON_CACHE.clear()
    monkeypatch.setattr(wi, "SEARCH_DIRS", [tmp_path])

    html = wi.render_icon(IconCategory.MOON, size=20)
    assert html.startswith("<svg")
    assert "#bfdbfe" in html


def test_render_icon_prefers_png_asset(monkeypatch, tmp_path):
    wi._ICON_CACHE.clear()
    _write_dummy_png(tmp_path / "cloud-rain.png")
    monkeypatch.setattr(wi, "SEARCH_DIRS", [tmp_path])

    html = wi.render_icon(IconCategory.CLOUD_RAIN, size=40)
    assert html.startswith("<img")
    assert "data:image/png;base64," in html
    assert 'alt="cloud-rain"' in html


def test_find_icon_path_is_cached(monkeypatch, tmp_path):
    wi._ICON_CACHE.clear()
    icon_path = tmp_path / "sun.png"
    _write_dummy_png(icon_path)
    monkeypatch.setattr(wi, "SEARCH_DIRS", [tmp_path])

    assert wi._find_icon_path("sun") == icon_path
    monkeypatch.setattr(wi, "SEARCH_DIRS", [])
    assert wi._find_icon_path("sun") == icon_path
    wi._ICON_CACHE.clear()
