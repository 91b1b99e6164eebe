# weather_icons.py
"""IconCategory → HTML. PNG assets/icons/<kategoria>.png voittaa, muuten inline-SVG."""

import base64
from pathlib import Path

from src.api.forecast_aggregate import IconCategory
from src.paths import ASSETS

SEARCH_DIRS = [
    ASSETS / "icons",
    Path.cwd() / "assets" / "icons",
]

_SVG_HEAD = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" width="{size}" height="{size}" '
    'fill="none" stroke="{color}" stroke-width="2.5" stroke-linecap="round" stroke-linejoin="round">'
)

_CLOUD = '<path d="M17.5 19H9a7 7 0 1 1 6.71-9h1.79a4.5 4.5 0 1 1 0 9Z"/>'
_SMALL_CLOUD = '<path d="M20 16.58A5 5 0 0 0 18 7h-1.26A8 8 0 1 0 4 15.25"/>'

# (polut, väri)
_SVG_BODY: dict[IconCategory, tuple[str, str]] = {
    IconCategory.SUN: (
        '<circle cx="12" cy="12" r="4"/><path d="M12 2v2M12 20v2M4.93 4.93l1.41 1.41'
        'M17.66 17.66l1.41 1.41M2 12h2M20 12h2M6.34 17.66l-1.41 1.41M19.07 4.93l-1.41 1.41"/>',
        "#fde047",
    ),
    IconCategory.MOON: ('<path d="M12 3a6 6 0 0 0 9 9 9 9 0 1 1-9-9Z"/>', "#bfdbfe"),
    IconCategory.CLOUD: (_CLOUD, "#d1d5db"),
    IconCategory.CLOUD_MOON: (
        '<path d="M13 16a3 3 0 1 1 0 6H7a5 5 0 1 1 4.9-6Z"/>'
        '<path d="M10.1 9A6 6 0 0 1 16 4a4.24 4.24 0 0 0 6 6 6 6 0 0 1-3 5.197"/>',
        "#9ca3af",
    ),
    IconCategory.CLOUD_SUN: (
        '<path d="M12 2v2M4.93 4.93l1.41 1.41M20 12h2M19.07 4.93l-1.41 1.41"/>'
        '<path d="M15.947 12.65a4 4 0 0 0-5.925-4.128"/>'
        '<path d="M13 22H7a5 5 0 1 1 4.9-6H13a3 3 0 0 1 0 6Z"/>',
        "#fed7aa",
    ),
    IconCategory.CLOUD_RAIN: (_SMALL_CLOUD + '<path d="M16 14v6M8 14v6M12 16v6"/>', "#93c5fd"),
    IconCategory.CLOUD_LIGHTNING: (
        '<path d="M6 16.326A7 7 0 1 1 15.71 8h1.79a4.5 4.5 0 0 1 .5 8.973"/>'
        '<path d="m13 12-3 5h4l-3 5"/>',
        "#d8b4fe",
    ),
    IconCategory.CLOUD_SNOW: (
        _SMALL_CLOUD + '<path d="M8 15h.01M8 19h.01M12 17h.01M12 21h.01M16 15h.01M16 19h.01"/>',
        "#ffffff",
    ),
}

# Cache: muistetaan löytyneet polut (None = ei PNG:tä)
_ICON_CACHE: dict[str, Path | None] = {}


def _read_png_as_data_uri(path: Path) -> str:
    b64 = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:image/png;base64,{b64}"


def _find_icon_path(key: str) -> Path | None:
    if key in _ICON_CACHE:
        return _ICON_CACHE[key]
    fname = f"{key}.png"
    for root in SEARCH_DIRS:
        p = root / fname
        if p.exists():
            _ICON_CACHE[key] = p
            return p
    _ICON_CACHE[key] = None
    return None


def svg_icon(category: IconCategory, size: int = 28) -> str:
    body, color = _SVG_BODY.get(category, _SVG_BODY[IconCategory.CLOUD_SUN])
    return _SVG_HEAD.format(size=size, color=color) + body + "</svg>"


def render_icon(category: IconCategory, size: int = 28) -> str:
    """Palauttaa <img>- tai <svg>-HTML:n ikonikategorialle."""
    key = IconCategory(category).value
    p = _find_icon_path(key)
    if p is None:
        return svg_icon(IconCategory(category), size)
    try:
        uri = _read_png_as_data_uri(p)
    except OSError:
        return svg_icon(IconCategory(category), size)
    return (
        f'<img src="{uri}" width="{size}" height="{size}" alt="{key}" '
        f'style="vertical-align:middle;" />'
    )
