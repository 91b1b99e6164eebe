from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from enum import Enum

from src.api.errors import WeatherApiError
from src.api.forecast_aggregate import ForecastView, IconCategory, aggregate_forecast, icon_category
from src.api.weather_client import LocationQuery, fetch_current, fetch_forecast
from src.api.weather_models import CurrentConditions, PlaceCandidate, RawSample
from src.config import DEFAULT_CITY, FETCH_ERROR_MESSAGE
from src.units import (
    DisplayValue,
    PrecipitationUnit,
    TemperatureUnit,
    UnitPreference,
    WindUnit,
    convert_precipitation,
    convert_wind,
    format_temperature,
)
from src.viewmodels.search_session import SearchSession

logger = logging.getLogger("weathernow")

CurrentFetcher = Callable[[LocationQuery], CurrentConditions]
ForecastFetcher = Callable[[LocationQuery], tuple[list[RawSample], int]]


class Status(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


class Region(str, Enum):
    """Alasvetovalikot, jotka sulkeutuvat klikattaessa niiden ulkopuolelle."""

    UNITS_MENU = "units_menu"
    SEARCH_DROPDOWN = "search_dropdown"
    SUGGESTIONS = "suggestions"


@dataclass(frozen=True)
class CurrentView:
    """Nykysääkortin valmiit näyttöarvot."""

    title: str
    date_label: str
    icon: IconCategory
    temp: str
    feels_like: str
    humidity: str
    wind: DisplayValue
    precipitation: DisplayValue
    description: str


def format_date(timestamp: int, tz: timezone = timezone.utc) -> str:
    """'Monday, Oct 19, 2026'"""
    dt = datetime.fromtimestamp(timestamp, tz)
    return f"{dt.strftime('%A')}, {dt.strftime('%b')} {dt.day}, {dt.year}"


class WeatherViewModel:
    """
    Kokoaa sääkortin tilan: lataus / virhe / valmis data, yksikköasetukset ja
    alasvetovalikoiden näkyvyys.

    Nykysää ja ennuste haetaan rinnakkain. Data näytetään vain, kun molemmat
    onnistuivat; kumman tahansa virhe vie koko näkymän virhetilaan.
    """

    def __init__(
        self,
        current_fn: CurrentFetcher = fetch_current,
        forecast_fn: ForecastFetcher = fetch_forecast,
        search: SearchSession | None = None,
        default_location: str = DEFAULT_CITY,
    ):
        self._current_fn = current_fn
        self._forecast_fn = forecast_fn
        self.search = search or SearchSession()
        self.default_location = default_location

        self.status: Status = Status.LOADING
        self.error: str | None = None
        self.units: UnitPreference = UnitPreference()
        self.current: CurrentConditions | None = None
        self.timeline: list[RawSample] = []
        self.tz_offset_s: int = 0
        self.last_location: LocationQuery | None = None

        self.units_menu_open: bool = False
        self.search_dropdown_open: bool = False

    # --- lataus ---------------------------------------------------------------

    def start(self, detect_location: Callable[[], str | None]) -> None:
        """Ensimmäinen lataus: IP-sijainti tai oletuskaupunki."""
        try:
            city = detect_location()
        except Exception as e:  # sijainnin tunnistus ei ole koskaan virhetila
            logger.info("Location detection failed, using %s: %s", self.default_location, e)
            city = None
        self.load(city or self.default_location)

    def load(self, location: LocationQuery) -> bool:
        self.status = Status.LOADING
        self.error = None
        self.search.collapse()

        try:
            with ThreadPoolExecutor(max_workers=2) as pool:
                current_future = pool.submit(self._current_fn, location)
                forecast_future = pool.submit(self._forecast_fn, location)
                current = current_future.result()
                timeline, tz_offset_s = forecast_future.result()
        except (WeatherApiError, ValueError) as e:
            logger.error("Weather fetch for %r failed: %s", location, e)
            self.current = None
            self.timeline = []
            self.status = Status.ERROR
            self.error = FETCH_ERROR_MESSAGE
            return False

        self.current = current
        self.timeline = list(timeline)
        self.tz_offset_s = tz_offset_s or current.tz_offset_s
        self.last_location = location
        self.status = Status.READY
        self.search.clear()
        logger.info("Loaded weather for %r (%s forecast samples)", location, len(self.timeline))
        return True

    def retry(self) -> bool:
        return self.load(self.last_location or self.default_location)

    def submit_search(self, text: str) -> bool:
        """Hakulomakkeen lähetys: haetaan suoraan kirjoitetulla tekstillä."""
        text = text.strip()
        if not text:
            return False
        return self.load(text)

    def select_place(self, candidate: PlaceCandidate) -> bool:
        return self.load(self.search.select(candidate))

    # --- yksiköt --------------------------------------------------------------

    def set_temperature_unit(self, unit: TemperatureUnit) -> None:
        self.units = replace(self.units, temperature=TemperatureUnit(unit))
        self.units_menu_open = False

    def set_wind_unit(self, unit: WindUnit) -> None:
        self.units = replace(self.units, wind=WindUnit(unit))
        self.units_menu_open = False

    def set_precipitation_unit(self, unit: PrecipitationUnit) -> None:
        self.units = replace(self.units, precipitation=PrecipitationUnit(unit))
        self.units_menu_open = False

    # --- alasvetovalikot ------------------------------------------------------

    def expand(self, region: Region) -> None:
        if region is Region.UNITS_MENU:
            self.units_menu_open = True
        elif region is Region.SEARCH_DROPDOWN:
            self.search_dropdown_open = True
        else:
            self.search.expand()

    def collapse(self, region: Region) -> None:
        if region is Region.UNITS_MENU:
            self.units_menu_open = False
        elif region is Region.SEARCH_DROPDOWN:
            self.search_dropdown_open = False
        else:
            self.search.collapse()

    def toggle(self, region: Region) -> None:
        if region is Region.UNITS_MENU:
            self.units_menu_open = not self.units_menu_open
        elif region is Region.SEARCH_DROPDOWN:
            self.search_dropdown_open = not self.search_dropdown_open
        elif self.search.show_suggestions:
            self.search.collapse()
        else:
            self.search.expand()

    def collapse_all(self) -> None:
        """Klikkaus valikoiden ulkopuolelle. Hakuteksti säilyy."""
        for region in Region:
            self.collapse(region)

    # --- johdetut näkymät -----------------------------------------------------

    def location_timezone(self) -> timezone:
        return timezone(timedelta(seconds=self.tz_offset_s))

    def forecast_view(self) -> ForecastView:
        if self.status is not Status.READY:
            return ForecastView()
        return aggregate_forecast(self.timeline, self.units, self.location_timezone())

    def current_view(self) -> CurrentView | None:
        c = self.current
        if self.status is not Status.READY or c is None:
            return None

        humidity = "—" if c.humidity is None else f"{c.humidity}%"
        return CurrentView(
            title=f"{c.name}, {c.country}",
            date_label=format_date(c.timestamp, self.location_timezone()),
            icon=icon_category(c.condition, c.icon),
            temp=format_temperature(c.temp, self.units),
            feels_like=format_temperature(c.feels_like, self.units),
            humidity=humidity,
            wind=convert_wind(c.wind_speed, self.units),
            precipitation=convert_precipitation(c.precipitation, self.units),
            description=c.description,
        )

    def close(self) -> None:
        self.search.close()
