# src/ui/card_weather.py
from __future__ import annotations

from datetime import datetime

import streamlit as st

from src.api.geolocation import detect_city
from src.config import CLOCK_REFRESH_S, HOURLY_SLOTS, PLOTLY_CONFIG, SEARCH_POLL_S
from src.ui.card_weather_parts import (
    build_hourly_figure,
    current_html,
    daily_html,
    hourly_html,
)
from src.ui.common import card, section_title
from src.units import PrecipitationUnit, TemperatureUnit, WindUnit, convert_temperature
from src.utils import report_error
from src.viewmodels.weather import Status, WeatherViewModel

VM_KEY = "weather_vm"
QUERY_KEY = "weather_query"
RERUN_KEY = "weather_needs_rerun"


def get_viewmodel() -> WeatherViewModel:
    """Yksi näkymämalli per selainsessio. Ensimmäisellä kerralla haetaan IP-sijainnin sää."""
    vm = st.session_state.get(VM_KEY)
    if vm is None:
        vm = WeatherViewModel()
        st.session_state[VM_KEY] = vm
        vm.start(detect_city)
    return vm


# --- callbackit (ajetaan ennen uudelleenpiirtoa) ---------------------------------


def _on_query_change(vm: WeatherViewModel) -> None:
    vm.search.set_query(st.session_state.get(QUERY_KEY, ""))


def _on_submit(vm: WeatherViewModel) -> None:
    vm.collapse_all()
    if vm.submit_search(st.session_state.get(QUERY_KEY, "")):
        st.session_state[QUERY_KEY] = ""


def _on_select(vm: WeatherViewModel, index: int) -> None:
    suggestions = vm.search.visible_suggestions
    if index >= len(suggestions):
        return
    vm.select_place(suggestions[index])
    st.session_state[QUERY_KEY] = ""
    # valinta tehtiin fragmentissa: koko sivu piirretään uudelleen
    st.session_state[RERUN_KEY] = True


def _on_retry(vm: WeatherViewModel) -> None:
    vm.retry()


def _on_units(vm: WeatherViewModel) -> None:
    vm.set_temperature_unit(st.session_state["unit_temp"])
    vm.set_wind_unit(st.session_state["unit_wind"])
    vm.set_precipitation_unit(st.session_state["unit_precip"])


# --- osat -------------------------------------------------------------------------


def _render_header(vm: WeatherViewModel) -> None:
    left, right = st.columns([4, 1])
    with left:
        section_title("☀️ Weather Now", mb=4)
    with right:
        with st.popover("⚙️ Units"):
            st.radio(
                "Temperature",
                list(TemperatureUnit),
                index=list(TemperatureUnit).index(vm.units.temperature),
                format_func=lambda u: u.value,
                key="unit_temp",
                on_change=_on_units,
                args=(vm,),
            )
            st.radio(
                "Wind Speed",
                list(WindUnit),
                index=list(WindUnit).index(vm.units.wind),
                format_func=lambda u: u.value,
                key="unit_wind",
                on_change=_on_units,
                args=(vm,),
            )
            st.radio(
                "Precipitation",
                list(PrecipitationUnit),
                index=list(PrecipitationUnit).index(vm.units.precipitation),
                format_func=lambda u: u.value,
                key="unit_precip",
                on_change=_on_units,
                args=(vm,),
            )


def _render_suggestions(vm: WeatherViewModel) -> None:
    if st.session_state.pop(RERUN_KEY, False):
        st.rerun(scope="app")
    for i, place in enumerate(vm.search.visible_suggestions):
        st.button(
            f"{place.name} · {place.label}",
            key=f"suggestion-{place.key}-{i}",
            on_click=_on_select,
            args=(vm, i),
            use_container_width=True,
        )


def _render_search(vm: WeatherViewModel) -> None:
    st.markdown("<h2 class='headline'>How's the sky looking today?</h2>", unsafe_allow_html=True)
    col_input, col_button = st.columns([5, 1])
    with col_input:
        st.text_input(
            "Search for a place...",
            key=QUERY_KEY,
            placeholder="Search for a place...",
            label_visibility="collapsed",
            on_change=_on_query_change,
            args=(vm,),
        )
        # ehdotuslista piirretään uudelleen, kun debounce/haku valmistuu taustalla
        st.fragment(run_every=SEARCH_POLL_S)(_render_suggestions)(vm)
    with col_button:
        st.button("Search", on_click=_on_submit, args=(vm,), use_container_width=True)


def _render_clock(vm: WeatherViewModel) -> None:
    now = datetime.now(vm.location_timezone())
    st.caption(now.strftime("%I:%M:%S %p").lstrip("0"))


def _render_error(vm: WeatherViewModel) -> None:
    card(
        "Something went wrong",
        f"<span class='hint'>{vm.error}</span>",
        height_dvh=12,
    )
    st.button("🔄 Retry", on_click=_on_retry, args=(vm,))


def _render_content(vm: WeatherViewModel) -> None:
    current = vm.current_view()
    forecast = vm.forecast_view()
    if current is None:
        return

    main_col, hourly_col = st.columns([2, 1])
    with main_col:
        st.markdown(current_html(current), unsafe_allow_html=True)
        st.fragment(run_every=CLOCK_REFRESH_S)(_render_clock)(vm)
    with hourly_col:
        section_title("Hourly forecast", mb=6)
        st.markdown(hourly_html(forecast.hourly), unsafe_allow_html=True)

    if forecast.hourly:
        temps = [convert_temperature(s.temp, vm.units) for s in vm.timeline[:HOURLY_SLOTS]]
        fig = build_hourly_figure(
            [h.time for h in forecast.hourly],
            [t.value for t in temps],
            temps[0].unit,
        )
        st.plotly_chart(fig, use_container_width=True, theme=None, config=PLOTLY_CONFIG)

    section_title("Daily forecast", mb=6)
    st.markdown(daily_html(forecast.daily), unsafe_allow_html=True)


def card_weather() -> None:
    """Render the Weather Now page: units menu, search, current weather and forecast."""
    try:
        vm = get_viewmodel()
        _render_header(vm)
        _render_search(vm)

        if vm.status is Status.LOADING:
            st.markdown("<div class='loading'>Loading...</div>", unsafe_allow_html=True)
            return
        if vm.status is Status.ERROR:
            _render_error(vm)
            return

        _render_content(vm)

    except Exception as e:
        report_error("card_weather", e)
        card("Weather Now", f"<span class='hint'>Error: {e}</span>", height_dvh=15)
