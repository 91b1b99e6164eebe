# src/ui/card_weather_parts.py
from __future__ import annotations

from html import escape

import plotly.graph_objects as go

from src.api.forecast_aggregate import DailyEntry, HourlyEntry
from src.config import COLOR_ACCENT, COLOR_TEXT_GRAY
from src.viewmodels.weather import CurrentView
from src.weather_icons import render_icon


def current_html(view: CurrentView) -> str:
    """Nykysääkortti: sijainti, päivä, ikoni, lämpötila ja neljä lisätietoa."""
    wind_value, wind_unit = view.wind
    precip_value, precip_unit = view.precipitation

    def detail(label: str, value: str, unit: str = "") -> str:
        unit_html = f"<div class='detail-unit'>{escape(unit)}</div>" if unit else ""
        return (
            "<div class='detail'>"
            f"<div class='detail-label'>{escape(label)}</div>"
            f"<div class='detail-value'>{escape(value)}</div>"
            f"{unit_html}</div>"
        )

    return f"""
        <div class="current-card">
          <div class="current-title">{escape(view.title)}</div>
          <div class="current-date">{escape(view.date_label)}</div>
          <div class="current-main">
            <div class="current-icon">{render_icon(view.icon, size=72)}</div>
            <div class="current-temp">{escape(view.temp)}</div>
          </div>
          <div class="current-desc">{escape(view.description)}</div>
          <div class="details">
            {detail("Feels Like", view.feels_like)}
            {detail("Humidity", view.humidity)}
            {detail("Wind", str(wind_value), wind_unit)}
            {detail("Precipitation", str(precip_value), precip_unit)}
          </div>
        </div>
    """


def hourly_html(entries: list[HourlyEntry]) -> str:
    rows = "".join(
        f"""
        <div class="hour-row">
          <div class="hour-left">{render_icon(e.icon, size=28)}<span>{escape(e.time)}</span></div>
          <div class="hour-temp">{escape(e.temp)}</div>
        </div>
        """
        for e in entries
    )
    return f"<div class='hourly'>{rows}</div>"


def daily_html(entries: list[DailyEntry]) -> str:
    cells = "".join(
        f"""
        <div class="day-cell">
          <div class="day-name">{escape(e.name)}</div>
          <div class="day-icon">{render_icon(e.icon, size=56)}</div>
          <div class="day-high">{escape(e.high)}</div>
          <div class="day-low">L: {escape(e.low)}</div>
        </div>
        """
        for e in entries
    )
    return f"<div class='daily'>{cells}</div>"


def build_hourly_figure(labels: list[str], temps: list[int], unit: str) -> go.Figure:
    """Tuntiennusteen lämpötilakäyrä."""
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=labels,
            y=temps,
            mode="lines+markers",
            line=dict(color=COLOR_ACCENT, width=3, shape="spline"),
            marker=dict(size=6),
            hovertemplate=f"%{{x}}: %{{y}}{unit}<extra></extra>",
        )
    )
    fig.update_layout(
        height=180,
        margin=dict(l=10, r=10, t=10, b=10),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color=COLOR_TEXT_GRAY),
        showlegend=False,
        xaxis=dict(showgrid=False, type="category"),
        yaxis=dict(showgrid=True, gridcolor="rgba(255,255,255,0.08)", ticksuffix="°"),
    )
    return fig
