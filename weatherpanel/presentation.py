# ABOUTME: View state and render functions that turn fetched weather slices into display text.
# ABOUTME: Render helpers mutate a ViewState in place and never raise, so they test without a browser.

import math
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field

from weatherpanel.conditions import label_for
from weatherpanel.models import (
    MAX_HISTORICAL_DAYS,
    CurrentConditions,
    HistoricalDay,
    Location,
    MarineConditions,
    Panel,
    SearchStatus,
)

NOT_AVAILABLE = "N/A"
NO_HISTORY_MESSAGE = "No historical data available."
NO_MARINE_MESSAGE = "No marine data for this location. Try a coastal city."


class CurrentView(BaseModel):
    temperature: str = ""
    condition: str = ""
    humidity: str = ""
    wind_speed: str = ""
    pressure: str = ""
    location: str = ""


class HistoricalRow(BaseModel):
    date_label: str
    max_temp: str
    condition: str


class HistoricalView(BaseModel):
    days: list[HistoricalRow] = []
    empty_message: str | None = None


class MarineView(BaseModel):
    wave_height: str = ""
    sea_temperature: str = ""
    wind_wave_height: str = ""
    empty_message: str | None = None


class ViewState(BaseModel):
    """Everything the page shows, independent of how it is drawn.

    active_panel is the one card whose inline search box is open (per-card variant).
    panel_errors holds errors scoped to a single card; error holds the page-wide banner.
    loading_panels and panel_status track each card's own search, so overlapping card
    searches do not clear each other's indicator.
    """

    current: CurrentView = Field(default_factory=CurrentView)
    historical: HistoricalView = Field(default_factory=HistoricalView)
    marine: MarineView = Field(default_factory=MarineView)
    visible: set[Panel] = Field(default_factory=set)
    loading: bool = False
    error: str | None = None
    panel_errors: dict[Panel, str] = Field(default_factory=dict)
    loading_panels: set[Panel] = Field(default_factory=set)
    panel_status: dict[Panel, SearchStatus] = Field(default_factory=dict)
    active_panel: Panel | None = None
    status: SearchStatus = SearchStatus.IDLE
    current_date: str = ""


def round_half_up(value: float) -> int:
    """Round like the browser's Math.round: halves go toward positive infinity."""
    return math.floor(value + 0.5)


def format_rounded(value: float | None, suffix: str = "") -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"{round_half_up(value)}{suffix}"


def format_one_decimal(value: float | None, suffix: str = "") -> str:
    """One decimal place, ties away from zero on the exact binary value like toFixed(1)."""
    if value is None:
        return NOT_AVAILABLE
    return f"{Decimal(value).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}{suffix}"


def format_day_label(day: date) -> str:
    """Short month/day label, e.g. "Oct 12"."""
    return f"{day.strftime('%b')} {day.day}"


def render_current(view: ViewState, data: CurrentConditions, location: Location) -> None:
    view.current = CurrentView(
        temperature=format_rounded(data.temperature_c),
        condition=label_for(data.weather_code),
        humidity=format_rounded(data.humidity_pct, "%"),
        wind_speed=format_rounded(data.wind_speed_kmh, " km/h"),
        pressure=format_rounded(data.pressure_hpa, " hPa"),
        location=location.display_name(),
    )
    view.visible.add(Panel.CURRENT)


def render_historical(view: ViewState, days: list[HistoricalDay] | None) -> None:
    """Render up to seven days in the order given. No days shows the empty state."""
    if not days:
        view.historical = HistoricalView(empty_message=NO_HISTORY_MESSAGE)
    else:
        view.historical = HistoricalView(
            days=[
                HistoricalRow(
                    date_label=format_day_label(day.date),
                    max_temp=format_rounded(day.max_temp_c, "°"),
                    condition=label_for(day.weather_code),
                )
                for day in days[:MAX_HISTORICAL_DAYS]
            ]
        )
    view.visible.add(Panel.HISTORICAL)


def render_marine(view: ViewState, data: MarineConditions | None) -> None:
    """Render the sea state; each missing field shows N/A on its own.

    The wind-wave field is a height and keeps its metre unit.
    """
    if data is None:
        view.marine = MarineView(empty_message=NO_MARINE_MESSAGE)
    else:
        view.marine = MarineView(
            wave_height=format_one_decimal(data.wave_height_m, " m"),
            sea_temperature=format_rounded(data.sea_temp_c, "°C"),
            wind_wave_height=format_one_decimal(data.wind_wave_height_m, " m"),
        )
    view.visible.add(Panel.MARINE)


def show_loading(view: ViewState, panel: Panel | None = None) -> None:
    if panel is None:
        view.loading = True
        view.status = SearchStatus.LOADING
    else:
        view.loading_panels.add(panel)
        view.panel_status[panel] = SearchStatus.LOADING


def hide_loading(view: ViewState, panel: Panel | None = None) -> None:
    if panel is None:
        view.loading = False
    else:
        view.loading_panels.discard(panel)


def show_error(view: ViewState, message: str, panel: Panel | None = None) -> None:
    """Show a message in the page banner, or scoped to one card when panel is given.

    Only one message per target is kept: a new one replaces the old.
    """
    if panel is None:
        view.error = message
        view.status = SearchStatus.ERROR
    else:
        view.panel_errors[panel] = message
        view.panel_status[panel] = SearchStatus.ERROR


def hide_error(view: ViewState, panel: Panel | None = None) -> None:
    if panel is None:
        view.error = None
    else:
        view.panel_errors.pop(panel, None)


def hide_all_panels(view: ViewState) -> None:
    view.visible.clear()


def update_clock(view: ViewState, now: datetime) -> None:
    """Refresh the date line, e.g. "Monday, October 19, 2026 at 06:05 PM"."""
    view.current_date = f"{now.strftime('%A, %B')} {now.day}, {now.year} at {now.strftime('%I:%M %p')}"
