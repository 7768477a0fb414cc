# ABOUTME: HTML adapter that draws a ViewState as the weather page.
# ABOUTME: Builds the global-search page and the per-card page from plain string templates.

from html import escape

from weatherpanel.models import Panel
from weatherpanel.presentation import ViewState

PANEL_TITLES = {
    Panel.CURRENT: "Current Weather",
    Panel.HISTORICAL: "Past 7 Days",
    Panel.MARINE: "Marine Conditions",
}

_STYLE = """
body { font-family: sans-serif; max-width: 960px; margin: 2rem auto; }
.card { border: 1px solid #ccc; border-radius: 8px; padding: 1rem; margin: 1rem 0; }
.error { background: #fde2e2; color: #8a1f1f; padding: .75rem; border-radius: 6px; }
.loading { color: #555; font-style: italic; }
.historical-day { display: inline-block; width: 110px; text-align: center; }
.empty { color: #777; }
"""


def _layout(title: str, view: ViewState, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        f'<html lang="en"><head><meta charset="utf-8"><title>{escape(title)}</title>'
        f"<style>{_STYLE}</style></head><body>"
        f"<h1>{escape(title)}</h1>"
        f'<p id="currentDate">{escape(view.current_date)}</p>'
        f"{body}</body></html>"
    )


def _search_form(action: str, label: str = "Search") -> str:
    return (
        f'<form method="post" action="{escape(action)}">'
        '<input type="text" name="city" placeholder="Enter a city name or country" autofocus>'
        f'<button type="submit">{escape(label)}</button></form>'
    )


def _error_banner(view: ViewState, dismiss_action: str = "/error/dismiss") -> str:
    if view.error is None:
        return ""
    return (
        f'<div class="error" id="errorMessage">{escape(view.error)}'
        f'<form method="post" action="{dismiss_action}" style="display:inline">'
        '<button type="submit" aria-label="Dismiss">&times;</button></form></div>'
    )


def _loading(view: ViewState) -> str:
    return '<p class="loading" id="loadingIndicator">Loading weather data...</p>' if view.loading else ""


def _panel_body(view: ViewState, panel: Panel) -> str:
    if panel is Panel.CURRENT:
        c = view.current
        return (
            f'<div id="temperature">{escape(c.temperature)}°C</div>'
            f'<div id="weatherCondition">{escape(c.condition)}</div>'
            f'<div id="location">{escape(c.location)}</div>'
            f'<div>Humidity: <span id="humidity">{escape(c.humidity)}</span></div>'
            f'<div>Wind: <span id="windSpeed">{escape(c.wind_speed)}</span></div>'
            f'<div>Pressure: <span id="pressure">{escape(c.pressure)}</span></div>'
        )
    if panel is Panel.HISTORICAL:
        h = view.historical
        if h.empty_message:
            return f'<p class="empty">{escape(h.empty_message)}</p>'
        return "".join(
            '<div class="historical-day">'
            f'<div class="historical-date">{escape(row.date_label)}</div>'
            f'<div class="historical-temp">{escape(row.max_temp)}</div>'
            f'<div class="historical-condition">{escape(row.condition)}</div></div>'
            for row in h.days
        )
    m = view.marine
    if m.empty_message:
        return f'<p class="empty">{escape(m.empty_message)}</p>'
    return (
        f'<div>Wave height: <span id="waveHeight">{escape(m.wave_height)}</span></div>'
        f'<div>Sea temperature: <span id="seaTemperature">{escape(m.sea_temperature)}</span></div>'
        f'<div>Wind waves: <span id="marineWindSpeed">{escape(m.wind_wave_height)}</span></div>'
    )


def render_global_page(view: ViewState) -> str:
    """Single search bar above the three cards. Hidden cards are not drawn."""
    cards = "".join(
        f'<section class="card" id="{panel.value}Weather"><h2>{PANEL_TITLES[panel]}</h2>'
        f"{_panel_body(view, panel)}</section>"
        for panel in Panel
        if panel in view.visible
    )
    body = _search_form("/search") + _error_banner(view) + _loading(view) + cards
    return _layout("Weather", view, body)


def render_cards_page(view: ViewState) -> str:
    """Every card is drawn; each has its own search toggle and scoped message."""
    cards = []
    for panel in Panel:
        if view.active_panel is panel:
            control = _search_form(f"/cards/{panel.value}/search") + (
                '<form method="post" action="/cards/close"><button type="submit">Cancel</button></form>'
            )
        else:
            control = (
                f'<form method="post" action="/cards/{panel.value}/open">'
                '<button type="submit">Change location</button></form>'
            )
        scoped = view.panel_errors.get(panel)
        message = f'<div class="error">{escape(scoped)}</div>' if scoped else ""
        content = _panel_body(view, panel) if panel in view.visible else ""
        if panel in view.loading_panels:
            content = '<p class="loading">Loading weather data...</p>' + content
        cards.append(
            f'<section class="card" id="{panel.value}Weather"><h2>{PANEL_TITLES[panel]}</h2>'
            f"{control}{message}{content}</section>"
        )
    body = _error_banner(view, "/error/dismiss?from=cards") + "".join(cards)
    return _layout("Weather Cards", view, body)
