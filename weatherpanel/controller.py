# ABOUTME: Interaction controllers that wire a submitted place name to the fetch-and-render pipeline.
# ABOUTME: SearchController fills all three panels; PerCardController searches one card at a time.

import asyncio
import logging

from weatherpanel.deps import WeatherDeps
from weatherpanel.errors import GENERIC_ERROR, ErrorKind, WeatherError
from weatherpanel.models import Location, Panel, SearchStatus
from weatherpanel.presentation import (
    ViewState,
    hide_all_panels,
    hide_error,
    hide_loading,
    render_current,
    render_historical,
    render_marine,
    show_error,
    show_loading,
)
from weatherpanel.weather_service import fetch_current, fetch_historical, fetch_marine, geocode

logger = logging.getLogger(__name__)


def _validate(query: str) -> str:
    city_name = query.strip()
    if not city_name:
        raise WeatherError(ErrorKind.VALIDATION)
    return city_name


async def resolve_location(deps: WeatherDeps, city_name: str) -> Location:
    """Geocode city_name, turning "no match" into a NOT_FOUND error."""
    location = await geocode(deps.http_client, city_name, deps.settings)
    if location is None:
        raise WeatherError(ErrorKind.NOT_FOUND)
    return location


class SearchController:
    """Global search bar: one query fills the current, historical and marine panels.

    Overlapping searches are not cancelled. Each one writes to the view when it
    settles, so whichever resolves last is what the page shows.
    """

    def __init__(self, deps: WeatherDeps, view: ViewState | None = None):
        self.deps = deps
        self.view = view if view is not None else ViewState()
        self.search_count = 0

    async def search(self, query: str) -> SearchStatus:
        view = self.view
        try:
            city_name = _validate(query)
        except WeatherError as e:
            show_error(view, e.message)
            return SearchStatus.ERROR

        self.search_count += 1
        logger.info("Search #%d for %r", self.search_count, city_name)
        hide_all_panels(view)
        hide_error(view)
        show_loading(view)
        try:
            location = await resolve_location(self.deps, city_name)
            current, historical, marine = await asyncio.gather(
                fetch_current(self.deps.http_client, location, self.deps.settings),
                fetch_historical(self.deps.http_client, location, self.deps.settings),
                fetch_marine(self.deps.http_client, location, self.deps.settings),
            )
            render_current(view, current, location)
            render_historical(view, historical)
            render_marine(view, marine)
            view.status = SearchStatus.SUCCESS
        except WeatherError as e:
            show_error(view, e.message or GENERIC_ERROR)
        except Exception:
            logger.exception("Unexpected failure searching for %r", city_name)
            show_error(view, GENERIC_ERROR)
        finally:
            hide_loading(view)
        return view.status


class PerCardController:
    """Inline search on each card. A search touches only its own card.

    At most one card's search box is open, tracked by view.active_panel. Loading and
    outcome are kept per card in view.loading_panels and view.panel_status.
    """

    def __init__(self, deps: WeatherDeps, view: ViewState | None = None):
        self.deps = deps
        self.view = view if view is not None else ViewState()
        self.search_count = 0

    def open_search(self, panel: Panel) -> None:
        """Open panel's search box, closing whichever other box was open."""
        self.view.active_panel = panel

    def close_search(self) -> None:
        self.view.active_panel = None

    async def search(self, panel: Panel, query: str) -> SearchStatus:
        view = self.view
        status = SearchStatus.ERROR
        try:
            city_name = _validate(query)
            self.search_count += 1
            logger.info("Search #%d on %s card for %r", self.search_count, panel.value, city_name)
            hide_error(view, panel)
            show_loading(view, panel)
            location = await resolve_location(self.deps, city_name)
            status = await self._fetch_and_render(panel, location)
        except WeatherError as e:
            show_error(view, e.message or GENERIC_ERROR, panel)
        except Exception:
            logger.exception("Unexpected failure searching %s card", panel.value)
            show_error(view, GENERIC_ERROR, panel)
        finally:
            hide_loading(view, panel)
            if view.active_panel is panel:
                self.close_search()
        view.panel_status[panel] = status
        return status

    async def _fetch_and_render(self, panel: Panel, location: Location) -> SearchStatus:
        client, settings = self.deps.http_client, self.deps.settings
        if panel is Panel.CURRENT:
            render_current(self.view, await fetch_current(client, location, settings), location)
        elif panel is Panel.HISTORICAL:
            render_historical(self.view, await fetch_historical(client, location, settings))
        else:
            render_marine(self.view, await fetch_marine(client, location, settings))
        return SearchStatus.SUCCESS
