# ABOUTME: ASGI web entry point for the weather panels UI.
# ABOUTME: Starlette routes for the global search page, the per-card page and a JSON view-state dump.

import asyncio
import contextlib
import logging
from datetime import datetime

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, RedirectResponse
from starlette.routing import Route

from weatherpanel.config import configure_logging, load_settings
from weatherpanel.controller import PerCardController, SearchController
from weatherpanel.deps import WeatherDeps, create_http_client
from weatherpanel.models import Panel
from weatherpanel.page import render_cards_page, render_global_page
from weatherpanel.presentation import ViewState, hide_error, update_clock

logger = logging.getLogger(__name__)


async def clock_loop(views: list[ViewState], interval: float = 1.0) -> None:
    """Refresh the date line on every view once per interval. Touches nothing else."""
    while True:
        now = datetime.now()
        for view in views:
            update_clock(view, now)
        await asyncio.sleep(interval)


def _panel_from_path(request: Request) -> Panel:
    try:
        return Panel(request.path_params["panel"])
    except ValueError:
        raise HTTPException(status_code=404, detail="Unknown panel") from None


def create_app(deps: WeatherDeps | None = None) -> Starlette:
    """Build the app around one shared HTTP client and one view per page."""
    if deps is None:
        settings = load_settings()
        configure_logging(settings.log_level)
        deps = WeatherDeps(http_client=create_http_client(), settings=settings)

    search = SearchController(deps)
    cards = PerCardController(deps)

    async def index(request: Request):
        return HTMLResponse(render_global_page(search.view))

    async def submit_search(request: Request):
        form = await request.form()
        await search.search(str(form.get("city", "")))
        return RedirectResponse("/", status_code=303)

    async def dismiss_error(request: Request):
        hide_error(search.view)
        hide_error(cards.view)
        target = "/cards" if request.query_params.get("from") == "cards" else "/"
        return RedirectResponse(target, status_code=303)

    async def cards_index(request: Request):
        return HTMLResponse(render_cards_page(cards.view))

    async def open_card_search(request: Request):
        cards.open_search(_panel_from_path(request))
        return RedirectResponse("/cards", status_code=303)

    async def close_card_search(request: Request):
        cards.close_search()
        return RedirectResponse("/cards", status_code=303)

    async def submit_card_search(request: Request):
        panel = _panel_from_path(request)
        form = await request.form()
        await cards.search(panel, str(form.get("city", "")))
        return RedirectResponse("/cards", status_code=303)

    async def state(request: Request):
        return JSONResponse(search.view.model_dump(mode="json"))

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        clock = asyncio.create_task(clock_loop([search.view, cards.view]))
        try:
            yield
        finally:
            clock.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await clock
            await deps.http_client.aclose()

    app = Starlette(
        routes=[
            Route("/", index),
            Route("/search", submit_search, methods=["POST"]),
            Route("/error/dismiss", dismiss_error, methods=["POST"]),
            Route("/cards", cards_index),
            Route("/cards/close", close_card_search, methods=["POST"]),
            Route("/cards/{panel}/open", open_card_search, methods=["POST"]),
            Route("/cards/{panel}/search", submit_card_search, methods=["POST"]),
            Route("/api/state", state),
        ],
        lifespan=lifespan,
    )
    app.state.search = search
    app.state.cards = cards
    return app


app = create_app()
