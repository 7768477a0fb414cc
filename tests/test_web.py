# ABOUTME: Tests for the Starlette routes that serve the global and per-card pages.
# ABOUTME: Uses TestClient with a mocked Open-Meteo client injected through WeatherDeps.

import pytest
from starlette.testclient import TestClient

from tests.fakes import routed_client
from weatherpanel.deps import WeatherDeps
from weatherpanel.models import Panel
from weatherpanel.web import create_app


@pytest.fixture
def web():
    app = create_app(WeatherDeps(http_client=routed_client()))
    with TestClient(app) as client:
        yield client


class TestGlobalPage:
    def test_search_renders_panels(self, web):
        """Submitting the search form redirects to a page showing every card.

        Implementation: Posts city=Paris and follows the redirect.
        Passing implies: The HTML adapter draws the rendered view state.
        """
        resp = web.post("/search", data={"city": "Paris"})

        assert resp.status_code == 200
        assert "Paris, France" in resp.text
        assert "Overcast" in resp.text
        assert 'id="marineWeather"' in resp.text
        assert 'id="loadingIndicator"' not in resp.text

    def test_empty_search_shows_banner(self, web):
        """An empty submission shows the validation banner and no cards.

        Implementation: Posts an empty city field.
        Passing implies: The error banner is rendered and no card section appears.
        """
        resp = web.post("/search", data={"city": ""})
        assert "Please enter a city name or country" in resp.text
        assert 'class="card"' not in resp.text

    def test_dismiss_error(self, web):
        """The banner's dismiss button clears the error.

        Implementation: Triggers a validation error, then posts to /error/dismiss.
        Passing implies: The banner is gone from the next page.
        """
        web.post("/search", data={"city": " "})
        resp = web.post("/error/dismiss")
        assert "Please enter a city name or country" not in resp.text

    def test_state_endpoint(self, web):
        """/api/state exposes the global view state as JSON.

        Implementation: Searches Paris and fetches the JSON dump.
        Passing implies: The view state serialises cleanly.
        """
        web.post("/search", data={"city": "Paris"})
        state = web.get("/api/state").json()

        assert state["current"]["temperature"] == "18"
        assert sorted(state["visible"]) == ["current", "historical", "marine"]
        assert state["loading"] is False

    def test_clock_is_running(self, web):
        """The clock task fills the date line once the app has started.

        Implementation: Reads the state after lifespan startup.
        Passing implies: The background clock updates current_date.
        """
        assert web.get("/api/state").json()["current_date"] != ""


class TestCardsPage:
    def test_open_and_search_card(self, web):
        """Opening a card's search box and submitting updates only that card.

        Implementation: Opens the historical card, searches Paris, then reads the page.
        Passing implies: The card routes drive PerCardController and close the box afterwards.
        """
        resp = web.post("/cards/historical/open")
        assert 'action="/cards/historical/search"' in resp.text

        resp = web.post("/cards/historical/search", data={"city": "Paris"})
        assert "Oct 12" in resp.text
        assert 'action="/cards/historical/search"' not in resp.text
        assert web.app.state.cards.view.visible == {Panel.HISTORICAL}

    def test_unknown_panel_is_404(self, web):
        resp = web.post("/cards/pollen/open")
        assert resp.status_code == 404

    def test_close_search_box(self, web):
        web.post("/cards/marine/open")
        resp = web.post("/cards/close")
        assert 'action="/cards/marine/search"' not in resp.text
