# ABOUTME: Canned Open-Meteo payloads and a URL-routed mock httpx.AsyncClient for tests.
# ABOUTME: Routes geocoding, current, daily and marine requests to per-endpoint fake responses.

from unittest.mock import AsyncMock

import httpx

from weatherpanel.config import FORECAST_URL, GEOCODING_URL, MARINE_URL

PARIS_GEOCODE = {
    "results": [
        {
            "latitude": 48.85,
            "longitude": 2.35,
            "name": "Paris",
            "country": "France",
        }
    ]
}

PARIS_CURRENT = {
    "current": {
        "temperature_2m": 18.4,
        "relative_humidity_2m": 65,
        "weather_code": 3,
        "wind_speed_10m": 11.6,
        "surface_pressure": 1012.7,
    }
}

PARIS_DAILY = {
    "daily": {
        "time": [
            "2026-10-12",
            "2026-10-13",
            "2026-10-14",
            "2026-10-15",
            "2026-10-16",
            "2026-10-17",
            "2026-10-18",
            "2026-10-19",
        ],
        "temperature_2m_max": [17.6, 16.2, 15.5, 18.0, 19.4, 14.9, 13.1, 18.4],
        "temperature_2m_min": [9.1, 8.4, 7.7, 10.2, 11.0, 8.8, 6.5, 9.9],
        "weather_code": [0, 1, 2, 3, 61, 63, 95, 3],
    }
}

PARIS_MARINE = {
    "hourly": {
        "time": ["2026-10-19T00:00", "2026-10-19T01:00"],
        "wave_height": [0.8, 1.24],
        "sea_surface_temperature": [16.9, 17.2],
        "wind_wave_height": [0.3, 0.41],
    }
}

EMPTY_MARINE = {"hourly": {"time": [], "wave_height": [], "sea_surface_temperature": [], "wind_wave_height": []}}


def json_response(json_data: dict, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test"))


def routed_client(
    geocode=PARIS_GEOCODE,
    current=PARIS_CURRENT,
    daily=PARIS_DAILY,
    marine=PARIS_MARINE,
) -> AsyncMock:
    """Create a mock httpx.AsyncClient that answers by URL and request params.

    Each route value may be a dict (200 JSON), an httpx.Response, or an exception to raise.
    """
    mock = AsyncMock(spec=httpx.AsyncClient)

    def answer(route):
        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            return route
        return json_response(route)

    def get(url, params=None, **kwargs):
        params = params or {}
        if url == GEOCODING_URL:
            return answer(geocode)
        if url == MARINE_URL:
            return answer(marine)
        if url == FORECAST_URL and "current" in params:
            return answer(current)
        if url == FORECAST_URL and "daily" in params:
            return answer(daily)
        raise AssertionError(f"Unexpected request to {url} with {params}")

    mock.get.side_effect = get
    return mock


