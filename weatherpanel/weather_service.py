# ABOUTME: Service layer for Open-Meteo API calls and response parsing.
# ABOUTME: Handles geocoding plus the current, past-week and marine weather fetches.

import logging
from datetime import date, timedelta

import httpx

from weatherpanel.config import Settings
from weatherpanel.errors import ErrorKind, WeatherError
from weatherpanel.models import (
    MAX_HISTORICAL_DAYS,
    CurrentConditions,
    HistoricalDay,
    Location,
    MarineConditions,
)

logger = logging.getLogger(__name__)

CURRENT_PARAMS = "temperature_2m,relative_humidity_2m,weather_code,wind_speed_10m,surface_pressure"
DAILY_PARAMS = "temperature_2m_max,temperature_2m_min,weather_code"
MARINE_PARAMS = "wave_height,sea_surface_temperature,wind_wave_height"


async def geocode(client: httpx.AsyncClient, city_name: str, settings: Settings | None = None) -> Location | None:
    """Geocode a place name to its best match, or None when nothing matches.

    Raises WeatherError(LOOKUP_FAILED) when the geocoding service cannot be reached
    or answers with a payload that has no usable match.
    """
    settings = settings or Settings()
    try:
        resp = await client.get(
            settings.geocoding_url,
            params={"name": city_name, "count": 1, "language": "en", "format": "json"},
        )
        resp.raise_for_status()
        results = resp.json().get("results")
        if not results:
            return None

        r = results[0]
        return Location(
            latitude=r["latitude"],
            longitude=r["longitude"],
            name=r["name"],
            country=r.get("country"),
            region=r.get("admin1") or None,
        )
    except (httpx.HTTPError, ValueError, KeyError, AttributeError, TypeError) as e:
        logger.warning("Geocoding failed for %r: %s", city_name, e)
        raise WeatherError(ErrorKind.LOOKUP_FAILED) from e


async def fetch_current(
    client: httpx.AsyncClient, location: Location, settings: Settings | None = None
) -> CurrentConditions:
    """Fetch current conditions from the forecast API's "current" block."""
    settings = settings or Settings()
    try:
        resp = await client.get(
            settings.forecast_url,
            params={
                "latitude": location.latitude,
                "longitude": location.longitude,
                "current": CURRENT_PARAMS,
                "timezone": "auto",
            },
        )
        resp.raise_for_status()
        return parse_current(resp.json().get("current") or {})
    except (httpx.HTTPError, ValueError, KeyError, AttributeError, TypeError) as e:
        logger.warning("Current weather fetch failed for %s: %s", location.name, e)
        raise WeatherError(ErrorKind.CURRENT_UNAVAILABLE) from e


async def fetch_historical(
    client: httpx.AsyncClient,
    location: Location,
    settings: Settings | None = None,
    today: date | None = None,
) -> list[HistoricalDay]:
    """Fetch daily max/min temperature and weather code for the week ending today.

    The window is recomputed on every call: start is today minus history_days, end is today.
    """
    settings = settings or Settings()
    end_date = today or date.today()
    start_date = end_date - timedelta(days=settings.history_days)
    try:
        resp = await client.get(
            settings.forecast_url,
            params={
                "latitude": location.latitude,
                "longitude": location.longitude,
                "daily": DAILY_PARAMS,
                "timezone": "auto",
                "start_date": start_date.isoformat(),
                "end_date": end_date.isoformat(),
            },
        )
        resp.raise_for_status()
        return parse_daily_data(resp.json().get("daily") or {})
    except (httpx.HTTPError, ValueError, KeyError, AttributeError, TypeError) as e:
        logger.warning("Historical weather fetch failed for %s: %s", location.name, e)
        raise WeatherError(ErrorKind.HISTORICAL_UNAVAILABLE) from e


async def fetch_marine(
    client: httpx.AsyncClient, location: Location, settings: Settings | None = None
) -> MarineConditions | None:
    """Fetch the latest hourly sea state, or None when the location has no marine data.

    Never raises: inland coordinates, HTTP errors, malformed bodies and empty series
    all come back as None.
    """
    settings = settings or Settings()
    try:
        resp = await client.get(
            settings.marine_url,
            params={
                "latitude": location.latitude,
                "longitude": location.longitude,
                "hourly": MARINE_PARAMS,
                "timezone": "auto",
            },
        )
        resp.raise_for_status()
        return parse_latest_marine(resp.json().get("hourly") or {})
    except (httpx.HTTPError, ValueError, KeyError, AttributeError, TypeError) as e:
        logger.warning("Marine weather unavailable for %s: %s", location.name, e)
        return None


def parse_current(raw: dict) -> CurrentConditions:
    """Map the API's "current" object onto CurrentConditions."""
    return CurrentConditions(
        temperature_c=raw["temperature_2m"],
        humidity_pct=raw["relative_humidity_2m"],
        weather_code=raw.get("weather_code"),
        wind_speed_kmh=raw.get("wind_speed_10m"),
        pressure_hpa=raw.get("surface_pressure"),
    )


def parse_daily_data(raw: dict) -> list[HistoricalDay]:
    """Parse Open-Meteo column-oriented daily data into at most seven HistoricalDay rows, oldest first."""
    dates = raw.get("time", [])
    if not dates:
        return []

    result = []
    for i, d in enumerate(dates[:MAX_HISTORICAL_DAYS]):
        result.append(
            HistoricalDay(
                date=date.fromisoformat(d),
                max_temp_c=_get_at(raw, "temperature_2m_max", i),
                min_temp_c=_get_at(raw, "temperature_2m_min", i),
                weather_code=_get_at(raw, "weather_code", i),
            )
        )
    return result


def parse_latest_marine(raw: dict) -> MarineConditions | None:
    """Take the last hourly sample as "now". An empty wave_height series means no marine data."""
    waves = raw.get("wave_height")
    if not waves:
        return None

    i = len(waves) - 1
    conditions = MarineConditions(
        wave_height_m=_get_at(raw, "wave_height", i),
        sea_temp_c=_get_at(raw, "sea_surface_temperature", i),
        wind_wave_height_m=_get_at(raw, "wind_wave_height", i),
    )
    if conditions.wave_height_m is None and conditions.sea_temp_c is None and conditions.wind_wave_height_m is None:
        return None
    return conditions


def _get_at(data: dict, key: str, index: int):
    """Safely get value at index from a column array, returning None if missing."""
    col = data.get(key)
    if col is None or index >= len(col):
        return None
    return col[index]
