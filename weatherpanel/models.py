# ABOUTME: Pydantic BaseModels for the location and weather slices shown in the UI panels.
# ABOUTME: Defines Location, CurrentConditions, HistoricalDay, MarineConditions and panel enums.

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict

MAX_HISTORICAL_DAYS = 7


class Panel(str, Enum):
    """One of the three weather cards on the page."""

    CURRENT = "current"
    HISTORICAL = "historical"
    MARINE = "marine"


class SearchStatus(str, Enum):
    """Lifecycle of a single search target."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class Location(BaseModel):
    """Best geocoding match for a place name."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    name: str
    country: str | None = None
    region: str | None = None

    def display_name(self) -> str:
        """Format as "name, region, country", dropping the region when unknown."""
        parts = [self.name]
        if self.region:
            parts.append(self.region)
        if self.country:
            parts.append(self.country)
        return ", ".join(parts)


class CurrentConditions(BaseModel):
    """Instantaneous conditions from the forecast endpoint's "current" block."""

    temperature_c: float
    humidity_pct: float
    weather_code: int | None = None
    wind_speed_kmh: float | None = None
    pressure_hpa: float | None = None


class HistoricalDay(BaseModel):
    """One day of the past-week daily series."""

    date: date
    max_temp_c: float | None = None
    min_temp_c: float | None = None
    weather_code: int | None = None


class MarineConditions(BaseModel):
    """Latest hourly sea-state sample from the marine endpoint.

    wind_wave_height_m is a wave height in metres, not a wind speed.
    """

    wave_height_m: float | None = None
    sea_temp_c: float | None = None
    wind_wave_height_m: float | None = None
