# ABOUTME: Settings for the weather panels app, read from the environment after loading .env.
# ABOUTME: Holds Open-Meteo endpoint URLs, the history window length and the log level.

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
MARINE_URL = "https://marine-api.open-meteo.com/v1/marine"


class Settings(BaseModel):
    """Runtime configuration. Defaults point at the public Open-Meteo API."""

    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    marine_url: str = MARINE_URL
    history_days: int = 7
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build Settings from WEATHERPANEL_* environment variables, falling back to defaults."""
    load_dotenv()
    return Settings(
        geocoding_url=os.environ.get("WEATHERPANEL_GEOCODING_URL", GEOCODING_URL),
        forecast_url=os.environ.get("WEATHERPANEL_FORECAST_URL", FORECAST_URL),
        marine_url=os.environ.get("WEATHERPANEL_MARINE_URL", MARINE_URL),
        history_days=int(os.environ.get("WEATHERPANEL_HISTORY_DAYS", "7")),
        log_level=os.environ.get("WEATHERPANEL_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
