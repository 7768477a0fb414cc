# ABOUTME: Dependency container for the web app using Pydantic BaseModel.
# ABOUTME: Holds the shared httpx.AsyncClient and Settings used by the search controllers.

import httpx
from pydantic import BaseModel, ConfigDict

from weatherpanel.config import Settings


class WeatherDeps(BaseModel):
    """Dependencies shared by every search issued from the web app."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings = Settings()


def create_http_client() -> httpx.AsyncClient:
    """Create a plain httpx client.

    Each search makes a single attempt per request, so no retry transport is mounted.
    """
    return httpx.AsyncClient()
