# ABOUTME: Tagged error type for failures in the geocode-then-fetch search sequence.
# ABOUTME: Each WeatherError carries an ErrorKind and the user-facing message shown in the UI.

from enum import Enum

GENERIC_ERROR = "Failed to fetch weather data. Please try again."


class ErrorKind(str, Enum):
    """Reason a search could not be completed."""

    VALIDATION = "validation"
    LOOKUP_FAILED = "lookup_failed"
    NOT_FOUND = "not_found"
    CURRENT_UNAVAILABLE = "current_unavailable"
    HISTORICAL_UNAVAILABLE = "historical_unavailable"


DEFAULT_MESSAGES = {
    ErrorKind.VALIDATION: "Please enter a city name or country",
    ErrorKind.LOOKUP_FAILED: "Failed to find location. Please check your internet connection.",
    ErrorKind.NOT_FOUND: "City not found. Please check the spelling and try again.",
    ErrorKind.CURRENT_UNAVAILABLE: "Failed to fetch current weather data.",
    ErrorKind.HISTORICAL_UNAVAILABLE: "Failed to fetch historical weather data.",
}


class WeatherError(Exception):
    """A search failure that is safe to show to the user verbatim."""

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        self.message = message if message is not None else DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"WeatherError({self.kind.value!r}, {self.message!r})"
