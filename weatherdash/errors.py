"""Exception types surfaced by the fetch core and the controller."""

from enum import StrEnum

CURRENT_FETCH_FAILED = "Failed to fetch current weather data."
FORECAST_FETCH_FAILED = "Failed to fetch weather forecast data."
GENERIC_FAILURE = "Something went wrong. Please try again."


class FetchStage(StrEnum):
    CURRENT = "current"
    FORECAST = "forecast"
    UNKNOWN = "unknown"


_STAGE_MESSAGES = {
    FetchStage.CURRENT: CURRENT_FETCH_FAILED,
    FetchStage.FORECAST: FORECAST_FETCH_FAILED,
    FetchStage.UNKNOWN: GENERIC_FAILURE,
}


class WeatherDashError(Exception):
    """Base class for errors that carry a user-facing message."""


class CityValidationError(WeatherDashError):
    """Raised when a search term fails the acceptability check."""


class WeatherFetchError(WeatherDashError):
    """Raised when a lookup fails. The message is safe to show to a user."""

    def __init__(
        self,
        stage: FetchStage,
        message: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message or _STAGE_MESSAGES[stage])
        self.stage = stage
        self.status_code = status_code

    @classmethod
    def unrecognized(cls) -> "WeatherFetchError":
        return cls(FetchStage.UNKNOWN)
