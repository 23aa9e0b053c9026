"""Async client for the current-conditions and forecast endpoints."""

import logging
from typing import Any

import httpx

from weatherdash.config.defaults import (
    DEFAULT_CURRENT_URL,
    DEFAULT_FORECAST_DAYS,
    DEFAULT_FORECAST_URL,
    DEFAULT_TIMEOUT_SECONDS,
)
from weatherdash.config.schema import ApiConfig
from weatherdash.errors import FetchStage, WeatherFetchError

logger = logging.getLogger(__name__)


class WeatherApiClient:
    """Thin wrapper around the two weather API lookups.

    Both endpoints always return Celsius and Fahrenheit fields, so requests
    carry no unit. Status and transport failures raise WeatherFetchError
    tagged with the stage; the decoded JSON is returned untouched.
    """

    def __init__(
        self,
        api_key: str = "",
        current_url: str = DEFAULT_CURRENT_URL,
        forecast_url: str = DEFAULT_FORECAST_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.current_url = current_url
        self.forecast_url = forecast_url
        self.timeout = timeout
        self._owns_http = http is None
        if http is None:
            http = httpx.AsyncClient(timeout=timeout)
        self._http = http

    @classmethod
    def from_config(
        cls, api: ApiConfig, http: httpx.AsyncClient | None = None
    ) -> "WeatherApiClient":
        return cls(
            api_key=api.api_key,
            current_url=api.current_url,
            forecast_url=api.forecast_url,
            timeout=api.timeout_seconds,
            http=http,
        )

    async def get_current(self, city: str) -> dict[str, Any]:
        """Fetch current conditions for city."""
        return await self._get(FetchStage.CURRENT, self.current_url, {"q": city})

    async def get_forecast(
        self, city: str, days: int = DEFAULT_FORECAST_DAYS
    ) -> dict[str, Any]:
        """Fetch a days-long forecast for city."""
        return await self._get(
            FetchStage.FORECAST, self.forecast_url, {"q": city, "days": days}
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def _get(
        self, stage: FetchStage, url: str, params: dict[str, Any]
    ) -> dict[str, Any]:
        query = {**params, "key": self.api_key}
        try:
            resp = await self._http.get(url, params=query)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(
                "Weather API %s lookup for q=%r returned %d",
                stage, params.get("q"), status,
            )
            raise WeatherFetchError(stage, status_code=status) from e
        except httpx.RequestError as e:
            logger.error(
                "Weather API %s lookup for q=%r failed: %s",
                stage, params.get("q"), type(e).__name__,
            )
            raise WeatherFetchError(stage) from e
        # Malformed JSON propagates as ValueError; callers treat it as unrecognized
        return resp.json()
