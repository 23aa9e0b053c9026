"""Combined current + forecast fetch for one (city, unit) pair."""

import asyncio
import logging

from pydantic import ValidationError

from weatherdash.config.defaults import DEFAULT_FORECAST_DAYS
from weatherdash.errors import FetchStage, WeatherFetchError
from weatherdash.ingest.projection import project_forecast
from weatherdash.ingest.schemas import CurrentResponse, ForecastResponse
from weatherdash.ingest.weather_client import WeatherApiClient
from weatherdash.models.common import TemperatureUnit, utc_now_iso
from weatherdash.models.weather import WeatherReport

logger = logging.getLogger(__name__)


class WeatherService:
    def __init__(
        self, client: WeatherApiClient, forecast_days: int = DEFAULT_FORECAST_DAYS
    ):
        self.client = client
        self.forecast_days = forecast_days

    async def fetch(self, city: str, unit: TemperatureUnit) -> WeatherReport:
        """Fetch current conditions and the forecast concurrently.

        Both lookups must succeed; otherwise WeatherFetchError is raised and
        nothing from the other lookup is returned. Failures are checked in
        stage order, so the current-conditions failure is reported when both
        fail. Anything that is not a stage failure (bad JSON, schema
        mismatch, unexpected exception) is an unrecognized failure.
        """
        results = await asyncio.gather(
            self.client.get_current(city),
            self.client.get_forecast(city, self.forecast_days),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, WeatherFetchError):
                raise result
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.error(
                    "Unrecognized failure fetching weather for q=%r: %r",
                    city, result,
                )
                raise WeatherFetchError.unrecognized() from result

        current_raw, forecast_raw = results
        try:
            current = CurrentResponse.model_validate(current_raw).to_model()
            raw_forecast = ForecastResponse.model_validate(forecast_raw).to_model()
        except ValidationError as e:
            logger.error(
                "Weather API response for q=%r failed validation: %d errors",
                city, e.error_count(),
            )
            raise WeatherFetchError.unrecognized() from e

        forecast = project_forecast(raw_forecast, unit)
        logger.info(
            "Fetched weather for q=%r (%s): %s, %d forecast days",
            city, unit, current.location.name, len(forecast),
        )
        return WeatherReport(
            city=city,
            unit=unit,
            current=current,
            forecast=forecast,
            raw_forecast=raw_forecast,
            fetched_at=utc_now_iso(),
        )
