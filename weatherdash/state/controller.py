"""Session state owner: runs refreshes and publishes immutable snapshots."""

import logging
from collections.abc import Callable
from dataclasses import replace

import httpx

from weatherdash.config.schema import DashboardConfig
from weatherdash.errors import GENERIC_FAILURE, CityValidationError, WeatherDashError
from weatherdash.ingest.projection import project_forecast
from weatherdash.ingest.weather_client import WeatherApiClient
from weatherdash.models.common import DEFAULT_CITY, DEFAULT_UNIT, TemperatureUnit
from weatherdash.models.session import SessionState
from weatherdash.models.weather import WeatherReport
from weatherdash.services.weather_service import WeatherService
from weatherdash.state.validation import validate_city

logger = logging.getLogger(__name__)

Listener = Callable[[SessionState], None]


class WeatherController:
    """Owns the dashboard session and is the only thing that changes it.

    Every refresh is tagged with a generation number. A refresh that
    completes after a newer one has been started is dropped, so the
    published state always belongs to the most recently triggered
    (city, unit) pair regardless of response arrival order. Failures keep
    the previously displayed weather and forecast next to the new error.
    """

    def __init__(
        self,
        service: WeatherService,
        city: str = DEFAULT_CITY,
        unit: TemperatureUnit = DEFAULT_UNIT,
        reproject_on_toggle: bool = False,
    ):
        self.service = service
        self.reproject_on_toggle = reproject_on_toggle
        self._state = SessionState(city=city, unit=TemperatureUnit(unit))
        self._generation = 0
        self._last_report: WeatherReport | None = None
        self._listeners: list[Listener] = []

    @classmethod
    def from_config(
        cls, config: DashboardConfig, http: httpx.AsyncClient | None = None
    ) -> "WeatherController":
        client = WeatherApiClient.from_config(config.api, http=http)
        service = WeatherService(client, forecast_days=config.api.forecast_days)
        return cls(
            service,
            city=config.defaults.city,
            unit=config.defaults.unit,
            reproject_on_toggle=config.behavior.reproject_on_toggle,
        )

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a snapshot listener. Returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def start(self) -> SessionState:
        """Initial refresh for the seed city and unit."""
        return await self.refresh()

    async def refresh(self) -> SessionState:
        return await self._refresh_for(self._state.city, self._state.unit)

    async def submit_city(self, name: str) -> SessionState:
        try:
            city = validate_city(name)
        except CityValidationError as e:
            logger.info("Rejected city search %r: %s", name, e)
            self._publish(replace(self._state, error=str(e)))
            return self._state
        return await self._refresh_for(city, self._state.unit)

    async def toggle_unit(self) -> SessionState:
        unit = self._state.unit.toggled()
        report = self._last_report
        if (
            self.reproject_on_toggle
            and report is not None
            and report.city == self._state.city
        ):
            # Newer generation so an in-flight fetch for the old unit is dropped
            self._generation += 1
            logger.debug("Re-projecting %s forecast to %s", report.city, unit)
            self._publish(
                replace(
                    self._state,
                    unit=unit,
                    current_conditions=report.current,
                    forecast=project_forecast(report.raw_forecast, unit),
                    loading=False,
                    error="",
                )
            )
            return self._state
        return await self._refresh_for(self._state.city, unit)

    async def aclose(self) -> None:
        await self.service.client.aclose()

    async def _refresh_for(self, city: str, unit: TemperatureUnit) -> SessionState:
        self._generation += 1
        generation = self._generation
        self._publish(
            replace(self._state, city=city, unit=unit, loading=True, error="")
        )

        report: WeatherReport | None = None
        error = ""
        try:
            report = await self.service.fetch(city, unit)
        except WeatherDashError as e:
            error = str(e)
        except Exception:
            logger.exception("Unexpected failure refreshing weather for %r", city)
            error = GENERIC_FAILURE

        if generation != self._generation:
            logger.debug(
                "Discarding refresh %d for (%r, %s); latest is %d",
                generation, city, unit, self._generation,
            )
            return self._state

        if report is None:
            self._publish(replace(self._state, loading=False, error=error))
        else:
            self._last_report = report
            self._publish(
                replace(
                    self._state,
                    current_conditions=report.current,
                    forecast=report.forecast,
                    loading=False,
                    error="",
                )
            )
        return self._state

    def _publish(self, state: SessionState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Session state listener failed")
