"""Session state snapshot published by the weather controller."""

from dataclasses import dataclass

from weatherdash.models.common import DEFAULT_CITY, DEFAULT_UNIT, TemperatureUnit
from weatherdash.models.forecast import ForecastDay
from weatherdash.models.weather import CurrentConditions


@dataclass(frozen=True)
class SessionState:
    city: str = DEFAULT_CITY
    unit: TemperatureUnit = DEFAULT_UNIT
    current_conditions: CurrentConditions | None = None
    forecast: list[ForecastDay] | None = None
    loading: bool = False
    error: str = ""

    @property
    def has_error(self) -> bool:
        return bool(self.error)
