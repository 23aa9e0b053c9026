"""Current conditions and combined report models."""

from dataclasses import dataclass

from weatherdash.models.common import TemperatureUnit
from weatherdash.models.forecast import ForecastDay, RawForecast


@dataclass(frozen=True)
class Condition:
    text: str
    icon: str = ""
    code: int = 0


@dataclass(frozen=True)
class Location:
    name: str
    country: str
    region: str
    lat: float
    lon: float
    localtime: str  # "YYYY-MM-DD HH:MM" in the location's timezone


@dataclass(frozen=True)
class CurrentConditions:
    """A single reading. Both unit variants are kept as delivered by the API."""

    temp_c: float
    temp_f: float
    humidity: int  # percent, 0-100
    wind_kph: float
    wind_mph: float
    condition: Condition
    location: Location

    def temperature(self, unit: TemperatureUnit) -> float:
        return self.temp_c if unit == TemperatureUnit.METRIC else self.temp_f

    def wind_speed(self, unit: TemperatureUnit) -> float:
        return self.wind_kph if unit == TemperatureUnit.METRIC else self.wind_mph


@dataclass(frozen=True)
class WeatherReport:
    """Outcome of one successful combined fetch for a (city, unit) pair."""

    city: str
    unit: TemperatureUnit
    current: CurrentConditions
    forecast: list[ForecastDay]
    raw_forecast: RawForecast
    fetched_at: str
