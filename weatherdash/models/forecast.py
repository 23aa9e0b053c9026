"""Forecast data models, raw and unit-resolved."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawForecastDay:
    date: str  # YYYY-MM-DD
    maxtemp_c: float
    maxtemp_f: float
    mintemp_c: float
    mintemp_f: float
    condition_text: str
    condition_icon: str = ""
    condition_code: int = 0


@dataclass(frozen=True)
class RawForecast:
    days: list[RawForecastDay]


@dataclass(frozen=True)
class ForecastDay:
    date: str  # YYYY-MM-DD
    max_temp: float
    min_temp: float
    condition: str
