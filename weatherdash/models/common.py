"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum


class TemperatureUnit(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"

    def toggled(self) -> "TemperatureUnit":
        if self is TemperatureUnit.METRIC:
            return TemperatureUnit.IMPERIAL
        return TemperatureUnit.METRIC

    @property
    def temperature_suffix(self) -> str:
        return "°C" if self is TemperatureUnit.METRIC else "°F"

    @property
    def speed_suffix(self) -> str:
        return "kph" if self is TemperatureUnit.METRIC else "mph"


DEFAULT_CITY = "London"
DEFAULT_UNIT = TemperatureUnit.METRIC


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()
