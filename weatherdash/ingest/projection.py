"""Projection of a raw forecast onto a single temperature unit."""

from weatherdash.models.common import TemperatureUnit
from weatherdash.models.forecast import ForecastDay, RawForecast


def project_forecast(raw: RawForecast, unit: TemperatureUnit) -> list[ForecastDay]:
    """Select the max/min pair for unit from every raw day, keeping order.

    This picks between the stored Celsius and Fahrenheit fields; it never
    converts one into the other.
    """
    metric = unit == TemperatureUnit.METRIC
    return [
        ForecastDay(
            date=day.date,
            max_temp=day.maxtemp_c if metric else day.maxtemp_f,
            min_temp=day.mintemp_c if metric else day.mintemp_f,
            condition=day.condition_text,
        )
        for day in raw.days
    ]
