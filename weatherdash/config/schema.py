"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, field_validator

from weatherdash.config.defaults import (
    DEFAULT_CURRENT_URL,
    DEFAULT_FORECAST_DAYS,
    DEFAULT_FORECAST_URL,
    DEFAULT_TIMEOUT_SECONDS,
)
from weatherdash.errors import CityValidationError
from weatherdash.models.common import DEFAULT_CITY, DEFAULT_UNIT, TemperatureUnit
from weatherdash.state.validation import validate_city


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    current_url: str = DEFAULT_CURRENT_URL
    forecast_url: str = DEFAULT_FORECAST_URL
    api_key: str = ""
    forecast_days: int = Field(default=DEFAULT_FORECAST_DAYS, ge=1, le=14)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)


class DefaultsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    city: str = DEFAULT_CITY
    unit: TemperatureUnit = DEFAULT_UNIT

    @field_validator("city")
    @classmethod
    def _seed_city_acceptable(cls, v: str) -> str:
        try:
            return validate_city(v)
        except CityValidationError as e:
            raise ValueError(str(e)) from e


class BehaviorConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # Re-run the projection over the last raw forecast instead of re-fetching
    reproject_on_toggle: bool = False


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    defaults: DefaultsConfig = DefaultsConfig()
    behavior: BehaviorConfig = BehaviorConfig()
