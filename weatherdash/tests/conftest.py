"""Shared test fixtures."""

import asyncio
import json
from collections import defaultdict
from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

from weatherdash.config.schema import ApiConfig, DashboardConfig
from weatherdash.ingest.projection import project_forecast
from weatherdash.ingest.schemas import CurrentResponse, ForecastResponse
from weatherdash.models.common import TemperatureUnit
from weatherdash.models.weather import WeatherReport

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_CURRENT_URL = "https://test-weather.example.com/v1/current.json"
TEST_FORECAST_URL = "https://test-weather.example.com/v1/forecast.json"


def _load(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def current_payload() -> dict:
    return _load("current_london.json")


@pytest.fixture
def forecast_payload() -> dict:
    return _load("forecast_london.json")


@pytest.fixture
def payload_for() -> Callable[[str], tuple[dict, dict]]:
    """Build (current, forecast) payloads for any city from the London ones.

    Temperatures are shifted by the length of the city name so different
    cities produce distinguishable readings.
    """

    def build(city: str) -> tuple[dict, dict]:
        shift = float(len(city))
        current = _load("current_london.json")
        current["location"]["name"] = city
        current["current"]["temp_c"] += shift
        current["current"]["temp_f"] += shift
        forecast = _load("forecast_london.json")
        forecast["location"]["name"] = city
        for day in forecast["forecast"]["forecastday"]:
            for key in ("maxtemp_c", "maxtemp_f", "mintemp_c", "mintemp_f"):
                day["day"][key] += shift
        return current, forecast

    return build


@pytest.fixture
def make_report(
    payload_for: Callable[[str], tuple[dict, dict]],
) -> Callable[[str, TemperatureUnit], WeatherReport]:
    def build(city: str, unit: TemperatureUnit) -> WeatherReport:
        current, forecast = payload_for(city)
        raw = ForecastResponse.model_validate(forecast).to_model()
        return WeatherReport(
            city=city,
            unit=unit,
            current=CurrentResponse.model_validate(current).to_model(),
            forecast=project_forecast(raw, unit),
            raw_forecast=raw,
            fetched_at="2026-10-18T10:00:00+00:00",
        )

    return build


class FakeWeatherService:
    """Service double for the controller.

    With gated=True each fetch blocks until its city is opened, so tests
    control the order in which overlapping refreshes resolve. Cities listed
    in `failures` raise the mapped exception.
    """

    def __init__(
        self,
        make_report,
        failures: dict[str, Exception] | None = None,
        gated: bool = False,
    ):
        self._make_report = make_report
        self.gated = gated
        self.failures = dict(failures or {})
        self.calls: list[tuple[str, TemperatureUnit]] = []
        self.gates: dict[str, asyncio.Event] = defaultdict(asyncio.Event)
        self.client = _NullClient()

    def open(self, city: str) -> None:
        self.gates[city].set()

    async def fetch(self, city: str, unit: TemperatureUnit) -> WeatherReport:
        self.calls.append((city, unit))
        if self.gated:
            await self.gates[city].wait()
        if city in self.failures:
            raise self.failures[city]
        return self._make_report(city, unit)


class _NullClient:
    def __init__(self):
        self.closed = False

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_service(make_report) -> Callable[..., FakeWeatherService]:
    def build(
        failures: dict[str, Exception] | None = None, gated: bool = False
    ) -> FakeWeatherService:
        return FakeWeatherService(make_report, failures, gated)

    return build


@pytest.fixture
def dashboard_config() -> DashboardConfig:
    return DashboardConfig(
        api=ApiConfig(
            current_url=TEST_CURRENT_URL,
            forecast_url=TEST_FORECAST_URL,
            api_key="test-key-123",
        )
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"forecast_days": 3, "api_key": "yaml-key"},
        "defaults": {"city": "Paris", "unit": "imperial"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
