"""Tests for config loading, environment overrides and lookup."""

import json
from pathlib import Path

import pytest

from weatherdash.config.defaults import DEFAULT_CURRENT_URL
from weatherdash.config.loader import (
    apply_env_overrides,
    get_config_value,
    load_config,
    redacted_json,
)
from weatherdash.config.schema import DashboardConfig
from weatherdash.models.common import TemperatureUnit


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path, environ={})
        assert config.api.forecast_days == 3
        assert config.api.api_key == "yaml-key"
        assert config.defaults.city == "Paris"
        assert config.defaults.unit == TemperatureUnit.IMPERIAL

    def test_no_path_uses_defaults(self):
        config = load_config(environ={})
        assert config == DashboardConfig()

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path, environ={})
        assert config.api.current_url == DEFAULT_CURRENT_URL
        assert config.defaults.city == "London"

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml", environ={})

    def test_env_overrides_yaml(self, config_yaml_path: Path):
        env = {
            "WEATHER_API_KEY": "env-key",
            "WEATHER_URL": "https://current.example.com",
            "FORECAST_URL": "https://forecast.example.com",
        }
        config = load_config(config_yaml_path, environ=env)
        assert config.api.api_key == "env-key"
        assert config.api.current_url == "https://current.example.com"
        assert config.api.forecast_url == "https://forecast.example.com"
        # untouched fields survive
        assert config.api.forecast_days == 3

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("WEATHER_API_KEY", "from-os")
        monkeypatch.delenv("WEATHER_URL", raising=False)
        monkeypatch.delenv("FORECAST_URL", raising=False)
        assert load_config().api.api_key == "from-os"


class TestApplyEnvOverrides:
    def test_empty_values_ignored(self):
        config = DashboardConfig()
        assert apply_env_overrides(config, {"WEATHER_API_KEY": ""}) is config

    def test_unrelated_vars_ignored(self):
        config = DashboardConfig()
        assert apply_env_overrides(config, {"HOME": "/root"}) is config


class TestGetConfigValue:
    def test_dotted_key(self):
        assert get_config_value(DashboardConfig(), "api.forecast_days") == 5

    def test_top_level(self):
        val = get_config_value(DashboardConfig(), "defaults")
        assert val.city == "London"

    def test_invalid_key(self):
        with pytest.raises(KeyError):
            get_config_value(DashboardConfig(), "nonexistent.key")


class TestRedactedJson:
    def test_masks_key(self):
        config = DashboardConfig.model_validate({"api": {"api_key": "s3cret"}})
        data = json.loads(redacted_json(config))
        assert data["api"]["api_key"] == "***"
        assert config.api.api_key == "s3cret"

    def test_empty_key_stays_empty(self):
        data = json.loads(redacted_json(DashboardConfig()))
        assert data["api"]["api_key"] == ""
