"""YAML config loader with environment overrides and dotted-key lookup."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from weatherdash.config.defaults import ENV_OVERRIDES
from weatherdash.config.schema import DashboardConfig


def load_config(
    path: str | Path | None = None, environ: Mapping[str, str] | None = None
) -> DashboardConfig:
    """Load and validate config from an optional YAML file.

    Missing file path or an empty file yields the defaults. Non-empty
    WEATHER_API_KEY / WEATHER_URL / FORECAST_URL environment variables
    take precedence over the file.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    config = DashboardConfig(**raw)
    return apply_env_overrides(config, os.environ if environ is None else environ)


def apply_env_overrides(
    config: DashboardConfig, environ: Mapping[str, str]
) -> DashboardConfig:
    """Return a copy of config with API settings taken from the environment."""
    updates = {
        field: environ[var]
        for var, field in ENV_OVERRIDES.items()
        if environ.get(var)
    }
    if not updates:
        return config
    return config.model_copy(
        update={"api": config.api.model_copy(update=updates)}
    )


def get_config_value(config: DashboardConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'api.forecast_days'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted_json(config: DashboardConfig) -> str:
    """Config as indented JSON with the API key masked."""
    masked = "***" if config.api.api_key else ""
    safe = config.model_copy(
        update={"api": config.api.model_copy(update={"api_key": masked})}
    )
    return safe.model_dump_json(indent=2)
