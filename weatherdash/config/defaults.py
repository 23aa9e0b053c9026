"""Default endpoints and environment variable names for the weather API."""

DEFAULT_CURRENT_URL = "https://api.weatherapi.com/v1/current.json"
DEFAULT_FORECAST_URL = "https://api.weatherapi.com/v1/forecast.json"
DEFAULT_FORECAST_DAYS = 5
DEFAULT_TIMEOUT_SECONDS = 10.0

ENV_API_KEY = "WEATHER_API_KEY"
ENV_CURRENT_URL = "WEATHER_URL"
ENV_FORECAST_URL = "FORECAST_URL"

# environment variable -> ApiConfig field
ENV_OVERRIDES: dict[str, str] = {
    ENV_API_KEY: "api_key",
    ENV_CURRENT_URL: "current_url",
    ENV_FORECAST_URL: "forecast_url",
}

# optional YAML config path for the dashboard app
ENV_CONFIG_PATH = "WEATHERDASH_CONFIG"
