"""CLI entry point for the weather dashboard."""

import argparse
import asyncio
import logging

from weatherdash.config.loader import load_config, redacted_json
from weatherdash.config.schema import DashboardConfig
from weatherdash.errors import CityValidationError
from weatherdash.models.common import TemperatureUnit
from weatherdash.models.session import SessionState
from weatherdash.reporting.formatters import format_state_json, format_state_text
from weatherdash.state.controller import WeatherController
from weatherdash.state.validation import validate_city


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdash",
        description="Current weather and forecast dashboard",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # weather
    weather_p = sub.add_parser("weather", help="Show weather for a city")
    weather_p.add_argument("city", nargs="?", help="City name (default from config)")
    weather_p.add_argument(
        "--unit", choices=[u.value for u in TemperatureUnit], default=None
    )
    weather_p.add_argument("--json", action="store_true", help="JSON output")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")

    # serve
    serve_p = sub.add_parser("serve", help="Run the dashboard API")
    serve_p.add_argument("--host", default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs, which include the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)

    config = load_config(args.config)

    if args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_weather(config: DashboardConfig, args) -> int:
    city = args.city if args.city is not None else config.defaults.city
    try:
        city = validate_city(city)
    except CityValidationError as e:
        print(f"Error: {e}")
        return 1

    unit = TemperatureUnit(args.unit) if args.unit else config.defaults.unit
    defaults = config.defaults.model_copy(update={"city": city, "unit": unit})
    config = config.model_copy(update={"defaults": defaults})
    state = asyncio.run(_run_once(config))
    print(format_state_json(state) if args.json else format_state_text(state))
    return 1 if state.error else 0


async def _run_once(config: DashboardConfig) -> SessionState:
    controller = WeatherController.from_config(config)
    try:
        return await controller.start()
    finally:
        await controller.aclose()


def _cmd_config(config: DashboardConfig, args) -> int:
    if args.config_command == "show":
        print(redacted_json(config))
        return 0
    print("Use: config show")
    return 1


def _cmd_serve(config: DashboardConfig, args) -> int:
    import uvicorn

    from weatherdash.dashboard import create_app

    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0
