"""Output formatters for session state snapshots."""

import json
from typing import Any

from weatherdash.models.common import TemperatureUnit
from weatherdash.models.session import SessionState
from weatherdash.models.weather import CurrentConditions


def weather_icon(condition: str) -> str:
    """Icon name for a condition description, as shown by the forecast view."""
    lower = condition.lower()
    if "sunny" in lower:
        return "sunny"
    if "rain" in lower:
        return "rain"
    return "default"


def format_state_text(s: SessionState) -> str:
    """Plain text rendering of a snapshot for the terminal."""
    unit = s.unit
    lines = [f"=== Weather Dashboard - {s.city} ({unit}) ==="]
    if s.loading:
        lines.append("Loading...")
    if s.has_error:
        lines.append(f"Error: {s.error}")

    c = s.current_conditions
    if c is not None:
        loc = c.location
        lines.append(f"{loc.name}, {loc.country} | {loc.localtime}")
        lines.append(
            f"Temperature: {c.temperature(unit)} {unit.temperature_suffix} | "
            f"Humidity: {c.humidity}% | "
            f"Wind: {c.wind_speed(unit)} {unit.speed_suffix}"
        )
        lines.append(f"Condition: {c.condition.text}")

    if s.forecast:
        lines.append(f"{len(s.forecast)}-Day Forecast:")
        for day in s.forecast:
            lines.append(
                f"  {day.date}  Max: {day.max_temp} {unit.temperature_suffix}  "
                f"Min: {day.min_temp} {unit.temperature_suffix}  {day.condition}"
            )
    return "\n".join(lines)


def current_to_dict(c: CurrentConditions, unit: TemperatureUnit) -> dict[str, Any]:
    loc = c.location
    return {
        "temperature": c.temperature(unit),
        "wind_speed": c.wind_speed(unit),
        "temp_c": c.temp_c,
        "temp_f": c.temp_f,
        "humidity": c.humidity,
        "wind_kph": c.wind_kph,
        "wind_mph": c.wind_mph,
        "condition": {
            "text": c.condition.text,
            "icon": c.condition.icon,
            "code": c.condition.code,
        },
        "location": {
            "name": loc.name,
            "country": loc.country,
            "region": loc.region,
            "lat": loc.lat,
            "lon": loc.lon,
            "localtime": loc.localtime,
        },
    }


def state_to_dict(s: SessionState) -> dict[str, Any]:
    """JSON-ready snapshot for the dashboard API and `--json` output."""
    current = None
    if s.current_conditions is not None:
        current = current_to_dict(s.current_conditions, s.unit)
    forecast = None
    if s.forecast is not None:
        forecast = [
            {
                "date": d.date,
                "max_temp": d.max_temp,
                "min_temp": d.min_temp,
                "condition": d.condition,
                "icon": weather_icon(d.condition),
            }
            for d in s.forecast
        ]
    return {
        "city": s.city,
        "unit": str(s.unit),
        "current_conditions": current,
        "forecast": forecast,
        "loading": s.loading,
        "error": s.error,
    }


def format_state_json(s: SessionState) -> str:
    return json.dumps(state_to_dict(s), indent=2, ensure_ascii=False)
