"""Turn raw provider payloads into the dashboard view model.

Everything here is pure: no I/O and no validation beyond what is needed to
walk the hourly arrays. Malformed values are passed through as-is.
"""
from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .abstractions import ConditionCategory, ForecastPoint, RawWeatherResponse, WeatherView

FORECAST_WINDOW = 8
KMH_PER_MS = 3.6
TIME_LABEL_FORMAT = "%I:%M %p"
UNKNOWN_DESCRIPTION = "Unknown"

WEATHER_CODES: Dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Foggy",
    51: "Light drizzle",
    53: "Drizzle",
    55: "Heavy drizzle",
    61: "Light rain",
    63: "Rain",
    65: "Heavy rain",
    71: "Light snow",
    73: "Snow",
    75: "Heavy snow",
    80: "Light showers",
    81: "Showers",
    82: "Heavy showers",
    95: "Thunderstorm",
}


def describe_weather_code(code: Any) -> str:
    return WEATHER_CODES.get(code, UNKNOWN_DESCRIPTION)


def categorize(description: str) -> ConditionCategory:
    """Classify by case-sensitive substring, rain rules first.

    Works on the English description rather than the numeric code, so "Rain"
    (63) and "Showers" (81) land in ``CLEAR``.
    """
    if "rain" in description or "shower" in description:
        return ConditionCategory.RAIN
    if "cloud" in description or "Overcast" in description:
        return ConditionCategory.CLOUDS
    return ConditionCategory.CLEAR


def kmh_to_ms(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return value / KMH_PER_MS


def build_weather_view(raw: RawWeatherResponse, location_label: str) -> WeatherView:
    current = raw.current
    description = describe_weather_code(current.get("weather_code"))
    return WeatherView(
        location_label=location_label,
        temperature_c=current.get("temperature_2m"),
        feels_like_c=current.get("apparent_temperature"),
        humidity_pct=current.get("relative_humidity_2m"),
        pressure_hpa=current.get("surface_pressure"),
        wind_speed_ms=kmh_to_ms(current.get("wind_speed_10m")),
        condition_category=categorize(description),
        condition_description=description.lower(),
    )


def local_hour(raw: RawWeatherResponse, now_utc: datetime) -> int:
    """Hour of day at the forecast location for the given UTC instant."""
    local = now_utc + timedelta(seconds=raw.utc_offset_seconds)
    return local.hour


def build_forecast(raw: RawWeatherResponse, current_hour: int) -> Tuple[ForecastPoint, ...]:
    hourly = raw.hourly
    times: Sequence[str] = hourly.get("time") or []
    temps = hourly.get("temperature_2m") or []
    feels_like = hourly.get("apparent_temperature") or []
    humidity = hourly.get("relative_humidity_2m") or []
    rain = hourly.get("precipitation_probability") or []

    points: List[ForecastPoint] = []
    for index in range(current_hour, min(current_hour + FORECAST_WINDOW, len(times))):
        points.append(
            ForecastPoint(
                label=format_time_label(times[index]),
                temp_c=_round(_safe_index(temps, index)),
                feels_like_c=_round(_safe_index(feels_like, index)),
                humidity_pct=_safe_index(humidity, index),
                rain_probability_pct=_safe_index(rain, index) or 0,
            )
        )
    return tuple(points)


def transform(
    raw: RawWeatherResponse, location_label: str, current_hour: int
) -> Tuple[WeatherView, Tuple[ForecastPoint, ...]]:
    return build_weather_view(raw, location_label), build_forecast(raw, current_hour)


def format_time_label(value: str) -> str:
    # Provider times are naive local ISO strings, e.g. "2024-05-01T15:00".
    return datetime.fromisoformat(value).strftime(TIME_LABEL_FORMAT)


# helpers ------------------------------------------------------------
def _safe_index(values: Sequence[Any], index: int) -> Optional[Any]:
    try:
        return values[index]
    except (IndexError, TypeError):
        return None


def _round(value: Optional[float]) -> Optional[int]:
    if value is None:
        return None
    # Half-up, so 2.5 -> 3 and -2.5 -> -2.
    return math.floor(value + 0.5)


__all__ = [
    "FORECAST_WINDOW",
    "WEATHER_CODES",
    "build_forecast",
    "build_weather_view",
    "categorize",
    "describe_weather_code",
    "format_time_label",
    "kmh_to_ms",
    "local_hour",
    "transform",
]
