"""Advisories derived from the current conditions."""
from __future__ import annotations

from typing import List, Optional, Tuple

from .abstractions import ConditionCategory, WeatherView

COLD_ADVISORY = "🧥 Wear a warm jacket"
MILD_ADVISORY = "👕 Light jacket recommended"
WARM_ADVISORY = "☀️ Perfect for outdoor activities"
UMBRELLA_ADVISORY = "☂️ Don't forget your umbrella"
HUMIDITY_ADVISORY = "💧 High humidity - stay hydrated"
WIND_ADVISORY = "💨 Windy conditions expected"

COLD_BELOW_C = 10
MILD_BELOW_C = 20
HUMID_ABOVE_PCT = 70
WINDY_ABOVE_MS = 10


def recommend(view: WeatherView) -> Tuple[str, ...]:
    """Return one temperature advisory followed by any conditional ones.

    The wind threshold is in m/s and is compared against the converted
    ``wind_speed_ms`` value. A missing reading never triggers its advisory.
    """
    advisories: List[str] = [temperature_advisory(view.temperature_c)]
    if view.condition_category is ConditionCategory.RAIN:
        advisories.append(UMBRELLA_ADVISORY)
    if _above(view.humidity_pct, HUMID_ABOVE_PCT):
        advisories.append(HUMIDITY_ADVISORY)
    if _above(view.wind_speed_ms, WINDY_ABOVE_MS):
        advisories.append(WIND_ADVISORY)
    return tuple(advisories)


def temperature_advisory(temperature_c: Optional[float]) -> str:
    if temperature_c is None:
        return WARM_ADVISORY
    if temperature_c < COLD_BELOW_C:
        return COLD_ADVISORY
    if temperature_c < MILD_BELOW_C:
        return MILD_ADVISORY
    return WARM_ADVISORY


def _above(value: Optional[float], threshold: float) -> bool:
    return value is not None and value > threshold


__all__ = [
    "COLD_ADVISORY",
    "HUMIDITY_ADVISORY",
    "MILD_ADVISORY",
    "UMBRELLA_ADVISORY",
    "WARM_ADVISORY",
    "WIND_ADVISORY",
    "recommend",
    "temperature_advisory",
]
