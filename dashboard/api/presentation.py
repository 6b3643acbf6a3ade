"""Icon, colour and chart data for the dashboard template.

Only :class:`ConditionCategory` drives these choices; swap this module to
restyle the page without touching the pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from dashboard.core.abstractions import ConditionCategory, ForecastPoint


@dataclass(frozen=True)
class ConditionIcon:
    glyph: str
    css_class: str


DEFAULT_ICON = ConditionIcon(glyph="☁️", css_class="icon-neutral")

CONDITION_ICONS: Dict[ConditionCategory, ConditionIcon] = {
    ConditionCategory.RAIN: ConditionIcon(glyph="🌧️", css_class="icon-rain"),
    ConditionCategory.CLOUDS: ConditionIcon(glyph="☁️", css_class="icon-clouds"),
    ConditionCategory.CLEAR: ConditionIcon(glyph="☀️", css_class="icon-clear"),
}


def condition_icon(category: Optional[ConditionCategory]) -> ConditionIcon:
    if category is None:
        return DEFAULT_ICON
    return CONDITION_ICONS.get(category, DEFAULT_ICON)


def chart_series(forecast: Sequence[ForecastPoint]) -> Dict[str, List]:
    """Column-oriented data for the temperature, humidity and rain charts."""
    return {
        "labels": [point.label for point in forecast],
        "temperature": [point.temp_c for point in forecast],
        "feels_like": [point.feels_like_c for point in forecast],
        "humidity": [point.humidity_pct for point in forecast],
        "rain": [point.rain_probability_pct for point in forecast],
    }


__all__ = ["CONDITION_ICONS", "ConditionIcon", "chart_series", "condition_icon"]
