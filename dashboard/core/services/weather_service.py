"""Weather pipeline and the per-session dashboard state it drives."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from dashboard.core.abstractions import (
    ForecastPoint,
    Geocoder,
    WeatherProvider,
    WeatherResult,
    WeatherView,
)
from dashboard.core.providers.base import ProviderError
from dashboard.core.recommendations import recommend
from dashboard.core.transform import local_hour, transform

ERROR_MESSAGE = "Unable to fetch weather data. Please try another city."


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class WeatherPipeline:
    """Geocode, fetch and transform, strictly in that order."""

    def __init__(
        self,
        geocoder: Geocoder,
        provider: WeatherProvider,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._geocoder = geocoder
        self._provider = provider
        self._clock = clock

    def run(self, city: str) -> WeatherResult:
        place = self._geocoder.resolve(city)
        raw = self._provider.fetch(place)
        current_hour = local_hour(raw, self._clock())
        view, forecast = transform(raw, place.display_name, current_hour)
        return WeatherResult(
            place=place,
            view=view,
            forecast=forecast,
            recommendations=recommend(view),
        )


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class DashboardState:
    """What the dashboard currently shows.

    ``weather``, ``forecast`` and ``recommendations`` always come from the
    same successful run; a failure only touches ``status`` and ``error``.
    """

    status: Status = Status.IDLE
    weather: Optional[WeatherView] = None
    forecast: List[ForecastPoint] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    error: str = ""
    initialized: bool = False

    def as_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "weather": self.weather.as_dict() if self.weather else None,
            "forecast": [point.as_dict() for point in self.forecast],
            "recommendations": list(self.recommendations),
            "error": self.error,
            "initialized": self.initialized,
        }

    @classmethod
    def from_dict(cls, payload: Optional[Mapping[str, Any]]) -> "DashboardState":
        if not payload:
            return cls()
        weather = payload.get("weather")
        return cls(
            status=Status(payload.get("status", Status.IDLE.value)),
            weather=WeatherView.from_dict(weather) if weather else None,
            forecast=[ForecastPoint.from_dict(item) for item in payload.get("forecast") or []],
            recommendations=list(payload.get("recommendations") or []),
            error=payload.get("error", ""),
            initialized=bool(payload.get("initialized", False)),
        )


class WeatherDashboard:
    """Runs the pipeline against a :class:`DashboardState`."""

    def __init__(
        self,
        pipeline: WeatherPipeline,
        state: Optional[DashboardState] = None,
        default_city: str = "London",
    ) -> None:
        self.pipeline = pipeline
        self.state = state or DashboardState()
        self.default_city = default_city
        self._log = logging.getLogger(self.__class__.__name__)

    def start(self) -> DashboardState:
        """Load the default city once, before any user search."""
        if self.state.initialized:
            return self.state
        self.state.initialized = True
        return self.search(self.default_city)

    def search(self, city: str) -> DashboardState:
        city = (city or "").strip()
        if not city:
            return self.state

        state = self.state
        state.initialized = True
        state.status = Status.LOADING
        state.error = ""
        try:
            result = self.pipeline.run(city)
        except ProviderError as exc:
            self._log.error("Weather fetch error for %r: %s", city, exc, exc_info=exc)
            state.status = Status.FAILURE
            state.error = ERROR_MESSAGE
            return state

        state.weather = result.view
        state.forecast = list(result.forecast)
        state.recommendations = list(result.recommendations)
        state.status = Status.SUCCESS
        return state


__all__ = [
    "DashboardState",
    "ERROR_MESSAGE",
    "Status",
    "WeatherDashboard",
    "WeatherPipeline",
]
