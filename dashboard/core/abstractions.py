"""Core abstractions for the weather dashboard domain."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Protocol, Sequence, Tuple


class ConditionCategory(str, Enum):
    """Coarse condition class used to pick icons and the umbrella advisory."""

    CLEAR = "Clear"
    CLOUDS = "Clouds"
    RAIN = "Rain"


@dataclass(frozen=True)
class Place:
    """Best geocoding match for a free-text place name."""

    latitude: float
    longitude: float
    display_name: str

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RawWeatherResponse:
    """Forecast payload as returned by the provider.

    ``hourly`` holds parallel, time-indexed sequences keyed by the provider's
    field names (``time``, ``temperature_2m`` ...).
    """

    current: Mapping[str, Any]
    hourly: Mapping[str, Sequence[Any]] = field(default_factory=dict)
    timezone: Optional[str] = None
    utc_offset_seconds: int = 0


@dataclass(frozen=True)
class WeatherView:
    """Normalized, display-ready current conditions.

    Units: temperature in Celsius, pressure in hPa, wind speed in m/s.
    """

    location_label: str
    temperature_c: Optional[float]
    feels_like_c: float
    humidity_pct: Optional[int]
    pressure_hpa: float
    wind_speed_ms: Optional[float]
    condition_category: ConditionCategory
    condition_description: str

    def as_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["condition_category"] = self.condition_category.value
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "WeatherView":
        return cls(
            location_label=payload["location_label"],
            temperature_c=payload["temperature_c"],
            feels_like_c=payload["feels_like_c"],
            humidity_pct=payload["humidity_pct"],
            pressure_hpa=payload["pressure_hpa"],
            wind_speed_ms=payload["wind_speed_ms"],
            condition_category=ConditionCategory(payload["condition_category"]),
            condition_description=payload["condition_description"],
        )


@dataclass(frozen=True)
class ForecastPoint:
    """One hourly sample of the chart window."""

    label: str
    temp_c: Optional[int]
    feels_like_c: Optional[int]
    humidity_pct: Optional[int]
    rain_probability_pct: int

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ForecastPoint":
        return cls(
            label=payload["label"],
            temp_c=payload["temp_c"],
            feels_like_c=payload["feels_like_c"],
            humidity_pct=payload["humidity_pct"],
            rain_probability_pct=payload["rain_probability_pct"],
        )


@dataclass(frozen=True)
class WeatherResult:
    """Everything produced by one successful pipeline run."""

    place: Place
    view: WeatherView
    forecast: Tuple[ForecastPoint, ...]
    recommendations: Tuple[str, ...]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "place": self.place.as_dict(),
            "weather": self.view.as_dict(),
            "forecast": [point.as_dict() for point in self.forecast],
            "recommendations": list(self.recommendations),
        }


class Geocoder(Protocol):
    """Resolves free-text place names to coordinates."""

    def resolve(self, name: str) -> Place:
        """Return the best match for ``name`` or raise ``NotFoundError``."""
        ...


class WeatherProvider(Protocol):
    """A data source returning current conditions plus an hourly series."""

    def fetch(self, place: Place) -> RawWeatherResponse:
        """Return the raw forecast for ``place`` or raise ``FetchError``."""
        ...


__all__ = [
    "ConditionCategory",
    "ForecastPoint",
    "Geocoder",
    "Place",
    "RawWeatherResponse",
    "WeatherProvider",
    "WeatherResult",
    "WeatherView",
]
