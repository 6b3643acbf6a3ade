from __future__ import annotations

from typing import Any, Optional

from .base import FetchError, HttpProvider
from ..abstractions import Place, RawWeatherResponse

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "weather_code",
    "wind_speed_10m",
    "surface_pressure",
)
HOURLY_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation_probability",
)
FORECAST_DAYS = 2


class OpenMeteoProvider(HttpProvider):
    base_url = "https://api.open-meteo.com/v1/forecast"
    error_class = FetchError

    def __init__(self, base_url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url

    def fetch(self, place: Place) -> RawWeatherResponse:
        params = {
            "latitude": place.latitude,
            "longitude": place.longitude,
            "current": ",".join(CURRENT_FIELDS),
            "hourly": ",".join(HOURLY_FIELDS),
            "timezone": "auto",
            "forecast_days": FORECAST_DAYS,
        }
        response = self._request("GET", self.base_url, params=params)
        data = self._json(response)
        current = data.get("current")
        if not current:
            self._log.error("Forecast for %s has no current block", place.display_name)
            raise FetchError("missing current weather")
        return RawWeatherResponse(
            current=current,
            hourly=data.get("hourly") or {},
            timezone=data.get("timezone"),
            utc_offset_seconds=int(data.get("utc_offset_seconds") or 0),
        )


__all__ = ["OpenMeteoProvider"]
