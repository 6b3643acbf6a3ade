"""Open-Meteo geocoding client."""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from .base import HttpProvider, NotFoundError
from ..abstractions import Place

CAPITAL_FEATURE_CODE = "PPLC"
ADMIN_SEAT_FEATURE_CODE = "PPLA"


class OpenMeteoGeocoder(HttpProvider):
    base_url = "https://geocoding-api.open-meteo.com/v1/search"
    error_class = NotFoundError

    def __init__(
        self,
        base_url: Optional[str] = None,
        language: str = "en",
        count: int = 5,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self.language = language
        self.count = count

    def resolve(self, name: str) -> Place:
        params = {
            "name": name,
            "count": self.count,
            "language": self.language,
            "format": "json",
        }
        response = self._request("GET", self.base_url, params=params)
        data = self._json(response)
        candidates = data.get("results") or []
        if not candidates:
            self._log.warning("No geocoding match for %r", name)
            raise NotFoundError(f"no match for {name!r}")
        best = pick_best_match(candidates)
        place = Place(
            latitude=float(best["latitude"]),
            longitude=float(best["longitude"]),
            display_name=_display_name(best),
        )
        self._log.debug("Resolved %r to %s (%s)", name, place.display_name, best.get("feature_code"))
        return place


def pick_best_match(candidates: List[Mapping[str, Any]]) -> Mapping[str, Any]:
    """Prefer a national capital, then a primary admin city, then the service's first hit."""
    for feature_code in (CAPITAL_FEATURE_CODE, ADMIN_SEAT_FEATURE_CODE):
        for candidate in candidates:
            if candidate.get("feature_code") == feature_code:
                return candidate
    return candidates[0]


def _display_name(candidate: Mapping[str, Any]) -> str:
    name = candidate.get("name") or ""
    country = candidate.get("country")
    return f"{name}, {country}" if country else name


__all__ = ["OpenMeteoGeocoder", "pick_best_match"]
