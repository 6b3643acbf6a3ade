"""Management command to fetch weather using the same pipeline as the dashboard."""
from __future__ import annotations

import json
import logging
from typing import Any

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from dashboard.api.views import get_weather_pipeline
from dashboard.core.providers.base import ProviderError
from dashboard.core.services.weather_service import ERROR_MESSAGE


logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Fetch current conditions, forecast and advisories for a city"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, help="City name (defaults to WEATHER_DEFAULT_CITY)")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        city = (options.get("city") or settings.WEATHER_DEFAULT_CITY).strip()
        if not city:
            raise CommandError("--city must not be blank")
        try:
            result = get_weather_pipeline().run(city)
        except ProviderError as exc:
            logger.error("Weather fetch error for %r: %s", city, exc)
            raise CommandError(ERROR_MESSAGE) from exc

        self.stdout.write(json.dumps(result.as_dict(), ensure_ascii=False))
