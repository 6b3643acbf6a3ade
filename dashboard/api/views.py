"""Dashboard page and REST API views."""
from __future__ import annotations

from functools import lru_cache
import logging

from django.conf import settings
from django.shortcuts import render
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from dashboard.api.presentation import chart_series, condition_icon
from dashboard.core.providers.base import ProviderError, RequestConfig
from dashboard.core.providers.geocoding import OpenMeteoGeocoder
from dashboard.core.providers.openmeteo import OpenMeteoProvider
from dashboard.core.services.weather_service import (
    ERROR_MESSAGE,
    DashboardState,
    WeatherDashboard,
    WeatherPipeline,
)


logger = logging.getLogger(__name__)

SESSION_STATE_KEY = "dashboard_state"


@lru_cache(maxsize=1)
def get_weather_pipeline() -> WeatherPipeline:
    request_config = RequestConfig(timeout=settings.WEATHER_HTTP_TIMEOUT)
    geocoder = OpenMeteoGeocoder(
        base_url=settings.GEOCODING_URL,
        language=settings.GEOCODING_LANGUAGE,
        count=settings.GEOCODING_RESULT_COUNT,
        request_config=request_config,
    )
    provider = OpenMeteoProvider(
        base_url=settings.WEATHER_FORECAST_URL,
        request_config=request_config,
    )
    return WeatherPipeline(geocoder, provider)


def dashboard_view(request):
    """Render the dashboard, running the default or requested search first."""
    state = DashboardState.from_dict(request.session.get(SESSION_STATE_KEY))
    dashboard = WeatherDashboard(
        get_weather_pipeline(),
        state=state,
        default_city=settings.WEATHER_DEFAULT_CITY,
    )
    city = request.GET.get("city", "").strip()
    if city:
        dashboard.search(city)
    else:
        dashboard.start()
    request.session[SESSION_STATE_KEY] = state.as_dict()

    weather = state.weather
    context = {
        "state": state,
        "weather": weather,
        "icon": condition_icon(weather.condition_category if weather else None),
        "recommendations": state.recommendations,
        "charts": chart_series(state.forecast),
        "search": city,
    }
    return render(request, "dashboard/index.html", context)


class CityWeatherView(APIView):
    """Return the normalized weather view model for a city."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Run the pipeline for the ``city`` query parameter."""
        city = (request.query_params.get("city") or "").strip()
        if not city:
            return Response({"detail": "city query parameter is required"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = get_weather_pipeline().run(city)
        except ProviderError as exc:
            logger.error("Weather fetch error for %r: %s", city, exc)
            return Response({"detail": ERROR_MESSAGE}, status=status.HTTP_502_BAD_GATEWAY)
        return Response(result.as_dict(), status=status.HTTP_200_OK)
