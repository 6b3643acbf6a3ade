"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from dashboard.api.views import CityWeatherView

urlpatterns = [
    path("weather", CityWeatherView.as_view(), name="weather"),
]
