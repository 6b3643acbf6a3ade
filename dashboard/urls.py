"""Root URL configuration."""
from __future__ import annotations

from django.urls import include, path

from dashboard.api.views import dashboard_view

urlpatterns = [
    path("", dashboard_view, name="dashboard"),
    path("api/", include("dashboard.api.urls")),
]
