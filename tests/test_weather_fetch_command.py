from __future__ import annotations

import json
from io import StringIO

import pytest
import responses
from django.core.management import call_command
from django.core.management.base import CommandError

from dashboard.core.services.weather_service import ERROR_MESSAGE
from payloads import FORECAST_URL, GEOCODING_URL, make_candidate, make_forecast


def test_command_prints_result() -> None:
    out = StringIO()

    with responses.RequestsMock() as rsps:
        rsps.add(
            "GET",
            GEOCODING_URL,
            json={"results": [make_candidate("Oslo", 59.91, 10.75, country="Norway", feature_code="PPLC")]},
            status=200,
        )
        rsps.add("GET", FORECAST_URL, json=make_forecast(temperature=25.0), status=200)
        call_command("weather_fetch", "--city", "Oslo", stdout=out)
        assert len(rsps.calls) == 2

    payload = json.loads(out.getvalue())
    assert payload["weather"]["location_label"] == "Oslo, Norway"
    assert payload["recommendations"][0] == "☀️ Perfect for outdoor activities"


def test_command_defaults_to_configured_city() -> None:
    out = StringIO()

    with responses.RequestsMock() as rsps:
        rsps.add(
            "GET",
            GEOCODING_URL,
            json={"results": [make_candidate("London", 51.51, -0.13, country="United Kingdom")]},
            status=200,
        )
        rsps.add("GET", FORECAST_URL, json=make_forecast(), status=200)
        call_command("weather_fetch", stdout=out)
        assert "name=London" in rsps.calls[0].request.url

    assert json.loads(out.getvalue())["place"]["display_name"] == "London, United Kingdom"


def test_command_reports_generic_error() -> None:
    with responses.RequestsMock() as rsps:
        rsps.add("GET", GEOCODING_URL, json={"results": []}, status=200)
        with pytest.raises(CommandError) as excinfo:
            call_command("weather_fetch", "--city", "Nowhere")

    assert str(excinfo.value) == ERROR_MESSAGE
