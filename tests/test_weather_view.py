from __future__ import annotations

from django.test import Client

from dashboard.core.services.weather_service import ERROR_MESSAGE
from payloads import FORECAST_URL, GEOCODING_URL, make_forecast


def test_weather_endpoint_returns_payload(requests_mock, paris_candidates) -> None:
    requests_mock.get(GEOCODING_URL, json={"results": paris_candidates})
    requests_mock.get(FORECAST_URL, json=make_forecast(weather_code=61, humidity=80, wind_kmh=40.0))
    client = Client()

    response = client.get("/api/weather", {"city": "Paris"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["place"] == {"latitude": 48.85, "longitude": 2.35, "display_name": "Paris, France"}
    assert payload["weather"]["condition_category"] == "Rain"
    assert payload["weather"]["condition_description"] == "light rain"
    assert payload["weather"]["wind_speed_ms"] == 40.0 / 3.6
    assert len(payload["forecast"]) == 8
    assert len(payload["recommendations"]) == 4


def test_weather_endpoint_requires_city() -> None:
    client = Client()

    response = client.get("/api/weather", {"city": "  "})

    assert response.status_code == 400
    assert "detail" in response.json()


def test_weather_endpoint_hides_failure_kind(requests_mock, paris_candidates) -> None:
    client = Client()

    requests_mock.get(GEOCODING_URL, status_code=500, text="boom")
    not_found = client.get("/api/weather", {"city": "Paris"})

    requests_mock.get(GEOCODING_URL, json={"results": paris_candidates})
    requests_mock.get(FORECAST_URL, status_code=503, text="unavailable")
    fetch_failed = client.get("/api/weather", {"city": "Paris"})

    assert not_found.status_code == fetch_failed.status_code == 502
    assert not_found.json() == fetch_failed.json() == {"detail": ERROR_MESSAGE}


def test_dashboard_loads_default_city_on_first_visit(requests_mock, london_candidates) -> None:
    requests_mock.get(GEOCODING_URL, json={"results": london_candidates})
    requests_mock.get(FORECAST_URL, json=make_forecast(temperature=8.0))
    client = Client()

    first = client.get("/")
    second = client.get("/")

    assert first.status_code == 200
    assert requests_mock.request_history[0].qs["name"] == ["london"]
    content = first.content.decode("utf-8")
    assert "London, United Kingdom" in content
    assert "Wear a warm jacket" in content
    assert 'id="chart-data"' in content
    assert second.status_code == 200
    assert requests_mock.call_count == 2


def test_dashboard_keeps_previous_data_on_error(requests_mock, london_candidates) -> None:
    requests_mock.get(GEOCODING_URL, json={"results": london_candidates})
    requests_mock.get(FORECAST_URL, json=make_forecast())
    client = Client()
    client.get("/")

    requests_mock.get(GEOCODING_URL, status_code=500, text="boom")
    response = client.get("/", {"city": "Atlantis"})

    content = response.content.decode("utf-8")
    assert response.status_code == 200
    assert ERROR_MESSAGE in content
    assert "London, United Kingdom" in content


def test_dashboard_search_replaces_location(requests_mock, london_candidates, paris_candidates) -> None:
    requests_mock.get(GEOCODING_URL, json={"results": london_candidates})
    requests_mock.get(FORECAST_URL, json=make_forecast())
    client = Client()
    client.get("/")

    requests_mock.get(GEOCODING_URL, json={"results": paris_candidates})
    response = client.get("/", {"city": "Paris"})

    content = response.content.decode("utf-8")
    assert "Paris, France" in content
    assert "London, United Kingdom" not in content
    assert ERROR_MESSAGE not in content


def test_weather_endpoint_tolerates_null_readings(requests_mock, paris_candidates) -> None:
    forecast = make_forecast()
    forecast["current"].update(temperature_2m=None, relative_humidity_2m=None)
    requests_mock.get(GEOCODING_URL, json={"results": paris_candidates})
    requests_mock.get(FORECAST_URL, json=forecast)
    client = Client()

    response = client.get("/api/weather", {"city": "Paris"})
    page = client.get("/", {"city": "Paris"})

    assert response.status_code == 200
    assert response.json()["weather"]["humidity_pct"] is None
    assert response.json()["recommendations"] == ["☀️ Perfect for outdoor activities"]
    assert page.status_code == 200
