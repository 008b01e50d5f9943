"""Tests for the forecast HTTP endpoint."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from weatherapi.app import create_app
from weatherapi.errors import CacheError, DecodeError, UpstreamClientError
from weatherapi.service.forecast_service import ForecastService


@pytest.fixture
def mock_service() -> MagicMock:
    return MagicMock(spec=ForecastService)


@pytest.fixture
def client(mock_service: MagicMock) -> TestClient:
    return TestClient(create_app(lambda: mock_service))


class TestGetWeather:
    def test_success_envelope(self, client: TestClient, mock_service: MagicMock, berlin_forecast: dict):
        mock_service.get_forecast.return_value = berlin_forecast

        resp = client.get("/api/weather")
        assert resp.status_code == 200
        assert resp.json() == {"success": True, "data": berlin_forecast, "meta": {}}

    @pytest.mark.parametrize(
        "exc",
        [
            UpstreamClientError("HTTP 429: too many requests", 429),
            DecodeError("Invalid JSON"),
            CacheError("cache down"),
            RuntimeError("unexpected"),
        ],
    )
    def test_any_error_is_generic_500(self, client: TestClient, mock_service: MagicMock, exc: Exception):
        mock_service.get_forecast.side_effect = exc

        resp = client.get("/api/weather")
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "message": "internal_error", "errors": []}

    def test_error_detail_not_leaked(self, client: TestClient, mock_service: MagicMock):
        mock_service.get_forecast.side_effect = RuntimeError("secret-token-123")

        resp = client.get("/api/weather")
        assert "secret-token-123" not in resp.text

    def test_service_factory_failure(self):
        def broken_factory():
            raise CacheError("Cannot open cache database")

        client = TestClient(create_app(broken_factory))
        resp = client.get("/api/weather")
        assert resp.status_code == 500
        assert resp.json()["message"] == "internal_error"

    def test_post_not_allowed(self, client: TestClient):
        resp = client.post("/api/weather")
        assert resp.status_code == 405
