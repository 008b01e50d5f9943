"""Tests for the forecast query parameter builder."""

import pytest

from weatherapi.errors import BuildError
from weatherapi.ingest.query_params import build_query_params
from weatherapi.models.forecast_options import ForecastOptions


class TestBuildQueryParams:
    def test_coordinates_only(self):
        assert build_query_params(52.52, 13.41) == {
            "latitude": "52.52",
            "longitude": "13.41",
        }

    def test_empty_options_adds_nothing(self):
        assert build_query_params(52.52, 13.41, ForecastOptions()) == {
            "latitude": "52.52",
            "longitude": "13.41",
        }

    def test_berlin_request(self):
        opts = ForecastOptions(
            current=["temperature_2m"],
            hourly=["temperature_2m"],
            forecast_hours=1,
        )
        assert build_query_params(52.52, 13.41, opts) == {
            "latitude": "52.52",
            "longitude": "13.41",
            "current": "temperature_2m",
            "hourly": "temperature_2m",
            "forecast_hours": 1,
        }

    def test_multiple_locations(self):
        opts = ForecastOptions(elevation=[100.5, 250.0])
        params = build_query_params([52.52, 48.85], [13.41, 2.35], opts)
        assert params["latitude"] == "52.52,48.85"
        assert params["longitude"] == "13.41,2.35"
        assert params["elevation"] == "100.5,250"

    def test_empty_elevation_not_sent(self):
        params = build_query_params(1.0, 2.0, ForecastOptions(elevation=[]))
        assert params == {"latitude": "1", "longitude": "2"}

    def test_tuple_coordinates(self):
        params = build_query_params((52.52, 48.85), (13.41, 2.35))
        assert params == {"latitude": "52.52,48.85", "longitude": "13.41,2.35"}

    def test_integral_coordinates(self):
        params = build_query_params(52.0, -13.0)
        assert params == {"latitude": "52", "longitude": "-13"}

    def test_idempotent(self):
        opts = ForecastOptions(hourly=["a", "b", "c"], timezone="auto")
        first = build_query_params([1.5, 2.5], [3.5, 4.5], opts)
        second = build_query_params([1.5, 2.5], [3.5, 4.5], opts)
        assert first == second
        assert first["hourly"] == "a,b,c"


class TestCoordinateValidation:
    def test_mixed_shapes(self):
        with pytest.raises(BuildError, match="both be scalars or both be lists"):
            build_query_params([52.52], 13.41)

    def test_length_mismatch(self):
        with pytest.raises(BuildError, match="differ in length"):
            build_query_params([52.52, 48.85], [13.41])

    def test_empty_lists(self):
        with pytest.raises(BuildError, match="must not be empty"):
            build_query_params([], [])

    def test_latitude_out_of_range(self):
        with pytest.raises(BuildError, match="latitude out of range"):
            build_query_params(91.0, 13.41)

    def test_longitude_out_of_range(self):
        with pytest.raises(BuildError, match="longitude out of range"):
            build_query_params(52.52, -181.0)

    def test_tuple_length_mismatch(self):
        with pytest.raises(BuildError, match="differ in length"):
            build_query_params((52.52, 48.85), (13.41,))

    def test_non_numeric_coordinate(self):
        with pytest.raises(BuildError, match="latitude must be numeric"):
            build_query_params("52.52", 13.41)

    def test_non_numeric_list_item(self):
        with pytest.raises(BuildError, match="longitude must be numeric"):
            build_query_params([52.52], [None])
