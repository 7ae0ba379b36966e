"""
test_nws_client.py
Unit tests for the National Weather Service gridpoint client.

HTTP calls are mocked; no network access is needed.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from weatherline.api.nws_client import (
    get_forecast_series,
    get_gridpoint,
    parse_valid_time,
    values_to_series,
)

NOON_UTC = 1_714_564_800_000  # 2024-05-01T12:00:00Z
HOUR = 3_600_000


def gridpoint_payload():
    return {
        "properties": {
            "temperature": {
                "uom": "wmoUnit:degC",
                "values": [
                    {"validTime": "2024-05-01T13:00:00+00:00/PT1H", "value": 19.4},
                    {"validTime": "2024-05-01T12:00:00+00:00/PT1H", "value": 18.3},
                    {"validTime": "2024-05-01T14:00:00+00:00/PT2H", "value": None},
                ],
            },
            "dewpoint": {
                "uom": "wmoUnit:degC",
                "values": [
                    {"validTime": "2024-05-01T12:00:00+00:00/PT3H", "value": 10.0},
                ],
            },
        }
    }


def mock_response(status_code=200, body=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = body
    resp.text = "error body"
    return resp


class TestParseValidTime:
    """Test parse_valid_time function."""

    def test_interval_start(self):
        assert parse_valid_time("2024-05-01T12:00:00+00:00/PT1H") == NOON_UTC

    def test_offset_is_honored(self):
        assert parse_valid_time("2024-05-01T08:00:00-04:00/P1DT6H") == NOON_UTC

    def test_bare_timestamp(self):
        assert parse_valid_time("2024-05-01T12:00:00+00:00") == NOON_UTC

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_valid_time("not a time/PT1H")


class TestValuesToSeries:
    """Test values_to_series function."""

    def test_sorted_and_indexed(self):
        values = gridpoint_payload()["properties"]["temperature"]["values"]

        series = values_to_series("Temperature", values)

        assert series.label == "Temperature"
        assert [p.time for p in series.points] == [NOON_UTC, NOON_UTC + HOUR]
        assert [p.value for p in series.points] == [18.3, 19.4]
        assert [p.index for p in series.points] == [0, 1]

    def test_all_null(self):
        series = values_to_series(
            "Dew Point", [{"validTime": "2024-05-01T12:00:00+00:00/PT1H", "value": None}]
        )
        assert len(series) == 0

    def test_empty(self):
        assert len(values_to_series("Dew Point", [])) == 0


class TestGetGridpoint:
    """Test get_gridpoint function."""

    @patch("weatherline.api.nws_client.requests.get")
    def test_success(self, mock_get):
        mock_get.return_value = mock_response(body={"properties": {}})

        body = get_gridpoint("OKX", 34, 35)

        assert body == {"properties": {}}
        url = mock_get.call_args[0][0]
        assert url == "https://api.weather.gov/gridpoints/OKX/34,35"
        assert "User-Agent" in mock_get.call_args[1]["headers"]

    @patch("weatherline.api.nws_client.requests.get")
    def test_http_error(self, mock_get):
        mock_get.return_value = mock_response(status_code=500)

        assert get_gridpoint("OKX", 34, 35) is None

    @patch("weatherline.api.nws_client.requests.get")
    def test_request_exception(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("offline")

        assert get_gridpoint("OKX", 34, 35) is None


class TestGetForecastSeries:
    """Test get_forecast_series function."""

    @patch("weatherline.api.nws_client.requests.get")
    def test_both_series(self, mock_get):
        mock_get.return_value = mock_response(body=gridpoint_payload())

        series_list = get_forecast_series("OKX", 34, 35)

        assert [s.label for s in series_list] == ["Temperature", "Dew Point"]
        assert [len(s) for s in series_list] == [2, 1]

    @patch("weatherline.api.nws_client.requests.get")
    def test_missing_layer_is_skipped(self, mock_get):
        payload = gridpoint_payload()
        del payload["properties"]["dewpoint"]
        mock_get.return_value = mock_response(body=payload)

        series_list = get_forecast_series("OKX", 34, 35)

        assert [s.label for s in series_list] == ["Temperature"]

    @patch("weatherline.api.nws_client.requests.get")
    def test_failure_returns_empty(self, mock_get):
        mock_get.return_value = mock_response(status_code=503)

        assert get_forecast_series("OKX", 34, 35) == []
