"""
test_forecast_ui.py
Unit tests for the forecast chart tab with mocked Streamlit components.
"""

from unittest.mock import patch

import plotly.graph_objects as go

import weatherline.ui.forecast as forecast
from weatherline.models.chart import Series

HOUR = 3_600_000
START = 1_717_214_400_000


def sample_series():
    times = [START + i * HOUR for i in range(5)]
    return [
        Series.from_values("Temperature", times, [20.0, 24.0, 22.0, 26.0, 21.0]),
        Series.from_values("Dew Point", times, [12.0, 13.0, 12.5, 14.0, 12.0]),
    ]


class TestRender:
    """Test the render entry point."""

    @patch("weatherline.ui.forecast._load_forecast")
    @patch("weatherline.ui.forecast.st")
    def test_renders_chart(self, mock_st, mock_load):
        mock_load.return_value = sample_series()
        mock_st.radio.return_value = "detailed"

        forecast.render()

        mock_load.assert_called_once_with("OKX", 34, 35)
        mock_st.plotly_chart.assert_called_once()
        fig = mock_st.plotly_chart.call_args[0][0]
        assert isinstance(fig, go.Figure)
        mock_st.warning.assert_not_called()

    @patch("weatherline.ui.forecast._load_forecast")
    @patch("weatherline.ui.forecast.st")
    def test_layout_choice(self, mock_st, mock_load):
        mock_load.return_value = sample_series()
        mock_st.radio.return_value = "simple"

        forecast.render()

        options = mock_st.radio.call_args[1]["options"]
        assert options == ["detailed", "simple"]
        fig = mock_st.plotly_chart.call_args[0][0]
        # Simple layout marks every sample of both series
        assert sum(len(trace.x) for trace in fig.data) == 10

    @patch("weatherline.ui.forecast._load_forecast")
    @patch("weatherline.ui.forecast.st")
    def test_no_data_warns(self, mock_st, mock_load):
        mock_load.return_value = []

        forecast.render()

        mock_st.warning.assert_called_once()
        mock_st.plotly_chart.assert_not_called()

    @patch("weatherline.ui.forecast._load_forecast")
    @patch("weatherline.ui.forecast.st")
    def test_empty_series_warns(self, mock_st, mock_load):
        mock_load.return_value = [Series(label="Temperature", points=())]

        forecast.render()

        mock_st.warning.assert_called_once()
        mock_st.plotly_chart.assert_not_called()
