"""
Forecast Chart UI Module

Streamlit tab showing the temperature and dew point forecast with day
gridlines and min/max annotations.
"""

from typing import List

import streamlit as st

import weatherline.api.nws_client as nws_client
from weatherline.config import (
    DEFAULT_VIEWPORT,
    FORECAST_CACHE_TTL_SECONDS,
    FORECAST_LOCATION,
)
from weatherline.core.chart_config import LAYOUTS, get_layout
from weatherline.core.scene import compose_scene
from weatherline.core.visualization import scene_to_figure
from weatherline.models.chart import Series, Viewport
from weatherline.utils.log_util import app_logger

logger = app_logger(__name__)


@st.cache_data(ttl=FORECAST_CACHE_TTL_SECONDS, show_spinner="Loading forecast...")
def _load_forecast(office: str, grid_x: int, grid_y: int) -> List[Series]:
    return nws_client.get_forecast_series(office, grid_x, grid_y)


def render():
    """Main entry point for the forecast chart tab."""
    st.header("Temperature and dew point")
    st.caption(f"NWS forecast for {FORECAST_LOCATION['name']} (°F)")

    series_list = _load_forecast(
        FORECAST_LOCATION["office"],
        FORECAST_LOCATION["grid_x"],
        FORECAST_LOCATION["grid_y"],
    )

    if not any(len(s) for s in series_list):
        st.warning("No forecast data available")
        return

    layout_name = st.radio(
        "Chart style",
        options=sorted(LAYOUTS),
        index=sorted(LAYOUTS).index("detailed"),
        horizontal=True,
        key="forecast_layout",
    )

    viewport = Viewport(
        width=DEFAULT_VIEWPORT["width"], height=DEFAULT_VIEWPORT["height"]
    )
    scene = compose_scene(series_list, viewport, layout=get_layout(layout_name))
    logger.debug(f"Rendering {layout_name} forecast chart")

    st.plotly_chart(scene_to_figure(scene), config={"displayModeBar": False})
