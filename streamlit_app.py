"""
Main streamlit.io application
"""

import streamlit as st

from weatherline.ui import forecast
from weatherline.utils.log_util import app_logger

logger = app_logger(__name__)

st.set_page_config(
    page_title="Weather Report",
    layout="wide",
    initial_sidebar_state="collapsed",
)

logger.debug("Rendering forecast page")
forecast.render()
