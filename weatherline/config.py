# config.py
"""
Configurations for the Weatherline forecast chart application.

This module holds the settings shared across the application: the reference
time zone for day segmentation, the National Weather Service gridpoint used by
the dashboard, and the default viewport used when the page renders a chart.
"""

# Calendar days, day labels and gridlines are computed in this zone
REFERENCE_TIMEZONE = "America/New_York"

# National Weather Service gridpoint API
NWS_ENDPOINT = "https://api.weather.gov"
NWS_USER_AGENT = "weatherline (forecast chart dashboard)"
NWS_TIMEOUT_SECONDS = 10

# Gridpoint rendered by the dashboard (OKX office, New York City)
FORECAST_LOCATION = {
    "name": "New York, NY",
    "office": "OKX",
    "grid_x": 34,
    "grid_y": 35,
}

# Series read from the gridpoint payload: property name -> series label
FORECAST_SERIES = {
    "temperature": "Temperature",
    "dewpoint": "Dew Point",
}

# Viewport used by the dashboard (the chart widens narrow widths itself)
DEFAULT_VIEWPORT = {"width": 1200, "height": 400}

# Seconds to keep a fetched gridpoint payload in the Streamlit cache
FORECAST_CACHE_TTL_SECONDS = 15 * 60
