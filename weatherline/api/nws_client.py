"""
nws_client.py: Lightweight interface to the National Weather Service gridpoint
API using direct requests.

Functions:
- get_gridpoint(office, grid_x, grid_y)
- parse_valid_time(valid_time)
- values_to_series(label, values)
- get_forecast_series(office, grid_x, grid_y)

No API key is needed; NWS asks clients to identify themselves with a
User-Agent header.
"""

from typing import Dict, List, Optional

import pandas as pd
import requests

from weatherline.config import (
    FORECAST_SERIES,
    NWS_ENDPOINT,
    NWS_TIMEOUT_SECONDS,
    NWS_USER_AGENT,
)
from weatherline.models.chart import Series
from weatherline.utils.date_util import to_date, to_epoch_ms
from weatherline.utils.log_util import app_logger

logger = app_logger(__name__)

BASE_URL = NWS_ENDPOINT.rstrip("/")


def get_gridpoint(office: str, grid_x: int, grid_y: int) -> Optional[Dict]:
    """
    Fetch the raw forecast grid data for one gridpoint.

    :param office: NWS forecast office id, e.g. "OKX".
    :param grid_x: Grid x coordinate.
    :param grid_y: Grid y coordinate.
    :return: Parsed JSON body, or None on failure.
    """
    url = f"{BASE_URL}/gridpoints/{office}/{grid_x},{grid_y}"
    headers = {
        "User-Agent": NWS_USER_AGENT,
        "Accept": "application/geo+json",
    }
    logger.info(f"Fetching gridpoint: {office} {grid_x},{grid_y}")

    try:
        resp = requests.get(url, headers=headers, timeout=NWS_TIMEOUT_SECONDS)
    except requests.RequestException as e:
        logger.exception(f"Gridpoint request failed: {e}")
        return None

    if resp.status_code != 200:
        logger.error(f"Gridpoint fetch failed: {resp.status_code} {resp.text}")
        return None
    return resp.json()


def parse_valid_time(valid_time: str) -> int:
    """
    Start of an ISO-8601 interval such as ``2024-05-01T12:00:00+00:00/PT1H``.

    :param valid_time: Interval string from the gridpoint payload.
    :return: Start time in epoch milliseconds.
    """
    start = valid_time.split("/", 1)[0]
    return to_epoch_ms(to_date(start))


def values_to_series(label: str, values: List[Dict]) -> Series:
    """
    Convert a gridpoint ``values`` list into a Series.

    Entries with a null value are dropped; the rest are sorted by time and
    indexed in that order.

    :param label: Series label.
    :param values: List of {"validTime": str, "value": float | None}.
    :return: Series (possibly with no points).
    """
    df = pd.DataFrame(values, columns=["validTime", "value"])
    dropped = int(df["value"].isna().sum())
    df = df.dropna(subset=["value"])
    if dropped:
        logger.warning(f"{label}: dropped {dropped} entries without a value")

    if df.empty:
        logger.warning(f"{label}: no values in gridpoint payload")
        return Series(label=label, points=())

    df["time"] = df["validTime"].map(parse_valid_time)
    return Series.from_frame(label, df, time_col="time", value_col="value")


def get_forecast_series(office: str, grid_x: int, grid_y: int) -> List[Series]:
    """
    Fetch the temperature and dew point forecast series for a gridpoint.

    :param office: NWS forecast office id.
    :param grid_x: Grid x coordinate.
    :param grid_y: Grid y coordinate.
    :return: List of Series in FORECAST_SERIES order, or [] on failure.
    """
    body = get_gridpoint(office, grid_x, grid_y)
    if not body:
        return []

    properties = body.get("properties", {})
    series_list = []
    for prop, label in FORECAST_SERIES.items():
        layer = properties.get(prop)
        if not layer:
            logger.warning(f"Gridpoint payload has no '{prop}' layer")
            continue
        series_list.append(values_to_series(label, layer.get("values", [])))

    logger.info(
        f"Loaded {len(series_list)} forecast series: "
        + ", ".join(f"{s.label} ({len(s)})" for s in series_list)
    )
    return series_list
