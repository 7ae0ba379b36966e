"""
Day Periods (Functional Approach)

Pure functions that split a time interval into calendar days of the
reference time zone and format labels for them.

Days are stepped with calendar arithmetic (midnight of the next local date),
so the 23 and 25 hour days around daylight-saving transitions come out right.
"""

from datetime import date, datetime, time, timedelta
from typing import List

import pytz

from weatherline.config import REFERENCE_TIMEZONE
from weatherline.models.chart import DayBoundary
from weatherline.utils.date_util import from_epoch_ms, to_epoch_ms
from weatherline.utils.log_util import app_logger

logger = app_logger(__name__)

# ISO weekday (Monday = 1) -> short label
DAY_OF_WEEK_LABELS = {
    1: "M",
    2: "Tu",
    3: "W",
    4: "Th",
    5: "F",
    6: "Sa",
    7: "Su",
}


def _local_midnight(day: date, tz: str) -> datetime:
    """Midnight starting ``day`` in ``tz``."""
    zone = pytz.timezone(tz)
    return zone.localize(datetime.combine(day, time.min))


def start_of_day(timestamp: int, tz: str = REFERENCE_TIMEZONE) -> int:
    """
    Epoch milliseconds of the local midnight that begins the day of ``timestamp``.

    :param timestamp: Epoch milliseconds
    :param tz: IANA zone name
    :return: Epoch milliseconds
    """
    local_day = from_epoch_ms(timestamp, tz).date()
    return to_epoch_ms(_local_midnight(local_day, tz))


def get_day_boundaries(
    start_time: int, end_time: int, tz: str = REFERENCE_TIMEZONE
) -> List[DayBoundary]:
    """
    Calendar days of ``tz`` covering ``[start_time, end_time]``.

    The result runs from the start of the day containing ``start_time`` to the
    end of the day containing ``end_time``, one contiguous half-open
    DayBoundary per day. Empty when ``end_time`` is not after the start of
    the first day.

    :param start_time: Epoch milliseconds
    :param end_time: Epoch milliseconds
    :param tz: IANA zone name
    :return: Ordered list of DayBoundary
    """
    current_day = from_epoch_ms(start_time, tz).date()
    current_start = to_epoch_ms(_local_midnight(current_day, tz))

    if end_time <= current_start:
        logger.debug(
            f"No day boundaries: end {end_time} is not after day start {current_start}"
        )
        return []

    boundaries = []
    while current_start <= end_time:
        current_day = current_day + timedelta(days=1)
        next_start = to_epoch_ms(_local_midnight(current_day, tz))
        boundaries.append(DayBoundary(start=current_start, end=next_start))
        current_start = next_start

    logger.debug(f"Computed {len(boundaries)} day boundaries in {tz}")
    return boundaries


def format_day_label(
    timestamp: int, include_weekday: bool = True, tz: str = REFERENCE_TIMEZONE
) -> str:
    """
    Label for the day containing ``timestamp``, e.g. ``Tu 5/3`` or ``5/3``.

    :param timestamp: Epoch milliseconds
    :param include_weekday: Prefix the one/two letter weekday abbreviation
    :param tz: IANA zone name
    :return: Label string
    """
    local = from_epoch_ms(timestamp, tz)
    month_day = f"{local.month}/{local.day}"
    if not include_weekday:
        return month_day
    return f"{DAY_OF_WEEK_LABELS[local.isoweekday()]} {month_day}"
