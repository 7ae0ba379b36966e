from datetime import datetime, timezone

import pytz
from dateutil import parser

from weatherline.utils.log_util import app_logger

logger = app_logger(__name__)


def to_date(date_string: str):
    """
    Convert a date string to a datetime object.

    :param date_string: str - The date string to parse.
    :return: datetime - Parsed datetime object.
    :raises: Exception if date string parsing fails.
    """
    try:
        return parser.parse(date_string)
    except Exception as e:
        logger.error(f"Error parsing date string: {e}", exc_info=True)
        raise


def to_epoch_ms(dt: datetime) -> int:
    """
    Convert a datetime to epoch milliseconds; naive values are taken as UTC.

    :param dt: datetime - aware or naive datetime.
    :return: int - milliseconds since the Unix epoch.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(round(dt.timestamp() * 1000))


def from_epoch_ms(ms: int, tz: str = "UTC") -> datetime:
    """
    Convert epoch milliseconds to an aware datetime in the given zone.

    :param ms: int - milliseconds since the Unix epoch.
    :param tz: str - IANA zone name.
    :return: datetime - aware datetime in ``tz``.
    """
    utc_dt = datetime.fromtimestamp(ms / 1000, tz=timezone.utc)
    return utc_dt.astimezone(pytz.timezone(tz))
