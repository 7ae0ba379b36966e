"""
Extreme point detection for chart annotations.

Two policies are used by the chart layouts:
- inflection: samples above or below both neighbors
- daily: the lowest and highest sample of each calendar day
"""

from enum import Enum
from typing import List, Optional, Sequence

from weatherline.models.chart import DayBoundary, Sample, Series
from weatherline.utils.log_util import app_logger

logger = app_logger(__name__)


class ExtremePolicy(str, Enum):
    INFLECTION = "inflection"
    DAILY = "daily"


def is_inflection(series: Series, index: int) -> bool:
    """True if the sample is strictly below or strictly above both neighbors."""
    previous, following = series.neighbors(index)
    if previous is None or following is None:
        return False

    value = series.points[index].value
    return (value < previous.value and value < following.value) or (
        value > previous.value and value > following.value
    )


def find_inflection_points(series: Series) -> List[Sample]:
    """
    Local minima and maxima of a series.

    A run of flagged samples on consecutive indices keeps only its first
    sample.

    :param series: Series to scan
    :return: Extreme samples in series order
    """
    flagged = [p for p in series.points if is_inflection(series, p.index)]

    extremes = [
        p
        for k, p in enumerate(flagged)
        if k == 0 or flagged[k - 1].index != p.index - 1
    ]

    logger.debug(
        f"{series.label}: {len(flagged)} inflections, {len(extremes)} after spacing"
    )
    return extremes


def find_daily_extremes(
    series: Series, day_boundaries: Sequence[DayBoundary]
) -> List[Sample]:
    """
    Minimum then maximum sample for each day, in day order.

    Ties resolve to the earliest sample. Days without samples are skipped.

    :param series: Series to scan
    :param day_boundaries: Calendar days covering the series
    :return: Extreme samples, two per populated day
    """
    extremes = []
    for boundary in day_boundaries:
        in_day = [p for p in series.points if boundary.contains(p.time)]
        if not in_day:
            continue

        extremes.append(min(in_day, key=lambda p: p.value))
        extremes.append(max(in_day, key=lambda p: p.value))

    logger.debug(
        f"{series.label}: {len(extremes)} daily extremes over {len(day_boundaries)} days"
    )
    return extremes


def find_extreme_points(
    series: Series,
    policy: ExtremePolicy = ExtremePolicy.INFLECTION,
    day_boundaries: Optional[Sequence[DayBoundary]] = None,
) -> List[Sample]:
    """
    Extreme samples of a series under the given policy.

    :param series: Series to scan
    :param policy: ExtremePolicy.INFLECTION or ExtremePolicy.DAILY
    :param day_boundaries: Required for the daily policy
    :return: Extreme samples
    """
    policy = ExtremePolicy(policy)

    if policy is ExtremePolicy.INFLECTION:
        return find_inflection_points(series)

    if day_boundaries is None:
        raise ValueError("Daily extreme policy requires day boundaries")
    return find_daily_extremes(series, day_boundaries)
