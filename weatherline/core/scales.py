"""
scales.py
Linear mapping from data domains (epoch milliseconds or Celsius) to pixels.

Every series on a chart shares one coordinate system, so the extents are
computed over all series combined.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from weatherline.models.chart import Series

# Thresholds for picking a 10, 5 or 2 multiple of the raw tick step
_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


class NoDataError(ValueError):
    """Raised when a domain is requested for series with no samples."""


@dataclass(frozen=True)
class LinearScale:
    """
    Linear interpolation from ``domain`` to ``range``.

    A degenerate domain (d0 == d1) maps every input to the midpoint of the
    range instead of dividing by zero.
    """

    domain: Tuple[float, float]
    range: Tuple[float, float]

    @property
    def is_degenerate(self) -> bool:
        return self.domain[0] == self.domain[1]

    def __call__(self, x: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d0 == d1:
            return r0 + (r1 - r0) / 2
        return r0 + (x - d0) / (d1 - d0) * (r1 - r0)

    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d0 == d1 or r0 == r1:
            return d0
        return d0 + (pixel - r0) / (r1 - r0) * (d1 - d0)

    def ticks(self, count: int = 5) -> List[float]:
        """
        Evenly spaced round values within the domain, about ``count`` of them.

        Steps are 1, 2 or 5 times a power of ten.
        """
        d0, d1 = self.domain
        if count <= 0:
            return []
        if d0 == d1:
            return [d0]

        start, stop = min(d0, d1), max(d0, d1)
        increment = tick_increment(start, stop, count)

        if increment > 0:
            first = math.ceil(start / increment)
            last = math.floor(stop / increment)
            values = np.arange(first, last + 1) * increment
        else:
            factor = -increment
            first = math.ceil(start * factor)
            last = math.floor(stop * factor)
            values = np.arange(first, last + 1) / factor

        result = [float(v) for v in values]
        if d1 < d0:
            result.reverse()
        return result


def tick_increment(start: float, stop: float, count: int) -> float:
    """
    Nice step for ``count`` ticks over ``[start, stop]``.

    Positive results are the step itself; negative results are the negated
    inverse of a fractional step (-10 means 0.1), avoiding float drift.
    """
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / 10**power

    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1

    if power >= 0:
        return factor * 10**power
    return -(10 ** -power) / factor


def _extent(values: Sequence[float]) -> Tuple[float, float]:
    if len(values) == 0:
        raise NoDataError("No samples to compute a domain from")
    return min(values), max(values)


def get_time_extent(series_list: Sequence[Series]) -> Tuple[int, int]:
    """
    Earliest and latest sample time across all series.

    :param series_list: Series sharing the chart
    :return: (min_time, max_time) in epoch milliseconds
    :raises NoDataError: If no series has any samples
    """
    return _extent([p.time for s in series_list for p in s.points])


def get_value_extent(series_list: Sequence[Series]) -> Tuple[float, float]:
    """
    Lowest and highest sample value across all series.

    :param series_list: Series sharing the chart
    :return: (min_value, max_value)
    :raises NoDataError: If no series has any samples
    """
    return _extent([p.value for s in series_list for p in s.points])
