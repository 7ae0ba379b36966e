"""
Tests for label placement.
"""

from weatherline.core.label_placement import (
    DETAILED_LABEL_OFFSET,
    SIMPLE_LABEL_OFFSET,
    get_label_placement,
)
from weatherline.models.chart import LabelPlacement, Series


def make_series(values):
    return Series.from_values("Temperature", list(range(len(values))), values)


class TestGetLabelPlacement:
    """Test get_label_placement for each neighbor relation."""

    def test_peak_goes_above(self):
        series = make_series([1, 5, 2])

        placement = get_label_placement(series.points[1], series)

        assert placement.text_anchor == "middle"
        assert placement.alignment_baseline is None
        assert placement.dx == 0
        assert placement.dy == -DETAILED_LABEL_OFFSET
        assert placement.dy < 0

    def test_trough_goes_below(self):
        series = make_series([4, 1, 3])

        placement = get_label_placement(series.points[1], series)

        assert placement.text_anchor == "middle"
        assert placement.alignment_baseline == "hanging"
        assert placement.dx == 0
        assert placement.dy == DETAILED_LABEL_OFFSET

    def test_rising_goes_upper_left(self):
        series = make_series([1, 2, 3])

        placement = get_label_placement(series.points[1], series)

        assert placement == LabelPlacement(
            dx=-10, dy=-10, text_anchor="end", alignment_baseline="middle"
        )

    def test_falling_goes_upper_right(self):
        series = make_series([3, 2, 1])

        placement = get_label_placement(series.points[1], series)

        assert placement == LabelPlacement(
            dx=10, dy=-10, text_anchor="start", alignment_baseline="middle"
        )

    def test_ties_get_no_offset(self):
        series = make_series([2, 2, 5])
        assert get_label_placement(series.points[1], series) == LabelPlacement()

    def test_end_points_get_no_offset(self):
        series = make_series([9, 1, 9])

        assert get_label_placement(series.points[0], series) == LabelPlacement()
        assert get_label_placement(series.points[2], series) == LabelPlacement()

    def test_custom_offset(self):
        series = make_series([1, 5, 2])

        placement = get_label_placement(series.points[1], series, offset=SIMPLE_LABEL_OFFSET)

        assert placement.dy == -6
