"""
Label placement for extreme point annotations.

The label is pushed away from the line based on how the series moves through
the point: above a peak, below a trough, and to the upper side opposite the
line's direction on a slope.
"""

from weatherline.models.chart import LabelPlacement, Sample, Series

# Pixel offsets used by the two chart layouts
DETAILED_LABEL_OFFSET = 10
SIMPLE_LABEL_OFFSET = 6

NO_OFFSET = LabelPlacement()


def get_label_placement(
    sample: Sample, series: Series, offset: float = DETAILED_LABEL_OFFSET
) -> LabelPlacement:
    """
    Offset and alignment for the label of ``sample``.

    :param sample: Sample being labeled
    :param series: Series owning the sample
    :param offset: Distance in pixels between point and label
    :return: LabelPlacement
    """
    previous, following = series.neighbors(sample.index)
    if previous is None or following is None:
        return NO_OFFSET

    p0 = previous.value
    p = sample.value
    p1 = following.value

    if p0 < p and p1 < p:
        return LabelPlacement(dx=0, dy=-offset, text_anchor="middle")

    if p0 > p and p1 > p:
        return LabelPlacement(
            dx=0, dy=offset, text_anchor="middle", alignment_baseline="hanging"
        )

    # Rising through the point
    if p0 < p and p1 > p:
        return LabelPlacement(
            dx=-offset, dy=-offset, text_anchor="end", alignment_baseline="middle"
        )

    # Falling through the point
    if p0 > p and p1 < p:
        return LabelPlacement(
            dx=offset, dy=-offset, text_anchor="start", alignment_baseline="middle"
        )

    return NO_OFFSET
