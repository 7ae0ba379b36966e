"""
curves.py
Monotone cubic interpolation in x for series paths.

Tangents follow Steffen's method: the curve never overshoots between two
samples, so it can't suggest a min or max the data doesn't have.
"""

from typing import List, Sequence, Tuple

from weatherline.models.chart import CubicSegment, LineSegment, PathGeometry

Point = Tuple[float, float]


def _sign(x: float) -> int:
    return -1 if x < 0 else 1


def _interior_slope(p0: Point, p1: Point, p2: Point) -> float:
    """Tangent at p1 given its neighbors."""
    h0 = p1[0] - p0[0]
    h1 = p2[0] - p1[0]
    if h0 == 0 or h1 == 0 or h0 + h1 == 0:
        return 0.0

    s0 = (p1[1] - p0[1]) / h0
    s1 = (p2[1] - p1[1]) / h1
    p = (s0 * h1 + s1 * h0) / (h0 + h1)
    return (_sign(s0) + _sign(s1)) * min(abs(s0), abs(s1), 0.5 * abs(p))


def _end_slope(p0: Point, p1: Point, tangent: float) -> float:
    """Tangent at an end point from the secant and the adjacent tangent."""
    h = p1[0] - p0[0]
    if h == 0:
        return tangent
    return (3 * (p1[1] - p0[1]) / h - tangent) / 2


def _cubic(p0: Point, p1: Point, t0: float, t1: float) -> CubicSegment:
    dx = (p1[0] - p0[0]) / 3
    return CubicSegment(
        control1=(p0[0] + dx, p0[1] + dx * t0),
        control2=(p1[0] - dx, p1[1] - dx * t1),
        end=p1,
    )


def distinct_point_indices(points: Sequence[Point]) -> List[int]:
    """
    Indices of the points a path is drawn through.

    A point equal to the one before it adds no segment and is skipped.

    :param points: (x, y) pixel coordinates
    :return: Indices into ``points``, in order
    """
    kept: List[int] = []
    for i, (x, y) in enumerate(points):
        if kept and points[kept[-1]][0] == x and points[kept[-1]][1] == y:
            continue
        kept.append(i)
    return kept


def monotone_x_path(points: Sequence[Point]) -> PathGeometry:
    """
    Path through ``points`` (ordered by x) using monotone cubic segments.

    One point gives a bare move-to, two points a straight line.

    :param points: (x, y) pixel coordinates
    :return: PathGeometry
    """
    pts = [(float(points[i][0]), float(points[i][1])) for i in distinct_point_indices(points)]
    if not pts:
        return PathGeometry()
    if len(pts) == 1:
        return PathGeometry(start=pts[0])
    if len(pts) == 2:
        return PathGeometry(start=pts[0], segments=(LineSegment(end=pts[1]),))

    tangents = [0.0] * len(pts)
    for i in range(1, len(pts) - 1):
        tangents[i] = _interior_slope(pts[i - 1], pts[i], pts[i + 1])
    tangents[0] = _end_slope(pts[0], pts[1], tangents[1])
    tangents[-1] = _end_slope(pts[-2], pts[-1], tangents[-2])

    segments = tuple(
        _cubic(pts[i], pts[i + 1], tangents[i], tangents[i + 1])
        for i in range(len(pts) - 1)
    )
    return PathGeometry(start=pts[0], segments=segments)
