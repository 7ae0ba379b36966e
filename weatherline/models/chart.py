"""
Chart data models and scene type definitions.

This module provides the data structures the chart engine consumes (samples,
series, viewport) and the scene description it produces for renderers.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import pandas as pd

# Narrow viewports are widened so point labels have room
MIN_VIEWPORT_WIDTH = 1000
FALLBACK_VIEWPORT_WIDTH = 1200


@dataclass(frozen=True)
class Sample:
    """One (time, value) observation; index is its position in the series."""

    time: int
    value: float
    index: int


@dataclass(frozen=True)
class Series:
    """Labeled, time-ordered sequence of samples."""

    label: str
    points: Tuple[Sample, ...]

    def __post_init__(self):
        points = tuple(self.points)
        object.__setattr__(self, "points", points)
        for position, sample in enumerate(points):
            if sample.index != position:
                raise ValueError(
                    f"Series '{self.label}': sample at position {position} "
                    f"has index {sample.index}"
                )

    @classmethod
    def from_values(
        cls, label: str, times: Sequence[int], values: Sequence[float]
    ) -> "Series":
        """Build a series from parallel time (epoch ms) and value sequences."""
        if len(times) != len(values):
            raise ValueError(
                f"Series '{label}': {len(times)} times but {len(values)} values"
            )
        return cls(
            label=label,
            points=tuple(
                Sample(time=int(t), value=float(v), index=i)
                for i, (t, v) in enumerate(zip(times, values))
            ),
        )

    @classmethod
    def from_frame(
        cls,
        label: str,
        df: pd.DataFrame,
        time_col: str = "time",
        value_col: str = "value",
    ) -> "Series":
        """
        Build a series from a DataFrame, sorted by time.

        :param label: Series label
        :param df: DataFrame with an epoch-millisecond time column and a value column
        :param time_col: Name of the time column
        :param value_col: Name of the value column
        :return: Series with indices assigned in time order
        """
        missing_cols = [c for c in (time_col, value_col) if c not in df.columns]
        if missing_cols:
            raise ValueError(f"Missing required columns: {missing_cols}")

        ordered = df.sort_values(time_col)
        return cls.from_values(
            label, ordered[time_col].tolist(), ordered[value_col].tolist()
        )

    def __len__(self) -> int:
        return len(self.points)

    def neighbors(self, index: int) -> Tuple[Optional[Sample], Optional[Sample]]:
        """
        Return the samples immediately before and after ``index``.

        Either side is None at the start or end of the series.
        """
        if index < 0 or index >= len(self.points):
            raise IndexError(f"Series '{self.label}' has no sample at index {index}")
        previous = self.points[index - 1] if index > 0 else None
        following = self.points[index + 1] if index < len(self.points) - 1 else None
        return previous, following


@dataclass(frozen=True)
class Viewport:
    """Pixel size of the drawing surface."""

    width: float
    height: float

    @property
    def effective_width(self) -> float:
        if self.width < MIN_VIEWPORT_WIDTH:
            return FALLBACK_VIEWPORT_WIDTH
        return self.width


@dataclass(frozen=True)
class DayBoundary:
    """Half-open calendar day ``[start, end)`` in epoch milliseconds."""

    start: int
    end: int

    def contains(self, time: int) -> bool:
        return self.start <= time < self.end

    @property
    def midpoint(self) -> float:
        return self.start + (self.end - self.start) / 2


@dataclass(frozen=True)
class LabelPlacement:
    """Pixel offset and text alignment for a point label."""

    dx: float = 0
    dy: float = 0
    text_anchor: Optional[str] = None
    alignment_baseline: Optional[str] = None


@dataclass(frozen=True)
class ExtremePoint:
    """A locally extreme sample and where its label goes."""

    sample: Sample
    placement: LabelPlacement


# Scene description ########################


@dataclass(frozen=True)
class LineNode:
    x1: float
    y1: float
    x2: float
    y2: float
    kind: str = "tick"  # "axis" or "tick"


@dataclass(frozen=True)
class TextNode:
    x: float
    y: float
    text: str
    kind: str = "day_label"


@dataclass(frozen=True)
class GradientStop:
    """Color stop; offset is a fraction of the gradient length (0-1)."""

    offset: float
    color: str


@dataclass(frozen=True)
class CubicSegment:
    """Cubic Bezier segment from the previous end point to ``end``."""

    control1: Tuple[float, float]
    control2: Tuple[float, float]
    end: Tuple[float, float]


@dataclass(frozen=True)
class LineSegment:
    end: Tuple[float, float]


@dataclass(frozen=True)
class PathGeometry:
    """Drawable path: a move-to followed by line and cubic segments."""

    start: Optional[Tuple[float, float]] = None
    segments: Tuple = ()

    @property
    def is_empty(self) -> bool:
        return self.start is None

    def translated(self, dx: float, dy: float) -> "PathGeometry":
        """Copy of the path shifted by (dx, dy)."""
        if self.start is None or (dx == 0 and dy == 0):
            return self

        def move(point):
            return (point[0] + dx, point[1] + dy)

        segments = tuple(
            CubicSegment(move(s.control1), move(s.control2), move(s.end))
            if isinstance(s, CubicSegment)
            else LineSegment(move(s.end))
            for s in self.segments
        )
        return PathGeometry(start=move(self.start), segments=segments)

    def split(self) -> List["PathGeometry"]:
        """One single-segment path per segment, each starting where the last ended."""
        pieces = []
        current = self.start
        for segment in self.segments:
            pieces.append(PathGeometry(start=current, segments=(segment,)))
            current = segment.end
        return pieces

    def to_svg_path(self, precision: int = 2) -> str:
        """Serialize as an SVG path ``d`` attribute."""
        if self.start is None:
            return ""

        def fmt(point):
            return f"{point[0]:.{precision}f},{point[1]:.{precision}f}"

        parts = [f"M{fmt(self.start)}"]
        for segment in self.segments:
            if isinstance(segment, CubicSegment):
                parts.append(
                    f"C{fmt(segment.control1)},{fmt(segment.control2)},{fmt(segment.end)}"
                )
            else:
                parts.append(f"L{fmt(segment.end)}")
        return "".join(parts)


@dataclass(frozen=True)
class PointMarker:
    x: float
    y: float
    stroke: str
    radius: float = 3
    fill: str = "white"
    stroke_width: float = 2


@dataclass(frozen=True)
class PointLabel:
    """Text annotation for an extreme point, drawn at (x + dx, y + dy)."""

    sample: Sample
    x: float
    y: float
    text: str
    color: str
    placement: LabelPlacement
    marker: Optional[PointMarker] = None

    @property
    def text_x(self) -> float:
        return self.x + self.placement.dx

    @property
    def text_y(self) -> float:
        return self.y + self.placement.dy


@dataclass
class SeriesLayer:
    """Everything drawn for one series."""

    label: str
    path: PathGeometry
    stroke: Optional[str] = None
    gradient: List[GradientStop] = field(default_factory=list)
    stroke_width: float = 2
    markers: List[PointMarker] = field(default_factory=list)
    labels: List[PointLabel] = field(default_factory=list)
    # Per-segment stroke colors, used by renderers without gradient support
    segment_colors: List[str] = field(default_factory=list)


@dataclass
class Scene:
    """
    Renderable chart description in pixel coordinates.

    Border, ticks and series layers are relative to the plot area, which is
    translated by ``offset`` inside the outer ``width`` x ``height`` surface.
    Day labels are in outer coordinates.
    """

    width: float
    height: float
    offset: Tuple[float, float] = (0, 0)
    plot_width: float = 0
    plot_height: float = 0
    border: List[LineNode] = field(default_factory=list)
    ticks: List[LineNode] = field(default_factory=list)
    day_labels: List[TextNode] = field(default_factory=list)
    layers: List[SeriesLayer] = field(default_factory=list)
    day_boundaries: List[DayBoundary] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.layers
