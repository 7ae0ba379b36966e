"""
scene.py
Compose the drawable scene for a forecast chart.

compose_scene() turns series and a viewport into a Scene: border and
gridlines, day labels, one path per series (flat or value-gradient stroke)
and labels for the extreme points of each series. Everything is in pixels;
renderers in visualization.py and svg_renderer.py draw the result.
"""

from typing import List, Optional, Sequence

import numpy as np

from weatherline.core.chart_config import DETAILED_LAYOUT, ChartLayout, ColorConfig
from weatherline.core.curves import distinct_point_indices, monotone_x_path
from weatherline.core.day_periods import format_day_label, get_day_boundaries
from weatherline.core.extreme_points import find_extreme_points
from weatherline.core.label_placement import get_label_placement
from weatherline.core.scales import (
    LinearScale,
    NoDataError,
    get_time_extent,
    get_value_extent,
)
from weatherline.models.chart import (
    DayBoundary,
    ExtremePoint,
    GradientStop,
    LineNode,
    PointLabel,
    PointMarker,
    Scene,
    Series,
    SeriesLayer,
    TextNode,
    Viewport,
)
from weatherline.utils.log_util import app_logger
from weatherline.utils.weather_utils import format_temperature_label

logger = app_logger(__name__)


def is_label_visible(
    x: float, y: float, width: float, height: float, margin: float
) -> bool:
    """
    False if (x, y) lies within ``margin`` of any edge of the outer chart.

    :param x: Scaled x position
    :param y: Scaled y position
    :param width: Outer chart width
    :param height: Outer chart height
    :param margin: Minimum distance to each edge
    :return: Whether the label should be drawn
    """
    return not (
        x < margin
        or y < margin
        or abs(width - x) < margin
        or abs(height - y) < margin
    )


def get_extreme_points(
    series: Series,
    layout: ChartLayout,
    day_boundaries: Sequence[DayBoundary],
) -> List[ExtremePoint]:
    """Extreme samples of a series with their label placement."""
    samples = find_extreme_points(series, layout.extreme_policy, day_boundaries)
    return [
        ExtremePoint(
            sample=s,
            placement=get_label_placement(s, series, layout.label_offset),
        )
        for s in samples
    ]


def build_gradient(
    series: Series, colors: ColorConfig, stop_count: int = 10
) -> List[GradientStop]:
    """
    Color stops spanning the series' own value range, bottom to top.

    :param series: Series to color
    :param colors: ColorConfig with the label's sequential scale
    :param stop_count: Number of stops for a non-degenerate range
    :return: List of GradientStop; a single stop for a flat series
    """
    values = [p.value for p in series.points]
    low, high = min(values), max(values)

    if low == high:
        return [GradientStop(offset=0.0, color=colors.value_color(series.label, low))]

    stop_values = np.linspace(low, high, stop_count, endpoint=False)
    return [
        GradientStop(
            offset=i / stop_count,
            color=colors.value_color(series.label, float(v)),
        )
        for i, v in enumerate(stop_values)
    ]


def _empty_scene(width: float, height: float) -> Scene:
    return Scene(width=width, height=height)


def compose_scene(
    series_list: Sequence[Series],
    viewport: Viewport,
    layout: ChartLayout = DETAILED_LAYOUT,
    colors: Optional[ColorConfig] = None,
) -> Scene:
    """
    Build the full chart scene.

    Series share one time and one value scale. Series without samples are
    skipped; if no series has samples the returned scene is empty.

    :param series_list: Series to chart
    :param viewport: Pixel size of the drawing surface
    :param layout: ChartLayout preset
    :param colors: ColorConfig; defaults to the temperature color scales
    :return: Scene
    """
    colors = colors or ColorConfig()
    width = viewport.effective_width
    height = viewport.height

    outer = layout.outer_spacing
    inner = layout.inner_spacing
    plot_width = width - outer.left - outer.right
    plot_height = height - outer.top - outer.bottom

    try:
        x_domain = get_time_extent(series_list)
        y_domain = get_value_extent(series_list)
    except NoDataError:
        logger.info("No samples to chart; returning empty scene")
        return _empty_scene(width, height)

    x_scale = LinearScale(
        domain=x_domain, range=(inner.left, plot_width - inner.right)
    )
    y_scale = LinearScale(
        domain=y_domain, range=(plot_height - inner.bottom, inner.top)
    )

    day_boundaries = get_day_boundaries(x_domain[0], x_domain[1])

    scene = Scene(
        width=width,
        height=height,
        offset=(outer.left, outer.top),
        plot_width=plot_width,
        plot_height=plot_height,
        day_boundaries=day_boundaries,
    )

    scene.border = [
        LineNode(0, plot_height, plot_width, plot_height, kind="axis"),
        LineNode(0, 0, plot_width, 0, kind="axis"),
        LineNode(0, 0, 0, plot_height, kind="axis"),
        LineNode(plot_width, 0, plot_width, plot_height, kind="axis"),
    ]

    for boundary in day_boundaries:
        x = x_scale(boundary.start)
        scene.ticks.append(LineNode(x, 0, x, plot_height))
    for tick in y_scale.ticks(layout.y_tick_count):
        y = y_scale(tick)
        scene.ticks.append(LineNode(0, y, plot_width, y))

    for boundary in day_boundaries:
        scene.day_labels.append(
            TextNode(
                x=outer.left + x_scale(boundary.midpoint),
                y=height - layout.day_label_baseline,
                text=format_day_label(
                    boundary.start, include_weekday=layout.weekday_labels
                ),
            )
        )

    for series in series_list:
        if len(series) == 0:
            logger.debug(f"Skipping empty series '{series.label}'")
            continue
        scene.layers.append(
            _compose_layer(
                series, layout, colors, x_scale, y_scale, day_boundaries, width, height
            )
        )

    logger.debug(
        f"Composed {layout.name} scene {width}x{height}: {len(scene.layers)} series, "
        f"{len(day_boundaries)} days"
    )
    return scene


def _compose_layer(
    series: Series,
    layout: ChartLayout,
    colors: ColorConfig,
    x_scale: LinearScale,
    y_scale: LinearScale,
    day_boundaries: Sequence[DayBoundary],
    width: float,
    height: float,
) -> SeriesLayer:
    scaled = [(x_scale(p.time), y_scale(p.value)) for p in series.points]
    layer = SeriesLayer(
        label=series.label,
        path=monotone_x_path(scaled),
        stroke_width=layout.stroke_width,
    )

    gradient = layout.gradient_stroke and colors.has_gradient(series.label)
    if gradient:
        layer.gradient = build_gradient(series, colors, layout.gradient_stop_count)
        # One color per drawn segment; repeated points add no segment
        drawn = [series.points[i] for i in distinct_point_indices(scaled)]
        layer.segment_colors = [
            colors.value_color(series.label, (a.value + b.value) / 2)
            for a, b in zip(drawn, drawn[1:])
        ]
    else:
        layer.stroke = colors.flat_color(series.label)

    def point_color(value: float) -> str:
        return colors.value_color(series.label, value) if gradient else layer.stroke

    if layout.mark_all_points:
        layer.markers = [
            PointMarker(
                x=x, y=y, stroke=point_color(p.value), radius=layout.marker_radius
            )
            for p, (x, y) in zip(series.points, scaled)
        ]

    for extreme in get_extreme_points(series, layout, day_boundaries):
        x, y = scaled[extreme.sample.index]
        if not is_label_visible(x, y, width, height, layout.label_margin):
            continue

        color = point_color(extreme.sample.value)
        marker = None
        if not layout.mark_all_points:
            marker = PointMarker(x=x, y=y, stroke=color, radius=layout.marker_radius)
        layer.labels.append(
            PointLabel(
                sample=extreme.sample,
                x=x,
                y=y,
                text=format_temperature_label(extreme.sample.value),
                color=color,
                placement=extreme.placement,
                marker=marker,
            )
        )

    return layer
