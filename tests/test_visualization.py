"""
Tests for Plotly scene rendering.
"""

import plotly.graph_objects as go
import pytest

from weatherline.core.chart_config import SIMPLE_LAYOUT
from weatherline.core.scene import compose_scene
from weatherline.core.visualization import (
    XANCHORS,
    YANCHORS,
    apply_pixel_canvas_layout,
    scene_to_figure,
)
from weatherline.models.chart import Series, Viewport

HOUR = 3_600_000
START = 1_717_214_400_000  # 2024-06-01 00:00 America/New_York


def forecast_series():
    values = [10.0] * 49
    values[24] = 25.0
    values[36] = 0.0
    return Series.from_values(
        "Temperature", [START + i * HOUR for i in range(len(values))], values
    )


class TestApplyPixelCanvasLayout:
    """Test apply_pixel_canvas_layout function."""

    def test_axes_in_pixels(self):
        fig = apply_pixel_canvas_layout(go.Figure(), 1200, 400)

        assert list(fig.layout.xaxis.range) == [0, 1200]
        assert list(fig.layout.yaxis.range) == [400, 0]
        assert fig.layout.xaxis.visible is False
        assert fig.layout.margin.l == 0
        assert fig.layout.showlegend is False

    def test_title(self):
        fig = apply_pixel_canvas_layout(go.Figure(), 1200, 400, title="Forecast")
        assert fig.layout.title.text == "Forecast"


class TestSceneToFigure:
    """Test scene_to_figure function."""

    def test_detailed_scene(self):
        scene = compose_scene([forecast_series()], Viewport(width=1200, height=400))

        fig = scene_to_figure(scene)

        assert isinstance(fig, go.Figure)
        line_shapes = [s for s in fig.layout.shapes if s.type == "line"]
        path_shapes = [s for s in fig.layout.shapes if s.type == "path"]
        assert len(line_shapes) == len(scene.border) + len(scene.ticks)
        # One shape per segment so each can carry its own gradient color
        assert len(path_shapes) == 48
        assert len({s.line.color for s in path_shapes}) > 1

        texts = [a.text for a in fig.layout.annotations]
        assert texts == ["Sa 6/1", "Su 6/2", "M 6/3", "77º", "32º"]

        # Markers for the two labeled extremes
        assert len(fig.data) == 1
        assert len(fig.data[0].x) == 2

    def test_annotation_anchors(self):
        scene = compose_scene([forecast_series()], Viewport(width=1200, height=400))

        fig = scene_to_figure(scene)

        peak, trough = fig.layout.annotations[3:]
        assert (peak.xanchor, peak.yanchor) == ("center", "bottom")
        assert (trough.xanchor, trough.yanchor) == ("center", "top")
        assert peak.y == pytest.approx(20)

    def test_repeated_sample_keeps_segment_colors(self):
        times = [START, START + HOUR, START + HOUR, START + 2 * HOUR, START + 3 * HOUR]
        series = Series.from_values("Temperature", times, [10.0, 20.0, 20.0, 5.0, 30.0])
        scene = compose_scene([series], Viewport(width=1200, height=400))

        fig = scene_to_figure(scene)

        path_shapes = [s for s in fig.layout.shapes if s.type == "path"]
        assert [s.line.color for s in path_shapes] == scene.layers[0].segment_colors
        assert len(path_shapes) == 3

    def test_simple_scene(self):
        scene = compose_scene(
            [forecast_series()], Viewport(width=1200, height=400), layout=SIMPLE_LAYOUT
        )

        fig = scene_to_figure(scene)

        path_shapes = [s for s in fig.layout.shapes if s.type == "path"]
        assert len(path_shapes) == 1
        assert path_shapes[0].line.color == scene.layers[0].stroke
        assert len(fig.data[0].x) == 49

    def test_empty_scene(self):
        scene = compose_scene([], Viewport(width=1200, height=400))

        fig = scene_to_figure(scene)

        assert fig.layout.title.text == "No Forecast Data Available"
        assert len(fig.data) == 0


class TestAnchorMaps:
    def test_svg_to_plotly_anchors(self):
        assert XANCHORS["end"] == "right"
        assert XANCHORS[None] == "left"
        assert YANCHORS["middle"] == "middle"
