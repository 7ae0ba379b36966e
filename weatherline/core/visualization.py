"""
visualization.py
Plotly rendering of composed forecast chart scenes.

The figure uses hidden axes in pixel units (y reversed) so scene coordinates
can be drawn as-is: border and gridlines become layout shapes, series become
path shapes, and labels become annotations.
"""

from typing import Dict, List, Optional

import plotly.graph_objects as go

from weatherline.core.chart_config import get_standard_colors
from weatherline.models.chart import PointMarker, Scene, SeriesLayer
from weatherline.utils.log_util import app_logger

logger = app_logger(__name__)

# SVG text-anchor -> Plotly xanchor
XANCHORS = {"start": "left", "middle": "center", "end": "right", None: "left"}

# SVG alignment-baseline -> Plotly yanchor (default baseline sits on y)
YANCHORS = {"hanging": "top", "middle": "middle", None: "bottom"}


def apply_pixel_canvas_layout(
    fig: go.Figure, width: float, height: float, title: Optional[str] = None
) -> go.Figure:
    """
    Configure a figure as a pixel canvas of the given size.

    :param fig: Plotly figure to configure
    :param width: Canvas width in pixels
    :param height: Canvas height in pixels
    :param title: Chart title (optional)
    :return: Configured figure
    """
    colors = get_standard_colors()
    layout_config = {
        "width": width,
        "height": height,
        "margin": dict(l=0, r=0, t=0, b=0),
        "showlegend": False,
        "hovermode": "closest",
        "plot_bgcolor": colors["background"],
        "paper_bgcolor": colors["background"],
    }
    if title:
        layout_config["title"] = title

    fig.update_layout(**layout_config)
    fig.update_xaxes(range=[0, width], visible=False, fixedrange=True)
    fig.update_yaxes(range=[height, 0], visible=False, fixedrange=True)
    return fig


def _line_shapes(scene: Scene) -> List[Dict]:
    colors = get_standard_colors()
    ox, oy = scene.offset
    shapes = []
    for line in scene.ticks + scene.border:
        shapes.append(
            dict(
                type="line",
                xref="x",
                yref="y",
                x0=line.x1 + ox,
                y0=line.y1 + oy,
                x1=line.x2 + ox,
                y1=line.y2 + oy,
                line=dict(
                    color=colors["axis"] if line.kind == "axis" else colors["tick"],
                    width=1,
                ),
                layer="below",
            )
        )
    return shapes


def _series_shapes(layer: SeriesLayer, ox: float, oy: float) -> List[Dict]:
    path = layer.path.translated(ox, oy)
    if path.is_empty or not path.segments:
        return []

    if layer.segment_colors:
        pieces = path.split()
        colored = zip(pieces, layer.segment_colors)
    else:
        colored = [(path, layer.stroke)]

    return [
        dict(
            type="path",
            xref="x",
            yref="y",
            path=piece.to_svg_path(),
            line=dict(color=color, width=layer.stroke_width),
        )
        for piece, color in colored
    ]


def _marker_trace(markers: List[PointMarker], label: str, ox: float, oy: float) -> go.Scatter:
    return go.Scatter(
        x=[m.x + ox for m in markers],
        y=[m.y + oy for m in markers],
        mode="markers",
        name=label,
        hoverinfo="skip",
        marker=dict(
            size=[m.radius * 2 for m in markers],
            color=[m.fill for m in markers],
            line=dict(color=[m.stroke for m in markers], width=markers[0].stroke_width),
        ),
    )


def scene_to_figure(scene: Scene, title: Optional[str] = None) -> go.Figure:
    """
    Render a scene as a Plotly figure.

    :param scene: Scene from compose_scene()
    :param title: Chart title (optional)
    :return: Plotly figure
    """
    fig = go.Figure()

    if scene.is_empty:
        logger.info("Empty scene; returning placeholder figure")
        fig.update_layout(title="No Forecast Data Available", height=scene.height)
        return fig

    colors = get_standard_colors()
    ox, oy = scene.offset
    shapes = _line_shapes(scene)
    annotations = []

    for text in scene.day_labels:
        annotations.append(
            dict(
                x=text.x,
                y=text.y,
                xref="x",
                yref="y",
                text=text.text,
                showarrow=False,
                xanchor="center",
                yanchor="bottom",
                font=dict(color=colors["day_label"], size=12),
            )
        )

    for layer in scene.layers:
        shapes.extend(_series_shapes(layer, ox, oy))

        markers = list(layer.markers)
        markers.extend(label.marker for label in layer.labels if label.marker is not None)
        if markers:
            fig.add_trace(_marker_trace(markers, layer.label, ox, oy))

        for label in layer.labels:
            annotations.append(
                dict(
                    x=label.text_x + ox,
                    y=label.text_y + oy,
                    xref="x",
                    yref="y",
                    text=label.text,
                    showarrow=False,
                    xanchor=XANCHORS.get(label.placement.text_anchor, "left"),
                    yanchor=YANCHORS.get(label.placement.alignment_baseline, "bottom"),
                    font=dict(color=label.color, size=12),
                )
            )

    fig.update_layout(shapes=shapes, annotations=annotations)
    apply_pixel_canvas_layout(fig, scene.width, scene.height, title=title)

    logger.debug(
        f"Rendered figure with {len(shapes)} shapes and {len(annotations)} annotations"
    )
    return fig
