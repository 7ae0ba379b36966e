"""
svg_renderer.py
Serialize a composed Scene as standalone SVG markup.
"""

from typing import List
from xml.sax.saxutils import escape, quoteattr

from weatherline.core.chart_config import get_standard_colors
from weatherline.models.chart import PointMarker, Scene, SeriesLayer

FONT_FAMILY = "-apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif"


def _num(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _marker(marker: PointMarker) -> str:
    return (
        f'<circle cx="{_num(marker.x)}" cy="{_num(marker.y)}" r="{_num(marker.radius)}" '
        f'fill="{marker.fill}" stroke="{marker.stroke}" '
        f'stroke-width="{_num(marker.stroke_width)}"/>'
    )


def _layer(layer: SeriesLayer, gradient_id: str) -> List[str]:
    o = []
    if layer.gradient:
        o.append(f'<defs><linearGradient id="{gradient_id}" x1="0" x2="0" y1="1" y2="0">')
        for stop in layer.gradient:
            o.append(
                f'<stop offset="{_num(stop.offset * 100)}%" stop-color="{stop.color}"/>'
            )
        o.append("</linearGradient></defs>")
        stroke = f"url(#{gradient_id})"
    else:
        stroke = layer.stroke

    if not layer.path.is_empty:
        o.append(
            f'<path d="{layer.path.to_svg_path()}" stroke="{stroke}" '
            f'stroke-width="{_num(layer.stroke_width)}" fill="none"/>'
        )

    o.extend(_marker(m) for m in layer.markers)

    for label in layer.labels:
        if label.marker is not None:
            o.append(_marker(label.marker))
        attrs = [
            f'x="{_num(label.text_x)}"',
            f'y="{_num(label.text_y)}"',
            f'fill="{label.color}"',
        ]
        if label.placement.text_anchor:
            attrs.append(f'text-anchor="{label.placement.text_anchor}"')
        if label.placement.alignment_baseline:
            attrs.append(f'alignment-baseline="{label.placement.alignment_baseline}"')
        o.append(
            f'<text class="point-label" {" ".join(attrs)}>{escape(label.text)}</text>'
        )
    return o


def scene_to_svg(scene: Scene) -> str:
    """
    Render a scene as an SVG document string.

    :param scene: Scene from compose_scene()
    :return: SVG markup
    """
    colors = get_standard_colors()
    o = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{_num(scene.width)}" '
        f'height="{_num(scene.height)}" font-family={quoteattr(FONT_FAMILY)} font-size="12">',
        f'<rect width="{_num(scene.width)}" height="{_num(scene.height)}" '
        f'fill="{colors["background"]}"/>',
    ]

    for text in scene.day_labels:
        o.append(
            f'<text class="x-tick-label" x="{_num(text.x)}" y="{_num(text.y)}" '
            f'text-anchor="middle" fill="{colors["day_label"]}">{escape(text.text)}</text>'
        )

    ox, oy = scene.offset
    o.append(f'<g transform="translate({_num(ox)},{_num(oy)})">')
    for line in scene.border + scene.ticks:
        color = colors["axis"] if line.kind == "axis" else colors["tick"]
        o.append(
            f'<line class="chart-{line.kind}" x1="{_num(line.x1)}" y1="{_num(line.y1)}" '
            f'x2="{_num(line.x2)}" y2="{_num(line.y2)}" stroke="{color}" stroke-width="1"/>'
        )
    for i, layer in enumerate(scene.layers):
        o.extend(_layer(layer, gradient_id=f"series-gradient-{i}"))
    o.append("</g>")
    o.append("</svg>")
    return "\n".join(o)
