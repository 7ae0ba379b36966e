"""
chart_config.py

Color and layout configuration for forecast charts.

Colors are an explicit ColorConfig object handed to the scene composer, so any
set of series labels can be charted. Layouts are named ChartLayout presets:
``detailed`` (gradient strokes, inflection labels) and ``simple`` (flat
strokes, daily min/max labels).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import plotly.colors as pc

from weatherline.core.extreme_points import ExtremePolicy
from weatherline.core.label_placement import (
    DETAILED_LABEL_OFFSET,
    SIMPLE_LABEL_OFFSET,
)
from weatherline.utils.log_util import app_logger

logger = app_logger(__name__)

# Hide point labels this close (px) to any edge of the chart
MIN_SPACE_FOR_INNER_LABELS = 30


def get_standard_colors() -> Dict[str, str]:
    """
    Get standard colors for chart chrome.

    :return: Dictionary with color definitions
    """
    return {
        "axis": "#666666",
        "tick": "#dddddd",
        "day_label": "#444444",
        "background": "white",
    }


def get_series_palette() -> List[str]:
    """
    Get the ordinal palette for flat series strokes (d3 category10).

    :return: List of hex colors
    """
    return list(pc.qualitative.D3)


def get_temperature_domains() -> Dict[str, Tuple[float, float]]:
    """
    Get Celsius domains of the sequential color scale for known series.

    :return: Mapping of series label to (low, high)
    """
    return {
        "Temperature": (0, 35),
        "Dew Point": (0, 21),
    }


def _to_hex(rgb_color: str) -> str:
    r, g, b = pc.unlabel_rgb(rgb_color)
    return "#{:02x}{:02x}{:02x}".format(
        *(max(0, min(255, int(round(c)))) for c in (r, g, b))
    )


@dataclass
class ColorConfig:
    """
    Series colors keyed by label.

    ``flat_color`` assigns palette entries to labels in order of first lookup,
    so it is total over all labels. ``value_color`` samples the sequential
    ``colorscale`` over the label's domain, clamped to its ends, and falls back
    to the flat color for labels without a domain.
    """

    sequential_domains: Dict[str, Tuple[float, float]] = field(
        default_factory=get_temperature_domains
    )
    colorscale: str = "Turbo"
    palette: List[str] = field(default_factory=get_series_palette)
    _assigned: Dict[str, str] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        if not self.palette:
            raise ValueError("ColorConfig palette must not be empty")
        self._scale = pc.get_colorscale(self.colorscale)

    def has_gradient(self, label: str) -> bool:
        return label in self.sequential_domains

    def flat_color(self, label: str) -> str:
        if label not in self._assigned:
            self._assigned[label] = self.palette[len(self._assigned) % len(self.palette)]
        return self._assigned[label]

    def value_color(self, label: str, value: float) -> str:
        domain = self.sequential_domains.get(label)
        if domain is None:
            return self.flat_color(label)

        low, high = domain
        t = 0.5 if high == low else (value - low) / (high - low)
        t = max(0.0, min(1.0, t))
        return _to_hex(pc.sample_colorscale(self._scale, [t])[0])


@dataclass(frozen=True)
class Spacing:
    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0


@dataclass(frozen=True)
class ChartLayout:
    """Named set of spacing, annotation and stroke settings."""

    name: str
    extreme_policy: ExtremePolicy
    label_offset: float
    outer_spacing: Spacing
    inner_spacing: Spacing
    gradient_stroke: bool = True
    weekday_labels: bool = True
    mark_all_points: bool = False
    label_margin: float = MIN_SPACE_FOR_INNER_LABELS
    gradient_stop_count: int = 10
    y_tick_count: int = 5
    stroke_width: float = 2
    marker_radius: float = 3
    day_label_baseline: float = 2


DETAILED_LAYOUT = ChartLayout(
    name="detailed",
    extreme_policy=ExtremePolicy.INFLECTION,
    label_offset=DETAILED_LABEL_OFFSET,
    outer_spacing=Spacing(top=0, right=0, bottom=18, left=0),
    inner_spacing=Spacing(top=30, right=0, bottom=30, left=0),
    gradient_stroke=True,
    weekday_labels=True,
    mark_all_points=False,
)

SIMPLE_LAYOUT = ChartLayout(
    name="simple",
    extreme_policy=ExtremePolicy.DAILY,
    label_offset=SIMPLE_LABEL_OFFSET,
    outer_spacing=Spacing(top=0, right=0, bottom=18, left=0),
    inner_spacing=Spacing(top=20, right=10, bottom=20, left=10),
    gradient_stroke=False,
    weekday_labels=False,
    mark_all_points=True,
)

LAYOUTS = {layout.name: layout for layout in (DETAILED_LAYOUT, SIMPLE_LAYOUT)}


def get_layout(name: Optional[str] = None) -> ChartLayout:
    """
    Look up a chart layout by name.

    :param name: "detailed" or "simple"; None returns the detailed layout
    :return: ChartLayout
    """
    if name is None:
        return DETAILED_LAYOUT
    if name not in LAYOUTS:
        raise ValueError(f"Unknown chart layout '{name}'; expected one of {sorted(LAYOUTS)}")
    return LAYOUTS[name]
