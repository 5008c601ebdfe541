"""Series descriptors for ordinary time series and threshold lines."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from panel_core.types import LineType, SamplingStrategy, ShowPoints, StackMode
from timeseries_chart.defaults import DEFAULT_CHART_DEFAULTS, ChartDefaults
from timeseries_chart.models import (
    AreaStyle,
    BlurStyle,
    EmphasisStyle,
    LabelStyle,
    LineStyle,
    SeriesDescriptor,
    StepOptions,
    VisualOptions,
)

if TYPE_CHECKING:
    from panel_core.models import TimeSeriesValue


def _usable(value: float | None, *, low: float, high: float = math.inf) -> bool:
    return value is not None and math.isfinite(value) and low <= value <= high


def resolve_line_width(visual: VisualOptions, defaults: ChartDefaults) -> float:
    width = visual.line_width
    if width is not None and math.isfinite(width) and width > 0:
        return width
    return defaults.line_width


def resolve_point_radius(visual: VisualOptions, defaults: ChartDefaults) -> float:
    if _usable(visual.point_radius, low=0):
        return visual.point_radius
    return defaults.point_radius


def resolve_area_opacity(visual: VisualOptions, defaults: ChartDefaults) -> float:
    if _usable(visual.area_opacity, low=0, high=1):
        return visual.area_opacity
    return defaults.area_opacity


def show_symbols(point_count: int, visual: VisualOptions, defaults: ChartDefaults) -> bool:
    """Symbols show for short series (roughly 15 minutes or less) or when forced.

    "Always" can only add symbols; there is no mode that hides them below the limit.
    """
    if visual.show_points == ShowPoints.ALWAYS:
        return True
    return point_count <= defaults.hide_datapoints_limit


def get_line_series(
    formatted_name: str,
    data: Sequence[TimeSeriesValue],
    visual: VisualOptions,
    palette_color: str | None = None,
    *,
    defaults: ChartDefaults = DEFAULT_CHART_DEFAULTS,
) -> SeriesDescriptor:
    """Build the line series descriptor for one time series."""
    line_width = resolve_line_width(visual, defaults)
    connect_nulls = visual.connect_nulls if visual.connect_nulls is not None else defaults.connect_nulls

    return SeriesDescriptor(
        name=formatted_name,
        data=tuple(data),
        color=palette_color,
        connect_nulls=connect_nulls,
        stack=StackMode.ALL.value if visual.stack == StackMode.ALL else None,
        sampling=SamplingStrategy.LTTB,
        progressive_threshold=defaults.optimized_mode_series_limit,
        show_symbol=show_symbols(len(data), visual, defaults),
        show_all_symbol=True,
        symbol_size=resolve_point_radius(visual, defaults),
        line_style=LineStyle(width=line_width, opacity=defaults.line_opacity),
        area_style=AreaStyle(opacity=resolve_area_opacity(visual, defaults)),
        emphasis=EmphasisStyle(
            focus="self",
            blur_scope="series",
            line_style=LineStyle(
                width=line_width + defaults.emphasis_width_increment,
                opacity=1,
            ),
        ),
        blur=BlurStyle(line_style=LineStyle(width=0, opacity=0)),
    )


def get_threshold_series(
    name: str,
    data: Sequence[TimeSeriesValue],
    threshold: StepOptions,
    *,
    defaults: ChartDefaults = DEFAULT_CHART_DEFAULTS,
) -> SeriesDescriptor:
    """Build a dashed threshold line.

    Thresholds are ordinary series rather than reference-line overlays so
    that they widen the y-axis range and show up in the tooltip.
    """
    return SeriesDescriptor(
        name=name,
        data=tuple(data),
        color=threshold.color,
        label=LabelStyle(show=False),
        line_style=LineStyle(type=LineType.DASHED, width=defaults.threshold_line_width),
        emphasis=EmphasisStyle(
            line_style=LineStyle(width=defaults.threshold_emphasis_line_width),
        ),
    )
