"""Panel assembly — turns running queries plus panel options into renderer-ready data.

Pipeline for one render pass:
1. Reconcile a common time scale across queries (loading queries contribute nothing)
2. Build the x axis from the scale
3. Align every query series onto the axis and build its line series + legend item
4. Build threshold lines over the same axis
5. Convert y-axis options

Nothing is cached; every pass recomputes from the current queries and options.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from timeseries_chart.axis import convert_panel_y_axis
from timeseries_chart.defaults import DEFAULT_CHART_DEFAULTS, ChartDefaults
from timeseries_chart.models import LegendItem, PanelData, SeriesDescriptor, VisualOptions
from timeseries_chart.series import get_line_series
from timeseries_chart.thresholds import build_threshold_series
from timeseries_chart.time_scale import (
    CommonScaleFn,
    align_series_values,
    get_common_time_scale,
    get_common_time_scale_for_queries,
    get_time_axis,
    time_axis_length,
)

if TYPE_CHECKING:
    from panel_core.models import QueryResult
    from timeseries_chart.models import ThresholdOptions, YAxisOptions

logger = logging.getLogger("timeseries_chart.panel")

EMPTY_PANEL_DATA = PanelData()


def build_panel_data(
    queries: Sequence[QueryResult],
    visual: VisualOptions | None = None,
    y_axis: YAxisOptions | None = None,
    thresholds: ThresholdOptions | None = None,
    *,
    defaults: ChartDefaults = DEFAULT_CHART_DEFAULTS,
    common_scale: CommonScaleFn = get_common_time_scale,
) -> PanelData:
    """Build everything a line-chart panel needs to draw one frame.

    Returns EMPTY_PANEL_DATA (with only the y axis filled in) while no query
    has data yet.
    """
    visual = visual or VisualOptions()
    axis_config = convert_panel_y_axis(y_axis, defaults=defaults)

    scale = get_common_time_scale_for_queries(queries, common_scale=common_scale)
    if scale is None:
        logger.debug("Nothing to render yet for %d queries", len(queries))
        return EMPTY_PANEL_DATA.model_copy(update={"y_axis": axis_config})

    axis_length = time_axis_length(scale)
    if axis_length > defaults.time_axis_warning_points:
        # Coprime query steps shrink the gcd step and blow up the axis
        logger.warning(
            "Time axis has %d timestamps at a %d ms step, above the limit of %d",
            axis_length,
            scale.step_ms,
            defaults.time_axis_warning_points,
        )

    x_axis = get_time_axis(scale)
    time_series: list[SeriesDescriptor] = []
    legend_items: list[LegendItem] = []

    for query_index, query in enumerate(queries):
        if query.is_loading or query.data is None:
            continue
        for series_index, series in enumerate(query.data.series):
            color = defaults.palette_color(len(time_series))
            name = series.display_name
            descriptor = get_line_series(
                name,
                align_series_values(series, scale),
                visual,
                color,
                defaults=defaults,
            )
            time_series.append(descriptor)
            legend_items.append(
                LegendItem(id=f"{query_index}-{series_index}-{name}", label=name, color=color)
            )

    threshold_series = build_threshold_series(
        thresholds, x_axis, time_series, y_axis, defaults=defaults
    )

    logger.debug(
        "Built panel: %d series, %d thresholds, %d timestamps",
        len(time_series),
        len(threshold_series),
        len(x_axis),
    )
    return PanelData(
        time_scale=scale,
        x_axis=tuple(x_axis),
        time_series=tuple(time_series + threshold_series),
        legend_items=tuple(legend_items),
        y_axis=axis_config,
    )
