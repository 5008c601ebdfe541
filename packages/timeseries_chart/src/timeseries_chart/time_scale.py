"""Common time scale across running queries, and series alignment onto it."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from panel_core.models import TimeScale, TimeSeriesData

if TYPE_CHECKING:
    from panel_core.models import QueryResult, TimeSeries, TimeSeriesValue

logger = logging.getLogger("timeseries_chart.time_scale")

CommonScaleFn = Callable[[Sequence[TimeSeriesData | None]], TimeScale | None]


def get_common_time_scale(series_data: Sequence[TimeSeriesData | None]) -> TimeScale | None:
    """Merge several queries' ranges and steps into one scale.

    Start is the earliest start, end the latest end, and the step is the
    greatest common divisor of every step so it divides into all of them.
    Entries without data are skipped; if none remain the scale is absent.
    """
    start_ms: int | None = None
    end_ms: int | None = None
    steps: list[int] = []

    for data in series_data:
        if data is None:
            continue
        steps.append(data.step_ms)
        start = data.time_range.start_ms
        end = data.time_range.end_ms
        start_ms = start if start_ms is None else min(start_ms, start)
        end_ms = end if end_ms is None else max(end_ms, end)

    if not steps or start_ms is None or end_ms is None:
        return None

    return TimeScale(start_ms=start_ms, end_ms=end_ms, step_ms=math.gcd(*steps))


def get_common_time_scale_for_queries(
    queries: Sequence[QueryResult],
    *,
    common_scale: CommonScaleFn = get_common_time_scale,
) -> TimeScale | None:
    """Calculate a common x-axis time scale for a list of running queries.

    Queries that are still loading contribute no data rather than a stale or
    partial constraint. The common-scale result is returned unchanged.
    """
    series_data = [None if query.is_loading else query.data for query in queries]
    scale = common_scale(series_data)
    if scale is None:
        logger.debug("No time scale available for %d queries", len(queries))
    return scale


def time_axis_length(scale: TimeScale) -> int:
    return (scale.end_ms - scale.start_ms) // scale.step_ms + 1


def get_time_axis(scale: TimeScale) -> list[int]:
    """Timestamps for the x axis: start, start + step, ... up to and including end."""
    return list(range(scale.start_ms, scale.end_ms + 1, scale.step_ms))


def align_series_values(series: TimeSeries, scale: TimeScale) -> list[TimeSeriesValue]:
    """Project a series onto the common time axis.

    Axis timestamps the series has no point for become gaps (None). Points
    that do not fall on the axis grid are dropped.
    """
    by_timestamp = {timestamp: value for timestamp, value in series.values}
    axis = get_time_axis(scale)
    aligned = [(timestamp, by_timestamp.get(timestamp)) for timestamp in axis]

    off_grid = len(by_timestamp.keys() - set(axis))
    if off_grid:
        logger.debug("Dropped %d off-grid points from series %s", off_grid, series.name)
    return aligned
