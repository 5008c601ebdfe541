"""Threshold lines — percent-to-absolute conversion and per-step series."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from panel_core.types import ThresholdMode
from timeseries_chart.defaults import DEFAULT_CHART_DEFAULTS, ChartDefaults
from timeseries_chart.models import StepOptions, ThresholdOptions, YAxisOptions
from timeseries_chart.series import get_threshold_series

if TYPE_CHECKING:
    from timeseries_chart.models import SeriesDescriptor

logger = logging.getLogger("timeseries_chart.thresholds")


def find_max(time_series: Sequence[SeriesDescriptor]) -> float:
    """Largest numeric value across all series, never below 0.

    Gaps, NaN, and non-numeric points are ignored.
    """
    largest = 0.0
    for series in time_series:
        for value in series.values():
            if isinstance(value, bool) or not isinstance(value, int | float):
                continue
            if not math.isnan(value) and value > largest:
                largest = value
    return largest


def convert_percent_threshold(
    percent: float,
    data: Sequence[SeriesDescriptor],
    max: float | None = None,  # noqa: A002
    min: float | None = None,  # noqa: A002
) -> float:
    """Convert a percent threshold (0-100) into an absolute step value.

    Without an explicit max the largest value in the series data is used;
    without an explicit min the range starts at 0.
    """
    adjusted_max = max if max is not None else find_max(data)
    adjusted_min = min if min is not None else 0.0
    total = adjusted_max - adjusted_min
    return percent / 100 * total + adjusted_min


def build_threshold_series(
    thresholds: ThresholdOptions | None,
    time_axis: Sequence[int],
    time_series: Sequence[SeriesDescriptor],
    y_axis: YAxisOptions | None = None,
    *,
    defaults: ChartDefaults = DEFAULT_CHART_DEFAULTS,
) -> list[SeriesDescriptor]:
    """One flat dashed line per threshold step, spanning the whole time axis.

    Percent steps are resolved against the y-axis bounds when set, otherwise
    against the observed range of `time_series`.
    """
    if thresholds is None or not thresholds.steps:
        return []

    y_axis = y_axis or YAxisOptions()
    default_color = thresholds.default_color or defaults.threshold_color
    descriptors: list[SeriesDescriptor] = []

    for index, step in enumerate(thresholds.steps):
        value = step.value
        if thresholds.mode == ThresholdMode.PERCENT:
            value = convert_percent_threshold(step.value, time_series, y_axis.max, y_axis.min)
            logger.debug("Threshold step %d: %s%% -> %s", index, step.value, value)

        resolved = StepOptions(value=value, color=step.color or default_color, name=step.name)
        name = step.name or f"Threshold {index + 1}"
        data = [(timestamp, value) for timestamp in time_axis]
        descriptors.append(get_threshold_series(name, data, resolved, defaults=defaults))

    return descriptors
