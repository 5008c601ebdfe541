"""Y-axis bounds — one-significant-digit rounding and the dynamic minimum rule."""

from __future__ import annotations

import math
from decimal import ROUND_FLOOR, Decimal

from timeseries_chart.defaults import DEFAULT_CHART_DEFAULTS, ChartDefaults
from timeseries_chart.models import AxisConfig, DynamicMinRule, YAxisOptions


def round_down(num: float) -> float:
    """Round down to the nearest number with one significant digit.

    Examples:
        675   -> 600
        0.567 -> 0.5
        -12   -> -20

    Zero has no magnitude and maps to 0. Non-finite input is returned unchanged.

    Works on the decimal digits of the float's shortest repr, so 0.7 stays 0.7
    and the result is never above `num`, subnormals included.
    """
    if num == 0:
        return 0.0
    if not math.isfinite(num):
        return num

    digits = Decimal(repr(num))
    # adjusted() is the exponent of the leading digit: 675 -> 2, 0.0042 -> -3
    magnitude = digits.adjusted()
    first_digit = digits.scaleb(-magnitude).to_integral_value(rounding=ROUND_FLOOR)
    return float(first_digit.scaleb(magnitude))


def dynamic_min_rule(defaults: ChartDefaults = DEFAULT_CHART_DEFAULTS) -> DynamicMinRule:
    return DynamicMinRule(
        positive_multiplier=defaults.positive_min_value_multiplier,
        negative_multiplier=defaults.negative_min_value_multiplier,
    )


def convert_panel_y_axis(
    options: YAxisOptions | None = None,
    *,
    defaults: ChartDefaults = DEFAULT_CHART_DEFAULTS,
) -> AxisConfig:
    """Convert panel y-axis options into renderer axis config.

    An explicit `min` passes through. Otherwise the minimum is set relative
    to the data through a `DynamicMinRule` the renderer evaluates against the
    observed minimum at draw time.
    """
    options = options or YAxisOptions()
    show = options.show if options.show is not None else defaults.y_axis_show
    axis_min: float | DynamicMinRule = (
        options.min if options.min is not None else dynamic_min_rule(defaults)
    )
    return AxisConfig(show=show, min=axis_min, max=options.max)
