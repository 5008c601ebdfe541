"""Deployment settings for the chart engine.

Every field maps onto a `ChartDefaults` field and can be set from the
environment with the `TIMESERIES_CHART_` prefix, e.g.
`TIMESERIES_CHART_HIDE_DATAPOINTS_LIMIT=120`.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from timeseries_chart.defaults import (
    DEFAULT_AREA_OPACITY,
    DEFAULT_CONNECT_NULLS,
    DEFAULT_LINE_WIDTH,
    DEFAULT_PALETTE,
    DEFAULT_POINT_RADIUS,
    DEFAULT_THRESHOLD_COLOR,
    DEFAULT_Y_AXIS_SHOW,
    HIDE_DATAPOINTS_LIMIT,
    NEGATIVE_MIN_VALUE_MULTIPLIER,
    OPTIMIZED_MODE_SERIES_LIMIT,
    POSITIVE_MIN_VALUE_MULTIPLIER,
    TIME_AXIS_WARNING_POINTS,
    ChartDefaults,
)


class ChartSettings(BaseSettings):
    """Environment-driven overrides for the chart defaults."""

    line_width: float = Field(default=DEFAULT_LINE_WIDTH, description="Series line width")
    point_radius: float = Field(default=DEFAULT_POINT_RADIUS, description="Symbol size")
    area_opacity: float = Field(default=DEFAULT_AREA_OPACITY, description="Area fill opacity")
    connect_nulls: bool = Field(default=DEFAULT_CONNECT_NULLS, description="Bridge gaps")
    y_axis_show: bool = Field(default=DEFAULT_Y_AXIS_SHOW, description="Show the y axis")

    hide_datapoints_limit: int = Field(
        default=HIDE_DATAPOINTS_LIMIT,
        description="Above this many points, symbols are hidden unless forced",
    )
    optimized_mode_series_limit: int = Field(
        default=OPTIMIZED_MODE_SERIES_LIMIT,
        description="Progressive rendering threshold",
    )
    time_axis_warning_points: int = Field(
        default=TIME_AXIS_WARNING_POINTS,
        description="Warn when the common time axis grows past this many timestamps",
    )

    positive_min_value_multiplier: float = Field(
        default=POSITIVE_MIN_VALUE_MULTIPLIER,
        description="Padding below a positive observed minimum",
    )
    negative_min_value_multiplier: float = Field(
        default=NEGATIVE_MIN_VALUE_MULTIPLIER,
        description="Padding below a negative observed minimum",
    )

    threshold_color: str = Field(default=DEFAULT_THRESHOLD_COLOR)
    palette: tuple[str, ...] = Field(default=DEFAULT_PALETTE)

    log_level: str = Field(default="WARNING", description="CLI log level")

    model_config = {"env_prefix": "TIMESERIES_CHART_"}

    def to_defaults(self) -> ChartDefaults:
        return ChartDefaults(**self.model_dump(exclude={"log_level"}))
