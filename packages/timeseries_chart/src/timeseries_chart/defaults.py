"""Chart defaults — every constant the builders fall back to, in one injectable object.

Builders take a `ChartDefaults` keyword argument and use `DEFAULT_CHART_DEFAULTS`
when none is given. Deployments override values through `ChartSettings`.
"""

from pydantic import BaseModel, Field

DEFAULT_LINE_WIDTH = 1.25
DEFAULT_POINT_RADIUS = 2.75
DEFAULT_AREA_OPACITY = 0.0
DEFAULT_CONNECT_NULLS = False
DEFAULT_Y_AXIS_SHOW = True

POSITIVE_MIN_VALUE_MULTIPLIER = 0.8
NEGATIVE_MIN_VALUE_MULTIPLIER = 1.2

HIDE_DATAPOINTS_LIMIT = 70
OPTIMIZED_MODE_SERIES_LIMIT = 1000
TIME_AXIS_WARNING_POINTS = 100_000

DEFAULT_THRESHOLD_COLOR = "#EE6C6C"
DEFAULT_PALETTE = (
    "#4285F4",
    "#DB4437",
    "#F4B400",
    "#0F9D58",
    "#AB47BC",
    "#00ACC1",
)


class ChartDefaults(BaseModel):
    """Immutable set of defaults injected into the series, threshold, and axis builders."""

    line_width: float = Field(default=DEFAULT_LINE_WIDTH, gt=0)
    point_radius: float = Field(default=DEFAULT_POINT_RADIUS, ge=0)
    area_opacity: float = Field(default=DEFAULT_AREA_OPACITY, ge=0, le=1)
    connect_nulls: bool = DEFAULT_CONNECT_NULLS
    y_axis_show: bool = DEFAULT_Y_AXIS_SHOW

    # Series styling
    line_opacity: float = Field(default=0.9, ge=0, le=1)
    emphasis_width_increment: float = Field(
        default=10.0,
        description="Added to the line width of the hovered series",
    )
    threshold_line_width: float = 2.0
    threshold_emphasis_line_width: float = 2.5

    # Performance
    hide_datapoints_limit: int = Field(
        default=HIDE_DATAPOINTS_LIMIT,
        description="Symbols are shown by default at or below this many points",
    )
    optimized_mode_series_limit: int = Field(
        default=OPTIMIZED_MODE_SERIES_LIMIT,
        description="Point count above which the renderer draws progressively",
    )
    time_axis_warning_points: int = Field(
        default=TIME_AXIS_WARNING_POINTS,
        description="Axis length above which a render pass logs a warning",
    )

    # Y axis dynamic minimum
    positive_min_value_multiplier: float = POSITIVE_MIN_VALUE_MULTIPLIER
    negative_min_value_multiplier: float = NEGATIVE_MIN_VALUE_MULTIPLIER

    # Colors
    threshold_color: str = DEFAULT_THRESHOLD_COLOR
    palette: tuple[str, ...] = DEFAULT_PALETTE

    model_config = {"frozen": True}

    def palette_color(self, index: int) -> str | None:
        if not self.palette:
            return None
        return self.palette[index % len(self.palette)]


DEFAULT_CHART_DEFAULTS = ChartDefaults()
