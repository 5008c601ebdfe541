"""Chart engine models — visual options, renderer descriptors, axis config, panel data."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from panel_core.models import TimeScale, TimeSeriesValue  # noqa: TC001
from panel_core.types import LineType, SamplingStrategy, ThresholdMode

# ---------------------------------------------------------------------------
# User configuration
# ---------------------------------------------------------------------------


class VisualOptions(BaseModel):
    """Panel visual options. Every field is optional; builders fill in defaults.

    `show_points` and `stack` are kept as plain strings so that values the
    engine does not recognise fall through to the default behaviour instead
    of failing the render.
    """

    line_width: float | None = None
    point_radius: float | None = None
    show_points: str | None = None
    connect_nulls: bool | None = None
    stack: str | None = None
    area_opacity: float | None = None


class YAxisOptions(BaseModel):
    show: bool | None = None
    min: float | None = None
    max: float | None = None


class StepOptions(BaseModel):
    """One horizontal reference line. `value` is absolute or a percent depending on mode."""

    value: float
    color: str | None = None
    name: str | None = None


class ThresholdOptions(BaseModel):
    mode: ThresholdMode = ThresholdMode.ABSOLUTE
    default_color: str | None = None
    steps: list[StepOptions] = []


# ---------------------------------------------------------------------------
# Renderer descriptors
# ---------------------------------------------------------------------------


class RendererModel(BaseModel):
    """Frozen model that dumps with camelCase keys for the drawing library."""

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}


class LineStyle(RendererModel):
    width: float
    opacity: float | None = None
    type: LineType | None = None


class AreaStyle(RendererModel):
    opacity: float


class LabelStyle(RendererModel):
    show: bool


class EmphasisStyle(RendererModel):
    line_style: LineStyle
    focus: Literal["self", "series"] | None = None
    blur_scope: Literal["series", "global", "coordinateSystem"] | None = None


class BlurStyle(RendererModel):
    line_style: LineStyle


class SeriesDescriptor(RendererModel):
    """One drawable series. Built fresh per render pass and never mutated."""

    type: Literal["line"] = "line"
    name: str
    data: tuple[TimeSeriesValue, ...]
    color: str | None = None
    connect_nulls: bool | None = None
    stack: str | None = None
    sampling: SamplingStrategy | None = None
    progressive_threshold: int | None = None
    show_symbol: bool | None = None
    show_all_symbol: bool | None = None
    symbol_size: float | None = None
    label: LabelStyle | None = None
    line_style: LineStyle
    area_style: AreaStyle | None = None
    emphasis: EmphasisStyle | None = None
    blur: BlurStyle | None = None

    def values(self) -> list[float | None]:
        return [value for _, value in self.data]


# ---------------------------------------------------------------------------
# Y axis
# ---------------------------------------------------------------------------


class DynamicMinRule(RendererModel):
    """Axis minimum computed from the observed data minimum at draw time."""

    kind: Literal["observed_min"] = "observed_min"
    positive_multiplier: float
    negative_multiplier: float

    def evaluate(self, observed_min: float) -> float:
        from timeseries_chart.axis import round_down

        if 0 <= observed_min <= 1:
            # Keeps percent-decimal and 0/1 boolean series anchored at zero
            return 0.0
        if observed_min > 0:
            return round_down(observed_min * self.positive_multiplier)
        return round_down(observed_min * self.negative_multiplier)


class AxisConfig(RendererModel):
    show: bool
    min: float | DynamicMinRule | None = None
    max: float | None = None

    def resolve_min(self, observed_min: float) -> float | None:
        if isinstance(self.min, DynamicMinRule):
            return self.min.evaluate(observed_min)
        return self.min


# ---------------------------------------------------------------------------
# Panel output
# ---------------------------------------------------------------------------


class LegendItem(RendererModel):
    id: str
    label: str
    color: str | None = None


class PanelData(RendererModel):
    time_scale: TimeScale | None = None
    x_axis: tuple[int, ...] = ()
    time_series: tuple[SeriesDescriptor, ...] = ()
    legend_items: tuple[LegendItem, ...] = ()
    y_axis: AxisConfig | None = None

    @property
    def is_empty(self) -> bool:
        return self.time_scale is None


# ---------------------------------------------------------------------------
# Strict validation
# ---------------------------------------------------------------------------


class ValidationResult(BaseModel):
    rule_name: str
    severity: Literal["error", "warning"]
    message: str
    option_keys: list[str] = Field(default_factory=list)
