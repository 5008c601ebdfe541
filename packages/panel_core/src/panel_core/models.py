"""Query-layer result models consumed by the chart engine."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from panel_core.instants import InstantType  # noqa: TC001

# (timestamp in epoch milliseconds, value or gap)
TimeSeriesValue = tuple[int, float | None]


class TimeRange(BaseModel):
    start: InstantType
    end: InstantType

    @property
    def start_ms(self) -> int:
        return self.start.timestamp(unit="millisecond")

    @property
    def end_ms(self) -> int:
        return self.end.timestamp(unit="millisecond")


class TimeSeries(BaseModel):
    name: str
    formatted_name: str | None = None
    values: list[TimeSeriesValue] = []

    @property
    def display_name(self) -> str:
        return self.formatted_name or self.name


class TimeSeriesData(BaseModel):
    time_range: TimeRange
    step_ms: int = Field(gt=0)
    series: list[TimeSeries] = []


class QueryResult(BaseModel):
    """One entry per running query. `data` is only meaningful once loading finishes."""

    is_loading: bool = False
    data: TimeSeriesData | None = None


class TimeScale(BaseModel):
    """Common x-axis resolution across all charted queries.

    Handed to the renderer as part of the panel data, so it dumps camelCase by alias.
    """

    start_ms: int
    end_ms: int
    step_ms: int = Field(gt=0)

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    @model_validator(mode="after")
    def _check_range(self) -> TimeScale:
        if self.end_ms < self.start_ms:
            raise ValueError(f"end_ms ({self.end_ms}) is before start_ms ({self.start_ms})")
        return self
