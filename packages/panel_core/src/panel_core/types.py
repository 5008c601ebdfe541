"""Option enums shared by the query layer, the chart engine, and the renderer."""

from enum import StrEnum


class ShowPoints(StrEnum):
    AUTO = "Auto"
    ALWAYS = "Always"


class StackMode(StrEnum):
    ALL = "All"


class ThresholdMode(StrEnum):
    ABSOLUTE = "absolute"
    PERCENT = "percent"


class SamplingStrategy(StrEnum):
    LTTB = "lttb"


class LineType(StrEnum):
    SOLID = "solid"
    DASHED = "dashed"
