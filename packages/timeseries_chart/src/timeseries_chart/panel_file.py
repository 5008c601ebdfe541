"""Panel files — query results plus panel options, stored as YAML or JSON."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from panel_core.models import QueryResult  # noqa: TC001
from timeseries_chart.models import (
    ThresholdOptions,
    VisualOptions,
    YAxisOptions,
)
from timeseries_chart.validation import parse_visual_options


class PanelSpecError(ValueError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load panel file '{path}': {reason}")


class PanelFile(BaseModel):
    queries: list[QueryResult] = []
    visual: dict[str, Any] = {}
    y_axis: YAxisOptions = YAxisOptions()
    thresholds: ThresholdOptions | None = None

    def visual_options(self) -> VisualOptions:
        return parse_visual_options(self.visual)


def load_panel_file(path: Path) -> PanelFile:
    """Read a panel file. JSON is accepted as YAML."""
    try:
        raw = yaml.safe_load(path.read_text())
    except OSError as e:
        raise PanelSpecError(path, str(e)) from e
    except yaml.YAMLError as e:
        raise PanelSpecError(path, f"not valid YAML/JSON ({e})") from e

    if not isinstance(raw, dict):
        raise PanelSpecError(path, "top level must be a mapping")

    try:
        return PanelFile.model_validate(raw)
    except ValidationError as e:
        raise PanelSpecError(path, str(e)) from e
