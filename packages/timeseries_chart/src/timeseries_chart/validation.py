"""Option parsing and strict validation.

The render path is permissive: `parse_visual_options` keeps what it can and
drops malformed fields so a bad style option never fails a render.

Authoring tools use `OptionsValidator` instead. Errors mean the options are
contradictory; warnings mean a value will be ignored or clamped at render time.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from pydantic import ValidationError

from panel_core.types import ShowPoints, StackMode, ThresholdMode
from timeseries_chart.models import (
    ThresholdOptions,
    ValidationResult,
    VisualOptions,
    YAxisOptions,
)

logger = logging.getLogger("timeseries_chart.validation")


class InvalidOptionsError(Exception):
    """Raised when strict validation finds errors."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Invalid panel options, {len(errors)} error(s): {'; '.join(errors)}")


def parse_visual_options(raw: dict[str, Any] | None) -> VisualOptions:
    """Build VisualOptions from raw config, dropping any field that fails validation."""
    if not raw:
        return VisualOptions()

    kept: dict[str, Any] = {}
    for key, value in raw.items():
        if key not in VisualOptions.model_fields:
            logger.debug("Ignoring unknown visual option %s", key)
            continue
        try:
            VisualOptions.model_validate({key: value})
        except ValidationError:
            logger.debug("Ignoring malformed visual option %s=%r", key, value)
            continue
        kept[key] = value
    return VisualOptions.model_validate(kept)


class OptionsValidator:
    """Evaluates every rule against a panel's visual, y-axis, and threshold options."""

    def evaluate(
        self,
        *,
        visual: VisualOptions | None = None,
        y_axis: YAxisOptions | None = None,
        thresholds: ThresholdOptions | None = None,
    ) -> list[ValidationResult]:
        visual = visual or VisualOptions()
        y_axis = y_axis or YAxisOptions()
        thresholds = thresholds or ThresholdOptions()

        results: list[ValidationResult] = []
        for check in (
            lambda: self._check_line_width(visual),
            lambda: self._check_point_radius(visual),
            lambda: self._check_area_opacity(visual),
            lambda: self._check_show_points(visual),
            lambda: self._check_stack(visual),
            lambda: self._check_y_axis_range(y_axis),
            lambda: self._check_percent_steps(thresholds),
        ):
            result = check()
            if result:
                results.append(result)
        return results

    def raise_for_errors(self, **options: Any) -> list[ValidationResult]:
        """Like evaluate(), but raise InvalidOptionsError if any result is an error."""
        results = self.evaluate(**options)
        errors = [r.message for r in results if r.severity == "error"]
        if errors:
            raise InvalidOptionsError(errors)
        return results

    @staticmethod
    def _check_line_width(visual: VisualOptions) -> ValidationResult | None:
        width = visual.line_width
        if width is not None and (not math.isfinite(width) or width <= 0):
            return ValidationResult(
                rule_name="line_width_positive",
                severity="error",
                message=f"line_width must be a positive number, got {width}",
                option_keys=["line_width"],
            )
        return None

    @staticmethod
    def _check_point_radius(visual: VisualOptions) -> ValidationResult | None:
        radius = visual.point_radius
        if radius is not None and (not math.isfinite(radius) or radius < 0):
            return ValidationResult(
                rule_name="point_radius_non_negative",
                severity="error",
                message=f"point_radius must be zero or greater, got {radius}",
                option_keys=["point_radius"],
            )
        return None

    @staticmethod
    def _check_area_opacity(visual: VisualOptions) -> ValidationResult | None:
        opacity = visual.area_opacity
        if opacity is not None and not (0 <= opacity <= 1):
            return ValidationResult(
                rule_name="area_opacity_range",
                severity="error",
                message=f"area_opacity must be between 0 and 1, got {opacity}",
                option_keys=["area_opacity"],
            )
        return None

    @staticmethod
    def _check_show_points(visual: VisualOptions) -> ValidationResult | None:
        allowed = [mode.value for mode in ShowPoints]
        if visual.show_points is not None and visual.show_points not in allowed:
            return ValidationResult(
                rule_name="show_points_known",
                severity="warning",
                message=(
                    f"show_points '{visual.show_points}' is not one of {allowed}; "
                    f"symbols will follow the default point-count rule"
                ),
                option_keys=["show_points"],
            )
        return None

    @staticmethod
    def _check_stack(visual: VisualOptions) -> ValidationResult | None:
        if visual.stack is not None and visual.stack != StackMode.ALL:
            return ValidationResult(
                rule_name="stack_known",
                severity="warning",
                message=f"stack '{visual.stack}' is not '{StackMode.ALL}'; series will not stack",
                option_keys=["stack"],
            )
        return None

    @staticmethod
    def _check_y_axis_range(y_axis: YAxisOptions) -> ValidationResult | None:
        if y_axis.min is not None and y_axis.max is not None and y_axis.min >= y_axis.max:
            return ValidationResult(
                rule_name="y_axis_min_below_max",
                severity="error",
                message=f"y_axis min ({y_axis.min}) must be below max ({y_axis.max})",
                option_keys=["y_axis.min", "y_axis.max"],
            )
        return None

    @staticmethod
    def _check_percent_steps(thresholds: ThresholdOptions) -> ValidationResult | None:
        if thresholds.mode != ThresholdMode.PERCENT:
            return None
        out_of_range = [s.value for s in thresholds.steps if not (0 <= s.value <= 100)]
        if out_of_range:
            return ValidationResult(
                rule_name="percent_steps_range",
                severity="warning",
                message=(
                    f"percent threshold steps {out_of_range} fall outside 0-100 and "
                    f"will be drawn outside the observed range"
                ),
                option_keys=["thresholds.steps"],
            )
        return None
