"""Unit tests for percent threshold conversion and threshold line building."""

import pytest

from timeseries_chart.defaults import DEFAULT_THRESHOLD_COLOR
from timeseries_chart.models import (
    SeriesDescriptor,
    StepOptions,
    ThresholdOptions,
    VisualOptions,
    YAxisOptions,
)
from timeseries_chart.series import get_line_series
from timeseries_chart.thresholds import (
    build_threshold_series,
    convert_percent_threshold,
    find_max,
)


def _series(*values: float | None) -> SeriesDescriptor:
    return get_line_series("s", [(i, v) for i, v in enumerate(values)], VisualOptions())


class TestFindMax:
    def test_largest_across_series(self):
        assert find_max([_series(1, 5, 3), _series(2, 9)]) == 9

    def test_ignores_gaps_and_nan(self):
        assert find_max([_series(None, 4, float("nan"), None)]) == 4

    def test_empty_is_zero(self):
        assert find_max([]) == 0
        assert find_max([_series()]) == 0

    def test_all_negative_is_zero(self):
        assert find_max([_series(-3, -1)]) == 0


class TestConvertPercentThreshold:
    def test_defaults_to_observed_max_and_zero_min(self):
        assert convert_percent_threshold(50, [_series(1, 5, 3)]) == 2.5

    def test_explicit_bounds(self):
        assert convert_percent_threshold(80, [_series(1, 5, 3)], 100, 0) == pytest.approx(80)

    def test_explicit_min_only(self):
        assert convert_percent_threshold(50, [_series(0, 10)], None, 4) == 7

    def test_empty_data_collapses_to_min(self):
        assert convert_percent_threshold(75, []) == 0
        assert convert_percent_threshold(75, [_series(None, None)], min=-5) == pytest.approx(
            -1.25
        )

    def test_zero_and_full_percent(self):
        data = [_series(2, 8)]
        assert convert_percent_threshold(0, data, min=1) == 1
        assert convert_percent_threshold(100, data, min=1) == 8


class TestBuildThresholdSeries:
    AXIS = [0, 1000, 2000]

    def test_no_thresholds(self):
        assert build_threshold_series(None, self.AXIS, []) == []
        assert build_threshold_series(ThresholdOptions(), self.AXIS, []) == []

    def test_absolute_steps_span_axis(self):
        options = ThresholdOptions(steps=[StepOptions(value=80), StepOptions(value=95)])
        lines = build_threshold_series(options, self.AXIS, [])
        assert [line.name for line in lines] == ["Threshold 1", "Threshold 2"]
        assert list(lines[0].data) == [(0, 80), (1000, 80), (2000, 80)]
        assert list(lines[1].data) == [(0, 95), (1000, 95), (2000, 95)]

    def test_percent_steps_use_observed_max(self):
        options = ThresholdOptions(mode="percent", steps=[StepOptions(value=50)])
        lines = build_threshold_series(options, self.AXIS, [_series(1, 40, 3)])
        assert lines[0].values() == [20, 20, 20]

    def test_percent_steps_use_y_axis_bounds(self):
        options = ThresholdOptions(mode="percent", steps=[StepOptions(value=25)])
        lines = build_threshold_series(
            options, self.AXIS, [_series(1, 40, 3)], YAxisOptions(min=100, max=200)
        )
        assert lines[0].values() == [125, 125, 125]

    def test_color_fallbacks(self):
        options = ThresholdOptions(
            steps=[StepOptions(value=1, color="#111111"), StepOptions(value=2)]
        )
        lines = build_threshold_series(options, self.AXIS, [])
        assert lines[0].color == "#111111"
        assert lines[1].color == DEFAULT_THRESHOLD_COLOR

        options = options.model_copy(update={"default_color": "#222222"})
        lines = build_threshold_series(options, self.AXIS, [])
        assert lines[1].color == "#222222"

    def test_named_step(self):
        options = ThresholdOptions(steps=[StepOptions(value=1, name="SLO")])
        assert build_threshold_series(options, self.AXIS, [])[0].name == "SLO"
