"""Unit tests for assembling panel data from running queries."""

import logging

from panel_core.models import QueryResult
from timeseries_chart.defaults import DEFAULT_PALETTE, ChartDefaults
from timeseries_chart.models import (
    DynamicMinRule,
    StepOptions,
    ThresholdOptions,
    VisualOptions,
    YAxisOptions,
)
from timeseries_chart.panel import EMPTY_PANEL_DATA, build_panel_data

from .conftest import START_MS, STEP_MS, make_data


class TestNothingToRender:
    def test_all_loading(self, loading_query):
        data = build_panel_data([loading_query])
        assert data.is_empty
        assert data.time_series == ()
        assert data.x_axis == ()
        assert isinstance(data.y_axis.min, DynamicMinRule)

    def test_empty_constant_untouched(self, loading_query):
        build_panel_data([loading_query], y_axis=YAxisOptions(min=3))
        assert EMPTY_PANEL_DATA.y_axis is None


class TestBuildPanelData:
    def test_series_per_loaded_query_series(self, loaded_query, loading_query):
        query = loaded_query(series={"a": [1, 2, 3], "b": [4, None, 6]}, points=3)
        data = build_panel_data([query, loading_query])

        assert not data.is_empty
        assert data.x_axis == (START_MS, START_MS + STEP_MS, START_MS + 2 * STEP_MS)
        assert [s.name for s in data.time_series] == ["a", "b"]
        assert data.time_series[1].values() == [4, None, 6]
        assert [item.label for item in data.legend_items] == ["a", "b"]

    def test_palette_colors_cycle(self, loaded_query):
        names = {f"s{i}": [1.0] for i in range(len(DEFAULT_PALETTE) + 1)}
        data = build_panel_data([loaded_query(series=names, points=1)])
        colors = [s.color for s in data.time_series]
        assert colors[: len(DEFAULT_PALETTE)] == list(DEFAULT_PALETTE)
        assert colors[-1] == DEFAULT_PALETTE[0]
        assert [item.color for item in data.legend_items] == colors

    def test_empty_palette_leaves_color_unset(self, loaded_query):
        data = build_panel_data([loaded_query()], defaults=ChartDefaults(palette=()))
        assert data.time_series[0].color is None

    def test_queries_aligned_onto_common_axis(self):
        fast = QueryResult(data=make_data(step_ms=5_000, points=4, series={"fast": [1, 2, 3, 4]}))
        slow = QueryResult(data=make_data(step_ms=15_000, points=2, series={"slow": [10, 20]}))
        data = build_panel_data([fast, slow])

        assert data.time_scale.step_ms == 5_000
        assert len(data.x_axis) == 4
        for series in data.time_series:
            assert len(series.data) == len(data.x_axis)
        slow_series = data.time_series[1]
        assert slow_series.values() == [10, None, None, 20]

    def test_formatted_name_preferred(self, sample_panel):
        query = QueryResult.model_validate(sample_panel["queries"][0])
        data = build_panel_data([query])
        assert data.time_series[0].name == "cpu {instance=a}"

    def test_visual_options_applied_to_every_series(self, loaded_query):
        query = loaded_query(series={"a": [1, 2], "b": [3, 4]}, points=2)
        data = build_panel_data([query], VisualOptions(stack="All", line_width=3))
        assert all(s.stack == "All" for s in data.time_series)
        assert all(s.line_style.width == 3 for s in data.time_series)

    def test_thresholds_follow_series(self, loaded_query):
        query = loaded_query(series={"a": [10, 50, 30]}, points=3)
        thresholds = ThresholdOptions(mode="percent", steps=[StepOptions(value=50)])
        data = build_panel_data([query], thresholds=thresholds)

        assert [s.name for s in data.time_series] == ["a", "Threshold 1"]
        assert data.time_series[1].values() == [25, 25, 25]
        assert len(data.legend_items) == 1

    def test_y_axis_passed_through(self, loaded_query):
        data = build_panel_data([loaded_query()], y_axis=YAxisOptions(min=0, max=10, show=False))
        assert data.y_axis.min == 0
        assert data.y_axis.max == 10
        assert data.y_axis.show is False

    def test_time_scale_dumps_camel_case(self, loaded_query):
        dumped = build_panel_data([loaded_query(points=2)]).model_dump(by_alias=True)
        assert dumped["timeScale"] == {
            "startMs": START_MS,
            "endMs": START_MS + STEP_MS,
            "stepMs": STEP_MS,
        }


class TestLongTimeAxis:
    def test_warns_above_limit(self, loaded_query, caplog):
        defaults = ChartDefaults(time_axis_warning_points=3)
        with caplog.at_level(logging.WARNING, logger="timeseries_chart.panel"):
            data = build_panel_data([loaded_query(points=5)], defaults=defaults)
        assert len(data.x_axis) == 5
        assert "5 timestamps" in caplog.text

    def test_quiet_at_default_limit(self, loaded_query, caplog):
        with caplog.at_level(logging.WARNING, logger="timeseries_chart.panel"):
            build_panel_data([loaded_query(points=5)])
        assert caplog.text == ""

    def test_coprime_steps_shrink_step_to_one_ms(self, caplog):
        coarse = QueryResult(data=make_data(step_ms=60_000, points=2))
        odd = QueryResult(data=make_data(step_ms=7, points=2))
        defaults = ChartDefaults(time_axis_warning_points=1_000)
        with caplog.at_level(logging.WARNING, logger="timeseries_chart.panel"):
            data = build_panel_data([coarse, odd], defaults=defaults)
        assert data.time_scale.step_ms == 1
        assert "above the limit of 1000" in caplog.text
