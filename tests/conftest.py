"""Pytest configuration and fixtures for the chart engine tests."""

import pytest
from whenever import Instant

from panel_core.models import QueryResult, TimeSeries, TimeSeriesData

START = Instant.parse_iso("2024-05-01T12:00:00Z")
START_MS = START.timestamp(unit="millisecond")
STEP_MS = 15_000


def make_data(
    *,
    start_ms: int = START_MS,
    step_ms: int = STEP_MS,
    points: int = 5,
    series: dict[str, list[float | None]] | None = None,
) -> TimeSeriesData:
    """TimeSeriesData whose range covers `points` steps starting at `start_ms`."""
    if series is None:
        series = {"up": [float(i) for i in range(points)]}
    end_ms = start_ms + step_ms * (points - 1)
    return TimeSeriesData(
        time_range={
            "start": Instant.from_timestamp(start_ms, unit="millisecond"),
            "end": Instant.from_timestamp(end_ms, unit="millisecond"),
        },
        step_ms=step_ms,
        series=[
            TimeSeries(
                name=name,
                values=[(start_ms + i * step_ms, v) for i, v in enumerate(values)],
            )
            for name, values in series.items()
        ],
    )


@pytest.fixture
def loaded_query():
    """Factory for a finished query with data."""

    def _make(**kwargs) -> QueryResult:
        return QueryResult(is_loading=False, data=make_data(**kwargs))

    return _make


@pytest.fixture
def loading_query() -> QueryResult:
    return QueryResult(is_loading=True)


@pytest.fixture
def sample_panel() -> dict:
    """Raw panel file contents as an author would write them."""
    return {
        "queries": [
            {
                "is_loading": False,
                "data": {
                    "time_range": {
                        "start": "2024-05-01T12:00:00Z",
                        "end": "2024-05-01T12:01:00Z",
                    },
                    "step_ms": 15000,
                    "series": [
                        {
                            "name": "node_cpu",
                            "formatted_name": "cpu {instance=a}",
                            "values": [
                                [START_MS, 10.0],
                                [START_MS + 15000, 40.0],
                                [START_MS + 30000, None],
                                [START_MS + 45000, 80.0],
                                [START_MS + 60000, 20.0],
                            ],
                        }
                    ],
                },
            },
            {"is_loading": True},
        ],
        "visual": {"line_width": 2, "show_points": "Always", "stack": "All"},
        "y_axis": {"show": True},
        "thresholds": {"mode": "percent", "steps": [{"value": 50, "color": "#FFAA00"}]},
    }
