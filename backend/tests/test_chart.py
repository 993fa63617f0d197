from __future__ import annotations

from core.chart import build_chart_series, filter_data_points, format_month_label
from core.projection import TrajectoryPoint, project


def test_month_labels():
    assert format_month_label(0) == "0m"
    assert format_month_label(5) == "5m"
    assert format_month_label(24) == "2a"
    assert format_month_label(27) == "2a 3m"


def test_short_series_is_untouched():
    points = list(range(5))
    assert filter_data_points(points, 12) == points


def test_downsampling_keeps_first_and_last():
    assert filter_data_points(list(range(25)), 12) == [0, 3, 6, 9, 12, 15, 18, 21, 24]
    assert filter_data_points(list(range(26)), 12) == [0, 3, 6, 9, 12, 15, 18, 21, 24, 25]


def test_chart_series_does_not_touch_engine_output():
    result = project(0, 1000, 1_000_000, 1, 0, 0)
    before = list(result.trajectory)

    chart = build_chart_series(result.trajectory, 12)

    assert result.trajectory == before
    assert len(chart) < len(result.trajectory)
    assert chart[-1].month == result.trajectory[-1].month


def test_chart_series_sorts_by_month():
    shuffled = [
        TrajectoryPoint(month=2, patrimony=2.0, adjustedTarget=10.0),
        TrajectoryPoint(month=0, patrimony=0.0, adjustedTarget=10.0),
        TrajectoryPoint(month=1, patrimony=1.0, adjustedTarget=10.0),
    ]

    chart = build_chart_series(shuffled, 12)

    assert [p.month for p in chart] == [0, 1, 2]
    assert [p.label for p in chart] == ["0m", "1m", "2m"]
