"""Presentation helpers that turn an engine trajectory into chart points."""

from __future__ import annotations

from math import ceil
from typing import List, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict

from core.projection import TrajectoryPoint

T = TypeVar("T")


class ChartPoint(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="null")

    month: int
    label: str
    patrimony: float
    adjustedTarget: float


def format_month_label(month: int) -> str:
    """0 -> "0m", 5 -> "5m", 24 -> "2a", 27 -> "2a 3m"."""
    if month == 0:
        return "0m"

    years, remaining = divmod(month, 12)
    if years == 0:
        return f"{remaining}m"
    if remaining == 0:
        return f"{years}a"
    return f"{years}a {remaining}m"


def filter_data_points(points: Sequence[T], max_points: int) -> List[T]:
    """
    Keep every ceil(len/max_points)-th point, always including the first and
    last one. Short sequences come back as a copy.
    """
    if len(points) <= max_points:
        return list(points)

    step = ceil(len(points) / max_points)
    last = len(points) - 1
    return [point for i, point in enumerate(points) if i == 0 or i == last or i % step == 0]


def build_chart_series(trajectory: Sequence[TrajectoryPoint], max_points: int) -> List[ChartPoint]:
    ordered = sorted(trajectory, key=lambda p: p.month)
    labelled = [
        ChartPoint(
            month=p.month,
            label=format_month_label(p.month),
            patrimony=p.patrimony,
            adjustedTarget=p.adjustedTarget,
        )
        for p in ordered
    ]
    return filter_data_points(labelled, max_points)
