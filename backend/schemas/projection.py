"""Data contracts for the patrimony projection endpoint."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from core.chart import ChartPoint
from core.currency import parse_currency, parse_percentage
from core.projection import (
    InflationModel,
    ProjectionInput,
    TerminationMode,
    TrajectoryPoint,
)

# blank strings count as "not filled in" for these; the others fall back to 0
REQUIRED_FIELDS = {"desiredPatrimony", "monthlyReturnPercent"}


def _reject_blank_required(value: str, info: ValidationInfo) -> None:
    if not value.strip() and info.field_name in REQUIRED_FIELDS:
        raise ValueError(f"{info.field_name} must not be empty")


class ProjectionRequest(BaseModel):
    """
    Form values for a projection. Money fields take numbers or pt-BR strings
    ("R$ 1.000,00"); percentage fields take numbers or "1,5"-style strings.
    """

    model_config = ConfigDict(extra="forbid")

    initialValue: float = Field(0.0, description="Initial investment amount.")
    monthlyContribution: float = Field(0.0, description="Contribution added every month.")
    desiredPatrimony: float = Field(..., description="Target patrimony amount.")
    monthlyReturnPercent: float = Field(..., description="Monthly return, 1 means 1%.")
    annualInflationPercent: float = Field(0.0, description="Annual inflation, 6 means 6%.")
    annualContributionIncreasePercent: float = Field(
        0.0, description="Yearly raise of the monthly contribution, 2 means 2%."
    )

    terminationMode: Optional[TerminationMode] = None
    inflationModel: Optional[InflationModel] = None
    shortCircuitUnreachable: Optional[bool] = None

    @field_validator("initialValue", "monthlyContribution", "desiredPatrimony", mode="before")
    @classmethod
    def _parse_money(cls, value, info: ValidationInfo):
        if isinstance(value, str):
            _reject_blank_required(value, info)
            return parse_currency(value)
        return value

    @field_validator(
        "monthlyReturnPercent",
        "annualInflationPercent",
        "annualContributionIncreasePercent",
        mode="before",
    )
    @classmethod
    def _parse_percent(cls, value, info: ValidationInfo):
        if isinstance(value, str):
            _reject_blank_required(value, info)
            return parse_percentage(value)
        return value

    def to_input(self) -> ProjectionInput:
        return ProjectionInput(
            initialValue=self.initialValue,
            monthlyContribution=self.monthlyContribution,
            desiredPatrimony=self.desiredPatrimony,
            monthlyReturnPercent=self.monthlyReturnPercent,
            annualInflationPercent=self.annualInflationPercent,
            annualContributionIncreasePercent=self.annualContributionIncreasePercent,
        )


class ProjectionResponse(BaseModel):
    """Engine result plus the display strings and downsampled chart."""

    model_config = ConfigDict(ser_json_inf_nan="null")

    years: int
    months: int
    adjustedPatrimony: float
    trajectory: List[TrajectoryPoint]

    neverReached: bool
    durationLabel: str
    adjustedPatrimonyLabel: str
    chart: List[ChartPoint]
