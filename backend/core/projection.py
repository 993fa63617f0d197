from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


MAX_MONTHS = 12 * 100  # safety cap for stop-at-target (100 years)
FIXED_HORIZON_MONTHS = 12 * 35
ADJUSTMENT_YEARS = 30

NEVER_YEARS = 999


class TerminationMode(str, Enum):
    STOP_AT_TARGET = "stop-at-target"
    FIXED_HORIZON = "fixed-horizon"


class InflationModel(str, Enum):
    LINEAR = "linear"
    GEOMETRIC = "geometric"


class ProjectionInput(BaseModel):
    """Six plain numbers; percentages are whole-number scaled (1 means 1%)."""

    initialValue: float = 0.0
    monthlyContribution: float = 0.0
    desiredPatrimony: float
    monthlyReturnPercent: float
    annualInflationPercent: float = 0.0
    annualContributionIncreasePercent: float = 0.0


class ProjectionOptions(BaseModel):
    terminationMode: TerminationMode = TerminationMode.STOP_AT_TARGET
    inflationModel: InflationModel = InflationModel.GEOMETRIC
    # skip the loop when the target can never be reached
    shortCircuitUnreachable: bool = True


class TrajectoryPoint(BaseModel):
    # overflowed runs serialize as null instead of bare Infinity/NaN
    model_config = ConfigDict(ser_json_inf_nan="null")

    month: int
    patrimony: float
    adjustedTarget: float


class ProjectionResult(BaseModel):
    years: int
    months: int
    adjustedPatrimony: float
    trajectory: List[TrajectoryPoint] = []

    @property
    def never_reached(self) -> bool:
        """True when the result carries the "never" sentinel, not a real duration."""
        return self.years == NEVER_YEARS and self.months == 0

    @property
    def total_months(self) -> Optional[int]:
        if self.never_reached:
            return None
        return self.years * 12 + self.months


def calculate_inflation_adjusted_value(
    current_value: float, annual_inflation_percent: float, years: int
) -> float:
    """Grow current_value by annual_inflation_percent for the given number of years."""
    return current_value * (1.0 + annual_inflation_percent / 100) ** years


def monthly_inflation_rate(annual_inflation_percent: float, model: InflationModel) -> float:
    """
    Convert an annual inflation percentage into a monthly decimal rate.

      LINEAR:    annual / 1200 (compounds to slightly more than the annual rate)
      GEOMETRIC: (1 + annual)^(1/12) - 1 (compounds to exactly the annual rate)
    """
    if model == InflationModel.LINEAR:
        return annual_inflation_percent / 1200
    return (1.0 + annual_inflation_percent / 100) ** (1.0 / 12) - 1.0


def project(
    initial_value: float,
    monthly_contribution: float,
    desired_patrimony: float,
    monthly_return_percent: float,
    annual_inflation_percent: float,
    annual_contribution_increase_percent: float,
    options: Optional[ProjectionOptions] = None,
) -> ProjectionResult:
    """
    Simulate monthly compounding until the termination condition and return
    the time to target plus the month-by-month trajectory.

    Order of operations (per month):
      1) Record (month, patrimony, adjustedTarget) BEFORE updating.
      2) Apply the monthly return, then add the current contribution.
      3) Advance the month counter; every 12th month grow the contribution.
      4) Erode the target forward by one month of inflation.

    After the loop a trailing point with the post-loop state is appended.
    Stop-at-target runs until the target is reached or MAX_MONTHS elapse
    (then years=999, months=0); fixed-horizon always runs FIXED_HORIZON_MONTHS.
    """
    opts = options or ProjectionOptions()

    monthly_return = monthly_return_percent / 100
    monthly_inflation = monthly_inflation_rate(annual_inflation_percent, opts.inflationModel)
    contribution_growth = annual_contribution_increase_percent / 100

    adjusted_patrimony = calculate_inflation_adjusted_value(
        desired_patrimony, annual_inflation_percent, ADJUSTMENT_YEARS
    )

    fixed_horizon = opts.terminationMode == TerminationMode.FIXED_HORIZON

    if (
        opts.shortCircuitUnreachable
        and not fixed_horizon
        and monthly_return <= 0
        and initial_value < desired_patrimony
        and monthly_contribution <= 0
    ):
        logger.debug("target %s unreachable, skipping simulation", desired_patrimony)
        return ProjectionResult(years=0, months=0, adjustedPatrimony=adjusted_patrimony, trajectory=[])

    patrimony = float(initial_value)
    contribution = float(monthly_contribution)
    adjusted_target = float(desired_patrimony)
    total_months = 0

    trajectory: List[TrajectoryPoint] = []

    def keep_going() -> bool:
        if fixed_horizon:
            return total_months < FIXED_HORIZON_MONTHS
        return patrimony < desired_patrimony and total_months < MAX_MONTHS

    while keep_going():
        trajectory.append(
            TrajectoryPoint(month=total_months, patrimony=patrimony, adjustedTarget=adjusted_target)
        )

        patrimony = patrimony * (1 + monthly_return) + contribution
        total_months += 1

        if total_months % 12 == 0:
            contribution *= 1 + contribution_growth

        adjusted_target *= 1 + monthly_inflation

    trajectory.append(
        TrajectoryPoint(month=total_months, patrimony=patrimony, adjustedTarget=adjusted_target)
    )

    logger.debug(
        "projection finished: mode=%s inflation=%s months=%d patrimony=%.2f",
        opts.terminationMode.value,
        opts.inflationModel.value,
        total_months,
        patrimony,
    )

    # reaching the target exactly on the last allowed month still counts
    if not fixed_horizon and total_months >= MAX_MONTHS and not patrimony >= desired_patrimony:
        logger.info("target %s not reached within %d months", desired_patrimony, MAX_MONTHS)
        return ProjectionResult(
            years=NEVER_YEARS, months=0, adjustedPatrimony=adjusted_patrimony, trajectory=trajectory
        )

    return ProjectionResult(
        years=total_months // 12,
        months=total_months % 12,
        adjustedPatrimony=adjusted_patrimony,
        trajectory=trajectory,
    )


def project_input(data: ProjectionInput, options: Optional[ProjectionOptions] = None) -> ProjectionResult:
    return project(
        initial_value=data.initialValue,
        monthly_contribution=data.monthlyContribution,
        desired_patrimony=data.desiredPatrimony,
        monthly_return_percent=data.monthlyReturnPercent,
        annual_inflation_percent=data.annualInflationPercent,
        annual_contribution_increase_percent=data.annualContributionIncreasePercent,
        options=options,
    )


__all__ = [
    "MAX_MONTHS",
    "FIXED_HORIZON_MONTHS",
    "ADJUSTMENT_YEARS",
    "NEVER_YEARS",
    "TerminationMode",
    "InflationModel",
    "ProjectionInput",
    "ProjectionOptions",
    "TrajectoryPoint",
    "ProjectionResult",
    "calculate_inflation_adjusted_value",
    "monthly_inflation_rate",
    "project",
    "project_input",
]
