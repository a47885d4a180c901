"""Data contracts for retirement projections."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from nestegg.constants import (
    DEFAULT_ANNUAL_RETURN_RATE_PERCENT,
    DEFAULT_RETIREMENT_AGE,
    DEFAULT_SECONDARY_MONTHLY_CONTRIBUTION,
    DEFAULT_WITHDRAWAL_RATE_PERCENT,
    MONTHS_PER_YEAR,
)


class ProjectionInput(BaseModel):
    """Raw inputs collected by the calculator screen."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    current_age: int = Field(..., ge=0)
    retirement_age: int = Field(DEFAULT_RETIREMENT_AGE, ge=0)
    current_savings: float = Field(..., ge=0, description="Balance already saved for retirement.")
    monthly_contribution: float = Field(..., ge=0, description="Own contribution added each month.")
    secondary_monthly_contribution: float = Field(
        DEFAULT_SECONDARY_MONTHLY_CONTRIBUTION,
        ge=0,
        description="Second contribution stream, tracked separately and starting from zero.",
    )
    annual_return_rate_percent: float = Field(
        DEFAULT_ANNUAL_RETURN_RATE_PERCENT,
        ge=0,
        description="Annual return in percent (7 means 7%).",
    )
    annual_retirement_budget: float = Field(..., ge=0)
    other_retirement_income: float = Field(0.0, ge=0)
    withdrawal_rate_percent: float = Field(DEFAULT_WITHDRAWAL_RATE_PERCENT, gt=0, le=100)

    @property
    def years_until_retirement(self) -> int:
        return max(0, self.retirement_age - self.current_age)

    @property
    def total_months_until_retirement(self) -> int:
        return self.years_until_retirement * MONTHS_PER_YEAR

    @property
    def net_annual_need(self) -> float:
        # may be negative when other income covers the whole budget
        return self.annual_retirement_budget - self.other_retirement_income


class BalanceSnapshot(BaseModel):
    """Full-precision balances at the start of one year of age."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    age: int
    own_balance: float
    secondary_balance: float


class TrajectoryPoint(BaseModel):
    """Single chart row: floored balances plus the savings goal."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    age: int
    own_balance: int
    secondary_balance: int
    goal: float

    @property
    def total_balance(self) -> int:
        return self.own_balance + self.secondary_balance


class RunoutStatus(str, Enum):
    EMPTY = "empty"
    DEPLETED = "depleted"
    OUTLASTS_HORIZON = "outlasts_horizon"


class RunoutProjection(BaseModel):
    """
    Outcome of the retirement drawdown simulation.

    age is the depletion age for DEPLETED, the horizon age for
    OUTLASTS_HORIZON and None for EMPTY.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: RunoutStatus
    age: Optional[int] = None
    months_elapsed: int = Field(0, ge=0)
    final_balance: float = 0.0

    @property
    def runout_age(self) -> Optional[int]:
        """Depletion age, or None when the savings never run out."""
        if self.status == RunoutStatus.DEPLETED:
            return self.age
        return None


class ContributionSolution(BaseModel):
    """Result of the contribution search."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    contribution: int
    projected_balance: float = Field(..., description="Future value at the floored contribution.")
    bracket_exceeded: bool = Field(
        False,
        description="True when the target lies outside the search bracket.",
    )


class ProjectionSummary(BaseModel):
    """Every derived number shown for one set of inputs."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    own_future_value: float
    secondary_future_value: float
    total_future_value: float

    required_nest_egg: float
    annual_retirement_income: int
    on_track: bool
    secondary_share_percent: int

    current_runout: RunoutProjection
    target_contribution: ContributionSolution
    target_own_future_value: float
    target_total_future_value: float
    target_runout: RunoutProjection

    trajectory: List[TrajectoryPoint]
    extended_trajectory: List[TrajectoryPoint]

    @property
    def current_runout_age(self) -> Optional[int]:
        return self.current_runout.runout_age

    @property
    def target_runout_age(self) -> Optional[int]:
        return self.target_runout.runout_age
