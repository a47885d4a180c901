"""Drawdown simulation from retirement to the horizon age."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from nestegg.config import DEFAULT_CONFIG, EngineConfig
from nestegg.constants import MONTHS_PER_YEAR
from nestegg.core.future_value import monthly_rate
from nestegg.schemas.projection import RunoutProjection, RunoutStatus


def project_runout(
    own_balance: float,
    secondary_balance: float,
    annual_rate_percent: float,
    net_annual_need: float,
    retirement_age: Optional[int] = None,
    config: Optional[EngineConfig] = None,
) -> RunoutProjection:
    """
    Simulate monthly growth then withdrawal of net_annual_need / 12.

    Every year from retirement_age through config.max_age is simulated. The
    first month whose post-withdrawal balance is <= 0 ends the run and the
    age reported is retirement_age plus the completed years before it.

    A retirement age past config.max_age leaves no horizon to simulate and
    raises ValueError.
    """
    config = config or DEFAULT_CONFIG
    start_age = config.retirement_age if retirement_age is None else retirement_age
    if start_age > config.max_age:
        raise ValueError(f"retirement age {start_age} is past the horizon age {config.max_age}")

    total = own_balance + secondary_balance
    if total <= 0:
        return RunoutProjection(status=RunoutStatus.EMPTY, final_balance=total)

    rate = monthly_rate(annual_rate_percent)
    monthly_need = net_annual_need / MONTHS_PER_YEAR

    months = 0
    for year in range(config.max_age - start_age + 1):
        for _ in range(MONTHS_PER_YEAR):
            total *= 1 + rate
            total -= monthly_need
            months += 1
            if total <= 0:
                logger.debug(f"Savings depleted at age {start_age + year} after {months} months")
                return RunoutProjection(
                    status=RunoutStatus.DEPLETED,
                    age=start_age + year,
                    months_elapsed=months,
                    final_balance=total,
                )

    logger.debug(f"Savings outlast the horizon at age {config.max_age} with {total:,.0f} remaining")
    return RunoutProjection(
        status=RunoutStatus.OUTLASTS_HORIZON,
        age=config.max_age,
        months_elapsed=months,
        final_balance=total,
    )


def runout_age(
    own_balance: float,
    secondary_balance: float,
    annual_rate_percent: float,
    net_annual_need: float,
    retirement_age: Optional[int] = None,
    config: Optional[EngineConfig] = None,
) -> Optional[int]:
    """Age at which savings run out, or None if they never do within the horizon."""
    return project_runout(
        own_balance,
        secondary_balance,
        annual_rate_percent,
        net_annual_need,
        retirement_age=retirement_age,
        config=config,
    ).runout_age
