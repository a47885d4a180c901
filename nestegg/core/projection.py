"""Compose the projection operations into the full summary for one set of inputs."""

from __future__ import annotations

import math
from typing import Optional, Union

from loguru import logger

from nestegg.config import DEFAULT_CONFIG, EngineConfig
from nestegg.core.decay import DecayCurve
from nestegg.core.future_value import future_value
from nestegg.core.nest_egg import annual_retirement_income, required_nest_egg
from nestegg.core.runout import project_runout
from nestegg.core.solver import solve_target_contribution
from nestegg.core.trajectory import extend_trajectory, trajectory
from nestegg.schemas.projection import ProjectionInput, ProjectionSummary


def project_plan(
    inputs: ProjectionInput,
    config: Optional[EngineConfig] = None,
    decay_curve: Optional[Union[str, DecayCurve]] = None,
) -> ProjectionSummary:
    """
    Derive every displayed number for one plan.

    Order of evaluation:
      1) Future value of the own stream (from current savings) and the
         secondary stream (from zero).
      2) Required nest egg from the net annual need and withdrawal rate.
      3) Runout age for the current plan.
      4) Target own contribution, seeded with the current one, and the
         runout age it would give.
      5) Chart trajectory, extended to the horizon age for display.
    """
    config = config or DEFAULT_CONFIG
    if inputs.retirement_age > config.max_age:
        raise ValueError(
            f"retirement_age {inputs.retirement_age} must not exceed the horizon age {config.max_age}"
        )
    rate = inputs.annual_return_rate_percent
    months = inputs.total_months_until_retirement

    own_fv = future_value(inputs.current_savings, inputs.monthly_contribution, rate, months)
    secondary_fv = future_value(0.0, inputs.secondary_monthly_contribution, rate, months)
    total_fv = own_fv + secondary_fv

    nest_egg = required_nest_egg(
        inputs.annual_retirement_budget,
        inputs.other_retirement_income,
        inputs.withdrawal_rate_percent,
        years_in_retirement=config.years_in_retirement if config.multiply_nest_egg_by_years else None,
    )
    income = annual_retirement_income(total_fv, inputs.withdrawal_rate_percent)
    # halves round up for display
    share = math.floor(secondary_fv / total_fv * 100 + 0.5) if total_fv > 0 else 0

    current_runout = project_runout(
        own_fv,
        secondary_fv,
        rate,
        inputs.net_annual_need,
        retirement_age=inputs.retirement_age,
        config=config,
    )

    solution = solve_target_contribution(
        inputs.current_savings,
        rate,
        months,
        nest_egg,
        initial_guess=inputs.monthly_contribution,
        config=config,
    )
    target_own_fv = future_value(inputs.current_savings, solution.contribution, rate, months)
    target_runout = project_runout(
        target_own_fv,
        secondary_fv,
        rate,
        inputs.net_annual_need,
        retirement_age=inputs.retirement_age,
        config=config,
    )

    points = trajectory(
        inputs.current_age,
        inputs.current_savings,
        inputs.monthly_contribution,
        inputs.secondary_monthly_contribution,
        rate,
        inputs.retirement_age,
        nest_egg,
    )
    extended = extend_trajectory(points, curve=decay_curve, config=config)

    logger.debug(
        f"Projected {total_fv:,.0f} against a {nest_egg:,.0f} goal "
        f"({'on track' if total_fv >= nest_egg else 'short'}); "
        f"target contribution {solution.contribution}/month"
    )

    return ProjectionSummary(
        own_future_value=own_fv,
        secondary_future_value=secondary_fv,
        total_future_value=total_fv,
        required_nest_egg=nest_egg,
        annual_retirement_income=income,
        on_track=total_fv >= nest_egg,
        secondary_share_percent=share,
        current_runout=current_runout,
        target_contribution=solution,
        target_own_future_value=target_own_fv,
        target_total_future_value=target_own_fv + secondary_fv,
        target_runout=target_runout,
        trajectory=points,
        extended_trajectory=extended,
    )
