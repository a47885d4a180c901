"""Bisection search for the monthly contribution that reaches a savings target."""

from __future__ import annotations

import math
from typing import Optional

from loguru import logger

from nestegg.config import DEFAULT_CONFIG, EngineConfig
from nestegg.core.future_value import future_value
from nestegg.schemas.projection import ContributionSolution


def _bisect_contribution(
    current_savings: float,
    annual_rate_percent: float,
    total_months: int,
    required_nest_egg: float,
    initial_guess: float,
    config: EngineConfig,
) -> float:
    low = config.search_low
    high = config.search_high
    # first probe at the caller's guess, plain midpoints afterwards
    guess = min(max(initial_guess, low), high)

    for _ in range(config.search_iterations):
        final_val = future_value(current_savings, guess, annual_rate_percent, total_months)
        if final_val > required_nest_egg:
            high = guess
        else:
            low = guess
        guess = (low + high) / 2

    return guess


def solve_target_contribution(
    current_savings: float,
    annual_rate_percent: float,
    total_months: int,
    required_nest_egg: float,
    initial_guess: float = 0.0,
    config: Optional[EngineConfig] = None,
) -> ContributionSolution:
    """
    Find the monthly contribution whose future value lands on required_nest_egg.

    A negative answer means the current plan already overshoots the target.
    When the target sits outside [search_low, search_high] the search ends
    next to a bracket edge; bracket_exceeded reports that instead of raising.
    """
    config = config or DEFAULT_CONFIG

    guess = _bisect_contribution(
        current_savings,
        annual_rate_percent,
        total_months,
        required_nest_egg,
        initial_guess,
        config,
    )
    contribution = math.floor(guess)
    projected = future_value(current_savings, contribution, annual_rate_percent, total_months)

    reachable_low = future_value(current_savings, config.search_low, annual_rate_percent, total_months)
    reachable_high = future_value(current_savings, config.search_high, annual_rate_percent, total_months)
    bracket_exceeded = not (reachable_low <= required_nest_egg <= reachable_high)

    if bracket_exceeded:
        logger.warning(
            f"Target {required_nest_egg:,.0f} is outside the reachable range "
            f"[{reachable_low:,.0f}, {reachable_high:,.0f}]; returning {contribution}/month"
        )
    else:
        logger.debug(f"Target contribution {contribution}/month projects to {projected:,.0f}")

    return ContributionSolution(
        contribution=contribution,
        projected_balance=projected,
        bracket_exceeded=bracket_exceeded,
    )


def target_contribution(
    current_savings: float,
    annual_rate_percent: float,
    total_months: int,
    required_nest_egg: float,
    initial_guess: float = 0.0,
    config: Optional[EngineConfig] = None,
) -> int:
    """Floored monthly contribution that reaches required_nest_egg."""
    return solve_target_contribution(
        current_savings,
        annual_rate_percent,
        total_months,
        required_nest_egg,
        initial_guess=initial_guess,
        config=config,
    ).contribution
