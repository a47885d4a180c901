"""Savings target derived from the retirement budget and withdrawal rate."""

from __future__ import annotations

import math
from typing import Literal, Optional

Rounding = Literal["ceil", "floor"]


def required_nest_egg(
    annual_budget: float,
    other_income: float,
    withdrawal_rate_percent: float,
    rounding: Rounding = "ceil",
    years_in_retirement: Optional[int] = None,
) -> float:
    """
    Savings needed so that withdrawal_rate_percent of it covers the net need.

    The net need is the budget not covered by other income, never below zero.
    years_in_retirement multiplies the result for the duration-based variant.
    """
    if withdrawal_rate_percent <= 0:
        raise ValueError("withdrawal_rate_percent must be positive")
    if rounding not in ("ceil", "floor"):
        raise ValueError(f"rounding must be 'ceil' or 'floor', got {rounding!r}")

    net_need = max(0.0, annual_budget - other_income)
    # scale before dividing so whole-percent rates divide exactly
    nest_egg = net_need * 100 / withdrawal_rate_percent
    nest_egg = math.ceil(nest_egg) if rounding == "ceil" else math.floor(nest_egg)

    if years_in_retirement is not None:
        nest_egg *= years_in_retirement
    return float(nest_egg)


def annual_retirement_income(total_balance: float, withdrawal_rate_percent: float) -> int:
    """Yearly income a balance supports at the given withdrawal rate."""
    return math.floor(total_balance * withdrawal_rate_percent / 100)
