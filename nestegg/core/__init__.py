"""Pure projection functions: compounding, drawdown, contribution search and chart series."""

from nestegg.core.decay import (
    DecayCurve,
    UnknownDecayCurveError,
    flat_decay,
    get_decay_curve,
    linear_decay,
    power_decay,
)
from nestegg.core.future_value import future_value, future_value_closed_form
from nestegg.core.nest_egg import annual_retirement_income, required_nest_egg
from nestegg.core.projection import project_plan
from nestegg.core.runout import project_runout, runout_age
from nestegg.core.solver import solve_target_contribution, target_contribution
from nestegg.core.trajectory import (
    extend_trajectory,
    format_trajectory,
    point_at_age,
    simulate_balances,
    trajectory,
)

__all__ = [
    "DecayCurve",
    "UnknownDecayCurveError",
    "flat_decay",
    "get_decay_curve",
    "linear_decay",
    "power_decay",
    "future_value",
    "future_value_closed_form",
    "annual_retirement_income",
    "required_nest_egg",
    "project_plan",
    "project_runout",
    "runout_age",
    "solve_target_contribution",
    "target_contribution",
    "extend_trajectory",
    "format_trajectory",
    "point_at_age",
    "simulate_balances",
    "trajectory",
]
