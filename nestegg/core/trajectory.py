"""Year-by-year balance series for the savings chart."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Union

from nestegg.config import DEFAULT_CONFIG, EngineConfig
from nestegg.constants import MONTHS_PER_YEAR
from nestegg.core.decay import DecayCurve, resolve_decay_curve
from nestegg.core.future_value import compound_month, monthly_rate
from nestegg.schemas.projection import BalanceSnapshot, TrajectoryPoint


def simulate_balances(
    current_age: int,
    current_savings: float,
    own_contribution: float,
    secondary_contribution: float,
    annual_rate_percent: float,
    retirement_age: int,
) -> List[BalanceSnapshot]:
    """
    Full-precision balances at the start of each age, current_age..retirement_age.

    The secondary stream starts from zero. Between two ages both streams get
    twelve compound_month steps, the same step future_value uses, so the last
    snapshot equals future_value over the whole period.
    """
    years = max(0, retirement_age - current_age)
    rate = monthly_rate(annual_rate_percent)

    own = float(current_savings)
    secondary = 0.0
    snapshots: List[BalanceSnapshot] = []

    for offset in range(years + 1):
        snapshots.append(BalanceSnapshot(age=current_age + offset, own_balance=own, secondary_balance=secondary))

        if offset < years:
            for _ in range(MONTHS_PER_YEAR):
                own = compound_month(own, rate, own_contribution)
                secondary = compound_month(secondary, rate, secondary_contribution)

    return snapshots


def format_trajectory(snapshots: Sequence[BalanceSnapshot], goal: float) -> List[TrajectoryPoint]:
    """Floor the balances for display and attach the constant goal line."""
    return [
        TrajectoryPoint(
            age=snapshot.age,
            own_balance=math.floor(snapshot.own_balance),
            secondary_balance=math.floor(snapshot.secondary_balance),
            goal=goal,
        )
        for snapshot in snapshots
    ]


def trajectory(
    current_age: int,
    current_savings: float,
    own_contribution: float,
    secondary_contribution: float,
    annual_rate_percent: float,
    retirement_age: int,
    required_nest_egg: float,
) -> List[TrajectoryPoint]:
    """Chart rows from current_age to retirement_age inclusive (at least one)."""
    snapshots = simulate_balances(
        current_age,
        current_savings,
        own_contribution,
        secondary_contribution,
        annual_rate_percent,
        retirement_age,
    )
    return format_trajectory(snapshots, required_nest_egg)


def _decayed_point(last: TrajectoryPoint, age: int, horizon_years: int, curve: DecayCurve) -> TrajectoryPoint:
    years_past = min(age - last.age, horizon_years) if horizon_years > 0 else 0
    fraction = curve(years_past, horizon_years)
    return TrajectoryPoint(
        age=age,
        own_balance=max(0, math.floor(last.own_balance * fraction)),
        secondary_balance=max(0, math.floor(last.secondary_balance * fraction)),
        goal=last.goal,
    )


def _decay_settings(
    max_age: Optional[int],
    curve: Optional[Union[str, DecayCurve]],
    config: Optional[EngineConfig],
) -> tuple[int, DecayCurve]:
    config = config or DEFAULT_CONFIG
    resolved = resolve_decay_curve(
        curve,
        default_name=config.decay_curve,
        exponent=config.decay_exponent,
        damping=config.decay_damping,
    )
    return (config.max_age if max_age is None else max_age), resolved


def extend_trajectory(
    points: Sequence[TrajectoryPoint],
    max_age: Optional[int] = None,
    curve: Optional[Union[str, DecayCurve]] = None,
    config: Optional[EngineConfig] = None,
) -> List[TrajectoryPoint]:
    """
    Append illustrative post-retirement rows up to max_age.

    The last point is taken as the retirement balance and scaled down by the
    decay curve. Purely for display: no withdrawal or growth is modelled.
    """
    if not points:
        return []

    horizon_age, resolved = _decay_settings(max_age, curve, config)
    last = points[-1]
    horizon_years = horizon_age - last.age

    extended = list(points)
    for age in range(last.age + 1, horizon_age + 1):
        extended.append(_decayed_point(last, age, horizon_years, resolved))
    return extended


def point_at_age(
    points: Sequence[TrajectoryPoint],
    age: int,
    max_age: Optional[int] = None,
    curve: Optional[Union[str, DecayCurve]] = None,
    config: Optional[EngineConfig] = None,
) -> Optional[TrajectoryPoint]:
    """
    Tooltip lookup: the recorded row for age, or a decayed row past retirement.

    Ages past the horizon hold the horizon value. Returns None only for ages
    before the series starts.
    """
    for point in points:
        if point.age == age:
            return point

    if not points or age < points[-1].age:
        return None

    horizon_age, resolved = _decay_settings(max_age, curve, config)
    last = points[-1]
    return _decayed_point(last, age, horizon_age - last.age, resolved)
