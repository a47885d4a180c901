"""Display-only curves that extend a balance series past retirement."""

from __future__ import annotations

from typing import Callable, Optional, Union

from nestegg.constants import DECAY_CURVE_NAMES, DECAY_DAMPING, DECAY_EXPONENT

# (years_past_retirement, horizon_years) -> fraction of the retirement balance still shown
DecayCurve = Callable[[int, int], float]


class UnknownDecayCurveError(ValueError):
    def __init__(self, name: str):
        super().__init__(f"unknown decay curve '{name}', expected one of {', '.join(DECAY_CURVE_NAMES)}")
        self.name = name


def power_decay(exponent: float = DECAY_EXPONENT, damping: float = DECAY_DAMPING) -> DecayCurve:
    """Slow early decline that steepens toward the horizon."""

    def curve(years_past: int, horizon_years: int) -> float:
        if horizon_years <= 0:
            return 1.0
        return 1 - damping * (years_past / horizon_years) ** exponent

    return curve


def linear_decay(years_past: int, horizon_years: int) -> float:
    if horizon_years <= 0:
        return 1.0
    return 1 - years_past / horizon_years


def flat_decay(years_past: int, horizon_years: int) -> float:
    return 1.0


def get_decay_curve(
    name: str,
    exponent: float = DECAY_EXPONENT,
    damping: float = DECAY_DAMPING,
) -> DecayCurve:
    """Look up a named curve; only 'power' takes the shape parameters."""
    if name == "power":
        return power_decay(exponent, damping)
    if name == "linear":
        return linear_decay
    if name == "flat":
        return flat_decay
    raise UnknownDecayCurveError(name)


def resolve_decay_curve(
    curve: Optional[Union[str, DecayCurve]],
    default_name: str = "power",
    exponent: float = DECAY_EXPONENT,
    damping: float = DECAY_DAMPING,
) -> DecayCurve:
    if curve is None:
        return get_decay_curve(default_name, exponent, damping)
    if isinstance(curve, str):
        return get_decay_curve(curve, exponent, damping)
    return curve
