from __future__ import annotations

import math

import pytest

from nestegg.core.future_value import future_value
from nestegg.core.trajectory import format_trajectory, simulate_balances, trajectory
from nestegg.schemas.projection import BalanceSnapshot


def default_trajectory(current_age: int = 35, retirement_age: int = 67):
    return trajectory(current_age, 30000, 500, 200, 7, retirement_age, 1_000_000)


@pytest.mark.parametrize(
    "current_age, retirement_age, expected_length",
    [(35, 67, 33), (66, 67, 2), (67, 67, 1), (70, 67, 1)],
)
def test_length_covers_both_ends(current_age, retirement_age, expected_length):
    points = default_trajectory(current_age, retirement_age)
    assert len(points) == expected_length
    assert points[0].age == current_age


def test_first_point_is_unmodified_start():
    points = default_trajectory()

    assert points[0].age == 35
    assert points[0].own_balance == 30000
    assert points[0].secondary_balance == 0
    assert points[-1].age == 67


def test_ages_step_by_one_and_goal_is_constant():
    points = default_trajectory()

    ages = [point.age for point in points]
    assert ages == list(range(35, 68))
    assert {point.goal for point in points} == {1_000_000}


def test_balances_grow_every_year():
    points = default_trajectory()
    for previous, current in zip(points, points[1:]):
        assert current.own_balance > previous.own_balance, "savings should grow every year before retirement"
        assert current.secondary_balance > previous.secondary_balance, "savings should grow every year before retirement"


def test_endpoint_matches_future_value():
    """The chart and the point-in-time calculation share one monthly step, so the last row is the future value floored."""
    points = default_trajectory()
    months = 12 * (67 - 35)

    assert points[-1].own_balance == math.floor(future_value(30000, 500, 7, months))
    assert points[-1].secondary_balance == math.floor(future_value(0, 200, 7, months))


def test_snapshots_keep_full_precision():
    snapshots = simulate_balances(35, 30000, 500, 200, 7, 67)

    assert snapshots[-1].own_balance == future_value(30000, 500, 7, 384)
    assert snapshots[-1].own_balance != math.floor(snapshots[-1].own_balance)


def test_one_year_without_growth():
    points = trajectory(30, 1000, 100, 50, 0, 31, 5000)

    assert [(p.age, p.own_balance, p.secondary_balance) for p in points] == [
        (30, 1000, 0),
        (31, 2200, 600),
    ]


def test_format_floors_display_values():
    snapshots = [BalanceSnapshot(age=40, own_balance=1234.99, secondary_balance=0.5)]

    (point,) = format_trajectory(snapshots, goal=250000)

    assert point.own_balance == 1234
    assert point.secondary_balance == 0
    assert point.goal == 250000
    assert point.total_balance == 1234
