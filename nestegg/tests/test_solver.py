from __future__ import annotations

import pytest

from nestegg.config import EngineConfig
from nestegg.core.future_value import future_value
from nestegg.core.solver import solve_target_contribution, target_contribution


@pytest.mark.parametrize("known_contribution", [-200.0, 0.0, 500.0, 1234.5, 25000.0])
@pytest.mark.parametrize("initial_guess", [-1_000_000, 0, 500, 1_000_000, 5_000_000])
def test_recovers_known_contribution(known_contribution, initial_guess):
    """Whatever the starting guess, bisection should land within one unit of the contribution that built the target."""
    target = future_value(30000, known_contribution, 7, 384)

    found = target_contribution(30000, 7, 384, target, initial_guess)

    assert abs(found - known_contribution) <= 1


def test_result_is_a_floored_int():
    found = target_contribution(30000, 7, 384, 1_000_000, 500)
    assert isinstance(found, int)
    assert future_value(30000, found, 7, 384) <= 1_000_000 <= future_value(30000, found + 1, 7, 384)


def test_zero_rate_is_linear():
    found = target_contribution(0, 0, 120, 120000, 0)
    assert abs(found - 1000) <= 1


def test_overfunded_plan_needs_negative_contribution():
    solution = solve_target_contribution(1_000_000, 7, 120, 1000, initial_guess=500)

    assert solution.contribution < 0
    assert not solution.bracket_exceeded


def test_unreachable_target_ends_at_bracket_edge():
    solution = solve_target_contribution(0, 7, 12, 1e12, initial_guess=0)

    assert solution.bracket_exceeded
    assert solution.contribution >= 999_999
    assert solution.projected_balance < 1e12


def test_zero_months_cannot_move_the_balance():
    solution = solve_target_contribution(50000, 7, 0, 1_000_000, initial_guess=500)

    assert solution.bracket_exceeded
    assert solution.projected_balance == 50000


def test_custom_bracket_limits_the_answer():
    narrow = EngineConfig(search_low=-100, search_high=100)
    target = future_value(0, 500, 0, 12)

    solution = solve_target_contribution(0, 0, 12, target, initial_guess=0, config=narrow)

    assert solution.bracket_exceeded
    assert solution.contribution == 99


def test_projected_balance_matches_contribution():
    solution = solve_target_contribution(30000, 7, 384, 1_000_000, initial_guess=500)
    assert solution.projected_balance == future_value(30000, solution.contribution, 7, 384)


def test_bracket_warning_is_logged(log_messages):
    solve_target_contribution(0, 7, 12, 1e12)
    assert any(message.startswith("WARNING|") for message in log_messages)
