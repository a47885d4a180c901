from __future__ import annotations

import pytest
from loguru import logger

from nestegg.config import EngineConfig
from nestegg.schemas.projection import ProjectionInput


@pytest.fixture()
def scenario_inputs() -> ProjectionInput:
    """Default calculator screen: 35 years old, 30k saved, 500 + 200 a month."""
    return ProjectionInput(
        current_age=35,
        retirement_age=67,
        current_savings=30000,
        monthly_contribution=500,
        secondary_monthly_contribution=200,
        annual_return_rate_percent=7,
        annual_retirement_budget=40000,
        other_retirement_income=0,
        withdrawal_rate_percent=4,
    )


@pytest.fixture()
def config() -> EngineConfig:
    return EngineConfig()


@pytest.fixture()
def log_messages():
    """Capture nestegg log records for the duration of a test."""
    messages = []
    logger.enable("nestegg")
    handler_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("nestegg")
