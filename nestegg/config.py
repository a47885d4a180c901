"""Engine-wide assumptions: horizon ages, solver bracket and decay curve."""

from __future__ import annotations

import json
import os
from typing import Any, Dict

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from nestegg.constants import (
    DECAY_CURVE_NAMES,
    DECAY_DAMPING,
    DECAY_EXPONENT,
    DEFAULT_MAX_AGE,
    DEFAULT_RETIREMENT_AGE,
    DEFAULT_YEARS_IN_RETIREMENT,
    SOLVER_ITERATIONS,
    SOLVER_SEARCH_HIGH,
    SOLVER_SEARCH_LOW,
)


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be loaded or parsed."""


class EngineConfig(BaseModel):
    """Fixed assumptions shared by every projection run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    retirement_age: int = Field(
        DEFAULT_RETIREMENT_AGE,
        ge=0,
        description="Age at which the runout simulation starts withdrawing.",
    )
    max_age: int = Field(
        DEFAULT_MAX_AGE,
        ge=1,
        description="Last age covered by the runout simulation and chart extension.",
    )
    years_in_retirement: int = Field(
        DEFAULT_YEARS_IN_RETIREMENT,
        ge=1,
        description="Assumed retirement length for the multiplied nest-egg variant.",
    )
    multiply_nest_egg_by_years: bool = Field(
        False,
        description="Scale the required nest egg by years_in_retirement.",
    )

    search_low: float = Field(SOLVER_SEARCH_LOW, description="Lower bound of the contribution bracket.")
    search_high: float = Field(SOLVER_SEARCH_HIGH, description="Upper bound of the contribution bracket.")
    search_iterations: int = Field(SOLVER_ITERATIONS, ge=1, le=200)

    decay_curve: str = Field("power", description="Name of the post-retirement display curve.")
    decay_exponent: float = Field(DECAY_EXPONENT, gt=0)
    decay_damping: float = Field(DECAY_DAMPING, ge=0, le=1)

    @field_validator("decay_curve")
    @classmethod
    def check_decay_curve(cls, v: str) -> str:
        if v not in DECAY_CURVE_NAMES:
            raise ValueError(f"unknown decay curve '{v}', expected one of {', '.join(DECAY_CURVE_NAMES)}")
        return v

    @model_validator(mode="after")
    def ensure_validity(self) -> "EngineConfig":
        if self.max_age <= self.retirement_age:
            raise ValueError("max_age must be greater than retirement_age")
        if self.search_low >= self.search_high:
            raise ValueError("search_low must be less than search_high")
        return self

    @property
    def horizon_years(self) -> int:
        return self.max_age - self.retirement_age


DEFAULT_CONFIG = EngineConfig()


def load_config_from_json(file_path: str) -> Dict[str, Any]:
    """Loads and returns the configuration dictionary from a JSON file."""
    if not os.path.exists(file_path):
        raise ConfigurationError(f"Configuration file not found at: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Error parsing JSON file '{file_path}': {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Unexpected error reading config file '{file_path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file '{file_path}' must contain a JSON object")
    return data


def load_config(file_path: str) -> EngineConfig:
    """Read a JSON file and validate it into an EngineConfig."""
    raw = load_config_from_json(file_path)
    try:
        config = EngineConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in '{file_path}': {e}") from e

    logger.info(
        f"Loaded engine config from {file_path}: retire at {config.retirement_age}, "
        f"horizon {config.max_age}, decay '{config.decay_curve}'"
    )
    return config
