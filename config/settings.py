"""Centralised configuration handling for the PixelVault projection engine."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BALANCE_EPSILON = 0.01
DEFAULT_MAX_PAYOFF_MONTHS = 600


class Settings(BaseSettings):
    """Engine tunables sourced from ``PIXELVAULT_*`` environment variables."""

    balance_epsilon: float = Field(default=DEFAULT_BALANCE_EPSILON, gt=0)
    max_payoff_months: int = Field(default=DEFAULT_MAX_PAYOFF_MONTHS, gt=0)
    extra_payment_cap_multiplier: int = Field(default=2, gt=0)
    savings_goal_max_months: int = Field(default=DEFAULT_MAX_PAYOFF_MONTHS, gt=0)
    forecast_months: int = Field(default=12, ge=0)
    trend_window_months: int = Field(default=6, ge=0)
    projection_horizon_months: int = Field(default=24, gt=0)
    comparison_extra_payment: float = 100.0
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="PIXELVAULT_", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Load and cache engine settings."""

    return Settings()
