"""Engine configuration utilities."""

from .logging_setup import configure_logging
from .settings import DEFAULT_BALANCE_EPSILON, DEFAULT_MAX_PAYOFF_MONTHS, Settings, get_settings

__all__ = [
    "DEFAULT_BALANCE_EPSILON",
    "DEFAULT_MAX_PAYOFF_MONTHS",
    "Settings",
    "configure_logging",
    "get_settings",
]
