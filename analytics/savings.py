"""Savings goal projection with monthly contributions and compounding."""

from __future__ import annotations

import logging

from analytics.amortization import monthly_rate
from config import get_settings
from core.models import SavingsGoalCheckpoint, SavingsGoalResult

__all__ = ["NON_POSITIVE_CONTRIBUTION_ERROR", "calculate_savings_goal"]

logger = logging.getLogger(__name__)

NON_POSITIVE_CONTRIBUTION_ERROR = "Monthly contribution must be positive"


def calculate_savings_goal(
    target_amount: float,
    current_savings: float,
    monthly_contribution: float,
    annual_return_percent: float = 0.0,
) -> SavingsGoalResult:
    """Months of contributions needed to grow savings to ``target_amount``.

    Checkpoints are recorded every twelve months and on the month the goal is
    reached.
    """

    if monthly_contribution <= 0:
        return SavingsGoalResult(error=NON_POSITIVE_CONTRIBUTION_ERROR)

    max_months = get_settings().savings_goal_max_months
    rate = monthly_rate(annual_return_percent)
    balance = current_savings
    months = 0
    checkpoints: list[SavingsGoalCheckpoint] = []

    while balance < target_amount and months < max_months:
        months += 1
        balance += monthly_contribution + balance * rate

        if months % 12 == 0 or balance >= target_amount:
            contributed = current_savings + monthly_contribution * months
            checkpoints.append(SavingsGoalCheckpoint(months, balance, contributed, balance - contributed))

    hit_cap = balance < target_amount
    if hit_cap:
        logger.warning("Savings goal of %.2f not reached within %d months", target_amount, max_months)

    total_contributed = current_savings + monthly_contribution * months
    return SavingsGoalResult(
        months_to_goal=months,
        years_to_goal=round(months / 12, 1),
        total_contributed=total_contributed,
        total_interest=balance - total_contributed,
        final_balance=balance,
        schedule=checkpoints,
        hit_cap=hit_cap,
    )
