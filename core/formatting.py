"""Formatting helpers for dashboard insight sentences."""

from __future__ import annotations

from typing import Optional

from config import get_settings
from core.models import DebtStrategyComparison, ForecastMonth, SpendingTrends, TrendDirection

__all__ = ["build_insights", "format_payoff_duration", "format_trend"]


def format_trend(direction: TrendDirection, percentage: float) -> str:
    if direction == "stable":
        return "flat month over month"

    sign = "+" if percentage >= 0 else ""
    return f"{sign}{percentage:.1f}% per month"


def format_payoff_duration(months: Optional[int]) -> str:
    if months is None:
        limit = get_settings().max_payoff_months
        if limit % 12:
            return f"not within {limit} months"
        return f"not within {limit // 12} years"
    years, remainder = divmod(months, 12)
    if years and remainder:
        return f"{years} yr {remainder} mo"
    if years:
        return f"{years} yr"
    return f"{remainder} mo"


def build_insights(
    *,
    total_balance: float,
    monthly_cash_flow: float,
    forecast: list[ForecastMonth],
    trends: SpendingTrends,
    debt_strategies: Optional[DebtStrategyComparison],
) -> list[str]:
    insights: list[str] = []

    flow_word = "surplus" if monthly_cash_flow >= 0 else "shortfall"
    insights.append(
        (
            f"Balances total <strong>${total_balance:,.0f}</strong> with a recurring "
            f"{flow_word} of ${abs(monthly_cash_flow):,.0f} per month."
        )
    )

    if forecast:
        horizon = forecast[-1]
        insights.append(
            (
                f"Projected balance by {horizon['month_name']}: "
                f"<strong>${horizon['projected_balance']:,.0f}</strong>."
            )
        )

    if trends["monthly_totals"]:
        insights.append(
            (
                f"Average spending is ${trends['avg_monthly_expense']:,.0f} a month, "
                f"{format_trend(trends['expense_trend'], trends['trend_percentage'])}."
            )
        )

    if debt_strategies is not None:
        best = debt_strategies.avalanche if debt_strategies.recommendation == "avalanche" else debt_strategies.snowball
        boosted = (
            debt_strategies.avalanche_extra
            if debt_strategies.recommendation == "avalanche"
            else debt_strategies.snowball_extra
        )
        insights.append(
            (
                f"The <strong>{debt_strategies.recommendation}</strong> method clears all debt in "
                f"{format_payoff_duration(None if best.hit_cap else best.total_months)}; adding "
                f"${debt_strategies.extra_payment:,.0f}/month shortens that to "
                f"{format_payoff_duration(None if boosted.hit_cap else boosted.total_months)}."
            )
        )

    return insights
