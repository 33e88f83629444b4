"""Financial projection helpers: loans, debts, cash flow, trends and savings."""

from analytics.amortization import (
    INSUFFICIENT_PAYMENT_ERROR,
    calculate_credit_card_payoff,
    calculate_monthly_payment,
    calculate_with_extra_payments,
    generate_schedule,
    monthly_rate,
    schedule_for_terms,
    schedule_to_frame,
)
from analytics.debt_payoff import calculate_debt_payoff, compare_debt_strategies, order_debts
from analytics.forecasting import (
    forecast_cash_flow,
    forecast_to_frame,
    project_balance,
    recurring_amount_for_month,
)
from analytics.periods import add_months, months_between
from analytics.savings import NON_POSITIVE_CONTRIBUTION_ERROR, calculate_savings_goal
from analytics.trends import analyze_spending_trends, calculate_trend, classify_trend, transactions_to_frame

__all__ = [
    "INSUFFICIENT_PAYMENT_ERROR",
    "NON_POSITIVE_CONTRIBUTION_ERROR",
    "monthly_rate",
    "calculate_monthly_payment",
    "generate_schedule",
    "schedule_for_terms",
    "calculate_with_extra_payments",
    "calculate_credit_card_payoff",
    "schedule_to_frame",
    "order_debts",
    "calculate_debt_payoff",
    "compare_debt_strategies",
    "recurring_amount_for_month",
    "forecast_cash_flow",
    "project_balance",
    "forecast_to_frame",
    "add_months",
    "months_between",
    "calculate_trend",
    "classify_trend",
    "transactions_to_frame",
    "analyze_spending_trends",
    "calculate_savings_goal",
]
