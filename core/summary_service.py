"""Core logic for assembling the finance dashboard summary."""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from analytics.debt_payoff import compare_debt_strategies
from analytics.forecasting import forecast_cash_flow
from analytics.trends import analyze_spending_trends
from core.formatting import build_insights
from core.models import Account, Debt, FinancialSummary, RecurringItem, Transaction

__all__ = ["monthly_recurring_total", "prepare_financial_summary"]


def monthly_recurring_total(recurring_items: Sequence[RecurringItem], item_type: str) -> float:
    """Sum of active monthly items of one type, as shown on the dashboard."""

    return float(
        sum(
            item.amount
            for item in recurring_items
            if item.is_active and item.frequency == "monthly" and item.type == item_type
        )
    )


def prepare_financial_summary(
    accounts: Sequence[Account],
    debts: Sequence[Debt],
    recurring_items: Sequence[RecurringItem],
    transactions: Sequence[Transaction],
    today: Optional[date] = None,
) -> FinancialSummary:
    today = today or date.today()

    total_balance = float(sum(account.balance for account in accounts))
    total_debt = float(sum(debt.current_balance for debt in debts))
    monthly_income = monthly_recurring_total(recurring_items, "income")
    monthly_expenses = monthly_recurring_total(recurring_items, "expense")
    monthly_cash_flow = monthly_income - monthly_expenses

    forecast = forecast_cash_flow(accounts, recurring_items, today=today)
    trends = analyze_spending_trends(transactions, today=today)
    debt_strategies = compare_debt_strategies(debts)

    insights = build_insights(
        total_balance=total_balance,
        monthly_cash_flow=monthly_cash_flow,
        forecast=forecast,
        trends=trends,
        debt_strategies=debt_strategies,
    )

    return {
        "total_balance": total_balance,
        "total_debt": total_debt,
        "net_worth": total_balance - total_debt,
        "monthly_income": monthly_income,
        "monthly_expenses": monthly_expenses,
        "monthly_cash_flow": monthly_cash_flow,
        "forecast": forecast,
        "spending_trends": trends,
        "debt_strategies": debt_strategies,
        "insights": insights,
    }
