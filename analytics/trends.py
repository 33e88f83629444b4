"""Spending trend analysis over historical transactions."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

import numpy as np
import pandas as pd
from dateutil.relativedelta import relativedelta

from config import get_settings
from core.models import MonthlyTotals, SpendingTrends, Transaction, TrendDirection

__all__ = [
    "DEFAULT_CATEGORY",
    "calculate_trend",
    "classify_trend",
    "transactions_to_frame",
    "analyze_spending_trends",
]

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Other"
_TRANSACTION_COLUMNS = ["type", "amount", "category", "date"]


def calculate_trend(x: Sequence[float], y: Sequence[float]) -> float:
    """Ordinary least-squares slope of ``y`` against ``x``.

    Fewer than two points, or points sharing one ``x`` value, have no slope
    and return ``0.0``.
    """

    n = len(x)
    if n < 2:
        return 0.0

    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    sum_x = xs.sum()
    denominator = n * float(np.dot(xs, xs)) - sum_x**2
    if denominator == 0:
        return 0.0
    return float((n * float(np.dot(xs, ys)) - sum_x * ys.sum()) / denominator)


def classify_trend(slope: float) -> TrendDirection:
    if slope > 0:
        return "increasing"
    if slope < 0:
        return "decreasing"
    return "stable"


def transactions_to_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Flatten transaction records into a frame with parsed dates."""

    frame = pd.DataFrame(
        [
            {
                "type": txn.type,
                "amount": float(txn.amount),
                "category": txn.category or DEFAULT_CATEGORY,
                "date": txn.date,
            }
            for txn in transactions
        ],
        columns=_TRANSACTION_COLUMNS,
    )
    frame["date"] = pd.to_datetime(frame["date"])
    return frame


def _empty_trends() -> SpendingTrends:
    return {
        "category_totals": {},
        "monthly_totals": {},
        "avg_monthly_expense": 0.0,
        "avg_monthly_income": 0.0,
        "avg_monthly_savings": 0.0,
        "expense_trend": "stable",
        "trend_slope": 0.0,
        "trend_percentage": 0.0,
    }


def analyze_spending_trends(
    transactions: Iterable[Transaction],
    months: Optional[int] = None,
    today: Optional[date] = None,
) -> SpendingTrends:
    """Summarise income and spending over a trailing window of months.

    Averages divide by the number of months that actually contain
    transactions, not by the requested window length.
    """

    if months is None:
        months = get_settings().trend_window_months
    end = today or date.today()
    start = end - relativedelta(months=months)

    frame = transactions_to_frame(transactions)
    in_window = (frame["date"] >= pd.Timestamp(start)) & (frame["date"] <= pd.Timestamp(end))
    window = frame[in_window & frame["type"].isin(["income", "expense"])]
    if window.empty:
        logger.debug("No income or expense transactions between %s and %s", start, end)
        return _empty_trends()

    window = window.assign(month=window["date"].dt.strftime("%Y-%m"))
    expenses = window[window["type"] == "expense"]

    category_totals = {
        str(category): float(total)
        for category, total in expenses.groupby("category", sort=False)["amount"].sum().items()
    }

    monthly_totals: dict[str, MonthlyTotals] = {}
    for month, month_df in window.groupby("month", sort=True):
        month_expenses = month_df[month_df["type"] == "expense"]
        categories = month_expenses.groupby("category", sort=False)["amount"].sum()
        monthly_totals[str(month)] = {
            "income": float(month_df.loc[month_df["type"] == "income", "amount"].sum()),
            "expenses": float(month_expenses["amount"].sum()),
            "categories": {str(category): float(total) for category, total in categories.items()},
        }

    expense_series = [totals["expenses"] for totals in monthly_totals.values()]
    income_series = [totals["income"] for totals in monthly_totals.values()]
    avg_expense = float(np.mean(expense_series))
    avg_income = float(np.mean(income_series))

    slope = calculate_trend(list(range(len(expense_series))), expense_series)
    trend_percentage = slope / avg_expense * 100 if avg_expense else 0.0

    return {
        "category_totals": category_totals,
        "monthly_totals": monthly_totals,
        "avg_monthly_expense": avg_expense,
        "avg_monthly_income": avg_income,
        "avg_monthly_savings": avg_income - avg_expense,
        "expense_trend": classify_trend(slope),
        "trend_slope": slope,
        "trend_percentage": float(trend_percentage),
    }
