"""Cash-flow forecasting from recurring income and expense items."""

from __future__ import annotations

import logging
from datetime import date
from typing import Final, Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from analytics.periods import add_months, days_in_month, month_key, month_label, month_start, months_between
from config import get_settings
from core.models import FREQUENCIES, Account, BalanceProjection, ForecastMonth, RecurringItem

__all__ = [
    "recurring_amount_for_month",
    "forecast_cash_flow",
    "project_balance",
    "forecast_to_frame",
]

logger = logging.getLogger(__name__)

_FIXED_OCCURRENCES: Final[dict[str, int]] = {"weekly": 4, "biweekly": 2, "monthly": 1}
_QUARTER_MONTHS: Final[frozenset[int]] = frozenset({1, 4, 7, 10})

FORECAST_COLUMNS = ["month", "month_name", "projected_balance", "income", "expenses", "net_change"]


def _occurrences(item: RecurringItem, month: date) -> int:
    # Quarterly and annual items follow the calendar month, not the time
    # elapsed since the item's start date.
    frequency = item.frequency
    if frequency == "daily":
        return days_in_month(month)
    if frequency in _FIXED_OCCURRENCES:
        return _FIXED_OCCURRENCES[frequency]
    if frequency == "quarterly":
        return 1 if month.month in _QUARTER_MONTHS else 0
    if frequency == "annually":
        if item.start_date is None:
            return 0
        return 1 if month.month == item.start_date.month else 0
    raise ValueError(f"Unknown recurring frequency {frequency!r}; expected one of {FREQUENCIES}")


def recurring_amount_for_month(item: RecurringItem, month: date) -> float:
    """Return the amount a recurring item contributes to the given month."""

    return item.amount * _occurrences(item, month)


def forecast_cash_flow(
    accounts: Iterable[Account],
    recurring_items: Sequence[RecurringItem],
    months: Optional[int] = None,
    today: Optional[date] = None,
) -> list[ForecastMonth]:
    """Project the combined account balance month by month.

    The first forecast row is the current calendar month. Inactive recurring
    items are ignored.
    """

    if months is None:
        months = get_settings().forecast_months
    first_month = month_start(today or date.today())
    balance = float(sum(account.balance for account in accounts))
    active_items = [item for item in recurring_items if item.is_active]

    forecast: list[ForecastMonth] = []
    for offset in range(months):
        current = add_months(first_month, offset)
        income = 0.0
        expenses = 0.0
        for item in active_items:
            amount = recurring_amount_for_month(item, current)
            if item.type == "income":
                income += amount
            else:
                expenses += amount

        net_change = income - expenses
        balance += net_change
        forecast.append(
            {
                "month": month_key(current),
                "month_name": month_label(current),
                "projected_balance": balance,
                "income": income,
                "expenses": expenses,
                "net_change": net_change,
            }
        )

    logger.debug("Forecast %d months from %s over %d items", months, first_month, len(active_items))
    return forecast


def project_balance(
    accounts: Iterable[Account],
    recurring_items: Sequence[RecurringItem],
    target_date: date,
    today: Optional[date] = None,
    horizon: Optional[int] = None,
) -> BalanceProjection:
    """Projected balance for the month containing ``target_date``.

    Months beyond the forecast horizon are extrapolated linearly from the
    average monthly net change.
    """

    if horizon is None:
        horizon = get_settings().projection_horizon_months
    if horizon <= 0:
        raise ValueError(f"Projection horizon must be positive, got {horizon}")

    forecast = forecast_cash_flow(accounts, recurring_items, horizon, today)
    target_key = month_key(target_date)
    for row in forecast:
        if row["month"] == target_key:
            return BalanceProjection(target_key, row["projected_balance"], False, row)

    last = forecast[-1]
    average_net = float(np.mean([row["net_change"] for row in forecast]))
    last_month = date.fromisoformat(f"{last['month']}-01")
    months_diff = months_between(last_month, target_date)
    return BalanceProjection(
        month=target_key,
        projected_balance=last["projected_balance"] + average_net * months_diff,
        is_extrapolated=True,
    )


def forecast_to_frame(forecast: Sequence[ForecastMonth]) -> pd.DataFrame:
    """Return forecast rows as a data frame for charting."""

    return pd.DataFrame(list(forecast), columns=FORECAST_COLUMNS)
