"""Multi-debt payoff simulation using avalanche or snowball ordering."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from analytics.amortization import monthly_rate
from config import get_settings
from core.models import (
    PAYOFF_METHODS,
    Debt,
    DebtPayoffResult,
    DebtSnapshot,
    DebtStrategyComparison,
    DebtTimelineMonth,
    PayoffMethod,
    PayoffOrderEntry,
)

__all__ = ["order_debts", "calculate_debt_payoff", "compare_debt_strategies"]

logger = logging.getLogger(__name__)


@dataclass
class _WorkingDebt:
    """Mutable simulation state wrapped around a caller-owned debt."""

    debt: Debt
    balance: float
    paid_off: bool = False
    payoff_month: Optional[int] = None


def order_debts(debts: Sequence[Debt], method: PayoffMethod) -> list[Debt]:
    """Return debts in payoff priority order.

    Avalanche ranks by descending interest rate, snowball by ascending
    balance. The sort is stable so ties keep their input order.
    """

    if method == "avalanche":
        return sorted(debts, key=lambda debt: -debt.interest_rate)
    if method == "snowball":
        return sorted(debts, key=lambda debt: debt.current_balance)
    raise ValueError(f"Unknown payoff method {method!r}; expected one of {PAYOFF_METHODS}")


def calculate_debt_payoff(
    debts: Sequence[Debt],
    extra_payment: float = 0.0,
    method: PayoffMethod = "avalanche",
) -> DebtPayoffResult:
    """Simulate paying down several debts at once.

    Every open debt receives its minimum payment each month. The first open
    debt in priority order also receives the month's extra pool; when that
    debt clears mid-month the next open debt receives the same extra. A
    cleared debt's minimum payment joins the extra pool from the following
    month onwards.
    """

    settings = get_settings()
    epsilon = settings.balance_epsilon
    max_months = settings.max_payoff_months

    working = [_WorkingDebt(debt=debt, balance=debt.current_balance) for debt in order_debts(debts, method)]

    month = 0
    total_interest = 0.0
    available_extra = extra_payment
    timeline: list[DebtTimelineMonth] = []

    while month < max_months and any(not item.paid_off for item in working):
        month += 1
        month_extra = available_extra
        target = next(item for item in working if not item.paid_off)
        snapshots: list[DebtSnapshot] = []

        for item in working:
            if item.paid_off:
                snapshots.append(DebtSnapshot(item.debt.name, item.balance, True, 0.0, 0.0))
                continue

            interest = item.balance * monthly_rate(item.debt.interest_rate)
            payment = item.debt.minimum_payment + (month_extra if item is target else 0.0)
            payment = min(payment, item.balance + interest)

            item.balance -= payment - interest
            total_interest += interest

            if item.balance <= epsilon:
                item.balance = 0.0
                item.paid_off = True
                item.payoff_month = month
                available_extra += item.debt.minimum_payment
                logger.debug("%s paid off in month %d", item.debt.name, month)
                if item is target:
                    target = next((other for other in working if not other.paid_off), None)

            snapshots.append(DebtSnapshot(item.debt.name, item.balance, item.paid_off, payment, interest))

        timeline.append(DebtTimelineMonth(month=month, debts=snapshots))

    hit_cap = any(not item.paid_off for item in working)
    if hit_cap:
        logger.warning(
            "%s payoff left %d debt(s) open after %d months",
            method,
            sum(1 for item in working if not item.paid_off),
            max_months,
        )

    return DebtPayoffResult(
        method=method,
        total_months=month,
        total_interest_paid=total_interest,
        payoff_order=[PayoffOrderEntry(item.debt.name, item.payoff_month) for item in working],
        timeline=timeline,
        hit_cap=hit_cap,
    )


def compare_debt_strategies(
    debts: Sequence[Debt],
    extra_payment: Optional[float] = None,
) -> Optional[DebtStrategyComparison]:
    """Run both strategies with and without an extra payment.

    Avalanche is recommended only when it pays strictly less interest at the
    minimum payments. Returns ``None`` when there are no debts.
    """

    if not debts:
        return None

    extra = get_settings().comparison_extra_payment if extra_payment is None else extra_payment
    avalanche = calculate_debt_payoff(debts, 0.0, "avalanche")
    snowball = calculate_debt_payoff(debts, 0.0, "snowball")
    recommendation: PayoffMethod = (
        "avalanche" if avalanche.total_interest_paid < snowball.total_interest_paid else "snowball"
    )

    return DebtStrategyComparison(
        avalanche=avalanche,
        snowball=snowball,
        avalanche_extra=calculate_debt_payoff(debts, extra, "avalanche"),
        snowball_extra=calculate_debt_payoff(debts, extra, "snowball"),
        extra_payment=extra,
        recommendation=recommendation,
    )
