"""Fixed-rate loan and revolving balance payoff calculations."""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import date
from typing import Optional, Sequence

import pandas as pd

from analytics.periods import add_months
from config import get_settings
from core.models import AmortizationPayment, AmortizationSchedule, CreditCardPayoff, ExtraPaymentResult, LoanTerms

__all__ = [
    "INSUFFICIENT_PAYMENT_ERROR",
    "monthly_rate",
    "calculate_monthly_payment",
    "generate_schedule",
    "schedule_for_terms",
    "calculate_with_extra_payments",
    "calculate_credit_card_payoff",
    "schedule_to_frame",
]

logger = logging.getLogger(__name__)

INSUFFICIENT_PAYMENT_ERROR = "Payment too low to pay off balance"

SCHEDULE_COLUMNS = [
    "month",
    "date",
    "payment",
    "principal",
    "interest",
    "balance",
    "total_interest",
    "total_principal",
]


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage rate into a simple monthly rate."""
    return annual_rate_percent / 100 / 12


def calculate_monthly_payment(principal: float, annual_rate_percent: float, term_months: int) -> float:
    """Standard fully-amortizing level payment.

    A non-positive term has no defined payment and yields ``0.0``; a zero rate
    amortizes linearly.
    """
    if term_months <= 0:
        return 0.0
    if annual_rate_percent == 0:
        return principal / term_months
    r = monthly_rate(annual_rate_percent)
    growth = (1 + r) ** term_months
    return principal * (r * growth) / (growth - 1)


def generate_schedule(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
    start_date: Optional[date] = None,
) -> AmortizationSchedule:
    """Build the month-by-month schedule for a fixed-payment loan.

    The schedule always holds exactly ``term_months`` rows. Payment dates are
    ``start_date`` shifted by the row's month number.
    """

    epsilon = get_settings().balance_epsilon
    start = start_date or date.today()
    r = monthly_rate(annual_rate_percent)
    payment = calculate_monthly_payment(principal, annual_rate_percent, term_months)

    balance = principal
    total_interest = 0.0
    total_principal = 0.0
    rows: list[AmortizationPayment] = []

    for month in range(1, term_months + 1):
        interest = balance * r
        principal_paid = payment - interest
        balance -= principal_paid
        if balance < epsilon:
            balance = 0.0

        total_interest += interest
        total_principal += principal_paid
        rows.append(
            AmortizationPayment(
                month=month,
                date=add_months(start, month),
                payment=payment,
                principal=principal_paid,
                interest=interest,
                balance=balance,
                total_interest=total_interest,
                total_principal=total_principal,
            )
        )

    total_payments = payment * max(term_months, 0)
    logger.debug(
        "Generated %d-month schedule: payment=%.2f total_interest=%.2f",
        len(rows),
        payment,
        total_interest,
    )
    return AmortizationSchedule(payment, total_payments, total_interest, rows)


def schedule_for_terms(terms: LoanTerms, start_date: Optional[date] = None) -> AmortizationSchedule:
    """Build a schedule from a :class:`LoanTerms` record."""
    return generate_schedule(terms.principal, terms.annual_rate_percent, terms.term_months, start_date)


def _simulate_payoff(
    balance: float,
    rate: float,
    payment: float,
    max_months: int,
    epsilon: float,
) -> tuple[list[AmortizationPayment], float, int, float]:
    """Run a fixed-payment payoff until the balance clears or the cap is hit.

    Returns the rows, total interest, months simulated and the final balance.
    """

    rows: list[AmortizationPayment] = []
    month = 0
    total_interest = 0.0
    total_principal = 0.0

    while balance > 0 and month < max_months:
        month += 1
        interest = balance * rate
        principal_paid = min(payment - interest, balance)
        balance -= principal_paid
        if balance < epsilon:
            balance = 0.0

        total_interest += interest
        total_principal += principal_paid
        rows.append(
            AmortizationPayment(
                month=month,
                date=None,
                payment=interest + principal_paid,
                principal=principal_paid,
                interest=interest,
                balance=balance,
                total_interest=total_interest,
                total_principal=total_principal,
            )
        )

    return rows, total_interest, month, balance


def calculate_with_extra_payments(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
    extra_monthly: float = 0.0,
) -> ExtraPaymentResult:
    """Simulate paying a fixed-rate loan with an additional monthly amount."""

    settings = get_settings()
    base_payment = calculate_monthly_payment(principal, annual_rate_percent, term_months)
    max_months = term_months * settings.extra_payment_cap_multiplier

    rows, total_interest, months, remaining = _simulate_payoff(
        principal,
        monthly_rate(annual_rate_percent),
        base_payment + extra_monthly,
        max_months,
        settings.balance_epsilon,
    )
    hit_cap = remaining > 0
    if hit_cap:
        logger.warning(
            "Extra-payment payoff did not converge within %d months (balance %.2f)",
            max_months,
            remaining,
        )

    baseline = generate_schedule(principal, annual_rate_percent, term_months)
    return ExtraPaymentResult(
        months_to_payoff=months,
        original_months=term_months,
        months_saved=term_months - months,
        total_interest=total_interest,
        interest_saved=baseline.total_interest - total_interest,
        schedule=rows,
        hit_cap=hit_cap,
    )


def calculate_credit_card_payoff(balance: float, apr_percent: float, monthly_payment: float) -> CreditCardPayoff:
    """Months and interest needed to clear a revolving balance at a fixed payment.

    A payment that does not cover the first month's interest is rejected with
    an error result instead of being simulated.
    """

    settings = get_settings()
    rate = monthly_rate(apr_percent)
    if monthly_payment <= balance * rate:
        logger.warning(
            "Rejected revolving payoff: payment %.2f does not cover interest %.2f",
            monthly_payment,
            balance * rate,
        )
        return CreditCardPayoff(error=INSUFFICIENT_PAYMENT_ERROR)

    rows, total_interest, months, remaining = _simulate_payoff(
        balance,
        rate,
        monthly_payment,
        settings.max_payoff_months,
        settings.balance_epsilon,
    )
    hit_cap = remaining > 0
    if hit_cap:
        logger.warning("Revolving payoff hit the %d-month cap", settings.max_payoff_months)

    return CreditCardPayoff(
        months_to_payoff=months,
        total_interest=total_interest,
        total_payments=balance + total_interest,
        schedule=rows,
        hit_cap=hit_cap,
    )


def schedule_to_frame(schedule: Sequence[AmortizationPayment]) -> pd.DataFrame:
    """Return schedule rows as a data frame for tables and charts."""

    if not schedule:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)
    return pd.DataFrame([asdict(row) for row in schedule], columns=SCHEDULE_COLUMNS)
