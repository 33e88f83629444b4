"""Shared record and result definitions for the projection engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, Optional, TypedDict

RecurringType = Literal["income", "expense"]
TransactionType = Literal["income", "expense", "transfer"]
Frequency = Literal["daily", "weekly", "biweekly", "monthly", "quarterly", "annually"]
PayoffMethod = Literal["avalanche", "snowball"]
TrendDirection = Literal["increasing", "decreasing", "stable"]

FREQUENCIES: tuple[str, ...] = ("daily", "weekly", "biweekly", "monthly", "quarterly", "annually")
PAYOFF_METHODS: tuple[str, ...] = ("avalanche", "snowball")


# Input records -------------------------------------------------------------


@dataclass(frozen=True)
class Account:
    name: str
    balance: float
    type: str = "checking"


@dataclass(frozen=True)
class LoanTerms:
    principal: float
    annual_rate_percent: float
    term_months: int


@dataclass(frozen=True)
class Debt:
    name: str
    current_balance: float
    interest_rate: float
    minimum_payment: float
    original_balance: Optional[float] = None
    remaining_months: Optional[int] = None


@dataclass(frozen=True)
class RecurringItem:
    type: RecurringType
    amount: float
    frequency: Frequency
    category: str
    start_date: Optional[date] = None
    name: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class Transaction:
    type: TransactionType
    amount: float
    date: date
    category: Optional[str] = None
    description: str = ""


# Amortization results ------------------------------------------------------


@dataclass(frozen=True)
class AmortizationPayment:
    month: int
    date: Optional[date]
    payment: float
    principal: float
    interest: float
    balance: float
    total_interest: float
    total_principal: float


@dataclass(frozen=True)
class AmortizationSchedule:
    monthly_payment: float
    total_payments: float
    total_interest: float
    schedule: list[AmortizationPayment]


@dataclass(frozen=True)
class ExtraPaymentResult:
    months_to_payoff: int
    original_months: int
    months_saved: int
    total_interest: float
    interest_saved: float
    schedule: list[AmortizationPayment]
    hit_cap: bool = False


@dataclass(frozen=True)
class CreditCardPayoff:
    """Revolving payoff outcome; ``error`` is set when no simulation ran."""

    error: Optional[str] = None
    months_to_payoff: Optional[int] = None
    total_interest: Optional[float] = None
    total_payments: Optional[float] = None
    schedule: list[AmortizationPayment] = field(default_factory=list)
    hit_cap: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


# Debt payoff results -------------------------------------------------------


@dataclass(frozen=True)
class PayoffOrderEntry:
    name: str
    # None when the debt was still open at the month cap.
    payoff_month: Optional[int]


@dataclass(frozen=True)
class DebtSnapshot:
    name: str
    balance: float
    paid_off: bool
    payment: float
    interest: float


@dataclass(frozen=True)
class DebtTimelineMonth:
    month: int
    debts: list[DebtSnapshot]


@dataclass(frozen=True)
class DebtPayoffResult:
    method: PayoffMethod
    total_months: int
    total_interest_paid: float
    payoff_order: list[PayoffOrderEntry]
    timeline: list[DebtTimelineMonth]
    hit_cap: bool = False


@dataclass(frozen=True)
class DebtStrategyComparison:
    avalanche: DebtPayoffResult
    snowball: DebtPayoffResult
    avalanche_extra: DebtPayoffResult
    snowball_extra: DebtPayoffResult
    extra_payment: float
    recommendation: PayoffMethod


# Forecasting and trends ----------------------------------------------------


class ForecastMonth(TypedDict):
    month: str
    month_name: str
    projected_balance: float
    income: float
    expenses: float
    net_change: float


@dataclass(frozen=True)
class BalanceProjection:
    month: str
    projected_balance: float
    is_extrapolated: bool
    forecast: Optional[ForecastMonth] = None


class MonthlyTotals(TypedDict):
    income: float
    expenses: float
    categories: dict[str, float]


class SpendingTrends(TypedDict):
    category_totals: dict[str, float]
    monthly_totals: dict[str, MonthlyTotals]
    avg_monthly_expense: float
    avg_monthly_income: float
    avg_monthly_savings: float
    expense_trend: TrendDirection
    trend_slope: float
    trend_percentage: float


# Savings -------------------------------------------------------------------


@dataclass(frozen=True)
class SavingsGoalCheckpoint:
    month: int
    balance: float
    contributed: float
    interest: float


@dataclass(frozen=True)
class SavingsGoalResult:
    error: Optional[str] = None
    months_to_goal: Optional[int] = None
    years_to_goal: Optional[float] = None
    total_contributed: Optional[float] = None
    total_interest: Optional[float] = None
    final_balance: Optional[float] = None
    schedule: list[SavingsGoalCheckpoint] = field(default_factory=list)
    hit_cap: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


class FinancialSummary(TypedDict):
    total_balance: float
    total_debt: float
    net_worth: float
    monthly_income: float
    monthly_expenses: float
    monthly_cash_flow: float
    forecast: list[ForecastMonth]
    spending_trends: SpendingTrends
    debt_strategies: Optional[DebtStrategyComparison]
    insights: list[str]


__all__ = [
    "RecurringType",
    "TransactionType",
    "Frequency",
    "PayoffMethod",
    "TrendDirection",
    "FREQUENCIES",
    "PAYOFF_METHODS",
    "Account",
    "LoanTerms",
    "Debt",
    "RecurringItem",
    "Transaction",
    "AmortizationPayment",
    "AmortizationSchedule",
    "ExtraPaymentResult",
    "CreditCardPayoff",
    "PayoffOrderEntry",
    "DebtSnapshot",
    "DebtTimelineMonth",
    "DebtPayoffResult",
    "DebtStrategyComparison",
    "ForecastMonth",
    "BalanceProjection",
    "MonthlyTotals",
    "SpendingTrends",
    "SavingsGoalCheckpoint",
    "SavingsGoalResult",
    "FinancialSummary",
]
