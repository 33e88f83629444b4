"""Core domain package for the PixelVault projection engine.

The summary service lives in :mod:`core.summary_service` and is imported
explicitly because it depends on :mod:`analytics`.
"""

from .models import (
    Account,
    AmortizationPayment,
    AmortizationSchedule,
    BalanceProjection,
    CreditCardPayoff,
    Debt,
    DebtPayoffResult,
    DebtSnapshot,
    DebtStrategyComparison,
    DebtTimelineMonth,
    ExtraPaymentResult,
    FinancialSummary,
    ForecastMonth,
    LoanTerms,
    MonthlyTotals,
    PayoffOrderEntry,
    RecurringItem,
    SavingsGoalCheckpoint,
    SavingsGoalResult,
    SpendingTrends,
    Transaction,
)

__all__ = [
    "Account",
    "AmortizationPayment",
    "AmortizationSchedule",
    "BalanceProjection",
    "CreditCardPayoff",
    "Debt",
    "DebtPayoffResult",
    "DebtSnapshot",
    "DebtStrategyComparison",
    "DebtTimelineMonth",
    "ExtraPaymentResult",
    "FinancialSummary",
    "ForecastMonth",
    "LoanTerms",
    "MonthlyTotals",
    "PayoffOrderEntry",
    "RecurringItem",
    "SavingsGoalCheckpoint",
    "SavingsGoalResult",
    "SpendingTrends",
    "Transaction",
]
