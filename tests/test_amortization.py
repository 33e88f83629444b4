"""Tests for fixed-rate schedules, extra payments and revolving payoff."""

from __future__ import annotations

from datetime import date

import pytest

from analytics.amortization import (
    INSUFFICIENT_PAYMENT_ERROR,
    calculate_credit_card_payoff,
    calculate_monthly_payment,
    calculate_with_extra_payments,
    generate_schedule,
    schedule_for_terms,
    schedule_to_frame,
)
from core.models import LoanTerms

LOANS = [
    (10000.0, 5.0, 12),
    (250000.0, 6.5, 360),
    (5000.0, 0.0, 10),
    (1200.0, 18.0, 24),
]


def test_example_loan_matches_annuity_tables():
    result = generate_schedule(10000, 5, 12, start_date=date(2024, 1, 1))

    assert result.monthly_payment == pytest.approx(856.07, abs=0.01)
    assert result.total_interest == pytest.approx(272.90, abs=0.01)
    assert result.total_payments == pytest.approx(result.monthly_payment * 12)
    assert len(result.schedule) == 12
    assert result.schedule[-1].balance == 0


def test_schedule_for_terms_matches_positional_call():
    terms = LoanTerms(principal=10000, annual_rate_percent=5, term_months=12)

    from_terms = schedule_for_terms(terms, start_date=date(2024, 1, 1))
    direct = generate_schedule(10000, 5, 12, start_date=date(2024, 1, 1))

    assert from_terms == direct
    assert from_terms.schedule[0].date == date(2024, 2, 1)


@pytest.mark.parametrize("principal, rate, term", LOANS)
def test_schedule_repays_principal(principal, rate, term):
    result = generate_schedule(principal, rate, term, start_date=date(2024, 1, 1))

    assert len(result.schedule) == term
    assert sum(row.principal for row in result.schedule) == pytest.approx(principal, abs=0.01)
    assert result.schedule[-1].balance == 0
    assert all(row.balance >= 0 for row in result.schedule)


@pytest.mark.parametrize("principal, rate, term", LOANS)
def test_cumulative_totals_never_decrease(principal, rate, term):
    rows = generate_schedule(principal, rate, term, start_date=date(2024, 1, 1)).schedule

    for previous, current in zip(rows, rows[1:]):
        assert current.total_interest >= previous.total_interest
        assert current.total_principal >= previous.total_principal


def test_zero_rate_is_linear():
    result = generate_schedule(5000, 0, 10, start_date=date(2024, 1, 1))

    assert result.monthly_payment == 5000 / 10
    assert result.total_interest == 0
    assert all(row.interest == 0 for row in result.schedule)


def test_payment_dates_clamp_to_month_end():
    rows = generate_schedule(900, 0, 3, start_date=date(2024, 1, 31)).schedule

    assert [row.date for row in rows] == [date(2024, 2, 29), date(2024, 3, 31), date(2024, 4, 30)]


@pytest.mark.parametrize("term", [0, -6])
def test_non_positive_term_is_degenerate(term):
    assert calculate_monthly_payment(1000, 5, term) == 0.0

    result = generate_schedule(1000, 5, term, start_date=date(2024, 1, 1))
    assert result.monthly_payment == 0.0
    assert result.total_payments == 0.0
    assert result.schedule == []


def test_extra_payment_shortens_payoff():
    result = calculate_with_extra_payments(10000, 5, 12, 200)

    assert result.months_to_payoff == 10
    assert result.original_months == 12
    assert result.months_saved == 2
    assert result.total_interest == pytest.approx(224.34, abs=0.01)
    assert result.interest_saved == pytest.approx(48.56, abs=0.01)
    assert result.schedule[-1].balance == 0
    assert not result.hit_cap


def test_zero_extra_matches_original_term():
    result = calculate_with_extra_payments(10000, 5, 12, 0)

    assert result.months_to_payoff == 12
    assert result.months_saved == 0
    assert result.interest_saved == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize("extra", [0, 10, 150, 1000, 20000])
def test_extra_payment_never_lengthens_payoff(extra):
    result = calculate_with_extra_payments(18000, 7.5, 48, extra)

    assert result.months_to_payoff <= 48
    assert result.schedule[-1].payment <= calculate_monthly_payment(18000, 7.5, 48) + extra + 1e-9


def test_negative_extra_stops_at_cap():
    payment = calculate_monthly_payment(10000, 5, 12)

    result = calculate_with_extra_payments(10000, 5, 12, -payment)

    assert result.months_to_payoff == 24
    assert result.months_saved == -12
    assert result.hit_cap
    assert result.schedule[-1].balance > 10000


def test_cap_multiplier_comes_from_settings(monkeypatch):
    monkeypatch.setenv("PIXELVAULT_EXTRA_PAYMENT_CAP_MULTIPLIER", "3")
    payment = calculate_monthly_payment(10000, 5, 12)

    result = calculate_with_extra_payments(10000, 5, 12, -payment)

    assert result.months_to_payoff == 36


def test_credit_card_rejects_payment_below_interest():
    result = calculate_credit_card_payoff(1000, 24, 19.99)

    assert not result.ok
    assert result.error == INSUFFICIENT_PAYMENT_ERROR
    assert result.months_to_payoff is None
    assert result.schedule == []


def test_credit_card_payoff():
    result = calculate_credit_card_payoff(1000, 18, 100)

    assert result.ok
    assert result.months_to_payoff == 11
    assert result.total_interest == pytest.approx(91.62, abs=0.01)
    assert result.total_payments == pytest.approx(1000 + result.total_interest)
    assert len(result.schedule) == 11
    assert result.schedule[-1].balance == 0
    assert not result.hit_cap


def test_credit_card_cap(monkeypatch):
    monkeypatch.setenv("PIXELVAULT_MAX_PAYOFF_MONTHS", "12")

    result = calculate_credit_card_payoff(10000, 24, 201)

    assert result.months_to_payoff == 12
    assert result.hit_cap


def test_schedule_to_frame_columns():
    frame = schedule_to_frame(generate_schedule(1200, 0, 12, start_date=date(2024, 1, 1)).schedule)

    assert len(frame) == 12
    assert list(frame.columns)[:3] == ["month", "date", "payment"]
    assert frame["principal"].sum() == pytest.approx(1200)

    empty = schedule_to_frame([])
    assert empty.empty
    assert "balance" in empty.columns
