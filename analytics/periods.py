"""Calendar-month arithmetic shared by the projection helpers."""

from __future__ import annotations

import calendar
from datetime import date

from dateutil.relativedelta import relativedelta

__all__ = [
    "add_months",
    "month_start",
    "days_in_month",
    "month_key",
    "month_label",
    "months_between",
]


def add_months(start: date, months: int) -> date:
    """Shift ``start`` by whole calendar months, clamping to the month end."""
    return start + relativedelta(months=months)


def month_start(value: date) -> date:
    return date(value.year, value.month, 1)


def days_in_month(value: date) -> int:
    return calendar.monthrange(value.year, value.month)[1]


def month_key(value: date) -> str:
    """``YYYY-MM`` key used for monthly buckets."""
    return f"{value.year:04d}-{value.month:02d}"


def month_label(value: date) -> str:
    return value.strftime("%b %Y")


def months_between(start: date, end: date) -> int:
    """Calendar months from ``start`` to ``end`` ignoring the day of month."""
    return (end.year - start.year) * 12 + (end.month - start.month)
