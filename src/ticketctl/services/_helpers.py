"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import date


def today() -> date:
    """Today's local calendar date (the default reference date)."""
    return date.today()


def percent_of(amount: float, percent: float) -> float:
    """``amount * percent / 100`` rounded to cents.

    Examples:
        >>> percent_of(50.0, 20.0)
        10.0
        >>> percent_of(9.99, 15.0)
        1.5
    """
    return round(amount * (percent / 100.0), 2)


def to_cents(amount: float) -> float:
    """Round a currency amount to two decimals."""
    return round(amount, 2)
