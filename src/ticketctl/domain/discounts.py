"""Age and birthday discount rules.

Two independent components are summed and capped:
- Age: minors and seniors get a fixed percentage.
- Birthday: customers whose next birthday is close get a fixed percentage.

INVARIANT: The combined discount never exceeds MAX_TOTAL_DISCOUNT and is
never scaled down proportionally; the cap is a hard ceiling.

Leap-day birthdays resolve to Feb 28 in non-leap years when placing the
next birthday. Age uses completed years, so a Feb 29 birth date completes
its year on Mar 1 of a non-leap year.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel

# --- Age thresholds (inclusive adult range) ---

ADULT_MIN_AGE = 18
ADULT_MAX_AGE = 65

MINOR_DISCOUNT = 10.0
SENIOR_DISCOUNT = 15.0

# --- Birthday proximity windows (days until next birthday) ---

BIRTHDAY_WEEK_DAYS = 7
BIRTHDAY_FORTNIGHT_DAYS = 14

BIRTHDAY_WEEK_DISCOUNT = 20.0
BIRTHDAY_FORTNIGHT_DISCOUNT = 10.0

MAX_TOTAL_DISCOUNT = 30.0


class DiscountBreakdown(BaseModel):
    """Everything the engine derives from one (birth date, reference date) pair."""

    model_config = {"frozen": True}

    age_years: int
    days_to_birthday: int
    age_discount_pct: float
    birthday_discount_pct: float
    total_discount_pct: float


def with_year(day: date, year: int) -> date:
    """Move *day* to *year*, resolving Feb 29 to Feb 28 in non-leap years."""
    try:
        return day.replace(year=year)
    except ValueError:
        return day.replace(year=year, day=28)


def completed_years(birth_date: date, reference_date: date) -> int:
    """Whole years from *birth_date* to *reference_date*.

    The current year only counts once the birth month/day has been
    reached in the reference year.
    """
    years = reference_date.year - birth_date.year
    if (reference_date.month, reference_date.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def days_until_birthday(birth_date: date, reference_date: date) -> int:
    """Days from *reference_date* to the next birthday, in ``[1, 366]``.

    A birthday on the reference date counts as already passed and rolls
    to the following year, so the result is never 0.
    """
    candidate = with_year(birth_date, reference_date.year)
    if candidate <= reference_date:
        candidate = with_year(candidate, reference_date.year + 1)
    return (candidate - reference_date).days


def age_discount_for(age: int) -> float:
    """Age-based discount percentage."""
    if age < ADULT_MIN_AGE:
        return MINOR_DISCOUNT
    if age > ADULT_MAX_AGE:
        return SENIOR_DISCOUNT
    return 0.0


def birthday_discount_for(days: int) -> float:
    """Birthday-proximity discount percentage."""
    if days <= BIRTHDAY_WEEK_DAYS:
        return BIRTHDAY_WEEK_DISCOUNT
    if days <= BIRTHDAY_FORTNIGHT_DAYS:
        return BIRTHDAY_FORTNIGHT_DISCOUNT
    return 0.0


def combine_discounts(age_discount: float, birthday_discount: float) -> float:
    """Sum both components, capped at MAX_TOTAL_DISCOUNT."""
    return min(age_discount + birthday_discount, MAX_TOTAL_DISCOUNT)


class DiscountCalculator:
    """Discount engine bound to one customer's birth date and a reference date.

    Every query is a pure read of the two constructor dates, so an instance
    can be queried any number of times with identical results.
    """

    def __init__(self, birth_date: date, reference_date: date) -> None:
        self._birth_date = birth_date
        self._reference_date = reference_date

    @property
    def birth_date(self) -> date:
        return self._birth_date

    @property
    def reference_date(self) -> date:
        return self._reference_date

    def age_in_years(self) -> int:
        return completed_years(self._birth_date, self._reference_date)

    def days_until_next_birthday(self) -> int:
        return days_until_birthday(self._birth_date, self._reference_date)

    def age_discount_percent(self) -> float:
        return age_discount_for(self.age_in_years())

    def birthday_discount_percent(self) -> float:
        return birthday_discount_for(self.days_until_next_birthday())

    def combine_discounts(self, age_discount: float, birthday_discount: float) -> float:
        """Cap two previously computed percentages.

        Callers must pass percentages derived from this same instance.
        """
        return combine_discounts(age_discount, birthday_discount)

    def breakdown(self) -> DiscountBreakdown:
        """Compute every component in one consistent snapshot."""
        age = self.age_in_years()
        days = self.days_until_next_birthday()
        age_pct = age_discount_for(age)
        birthday_pct = birthday_discount_for(days)
        return DiscountBreakdown(
            age_years=age,
            days_to_birthday=days,
            age_discount_pct=age_pct,
            birthday_discount_pct=birthday_pct,
            total_discount_pct=combine_discounts(age_pct, birthday_pct),
        )
