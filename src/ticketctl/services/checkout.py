"""CheckoutService — discount breakdowns and purchase receipts.

Pipeline: VALIDATE → DISCOUNT → TOTAL → RESPOND
"""

from __future__ import annotations

import logging
import math
from datetime import date

from ticketctl.domain.discounts import (
    BIRTHDAY_FORTNIGHT_DAYS,
    BIRTHDAY_FORTNIGHT_DISCOUNT,
    BIRTHDAY_WEEK_DAYS,
    BIRTHDAY_WEEK_DISCOUNT,
    DiscountBreakdown,
    DiscountCalculator,
)
from ticketctl.domain.line_items import LineItem, gross_total
from ticketctl.services._helpers import percent_of, to_cents
from ticketctl.services.base import BaseService
from ticketctl.services.contracts import DiscountResultData, ReceiptData, dump_validated
from ticketctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def birthday_message(days_to_birthday: int) -> str | None:
    """Personalized receipt message, or None when the birthday is not near."""
    if days_to_birthday <= BIRTHDAY_WEEK_DAYS:
        return (
            "Happy early birthday! Enjoy your special "
            f"{BIRTHDAY_WEEK_DISCOUNT:.0f}% discount."
        )
    if days_to_birthday <= BIRTHDAY_FORTNIGHT_DAYS:
        return (
            "Your birthday is coming up! Enjoy your special "
            f"{BIRTHDAY_FORTNIGHT_DISCOUNT:.0f}% discount."
        )
    return None


class CheckoutService(BaseService):
    """Computes discounts and receipts for a single customer."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def discount(
        self,
        birth_date: date,
        *,
        reference_date: date | None = None,
    ) -> ServiceResult:
        """Return the discount breakdown for *birth_date* on the reference date."""
        op = "discount"
        reference = self._reference_date(reference_date)

        error = self._validate_dates(op, birth_date, reference)
        if error is not None:
            return error

        breakdown = self._breakdown(birth_date, reference)
        data = dump_validated(
            DiscountResultData,
            {
                "birth_date": birth_date.isoformat(),
                "reference_date": reference.isoformat(),
                **breakdown.model_dump(),
            },
        )
        return ServiceResult(ok=True, op=op, data=data)

    def checkout(
        self,
        customer: str,
        birth_date: date,
        items: list[LineItem],
        *,
        reference_date: date | None = None,
    ) -> ServiceResult:
        """Build a receipt for *items* with the customer's capped discount applied."""
        op = "checkout"
        warnings: list[str] = []
        reference = self._reference_date(reference_date)

        # ── VALIDATE ─────────────────────────────────────────
        error = self._validate_dates(op, birth_date, reference)
        if error is not None:
            return error
        if not items:
            warnings.append("No products were registered")

        # ── DISCOUNT ─────────────────────────────────────────
        breakdown = self._breakdown(birth_date, reference)

        # ── TOTAL ────────────────────────────────────────────
        gross = to_cents(gross_total(items))
        if not math.isfinite(gross):
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="AMOUNT_OUT_OF_RANGE",
                    message="Gross total is too large to compute",
                    detail={"items": len(items)},
                ),
            )
        discount_amount = percent_of(gross, breakdown.total_discount_pct)
        amount_due = to_cents(gross - discount_amount)

        logger.debug(
            "Checkout for %s: %d items, gross=%.2f, discount=%.2f",
            customer,
            len(items),
            gross,
            discount_amount,
        )

        # ── RESPOND ──────────────────────────────────────────
        data = dump_validated(
            ReceiptData,
            {
                "customer": customer,
                "age_years": breakdown.age_years,
                "days_to_birthday": breakdown.days_to_birthday,
                "currency": self._settings.receipt.currency,
                "items": [
                    {
                        "name": item.name,
                        "quantity": item.quantity,
                        "unit_price": item.unit_price,
                        "subtotal": to_cents(item.subtotal),
                    }
                    for item in items
                ],
                "count": len(items),
                "gross_total": gross,
                "age_discount_pct": breakdown.age_discount_pct,
                "age_discount_amount": percent_of(gross, breakdown.age_discount_pct),
                "birthday_discount_pct": breakdown.birthday_discount_pct,
                "birthday_discount_amount": percent_of(gross, breakdown.birthday_discount_pct),
                "total_discount_pct": breakdown.total_discount_pct,
                "discount_amount": discount_amount,
                "amount_due": amount_due,
                "message": birthday_message(breakdown.days_to_birthday),
            },
        )
        return ServiceResult(
            ok=True,
            op=op,
            data=data,
            warnings=warnings,
            meta={"reference_date": reference.isoformat()},
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_dates(op: str, birth_date: date, reference: date) -> ServiceResult | None:
        if birth_date > reference:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="BIRTH_DATE_IN_FUTURE",
                    message=f"Birth date {birth_date.isoformat()} is after {reference.isoformat()}",
                    detail={
                        "birth_date": birth_date.isoformat(),
                        "reference_date": reference.isoformat(),
                    },
                ),
            )
        return None

    @staticmethod
    def _breakdown(birth_date: date, reference: date) -> DiscountBreakdown:
        breakdown = DiscountCalculator(birth_date, reference).breakdown()
        logger.debug(
            "Discount breakdown: age=%d days=%d age_pct=%.1f birthday_pct=%.1f total=%.1f",
            breakdown.age_years,
            breakdown.days_to_birthday,
            breakdown.age_discount_pct,
            breakdown.birthday_discount_pct,
            breakdown.total_discount_pct,
        )
        return breakdown
