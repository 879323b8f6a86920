"""Tests for CheckoutService — discount breakdowns and receipts."""

from __future__ import annotations

from datetime import date

import pytest

from ticketctl.config.settings import TicketSettings
from ticketctl.domain.line_items import LineItem
from ticketctl.services.base import BaseService
from ticketctl.services.checkout import CheckoutService, birthday_message

REFERENCE = date(2024, 3, 3)


@pytest.fixture
def svc(settings: TicketSettings) -> CheckoutService:
    return CheckoutService(settings, clock=lambda: REFERENCE)


class TestDiscount:
    def test_adult_birthday_week(self, svc: CheckoutService) -> None:
        result = svc.discount(date(1990, 3, 10))
        assert result.ok
        assert result.op == "discount"
        assert result.data == {
            "birth_date": "1990-03-10",
            "reference_date": "2024-03-03",
            "age_years": 33,
            "days_to_birthday": 7,
            "age_discount_pct": 0.0,
            "birthday_discount_pct": 20.0,
            "total_discount_pct": 20.0,
        }

    def test_minor_capped(self, svc: CheckoutService) -> None:
        result = svc.discount(date(2010, 3, 10))
        assert result.data["age_years"] == 13
        assert result.data["age_discount_pct"] == 10.0
        assert result.data["birthday_discount_pct"] == 20.0
        assert result.data["total_discount_pct"] == 30.0

    def test_explicit_reference_date(self, svc: CheckoutService) -> None:
        result = svc.discount(date(1950, 1, 1), reference_date=date(2024, 6, 15))
        assert result.data["reference_date"] == "2024-06-15"
        assert result.data["age_years"] == 74
        assert result.data["days_to_birthday"] == 200
        assert result.data["total_discount_pct"] == 15.0

    def test_future_birth_date(self, svc: CheckoutService) -> None:
        result = svc.discount(date(2030, 1, 1))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "BIRTH_DATE_IN_FUTURE"
        assert result.error.detail["reference_date"] == "2024-03-03"

    def test_born_today(self, svc: CheckoutService) -> None:
        result = svc.discount(REFERENCE)
        assert result.ok
        assert result.data["age_years"] == 0
        assert result.data["days_to_birthday"] == 365


class TestCheckout:
    def test_adult_birthday_week(self, svc: CheckoutService, basket: list[LineItem]) -> None:
        result = svc.checkout("Ana Ruiz", date(1990, 3, 10), basket)
        assert result.ok
        assert result.op == "checkout"
        d = result.data
        assert d["customer"] == "Ana Ruiz"
        assert d["age_years"] == 33
        assert d["days_to_birthday"] == 7
        assert d["count"] == 3
        assert d["gross_total"] == 50.0
        assert d["age_discount_amount"] == 0.0
        assert d["birthday_discount_amount"] == 10.0
        assert d["total_discount_pct"] == 20.0
        assert d["discount_amount"] == 10.0
        assert d["amount_due"] == 40.0
        assert "20%" in d["message"]
        assert result.warnings == []

    def test_minor_capped_at_thirty(self, svc: CheckoutService, basket: list[LineItem]) -> None:
        d = svc.checkout("Leo", date(2010, 3, 10), basket).data
        assert d["age_discount_amount"] == 5.0
        assert d["birthday_discount_amount"] == 10.0
        assert d["total_discount_pct"] == 30.0
        assert d["discount_amount"] == 15.0
        assert d["amount_due"] == 35.0

    def test_senior_without_birthday(self, svc: CheckoutService, basket: list[LineItem]) -> None:
        d = svc.checkout(
            "Carmen", date(1950, 1, 1), basket, reference_date=date(2024, 6, 15)
        ).data
        assert d["age_years"] == 74
        assert d["total_discount_pct"] == 15.0
        assert d["discount_amount"] == 7.5
        assert d["amount_due"] == 42.5
        assert d["message"] is None

    def test_capped_total_is_not_sum_of_component_amounts(
        self, settings: TicketSettings, basket: list[LineItem]
    ) -> None:
        svc = CheckoutService(settings, clock=lambda: date(2024, 12, 25))
        d = svc.checkout("Pilar", date(1940, 12, 30), basket).data
        assert d["age_discount_pct"] == 15.0
        assert d["birthday_discount_pct"] == 20.0
        assert d["age_discount_amount"] + d["birthday_discount_amount"] == 17.5
        assert d["discount_amount"] == 15.0
        assert d["amount_due"] == 35.0

    def test_items_itemized(self, svc: CheckoutService, basket: list[LineItem]) -> None:
        d = svc.checkout("Ana", date(1990, 3, 10), basket).data
        assert d["items"][1] == {
            "name": "Coffee",
            "quantity": 2,
            "unit_price": 12.5,
            "subtotal": 25.0,
        }

    def test_fortnight_message(self, svc: CheckoutService, basket: list[LineItem]) -> None:
        d = svc.checkout("Ana", date(1990, 3, 14), basket).data
        assert d["days_to_birthday"] == 11
        assert d["birthday_discount_pct"] == 10.0
        assert "10%" in d["message"]

    def test_no_items_warns(self, svc: CheckoutService) -> None:
        result = svc.checkout("Ana", date(1990, 3, 10), [])
        assert result.ok
        assert result.data["gross_total"] == 0.0
        assert result.data["amount_due"] == 0.0
        assert result.data["items"] == []
        assert result.warnings == ["No products were registered"]

    def test_currency_from_settings(self, basket: list[LineItem]) -> None:
        settings = TicketSettings.from_cli(receipt={"currency": "$"})
        d = CheckoutService(settings).checkout("Ana", date(1990, 3, 10), basket).data
        assert d["currency"] == "$"

    def test_meta_reference_date(self, svc: CheckoutService) -> None:
        result = svc.checkout("Ana", date(1990, 3, 10), [])
        assert result.meta == {"reference_date": "2024-03-03"}

    def test_future_birth_date(self, svc: CheckoutService, basket: list[LineItem]) -> None:
        result = svc.checkout("Ana", date(2025, 1, 1), basket)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "BIRTH_DATE_IN_FUTURE"

    def test_cents_rounding(self, svc: CheckoutService) -> None:
        items = [LineItem(name="Gum", unit_price=0.99, quantity=3)]
        d = svc.checkout("Ana", date(1990, 3, 10), items).data
        assert d["gross_total"] == 2.97
        assert d["discount_amount"] == 0.59
        assert d["amount_due"] == 2.38

    def test_overflowing_total_rejected(self, svc: CheckoutService) -> None:
        items = [LineItem(name="Gold", unit_price=1e308, quantity=2)]
        result = svc.checkout("Ana", date(1990, 3, 10), items)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "AMOUNT_OUT_OF_RANGE"


class TestBirthdayMessage:
    @pytest.mark.parametrize("days", [1, 7])
    def test_week(self, days: int) -> None:
        message = birthday_message(days)
        assert message is not None
        assert "Happy early birthday" in message

    @pytest.mark.parametrize("days", [8, 14])
    def test_fortnight(self, days: int) -> None:
        message = birthday_message(days)
        assert message is not None
        assert "coming up" in message

    def test_far(self) -> None:
        assert birthday_message(15) is None


class TestBaseService:
    def test_inherits_base_service(self) -> None:
        assert issubclass(CheckoutService, BaseService)

    def test_clock_default(self, settings: TicketSettings) -> None:
        svc = CheckoutService(settings)
        result = svc.discount(date(1990, 3, 10))
        assert result.data["reference_date"] == date.today().isoformat()

    def test_explicit_date_beats_clock(self, settings: TicketSettings) -> None:
        svc = CheckoutService(settings, clock=lambda: date(2000, 1, 1))
        result = svc.discount(date(1990, 3, 10), reference_date=REFERENCE)
        assert result.data["reference_date"] == "2024-03-03"
