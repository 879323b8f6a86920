"""Tests for the LineItem model."""

import pytest
from pydantic import ValidationError

from ticketctl.domain.line_items import LineItem, gross_total


class TestLineItem:
    def test_subtotal(self) -> None:
        item = LineItem(name="Coffee", unit_price=12.5, quantity=2)
        assert item.subtotal == 25.0

    def test_free_item(self) -> None:
        item = LineItem(name="Sample", unit_price=0.0, quantity=3)
        assert item.subtotal == 0.0

    def test_accessors(self) -> None:
        item = LineItem(name="Bread", unit_price=1.2, quantity=1)
        assert item.name == "Bread"
        assert item.unit_price == 1.2
        assert item.quantity == 1

    def test_frozen(self) -> None:
        item = LineItem(name="Bread", unit_price=1.2, quantity=1)
        with pytest.raises(ValidationError):
            item.quantity = 5  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"name": "", "unit_price": 1.0, "quantity": 1},
            {"name": "Bread", "unit_price": -0.01, "quantity": 1},
            {"name": "Bread", "unit_price": 1.0, "quantity": 0},
        ],
    )
    def test_rejects_out_of_range(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            LineItem(**kwargs)  # type: ignore[arg-type]


class TestGrossTotal:
    def test_sum(self, basket: list[LineItem]) -> None:
        assert gross_total(basket) == 50.0

    def test_empty(self) -> None:
        assert gross_total([]) == 0.0
