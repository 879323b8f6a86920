"""LineItem — one purchased product and its subtotal."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LineItem(BaseModel):
    """A single product entry on a receipt.

    Range checks live here as declared constraints; the intake loop
    guarantees them before construction, so the discount engine never
    re-validates items.
    """

    model_config = {"frozen": True}

    name: str = Field(min_length=1)
    unit_price: float = Field(ge=0)
    quantity: int = Field(ge=1)

    @property
    def subtotal(self) -> float:
        return self.unit_price * self.quantity


def gross_total(items: list[LineItem]) -> float:
    """Sum of all item subtotals (0.0 for an empty list)."""
    return sum((item.subtotal for item in items), 0.0)
