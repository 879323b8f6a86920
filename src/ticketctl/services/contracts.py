"""Typed payload contracts for service and adapter boundaries.

These models validate operation payload shapes before they leave the
service layer so key regressions (for example ``total`` vs
``total_discount_pct``) fail fast in tests.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="json")


class DiscountResultData(BaseModel):
    """Payload contract for ``CheckoutService.discount``."""

    birth_date: str
    reference_date: str
    age_years: int = Field(ge=0)
    days_to_birthday: int = Field(ge=1, le=366)
    age_discount_pct: float
    birthday_discount_pct: float
    total_discount_pct: float = Field(ge=0, le=30)


class ReceiptLine(BaseModel):
    """One itemized receipt row."""

    model_config = ConfigDict(extra="forbid")

    name: str
    quantity: int
    unit_price: float
    subtotal: float


class ReceiptData(BaseModel):
    """Payload contract for ``CheckoutService.checkout``."""

    customer: str
    age_years: int = Field(ge=0)
    days_to_birthday: int = Field(ge=1, le=366)
    currency: str
    items: list[ReceiptLine]
    count: int
    gross_total: float
    age_discount_pct: float
    age_discount_amount: float
    birthday_discount_pct: float
    birthday_discount_amount: float
    total_discount_pct: float = Field(ge=0, le=30)
    discount_amount: float
    amount_due: float
    message: str | None = None
