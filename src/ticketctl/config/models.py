"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ticketctl.toml only contains
overrides. Discount percentages and thresholds are fixed rules in
:mod:`ticketctl.domain.discounts` and are deliberately absent here.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ticketctl.domain.intake import DEFAULT_DATE_FORMAT, DEFAULT_END_MARKER

DEFAULT_RECEIPT_TITLE = "PURCHASE RECEIPT AND DISCOUNTS"


class ReceiptConfig(BaseModel):
    """[receipt] section."""

    model_config = {"frozen": True}

    currency: str = "€"
    title: str = DEFAULT_RECEIPT_TITLE
    width: int = Field(default=60, ge=40)


class IntakeConfig(BaseModel):
    """[intake] section."""

    model_config = {"frozen": True}

    date_format: str = DEFAULT_DATE_FORMAT
    date_hint: str = "DD/MM/YYYY"
    end_marker: str = DEFAULT_END_MARKER
