"""Parsers for customer and product entry.

Each parser returns a :class:`ParseOutcome` carrying either a value or a
:class:`ParseFailure` kind, never raising on bad input. The prompt loop in
the CLI re-asks until it gets a value.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from ticketctl.domain.line_items import LineItem

DEFAULT_DATE_FORMAT = "%d/%m/%Y"
DEFAULT_END_MARKER = "FIN"
ITEM_SPEC_SEPARATOR = ":"


class ParseFailure(StrEnum):
    """Why a piece of entered text was rejected."""

    EMPTY = "empty"
    INVALID_DATE = "invalid_date"
    NOT_A_NUMBER = "not_a_number"
    NEGATIVE_PRICE = "negative_price"
    NOT_AN_INTEGER = "not_an_integer"
    NON_POSITIVE_QUANTITY = "non_positive_quantity"
    INVALID_ITEM_SPEC = "invalid_item_spec"


FAILURE_MESSAGES: dict[ParseFailure, str] = {
    ParseFailure.EMPTY: "A value is required.",
    ParseFailure.INVALID_DATE: "Invalid date format.",
    ParseFailure.NOT_A_NUMBER: "Invalid input. Enter a number for the price.",
    ParseFailure.NEGATIVE_PRICE: "The price cannot be negative.",
    ParseFailure.NOT_AN_INTEGER: "Invalid input. Enter a whole number for the quantity.",
    ParseFailure.NON_POSITIVE_QUANTITY: "The quantity must be positive.",
    ParseFailure.INVALID_ITEM_SPEC: "Expected NAME:PRICE:QUANTITY.",
}


class ParseOutcome(BaseModel):
    """Result of parsing one entry: exactly one of ``value`` or ``failure``."""

    model_config = {"frozen": True}

    value: Any = None
    failure: ParseFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def message(self) -> str:
        """User-facing explanation of the failure ('' on success)."""
        if self.failure is None:
            return ""
        return FAILURE_MESSAGES[self.failure]


def _ok(value: Any) -> ParseOutcome:
    return ParseOutcome(value=value)


def _fail(failure: ParseFailure) -> ParseOutcome:
    return ParseOutcome(failure=failure)


def parse_date(text: str, fmt: str = DEFAULT_DATE_FORMAT) -> ParseOutcome:
    """Parse a calendar date using a ``strptime`` pattern.

    ``strptime`` does not require zero padding, so the default pattern
    takes ``1/3/1990`` as well as ``01/03/1990``.
    """
    raw = text.strip()
    if not raw:
        return _fail(ParseFailure.EMPTY)
    try:
        parsed: date = datetime.strptime(raw, fmt).date()
    except ValueError:
        return _fail(ParseFailure.INVALID_DATE)
    return _ok(parsed)


def parse_price(text: str) -> ParseOutcome:
    """Parse a non-negative unit price. Accepts ``,`` as decimal separator."""
    raw = text.strip().replace(",", ".")
    if not raw:
        return _fail(ParseFailure.EMPTY)
    try:
        price = float(raw)
    except ValueError:
        return _fail(ParseFailure.NOT_A_NUMBER)
    if not math.isfinite(price):
        return _fail(ParseFailure.NOT_A_NUMBER)
    if price < 0:
        return _fail(ParseFailure.NEGATIVE_PRICE)
    return _ok(price)


def parse_quantity(text: str) -> ParseOutcome:
    """Parse a positive whole quantity."""
    raw = text.strip()
    if not raw:
        return _fail(ParseFailure.EMPTY)
    try:
        quantity = int(raw)
    except ValueError:
        return _fail(ParseFailure.NOT_AN_INTEGER)
    if quantity <= 0:
        return _fail(ParseFailure.NON_POSITIVE_QUANTITY)
    return _ok(quantity)


def is_end_marker(text: str, marker: str = DEFAULT_END_MARKER) -> bool:
    """True when product entry should stop (marker, any case, or blank)."""
    raw = text.strip()
    return not raw or raw.casefold() == marker.casefold()


def parse_item_spec(spec: str) -> ParseOutcome:
    """Parse ``NAME:PRICE:QUANTITY`` into a :class:`LineItem`.

    The name may itself contain ``:``; price and quantity are taken from
    the right. Returns the first failing part's failure kind.

    Examples:
        >>> parse_item_spec("Bread:1.20:2").value.subtotal
        2.4
        >>> parse_item_spec("Bread").failure
        <ParseFailure.INVALID_ITEM_SPEC: 'invalid_item_spec'>
    """
    parts = spec.rsplit(ITEM_SPEC_SEPARATOR, 2)
    if len(parts) != 3 or not parts[0].strip():
        return _fail(ParseFailure.INVALID_ITEM_SPEC)
    name, price_text, quantity_text = parts

    price = parse_price(price_text)
    if not price.ok:
        return price
    quantity = parse_quantity(quantity_text)
    if not quantity.ok:
        return quantity
    return _ok(LineItem(name=name.strip(), unit_price=price.value, quantity=quantity.value))


def parse_name(text: str) -> ParseOutcome:
    """Accept any non-blank label, trimmed."""
    raw = text.strip()
    if not raw:
        return _fail(ParseFailure.EMPTY)
    return _ok(raw)
