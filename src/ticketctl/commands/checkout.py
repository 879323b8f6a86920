"""Command: build a purchase receipt with age and birthday discounts."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import click

from ticketctl.commands._base import TicketCommand
from ticketctl.commands._prompts import (
    date_callback,
    items_callback,
    missing_input,
    prompt_date,
    prompt_items,
    prompt_name,
)

if TYPE_CHECKING:
    from ticketctl.commands._context import AppContext
    from ticketctl.domain.line_items import LineItem


@click.command(
    cls=TicketCommand,
    examples="""\
  ticketctl checkout
  ticketctl checkout --name "Ana Ruiz" --birth-date 10/03/1990
  ticketctl checkout --name "Ana Ruiz" --birth-date 10/03/1990 \\
      --item "Bread:1.20:2" --item "Milk:0.95:6" --no-products-prompt
  ticketctl --json --no-interact checkout --name Ana --birth-date 10/03/1990 \\
      --item "Coffee:4.50:1" --today 03/03/2024""",
)
@click.option("--name", "customer", default=None, help="Customer full name.")
@click.option(
    "--birth-date",
    default=None,
    callback=date_callback,
    help="Customer birth date (DD/MM/YYYY by default).",
)
@click.option(
    "--item",
    "items",
    multiple=True,
    callback=items_callback,
    help="Product as NAME:PRICE:QUANTITY (repeatable).",
)
@click.option(
    "--no-products-prompt",
    is_flag=True,
    help="Do not prompt for more products after the --item list.",
)
@click.option(
    "--today",
    "reference_date",
    default=None,
    callback=date_callback,
    help="Reference date for age and birthday (default: today).",
)
@click.pass_obj
def checkout(
    app: AppContext,
    customer: str | None,
    birth_date: date | None,
    items: list[LineItem],
    no_products_prompt: bool,
    reference_date: date | None,
) -> None:
    """Register a purchase and print the discounted receipt."""
    from ticketctl.services.checkout import CheckoutService

    intake = app.settings.intake
    if customer is None:
        if not app.interactive:
            app.emit(missing_input("checkout", "--name"))
        customer = prompt_name()
    if birth_date is None:
        if not app.interactive:
            app.emit(missing_input("checkout", "--birth-date"))
        birth_date = prompt_date("birth", intake)
    if app.interactive and not no_products_prompt:
        items = [*items, *prompt_items(intake, app.settings.receipt.currency)]

    svc = CheckoutService(app.settings)
    app.emit(svc.checkout(customer, birth_date, items, reference_date=reference_date))
