"""Command: show the discount breakdown for a birth date."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import click

from ticketctl.commands._base import TicketCommand
from ticketctl.commands._prompts import date_callback

if TYPE_CHECKING:
    from ticketctl.commands._context import AppContext


@click.command(
    cls=TicketCommand,
    examples="""\
  ticketctl discount 10/03/1990
  ticketctl discount 10/03/2010 --today 03/03/2024
  ticketctl --json discount 01/01/1950""",
)
@click.argument("birth_date", callback=date_callback)
@click.option(
    "--today",
    "reference_date",
    default=None,
    callback=date_callback,
    help="Reference date for age and birthday (default: today).",
)
@click.pass_obj
def discount(app: AppContext, birth_date: date, reference_date: date | None) -> None:
    """Show age, days to birthday, and the capped discount for BIRTH_DATE."""
    from ticketctl.services.checkout import CheckoutService

    svc = CheckoutService(app.settings)
    app.emit(svc.discount(birth_date, reference_date=reference_date))
