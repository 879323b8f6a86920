"""Interactive entry loops and Click callbacks for customer input.

Every loop re-prompts until the parser accepts the text; bad input is
reported on stderr and never ends the program. Prompts go to stderr as
well, so ``--json`` output on stdout stays machine readable.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import TYPE_CHECKING, Any

import click

from ticketctl.domain.intake import (
    ParseOutcome,
    is_end_marker,
    parse_date,
    parse_item_spec,
    parse_name,
    parse_price,
    parse_quantity,
)
from ticketctl.domain.line_items import LineItem
from ticketctl.output.console import money
from ticketctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from ticketctl.config.models import IntakeConfig
    from ticketctl.config.settings import TicketSettings


def prompt_until_valid(
    label: str,
    parse: Callable[[str], ParseOutcome],
    *,
    hint: str = "",
) -> Any:
    """Prompt for *label* until *parse* accepts the answer; return its value."""
    while True:
        raw = click.prompt(label, default="", show_default=False, err=True)
        outcome = parse(raw)
        if outcome.ok:
            return outcome.value
        suffix = f" {hint}" if hint else ""
        click.echo(f"Error: {outcome.message}{suffix}", err=True)


def prompt_name() -> str:
    return prompt_until_valid("Full name", parse_name)


def prompt_date(kind: str, intake: IntakeConfig) -> date:
    """Prompt for a date in the configured format (e.g. DD/MM/YYYY)."""
    return prompt_until_valid(
        f"Date of {kind} ({intake.date_hint})",
        lambda text: parse_date(text, intake.date_format),
        hint=f"Please use {intake.date_hint}.",
    )


def prompt_items(intake: IntakeConfig, currency: str) -> list[LineItem]:
    """Collect products until the end marker (or a blank name) is entered."""
    items: list[LineItem] = []
    click.echo("--- Product entry ---", err=True)
    while True:
        name = click.prompt(
            f"Product name (or '{intake.end_marker}' to finish)",
            default="",
            show_default=False,
            err=True,
        )
        if is_end_marker(name, intake.end_marker):
            break
        name = name.strip()
        price = prompt_until_valid(f"Unit price of {name}", parse_price)
        quantity = prompt_until_valid(f"Quantity of {name}", parse_quantity)
        item = LineItem(name=name, unit_price=price, quantity=quantity)
        items.append(item)
        click.echo(f"Product added. Subtotal: {money(item.subtotal, currency)}", err=True)
    return items


def missing_input(op: str, option: str) -> ServiceResult:
    """Error result for a required value absent in non-interactive mode."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="MISSING_INPUT",
            message=f"{option} is required with --no-interact",
            detail={"option": option},
        ),
    )


# ── Click callbacks ───────────────────────────────────────────────────


def _settings(ctx: click.Context) -> TicketSettings:
    from ticketctl.commands._context import AppContext

    app = ctx.find_object(AppContext)
    if app is None:
        from ticketctl.config.settings import TicketSettings

        return TicketSettings.from_cli()
    return app.settings


def date_callback(ctx: click.Context, _param: click.Parameter, value: str | None) -> date | None:
    """Parse a date option/argument with the configured format."""
    if value is None:
        return None
    intake = _settings(ctx).intake
    outcome = parse_date(value, intake.date_format)
    if not outcome.ok:
        raise click.BadParameter(f"{value!r}: {outcome.message} Expected {intake.date_hint}.")
    return outcome.value


def items_callback(
    _ctx: click.Context, _param: click.Parameter, value: tuple[str, ...]
) -> list[LineItem]:
    """Parse repeated ``NAME:PRICE:QUANTITY`` options into line items."""
    items: list[LineItem] = []
    for spec in value:
        outcome = parse_item_spec(spec)
        if not outcome.ok:
            raise click.BadParameter(f"{spec!r}: {outcome.message}")
        items.append(outcome.value)
    return items
