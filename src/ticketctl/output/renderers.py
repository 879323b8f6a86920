"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from ticketctl.config.models import DEFAULT_RECEIPT_TITLE
from ticketctl.domain.discounts import MAX_TOTAL_DISCOUNT
from ticketctl.output.console import create_console, get_output, money, percent

if TYPE_CHECKING:
    from rich.console import Console

    from ticketctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
    title: str | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, title=title or DEFAULT_RECEIPT_TITLE)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "checkout":
        return f"{result.data.get('amount_due', 0.0):.2f}"
    if result.op == "discount":
        return percent(result.data.get("total_discount_pct", 0.0))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="ticket.ok")
    op = Text(f"  {result.op}", style="ticket.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text.assemble((f"  {key}: ", "ticket.key"), str(value)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _amount_grid(rows: list[tuple[str, str, str]]) -> Table:
    """Two-column grid: label on the left, right-aligned amount."""
    grid = Table.grid(expand=True)
    grid.add_column()
    grid.add_column(justify="right")
    for label, amount, style in rows:
        grid.add_row(Text(label), Text(amount, style=style))
    return grid


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ticket.error")
    op = Text(f"  {result.op}", style="ticket.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Receipt renderer ──────────────────────────────────────────────────


def _render_receipt(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    title: str = DEFAULT_RECEIPT_TITLE,
) -> None:
    """Render the checkout receipt: header, items, discounts, amount due."""
    d = result.data
    currency = str(d.get("currency", ""))

    console.rule(characters="=")
    console.print(Text(title, style="ticket.title"), justify="center")
    console.rule(characters="=")
    console.print(Text.assemble(("Customer: ", "ticket.key"), str(d.get("customer", ""))))
    console.print(Text.assemble(("Age: ", "ticket.key"), f"{d.get('age_years', 0)} years"))
    console.rule(characters="-")

    items = d.get("items", [])
    console.print(Text("Products:", style="ticket.title"))
    if items:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=True)
        table.add_column("Product")
        table.add_column("Qty", justify="right")
        table.add_column("Unit price", justify="right")
        table.add_column("Subtotal", justify="right", style="ticket.money")
        for item in items:
            table.add_row(
                Text(str(item.get("name", ""))),
                str(item.get("quantity", "")),
                money(item.get("unit_price", 0.0), currency),
                money(item.get("subtotal", 0.0), currency),
            )
        console.print(table)
    else:
        console.print(Text("  (no products)", style="dim"))

    console.rule(characters="-")
    console.print(
        _amount_grid(
            [
                ("Gross total:", money(d.get("gross_total", 0.0), currency), "ticket.money"),
                (
                    f"Age discount ({percent(d.get('age_discount_pct', 0.0))}):",
                    money(d.get("age_discount_amount", 0.0), currency),
                    "ticket.discount",
                ),
                (
                    f"Birthday discount ({percent(d.get('birthday_discount_pct', 0.0))}):",
                    money(d.get("birthday_discount_amount", 0.0), currency),
                    "ticket.discount",
                ),
            ]
        )
    )
    console.rule(characters="-")
    console.print(
        _amount_grid(
            [
                (
                    f"TOTAL DISCOUNT APPLIED (max {percent(MAX_TOTAL_DISCOUNT)}):",
                    percent(d.get("total_discount_pct", 0.0)),
                    "ticket.discount",
                ),
                (
                    "Total discount:",
                    f"-{money(d.get('discount_amount', 0.0), currency)}",
                    "ticket.discount",
                ),
            ]
        )
    )
    console.rule(characters="-")
    console.print(
        _amount_grid(
            [("AMOUNT DUE:", money(d.get("amount_due", 0.0), currency), "ticket.total")]
        )
    )
    console.rule(characters="=")

    message = d.get("message")
    if message:
        console.print()
        console.print(Text("Special message!", style="ticket.message"))
        console.print(Text(str(message)))

    if verbose:
        _render_meta(console, result)


# ── Discount renderer ─────────────────────────────────────────────────


def _render_discount(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    title: str = DEFAULT_RECEIPT_TITLE,
) -> None:
    """Render the engine breakdown as key-value fields."""
    d = result.data
    _status_line(console, result)
    _field(console, "birth_date", d.get("birth_date", ""))
    _field(console, "reference_date", d.get("reference_date", ""))
    _field(console, "age_years", d.get("age_years", ""))
    _field(console, "days_to_birthday", d.get("days_to_birthday", ""))
    _field(console, "age_discount", percent(d.get("age_discount_pct", 0.0)))
    _field(console, "birthday_discount", percent(d.get("birthday_discount_pct", 0.0)))
    _field(console, "total_discount", percent(d.get("total_discount_pct", 0.0)))
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    title: str = DEFAULT_RECEIPT_TITLE,
) -> None:
    """Key-value fallback for ops without a dedicated renderer."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "checkout": _render_receipt,
    "discount": _render_discount,
}
