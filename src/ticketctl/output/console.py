"""Rich Console factory and theme for ticketctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TICKET_THEME = Theme(
    {
        "ticket.ok": "bold green",
        "ticket.error": "bold red",
        "ticket.warning": "bold yellow",
        "ticket.op": "bold cyan",
        "ticket.key": "dim",
        "ticket.title": "bold",
        "ticket.money": "cyan",
        "ticket.discount": "magenta",
        "ticket.total": "bold green",
        "ticket.message": "bold yellow",
    }
)

DEFAULT_WIDTH = 60


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override render width (receipt width from settings).
    """
    return Console(
        file=StringIO(),
        theme=TICKET_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def money(amount: float, currency: str) -> str:
    """Format a currency amount with two decimals and a trailing symbol.

    Examples:
        >>> money(12.5, "€")
        '12.50 €'
    """
    return f"{amount:.2f} {currency}".rstrip()


def percent(value: float) -> str:
    """Format a discount percentage without decimals.

    Examples:
        >>> percent(20.0)
        '20%'
    """
    return f"{value:.0f}%"
