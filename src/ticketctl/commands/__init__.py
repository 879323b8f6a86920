"""Subcommand modules for ticketctl.

Provides register_commands() which uses deferred imports to keep
``ticketctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from ticketctl.commands.checkout import checkout
    from ticketctl.commands.discount import discount

    cli.add_command(checkout)
    cli.add_command(discount)
