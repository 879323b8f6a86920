"""Root CLI group for ticketctl with global flags and command registration."""

from __future__ import annotations

import click

from ticketctl import __version__
from ticketctl.commands import register_commands
from ticketctl.commands._base import TicketGroup
from ticketctl.commands._context import AppContext
from ticketctl.config.settings import TicketSettings


@click.group(
    cls=TicketGroup,
    invoke_without_command=True,
    examples="""\
  ticketctl checkout
  ticketctl discount 10/03/1990
  ticketctl --json discount 10/03/2010 --today 03/03/2024""",
)
@click.version_option(version=__version__, prog_name="ticketctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
) -> None:
    """ticketctl — checkout receipts with age and birthday discounts."""
    settings = TicketSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
