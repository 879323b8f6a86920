"""Shared pytest fixtures and test helpers for ticketctl tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from ticketctl.config.settings import TicketSettings
from ticketctl.domain.line_items import LineItem


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no ticketctl env vars.

    Keeps a developer's own ``ticketctl.toml`` or ``TICKETCTL_*`` settings
    from leaking into assertions.
    """
    for name in list(os.environ):
        if name.startswith("TICKETCTL_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> TicketSettings:
    """Default settings with no TOML file."""
    return TicketSettings.from_cli(start=tmp_path)


@pytest.fixture
def basket() -> list[LineItem]:
    """Three line items totalling 50.00."""
    return [
        LineItem(name="Bread", unit_price=1.25, quantity=4),
        LineItem(name="Coffee", unit_price=12.50, quantity=2),
        LineItem(name="Cheese", unit_price=20.00, quantity=1),
    ]
