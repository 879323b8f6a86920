"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from ticketctl.config.models import DEFAULT_RECEIPT_TITLE, IntakeConfig, ReceiptConfig


class TestReceiptConfig:
    def test_defaults(self) -> None:
        config = ReceiptConfig()
        assert config.currency == "€"
        assert config.width == 60
        assert config.title == DEFAULT_RECEIPT_TITLE

    def test_minimum_width(self) -> None:
        with pytest.raises(ValidationError):
            ReceiptConfig(width=20)


class TestIntakeConfig:
    def test_defaults(self) -> None:
        config = IntakeConfig()
        assert config.date_format == "%d/%m/%Y"
        assert config.date_hint == "DD/MM/YYYY"
        assert config.end_marker == "FIN"
