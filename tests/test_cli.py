"""Tests for the cashfmt CLI."""

import logging
import re
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cashfmt.cli import app
from cashfmt.config import get_config_path, save_config

runner = CliRunner()

ADDRESS = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"
TX_HASH = "0f3a5b1c9e7f2d4a6b8c0e1f3a5b7c9d0e2"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield tmp_path
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def write_config(config: dict) -> None:
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(config, config_path)


class TestMoneyCommand:
    """Tests for 'cashfmt money'."""

    def test_default_formatting(self) -> None:
        """Should format with USD and en-US by default."""
        result = runner.invoke(app, ["money", "1234.56"])

        assert result.exit_code == 0
        assert "1,234.56" in result.output

    def test_options(self) -> None:
        """Should apply currency, locale and decimals options."""
        result = runner.invoke(app, ["money", "1234.56", "--currency", "EUR", "--locale", "de-DE", "--decimals", "1"])

        assert result.exit_code == 0
        assert "1.234,6" in result.output

    def test_defaults_from_config(self) -> None:
        """Should read default currency and locale from the config file."""
        write_config({"defaults": {"currency": "EUR", "locale": "de-DE"}})

        result = runner.invoke(app, ["money", "1234.5"])

        assert result.exit_code == 0
        assert "1.234,50" in result.output

    def test_configured_currency_precision(self) -> None:
        """Should use precisions added in the config file."""
        write_config({"currencies": {"DOGE": 4}})

        result = runner.invoke(app, ["money", "2.5", "--currency", "DOGE"])

        assert result.exit_code == 0
        assert "2.5000" in result.output


class TestDateCommands:
    """Tests for 'cashfmt date' and 'cashfmt time'."""

    def test_date_layout(self) -> None:
        """Should print the date in the requested layout."""
        result = runner.invoke(app, ["date", "2023-05-15", "--format", "DD MMM YYYY"])

        assert result.exit_code == 0
        assert "15 May 2023" in result.output

    def test_date_unix(self) -> None:
        """Should accept Unix timestamps with --unix."""
        result = runner.invoke(app, ["date", "1684161000", "--unix"])

        assert result.exit_code == 0
        assert "2023-05-15" in result.output

    def test_invalid_date(self) -> None:
        """Should exit with an error for an invalid date."""
        result = runner.invoke(app, ["date", "not a date"])

        assert result.exit_code == 1
        assert "Invalid date input" in result.output

    def test_time_unix(self) -> None:
        """Should print the UTC time of a Unix timestamp."""
        result = runner.invoke(app, ["time", "1684161000", "--unix"])

        assert result.exit_code == 0
        assert "14:30:00 GMT" in result.output

    def test_time_invalid_timestamp(self) -> None:
        """Should exit with an error for a non-numeric timestamp."""
        result = runner.invoke(app, ["time", "abc", "--unix"])

        assert result.exit_code == 1
        assert "Invalid Unix timestamp" in result.output


class TestAdjustCommand:
    """Tests for 'cashfmt adjust'."""

    def test_prints_adjusted_date(self) -> None:
        """Should print a date."""
        result = runner.invoke(app, ["adjust", "5"])

        assert result.exit_code == 0
        assert re.search(r"\d{4}-\d{2}-\d{2}", result.output)

    def test_unknown_unit_prints_today(self) -> None:
        """Should print the unshifted date for an unsupported unit."""
        result = runner.invoke(app, ["adjust", "1", "--unit", "weeks"])

        assert result.exit_code == 0
        assert re.search(r"\d{4}-\d{2}-\d{2}", result.output)

    def test_out_of_range(self) -> None:
        """Should exit with an error when the date leaves the supported range."""
        result = runner.invoke(app, ["adjust", "9000", "--unit", "years"])

        assert result.exit_code == 1
        assert "out of range" in result.output


class TestLongcodeCommand:
    """Tests for 'cashfmt longcode'."""

    def test_prints_hashes(self) -> None:
        """Should print both extracted hashes."""
        result = runner.invoke(app, ["longcode", f"Address: {ADDRESS}, transaction: {TX_HASH}"])

        assert result.exit_code == 0
        assert ADDRESS in result.output
        assert TX_HASH in result.output

    def test_reports_missing_hash(self) -> None:
        """Should mark hashes that were not found."""
        result = runner.invoke(app, ["longcode", "Address: short"])

        assert result.exit_code == 0
        assert "not found" in result.output


class TestAdminCommands:
    """Tests for 'cashfmt init' and 'cashfmt currencies'."""

    def test_init_creates_config(self) -> None:
        """Should create the config file."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert get_config_path().exists()

    def test_init_refuses_overwrite(self) -> None:
        """Should refuse to overwrite without --force."""
        runner.invoke(app, ["init"])
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_init_force(self) -> None:
        """Should overwrite with --force."""
        runner.invoke(app, ["init"])
        result = runner.invoke(app, ["init", "--force"])

        assert result.exit_code == 0

    def test_currencies(self) -> None:
        """Should list built-in and configured currencies."""
        write_config({"currencies": {"DOGE": 4}})

        result = runner.invoke(app, ["currencies"])

        assert result.exit_code == 0
        assert "BTC" in result.output
        assert "DOGE" in result.output
        assert "config" in result.output
