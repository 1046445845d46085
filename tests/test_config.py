"""Tests for cashfmt.config."""

import stat
from pathlib import Path

import pytest

from cashfmt.config import (
    create_default_config,
    get_config_path,
    get_currency_registry,
    get_defaults,
    load_config,
    save_config,
)
from cashfmt.domain.currencies import CURRENCY_PRECISION


class TestConfigFile:
    """Tests for config file handling."""

    def test_config_path_follows_xdg(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should place the config under XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "cashfmt" / "config.toml"

    def test_config_path_falls_back_to_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should fall back to ~/.config without XDG_CONFIG_HOME."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert get_config_path() == tmp_path / ".config" / "cashfmt" / "config.toml"

    def test_create_default_config(self, tmp_path: Path) -> None:
        """Should write default settings with owner-only permissions."""
        config_path = tmp_path / "nested" / "config.toml"
        create_default_config(config_path)

        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600
        assert load_config(config_path) == {"defaults": {"currency": "USD", "locale": "en-US"}, "currencies": {}}

    def test_missing_config_is_empty(self, tmp_path: Path) -> None:
        """Should return an empty config when no file exists."""
        assert load_config(tmp_path / "missing.toml") == {}

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Should round-trip a saved configuration."""
        config_path = tmp_path / "config.toml"
        save_config({"currencies": {"DOGE": 4}}, config_path)

        assert load_config(config_path) == {"currencies": {"DOGE": 4}}


class TestGetDefaults:
    """Tests for get_defaults."""

    def test_reads_defaults(self) -> None:
        """Should read currency and locale from the defaults table."""
        config = {"defaults": {"currency": "EUR", "locale": "de-DE"}}

        assert get_defaults(config) == ("EUR", "de-DE")

    def test_falls_back_to_builtins(self) -> None:
        """Should fall back to USD and en-US."""
        assert get_defaults({}) == ("USD", "en-US")
        assert get_defaults({"defaults": "nonsense"}) == ("USD", "en-US")


class TestGetCurrencyRegistry:
    """Tests for get_currency_registry."""

    def test_without_overrides(self) -> None:
        """Should equal the built-in registry."""
        assert get_currency_registry({}) == CURRENCY_PRECISION

    def test_overrides_and_extends(self) -> None:
        """Should let config override and add currencies."""
        registry = get_currency_registry({"currencies": {"BTC": 6, "DOGE": 4}})

        assert registry["BTC"] == 6
        assert registry["DOGE"] == 4
        assert registry["USD"] == 2

    def test_ignores_invalid_entries(self) -> None:
        """Should skip negative, non-integer and boolean precisions."""
        registry = get_currency_registry({"currencies": {"A": -1, "B": "2", "C": 1.5, "D": True}})

        assert registry == CURRENCY_PRECISION

    def test_does_not_mutate_builtin_registry(self) -> None:
        """Should return a new table."""
        get_currency_registry({"currencies": {"DOGE": 4}})

        assert "DOGE" not in CURRENCY_PRECISION
