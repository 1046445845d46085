"""Configuration file management for cashfmt."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from cashfmt.domain.currencies import CURRENCY_PRECISION, DEFAULT_CURRENCY
from cashfmt.money import DEFAULT_LOCALE


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "cashfmt" / "config.toml"


def default_config() -> dict[str, Any]:
    """Build the configuration written by 'cashfmt init'."""
    return {
        "defaults": {
            "currency": DEFAULT_CURRENCY,
            "locale": DEFAULT_LOCALE,
        },
        "currencies": {},
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary, or an empty dictionary if the file doesn't exist.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return {}

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_defaults(config: dict[str, Any]) -> tuple[str, str]:
    """Get the default currency and locale from a configuration.

    Args:
        config: Configuration dictionary.

    Returns:
        Tuple of (currency, locale), falling back to USD and en-US.
    """
    defaults = config.get("defaults", {})
    if not isinstance(defaults, dict):
        defaults = {}
    currency = defaults.get("currency") or DEFAULT_CURRENCY
    locale = defaults.get("locale") or DEFAULT_LOCALE
    return str(currency), str(locale)


def get_currency_registry(config: dict[str, Any]) -> dict[str, int]:
    """Merge configured currency precisions over the built-in registry.

    Entries that are not non-negative integers are ignored.

    Args:
        config: Configuration dictionary.

    Returns:
        New precision table mapping currency code to decimal places.
    """
    registry = dict(CURRENCY_PRECISION)

    overrides = config.get("currencies", {})
    if not isinstance(overrides, dict):
        return registry

    for code, precision in overrides.items():
        if isinstance(precision, int) and not isinstance(precision, bool) and precision >= 0:
            registry[code] = precision

    return registry
