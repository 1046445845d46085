"""Admin commands for configuration and the currency registry."""

import sys
import tomllib

from rich.console import Console
from rich.table import Table

from cashfmt.config import create_default_config, get_config_path, get_currency_registry, get_defaults, load_config
from cashfmt.domain.currencies import CURRENCY_PRECISION

console = Console()


def init_command(force: bool = False) -> None:
    """Create the cashfmt configuration file."""
    config_path = get_config_path()

    # Guard: refuse to overwrite without force flag
    if config_path.exists() and not force:
        console.print("[yellow]Config already exists. Use --force to overwrite.[/yellow]")
        console.print(f"[dim]Config: {config_path}[/dim]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Failed to create config: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")


def currencies_command() -> None:
    """List the currency precision registry, including configured overrides."""
    try:
        config = load_config()
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file {get_config_path()}: {e}[/red]", style="bold")
        sys.exit(1)

    registry = get_currency_registry(config)
    default_currency, default_locale = get_defaults(config)

    table = Table(title="Currency precision")
    table.add_column("Currency", style="cyan")
    table.add_column("Decimals", justify="right")
    table.add_column("Source", style="dim")

    for code in sorted(registry, key=str.upper):
        source = "built-in" if CURRENCY_PRECISION.get(code) == registry[code] else "config"
        table.add_row(code, str(registry[code]), source)

    console.print(table)
    console.print(f"[dim]Default currency: {default_currency}, locale: {default_locale}[/dim]")
