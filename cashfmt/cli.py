"""CLI entry point for cashfmt."""

import typer

from cashfmt.commands.admin import currencies_command, init_command
from cashfmt.commands.format import (
    adjust_command,
    date_command,
    longcode_command,
    money_command,
    time_command,
)
from cashfmt.logs import setup_logging

app = typer.Typer(
    name="cashfmt",
    help="Formatting helpers for money, dates and crypto longcodes",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Formatting helpers for money, dates and crypto longcodes."""
    setup_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the cashfmt configuration file."""
    init_command(force)


@app.command()
def currencies() -> None:
    """List currencies and their decimal places."""
    currencies_command()


@app.command()
def money(
    amount: float,
    currency: str = typer.Option(None, "--currency", "-c", help="Currency code (default from config, else USD)"),
    decimals: int = typer.Option(None, "--decimals", "-d", help="Decimal places (overrides currency precision)"),
    locale: str = typer.Option(None, "--locale", "-l", help="Locale tag, e.g. de-DE (default from config, else en-US)"),
) -> None:
    """Format an amount of money."""
    money_command(amount, currency, decimals, locale)


@app.command(name="date")
def date(
    value: str,
    fmt: str = typer.Option("YYYY-MM-DD", "--format", help="'YYYY-MM-DD', 'DD MMM YYYY' or 'MMM DD YYYY'"),
    unix: bool = typer.Option(False, "--unix", "-u", help="Treat VALUE as a Unix timestamp in seconds"),
) -> None:
    """Format a date."""
    date_command(value, fmt, unix)


@app.command(name="time")
def time(
    value: str,
    unix: bool = typer.Option(False, "--unix", "-u", help="Treat VALUE as a Unix timestamp in seconds"),
) -> None:
    """Format the UTC time of a date."""
    time_command(value, unix)


@app.command()
def adjust(
    amount: int,
    unit: str = typer.Option("days", "--unit", help="'days' or 'years'"),
    operation: str = typer.Option("add", "--operation", help="'add' or 'subtract'"),
    fmt: str = typer.Option("YYYY-MM-DD", "--format", help="Output date layout"),
) -> None:
    """Show today's date shifted by days or years."""
    adjust_command(amount, unit, operation, fmt)


@app.command()
def longcode(text: str) -> None:
    """Extract the address and blockchain hashes from a longcode."""
    longcode_command(text)


if __name__ == "__main__":
    app()
