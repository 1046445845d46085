"""Formatting commands for money, dates, times and longcodes."""

import sys
import tomllib

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cashfmt.config import get_currency_registry, get_defaults, load_config
from cashfmt.dates import format_date_string, format_time_string, get_adjusted_date
from cashfmt.domain.errors import DateOutOfRangeError, InvalidDateInputError
from cashfmt.domain.models import DateFormat, FormatMoneyOptions
from cashfmt.longcode import parse_crypto_longcode
from cashfmt.money import format_money

console = Console()


def parse_date_value(value: str, unix: bool) -> str | float:
    """Convert a CLI date argument to the input expected by the formatters.

    Args:
        value: Raw argument text.
        unix: Whether the value is a Unix timestamp in seconds.

    Returns:
        The timestamp as a number when unix is set, else the text unchanged.
    """
    if not unix:
        return value

    try:
        return float(value)
    except ValueError:
        console.print(f"[red]Invalid Unix timestamp: {value}[/red]", style="bold")
        sys.exit(1)


def money_command(
    amount: float,
    currency: str | None = None,
    decimals: int | None = None,
    locale: str | None = None,
) -> None:
    """Print an amount formatted for a currency and locale."""
    try:
        config = load_config()
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file: {e}[/red]", style="bold")
        sys.exit(1)
    default_currency, default_locale = get_defaults(config)

    options: FormatMoneyOptions = {
        "currency": currency or default_currency,
        "locale": locale or default_locale,
    }
    if decimals is not None:
        options["decimal_places"] = decimals

    console.print(format_money(amount, options, registry=get_currency_registry(config)))


def date_command(value: str, fmt: str = DateFormat.YYYY_MM_DD.value, unix: bool = False) -> None:
    """Print a date in the requested layout."""
    date_input = parse_date_value(value, unix)

    try:
        console.print(format_date_string(date_input, fmt=fmt, unix=unix))
    except InvalidDateInputError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)


def time_command(value: str, unix: bool = False) -> None:
    """Print the UTC time of a date."""
    date_input = parse_date_value(value, unix)

    try:
        console.print(format_time_string(date_input, unix=unix))
    except InvalidDateInputError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)


def adjust_command(
    amount: int,
    unit: str = "days",
    operation: str = "add",
    fmt: str = DateFormat.YYYY_MM_DD.value,
) -> None:
    """Print today's date shifted by an amount of days or years."""
    try:
        adjusted = get_adjusted_date(amount, unit, operation)
    except DateOutOfRangeError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        console.print("[dim]Dates must fall between the years 1 and 9999.[/dim]")
        sys.exit(1)

    console.print(format_date_string(adjusted, fmt=fmt))


def longcode_command(longcode: str) -> None:
    """Print the hashes found in a crypto longcode."""
    parts = parse_crypto_longcode(longcode)

    table = Table(title="Longcode")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Address hash", escape(parts.address_hash) if parts.address_hash else "[dim]not found[/dim]")
    table.add_row("Blockchain hash", escape(parts.blockchain_hash) if parts.blockchain_hash else "[dim]not found[/dim]")
    for i, segment in enumerate(parts.split_longcode):
        table.add_row(f"Segment {i}", escape(segment))

    console.print(table)
