"""Locale-aware money formatting.

Amounts are rendered with the grouping and decimal punctuation of a locale,
without any currency symbol. Formatting never raises: on failure the plain
value is returned as a string.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from babel import Locale
from babel.numbers import format_decimal

from cashfmt.domain.currencies import DEFAULT_CURRENCY, get_precision
from cashfmt.domain.models import FormatMoneyOptions

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"

# Largest fraction digit count accepted, matching ECMA-402 number formatting
MAX_DECIMAL_PLACES = 20


def parse_locale(tag: str) -> Locale:
    """Parse a locale tag such as "en-US" or "de_DE" into a Babel locale.

    Raises:
        ValueError: If the tag is malformed.
        babel.UnknownLocaleError: If no locale data exists for the tag.
    """
    sep = "-" if "-" in tag else "_"
    return Locale.parse(tag, sep=sep)


def resolve_decimal_places(
    options: FormatMoneyOptions,
    registry: dict[str, int] | None = None,
) -> int:
    """Work out how many decimal places to show.

    An explicit decimal_places option wins, otherwise the precision registered
    for the currency (USD when none is given) is used.

    Raises:
        KeyError: If the currency is not registered.
        ValueError: If the resulting count is out of range.
    """
    decimal_places = options.get("decimal_places")
    if decimal_places is None:
        decimal_places = get_precision(options.get("currency") or DEFAULT_CURRENCY, registry)

    if isinstance(decimal_places, bool) or not isinstance(decimal_places, int):
        raise ValueError(f"decimal places must be an integer, got {decimal_places!r}")
    if not 0 <= decimal_places <= MAX_DECIMAL_PLACES:
        raise ValueError(f"decimal places must be between 0 and {MAX_DECIMAL_PLACES}, got {decimal_places!r}")
    return decimal_places


def build_pattern(locale: Locale, decimal_places: int) -> str:
    """Build a number pattern with the locale's grouping and a fixed fraction.

    Args:
        locale: Babel locale whose standard decimal pattern supplies grouping.
        decimal_places: Exact number of fraction digits.

    Returns:
        Pattern such as "#,##0.00" (or "#,##,##0.00" for Indian grouping).
    """
    integer_part = locale.decimal_formats[None].pattern.split(";")[0].split(".")[0]
    if decimal_places == 0:
        return integer_part
    return f"{integer_part}.{'0' * decimal_places}"


def format_money(
    number: int | float | Decimal,
    options: FormatMoneyOptions | None = None,
    registry: dict[str, int] | None = None,
) -> str:
    """Format a number as a human-readable monetary amount.

    Priority of options: decimal_places -> currency precision -> USD precision.

    Args:
        number: The numeric value to format.
        options: Optional currency, decimal_places and locale (default "en-US").
        registry: Currency precision table. Defaults to the built-in registry.

    Returns:
        The formatted amount, e.g. "1,234.56". If anything goes wrong while
        formatting, the original number as a string.

    Example:
        >>> format_money(1234.56, {"currency": "EUR", "locale": "de-DE", "decimal_places": 1})
        '1.234,6'
    """
    options = options or {}
    try:
        locale = parse_locale(options.get("locale") or DEFAULT_LOCALE)
        decimal_places = resolve_decimal_places(options, registry)

        # Round half away from zero before Babel applies its own quantization
        value = Decimal(str(number))
        if value.is_finite():
            value = value.quantize(Decimal(1).scaleb(-decimal_places), rounding=ROUND_HALF_UP)

        return format_decimal(value, format=build_pattern(locale, decimal_places), locale=locale)
    except Exception as e:
        logger.debug(f"Failed to format money value {number!r} with {options!r}: {e}")
        return str(number)
