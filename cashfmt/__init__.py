"""Formatting helpers for money, dates and crypto longcodes.

The helpers are pure functions and can be imported directly from here.
"""

from cashfmt.dates import format_date_string, format_time_string, get_adjusted_date
from cashfmt.domain.models import AdjustOperation, AdjustUnit, DateFormat, LongcodeParts
from cashfmt.longcode import parse_crypto_longcode
from cashfmt.money import format_money

__all__ = [
    "format_money",
    "format_date_string",
    "format_time_string",
    "get_adjusted_date",
    "parse_crypto_longcode",
    "AdjustOperation",
    "AdjustUnit",
    "DateFormat",
    "LongcodeParts",
]
