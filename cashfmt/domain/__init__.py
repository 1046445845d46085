"""Domain models and types for cashfmt.

This package holds the value types shared by the formatting helpers:
- No I/O operations
- No shared mutable state
- Immutable result objects
"""

from cashfmt.domain.currencies import CURRENCY_PRECISION, DEFAULT_CURRENCY, get_precision
from cashfmt.domain.errors import CashfmtError, DateOutOfRangeError, InvalidDateInputError
from cashfmt.domain.models import (
    AdjustOperation,
    AdjustUnit,
    CurrencyCode,
    DateFormat,
    DateFormatOptions,
    DateParts,
    FormatMoneyOptions,
    LocaleTag,
    LongcodeParts,
)

__all__ = [
    "CURRENCY_PRECISION",
    "DEFAULT_CURRENCY",
    "get_precision",
    "CashfmtError",
    "DateOutOfRangeError",
    "InvalidDateInputError",
    "AdjustOperation",
    "AdjustUnit",
    "CurrencyCode",
    "DateFormat",
    "DateFormatOptions",
    "DateParts",
    "FormatMoneyOptions",
    "LocaleTag",
    "LongcodeParts",
]
