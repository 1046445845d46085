"""Domain type definitions for cashfmt.

These types give the formatting helpers semantic names:
- CurrencyCode: Currency code as used by the precision registry (e.g. "USD", "BTC")
- LocaleTag: Locale tag in BCP-47 style (e.g. "en-US", "de-DE")
- DateFormat: Output layout accepted by the date formatter
- AdjustUnit / AdjustOperation: Closed choices for date adjustment
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal, NewType, TypedDict

CurrencyCode = NewType("CurrencyCode", str)

LocaleTag = NewType("LocaleTag", str)


class DateFormat(str, Enum):
    """Output layouts for formatted date strings."""

    YYYY_MM_DD = "YYYY-MM-DD"
    DD_MMM_YYYY = "DD MMM YYYY"
    MMM_DD_YYYY = "MMM DD YYYY"


class AdjustUnit(str, Enum):
    """Units a date can be shifted by."""

    DAYS = "days"
    YEARS = "years"


class AdjustOperation(str, Enum):
    """Direction of a date shift."""

    ADD = "add"
    SUBTRACT = "subtract"


class FormatMoneyOptions(TypedDict, total=False):
    """Optional money formatting configuration."""

    currency: str
    decimal_places: int
    locale: str


class DateFormatOptions(TypedDict, total=False):
    """Field representation hints for date formatting."""

    day: Literal["numeric", "2-digit"]
    month: Literal["numeric", "2-digit", "short", "long"]
    year: Literal["numeric", "2-digit"]


@dataclass(frozen=True)
class DateParts:
    """Rendered day, month and year fields of a date."""

    day: str
    month: str
    year: str


@dataclass(frozen=True)
class LongcodeParts:
    """Immutable result of parsing a crypto longcode."""

    address_hash: str | None
    blockchain_hash: str | None
    split_longcode: tuple[str, ...]
