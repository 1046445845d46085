"""Date utilities for cashfmt.

Pure functions for date and time formatting plus date arithmetic. All
formatting reads the UTC wall clock; naive datetimes are taken to be UTC.
"""

import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import assert_never

import pandas as pd
from babel.dates import get_month_names

from cashfmt.domain.errors import DateOutOfRangeError, InvalidDateInputError
from cashfmt.domain.models import AdjustOperation, AdjustUnit, DateFormat, DateFormatOptions, DateParts

DateInput = date | datetime | str | int | float

# Month names always come from this locale, whatever the caller's locale is
FORMAT_LOCALE = "en_GB"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

DEFAULT_DATE_OPTIONS: DateFormatOptions = {"day": "2-digit", "month": "2-digit", "year": "numeric"}

# Field representations each layout forces, applied over the caller's hints
LAYOUT_OPTIONS: dict[DateFormat, DateFormatOptions] = {
    DateFormat.DD_MMM_YYYY: {"day": "2-digit", "month": "short", "year": "numeric"},
    DateFormat.MMM_DD_YYYY: {"day": "2-digit", "month": "short", "year": "numeric"},
    DateFormat.YYYY_MM_DD: {"year": "numeric", "month": "2-digit", "day": "2-digit"},
}


def to_datetime(date_input: DateInput, unix: bool = False) -> datetime:
    """Normalize a date-like value to an aware UTC datetime.

    Args:
        date_input: A date, datetime, date string, or (with unix=True) a
            number of seconds since the epoch.
        unix: Treat a numeric input as a Unix timestamp in seconds.

    Returns:
        Timezone-aware datetime in UTC.

    Raises:
        InvalidDateInputError: For any other input type, a number without the
            unix flag, or a string that is not a recognizable date.
    """
    # bool is an int subclass; never treat it as a timestamp
    if isinstance(date_input, bool):
        raise InvalidDateInputError()

    if isinstance(date_input, (int, float)) and unix:
        try:
            return EPOCH + timedelta(milliseconds=date_input * 1000)
        except (OverflowError, ValueError) as e:
            raise InvalidDateInputError(f"Invalid date input: {date_input!r}") from e

    if isinstance(date_input, str):
        try:
            parsed = pd.to_datetime(date_input.strip(), utc=True)
        except (ValueError, OverflowError) as e:
            raise InvalidDateInputError(f"Invalid date input: {date_input!r}") from e
        if pd.isna(parsed):
            raise InvalidDateInputError(f"Invalid date input: {date_input!r}")
        return parsed.to_pydatetime()

    if isinstance(date_input, datetime):
        return _as_utc(date_input)

    if isinstance(date_input, date):
        return datetime.combine(date_input, time(), tzinfo=timezone.utc)

    raise InvalidDateInputError()


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def render_month(month: int, style: str) -> str:
    """Render a month number in the requested representation.

    Abbreviated names are cut to exactly three letters, since the en_GB data
    abbreviates September as "Sept".
    """
    if style == "short":
        return get_month_names("abbreviated", locale=FORMAT_LOCALE)[month][:3]
    if style == "long":
        return get_month_names("wide", locale=FORMAT_LOCALE)[month]
    if style == "numeric":
        return str(month)
    return f"{month:02d}"


def date_parts(dt: datetime, options: DateFormatOptions) -> DateParts:
    """Render the day, month and year fields of a datetime.

    Args:
        dt: Datetime to read the fields from.
        options: Representation for each field.

    Returns:
        DateParts with each field rendered as a string.
    """
    day = str(dt.day) if options.get("day") == "numeric" else f"{dt.day:02d}"
    year = f"{dt.year % 100:02d}" if options.get("year") == "2-digit" else str(dt.year)
    return DateParts(day=day, month=render_month(dt.month, options.get("month", "2-digit")), year=year)


def layout_date(parts: DateParts, fmt: DateFormat) -> str:
    """Arrange rendered date fields in the given layout."""
    if fmt is DateFormat.DD_MMM_YYYY:
        return f"{parts.day} {parts.month} {parts.year}"
    if fmt is DateFormat.MMM_DD_YYYY:
        return f"{parts.month} {parts.day} {parts.year}"
    return f"{parts.year}-{parts.month}-{parts.day}"


def resolve_format(fmt: DateFormat | str) -> DateFormat:
    """Map a layout tag to a DateFormat, using YYYY-MM-DD for unknown tags."""
    try:
        return DateFormat(fmt)
    except ValueError:
        return DateFormat.YYYY_MM_DD


def format_date_string(
    date_input: DateInput,
    options: DateFormatOptions | None = None,
    fmt: DateFormat | str = DateFormat.YYYY_MM_DD,
    unix: bool = False,
) -> str:
    """Format a date-like value as a date string.

    The day, month and year are read in UTC. Naive datetimes are taken to be
    UTC, not the host's local time, and aware values are converted to UTC
    first, so "2023-05-15T23:30:00-05:00" formats as 2023-05-16.

    Args:
        date_input: A date, datetime, date string, or Unix timestamp.
        options: Field representation hints. The layout overrides the fields
            it needs, so hints only fill in what the layout leaves open.
        fmt: Output layout: "YYYY-MM-DD", "DD MMM YYYY" or "MMM DD YYYY".
            Unknown layouts fall back to "YYYY-MM-DD".
        unix: Treat a numeric input as a Unix timestamp in seconds.

    Returns:
        Formatted date, e.g. "2023-05-15", "15 May 2023" or "May 15 2023".

    Raises:
        InvalidDateInputError: If the input cannot be interpreted as a date.
    """
    dt = to_datetime(date_input, unix)
    layout = resolve_format(fmt)

    merged: DateFormatOptions = {**DEFAULT_DATE_OPTIONS, **(options or {}), **LAYOUT_OPTIONS[layout]}
    return layout_date(date_parts(dt, merged), layout)


def format_time_string(date_input: DateInput, unix: bool = False) -> str:
    """Format a date-like value as a UTC time string.

    Args:
        date_input: A date, datetime, date string, or Unix timestamp.
        unix: Treat a numeric input as a Unix timestamp in seconds.

    Returns:
        Time in "HH:MM:SS GMT" form, e.g. "14:30:00 GMT".

    Raises:
        InvalidDateInputError: If the input cannot be interpreted as a date.
    """
    dt = to_datetime(date_input, unix)
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} GMT"


def parse_unit(unit: AdjustUnit | str) -> AdjustUnit | None:
    """Convert a unit name to AdjustUnit, or None if it is not supported."""
    try:
        return AdjustUnit(unit)
    except ValueError:
        return None


def shift_years(dt: datetime, years: int) -> datetime:
    """Move a datetime by whole years, keeping month, day and time.

    Feb 29 becomes Feb 28 when the target year is not a leap year.

    Raises:
        ValueError: If the target year is outside 1-9999.
    """
    target_year = dt.year + years
    if dt.month == 2 and dt.day == 29 and not calendar.isleap(target_year):
        return dt.replace(year=target_year, day=28)
    return dt.replace(year=target_year)


def get_adjusted_date(
    amount: int,
    unit: AdjustUnit | str = AdjustUnit.DAYS,
    operation: AdjustOperation | str = AdjustOperation.ADD,
    now: datetime | None = None,
) -> datetime:
    """Calculate a date by shifting the current moment by days or years.

    Used for date picker bounds, expiry dates and similar.

    Args:
        amount: Number of days or years to shift by.
        unit: "days" or "years". Any other unit leaves the date unshifted.
        operation: "add" adds the amount; anything else subtracts it.
        now: Starting moment. Defaults to the current UTC time.

    Returns:
        New datetime representing the adjusted date.

    Raises:
        DateOutOfRangeError: If the result falls outside years 1-9999, the
            range a datetime can hold.
    """
    start = now if now is not None else datetime.now(timezone.utc)
    adjusted_amount = amount if operation == AdjustOperation.ADD else -amount

    try:
        match parse_unit(unit):
            case AdjustUnit.DAYS:
                return start + timedelta(days=adjusted_amount)
            case AdjustUnit.YEARS:
                return shift_years(start, adjusted_amount)
            case None:
                return start
            case other:
                assert_never(other)
    except (OverflowError, ValueError) as e:
        raise DateOutOfRangeError(f"Adjusted date is out of range: {adjusted_amount:+d}") from e
