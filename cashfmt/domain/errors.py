"""Exception types raised by cashfmt."""


class CashfmtError(Exception):
    """Base class for cashfmt errors."""


class InvalidDateInputError(CashfmtError, ValueError):
    """Raised when a value cannot be interpreted as a date."""

    def __init__(self, message: str = "Invalid date input") -> None:
        super().__init__(message)


class DateOutOfRangeError(CashfmtError, ValueError):
    """Raised when date arithmetic leaves the range a datetime can hold."""
