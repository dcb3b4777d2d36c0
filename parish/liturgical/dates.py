"""Civil calendar date helpers shared by the liturgical modules.

All computation works on floating calendar dates: a ``datetime`` is reduced
to its date part and no timezone conversion is ever applied.
"""

import re
from datetime import date, datetime

_ISO_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")

# Gregorian calendar years served by the API
MIN_YEAR = 1583
MAX_YEAR = 9999

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


class InvalidDateError(ValueError):
    """Raised when a caller-supplied date string cannot be parsed."""


class InvalidDateRangeError(ValueError):
    """Raised when a date range ends before it starts."""


def as_date(value=None):
    """Normalize *value* to a ``date`` (midnight of its calendar day).

    ``None`` means today.
    """
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date or datetime, got {type(value).__name__}")


def parse_calendar_date(text):
    """Parse ``YYYY-MM-DD`` (or a full ISO-8601 timestamp) into a ``date``.

    Only Gregorian years (``MIN_YEAR`` to ``MAX_YEAR``) are accepted.
    """
    if not isinstance(text, str):
        raise InvalidDateError("Invalid date format. Use YYYY-MM-DD")
    text = text.strip()
    if not _ISO_DATE_PREFIX.match(text):
        raise InvalidDateError("Invalid date format. Use YYYY-MM-DD")
    try:
        if len(text) == 10:
            day = date.fromisoformat(text)
        else:
            day = datetime.fromisoformat(text).date()
    except ValueError as exc:
        raise InvalidDateError("Invalid date format. Use YYYY-MM-DD") from exc
    if not MIN_YEAR <= day.year <= MAX_YEAR:
        raise InvalidDateError(f"Date must fall between the years {MIN_YEAR} and {MAX_YEAR}")
    return day


def format_date(value):
    return as_date(value).isoformat()


def midnight_timestamp(value):
    """ISO-8601 timestamp for the start of *value*'s calendar day."""
    day = as_date(value)
    return datetime(day.year, day.month, day.day).isoformat()


def weekday_name(value):
    return WEEKDAY_NAMES[as_date(value).weekday()]


def is_sunday(value):
    return as_date(value).weekday() == 6


def days_between(start, end):
    """Whole days from *start* to *end* (negative when *end* is earlier)."""
    return (as_date(end) - as_date(start)).days
