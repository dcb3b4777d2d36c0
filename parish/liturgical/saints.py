"""Saint calendar queries: saints of a date, today, upcoming days, ranges."""

from datetime import datetime, timedelta

from .dates import InvalidDateRangeError, as_date, days_between, format_date, midnight_timestamp
from .day_namer import get_liturgical_day
from .sanctoral import lookup


def get_saints_for_date(day=None):
    """Return the commemorations of *day* as a tuple of SaintEntry.

    Dates without a table entry fall back to the liturgical day itself.
    """
    day = as_date(day)
    saints = lookup(day.month, day.day)
    if not saints:
        return (get_liturgical_day(day),)
    return saints


def _day_payload(day, saints, timestamp=None):
    return {
        "date": format_date(day),
        "timestamp": timestamp or midnight_timestamp(day),
        "saints": [saint.to_dict() for saint in saints],
    }


def get_saint_of_the_day(now=None):
    now = now or datetime.now()
    return _day_payload(now.date(), get_saints_for_date(now), timestamp=now.isoformat())


def iter_upcoming_feasts(days=9, today=None):
    """Yield the saints of each of the next *days* days, tomorrow first."""
    today = as_date(today)
    for offset in range(1, days + 1):
        day = today + timedelta(days=offset)
        yield _day_payload(day, get_saints_for_date(day))


def get_upcoming_feasts(days=9, today=None):
    return list(iter_upcoming_feasts(days, today))


def get_feasts_in_range(start, end):
    """Commemorations between *start* and *end* inclusive, skipping plain days."""
    start, end = as_date(start), as_date(end)
    if start > end:
        raise InvalidDateRangeError("Start date must be before end date")

    feasts = []
    for offset in range(days_between(start, end) + 1):
        day = start + timedelta(days=offset)
        saints = get_saints_for_date(day)
        if saints and saints[0].type != "none":
            feasts.append(_day_payload(day, saints))
    return feasts
