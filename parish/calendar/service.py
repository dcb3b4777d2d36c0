"""The liturgical engine wired to the parish database."""

from ..liturgical import get_liturgical_color, get_saints_for_date, get_today_liturgical_color
from ..liturgical.dates import format_date, midnight_timestamp
from ..overrides.store import find_override_for_date

_COLLABORATORS = {
    "override_lookup": find_override_for_date,
    "saint_lookup": get_saints_for_date,
}


def color_for(day):
    return get_liturgical_color(day, **_COLLABORATORS)


def color_payload(day):
    payload = color_for(day).to_dict()
    payload["date"] = format_date(day)
    payload["timestamp"] = midnight_timestamp(day)
    return payload


def today_color_payload(now=None):
    return get_today_liturgical_color(now=now, **_COLLABORATORS)
