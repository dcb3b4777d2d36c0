"""Liturgical calendar engine.

Computes the liturgical color and the liturgical day of the Roman Rite for
any civil calendar date, and serves the saint calendar built on it.
"""

from .classifier import get_liturgical_color, get_today_liturgical_color
from .colors import COLOR_NAMES, LITURGICAL_COLORS, LiturgicalColor, get_color
from .dates import InvalidDateError, InvalidDateRangeError, format_date, parse_calendar_date
from .day_namer import get_liturgical_day, get_liturgical_day_name
from .paschal import compute_easter, get_season, paschal_anchors
from .sanctoral import SaintEntry
from .saints import get_feasts_in_range, get_saint_of_the_day, get_saints_for_date, get_upcoming_feasts

SEASON_DISPLAY_NAMES = {
    "advent": "Advent",
    "christmas": "Christmastide",
    "lent": "Lent",
    "triduum": "Paschal Triduum",
    "easter": "Eastertide",
    "ordinary": "Ordinary Time",
}


def get_season_display_name(season):
    """Return a human-readable display name for a liturgical season."""
    return SEASON_DISPLAY_NAMES.get(season, "Ordinary Time")


__all__ = [
    "COLOR_NAMES",
    "LITURGICAL_COLORS",
    "InvalidDateError",
    "InvalidDateRangeError",
    "LiturgicalColor",
    "SaintEntry",
    "compute_easter",
    "format_date",
    "get_color",
    "get_feasts_in_range",
    "get_liturgical_color",
    "get_liturgical_day",
    "get_liturgical_day_name",
    "get_saint_of_the_day",
    "get_saints_for_date",
    "get_season",
    "get_season_display_name",
    "get_today_liturgical_color",
    "get_upcoming_feasts",
    "paschal_anchors",
    "parse_calendar_date",
]
