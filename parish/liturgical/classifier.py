"""Liturgical color for any calendar date.

Precedence, first match wins:

1. an explicit override passed by the caller
2. the persisted override for the date (``override_lookup``)
3. Palm Sunday, Good Friday, Pentecost (red); Gaudete and Laetare (rose)
4. a high-rank feast reported by the saint calendar (``saint_lookup``)
5. fixed-date solemnities and feasts
6. the season: Easter and Christmas (white), Lent and Advent (purple)
7. Ordinary Time (green)

Both lookups are optional collaborators.  A lookup that raises is logged
and treated as "nothing found": the color must stay available when the
override store is degraded.
"""

import logging
from datetime import datetime

from .colors import GREEN, PURPLE, RED, ROSE, WHITE, LiturgicalColor, get_color
from .dates import as_date
from .paschal import is_advent, is_christmas_season, is_easter_season, is_lent, paschal_anchors

logger = logging.getLogger(__name__)

# Fixed-date solemnities and white feasts, used when no saint calendar is
# wired in.  Keep in sync with the categories below.
FIXED_WHITE_FEASTS = frozenset(
    {
        (1, 1),  # Mary, Mother of God
        (1, 6),  # Epiphany
        (1, 25),  # Conversion of Saint Paul
        (2, 2),  # Presentation of the Lord
        (2, 22),  # Chair of Saint Peter
        (3, 19),  # Saint Joseph
        (3, 25),  # Annunciation
        (5, 3),  # Saints Philip and James
        (5, 14),  # Saint Matthias
        (5, 31),  # Visitation
        (6, 24),  # Nativity of Saint John the Baptist
        (6, 29),  # Saints Peter and Paul
        (7, 3),  # Saint Thomas
        (7, 25),  # Saint James
        (8, 6),  # Transfiguration
        (8, 15),  # Assumption
        (8, 24),  # Saint Bartholomew
        (9, 8),  # Nativity of Mary
        (9, 21),  # Saint Matthew
        (9, 29),  # Archangels
        (10, 28),  # Saints Simon and Jude
        (11, 1),  # All Saints
        (11, 9),  # Lateran Basilica
        (11, 30),  # Saint Andrew
        (12, 8),  # Immaculate Conception
        (12, 12),  # Our Lady of Guadalupe
        (12, 25),  # Christmas
        (12, 26),  # Christmas octave
        (12, 27),
        (12, 28),
    }
)

_LORD_MARKERS = ("of the Lord", "Christmas")
_MARIAN_MARKERS = ("Blessed Virgin Mary", "Mary, Mother of God", "Our Lady")
_APOSTLE_FEASTS = frozenset(
    {
        "The Conversion of Saint Paul the Apostle",
        "The Chair of Saint Peter the Apostle",
        "Saints Philip and James",
        "Saint Matthias",
        "Saints Peter and Paul",
        "Saint Thomas",
        "Saint James",
        "Saint Bartholomew",
        "Saint Matthew",
        "Saints Simon and Jude",
        "Saint Andrew",
    }
)
_OTHER_MAJOR_FEASTS = frozenset(
    {
        "All Saints",
        "Saint Joseph, Spouse of the Blessed Virgin Mary",
        "The Nativity of Saint John the Baptist",
        "Saints Michael, Gabriel, and Raphael",
        "The Dedication of the Lateran Basilica",
        "Saint Mary Magdalene",
    }
)


def is_high_rank_feast(entry):
    """True when a saint-calendar entry outranks the season with white."""
    if entry is None or getattr(entry, "type", None) != "feast":
        return False
    name = entry.name
    if name in _APOSTLE_FEASTS or name in _OTHER_MAJOR_FEASTS:
        return True
    if any(marker in name for marker in _LORD_MARKERS):
        return True
    return any(marker in name for marker in _MARIAN_MARKERS)


def _override_color(override):
    """Resolve a caller-supplied override to a color, or None."""
    if override is None:
        return None
    if isinstance(override, LiturgicalColor):
        return override
    if isinstance(override, str):
        return get_color(override)
    return get_color(getattr(override, "color", None))


def _persisted_override(day, override_lookup):
    try:
        record = override_lookup(day)
    except Exception:
        logger.warning("Color override lookup failed for %s; using calculated color.", day, exc_info=True)
        return None
    color = _override_color(record)
    if record is not None and color is None:
        logger.warning("Ignoring color override for %s with unknown color %r.", day, getattr(record, "color", None))
    return color


def _primary_saint(day, saint_lookup):
    try:
        entries = saint_lookup(day)
    except Exception:
        logger.warning("Saint calendar lookup failed for %s; skipping feast check.", day, exc_info=True)
        return None
    if not entries:
        return None
    return entries[0]


def special_day_color(day):
    """Red or rose for the movable days that carry their own color, else None."""
    anchors = paschal_anchors(day.year)
    if day in (anchors.palm_sunday, anchors.good_friday, anchors.pentecost):
        return RED
    if day in (anchors.gaudete_sunday, anchors.laetare_sunday):
        return ROSE
    return None


def seasonal_color(day):
    """Color of the season containing *day*; green in Ordinary Time."""
    if is_easter_season(day) or is_christmas_season(day):
        return WHITE
    if is_lent(day) or is_advent(day):
        return PURPLE
    return GREEN


def get_liturgical_color(day=None, override=None, *, override_lookup=None, saint_lookup=None):
    """Return the :class:`LiturgicalColor` for *day* (defaults to today)."""
    day = as_date(day)

    color = _override_color(override)
    if color is not None:
        return color

    if override_lookup is not None:
        color = _persisted_override(day, override_lookup)
        if color is not None:
            return color

    color = special_day_color(day)
    if color is not None:
        return color

    if saint_lookup is not None and is_high_rank_feast(_primary_saint(day, saint_lookup)):
        return WHITE

    if (day.month, day.day) in FIXED_WHITE_FEASTS:
        return WHITE

    return seasonal_color(day)


def get_today_liturgical_color(*, override_lookup=None, saint_lookup=None, now=None):
    """Today's color as the payload served to the website."""
    now = now or datetime.now()
    color = get_liturgical_color(now.date(), override_lookup=override_lookup, saint_lookup=saint_lookup)
    payload = color.to_dict()
    payload["date"] = now.date().isoformat()
    payload["timestamp"] = now.isoformat()
    return payload
