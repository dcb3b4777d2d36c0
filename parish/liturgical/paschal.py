"""Paschal cycle: Easter and every date that hangs off it.

Easter is calculated using the anonymous Gregorian algorithm
(Meeus / Jones / Butcher).  Advent is counted backward from Christmas and
the Christmas season forward from Epiphany.  Every function here is a pure
function of the year, so results are cached per year.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from functools import lru_cache

from .dates import as_date


@lru_cache(maxsize=512)
def compute_easter(year):
    """Return the date of Easter Sunday for the given Gregorian year."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def ash_wednesday(year):
    # 40 days of Lent plus the 6 Sundays that are not counted
    return compute_easter(year) - timedelta(days=46)


def palm_sunday(year):
    return compute_easter(year) - timedelta(days=7)


def holy_thursday(year):
    return compute_easter(year) - timedelta(days=3)


def good_friday(year):
    return compute_easter(year) - timedelta(days=2)


def holy_saturday(year):
    return compute_easter(year) - timedelta(days=1)


def ascension(year):
    return compute_easter(year) + timedelta(days=39)


def pentecost(year):
    return compute_easter(year) + timedelta(days=49)


def laetare_sunday(year):
    """Fourth Sunday of Lent."""
    return compute_easter(year) - timedelta(days=21)


def advent_sunday(year, number):
    """Return the date of the given Sunday of Advent (1-4).

    The fourth Sunday is the last Sunday strictly before Christmas Day;
    when Christmas itself falls on a Sunday that is December 18.
    """
    if number not in (1, 2, 3, 4):
        raise ValueError(f"Advent has four Sundays, got {number!r}")
    christmas = date(year, 12, 25)
    # isoweekday: 1=Mon ... 7=Sun, so this is 1..6 days back, or 7 on a Sunday
    days_back = christmas.isoweekday() % 7 or 7
    fourth_sunday = christmas - timedelta(days=days_back)
    return fourth_sunday - timedelta(weeks=4 - number)


def first_sunday_of_advent(year):
    return advent_sunday(year, 1)


def gaudete_sunday(year):
    """Third Sunday of Advent."""
    return advent_sunday(year, 3)


def epiphany(year):
    return date(year, 1, 6)


def baptism_of_the_lord(year):
    """Sunday after Epiphany; a week later when Epiphany is itself a Sunday."""
    feast = epiphany(year)
    return feast + timedelta(days=7 - feast.isoweekday() % 7)


def holy_family(year):
    """Sunday within the octave of the Christmas of *year*, or Dec 30 if none."""
    christmas = date(year, 12, 25)
    if christmas.isoweekday() == 7:
        return date(year, 12, 30)
    return christmas + timedelta(days=7 - christmas.isoweekday())


@dataclass(frozen=True)
class PaschalAnchors:
    year: int
    easter: date
    ash_wednesday: date
    laetare_sunday: date
    palm_sunday: date
    holy_thursday: date
    good_friday: date
    holy_saturday: date
    ascension: date
    pentecost: date
    first_sunday_of_advent: date
    gaudete_sunday: date
    christmas: date
    epiphany: date
    baptism_of_the_lord: date


@lru_cache(maxsize=128)
def paschal_anchors(year):
    """Every anchor date of the liturgical cycle for the civil *year*."""
    return PaschalAnchors(
        year=year,
        easter=compute_easter(year),
        ash_wednesday=ash_wednesday(year),
        laetare_sunday=laetare_sunday(year),
        palm_sunday=palm_sunday(year),
        holy_thursday=holy_thursday(year),
        good_friday=good_friday(year),
        holy_saturday=holy_saturday(year),
        ascension=ascension(year),
        pentecost=pentecost(year),
        first_sunday_of_advent=first_sunday_of_advent(year),
        gaudete_sunday=gaudete_sunday(year),
        christmas=date(year, 12, 25),
        epiphany=epiphany(year),
        baptism_of_the_lord=baptism_of_the_lord(year),
    )


# ── Season boundaries ──────────────────────────────────────────────


def is_advent(day):
    day = as_date(day)
    return first_sunday_of_advent(day.year) <= day < date(day.year, 12, 25)


def christmas_season_bounds(day):
    """Return ``(christmas, baptism)`` for the season that could contain *day*.

    January dates belong to the season opened by the previous year's
    Christmas; December dates to this year's.  At the ends of the ``date``
    range the season is cut short at ``date.min`` / ``date.max``.
    """
    day = as_date(day)
    if day.month == 12:
        christmas = date(day.year, 12, 25)
        if day.year == date.max.year:
            return christmas, date.max
        return christmas, baptism_of_the_lord(day.year + 1)
    if day.year == date.min.year:
        return date.min, baptism_of_the_lord(day.year)
    return date(day.year - 1, 12, 25), baptism_of_the_lord(day.year)


def is_christmas_season(day):
    day = as_date(day)
    if day.month not in (1, 12):
        return False
    christmas, baptism = christmas_season_bounds(day)
    return christmas <= day <= baptism


def is_lent(day):
    """Ash Wednesday through the day before Holy Thursday."""
    day = as_date(day)
    return ash_wednesday(day.year) <= day < holy_thursday(day.year)


def is_easter_season(day):
    """Easter Sunday through Pentecost, inclusive."""
    day = as_date(day)
    return compute_easter(day.year) <= day <= pentecost(day.year)


def is_triduum(day):
    """Holy Thursday, Good Friday and Holy Saturday."""
    day = as_date(day)
    return holy_thursday(day.year) <= day <= holy_saturday(day.year)


def get_season(day=None):
    """Return the liturgical season slug for *day*.

    One of ``advent``, ``christmas``, ``lent``, ``triduum``, ``easter`` or
    ``ordinary``.
    """
    day = as_date(day)
    if is_easter_season(day):
        return "easter"
    if is_christmas_season(day):
        return "christmas"
    if is_lent(day):
        return "lent"
    if is_triduum(day):
        return "triduum"
    if is_advent(day):
        return "advent"
    return "ordinary"
