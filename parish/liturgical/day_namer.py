"""Human-readable names for liturgical days.

Uses the same season boundaries as the color classifier.  Two known
simplifications are kept on purpose:

* Ordinary Time weeks are counted separately for each stretch (from the
  day after the Baptism of the Lord, then from the day after Pentecost),
  each starting again at week 1.
* The Ascension is assumed to be transferred to the Seventh Sunday of
  Easter.
"""

from num2words import num2words

from .dates import as_date, days_between, is_sunday, weekday_name
from .paschal import (
    christmas_season_bounds,
    holy_family,
    is_advent,
    is_christmas_season,
    is_easter_season,
    is_lent,
    paschal_anchors,
)
from .sanctoral import SaintEntry

_SPELLED_OUT_ORDINALS = 7

PALM_SUNDAY = SaintEntry(
    "Palm Sunday",
    "feast",
    "The Sunday of the Passion of the Lord - Commemoration of the Lord's entry into Jerusalem",
)
GOOD_FRIDAY = SaintEntry("Good Friday", "feast", "The Passion of the Lord - Commemoration of the Crucifixion")
PENTECOST_SUNDAY = SaintEntry("Pentecost Sunday", "feast", "The Descent of the Holy Spirit upon the Apostles")
GAUDETE_SUNDAY = SaintEntry("Gaudete Sunday", "feast", "Third Sunday of Advent - Rejoice Sunday")
LAETARE_SUNDAY = SaintEntry("Laetare Sunday", "feast", "Fourth Sunday of Lent - Rejoice Sunday")
EASTER_SUNDAY = SaintEntry("Easter Sunday", "feast", "The Resurrection of the Lord - The Paschal Feast")
CHRISTMAS = SaintEntry("Christmas", "feast", "The Nativity of the Lord")
EPIPHANY = SaintEntry("Epiphany of the Lord", "feast", "The Manifestation of Christ to the Magi")
ASH_WEDNESDAY = SaintEntry("Ash Wednesday", "feast", "The beginning of Lent - Day of fasting and repentance")
HOLY_THURSDAY = SaintEntry("Holy Thursday", "feast", "The Mass of the Lord's Supper - Institution of the Eucharist")
HOLY_SATURDAY = SaintEntry("Holy Saturday", "feast", "Easter Vigil - The Great Sabbath")
ASCENSION = SaintEntry("Ascension of the Lord", "feast", "The Ascension of Christ into Heaven")
HOLY_FAMILY = SaintEntry("The Holy Family of Jesus, Mary and Joseph", "feast", "Sunday within the Octave of Christmas")
BAPTISM_OF_THE_LORD = SaintEntry("Baptism of the Lord", "feast", "The Lord is baptized in the Jordan")
ORDINARY_TIME = SaintEntry("Ordinary Time", "none", "A day in Ordinary Time")

_EASTER_SUNDAYS = {
    2: ("Second Sunday of Easter", "Divine Mercy Sunday"),
    3: ("Third Sunday of Easter", "Easter Season"),
    4: ("Fourth Sunday of Easter", "Good Shepherd Sunday"),
    5: ("Fifth Sunday of Easter", "Easter Season"),
    6: ("Sixth Sunday of Easter", "Easter Season"),
}

_LENT_SUNDAYS = {
    1: ("First Sunday of Lent", "The Temptation of Christ in the Desert"),
    2: ("Second Sunday of Lent", "The Transfiguration of the Lord"),
    3: ("Third Sunday of Lent", "The Woman at the Well"),
    5: ("Fifth Sunday of Lent", "The Raising of Lazarus"),
}

_ADVENT_SUNDAYS = {
    1: ("First Sunday of Advent", "The Coming of the Lord"),
    2: ("Second Sunday of Advent", "Prepare the Way of the Lord"),
    4: ("Fourth Sunday of Advent", "The Birth of the Lord is Near"),
}

_CHRISTMAS_OCTAVE = {
    (12, 26): SaintEntry("Saint Stephen", "feast", "The First Martyr"),
    (12, 27): SaintEntry("Saint John", "feast", "Apostle and Evangelist"),
    (12, 28): SaintEntry("The Holy Innocents", "feast", "Martyrs"),
    (1, 1): SaintEntry("Mary, Mother of God", "feast", "Solemnity of Mary, the Holy Mother of God"),
}


def ordinal_number(number):
    """'1st', '8th', '23rd', ..."""
    return num2words(number, to="ordinal_num")


def ordinal_word(number):
    """'first' .. 'seventh', then '8th', '21st', ..."""
    if 1 <= number <= _SPELLED_OUT_ORDINALS:
        return num2words(number, to="ordinal")
    return ordinal_number(number)


def _weekday_of_week(day, week, season, description):
    return SaintEntry(f"{weekday_name(day)} of the {ordinal_word(week)} week of {season}", "none", description)


def _fixed_named_day(day, anchors):
    named = (
        (anchors.palm_sunday, PALM_SUNDAY),
        (anchors.good_friday, GOOD_FRIDAY),
        (anchors.pentecost, PENTECOST_SUNDAY),
        (anchors.gaudete_sunday, GAUDETE_SUNDAY),
        (anchors.laetare_sunday, LAETARE_SUNDAY),
        (anchors.easter, EASTER_SUNDAY),
        (anchors.christmas, CHRISTMAS),
        (anchors.epiphany, EPIPHANY),
        (anchors.ash_wednesday, ASH_WEDNESDAY),
        (anchors.holy_thursday, HOLY_THURSDAY),
        (anchors.holy_saturday, HOLY_SATURDAY),
    )
    for anchor, entry in named:
        if day == anchor:
            return entry
    return None


def _easter_day(day, anchors):
    offset = days_between(anchors.easter, day)
    if offset <= 6:
        return SaintEntry(f"Easter {weekday_name(day)}", "feast", f"Day {offset} of the Octave of Easter")
    week = offset // 7 + 1
    if is_sunday(day):
        if week == 7:
            return ASCENSION
        name, description = _EASTER_SUNDAYS[week]
        return SaintEntry(name, "feast", description)
    return _weekday_of_week(day, week, "Easter", "A weekday in the Easter Season - The Great Fifty Days")


def _christmas_day(day, anchors):
    christmas, _ = christmas_season_bounds(day)
    if day == holy_family(christmas.year):
        return HOLY_FAMILY
    if day == anchors.baptism_of_the_lord:
        return BAPTISM_OF_THE_LORD
    octave_day = _CHRISTMAS_OCTAVE.get((day.month, day.day))
    if octave_day is not None:
        return octave_day
    week = days_between(christmas, day) // 7 + 1
    return _weekday_of_week(day, week, "Christmas", "A weekday in the Christmas Season")


def _lent_day(day, anchors):
    offset = days_between(anchors.ash_wednesday, day)
    if offset < 4:
        return SaintEntry(f"{weekday_name(day)} after Ash Wednesday", "none", "The first days of Lent")
    if day > anchors.palm_sunday:
        return SaintEntry(f"{weekday_name(day)} of Holy Week", "none", "The days before the Paschal Triduum")
    # Lenten weeks run Sunday to Saturday from the First Sunday of Lent
    week = (offset - 4) // 7 + 1
    if is_sunday(day) and week in _LENT_SUNDAYS:
        name, description = _LENT_SUNDAYS[week]
        return SaintEntry(name, "feast", description)
    return _weekday_of_week(
        day, week, "Lent", "A weekday in the Season of Lent - A time of prayer, fasting, and almsgiving"
    )


def _advent_day(day, anchors):
    week = days_between(anchors.first_sunday_of_advent, day) // 7 + 1
    if is_sunday(day) and week in _ADVENT_SUNDAYS:
        name, description = _ADVENT_SUNDAYS[week]
        return SaintEntry(name, "feast", description)
    return _weekday_of_week(
        day, week, "Advent", "A weekday in the Season of Advent - Preparing for the Coming of Christ"
    )


def _ordinary_time_day(day, since):
    week = days_between(since, day) // 7 + 1
    if is_sunday(day):
        return SaintEntry(f"{ordinal_number(week)} Sunday of Ordinary Time", "none", "A Sunday in Ordinary Time")
    return _weekday_of_week(day, week, "Ordinary Time", "A weekday in Ordinary Time")


def get_liturgical_day(day=None):
    """Return the liturgical day for *day* as a :class:`SaintEntry`."""
    day = as_date(day)
    anchors = paschal_anchors(day.year)

    named = _fixed_named_day(day, anchors)
    if named is not None:
        return named

    if is_easter_season(day):
        return _easter_day(day, anchors)
    if is_christmas_season(day):
        return _christmas_day(day, anchors)
    if is_lent(day):
        return _lent_day(day, anchors)
    if is_advent(day):
        return _advent_day(day, anchors)

    if anchors.baptism_of_the_lord < day < anchors.ash_wednesday:
        return _ordinary_time_day(day, anchors.baptism_of_the_lord)
    if anchors.pentecost < day < anchors.first_sunday_of_advent:
        return _ordinary_time_day(day, anchors.pentecost)

    return ORDINARY_TIME


def get_liturgical_day_name(day=None):
    return get_liturgical_day(day).name


