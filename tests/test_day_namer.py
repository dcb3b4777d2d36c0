"""Tests for liturgical day names."""

from datetime import date, timedelta

import pytest

from parish.liturgical import get_liturgical_day, get_liturgical_day_name
from parish.liturgical.day_namer import ordinal_number, ordinal_word


@pytest.mark.parametrize(
    "day, name",
    [
        # Named days
        (date(2024, 2, 14), "Ash Wednesday"),
        (date(2024, 3, 10), "Laetare Sunday"),
        (date(2024, 3, 24), "Palm Sunday"),
        (date(2024, 3, 28), "Holy Thursday"),
        (date(2024, 3, 29), "Good Friday"),
        (date(2024, 3, 30), "Holy Saturday"),
        (date(2024, 3, 31), "Easter Sunday"),
        (date(2024, 5, 19), "Pentecost Sunday"),
        (date(2024, 12, 15), "Gaudete Sunday"),
        (date(2024, 12, 25), "Christmas"),
        (date(2025, 1, 6), "Epiphany of the Lord"),
        # Lent
        (date(2024, 2, 15), "Thursday after Ash Wednesday"),
        (date(2024, 2, 18), "First Sunday of Lent"),
        (date(2024, 2, 20), "Tuesday of the first week of Lent"),
        (date(2024, 3, 17), "Fifth Sunday of Lent"),
        (date(2024, 3, 26), "Tuesday of Holy Week"),
        # Easter season
        (date(2024, 4, 1), "Easter Monday"),
        (date(2024, 4, 6), "Easter Saturday"),
        (date(2024, 4, 7), "Second Sunday of Easter"),
        (date(2024, 4, 9), "Tuesday of the second week of Easter"),
        (date(2024, 4, 21), "Fourth Sunday of Easter"),
        (date(2024, 5, 12), "Ascension of the Lord"),
        # Advent and Christmas
        (date(2024, 12, 1), "First Sunday of Advent"),
        (date(2024, 12, 18), "Wednesday of the third week of Advent"),
        (date(2024, 12, 22), "Fourth Sunday of Advent"),
        (date(2024, 12, 26), "Saint Stephen"),
        (date(2024, 12, 29), "The Holy Family of Jesus, Mary and Joseph"),
        (date(2024, 12, 30), "Monday of the first week of Christmas"),
        (date(2025, 1, 1), "Mary, Mother of God"),
        (date(2025, 1, 3), "Friday of the second week of Christmas"),
        (date(2025, 1, 12), "Baptism of the Lord"),
        # Ordinary Time
        (date(2024, 1, 9), "Tuesday of the first week of Ordinary Time"),
        (date(2024, 1, 14), "2nd Sunday of Ordinary Time"),
        (date(2024, 11, 19), "Tuesday of the 27th week of Ordinary Time"),
        (date(2024, 11, 24), "28th Sunday of Ordinary Time"),
    ],
)
def test_liturgical_day_names(day, name):
    assert get_liturgical_day_name(day) == name


def test_easter_octave_description():
    entry = get_liturgical_day(date(2024, 4, 3))
    assert entry.name == "Easter Wednesday"
    assert entry.type == "feast"
    assert entry.description == "Day 3 of the Octave of Easter"


def test_special_sundays_carry_their_titles():
    assert get_liturgical_day(date(2024, 4, 7)).description == "Divine Mercy Sunday"
    assert get_liturgical_day(date(2024, 4, 21)).description == "Good Shepherd Sunday"


def test_plain_weekdays_have_type_none():
    assert get_liturgical_day(date(2024, 7, 9)).type == "none"
    assert get_liturgical_day(date(2024, 12, 10)).type == "none"


def test_sundays_of_lent_and_advent_are_feasts():
    assert get_liturgical_day(date(2024, 2, 25)).type == "feast"
    assert get_liturgical_day(date(2024, 12, 8)).type == "feast"


def test_to_dict():
    assert get_liturgical_day(date(2024, 3, 29)).to_dict() == {
        "name": "Good Friday",
        "type": "feast",
        "description": "The Passion of the Lord - Commemoration of the Crucifixion",
    }


@pytest.mark.parametrize(
    "number, expected",
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"), (13, "13th"), (21, "21st"), (22, "22nd"), (101, "101st"), (111, "111th")],
)
def test_ordinal_number(number, expected):
    assert ordinal_number(number) == expected


def test_ordinal_word():
    assert ordinal_word(1) == "first"
    assert ordinal_word(7) == "seventh"
    assert ordinal_word(8) == "8th"
    assert ordinal_word(23) == "23rd"


@pytest.mark.parametrize(
    "start, end",
    [
        (date(1583, 1, 1), date(1583, 2, 28)),
        (date(1999, 12, 1), date(2000, 1, 31)),
        (date(9999, 11, 1), date(9999, 12, 31)),
    ],
)
def test_every_day_across_year_boundaries_has_a_name(start, end):
    for offset in range((end - start).days + 1):
        day = start + timedelta(days=offset)
        assert get_liturgical_day_name(day), day


def test_last_days_of_the_calendar():
    assert get_liturgical_day_name(date(9999, 12, 26)) == "The Holy Family of Jesus, Mary and Joseph"
    assert get_liturgical_day_name(date(9999, 12, 31)) == "Friday of the first week of Christmas"
    assert get_liturgical_day_name(date(1583, 1, 1)) == "Mary, Mother of God"
