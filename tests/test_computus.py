from datetime import date

import pytest

from utils.computus import (
    calculate_all_holy_days, calculate_annunciation, calculate_ascension,
    calculate_ash_wednesday, calculate_easter, calculate_easter_range,
    calculate_good_friday, calculate_pentecost, calculate_trinity,
)


@pytest.mark.parametrize('year,month,day', [
    (2024, 3, 31),
    (2025, 4, 20),
    (2026, 4, 5),
    (2027, 3, 28),
    (2028, 4, 16),
    (2029, 4, 1),
    (2030, 4, 21),
    (2000, 4, 23),
    (1999, 4, 4),
    (1990, 4, 15),
    (1980, 4, 6),
    (2100, 3, 28),
    (1583, 4, 10),
])
def test_easter_known_dates(year, month, day):
    assert calculate_easter(year) == date(year, month, day)


def test_easter_before_gregorian_calendar():
    with pytest.raises(ValueError):
        calculate_easter(1582)
    with pytest.raises(ValueError):
        calculate_annunciation(1582)


def test_easter_is_a_sunday_in_march_or_april():
    for year in range(1583, 2600):
        easter = calculate_easter(year)
        assert easter.weekday() == 6
        assert easter.month in (3, 4)


def test_easter_range():
    assert calculate_easter_range(2024, 2026) == {
        2024: date(2024, 3, 31),
        2025: date(2025, 4, 20),
        2026: date(2026, 4, 5),
    }
    assert calculate_easter_range(2024, 2024) == {2024: date(2024, 3, 31)}
    with pytest.raises(ValueError):
        calculate_easter_range(2026, 2024)


def test_moveable_feasts_2024():
    assert calculate_ash_wednesday(2024) == date(2024, 2, 14)
    assert calculate_good_friday(2024) == date(2024, 3, 29)
    assert calculate_ascension(2024) == date(2024, 5, 9)
    assert calculate_ascension(2024).weekday() == 3
    assert calculate_pentecost(2024) == date(2024, 5, 19)
    assert calculate_trinity(2024) == date(2024, 5, 26)


def test_all_holy_days():
    assert calculate_all_holy_days(2025) == {
        "Easter Sunday": date(2025, 4, 20),
        "Ash Wednesday": date(2025, 3, 5),
        "Pentecost": date(2025, 6, 8),
        "Trinity Sunday": date(2025, 6, 15),
        "Annunciation of Mary": date(2025, 3, 25),
    }
