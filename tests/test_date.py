import datetime

import pytest

from udeastay.date import Date, days_in_month, is_leap_year


@pytest.mark.parametrize(
    "year, expected",
    [(2024, True), (2023, False), (1900, False), (2000, True)],
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


def test_days_in_month_february():
    assert days_in_month(2, 2024) == 29
    assert days_in_month(2, 2023) == 28


@pytest.mark.parametrize("year", [2023, 2024, 1900])
def test_days_in_month_matches_calendar(year):
    for month in range(1, 13):
        nxt = datetime.date(year + (month == 12), month % 12 + 1, 1)
        last = nxt - datetime.timedelta(days=1)
        assert days_in_month(month, year) == last.day


@pytest.mark.parametrize("month", [0, 13])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(ValueError):
        days_in_month(month, 2024)


@pytest.mark.parametrize(
    "date, valid",
    [
        (Date(1, 1, 2024), True),
        (Date(29, 2, 2024), True),
        (Date(31, 4, 2024), False),
        (Date(15, 8, 2023), True),
        (Date(29, 2, 2023), False),
        (Date(0, 5, 2024), False),
        (Date(1, 13, 2024), False),
        (Date(1, 1, 0), False),
    ],
)
def test_is_valid(date, valid):
    assert date.is_valid() is valid


def test_comparisons():
    a = Date(1, 6, 2024)
    b = Date(7, 6, 2024)
    c = Date(1, 1, 2025)
    assert a < b < c
    assert c > b
    assert a <= Date(1, 6, 2024)
    assert a >= Date(1, 6, 2024)
    assert a == Date(1, 6, 2024)
    assert a != b
    assert sorted([c, a, b]) == [a, b, c]


@pytest.mark.parametrize(
    "day, month, year",
    [(1, 1, 2024), (29, 2, 2024), (15, 8, 2023), (31, 12, 1999), (1, 3, 2000), (28, 2, 1900)],
)
def test_weekday_matches_calendar(day, month, year):
    expected = datetime.date(year, month, day).isoweekday() % 7
    assert Date(day, month, year).weekday() == expected


def test_format_worked_example():
    assert Date(1, 1, 2024).format() == "Lunes, 1 de Enero de 2024"


def test_format_structure():
    text = Date(15, 8, 2023).format()
    assert text.endswith(", 15 de Agosto de 2023")
    assert str(Date(15, 8, 2023)) == text


def test_format_rejects_bad_month():
    with pytest.raises(ValueError):
        Date(1, 0, 2024).format()


@pytest.mark.parametrize("days", [0, 1, 24, 30, 59, 60, 365, 366, 565, 1000])
def test_add_days_matches_calendar(days):
    start = datetime.date(2024, 1, 1)
    result = Date(1, 1, 2024).add_days(days)
    expected = start + datetime.timedelta(days=days)
    assert result == Date(expected.day, expected.month, expected.year)


def test_add_days_negative_is_identity():
    date = Date(1, 6, 2024)
    assert date.add_days(-5) == date


def test_add_days_is_additive():
    date = Date(28, 2, 2023)
    assert date.add_days(10).add_days(20) == date.add_days(30)