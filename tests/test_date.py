import datetime

import pytest

from orrery.date import Date, DateError, difference, is_leap_year


def _step(date, forward):
    return date.next_day() if forward else date.previous_day()


def test_increment_month_border():
    date = Date(29, 11, 2022)
    assert date == Date(29, 11, 2022)
    date = date.next_day()
    assert date == Date(30, 11, 2022)
    date = date.next_day()
    assert date == Date(1, 12, 2022)
    date = date.previous_day()
    assert date == Date(30, 11, 2022)
    date = date.previous_day()
    assert date == Date(29, 11, 2022)


def test_increment_year_border():
    date = Date(31, 12, 2021)
    date = date.next_day()
    assert date == Date(1, 1, 2022)
    date = date.previous_day()
    assert date == Date(31, 12, 2021)


def test_step_returns_new_date_leaving_original():
    original = Date(31, 12, 2021)
    following = original.next_day()
    assert original == Date(31, 12, 2021)
    assert following == Date(1, 1, 2022)


@pytest.mark.parametrize(
    "year, leap",
    [(2021, False), (2020, True), (1900, False), (1600, True)],
)
def test_february_border(year, leap):
    date = Date(28, 2, year)
    date = date.next_day()
    if leap:
        assert date == Date(29, 2, year)
        date = date.next_day()
    assert date == Date(1, 3, year)
    date = date.previous_day()
    assert date == (Date(29, 2, year) if leap else Date(28, 2, year))


def test_comparison():
    date = Date(2, 2, 1599)
    date1 = Date(3, 2, 1599)
    date2 = Date(2, 3, 1599)
    date3 = Date(2, 2, 1600)
    date4 = Date(2, 2, 1599)
    assert date == date4
    assert date != date3
    assert date != date2
    assert date != date1
    assert date <= date4
    assert date <= date3
    assert date <= date2
    assert date <= date1
    assert date < date3
    assert date < date2
    assert date < date1
    assert date3 > date
    assert date2 > date
    assert date1 > date
    assert date4 >= date
    assert date3 >= date
    assert date2 >= date
    assert date1 >= date


@pytest.mark.parametrize(
    "text, expected",
    [
        ("31.12.2021", Date(31, 12, 2021)),
        ("3.12.2021", Date(3, 12, 2021)),
        ("7.2.2021", Date(7, 2, 2021)),
        ("1.1.2021", Date(1, 1, 2021)),
    ],
)
def test_parse(text, expected):
    assert Date.parse(text) == expected


@pytest.mark.parametrize("text", ["31.12.2021", "3.12.2021", "7.2.2021", "1.1.2021"])
def test_str_round_trip(text):
    assert str(Date.parse(text)) == text
    assert Date.parse(str(Date.parse(text))) == Date.parse(text)


@pytest.mark.parametrize(
    "date, expected",
    [
        (Date(31, 12, 2021), 738515),
        (Date(1, 1, 2022), 738516),
        (Date(1, 1, 2023), 738881),
        (Date(28, 2, 2024), 739305),
        (Date(1, 3, 2024), 739307),
        (Date(1, 1, 2122), 775039),
        (Date(1, 3, 2122), 775098),
        (Date(1, 4, 2122), 775129),
        (Date(1, 5, 2122), 775159),
        (Date(1, 6, 2122), 775190),
        (Date(1, 7, 2122), 775220),
        (Date(1, 8, 2122), 775251),
        (Date(1, 9, 2122), 775282),
        (Date(1, 10, 2122), 775312),
        (Date(2, 11, 2122), 775344),
        (Date(12, 12, 2122), 775384),
        (Date(1, 1, 2400), 876577),
        (Date(10, 2, 2400), 876617),
        (Date(10, 3, 2400), 876646),
    ],
)
def test_days(date, expected):
    assert date.days() == expected


def test_difference_matches_days():
    assert difference(Date(1, 1, 2023), Date(1, 1, 2022)) == 738881 - 738516
    assert difference(Date(1, 1, 2022), Date(1, 1, 2023)) == 738516 - 738881
    assert difference(Date(5, 5, 2005), Date(5, 5, 2005)) == 0


@pytest.mark.parametrize("start", [Date(1, 3, 2020), Date(1, 1, 2022), Date(15, 6, 1999)])
def test_next_and_previous_are_inverse(start):
    assert start.next_day().previous_day() == start
    assert start.previous_day().next_day() == start


def test_default_date():
    assert Date() == Date(1, 1, 2000)


def test_leap_years():
    assert is_leap_year(2020)
    assert is_leap_year(1600)
    assert not is_leap_year(1900)
    assert not is_leap_year(2021)


@pytest.mark.parametrize(
    "args, message",
    [
        ((1, 0, 2021), "Invalid month!"),
        ((1, 13, 2021), "Invalid month!"),
        ((0, 1, 2021), "Invalid day!"),
        ((32, 1, 2021), "Invalid day!"),
        ((29, 2, 2021), "Invalid day!"),
        ((29, 2, 1900), "Invalid day!"),
        ((31, 4, 2021), "Invalid day!"),
    ],
)
def test_invalid_dates(args, message):
    with pytest.raises(DateError, match=message):
        Date(*args)


def test_parse_invalid_number():
    with pytest.raises(DateError, match="Invalid_argument of date!"):
        Date.parse("a.1.2021")


def test_parse_out_of_range():
    with pytest.raises(DateError, match="Out_of_range of date!"):
        Date.parse("1.1.99999999999")


def test_parse_missing_separators():
    with pytest.raises(DateError):
        Date.parse("1-1-2021")


def test_parse_invalid_day():
    with pytest.raises(DateError, match="Invalid day!"):
        Date.parse("30.2.2020")


def test_date_error_is_value_error():
    with pytest.raises(ValueError):
        Date(40, 1, 2021)


def test_today_matches_system_clock():
    today = Date.today()
    now = datetime.date.today()
    assert (today.day, today.month, today.year) == (now.day, now.month, now.year)


def test_dates_sort_chronologically():
    dates = [Date(2, 3, 1599), Date(2, 2, 1600), Date(3, 2, 1599), Date(2, 2, 1599)]
    assert sorted(dates) == [
        Date(2, 2, 1599),
        Date(3, 2, 1599),
        Date(2, 3, 1599),
        Date(2, 2, 1600),
    ]