"""Full-year holiday calendars."""

import pytest

from koyomi.calendar import Calendar
from koyomi.date import Weekday

HOLIDAYS_2018 = {
    "2018-01-01": "元日",
    "2018-01-08": "成人の日",
    "2018-02-11": "建国記念日",
    "2018-02-12": "振替休日",
    "2018-03-21": "春分の日",
    "2018-04-29": "昭和の日",
    "2018-04-30": "振替休日",
    "2018-05-03": "憲法記念日",
    "2018-05-04": "みどりの日",
    "2018-05-05": "こどもの日",
    "2018-07-16": "海の日",
    "2018-08-11": "山の日",
    "2018-09-17": "敬老の日",
    "2018-09-23": "秋分の日",
    "2018-09-24": "振替休日",
    "2018-10-08": "体育の日",
    "2018-11-03": "文化の日",
    "2018-11-23": "勤労感謝の日",
    "2018-12-23": "天皇誕生日",
    "2018-12-24": "振替休日",
}

HOLIDAYS_2019 = {
    "2019-01-01": "元日",
    "2019-01-14": "成人の日",
    "2019-02-11": "建国記念日",
    "2019-03-21": "春分の日",
    "2019-04-29": "昭和の日",
    "2019-04-30": "国民の休日",
    "2019-05-01": "新天皇即位日",
    "2019-05-02": "国民の休日",
    "2019-05-03": "憲法記念日",
    "2019-05-04": "みどりの日",
    "2019-05-05": "こどもの日",
    "2019-05-06": "振替休日",
    "2019-07-15": "海の日",
    "2019-08-11": "山の日",
    "2019-08-12": "振替休日",
    "2019-09-16": "敬老の日",
    "2019-09-23": "秋分の日",
    "2019-10-14": "体育の日",
    "2019-10-22": "即位礼正殿の儀",
    "2019-11-03": "文化の日",
    "2019-11-04": "振替休日",
    "2019-11-23": "勤労感謝の日",
}


def year_of_calendar(year: int):
    return Calendar.build().single(str(year)).finalize().make()


@pytest.mark.parametrize(
    ("year", "expected", "first_weekday"),
    [(2018, HOLIDAYS_2018, Weekday.MONDAY), (2019, HOLIDAYS_2019, Weekday.TUESDAY)],
)
def test_year(year, expected, first_weekday):
    """Every day of the year has the expected holiday, or none."""
    days = year_of_calendar(year)

    assert len(days) == 365
    assert days[0].weekday is first_weekday
    holidays = {str(day): day.holiday() for day in days if day.holiday() is not None}
    assert holidays == expected


def test_weekdays_cycle():
    """Weekdays follow each other through the year."""
    days = year_of_calendar(2018)
    names = "".join(day.weekday.japanese for day in days[:14])
    assert names == "月火水木金土日月火水木金土日"
