"""Tests for era lookup."""

from datetime import date

import pytest

from koyomi.date import Date
from koyomi.era import ERAS, era


@pytest.mark.parametrize(
    ("text", "name", "year", "formatted"),
    [
        ("1868-01-25", "明治", 1, "明治元年"),
        ("1912-07-29", "明治", 45, "明治45年"),
        ("1912-07-30", "大正", 1, "大正元年"),
        ("1926-12-24", "大正", 15, "大正15年"),
        ("1926-12-25", "昭和", 1, "昭和元年"),
        ("1989-01-07", "昭和", 64, "昭和64年"),
        ("1989-01-08", "平成", 1, "平成元年"),
        ("2018-04-01", "平成", 30, "平成30年"),
        ("2019-04-30", "平成", 31, "平成31年"),
        ("2019-05-01", "令和", 1, "令和元年"),
        ("2020-01-01", "令和", 2, "令和2年"),
    ],
)
def test_era(text, name, year, formatted):
    """Test era name, year and format at era boundaries."""
    result = era(Date.parse(text))

    assert result is not None
    assert result.name == name
    assert result.year == year
    assert result.format() == formatted
    assert str(result) == formatted


def test_era_transition():
    """Adjacent days straddle the Showa/Heisei transition."""
    assert era(Date(1989, 1, 7)).name == "昭和"
    assert era(Date(1989, 1, 8)).name == "平成"


def test_era_unknown():
    """Dates before Meiji have no era."""
    assert era(Date(1868, 1, 24)) is None
    assert era(Date(1800, 1, 1)) is None


def test_era_from_datetime_date():
    """datetime.date values are accepted."""
    assert era(date(2018, 1, 1)).format() == "平成30年"


def test_era_is_stable():
    """Repeated lookups give the same result."""
    target = Date(1990, 6, 1)
    assert era(target) == era(target)
    assert era(target).format() == era(target).format() == "平成2年"


def test_era_table_is_contiguous():
    """Each era ends the day before the next one starts."""
    for (_, newer_start, _), (_, _, older_end) in zip(ERAS, ERAS[1:]):
        assert older_end.tomorrow() == newer_start
    assert ERAS[0][2] is None


def test_era_contains():
    """Era intervals include both ends."""
    heisei = era(Date(2000, 1, 1))
    assert heisei.contains(Date(1989, 1, 8))
    assert heisei.contains(Date(2019, 4, 30))
    assert not heisei.contains(Date(2019, 5, 1))
    assert not heisei.contains(Date(1989, 1, 7))
