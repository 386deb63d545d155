"""Calendar date with Japanese weekday names."""

import re
from dataclasses import dataclass
from datetime import date as date_type
from datetime import datetime, timedelta
from enum import Enum
from zoneinfo import ZoneInfo

from koyomi.errors import InvalidFormatError, NoPredecessorError, NoSuccessorError

JST = ZoneInfo("Asia/Tokyo")  # Japan Standard Time timezone

# Y-m-d or Y/m/d, the year may carry the padding written by Date.__str__
_DATE_PATTERN = re.compile(r"(\d+) *([-/])(\d{1,2})\2(\d{1,2})")


class Weekday(str, Enum):
    """Day of the week, Monday first."""

    MONDAY = "月"
    TUESDAY = "火"
    WEDNESDAY = "水"
    THURSDAY = "木"
    FRIDAY = "金"
    SATURDAY = "土"
    SUNDAY = "日"

    @classmethod
    def from_index(cls, index: int) -> "Weekday":
        """Get the weekday for a ``datetime.date.weekday()`` index (0 = Monday)."""
        return list(cls)[index]

    @property
    def japanese(self) -> str:
        """Japanese one-character name of the weekday."""
        return self.value


def _format(year: int, month: int, day: int) -> str:
    return f"{year:<4}-{month:02}-{day:02}"


@dataclass(frozen=True, order=True)
class Date:
    """
    A validated proleptic Gregorian calendar date.

    Dates are ordered by (year, month, day) and never change once built;
    tomorrow() and yesterday() return new values.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        try:
            date_type(self.year, self.month, self.day)
        except (TypeError, ValueError, OverflowError) as err:
            raise InvalidFormatError(_format(self.year, self.month, self.day)) from err

    @classmethod
    def parse(cls, text: str) -> "Date":
        """Parse a 'Y-m-d' or 'Y/m/d' string into a Date."""
        match = _DATE_PATTERN.fullmatch(text)
        if not match:
            raise InvalidFormatError(text)
        year, _, month, day = match.groups()
        try:
            return cls(int(year), int(month), int(day))
        except InvalidFormatError as err:
            raise InvalidFormatError(text) from err

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> "Date":
        """Build a Date from year, month and day numbers."""
        return cls(year, month, day)

    @classmethod
    def from_date(cls, value: date_type) -> "Date":
        """Build a Date from a ``datetime.date``."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls) -> "Date":
        """Get the current date in Japan (JST timezone)."""
        return cls.from_date(datetime.now(JST).date())

    def __str__(self) -> str:
        return _format(self.year, self.month, self.day)

    def to_string(self) -> str:
        """String representation in 'Y-m-d' form."""
        return str(self)

    def to_date(self) -> date_type:
        """Convert to a ``datetime.date``."""
        return date_type(self.year, self.month, self.day)

    @property
    def weekday(self) -> Weekday:
        """Day of the week."""
        return Weekday.from_index(self.to_date().weekday())

    def tomorrow(self) -> "Date":
        """Get the following day."""
        try:
            return Date.from_date(self.to_date() + timedelta(days=1))
        except OverflowError as err:
            raise NoSuccessorError(self.year, self.month, self.day) from err

    def yesterday(self) -> "Date":
        """Get the preceding day."""
        try:
            return Date.from_date(self.to_date() - timedelta(days=1))
        except OverflowError as err:
            raise NoPredecessorError(self.year, self.month, self.day) from err

    def num_days(self, other: "Date") -> int:
        """Number of days from ``other`` to this date (negative if ``other`` is later)."""
        return (self.to_date() - other.to_date()).days

    def era(self):
        """Get the Japanese era of this date, or None before Meiji."""
        from koyomi.era import era

        return era(self)

    def holiday(self) -> str | None:
        """Get the name of the holiday on this date, or None."""
        from koyomi.holidays import holiday

        return holiday(self)


def as_date(value: Date | date_type) -> Date:
    """Accept either a Date or a ``datetime.date``."""
    if isinstance(value, Date):
        return value
    return Date.from_date(value)


def num_days(until: Date, from_: Date) -> int:
    """Number of days between two dates, ``until - from_``."""
    return until.num_days(from_)
