"""Calendars over a range of days."""

import logging
from calendar import isleap, monthrange
from collections.abc import Iterator
from dataclasses import dataclass, replace

from koyomi.date import Date
from koyomi.errors import InvalidFormatError, InvalidTermError, NotEnoughError
from koyomi.models import DayRecord

logger = logging.getLogger(__name__)


def is_leap(year: int) -> bool:
    """Check if a year is a leap year in the Gregorian calendar."""
    return isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month, leap years included."""
    _, days = monthrange(year, month)
    return days


def _split(token: str) -> list[str]:
    parts = token.split("-")
    if len(parts) not in (1, 2):
        raise InvalidFormatError(token)
    return parts


def _first_day(token: str) -> Date:
    """First day of a 'YYYY' or 'YYYY-MM' token."""
    parts = _split(token)
    if len(parts) == 1:
        return Date.parse(f"{token}-01-01")
    return Date.parse(f"{token}-01")


def _last_day(token: str) -> Date:
    """Last day of a 'YYYY' or 'YYYY-MM' token."""
    parts = _split(token)
    if len(parts) == 1:
        return Date.parse(f"{token}-12-31")
    first = Date.parse(f"{token}-01")
    return Date(first.year, first.month, days_in_month(first.year, first.month))


@dataclass(frozen=True)
class Calendar:
    """Every day from start to end, both inclusive."""

    start: Date
    end: Date

    def __post_init__(self) -> None:
        if self.end.num_days(self.start) <= 0:
            raise InvalidTermError(self.start, self.end)

    @classmethod
    def build(cls) -> "CalendarSpec":
        """Start describing a calendar by year or year-month tokens."""
        return CalendarSpec()

    def from_(self) -> str:
        """String representation of the first day."""
        return str(self.start)

    def until(self) -> str:
        """String representation of the last day."""
        return str(self.end)

    def num_days(self) -> int:
        """Number of days in the calendar."""
        return self.end.num_days(self.start) + 1

    def __len__(self) -> int:
        return self.num_days()

    def __iter__(self) -> Iterator[Date]:
        day = self.start
        yield day
        while day < self.end:
            day = day.tomorrow()
            yield day

    def make(self) -> list[Date]:
        """All days of the calendar in order."""
        return list(self)

    def records(self) -> list[DayRecord]:
        """Day records (day type, holiday, era) for every day of the calendar."""
        return [DayRecord.of(day) for day in self]


@dataclass(frozen=True)
class CalendarSpec:
    """
    Description of a calendar, turned into a Calendar by finalize().

    Either a single token:
    - "YYYY": the whole year
    - "YYYY-MM": the whole month

    or a from/until pair of such tokens, from resolving to its first day and
    until to its last day.
    """

    single_token: str | None = None
    from_token: str | None = None
    until_token: str | None = None

    def single(self, token: str) -> "CalendarSpec":
        """Set a single year or year-month."""
        return replace(self, single_token=token)

    def from_(self, token: str) -> "CalendarSpec":
        """Set the start of the range."""
        return replace(self, from_token=token)

    def until(self, token: str) -> "CalendarSpec":
        """Set the end of the range."""
        return replace(self, until_token=token)

    def finalize(self) -> Calendar:
        """Resolve the tokens into a Calendar."""
        try:
            if self.single_token is not None:
                start = _first_day(self.single_token)
                end = _last_day(self.single_token)
            else:
                if self.from_token is None:
                    raise NotEnoughError()
                start = _first_day(self.from_token)
                if self.until_token is None:
                    raise NotEnoughError()
                end = _last_day(self.until_token)
            calendar = Calendar(start, end)
        except (InvalidFormatError, InvalidTermError, NotEnoughError) as err:
            logger.debug("Rejected calendar %s: %s", self, err)
            raise

        logger.debug("Resolved %s to %s..%s", self, start, end)
        return calendar


def month_calendar(year: int, month: int) -> list[DayRecord]:
    """Generate day records for the entire month."""
    start = Date(year, month, 1)
    end = Date(year, month, days_in_month(year, month))
    return Calendar(start, end).records()
