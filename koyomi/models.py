"""Data models for calendar days."""

from dataclasses import dataclass
from enum import Enum

from koyomi.date import Date, Weekday
from koyomi.era import Era, era
from koyomi.holidays import holiday


class DayType(str, Enum):
    """Type of day."""

    WORKING_DAY = "working_day"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"


@dataclass(frozen=True)
class DayRecord:
    """Record for a single calendar day."""

    date: Date
    day_type: DayType
    holiday: str | None = None
    era: Era | None = None

    @classmethod
    def of(cls, target: Date) -> "DayRecord":
        """Build the record of a date from the holiday and era tables."""
        name = holiday(target)
        if name is not None:
            day_type = DayType.HOLIDAY
        elif target.weekday in (Weekday.SATURDAY, Weekday.SUNDAY):
            day_type = DayType.WEEKEND
        else:
            day_type = DayType.WORKING_DAY
        return cls(date=target, day_type=day_type, holiday=name, era=era(target))

    @property
    def weekday(self) -> Weekday:
        """Day of the week."""
        return self.date.weekday

    @property
    def is_holiday(self) -> bool:
        """Whether the day is a national holiday."""
        return self.day_type == DayType.HOLIDAY
