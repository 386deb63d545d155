"""Japanese calendar: eras, weekdays and national holidays."""

from koyomi.calendar import Calendar, CalendarSpec, days_in_month, is_leap, month_calendar
from koyomi.date import JST, Date, Weekday, num_days
from koyomi.era import Era, era
from koyomi.errors import (
    InvalidFormatError,
    InvalidTermError,
    KoyomiError,
    NoPredecessorError,
    NoSuccessorError,
    NotEnoughError,
)
from koyomi.holidays import (
    holiday,
    holidays_between,
    is_holiday,
    is_working_day,
    national_holiday,
)
from koyomi.models import DayRecord, DayType

__all__ = [
    "JST",
    "Calendar",
    "CalendarSpec",
    "Date",
    "DayRecord",
    "DayType",
    "Era",
    "InvalidFormatError",
    "InvalidTermError",
    "KoyomiError",
    "NoPredecessorError",
    "NoSuccessorError",
    "NotEnoughError",
    "Weekday",
    "days_in_month",
    "era",
    "holiday",
    "holidays_between",
    "is_holiday",
    "is_leap",
    "is_working_day",
    "month_calendar",
    "national_holiday",
    "num_days",
]
