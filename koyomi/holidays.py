"""
Japanese national holiday calendar.

Holidays are decided by rule tables reflecting the national holidays act
(国民の祝日に関する法律) and its amendments since 1948. Base holidays are
fixed dates, "nth Monday" dates and equinox days. Substitute holidays and
citizens' holidays are derived from the base holidays around a date.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date as date_type

from koyomi.date import Date, Weekday, as_date
from koyomi.errors import NoPredecessorError, NoSuccessorError

HOLIDAY_ACT_YEAR = 1948  # national holidays act
# Day the substitute holiday amendment came into force, not the whole of 1973
SUBSTITUTE_FROM = Date(1973, 4, 12)
CITIZENS_FROM = 1986  # citizens' holiday amendment in force
MAX_LOOKBACK = 7  # days walked back when looking for a Sunday holiday

OLYMPIC_YEARS = (2020, 2021)


class _YearRange:
    """Legislated years of a rule: valid_from/valid_until inclusive, minus skip_years."""

    valid_from: int
    valid_until: int | None
    skip_years: tuple[int, ...]

    def is_effective(self, year: int) -> bool:
        """Check if the rule is in force for a year."""
        if year < self.valid_from or year in self.skip_years:
            return False
        return self.valid_until is None or year <= self.valid_until


@dataclass(frozen=True)
class FixedHoliday(_YearRange):
    """Holiday on the same month/day every year."""

    name: str
    month: int
    day: int
    valid_from: int
    valid_until: int | None = None
    skip_years: tuple[int, ...] = ()

    def match(self, target: Date) -> str | None:
        if target.month != self.month or target.day != self.day:
            return None
        return self.name if self.is_effective(target.year) else None


@dataclass(frozen=True)
class FloatingHoliday(_YearRange):
    """Holiday on the nth Monday of a month (Happy Monday system)."""

    name: str
    month: int
    week: int
    valid_from: int
    valid_until: int | None = None
    skip_years: tuple[int, ...] = ()

    def match(self, target: Date) -> str | None:
        if target.month != self.month or target.weekday is not Weekday.MONDAY:
            return None
        if (target.day - 1) // 7 != self.week - 1:
            return None
        return self.name if self.is_effective(target.year) else None


@dataclass(frozen=True)
class EquinoxHoliday:
    """
    Holiday on the equinox day.

    The equinox drifts across two days depending on the leap cycle, so the
    day is looked up by year band and ``year % 4``. Years outside the bands
    never match.
    """

    name: str
    month: int
    valid_from: int
    bands: tuple[tuple[int, int, tuple[int, int, int, int]], ...]

    def equinox_day(self, year: int) -> int | None:
        """Day of month of the equinox, or None outside the known bands."""
        for first, last, days in self.bands:
            if first <= year <= last:
                return days[year % 4]
        return None

    def match(self, target: Date) -> str | None:
        if target.month != self.month or target.year < self.valid_from:
            return None
        if target.day != self.equinox_day(target.year):
            return None
        return self.name


@dataclass(frozen=True)
class SubstituteHoliday:
    """
    振替休日: a holiday falling on Sunday moves to the next day that is not
    itself a holiday.

    The walk goes back over consecutive holidays until it finds one on a
    Sunday, so in Golden Week the substitute can land on a Tuesday or later.
    """

    name: str = "振替休日"
    effective: Date = SUBSTITUTE_FROM

    def match(self, target: Date) -> str | None:
        if target < self.effective or national_holiday(target):
            return None

        day = target
        for _ in range(MAX_LOOKBACK):
            try:
                day = day.yesterday()
            except NoPredecessorError:
                return None
            if not national_holiday(day):
                return None
            if day.weekday is Weekday.SUNDAY:
                return self.name
        return None


@dataclass(frozen=True)
class CitizensHoliday:
    """国民の休日: a day other than Sunday sandwiched between two holidays."""

    name: str = "国民の休日"
    valid_from: int = CITIZENS_FROM

    def match(self, target: Date) -> str | None:
        if target.year < self.valid_from or target.weekday is Weekday.SUNDAY:
            return None
        if national_holiday(target):
            return None

        try:
            yesterday = target.yesterday()
            tomorrow = target.tomorrow()
        except (NoPredecessorError, NoSuccessorError):
            return None

        if not national_holiday(yesterday) or not national_holiday(tomorrow):
            return None
        # A substitute holiday takes precedence.
        if SUBSTITUTE_HOLIDAY.match(target):
            return None
        return self.name


# @see https://ja.wikipedia.org/wiki/国民の祝日
FIXED_HOLIDAYS: tuple[FixedHoliday, ...] = (
    FixedHoliday("元日", 1, 1, HOLIDAY_ACT_YEAR),
    FixedHoliday("成人の日", 1, 15, HOLIDAY_ACT_YEAR, 1999),
    FixedHoliday("建国記念日", 2, 11, 1967),
    FixedHoliday("天皇誕生日", 2, 23, 2020),
    FixedHoliday("天皇誕生日", 4, 29, HOLIDAY_ACT_YEAR, 1988),
    FixedHoliday("みどりの日", 4, 29, 1989, 2006),
    FixedHoliday("昭和の日", 4, 29, 2007),
    FixedHoliday("憲法記念日", 5, 3, HOLIDAY_ACT_YEAR),
    FixedHoliday("みどりの日", 5, 4, 2007),
    FixedHoliday("こどもの日", 5, 5, HOLIDAY_ACT_YEAR),
    FixedHoliday("海の日", 7, 20, 1996, 2002),
    FixedHoliday("山の日", 8, 11, 2016, skip_years=OLYMPIC_YEARS),
    FixedHoliday("敬老の日", 9, 15, 1966, 2002),
    FixedHoliday("体育の日", 10, 10, 1966, 1999),
    FixedHoliday("文化の日", 11, 3, HOLIDAY_ACT_YEAR),
    FixedHoliday("勤労感謝の日", 11, 23, HOLIDAY_ACT_YEAR),
    FixedHoliday("天皇誕生日", 12, 23, 1989, 2018),
    # Imperial ceremonies, one year each
    FixedHoliday("皇太子明仁親王の結婚の儀", 4, 10, 1959, 1959),
    FixedHoliday("昭和天皇の大喪の礼", 2, 24, 1989, 1989),
    FixedHoliday("即位礼正殿の儀", 11, 12, 1990, 1990),
    FixedHoliday("皇太子徳仁親王の結婚の儀", 6, 9, 1993, 1993),
    FixedHoliday("新天皇即位日", 5, 1, 2019, 2019),
    FixedHoliday("即位礼正殿の儀", 10, 22, 2019, 2019),
    # Moved around the Tokyo Olympics
    FixedHoliday("海の日", 7, 23, 2020, 2020),
    FixedHoliday("スポーツの日", 7, 24, 2020, 2020),
    FixedHoliday("山の日", 8, 10, 2020, 2020),
    FixedHoliday("海の日", 7, 22, 2021, 2021),
    FixedHoliday("スポーツの日", 7, 23, 2021, 2021),
    FixedHoliday("山の日", 8, 8, 2021, 2021),
)

FLOATING_HOLIDAYS: tuple[FloatingHoliday, ...] = (
    FloatingHoliday("成人の日", 1, 2, 2000),
    FloatingHoliday("海の日", 7, 3, 2003, skip_years=OLYMPIC_YEARS),
    FloatingHoliday("敬老の日", 9, 3, 2003),
    FloatingHoliday("体育の日", 10, 2, 2000, 2019),
    FloatingHoliday("スポーツの日", 10, 2, 2020, skip_years=OLYMPIC_YEARS),
)

# @see https://ja.wikipedia.org/wiki/春分の日
VERNAL_EQUINOX_DAY = EquinoxHoliday(
    "春分の日",
    3,
    valid_from=HOLIDAY_ACT_YEAR + 1,
    bands=(
        (1900, 1923, (21, 21, 21, 22)),
        (1924, 1959, (21, 21, 21, 21)),
        (1960, 1991, (20, 21, 21, 21)),
        (1992, 2023, (20, 20, 21, 21)),
        (2024, 2055, (20, 20, 20, 21)),
        (2056, 2091, (20, 20, 20, 20)),
        (2092, 2099, (19, 20, 20, 20)),
    ),
)

# @see https://ja.wikipedia.org/wiki/秋分の日
AUTUMNAL_EQUINOX_DAY = EquinoxHoliday(
    "秋分の日",
    9,
    valid_from=HOLIDAY_ACT_YEAR,
    bands=(
        (1900, 1919, (23, 24, 24, 24)),
        (1920, 1947, (23, 23, 24, 24)),
        (1948, 1979, (23, 23, 23, 24)),
        (1980, 2011, (23, 23, 23, 23)),
        (2012, 2043, (22, 23, 23, 23)),
        (2044, 2075, (22, 22, 23, 23)),
        (2076, 2099, (22, 22, 22, 23)),
    ),
)

EQUINOX_HOLIDAYS = (VERNAL_EQUINOX_DAY, AUTUMNAL_EQUINOX_DAY)

SUBSTITUTE_HOLIDAY = SubstituteHoliday()
CITIZENS_HOLIDAY = CitizensHoliday()

BASE_RULES = (*FIXED_HOLIDAYS, *FLOATING_HOLIDAYS, *EQUINOX_HOLIDAYS)
RULES = (*BASE_RULES, SUBSTITUTE_HOLIDAY, CITIZENS_HOLIDAY)


def _first_match(rules, target: Date) -> str | None:
    for rule in rules:
        name = rule.match(target)
        if name is not None:
            return name
    return None


def national_holiday(target: Date | date_type) -> str | None:
    """Get the name of a fixed, floating or equinox holiday, or None."""
    return _first_match(BASE_RULES, as_date(target))


def holiday(target: Date | date_type) -> str | None:
    """Get the name of a Japanese holiday, or None if not a holiday."""
    return _first_match(RULES, as_date(target))


def is_holiday(target: Date | date_type) -> bool:
    """Check if a date is a Japanese public holiday."""
    return holiday(target) is not None


def is_working_day(target: Date | date_type) -> bool:
    """
    Check if a date is a working day.

    A working day is:
    - Not a weekend (Saturday/Sunday)
    - Not a Japanese public holiday
    """
    target = as_date(target)
    if target.weekday in (Weekday.SATURDAY, Weekday.SUNDAY):
        return False
    return not is_holiday(target)


def holidays_between(
    start: Date | date_type, end: Date | date_type
) -> Iterator[tuple[Date, str]]:
    """Yield (date, name) for every holiday from start to end inclusive."""
    day, end = as_date(start), as_date(end)
    while day <= end:
        name = holiday(day)
        if name is not None:
            yield day, name
        if day == end:
            break
        day = day.tomorrow()
