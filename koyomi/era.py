"""Japanese imperial eras (元号) since Meiji."""

from dataclasses import dataclass
from datetime import date as date_type

from koyomi.date import Date, as_date

# Newest first: most lookups target recent dates.
ERAS: tuple[tuple[str, Date, Date | None], ...] = (
    ("令和", Date(2019, 5, 1), None),
    ("平成", Date(1989, 1, 8), Date(2019, 4, 30)),
    ("昭和", Date(1926, 12, 25), Date(1989, 1, 7)),
    ("大正", Date(1912, 7, 30), Date(1926, 12, 24)),
    ("明治", Date(1868, 1, 25), Date(1912, 7, 29)),
)


@dataclass(frozen=True)
class Era:
    """An era as seen from a given Gregorian year."""

    name: str
    ad_year: int
    start: Date
    end: Date | None = None

    @property
    def year(self) -> int:
        """Year counted from the start of the era, the first year being 1."""
        return self.ad_year - self.start.year + 1

    def format(self) -> str:
        """Era name with its year, the first year written as 元年."""
        if self.year == 1:
            return f"{self.name}元年"
        return f"{self.name}{self.year}年"

    def __str__(self) -> str:
        return self.format()

    def contains(self, target: Date) -> bool:
        """Check if a date falls within the era (both ends inclusive)."""
        if target < self.start:
            return False
        return self.end is None or target <= self.end


def era(target: Date | date_type) -> Era | None:
    """
    Get the era of a date.

    The enthronement day starts the new era, so the year of a change holds
    two eras and the lookup goes by date. Dates before Meiji return None.
    """
    target = as_date(target)
    for name, start, end in ERAS:
        candidate = Era(name=name, ad_year=target.year, start=start, end=end)
        if candidate.contains(target):
            return candidate
    return None
