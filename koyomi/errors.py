"""Custom exceptions."""


class KoyomiError(Exception):
    """Base exception for koyomi."""


class InvalidFormatError(KoyomiError):
    """Raised when a date or range token cannot be read as a calendar date."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid format: {text!r}")
        self.text = text


class InvalidTermError(KoyomiError):
    """Raised when a calendar range does not end after it starts."""

    def __init__(self, start, end) -> None:
        super().__init__(f"Invalid term: {start} is not before {end}")
        self.start = start
        self.end = end


class NotEnoughError(KoyomiError):
    """Raised when a calendar range is missing its start or end."""

    def __init__(self) -> None:
        super().__init__("Not enough information to build a calendar")


class NoSuccessorError(KoyomiError):
    """Raised when there is no day after the latest representable date."""

    def __init__(self, year: int, month: int, day: int) -> None:
        super().__init__(f"No day after {year}-{month}-{day}")
        self.year = year
        self.month = month
        self.day = day


class NoPredecessorError(KoyomiError):
    """Raised when there is no day before the earliest representable date."""

    def __init__(self, year: int, month: int, day: int) -> None:
        super().__init__(f"No day before {year}-{month}-{day}")
        self.year = year
        self.month = month
        self.day = day
