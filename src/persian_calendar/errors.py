class PersianCalendarError(Exception):
    """Base class for errors raised by persian_calendar."""


class JalaaliYearOutOfRange(PersianCalendarError, ValueError):
    """The Jalaali year falls outside the leap break-point table."""

    def __init__(self, year: int, first: int, last: int):
        self.year = year
        self.first = first
        self.last = last
        super().__init__(
            f"invalid jalaali year {year} (supported range {first}..{last - 1})"
        )
