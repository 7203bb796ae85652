from dataclasses import dataclass, asdict
from datetime import date as GDate
from typing import Dict, Iterator, Literal, Protocol, Union

import jdatetime as jd

CalendarKind = Literal["gregorian", "julian"]

CALENDAR_KINDS = ("gregorian", "julian")


class DateLike(Protocol):
    """Anything exposing integer ``year``/``month``/``day`` attributes."""

    @property
    def year(self) -> int: ...

    @property
    def month(self) -> int: ...

    @property
    def day(self) -> int: ...


def normalize_calendar_kind(calendar: str) -> CalendarKind:
    k = str(calendar).strip().lower()
    if k not in CALENDAR_KINDS:
        raise ValueError(f"calendar must be one of {CALENDAR_KINDS}, got {calendar!r}")
    return k  # type: ignore[return-value]


@dataclass(frozen=True)
class JalaaliDate:
    year: int
    month: int
    day: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.year, self.month, self.day))

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

    def to_jdatetime(self) -> jd.date:
        return jd.date(self.year, self.month, self.day)


@dataclass(frozen=True)
class GregorianJulianDate:
    year: int
    month: int
    day: int
    calendar: CalendarKind = "gregorian"

    def __iter__(self) -> Iterator[int]:
        return iter((self.year, self.month, self.day))

    def as_dict(self) -> Dict[str, Union[int, str]]:
        return asdict(self)

    def to_date(self) -> GDate:
        """Return a ``datetime.date``; only Gregorian years 1..9999 qualify."""
        if self.calendar != "gregorian":
            raise ValueError("only gregorian dates map onto datetime.date")
        return GDate(self.year, self.month, self.day)


@dataclass(frozen=True)
class JalaaliYearInfo:
    leap: int            # years since the last leap year, 0 = this year is leap
    gregorian_year: int  # Gregorian year in which the Jalaali year starts
    march: int           # March day of 1 Farvardin
