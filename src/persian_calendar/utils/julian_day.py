from persian_calendar.types.calendar_types import (
    CalendarKind,
    GregorianJulianDate,
    normalize_calendar_kind,
)
from persian_calendar.utils.int_math import div, mod


def date_to_jdn(year: int, month: int, day: int, calendar: CalendarKind = "gregorian") -> int:
    """
    Julian Day Number of a proleptic Gregorian or Julian calendar date.

    Based on D.A. Hatcher, Q.Jl.R.Astron.Soc. 25 (1984), 53-55, as modified by
    K.M. Borkowski, Post.Astron. 25 (1987), 275-279. Good from 1 March -100100
    (both calendars) up to a few million years into the future.

    Years BC are numbered 0, -1, -2, ... The result is the day's noon (12h UT).
    Month and day are not range checked.
    """
    kind = normalize_calendar_kind(calendar)
    jdn = (
        div((year + div(month - 8, 6) + 100100) * 1461, 4)
        + div(153 * mod(month + 9, 12) + 2, 5)
        + day
        - 34840408
    )
    if kind == "gregorian":
        # 100/400-year leap exceptions
        jdn = jdn - div(div(year + 100100 + div(month - 8, 6), 100) * 3, 4) + 752
    return jdn


def jdn_to_date(jdn: int, calendar: CalendarKind = "gregorian") -> GregorianJulianDate:
    """Inverse of :func:`date_to_jdn`."""
    kind = normalize_calendar_kind(calendar)
    j = 4 * jdn + 139361631
    if kind == "gregorian":
        j = j + div(div(4 * jdn + 183187720, 146097) * 3, 4) * 4 - 3908
    i = div(mod(j, 1461), 4) * 5 + 308
    day = div(mod(i, 153), 5) + 1
    month = mod(div(i, 153), 12) + 1
    year = div(j, 1461) - 100100 + div(8 - month, 6)
    return GregorianJulianDate(year, month, day, kind)
