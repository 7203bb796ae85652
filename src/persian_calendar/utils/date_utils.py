"""
Jalaali <-> Gregorian conversion through the Julian Day Number.

    gregorian_to_jalaali(2021, 3, 21)            -> JalaaliDate(1400, 1, 1)
    gregorian_to_jalaali(date(2021, 3, 21))      -> JalaaliDate(1400, 1, 1)
    jalaali_to_gregorian(1400, 1, 1)             -> GregorianJulianDate(2021, 3, 21, "gregorian")
    jalaali_to_gregorian(jdatetime.date(1400, 1, 1))  -> same as above

Day conversion is supported for Jalaali years 1..3100 (the arithmetic holds
for -61..3177, minus the edges where a JDN would spill into a year outside
the break table). Months and days are not validated: out-of-range values give
a deterministic, calendrically meaningless result.
"""

import logging
from typing import Optional, Tuple, Union

from persian_calendar.errors import JalaaliYearOutOfRange
from persian_calendar.types.calendar_types import (
    DateLike,
    GregorianJulianDate,
    JalaaliDate,
)
from persian_calendar.utils.int_math import div, mod
from persian_calendar.utils.julian_day import date_to_jdn, jdn_to_date
from persian_calendar.utils.leap_breaks import LEAP_YEAR_BREAKS, jalaali_year_info

logger = logging.getLogger(__name__)


def _is_date_like(value: object) -> bool:
    return all(hasattr(value, attr) for attr in ("year", "month", "day"))


def _extract_parts(
    year: Union[int, DateLike],
    month: Optional[int],
    day: Optional[int],
) -> Tuple[int, int, int]:
    """Return ``(year, month, day)`` from three ints or one date-like value."""

    if _is_date_like(year):
        return int(year.year), int(year.month), int(year.day)
    if month is None or day is None:
        raise TypeError("month and day are required unless a date-like value is given")
    return year, month, day


# -----------------------------
# Calendar primitives
# -----------------------------

def jalaali_to_jdn(year: int, month: int, day: int) -> int:
    info = jalaali_year_info(year)
    # months 1-6 have 31 days, 7-11 have 30
    return (
        date_to_jdn(info.gregorian_year, 3, info.march, "gregorian")
        + (month - 1) * 31
        - div(month, 7) * (month - 7)
        + day
        - 1
    )


def jdn_to_jalaali(jdn: int) -> JalaaliDate:
    gregorian_year = jdn_to_date(jdn, "gregorian").year
    year = gregorian_year - 621
    info = jalaali_year_info(year)
    first_farvardin = date_to_jdn(gregorian_year, 3, info.march, "gregorian")

    past_days = jdn - first_farvardin
    if past_days >= 0:
        if past_days <= 185:
            return JalaaliDate(year, 1 + div(past_days, 31), mod(past_days, 31) + 1)
        past_days -= 186
    else:
        # January-March dates before Nowruz belong to the previous year
        year -= 1
        if year < LEAP_YEAR_BREAKS[0]:
            logger.debug("⛔ jdn_to_jalaali: jdn=%s falls in year %s", jdn, year)
            raise JalaaliYearOutOfRange(year, LEAP_YEAR_BREAKS[0], LEAP_YEAR_BREAKS[-1])
        past_days += 179
        if info.leap == 1:
            past_days += 1

    return JalaaliDate(year, 7 + div(past_days, 30), mod(past_days, 30) + 1)


# -----------------------------
# Public API
# -----------------------------

def gregorian_to_jalaali(
    year: Union[int, DateLike],
    month: Optional[int] = None,
    day: Optional[int] = None,
) -> JalaaliDate:
    """
    Convert a Gregorian date to the Jalaali calendar.

    ``year`` may be a date-like value (anything with ``year``/``month``/``day``
    attributes, e.g. ``datetime.date``); ``month`` and ``day`` are then ignored.

    Raises ``JalaaliYearOutOfRange`` if the date lies outside the break table.
    """
    gy, gm, gd = _extract_parts(year, month, day)
    result = jdn_to_jalaali(date_to_jdn(gy, gm, gd, "gregorian"))
    logger.debug("📅 gregorian_to_jalaali: %04d-%02d-%02d → %s", gy, gm, gd, result)
    return result


def jalaali_to_gregorian(
    year: Union[int, DateLike],
    month: Optional[int] = None,
    day: Optional[int] = None,
) -> GregorianJulianDate:
    """
    Convert a Jalaali date to the Gregorian calendar.

    ``year`` may also be a date-like value holding a Jalaali date, such as a
    ``jdatetime.date`` or a :class:`JalaaliDate`.
    """
    jy, jm, jday = _extract_parts(year, month, day)
    result = jdn_to_date(jalaali_to_jdn(jy, jm, jday), "gregorian")
    logger.debug("📅 jalaali_to_gregorian: %04d-%02d-%02d → %s", jy, jm, jday, result)
    return result
