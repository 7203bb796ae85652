import logging
from typing import Tuple

from persian_calendar.errors import JalaaliYearOutOfRange
from persian_calendar.types.calendar_types import JalaaliYearInfo
from persian_calendar.utils.int_math import div, mod

logger = logging.getLogger(__name__)

# Jalaali years bounding the intervals of uniform leap arithmetic.
LEAP_YEAR_BREAKS: Tuple[int, ...] = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181,
    1210, 1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)


def jalaali_year_info(year: int) -> JalaaliYearInfo:
    """
    Leap status of a Jalaali year and the Gregorian date of its 1 Farvardin.

    Supported years are ``LEAP_YEAR_BREAKS[0] <= year < LEAP_YEAR_BREAKS[-1]``
    (-61..3177); anything else raises :class:`JalaaliYearOutOfRange`.

    Returns ``leap`` (years since the last leap year, 0..4, where 0 means the
    year itself is leap), the Gregorian year in which the Jalaali year begins
    and the day of March on which it begins.
    """
    first, last = LEAP_YEAR_BREAKS[0], LEAP_YEAR_BREAKS[-1]
    if year < first or year >= last:
        logger.debug("⛔ jalaali_year_info: year=%s outside %s..%s", year, first, last - 1)
        raise JalaaliYearOutOfRange(year, first, last)

    gregorian_year = year + 621
    leap_jalaali = -14
    break_point = first
    jump = 0

    # leap days of every break interval that ends before `year`
    for next_break in LEAP_YEAR_BREAKS[1:]:
        jump = next_break - break_point
        if year < next_break:
            break
        leap_jalaali += div(jump, 33) * 8 + div(mod(jump, 33), 4)
        break_point = next_break

    years_past = year - break_point

    leap_jalaali += div(years_past, 33) * 8 + div(mod(years_past, 33) + 3, 4)
    # Intervals of 33k+4 years: the fourth year before the next break is leap
    # although the 33-year formula above skips it.
    if mod(jump, 33) == 4 and jump - years_past == 4:
        leap_jalaali += 1

    leap_gregorian = div(gregorian_year, 4) - div((div(gregorian_year, 100) + 1) * 3, 4) - 150
    march = 20 + leap_jalaali - leap_gregorian

    # re-anchor the last five years of an interval on the next 33-year cycle
    if jump - years_past < 6:
        years_past = years_past - jump + div(jump + 4, 33) * 33
    leap = mod(mod(years_past + 1, 33) - 1, 4)
    if leap == -1:
        leap = 4

    return JalaaliYearInfo(leap=leap, gregorian_year=gregorian_year, march=march)


def is_jalaali_leap_year(year: int) -> bool:
    """True for 366-day Jalaali years."""
    return jalaali_year_info(year).leap == 0


def jalaali_month_length(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_jalaali_leap_year(year) else 29
