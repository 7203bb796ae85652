from .errors import JalaaliYearOutOfRange, PersianCalendarError
from .types.calendar_types import (
    CalendarKind,
    DateLike,
    GregorianJulianDate,
    JalaaliDate,
    JalaaliYearInfo,
)
from .utils.date_utils import (
    gregorian_to_jalaali,
    jalaali_to_gregorian,
    jalaali_to_jdn,
    jdn_to_jalaali,
)
from .utils.julian_day import date_to_jdn, jdn_to_date
from .utils.leap_breaks import (
    LEAP_YEAR_BREAKS,
    is_jalaali_leap_year,
    jalaali_month_length,
    jalaali_year_info,
)

__all__ = [
    'gregorian_to_jalaali',
    'jalaali_to_gregorian',
    'jalaali_to_jdn',
    'jdn_to_jalaali',
    'date_to_jdn',
    'jdn_to_date',
    'jalaali_year_info',
    'is_jalaali_leap_year',
    'jalaali_month_length',
    'LEAP_YEAR_BREAKS',
    'CalendarKind',
    'DateLike',
    'GregorianJulianDate',
    'JalaaliDate',
    'JalaaliYearInfo',
    'JalaaliYearOutOfRange',
    'PersianCalendarError',
]
