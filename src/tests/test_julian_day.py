# test_julian_day.py
# pytest-style tests for the Gregorian/Julian <-> Julian Day Number primitives.

from pprint import pformat

import pytest

from persian_calendar.types.calendar_types import GregorianJulianDate
from persian_calendar.utils.int_math import div, mod
from persian_calendar.utils.julian_day import date_to_jdn, jdn_to_date


def _log(title: str, inp, result):
    print("=" * 72)
    print(title)
    print(f"Input : {pformat(inp)}")
    print("Output:", pformat(result, width=88))


# --------------------------- TRUNCATING ARITHMETIC ---------------------------

def test_div_mod_truncate_toward_zero():
    assert div(7, 2) == 3
    assert div(-7, 2) == -3
    assert div(7, -2) == -3
    assert mod(-7, 2) == -1
    assert mod(-1, 4) == -1
    assert mod(7, 2) == 1


# --------------------------- KNOWN DAYS ---------------------------

@pytest.mark.parametrize(
    "ymd,calendar,expected",
    [
        ((2000, 1, 1), "gregorian", 2451545),
        ((2021, 3, 21), "gregorian", 2459295),
        ((1582, 10, 15), "gregorian", 2299161),
        ((1582, 10, 4), "julian", 2299160),
        ((-4712, 1, 1), "julian", 0),
    ],
)
def test_date_to_jdn_known_days(ymd, calendar, expected):
    res = date_to_jdn(*ymd, calendar)
    _log(f"date_to_jdn ({calendar})", ymd, res)
    assert res == expected


def test_jdn_to_date_known_days():
    assert jdn_to_date(2451545) == GregorianJulianDate(2000, 1, 1, "gregorian")
    assert jdn_to_date(2299160, "julian") == GregorianJulianDate(1582, 10, 4, "julian")
    assert jdn_to_date(0, "julian") == GregorianJulianDate(-4712, 1, 1, "julian")


def test_gregorian_reform_is_one_day_apart():
    # Thursday 4 October 1582 (Julian) was followed by Friday 15 October (Gregorian)
    assert date_to_jdn(1582, 10, 15, "gregorian") - date_to_jdn(1582, 10, 4, "julian") == 1


def test_calendar_name_is_case_insensitive():
    assert date_to_jdn(2000, 1, 1, "Gregorian") == 2451545
    assert jdn_to_date(2451545, "GREGORIAN").calendar == "gregorian"


def test_unknown_calendar_rejected():
    with pytest.raises(ValueError):
        date_to_jdn(2000, 1, 1, "lunar")
    with pytest.raises(ValueError):
        jdn_to_date(2451545, "hebrew")


def test_default_calendar_is_gregorian():
    assert date_to_jdn(2000, 1, 1) == date_to_jdn(2000, 1, 1, "gregorian")
    assert jdn_to_date(2451545).calendar == "gregorian"


# --------------------------- ROUND TRIP ---------------------------

@pytest.mark.parametrize("calendar", ["gregorian", "julian"])
def test_jdn_round_trip_sweep(calendar, jdn_stride):
    failures = []
    for jdn in range(-2_000_000, 5_000_001, jdn_stride):
        d = jdn_to_date(jdn, calendar)
        if date_to_jdn(d.year, d.month, d.day, calendar) != jdn:
            failures.append((jdn, d))
    assert failures == []


@pytest.mark.parametrize("calendar", ["gregorian", "julian"])
def test_consecutive_days_are_consecutive_jdns(calendar):
    # every day of a 400-year Gregorian cycle, around year 0
    start = date_to_jdn(-200, 1, 1, calendar)
    prev = jdn_to_date(start, calendar)
    for jdn in range(start + 1, start + 146097 + 1):
        cur = jdn_to_date(jdn, calendar)
        if cur.month == prev.month and cur.year == prev.year:
            assert cur.day == prev.day + 1
        else:
            assert cur.day == 1
        prev = cur


def test_leap_days():
    # 1900 is a leap year only in the Julian calendar; 2000 in both
    assert jdn_to_date(date_to_jdn(1900, 2, 28) + 1) == GregorianJulianDate(1900, 3, 1)
    assert jdn_to_date(date_to_jdn(1900, 2, 28, "julian") + 1, "julian") == GregorianJulianDate(1900, 2, 29, "julian")
    assert jdn_to_date(date_to_jdn(2000, 2, 28) + 1) == GregorianJulianDate(2000, 2, 29)


def test_out_of_range_fields_are_deterministic():
    # month 13 of 2020 is January 2021; no validation happens
    assert date_to_jdn(2020, 13, 1) == date_to_jdn(2021, 1, 1)
    assert date_to_jdn(2021, 3, 0) == date_to_jdn(2021, 2, 28)
