# tests/test_gregorian.py

import random
from datetime import date, timedelta

from calschema.core.types import DateParts
from calschema.engines.gregorian import (
    CivilSchema,
    GregorianSchema,
    JulianSchema,
    gregorian_start_of_year,
    gregorian_year,
    is_gregorian_leap_year,
    is_julian_leap_year,
)

GREGORIAN = GregorianSchema()
JULIAN = JulianSchema()


def test_matches_python_date_ordinals():
    """date.toordinal() is 1 on 0001-01-01, our day count is 0."""
    random.seed(42)
    start = date(1, 1, 1)
    for _ in range(10000):
        d = start + timedelta(days=random.randint(0, 3652058))
        n = d.toordinal() - 1
        assert GREGORIAN.count_days_since_epoch(d.year, d.month, d.day) == n
        assert GREGORIAN.get_date_parts(n) == DateParts(d.year, d.month, d.day)
        assert GREGORIAN.get_year(n) == d.year
        assert GREGORIAN.get_day_of_year(d.year, d.month, d.day) == d.timetuple().tm_yday


def test_days_between_1900_and_2000():
    n0 = GREGORIAN.count_days_since_epoch(1900, 3, 2)
    n1 = GREGORIAN.count_days_since_epoch(2000, 3, 1)
    assert n1 - n0 == 36524
    assert n1 - n0 == (date(2000, 3, 1) - date(1900, 3, 2)).days


def test_leap_rules():
    assert [y for y in (1900, 2000, 2004, 2100, 2400, 0, -4, -100) if is_gregorian_leap_year(y)] == [2000, 2004, 2400, 0, -4]
    assert is_julian_leap_year(1900) and is_julian_leap_year(-4) and not is_julian_leap_year(1901)


def test_400_year_cycle():
    for y in (-1199, -399, 1, 1601, 2001):
        assert GREGORIAN.get_start_of_year(y + 400) - GREGORIAN.get_start_of_year(y) == 146097
        assert JULIAN.get_start_of_year(y + 4) - JULIAN.get_start_of_year(y) == 1461


def test_month_lengths():
    assert [GREGORIAN.count_days_in_month(2001, m) for m in range(1, 13)] == [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    assert GREGORIAN.count_days_in_month(2000, 2) == 29
    assert GREGORIAN.count_days_in_month(1900, 2) == 28
    assert JULIAN.count_days_in_month(1900, 2) == 29


def test_february_29_is_the_intercalary_day():
    assert GREGORIAN.is_intercalary_day(2000, 2, 29)
    assert not GREGORIAN.is_intercalary_day(2000, 3, 1)
    assert not GREGORIAN.is_supplementary_day(2000, 2, 29)
    assert GREGORIAN.get_month(2000, 60) == (2, 29)
    assert GREGORIAN.get_month(2001, 60) == (3, 1)


def test_proleptic_year_zero_and_before():
    assert GREGORIAN.get_start_of_year(0) == -366
    assert GREGORIAN.get_date_parts(-1) == DateParts(0, 12, 31)
    assert GREGORIAN.count_days_since_epoch(0, 12, 30) == -2
    assert JULIAN.get_date_parts(-1) == DateParts(0, 12, 31)
    assert JULIAN.get_start_of_year(0) == -366


def test_gregorian_reform():
    """Thursday 4 October 1582 (Julian) was followed by Friday 15 October 1582 (Gregorian)."""
    # Julian day counts start two days before the Gregorian ones.
    julian_offset = GREGORIAN.count_days_since_epoch(0, 12, 30)
    j = julian_offset + JULIAN.count_days_since_epoch(1582, 10, 4)
    g = GREGORIAN.count_days_since_epoch(1582, 10, 15)
    assert g == j + 1


def test_shared_year_functions():
    random.seed(7)
    for _ in range(2000):
        n = random.randint(-400_000, 400_000)
        y = gregorian_year(n)
        assert gregorian_start_of_year(y) <= n < gregorian_start_of_year(y + 1)


def test_civil_supported_years_start_at_one():
    sy = CivilSchema().supported_years
    assert (sy.min, sy.max) == (1, 999_999)
    assert GregorianSchema().supported_years.min == -999_998
