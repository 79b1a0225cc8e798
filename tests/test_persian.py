# tests/test_persian.py

from calschema.core.types import DateParts
from calschema.engines.persian import (
    DAYS_PER_2820_YEAR_CYCLE,
    YEAR_ZERO,
    Persian2820Schema,
)

PERSIAN = Persian2820Schema()


def test_grand_cycle_constants():
    assert DAYS_PER_2820_YEAR_CYCLE == 1_029_983
    assert PERSIAN.get_start_of_year(YEAR_ZERO + 1) == 173_125
    leaps = sum(1 for y in range(YEAR_ZERO + 1, YEAR_ZERO + 2821) if PERSIAN.is_leap_year(y))
    assert leaps == 683


def test_grand_cycles_repeat():
    for y in (-2345, 1, 475, 1379, 3294):
        assert PERSIAN.get_start_of_year(y + 2820) - PERSIAN.get_start_of_year(y) == DAYS_PER_2820_YEAR_CYCLE
        assert PERSIAN.is_leap_year(y) == PERSIAN.is_leap_year(y + 2820)


def test_31_leap_years_every_128_years():
    for start in (475, 603, 1000, 2000):
        assert sum(1 for y in range(start, start + 128) if PERSIAN.is_leap_year(y)) == 31


def test_last_day_of_grand_cycle():
    # 3294 closes the first grand cycle and is a leap year.
    assert PERSIAN.is_leap_year(3294)
    last = PERSIAN.get_start_of_year(3295) - 1
    assert PERSIAN.get_year(last) == 3294
    assert PERSIAN.get_date_parts(last) == DateParts(3294, 12, 30)
    assert PERSIAN.get_year(last + 1) == 3295


def test_month_lengths():
    assert [PERSIAN.count_days_in_month(1379, m) for m in range(1, 13)] == [31] * 6 + [30] * 5 + [30]
    assert PERSIAN.is_leap_year(1379)
    assert not PERSIAN.is_leap_year(1380)
    assert PERSIAN.count_days_in_month(1380, 12) == 29
    assert PERSIAN.get_month(1380, 186) == (6, 31)
    assert PERSIAN.get_month(1380, 187) == (7, 1)
    assert PERSIAN.is_intercalary_day(1379, 12, 30)
