# tests/test_ptolemaic.py

import pytest

from calschema.core.types import DateParts
from calschema.engines.ptolemaic import (
    DAYS_PER_4000_YEAR_CYCLE,
    Coptic12Schema,
    Coptic13Schema,
    Egyptian12Schema,
    Egyptian13Schema,
    FrenchRepublican12Schema,
    FrenchRepublican13Schema,
)
from calschema.engines.schema import epagomenal_number

PAIRS = [
    (Coptic12Schema(), Coptic13Schema()),
    (Egyptian12Schema(), Egyptian13Schema()),
    (FrenchRepublican12Schema(), FrenchRepublican13Schema()),
]


@pytest.mark.parametrize("s12,s13", PAIRS, ids=lambda s: type(s).__name__)
def test_twelve_and_thirteen_month_forms_are_isomorphic(s12, s13):
    for y in (-5, 0, 1, 3, 4, 400, 1720, 3999, 4000):
        assert s12.count_days_in_year(y) == s13.count_days_in_year(y)
        assert s12.get_start_of_year(y) == s13.get_start_of_year(y)
        for doy in range(1, s12.count_days_in_year(y) + 1):
            m12, d12 = s12.get_month(y, doy)
            m13, d13 = s13.get_month(y, doy)
            if doy <= 360:
                assert (m12, d12) == (m13, d13)
            else:
                assert (m12, d12 - 30) == (12, d13) and m13 == 13
            assert epagomenal_number(s12, y, m12, d12) == epagomenal_number(s13, y, m13, d13)
            assert s12.is_intercalary_day(y, m12, d12) == s13.is_intercalary_day(y, m13, d13)
            assert s12.is_supplementary_day(y, m12, d12) == s13.is_supplementary_day(y, m13, d13)


def test_epagomenal_numbers():
    s12, s13 = Coptic12Schema(), Coptic13Schema()
    assert epagomenal_number(s12, 3, 12, 30) is None
    assert epagomenal_number(s12, 3, 12, 31) == 1
    assert epagomenal_number(s12, 3, 12, 36) == 6
    assert epagomenal_number(s13, 3, 13, 6) == 6
    assert epagomenal_number(s13, 3, 1, 1) is None
    assert s12.is_intercalary_day(3, 12, 36)
    assert s13.is_intercalary_day(3, 13, 6)
    assert not s13.is_intercalary_day(3, 13, 5)


def test_coptic_leap_years():
    sch = Coptic12Schema()
    assert [y for y in range(1, 13) if sch.is_leap_year(y)] == [3, 7, 11]
    assert sch.is_leap_year(-1)
    assert sch.count_days_in_month(3, 12) == 36
    assert sch.count_days_in_month(4, 12) == 35
    assert Coptic13Schema().count_days_in_month(4, 13) == 5


def test_egyptian_years_are_all_365_days():
    sch = Egyptian12Schema()
    for y in (-746, -1, 0, 1, 2000):
        assert not sch.is_leap_year(y)
        assert sch.count_days_in_year(y) == 365
    assert sch.count_days_since_epoch(2, 1, 1) == 365
    assert sch.get_date_parts(-1) == DateParts(0, 12, 35)


def test_french_republican_leap_rule():
    sch = FrenchRepublican12Schema()
    assert sch.is_leap_year(4)
    assert not sch.is_leap_year(100)
    assert sch.is_leap_year(400)
    assert not sch.is_leap_year(4000)
    assert sch.is_leap_year(4400)
    assert sch.get_start_of_year(4001) - sch.get_start_of_year(1) == DAYS_PER_4000_YEAR_CYCLE
    assert DAYS_PER_4000_YEAR_CYCLE == 1_460_969


def test_french_republican_year_boundaries_around_millennia():
    sch = FrenchRepublican13Schema()
    for y in (3999, 4000, 4001, 7999, 8000, 8001, -3999, -4000):
        start = sch.get_start_of_year(y)
        assert sch.get_year(start) == y
        assert sch.get_year(start - 1) == y - 1
        assert sch.get_year_doy(start - 1).day_of_year == sch.count_days_in_year(y - 1)
