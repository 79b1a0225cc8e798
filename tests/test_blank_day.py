# tests/test_blank_day.py

from calschema.core.types import DateParts
from calschema.engines.blank_day import InternationalFixedSchema, PositivistSchema, WorldSchema
from calschema.engines.gregorian import GregorianSchema

GREGORIAN = GregorianSchema()


def test_years_line_up_with_gregorian():
    for sch in (WorldSchema(), PositivistSchema(), InternationalFixedSchema()):
        for y in (-400, 1, 1900, 2000, 2023, 2024):
            assert sch.get_start_of_year(y) == GREGORIAN.get_start_of_year(y)
            assert sch.count_days_in_year(y) == GREGORIAN.count_days_in_year(y)


def test_world_calendar():
    sch = WorldSchema()
    assert [sch.count_days_in_month(2023, m) for m in range(1, 13)] == [31, 30, 30] * 3 + [31, 30, 31]
    assert sch.count_days_in_month(2024, 6) == 31
    assert sch.get_month(2024, 183) == (6, 31)
    assert sch.get_month(2024, 184) == (7, 1)
    assert sch.get_month(2023, 365) == (12, 31)
    assert sch.get_month(2024, 366) == (12, 31)
    assert sch.is_blank_day(2023, 12, 31)
    assert sch.is_blank_day(2024, 6, 31)
    assert sch.is_intercalary_day(2024, 6, 31)
    assert not sch.is_intercalary_day(2024, 12, 31)
    assert not sch.is_blank_day(2024, 1, 31)


def test_positivist_calendar():
    sch = PositivistSchema()
    assert sch.count_days_in_month(2023, 13) == 29
    assert sch.count_days_in_month(2024, 13) == 30
    assert sch.get_month(2024, 366) == (13, 30)
    assert sch.is_intercalary_day(2024, 13, 30)
    assert sch.is_blank_day(2024, 13, 29)
    assert sch.get_date_parts_at_end_of_year(2023) == DateParts(2023, 13, 29)


def test_international_fixed_calendar():
    sch = InternationalFixedSchema()
    assert sch.get_month(2024, 169) == (6, 29)
    assert sch.get_month(2024, 170) == (7, 1)
    assert sch.get_month(2023, 169) == (7, 1)
    assert sch.get_month(2023, 365) == (13, 29)
    assert sch.is_intercalary_day(2024, 6, 29)
    assert sch.is_blank_day(2023, 13, 29)
    assert not sch.is_intercalary_day(2023, 13, 29)
