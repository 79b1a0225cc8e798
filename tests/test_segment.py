# tests/test_segment.py

import pytest

from calschema.core.errors import InvalidConstructionError, InvalidPartsError
from calschema.core.types import DateParts, MonthParts, OrdinalParts
from calschema.engines._intmath import INT32_MAX, INT32_MIN
from calschema.engines.gregorian import CivilSchema, GregorianSchema
from calschema.engines.segment import CalendricalSegment, PartsValidator, Range


def test_range():
    r = Range(1, 10)
    assert r.contains(1) and r.contains(10) and not r.contains(11)
    assert 5 in r and 0 not in r
    assert r.count() == 10
    assert str(r) == "[1..10]"
    assert Range.singleton(3).count() == 1
    assert Range(2, 3).is_subset_of(r)
    assert not Range(0, 3).is_subset_of(r)
    assert Range.maximal() == Range(INT32_MIN, INT32_MAX)
    with pytest.raises(ValueError):
        Range(3, 2)


def test_segment_over_whole_years():
    sch = GregorianSchema()
    seg = CalendricalSegment.create(sch, Range(1, 10))
    assert seg.is_complete
    assert seg.supported_days == Range(0, sch.get_end_of_year(10))
    assert seg.supported_months == Range(0, 119)
    assert seg.min_max_date_parts == (DateParts(1, 1, 1), DateParts(10, 12, 31))
    assert seg.min_max_ordinal_parts == (OrdinalParts(1, 1), OrdinalParts(10, 365))
    assert seg.min_max_month_parts == (MonthParts(1, 1), MonthParts(10, 12))


def test_segment_outside_schema_years():
    with pytest.raises(InvalidConstructionError):
        CalendricalSegment.create(CivilSchema(), Range(0, 10))
    with pytest.raises(InvalidConstructionError):
        CalendricalSegment.create(GregorianSchema(), Range(1, 1_000_000))


def test_maximal_segments():
    sch = GregorianSchema()
    assert CalendricalSegment.create_maximal(sch).supported_years == sch.supported_years
    seg = CalendricalSegment.create_maximal_on_or_after_year1(sch)
    assert seg.supported_years == Range(1, 999_999)
    assert seg.supported_days.min == 0


def test_segment_from_days():
    sch = GregorianSchema()
    seg = CalendricalSegment.create_from_days(sch, Range(10, 400))
    assert not seg.is_complete
    assert seg.supported_years == Range(1, 2)
    assert seg.min_max_date_parts == (DateParts(1, 1, 11), sch.get_date_parts(400))
    assert seg.min_max_ordinal_parts[0] == OrdinalParts(1, 11)

    whole = CalendricalSegment.create_from_days(sch, Range(0, 364))
    assert whole.is_complete
    assert whole.min_max_date_parts == (DateParts(1, 1, 1), DateParts(1, 12, 31))


def test_validator():
    v = PartsValidator(CalendricalSegment.create(GregorianSchema(), Range(1900, 2100)))
    v.validate(2000, 2, 29)
    v.validate_ordinal(2000, 366)
    v.validate_month(2100, 12)
    for parts in ((1899, 12, 31), (2101, 1, 1), (2001, 2, 29), (2000, 13, 1), (2000, 0, 1), (2000, 1, 0)):
        with pytest.raises(InvalidPartsError):
            v.validate(*parts)
    with pytest.raises(InvalidPartsError):
        v.validate_ordinal(2001, 366)
    with pytest.raises(InvalidPartsError):
        v.validate_month(2000, 13)
    with pytest.raises(ValueError):
        v.validate_year(1800)


def test_validator_on_partial_segment():
    sch = GregorianSchema()
    v = PartsValidator(CalendricalSegment.create_from_days(sch, Range(10, 400)))
    v.validate(1, 1, 11)
    with pytest.raises(InvalidPartsError):
        v.validate(1, 1, 10)
    with pytest.raises(InvalidPartsError):
        v.validate_ordinal(2, 365)
    with pytest.raises(InvalidPartsError):
        v.validate_days_since_epoch(401)
    v.validate_days_since_epoch(400)
