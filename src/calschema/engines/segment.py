"""
calschema.engines.segment
-------------------------
Supported ranges of a schema.

A CalendricalSegment is an immutable closed interval of years together
with the derived intervals of days and months since the epoch, computed
once from (schema, years) and shared by everything built on top of it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from ..core.errors import InvalidConstructionError, InvalidPartsError
from ..core.types import DateParts, MonthParts, OrdinalParts
from ._intmath import INT32_MAX, INT32_MIN

if TYPE_CHECKING:
    from .interfaces import SchemaProtocol

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Range:
    """Closed interval [min, max] of integers."""
    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"Invalid range: min={self.min} > max={self.max}")

    @classmethod
    def maximal(cls) -> "Range":
        return cls(INT32_MIN, INT32_MAX)

    @classmethod
    def singleton(cls, v: int) -> "Range":
        return cls(v, v)

    def contains(self, v: int) -> bool:
        return self.min <= v <= self.max

    def __contains__(self, v: int) -> bool:
        return self.contains(v)

    def is_subset_of(self, other: "Range") -> bool:
        return other.min <= self.min and self.max <= other.max

    def count(self) -> int:
        return self.max - self.min + 1

    def __str__(self) -> str:
        return f"[{self.min}..{self.max}]"


@dataclass(frozen=True)
class CalendricalSegment:
    schema: "SchemaProtocol"
    supported_days: Range
    supported_years: Range
    supported_months: Range
    min_max_date_parts: Tuple[DateParts, DateParts]
    min_max_ordinal_parts: Tuple[OrdinalParts, OrdinalParts]
    min_max_month_parts: Tuple[MonthParts, MonthParts]
    is_complete: bool

    # ---------------------------------------------------------
    # Builders
    # ---------------------------------------------------------

    @classmethod
    def create(cls, schema: "SchemaProtocol", years: Range) -> "CalendricalSegment":
        """Segment covering whole years, hence complete."""
        if not years.is_subset_of(schema.supported_years):
            raise InvalidConstructionError(
                f"Years {years} are not a subset of the years {schema.supported_years} "
                f"supported by {type(schema).__name__}"
            )
        y0, y1 = years.min, years.max
        m1 = schema.count_months_in_year(y1)
        seg = cls(
            schema=schema,
            supported_days=Range(schema.get_start_of_year(y0), schema.get_end_of_year(y1)),
            supported_years=years,
            supported_months=Range(
                schema.count_months_since_epoch(y0, 1),
                schema.count_months_since_epoch(y1, m1),
            ),
            min_max_date_parts=(DateParts(y0, 1, 1), schema.get_date_parts_at_end_of_year(y1)),
            min_max_ordinal_parts=(
                OrdinalParts(y0, 1),
                OrdinalParts(y1, schema.count_days_in_year(y1)),
            ),
            min_max_month_parts=(MonthParts(y0, 1), MonthParts(y1, m1)),
            is_complete=True,
        )
        log.debug("segment %s years=%s days=%s", type(schema).__name__, years, seg.supported_days)
        return seg

    @classmethod
    def create_maximal(cls, schema: "SchemaProtocol") -> "CalendricalSegment":
        return cls.create(schema, schema.supported_years)

    @classmethod
    def create_maximal_on_or_after_year1(cls, schema: "SchemaProtocol") -> "CalendricalSegment":
        sy = schema.supported_years
        if sy.max < 1:
            raise InvalidConstructionError(f"{type(schema).__name__} does not support year 1")
        return cls.create(schema, Range(max(1, sy.min), sy.max))

    @classmethod
    def create_from_days(cls, schema: "SchemaProtocol", days: Range) -> "CalendricalSegment":
        """
        Segment bounded by two arbitrary days. It is complete only when it
        starts on a first day of year and ends on a last day of year.
        """
        y0 = schema.get_year(days.min)
        y1 = schema.get_year(days.max)
        years = Range(y0, y1)
        if not years.is_subset_of(schema.supported_years):
            raise InvalidConstructionError(
                f"Days {days} fall outside the years {schema.supported_years} "
                f"supported by {type(schema).__name__}"
            )
        start = schema.get_date_parts(days.min)
        end = schema.get_date_parts(days.max)
        ordinal_start = schema.get_year_doy(days.min)
        ordinal_end = schema.get_year_doy(days.max)
        return cls(
            schema=schema,
            supported_days=days,
            supported_years=years,
            supported_months=Range(
                schema.count_months_since_epoch(start.year, start.month),
                schema.count_months_since_epoch(end.year, end.month),
            ),
            min_max_date_parts=(start, end),
            min_max_ordinal_parts=(ordinal_start, ordinal_end),
            min_max_month_parts=(MonthParts(start.year, start.month), MonthParts(end.year, end.month)),
            is_complete=(
                days.min == schema.get_start_of_year(y0) and days.max == schema.get_end_of_year(y1)
            ),
        )


class PartsValidator:
    """Checks caller-supplied parts against a schema and a segment."""

    def __init__(self, segment: CalendricalSegment):
        self.segment = segment
        self.schema = segment.schema

    def validate_year(self, y: int) -> None:
        if not self.segment.supported_years.contains(y):
            raise InvalidPartsError(f"year {y} is outside {self.segment.supported_years}")

    def validate_month(self, y: int, m: int) -> None:
        self.validate_year(y)
        if not (1 <= m <= self.schema.count_months_in_year(y)):
            raise InvalidPartsError(f"month {m} is invalid in year {y}")
        if not self.segment.is_complete:
            n = self.schema.count_months_since_epoch(y, m)
            if not self.segment.supported_months.contains(n):
                raise InvalidPartsError(f"month {y}-{m:02d} is outside the supported months")

    def validate(self, y: int, m: int, d: int) -> None:
        self.validate_year(y)
        if not (1 <= m <= self.schema.count_months_in_year(y)):
            raise InvalidPartsError(f"month {m} is invalid in year {y}")
        if not (1 <= d <= self.schema.count_days_in_month(y, m)):
            raise InvalidPartsError(f"day {d} is invalid in month {y}-{m:02d}")
        if not self.segment.is_complete:
            n = self.schema.count_days_since_epoch(y, m, d)
            if not self.segment.supported_days.contains(n):
                raise InvalidPartsError(f"date {DateParts(y, m, d)} is outside the supported days")

    def validate_ordinal(self, y: int, doy: int) -> None:
        self.validate_year(y)
        if not (1 <= doy <= self.schema.count_days_in_year(y)):
            raise InvalidPartsError(f"day of year {doy} is invalid in year {y}")
        if not self.segment.is_complete:
            n = self.schema.count_days_since_epoch_ordinal(y, doy)
            if not self.segment.supported_days.contains(n):
                raise InvalidPartsError(f"ordinal date {OrdinalParts(y, doy)} is outside the supported days")

    def validate_days_since_epoch(self, n: int) -> None:
        if not self.segment.supported_days.contains(n):
            raise InvalidPartsError(f"day count {n} is outside {self.segment.supported_days}")
