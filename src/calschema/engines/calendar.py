"""
calschema.engines.calendar
--------------------------
The Orchestrator. Binds a schema, its segment, an arithmetic strategy and
a CalendarMath together, and anchors the schema's epoch on the day number
line shared by every calendar.

Day numbers count days since Monday 1 January 1 of the proleptic
Gregorian calendar, so that day_number % 7 == 0 on Mondays.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

from ..core.types import AdditionRule, CalendarId, DateParts, MonthParts, OrdinalParts
from .arithmetic import NakedArithmetic
from .calendar_math import CalendarMath
from .schema import CalendricalSchema, epagomenal_number
from .segment import PartsValidator

DateLike = Union[DateParts, Tuple[int, int, int]]


def as_date_parts(parts: DateLike) -> DateParts:
    return parts if isinstance(parts, DateParts) else DateParts(*parts)


class Calendar:
    """
    Validates caller input, then delegates to the arithmetic engine and
    the schema. Instances are immutable after construction.
    """
    def __init__(
        self,
        id: CalendarId,
        schema: CalendricalSchema,
        epoch: int,
        arithmetic: NakedArithmetic,
        rule: AdditionRule = "truncate",
        meta: Optional[Dict[str, Any]] = None,
    ):
        self.id = id
        self.schema = schema
        self.epoch = epoch
        self.arithmetic = arithmetic
        self.segment = arithmetic.segment
        self.validator = PartsValidator(self.segment)
        self.math = CalendarMath(arithmetic, rule)
        self.meta = dict(meta or {})

    @property
    def name(self) -> str:
        return self.id.name

    def __repr__(self) -> str:
        return f"Calendar({self.id.name!r}, {type(self.schema).__name__}, epoch={self.epoch})"

    def info(self) -> Dict[str, Any]:
        sch = self.schema
        regular, months_in_year = sch.is_regular()
        lo, hi = self.segment.min_max_date_parts
        return {
            "name": self.id.name,
            "family": self.id.family,
            "schema": type(sch).__name__,
            "arithmetic": type(self.arithmetic).__name__,
            "rule": self.math.rule,
            "epoch": self.epoch,
            "years": (self.segment.supported_years.min, self.segment.supported_years.max),
            "min_date": str(lo),
            "max_date": str(hi),
            "regular": regular,
            "months_in_year": months_in_year if regular else None,
            "min_days_in_year": sch.min_days_in_year,
            "min_days_in_month": sch.min_days_in_month,
            "meta": dict(self.meta),
        }

    def _math(self, rule: Optional[AdditionRule]) -> CalendarMath:
        if rule is None or rule == self.math.rule:
            return self.math
        return CalendarMath(self.arithmetic, rule)

    def _checked(self, parts: DateLike) -> DateParts:
        p = as_date_parts(parts)
        self.validator.validate(p.year, p.month, p.day)
        return p

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def validate(self, parts: DateLike) -> DateParts:
        return self._checked(parts)

    def is_valid(self, parts: DateLike) -> bool:
        p = as_date_parts(parts)
        try:
            self.validator.validate(p.year, p.month, p.day)
        except ValueError:
            return False
        return True

    def to_day_number(self, parts: DateLike) -> int:
        y, m, d = self._checked(parts)
        return self.epoch + self.schema.count_days_since_epoch(y, m, d)

    def from_day_number(self, day_number: int) -> DateParts:
        n = day_number - self.epoch
        self.validator.validate_days_since_epoch(n)
        return self.schema.get_date_parts(n)

    def to_ordinal(self, parts: DateLike) -> OrdinalParts:
        y, m, d = self._checked(parts)
        return self.schema.get_ordinal_parts(y, m, d)

    def from_ordinal(self, parts: OrdinalParts) -> DateParts:
        self.validator.validate_ordinal(parts.year, parts.day_of_year)
        return self.schema.get_date_parts_from_ordinal(parts.year, parts.day_of_year)

    def day_of_week(self, parts: DateLike) -> int:
        """ISO day of the week, 1 (Monday) to 7 (Sunday)."""
        return self.to_day_number(parts) % 7 + 1

    def describe(self, parts: DateLike) -> Dict[str, Any]:
        y, m, d = p = self._checked(parts)
        sch = self.schema
        return {
            "date": str(p),
            "day_number": self.epoch + sch.count_days_since_epoch(y, m, d),
            "day_of_year": sch.get_day_of_year(y, m, d),
            "days_in_year": sch.count_days_in_year(y),
            "days_in_month": sch.count_days_in_month(y, m),
            "leap_year": sch.is_leap_year(y),
            "intercalary_month": sch.is_intercalary_month(y, m),
            "intercalary_day": sch.is_intercalary_day(y, m, d),
            "supplementary_day": sch.is_supplementary_day(y, m, d),
            "epagomenal_number": epagomenal_number(sch, y, m, d),
        }

    # ---------------------------------------------------------
    # Adjusters
    # ---------------------------------------------------------

    def start_of_year(self, y: int) -> DateParts:
        self.validator.validate_year(y)
        return DateParts(y, 1, 1)

    def end_of_year(self, y: int) -> DateParts:
        self.validator.validate_year(y)
        return self.schema.get_date_parts_at_end_of_year(y)

    def start_of_month(self, y: int, m: int) -> DateParts:
        self.validator.validate_month(y, m)
        return DateParts(y, m, 1)

    def end_of_month(self, y: int, m: int) -> DateParts:
        self.validator.validate_month(y, m)
        return DateParts(y, m, self.schema.count_days_in_month(y, m))

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add_days(self, parts: DateLike, days: int) -> DateParts:
        return self.arithmetic.add_days(self._checked(parts), days)

    def next_day(self, parts: DateLike) -> DateParts:
        return self.arithmetic.next_day(self._checked(parts))

    def previous_day(self, parts: DateLike) -> DateParts:
        return self.arithmetic.previous_day(self._checked(parts))

    def add_months(self, parts: DateLike, months: int, *, rule: Optional[AdditionRule] = None) -> DateParts:
        return self._math(rule).add_months(self._checked(parts), months)

    def add_years(self, parts: DateLike, years: int, *, rule: Optional[AdditionRule] = None) -> DateParts:
        return self._math(rule).add_years(self._checked(parts), years)

    def add_months_to_month(self, parts: MonthParts, months: int) -> MonthParts:
        self.validator.validate_month(parts.year, parts.month)
        return self.arithmetic.add_months(parts, months)

    def days_between(self, start: DateLike, end: DateLike) -> int:
        return self.arithmetic.count_days_between(self._checked(start), self._checked(end))

    def months_between(
        self, start: DateLike, end: DateLike, *, rule: Optional[AdditionRule] = None
    ) -> Tuple[int, DateParts]:
        return self._math(rule).count_months_between_dates(self._checked(start), self._checked(end))

    def years_between(
        self, start: DateLike, end: DateLike, *, rule: Optional[AdditionRule] = None
    ) -> Tuple[int, DateParts]:
        return self._math(rule).count_years_between(self._checked(start), self._checked(end))
