"""
calschema.engines.arithmetic
----------------------------
Calendrical arithmetic: adding days, months and years to date parts,
ordinal parts and month parts, within a segment.

Two strategies:
  PlainArithmetic    works for any schema; every operation goes through the
                     linear count of days (or months) since the epoch.
  RegularArithmetic  requires a regular schema with months of at least
                     MIN_MIN_DAYS_IN_MONTH days and a complete segment; it
                     avoids the linear count whenever the result stays in
                     the same month or the same or adjacent year.

Both raise ArithmeticOverflowError for exactly the same inputs: when the
result would fall outside the segment, or when the delta itself leaves the
32-bit domain.

The "non-standard" operations (adding years or months to a full date)
never fail because the target month is too short: they clamp the day to
the end of the target month and report how many days were cut off as a
roundoff. CalendarMath decides what to do with it.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..core.errors import ArithmeticOverflowError, InvalidConstructionError
from ..core.types import DateParts, MonthParts, OrdinalParts
from ._intmath import checked_add
from .schema import CalendricalSchema
from .segment import CalendricalSegment, Range

log = logging.getLogger(__name__)

# Smallest month length for which RegularArithmetic's fast paths are valid.
MIN_MIN_DAYS_IN_MONTH = 7


class NakedArithmetic:
    """
    Operations shared by every strategy. Subclasses provide the day and
    month additions.
    """

    def __init__(self, segment: CalendricalSegment):
        self._segment = segment
        self._schema = segment.schema
        self._years = segment.supported_years
        self._days = segment.supported_days
        self._months = segment.supported_months

    @property
    def schema(self) -> CalendricalSchema:
        return self._schema

    @property
    def segment(self) -> CalendricalSegment:
        return self._segment

    @staticmethod
    def create_default(schema: CalendricalSchema, years: Optional[Range] = None) -> "NakedArithmetic":
        """
        Picks RegularArithmetic when the schema allows it, PlainArithmetic
        otherwise.
        """
        if years is None:
            segment = CalendricalSegment.create_maximal(schema)
        else:
            segment = CalendricalSegment.create(schema, years)
        regular, _ = schema.is_regular()
        if regular and schema.min_days_in_month >= MIN_MIN_DAYS_IN_MONTH:
            log.debug("using RegularArithmetic for %s", type(schema).__name__)
            return RegularArithmetic(segment)
        log.debug("using PlainArithmetic for %s", type(schema).__name__)
        return PlainArithmetic(segment)

    # ---------------------------------------------------------
    # Range checks
    # ---------------------------------------------------------

    def _check_year(self, y: int) -> None:
        if not self._years.contains(y):
            raise ArithmeticOverflowError(f"year {y} is outside {self._years}")

    def _check_days_since_epoch(self, n: int) -> None:
        if not self._days.contains(n):
            raise ArithmeticOverflowError(f"day count {n} is outside {self._days}")

    def _check_months_since_epoch(self, n: int) -> None:
        if not self._months.contains(n):
            raise ArithmeticOverflowError(f"month count {n} is outside {self._months}")

    # ---------------------------------------------------------
    # Linear paths
    # ---------------------------------------------------------

    def _add_days_linear(self, parts: DateParts, days: int) -> DateParts:
        y, m, d = parts
        n = checked_add(self._schema.count_days_since_epoch(y, m, d), days)
        self._check_days_since_epoch(n)
        return self._schema.get_date_parts(n)

    def _add_days_ordinal_linear(self, parts: OrdinalParts, days: int) -> OrdinalParts:
        y, doy = parts
        n = checked_add(self._schema.count_days_since_epoch_ordinal(y, doy), days)
        self._check_days_since_epoch(n)
        return self._schema.get_year_doy(n)

    def _add_months_linear(self, parts: MonthParts, months: int) -> MonthParts:
        y, m = parts
        n = checked_add(self._schema.count_months_since_epoch(y, m), months)
        self._check_months_since_epoch(n)
        return self._schema.get_month_parts(n)

    # ---------------------------------------------------------
    # DateParts
    # ---------------------------------------------------------

    def add_days(self, parts: DateParts, days: int) -> DateParts:
        raise NotImplementedError

    def next_day(self, parts: DateParts) -> DateParts:
        raise NotImplementedError

    def previous_day(self, parts: DateParts) -> DateParts:
        raise NotImplementedError

    def count_days_between(self, start: DateParts, end: DateParts) -> int:
        if start.year == end.year and start.month == end.month:
            return end.day - start.day
        sch = self._schema
        return sch.count_days_since_epoch(*end) - sch.count_days_since_epoch(*start)

    # ---------------------------------------------------------
    # OrdinalParts
    # ---------------------------------------------------------

    def add_days_ordinal(self, parts: OrdinalParts, days: int) -> OrdinalParts:
        raise NotImplementedError

    def next_day_ordinal(self, parts: OrdinalParts) -> OrdinalParts:
        raise NotImplementedError

    def previous_day_ordinal(self, parts: OrdinalParts) -> OrdinalParts:
        raise NotImplementedError

    def count_days_between_ordinal(self, start: OrdinalParts, end: OrdinalParts) -> int:
        if start.year == end.year:
            return end.day_of_year - start.day_of_year
        sch = self._schema
        return sch.count_days_since_epoch_ordinal(*end) - sch.count_days_since_epoch_ordinal(*start)

    # ---------------------------------------------------------
    # MonthParts
    # ---------------------------------------------------------

    def add_months(self, parts: MonthParts, months: int) -> MonthParts:
        raise NotImplementedError

    def next_month(self, parts: MonthParts) -> MonthParts:
        return self.add_months(parts, 1)

    def previous_month(self, parts: MonthParts) -> MonthParts:
        return self.add_months(parts, -1)

    def count_months_between(self, start: MonthParts, end: MonthParts) -> int:
        if start.year == end.year:
            return end.month - start.month
        sch = self._schema
        return sch.count_months_since_epoch(*end) - sch.count_months_since_epoch(*start)

    # ---------------------------------------------------------
    # Non-standard operations (with roundoff)
    # ---------------------------------------------------------

    def add_years(self, parts: DateParts, years: int) -> Tuple[DateParts, int]:
        raise NotImplementedError

    def add_months_to_date(self, parts: DateParts, months: int) -> Tuple[DateParts, int]:
        y, m, d = parts
        target = self.add_months(MonthParts(y, m), months)
        return self._clamp_day(target.year, target.month, d)

    def add_years_ordinal(self, parts: OrdinalParts, years: int) -> Tuple[OrdinalParts, int]:
        y, doy = parts
        new_y = checked_add(y, years)
        self._check_year(new_y)
        days_in_year = self._schema.count_days_in_year(new_y)
        roundoff = max(0, doy - days_in_year)
        return OrdinalParts(new_y, days_in_year if roundoff > 0 else doy), roundoff

    def add_years_month(self, parts: MonthParts, years: int) -> Tuple[MonthParts, int]:
        y, m = parts
        new_y = checked_add(y, years)
        self._check_year(new_y)
        months_in_year = self._schema.count_months_in_year(new_y)
        roundoff = max(0, m - months_in_year)
        return MonthParts(new_y, months_in_year if roundoff > 0 else m), roundoff

    def _clamp_day(self, y: int, m: int, d: int) -> Tuple[DateParts, int]:
        days_in_month = self._schema.count_days_in_month(y, m)
        roundoff = max(0, d - days_in_month)
        return DateParts(y, m, days_in_month if roundoff > 0 else d), roundoff


class PlainArithmetic(NakedArithmetic):
    """Generic strategy, valid for every schema."""

    # ---------------------------------------------------------
    # DateParts
    # ---------------------------------------------------------

    def add_days(self, parts: DateParts, days: int) -> DateParts:
        return self._add_days_linear(parts, days)

    def next_day(self, parts: DateParts) -> DateParts:
        return self._add_days_linear(parts, 1)

    def previous_day(self, parts: DateParts) -> DateParts:
        return self._add_days_linear(parts, -1)

    # ---------------------------------------------------------
    # OrdinalParts
    # ---------------------------------------------------------

    def add_days_ordinal(self, parts: OrdinalParts, days: int) -> OrdinalParts:
        return self._add_days_ordinal_linear(parts, days)

    def next_day_ordinal(self, parts: OrdinalParts) -> OrdinalParts:
        return self._add_days_ordinal_linear(parts, 1)

    def previous_day_ordinal(self, parts: OrdinalParts) -> OrdinalParts:
        return self._add_days_ordinal_linear(parts, -1)

    # ---------------------------------------------------------
    # MonthParts
    # ---------------------------------------------------------

    def add_months(self, parts: MonthParts, months: int) -> MonthParts:
        return self._add_months_linear(parts, months)

    # ---------------------------------------------------------
    # Non-standard operations
    # ---------------------------------------------------------

    def add_years(self, parts: DateParts, years: int) -> Tuple[DateParts, int]:
        y, m, d = parts
        new_y = checked_add(y, years)
        self._check_year(new_y)
        sch = self._schema
        months_in_year = sch.count_months_in_year(new_y)
        if m > months_in_year:
            # The month does not exist in the target year: land on the last
            # day of its last month, the roundoff being the days of the
            # vanished months up to the given date.
            roundoff = d + sum(sch.count_days_in_month(y, i) for i in range(months_in_year + 1, m))
            return DateParts(new_y, months_in_year, sch.count_days_in_month(new_y, months_in_year)), roundoff
        return self._clamp_day(new_y, m, d)


class RegularArithmetic(NakedArithmetic):
    """Fast strategy for regular schemas."""

    def __init__(self, segment: CalendricalSegment):
        schema = segment.schema
        if not segment.is_complete:
            raise InvalidConstructionError("RegularArithmetic requires a complete segment")
        if schema.min_days_in_month < MIN_MIN_DAYS_IN_MONTH:
            raise InvalidConstructionError(
                f"RegularArithmetic requires months of at least {MIN_MIN_DAYS_IN_MONTH} days, "
                f"{type(schema).__name__} has {schema.min_days_in_month}"
            )
        regular, months_in_year = schema.is_regular()
        if not regular:
            raise InvalidConstructionError(f"{type(schema).__name__} is not regular")

        super().__init__(segment)
        self._months_in_year = months_in_year
        self._min_days_in_year = schema.min_days_in_year
        self._min_days_in_month = schema.min_days_in_month
        self._min_year = self._years.min
        self._max_year = self._years.max

    @property
    def months_in_year(self) -> int:
        return self._months_in_year

    def _add_days_via_day_of_year(self, y: int, doy: int, days: int) -> Tuple[int, int]:
        """Requires |days| <= min_days_in_year, so that at most one year is crossed."""
        sch = self._schema
        doy += days
        if doy < 1:
            if y == self._min_year:
                raise ArithmeticOverflowError(f"result precedes the first day of year {y}")
            y -= 1
            doy += sch.count_days_in_year(y)
        else:
            days_in_year = sch.count_days_in_year(y)
            if doy > days_in_year:
                if y == self._max_year:
                    raise ArithmeticOverflowError(f"result follows the last day of year {y}")
                y += 1
                doy -= days_in_year
        return y, doy

    # ---------------------------------------------------------
    # DateParts
    # ---------------------------------------------------------

    def add_days(self, parts: DateParts, days: int) -> DateParts:
        y, m, d = parts
        sch = self._schema
        dom = checked_add(d, days)
        if 1 <= dom and (dom <= self._min_days_in_month or dom <= sch.count_days_in_month(y, m)):
            return DateParts(y, m, dom)
        if -self._min_days_in_year <= days <= self._min_days_in_year:
            y, doy = self._add_days_via_day_of_year(y, sch.get_day_of_year(y, m, d), days)
            m, d = sch.get_month(y, doy)
            return DateParts(y, m, d)
        return self._add_days_linear(parts, days)

    def next_day(self, parts: DateParts) -> DateParts:
        y, m, d = parts
        sch = self._schema
        if d < self._min_days_in_month or d < sch.count_days_in_month(y, m):
            return DateParts(y, m, d + 1)
        if m < self._months_in_year:
            return DateParts(y, m + 1, 1)
        if y < self._max_year:
            return DateParts(y + 1, 1, 1)
        raise ArithmeticOverflowError(f"{parts} is the last supported day")

    def previous_day(self, parts: DateParts) -> DateParts:
        y, m, d = parts
        sch = self._schema
        if d > 1:
            return DateParts(y, m, d - 1)
        if m > 1:
            return DateParts(y, m - 1, sch.count_days_in_month(y, m - 1))
        if y > self._min_year:
            return sch.get_date_parts_at_end_of_year(y - 1)
        raise ArithmeticOverflowError(f"{parts} is the first supported day")

    # ---------------------------------------------------------
    # OrdinalParts
    # ---------------------------------------------------------

    def add_days_ordinal(self, parts: OrdinalParts, days: int) -> OrdinalParts:
        y, doy = parts
        new_doy = checked_add(doy, days)
        if 1 <= new_doy and (
            new_doy <= self._min_days_in_year or new_doy <= self._schema.count_days_in_year(y)
        ):
            return OrdinalParts(y, new_doy)
        if -self._min_days_in_year <= days <= self._min_days_in_year:
            return OrdinalParts(*self._add_days_via_day_of_year(y, doy, days))
        return self._add_days_ordinal_linear(parts, days)

    def next_day_ordinal(self, parts: OrdinalParts) -> OrdinalParts:
        y, doy = parts
        if doy < self._min_days_in_year or doy < self._schema.count_days_in_year(y):
            return OrdinalParts(y, doy + 1)
        if y < self._max_year:
            return OrdinalParts(y + 1, 1)
        raise ArithmeticOverflowError(f"{parts} is the last supported day")

    def previous_day_ordinal(self, parts: OrdinalParts) -> OrdinalParts:
        y, doy = parts
        if doy > 1:
            return OrdinalParts(y, doy - 1)
        if y > self._min_year:
            return OrdinalParts(y - 1, self._schema.count_days_in_year(y - 1))
        raise ArithmeticOverflowError(f"{parts} is the first supported day")

    # ---------------------------------------------------------
    # MonthParts
    # ---------------------------------------------------------

    def add_months(self, parts: MonthParts, months: int) -> MonthParts:
        y, m = parts
        q, r = divmod(checked_add(m - 1, months), self._months_in_year)
        new_y = y + q
        self._check_year(new_y)
        return MonthParts(new_y, 1 + r)

    def next_month(self, parts: MonthParts) -> MonthParts:
        y, m = parts
        if m < self._months_in_year:
            return MonthParts(y, m + 1)
        if y < self._max_year:
            return MonthParts(y + 1, 1)
        raise ArithmeticOverflowError(f"{parts} is the last supported month")

    def previous_month(self, parts: MonthParts) -> MonthParts:
        y, m = parts
        if m > 1:
            return MonthParts(y, m - 1)
        if y > self._min_year:
            return MonthParts(y - 1, self._months_in_year)
        raise ArithmeticOverflowError(f"{parts} is the first supported month")

    # ---------------------------------------------------------
    # Non-standard operations
    # ---------------------------------------------------------

    def add_years(self, parts: DateParts, years: int) -> Tuple[DateParts, int]:
        y, m, d = parts
        new_y = checked_add(y, years)
        self._check_year(new_y)
        return self._clamp_day(new_y, m, d)

    def add_years_month(self, parts: MonthParts, years: int) -> Tuple[MonthParts, int]:
        y, m = parts
        new_y = checked_add(y, years)
        self._check_year(new_y)
        return MonthParts(new_y, m), 0
