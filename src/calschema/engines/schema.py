"""
calschema.engines.schema
------------------------
Base classes for calendrical schemas.

A schema is an immutable, stateless description of one calendar family:
how years divide into months and days, and the closed-form formulas that
map (year, month, day) to a linear count of days since the epoch and back.
Day 0 is always the first day of year 1.

Concrete families only provide the cycle formulas (leap rule, month
lengths, start of year, year from day count, month from day of year); all
derived counts and conversions below are shared.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..core.types import DateParts, MonthParts, OrdinalParts
from .segment import Range

# Large enough for every family, small enough to keep all counts in 32 bits.
DEFAULT_SUPPORTED_YEARS = Range(-999_998, 999_999)


class CalendricalSchema:
    """
    Abstract schema. Subclasses must override the methods raising
    NotImplementedError.
    """
    FAMILY: str = "custom"
    MIN_DAYS_IN_YEAR: int = 0
    MIN_DAYS_IN_MONTH: int = 0
    SUPPORTED_YEARS: Range = DEFAULT_SUPPORTED_YEARS

    # ---------------------------------------------------------
    # Characteristics
    # ---------------------------------------------------------

    @property
    def family(self) -> str:
        return self.FAMILY

    @property
    def min_days_in_year(self) -> int:
        return self.MIN_DAYS_IN_YEAR

    @property
    def min_days_in_month(self) -> int:
        return self.MIN_DAYS_IN_MONTH

    @property
    def supported_years(self) -> Range:
        return self.SUPPORTED_YEARS

    def is_regular(self) -> Tuple[bool, int]:
        return False, 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    # ---------------------------------------------------------
    # Cycle formulas (per family)
    # ---------------------------------------------------------

    def is_leap_year(self, y: int) -> bool:
        raise NotImplementedError

    def is_intercalary_month(self, y: int, m: int) -> bool:
        raise NotImplementedError

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        raise NotImplementedError

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        raise NotImplementedError

    def count_months_in_year(self, y: int) -> int:
        raise NotImplementedError

    def count_days_in_year(self, y: int) -> int:
        raise NotImplementedError

    def count_days_in_month(self, y: int, m: int) -> int:
        raise NotImplementedError

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        raise NotImplementedError

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        """(month, day) for a day of the year in 1..days_in_year(y)."""
        raise NotImplementedError

    def get_year(self, days_since_epoch: int) -> int:
        raise NotImplementedError

    def get_start_of_year(self, y: int) -> int:
        raise NotImplementedError

    def count_months_since_epoch(self, y: int, m: int) -> int:
        raise NotImplementedError

    def get_month_parts(self, months_since_epoch: int) -> MonthParts:
        raise NotImplementedError

    def get_start_of_year_in_months(self, y: int) -> int:
        raise NotImplementedError

    # ---------------------------------------------------------
    # Derived counts
    # ---------------------------------------------------------

    def count_days_in_year_after_month(self, y: int, m: int) -> int:
        return (
            self.count_days_in_year(y)
            - self.count_days_in_year_before_month(y, m)
            - self.count_days_in_month(y, m)
        )

    def count_days_in_year_before(self, y: int, m: int, d: int) -> int:
        return self.count_days_in_year_before_month(y, m) + d - 1

    def count_days_in_year_after(self, y: int, m: int, d: int) -> int:
        return self.count_days_in_year(y) - self.count_days_in_year_before_month(y, m) - d

    def count_days_in_year_before_ordinal(self, y: int, doy: int) -> int:
        return doy - 1

    def count_days_in_year_after_ordinal(self, y: int, doy: int) -> int:
        return self.count_days_in_year(y) - doy

    def count_days_in_month_before(self, y: int, m: int, d: int) -> int:
        return d - 1

    def count_days_in_month_after(self, y: int, m: int, d: int) -> int:
        return self.count_days_in_month(y, m) - d

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        return self.get_start_of_year(y) + self.count_days_in_year_before_month(y, m) + d - 1

    def count_days_since_epoch_ordinal(self, y: int, doy: int) -> int:
        return self.get_start_of_year(y) + doy - 1

    def get_date_parts(self, days_since_epoch: int) -> DateParts:
        y, doy = self.get_year_doy(days_since_epoch)
        m, d = self.get_month(y, doy)
        return DateParts(y, m, d)

    def get_year_doy(self, days_since_epoch: int) -> OrdinalParts:
        y = self.get_year(days_since_epoch)
        return OrdinalParts(y, 1 + days_since_epoch - self.get_start_of_year(y))

    def get_day_of_year(self, y: int, m: int, d: int) -> int:
        return self.count_days_in_year_before_month(y, m) + d

    def get_ordinal_parts(self, y: int, m: int, d: int) -> OrdinalParts:
        return OrdinalParts(y, self.get_day_of_year(y, m, d))

    def get_date_parts_from_ordinal(self, y: int, doy: int) -> DateParts:
        m, d = self.get_month(y, doy)
        return DateParts(y, m, d)

    # ---------------------------------------------------------
    # Boundaries
    # ---------------------------------------------------------

    def get_end_of_year(self, y: int) -> int:
        return self.get_start_of_year(y) + self.count_days_in_year(y) - 1

    def get_start_of_month(self, y: int, m: int) -> int:
        return self.get_start_of_year(y) + self.count_days_in_year_before_month(y, m)

    def get_end_of_month(self, y: int, m: int) -> int:
        return self.get_start_of_month(y, m) + self.count_days_in_month(y, m) - 1

    def get_date_parts_at_end_of_year(self, y: int) -> DateParts:
        m = self.count_months_in_year(y)
        return DateParts(y, m, self.count_days_in_month(y, m))

    def get_month_parts_at_end_of_year(self, y: int) -> MonthParts:
        return MonthParts(y, self.count_months_in_year(y))

    def get_end_of_year_in_months(self, y: int) -> int:
        return self.get_start_of_year_in_months(y) + self.count_months_in_year(y) - 1


class RegularSchema(CalendricalSchema):
    """A schema where every year has MONTHS_IN_YEAR months."""
    MONTHS_IN_YEAR: int = 12

    @property
    def months_in_year(self) -> int:
        return self.MONTHS_IN_YEAR

    def is_regular(self) -> Tuple[bool, int]:
        return True, self.MONTHS_IN_YEAR

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return False

    def count_months_in_year(self, y: int) -> int:
        return self.MONTHS_IN_YEAR

    def count_months_since_epoch(self, y: int, m: int) -> int:
        return self.MONTHS_IN_YEAR * (y - 1) + m - 1

    def get_month_parts(self, months_since_epoch: int) -> MonthParts:
        q, r = divmod(months_since_epoch, self.MONTHS_IN_YEAR)
        return MonthParts(1 + q, 1 + r)

    def get_start_of_year_in_months(self, y: int) -> int:
        return self.MONTHS_IN_YEAR * (y - 1)

    def get_end_of_year_in_months(self, y: int) -> int:
        return self.MONTHS_IN_YEAR * y - 1

    def get_date_parts_at_end_of_year(self, y: int) -> DateParts:
        return DateParts(y, self.MONTHS_IN_YEAR, self.count_days_in_month(y, self.MONTHS_IN_YEAR))


def epagomenal_number(schema: CalendricalSchema, y: int, m: int, d: int) -> Optional[int]:
    """Epagomenal number (1-based) of a date, None for ordinary days."""
    getter = getattr(schema, "get_epagomenal_number", None)
    if getter is None:
        return None
    return getter(y, m, d)
