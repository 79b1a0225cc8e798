"""
calschema.engines.ptolemaic
---------------------------
Ptolemaic schemas: twelve months of 30 days followed by five epagomenal
days (six in a leap year).

The epagomenal days are exposed in one of two isomorphic ways:
  - twelve-month form: days 31..36 of an oversized month 12,
  - thirteen-month form: days 1..6 of a short virtual month 13.

Families:
  Coptic            leap every 4 years (years 3, 7, 11, ...)
  Egyptian          no leap year, 365 days
  French Republican Gregorian rule, except that multiples of 4000 are common
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..core.types import OrdinalParts
from ._intmath import augmented_divide, divide, divide_mod
from .schema import RegularSchema

DAYS_PER_4_YEAR_CYCLE = 1461
DAYS_PER_4000_YEAR_CYCLE = 4000 * 365 + 969


class PtolemaicSchema(RegularSchema):
    FAMILY = "ptolemaic"
    MIN_DAYS_IN_YEAR = 365

    def count_days_in_year(self, y: int) -> int:
        return 366 if self.is_leap_year(y) else 365

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 30 * (m - 1)

    def get_epagomenal_number(self, y: int, m: int, d: int) -> Optional[int]:
        raise NotImplementedError


# ---------------------------------------------------------
# Representations of the epagomenal days
# ---------------------------------------------------------

class _TwelveMonths:
    MONTHS_IN_YEAR = 12
    MIN_DAYS_IN_MONTH = 30

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 12 and d == 36

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return m == 12 and d > 30

    def get_epagomenal_number(self, y: int, m: int, d: int) -> Optional[int]:
        if m == 12 and d > 30:
            return d - 30
        return None

    def count_days_in_month(self, y: int, m: int) -> int:
        if m < 12:
            return 30
        return 36 if self.is_leap_year(y) else 35

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        d0y = doy - 1
        m = 1 + d0y // 30
        d = 1 + d0y % 30
        if m == 13:
            return 12, d + 30
        return m, d


class _ThirteenMonths:
    MONTHS_IN_YEAR = 13
    MIN_DAYS_IN_MONTH = 5

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 13 and d == 6

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return m == 13

    def get_epagomenal_number(self, y: int, m: int, d: int) -> Optional[int]:
        return d if m == 13 else None

    def count_days_in_month(self, y: int, m: int) -> int:
        if m < 13:
            return 30
        return 6 if self.is_leap_year(y) else 5

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        q, d = augmented_divide(doy - 1, 30)
        return 1 + q, d


# ---------------------------------------------------------
# Families
# ---------------------------------------------------------

class CopticSchema(PtolemaicSchema):

    def is_leap_year(self, y: int) -> bool:
        return ((y + 1) & 3) == 0

    def get_year(self, days_since_epoch: int) -> int:
        return divide((days_since_epoch << 2) + 1463, DAYS_PER_4_YEAR_CYCLE)

    def get_start_of_year(self, y: int) -> int:
        return 365 * (y - 1) + (y >> 2)


class EgyptianSchema(PtolemaicSchema):

    def is_leap_year(self, y: int) -> bool:
        return False

    def count_days_in_year(self, y: int) -> int:
        return 365

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        return 365 * (y - 1) + 30 * (m - 1) + d - 1

    def get_year(self, days_since_epoch: int) -> int:
        return 1 + divide(days_since_epoch, 365)

    def get_year_doy(self, days_since_epoch: int) -> OrdinalParts:
        q, r = divide_mod(days_since_epoch, 365)
        return OrdinalParts(1 + q, 1 + r)

    def get_start_of_year(self, y: int) -> int:
        return 365 * (y - 1)


class FrenchRepublicanSchema(PtolemaicSchema):

    def is_leap_year(self, y: int) -> bool:
        return (y & 3) == 0 and (y % 100 != 0 or y % 400 == 0) and y % 4000 != 0

    def get_year(self, days_since_epoch: int) -> int:
        y = 1 + divide(4000 * (days_since_epoch + 2), DAYS_PER_4000_YEAR_CYCLE)
        return y - 1 if days_since_epoch < self.get_start_of_year(y) else y

    def get_year_doy(self, days_since_epoch: int) -> OrdinalParts:
        y = 1 + divide(4000 * (days_since_epoch + 2), DAYS_PER_4000_YEAR_CYCLE)
        start_of_year = self.get_start_of_year(y)
        if days_since_epoch < start_of_year:
            y -= 1
            start_of_year = self.get_start_of_year(y)
        return OrdinalParts(y, 1 + days_since_epoch - start_of_year)

    def get_start_of_year(self, y: int) -> int:
        y -= 1
        c = divide(y, 100)
        millennium = divide(c, 10)
        return 365 * y + (y >> 2) - c + (c >> 2) - (millennium >> 2)


class Coptic12Schema(_TwelveMonths, CopticSchema):
    pass


class Coptic13Schema(_ThirteenMonths, CopticSchema):
    pass


class Egyptian12Schema(_TwelveMonths, EgyptianSchema):
    pass


class Egyptian13Schema(_ThirteenMonths, EgyptianSchema):
    pass


class FrenchRepublican12Schema(_TwelveMonths, FrenchRepublicanSchema):
    pass


class FrenchRepublican13Schema(_ThirteenMonths, FrenchRepublicanSchema):
    pass
