"""
calschema.engines.gregorian
---------------------------
Gregorian and Julian schemas (the GJ family).

Both share the month structure (31/28-29/31/30/...) and use March-based
formulas: shifting the year so that it starts in March puts the leap day
at the very end, after which month boundaries follow the polynomial
(153 * m + 2) // 5.

Cycles:
  Julian     4 years    =   1 461 days
  Gregorian  100 years  =  36 524 days, 400 years = 146 097 days
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import DateParts
from ._intmath import divide
from .schema import RegularSchema
from .segment import Range

DAYS_PER_4_YEAR_CYCLE = 1461
DAYS_PER_400_YEAR_CYCLE = 146_097

# Days from March 1st of year 0 to January 1st of year 1.
_DAYS_FROM_MARCH_0_TO_JANUARY_1 = 306


def _march_based(y: int, m: int) -> Tuple[int, int]:
    if m < 3:
        return y - 1, m + 9
    return y, m - 3


def _from_march_based(y: int, m: int) -> Tuple[int, int]:
    if m > 9:
        return y + 1, m - 9
    return y, m + 3


def is_gregorian_leap_year(y: int) -> bool:
    return (y & 3) == 0 and (y % 100 != 0 or y % 400 == 0)


def is_julian_leap_year(y: int) -> bool:
    return (y & 3) == 0


def gregorian_start_of_year(y: int) -> int:
    y -= 1
    c = divide(y, 100)
    return 365 * y + (y >> 2) - c + (c >> 2)


def gregorian_year(days_since_epoch: int) -> int:
    y = divide(400 * (days_since_epoch + 2), DAYS_PER_400_YEAR_CYCLE)
    return y if days_since_epoch < gregorian_start_of_year(y + 1) else y + 1


class GJSchema(RegularSchema):
    """Common month structure of the Gregorian and Julian schemas."""
    FAMILY = "gj"
    MONTHS_IN_YEAR = 12
    MIN_DAYS_IN_YEAR = 365
    MIN_DAYS_IN_MONTH = 28

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 2 and d == 29

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_days_in_year(self, y: int) -> int:
        return 366 if self.is_leap_year(y) else 365

    def count_days_in_month(self, y: int, m: int) -> int:
        if m != 2:
            return 30 + ((m + (m >> 3)) & 1)
        return 29 if self.is_leap_year(y) else 28

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        if m < 3:
            return 31 * (m - 1)
        if self.is_leap_year(y):
            return (153 * m - 157) // 5
        return (153 * m - 162) // 5

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if doy < 60:
            return 1 + (doy - 1) // 31, 1 + (doy - 1) % 31
        if doy == 60:
            return (2, 29) if self.is_leap_year(y) else (3, 1)
        # March-based day of the year, 0 on March 1st.
        d0y = doy - (61 if self.is_leap_year(y) else 60)
        n = (5 * d0y + 2) // 153
        return n + 3, d0y - (153 * n + 2) // 5 + 1


class GregorianSchema(GJSchema):

    def is_leap_year(self, y: int) -> bool:
        return is_gregorian_leap_year(y)

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        y, m = _march_based(y, m)
        C, Y = divmod(y, 100)
        return (
            -_DAYS_FROM_MARCH_0_TO_JANUARY_1
            + ((DAYS_PER_400_YEAR_CYCLE * C) >> 2)
            + ((DAYS_PER_4_YEAR_CYCLE * Y) >> 2)
            + (153 * m + 2) // 5
            + d - 1
        )

    def get_date_parts(self, days_since_epoch: int) -> DateParts:
        n = days_since_epoch + _DAYS_FROM_MARCH_0_TO_JANUARY_1
        C = divide((n << 2) + 3, DAYS_PER_400_YEAR_CYCLE)
        D = n - ((DAYS_PER_400_YEAR_CYCLE * C) >> 2)
        Y = ((D << 2) + 3) // DAYS_PER_4_YEAR_CYCLE
        d0y = D - ((DAYS_PER_4_YEAR_CYCLE * Y) >> 2)
        m = (5 * d0y + 2) // 153
        d = 1 + d0y - (153 * m + 2) // 5
        y, m = _from_march_based(100 * C + Y, m)
        return DateParts(y, m, d)

    def get_year(self, days_since_epoch: int) -> int:
        return gregorian_year(days_since_epoch)

    def get_start_of_year(self, y: int) -> int:
        return gregorian_start_of_year(y)


class CivilSchema(GregorianSchema):
    """Gregorian schema restricted to years on or after year 1."""
    SUPPORTED_YEARS = Range(1, 999_999)


class JulianSchema(GJSchema):

    def is_leap_year(self, y: int) -> bool:
        return is_julian_leap_year(y)

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        y, m = _march_based(y, m)
        return (
            -_DAYS_FROM_MARCH_0_TO_JANUARY_1
            + ((DAYS_PER_4_YEAR_CYCLE * y) >> 2)
            + (153 * m + 2) // 5
            + d - 1
        )

    def get_date_parts(self, days_since_epoch: int) -> DateParts:
        n = days_since_epoch + _DAYS_FROM_MARCH_0_TO_JANUARY_1
        y = divide((n << 2) + 3, DAYS_PER_4_YEAR_CYCLE)
        d0y = n - ((DAYS_PER_4_YEAR_CYCLE * y) >> 2)
        m = (5 * d0y + 2) // 153
        d = 1 + d0y - (153 * m + 2) // 5
        y, m = _from_march_based(y, m)
        return DateParts(y, m, d)

    def get_year(self, days_since_epoch: int) -> int:
        return divide((days_since_epoch << 2) + 1464, DAYS_PER_4_YEAR_CYCLE)

    def get_start_of_year(self, y: int) -> int:
        y -= 1
        return 365 * y + (y >> 2)
