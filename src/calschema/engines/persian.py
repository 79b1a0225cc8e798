"""
calschema.engines.persian
-------------------------
Arithmetical Persian calendar with a 2820-year grand cycle.

Month lengths: six months of 31 days, five of 30, and a last month of 29
days (30 in a leap year).

The grand cycle (1 029 983 days, 683 leap years) is anchored at YEAR_ZERO
= 474: year 475 is the first year of the first complete cycle. Inside a
cycle, with Y = 474 + (y - 474) mod 2820, the year is leap iff
31 * (Y + 38) mod 128 < 31, which spreads the leap years over 128-year
subcycles (46 751 days) made of 29-, 33- and 37-year periods.
"""

from __future__ import annotations

from typing import Tuple

from ._intmath import divide_mod, modulo
from .schema import RegularSchema

YEAR_ZERO = 474
DAYS_PER_2820_YEAR_CYCLE = 2820 * 365 + 683
DAYS_PER_128_YEAR_SUBCYCLE = 128 * 365 + 31


class Persian2820Schema(RegularSchema):
    FAMILY = "persian"
    MONTHS_IN_YEAR = 12
    MIN_DAYS_IN_YEAR = 365
    MIN_DAYS_IN_MONTH = 29

    def is_leap_year(self, y: int) -> bool:
        Y = YEAR_ZERO + modulo(y - YEAR_ZERO, 2820)
        return 31 * (Y + 38) % 128 < 31

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 12 and d == 30

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_days_in_year(self, y: int) -> int:
        return 366 if self.is_leap_year(y) else 365

    def count_days_in_month(self, y: int, m: int) -> int:
        if m < 7:
            return 31
        if m < 12:
            return 30
        return 30 if self.is_leap_year(y) else 29

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        if m < 8:
            return 31 * (m - 1)
        return 6 + 30 * (m - 1)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        d0y = doy - 1
        if d0y < 186:
            m = 1 + d0y // 31
        else:
            m = 1 + (d0y - 6) // 30
        return m, 1 + d0y - self.count_days_in_year_before_month(y, m)

    def get_year(self, days_since_epoch: int) -> int:
        n = days_since_epoch - self.get_start_of_year(YEAR_ZERO + 1)
        C, D = divide_mod(n, DAYS_PER_2820_YEAR_CYCLE)
        # The last day of a grand cycle closes a leap year that the subcycle
        # estimate below would push into the next cycle.
        if D == DAYS_PER_2820_YEAR_CYCLE - 1:
            Y = 2820
        else:
            Y = (128 * D + DAYS_PER_128_YEAR_SUBCYCLE + 127) // DAYS_PER_128_YEAR_SUBCYCLE
        return YEAR_ZERO + 2820 * C + Y

    def get_start_of_year(self, y: int) -> int:
        C, r = divide_mod(y - YEAR_ZERO, 2820)
        Y = YEAR_ZERO + r
        return DAYS_PER_2820_YEAR_CYCLE * C + 365 * (Y - 1) + (31 * Y - 5) // 128
