"""
calschema.engines.blank_day
---------------------------
Perennial calendars with blank days, all following the Gregorian leap
rule and the Gregorian start of year.

A blank day belongs to no week and, formally, to no month. Here it is
attached to the preceding month as an extra day number beyond the
genuine month length, instead of being modelled as a 0-day month:

  World               quarters of 31/30/30 days; blank days (12, 31) and,
                      in a leap year, (6, 31)
  Positivist          13 months of 28 days; blank days (13, 29) and,
                      in a leap year, (13, 30)
  International Fixed 13 months of 28 days; blank days (13, 29) and,
                      in a leap year, (6, 29)

Blank days are supplementary; the leap-year blank day is the intercalary
day.
"""

from __future__ import annotations

from typing import Tuple

from .gregorian import gregorian_start_of_year, gregorian_year, is_gregorian_leap_year
from .schema import RegularSchema


class BlankDaySchema(RegularSchema):
    FAMILY = "blank_day"
    MIN_DAYS_IN_YEAR = 365

    def is_blank_day(self, y: int, m: int, d: int) -> bool:
        return self.is_supplementary_day(y, m, d)

    def is_leap_year(self, y: int) -> bool:
        return is_gregorian_leap_year(y)

    def count_days_in_year(self, y: int) -> int:
        return 366 if is_gregorian_leap_year(y) else 365

    def get_year(self, days_since_epoch: int) -> int:
        return gregorian_year(days_since_epoch)

    def get_start_of_year(self, y: int) -> int:
        return gregorian_start_of_year(y)


class WorldSchema(BlankDaySchema):
    MONTHS_IN_YEAR = 12
    MIN_DAYS_IN_MONTH = 30

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return d == 31 and m == 6

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return d == 31 and (m == 6 or m == 12)

    def count_days_in_month(self, y: int, m: int) -> int:
        if m == 12 or (m - 1) % 3 == 0:
            return 31
        if m == 6 and self.is_leap_year(y):
            return 31
        return 30

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        m -= 1
        count = 91 * (m // 3)
        if m > 5 and self.is_leap_year(y):
            count += 1
        r = m % 3
        return count if r == 0 else count + 1 + 30 * r

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if self.is_leap_year(y):
            if doy == 183:
                return 6, 31
            if doy > 183:
                doy -= 1
        if doy == 365:
            return 12, 31
        # Quarters of 91 days: 31 + 30 + 30.
        q, j = divmod(doy - 1, 91)
        if j < 31:
            return 1 + 3 * q, 1 + j
        j -= 1
        return 1 + 3 * q + j // 30, 1 + j % 30


class PositivistSchema(BlankDaySchema):
    MONTHS_IN_YEAR = 13
    MIN_DAYS_IN_MONTH = 28

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return d == 30

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return d > 28

    def count_days_in_month(self, y: int, m: int) -> int:
        if m < 13:
            return 28
        return 30 if self.is_leap_year(y) else 29

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 28 * (m - 1)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if doy > 336:
            return 13, doy - 336
        return 1 + (doy - 1) // 28, 1 + (doy - 1) % 28


class InternationalFixedSchema(BlankDaySchema):
    MONTHS_IN_YEAR = 13
    MIN_DAYS_IN_MONTH = 28

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return d == 29 and m == 6

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return d > 28

    def count_days_in_month(self, y: int, m: int) -> int:
        if m == 13:
            return 29
        if m == 6 and self.is_leap_year(y):
            return 29
        return 28

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        count = 28 * (m - 1)
        if m > 6 and self.is_leap_year(y):
            count += 1
        return count

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if self.is_leap_year(y):
            if doy == 169:
                return 6, 29
            if doy > 169:
                doy -= 1
        if doy > 336:
            return 13, doy - 336
        return 1 + (doy - 1) // 28, 1 + (doy - 1) % 28
