"""
A lunisolar-like schema used to exercise the irregular code paths:
every third year has 13 months, months alternate 30 and 29 days.
"""
from __future__ import annotations

from typing import Tuple

from calschema.core.types import MonthParts
from calschema.engines.schema import CalendricalSchema
from calschema.engines.segment import Range

DAYS_PER_3_YEAR_CYCLE = 354 + 354 + 384
MONTHS_PER_3_YEAR_CYCLE = 12 + 12 + 13


class FauxLunisolarSchema(CalendricalSchema):
    FAMILY = "custom"
    MIN_DAYS_IN_YEAR = 354
    MIN_DAYS_IN_MONTH = 29
    SUPPORTED_YEARS = Range(-9999, 9999)

    def is_leap_year(self, y: int) -> bool:
        return y % 3 == 0

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return m == 13

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_months_in_year(self, y: int) -> int:
        return 13 if self.is_leap_year(y) else 12

    def count_days_in_year(self, y: int) -> int:
        return 384 if self.is_leap_year(y) else 354

    def count_days_in_month(self, y: int, m: int) -> int:
        return 30 if m % 2 == 1 else 29

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 29 * (m - 1) + m // 2

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        m = 1
        while doy > self.count_days_in_month(y, m):
            doy -= self.count_days_in_month(y, m)
            m += 1
        return m, doy

    def get_year(self, days_since_epoch: int) -> int:
        q, r = divmod(days_since_epoch, DAYS_PER_3_YEAR_CYCLE)
        return 1 + 3 * q + min(r // 354, 2)

    def get_start_of_year(self, y: int) -> int:
        q, r = divmod(y - 1, 3)
        return DAYS_PER_3_YEAR_CYCLE * q + 354 * r

    def count_months_since_epoch(self, y: int, m: int) -> int:
        q, r = divmod(y - 1, 3)
        return MONTHS_PER_3_YEAR_CYCLE * q + 12 * r + m - 1

    def get_month_parts(self, months_since_epoch: int) -> MonthParts:
        q, r = divmod(months_since_epoch, MONTHS_PER_3_YEAR_CYCLE)
        k = min(r // 12, 2)
        return MonthParts(1 + 3 * q + k, 1 + r - 12 * k)

    def get_start_of_year_in_months(self, y: int) -> int:
        return self.count_months_since_epoch(y, 1)
