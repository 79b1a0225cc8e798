"""
calschema.engines.tabular_islamic
---------------------------------
Tabular (arithmetical) Islamic calendar.

Twelve months alternating 30 and 29 days; in a leap year the last month
has 30 days. A 30-year cycle has 10 631 days and 11 leap years, the
years y with (14 + 11 * y) mod 30 < 11.
"""

from __future__ import annotations

from typing import Tuple

from ._intmath import divide
from .schema import RegularSchema
from .segment import Range

DAYS_PER_30_YEAR_CYCLE = 10_631


class TabularIslamicSchema(RegularSchema):
    FAMILY = "lunar"
    MONTHS_IN_YEAR = 12
    MIN_DAYS_IN_YEAR = 354
    MIN_DAYS_IN_MONTH = 29
    SUPPORTED_YEARS = Range(-199_999, 200_000)

    def is_leap_year(self, y: int) -> bool:
        return (14 + 11 * y) % 30 < 11

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 12 and d == 30

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_days_in_year(self, y: int) -> int:
        return 355 if self.is_leap_year(y) else 354

    def count_days_in_month(self, y: int, m: int) -> int:
        if (m & 1) == 1 or (m == 12 and self.is_leap_year(y)):
            return 30
        return 29

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 29 * (m - 1) + (m >> 1)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        d0y = doy - 1
        m = (11 * d0y + 330) // 325
        return m, 1 + d0y - 29 * (m - 1) - (m >> 1)

    def get_year(self, days_since_epoch: int) -> int:
        return divide(30 * days_since_epoch + 10_646, DAYS_PER_30_YEAR_CYCLE)

    def get_start_of_year(self, y: int) -> int:
        return 354 * (y - 1) + divide(3 + 11 * y, 30)
