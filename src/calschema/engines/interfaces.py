"""
calschema.engines.interfaces
----------------------------
Defines the boundaries between the calendrical schemas (pure cycle
formulas), the arithmetic strategies built on top of them, and the
Calendar orchestrator.

Standard Reference Frame:
Every schema counts days and months from its own epoch, the first day of
year 1: count_days_since_epoch(1, 1, 1) == 0. A Calendar adds its epoch
offset to obtain a day number shared by all calendars.
"""

from __future__ import annotations

from typing import Protocol, Tuple

from ..core.types import DateParts, MonthParts, OrdinalParts
from .segment import CalendricalSegment, Range


class SchemaProtocol(Protocol):
    """
    Describes how a calendar family divides years into months and days.
    Every method is total and side-effect-free inside supported_years.
    """

    @property
    def family(self) -> str: ...

    @property
    def min_days_in_year(self) -> int: ...

    @property
    def min_days_in_month(self) -> int: ...

    @property
    def supported_years(self) -> Range: ...

    # ---------------------------------------------------------
    # 1. Characteristics
    # ---------------------------------------------------------
    def is_regular(self) -> Tuple[bool, int]:
        """
        Returns (True, months_in_year) when every year has the same number
        of months, (False, 0) otherwise.
        """
        ...

    def is_leap_year(self, y: int) -> bool: ...
    def is_intercalary_month(self, y: int, m: int) -> bool: ...
    def is_intercalary_day(self, y: int, m: int, d: int) -> bool: ...
    def is_supplementary_day(self, y: int, m: int, d: int) -> bool: ...

    # ---------------------------------------------------------
    # 2. Counting
    # ---------------------------------------------------------
    def count_months_in_year(self, y: int) -> int: ...
    def count_days_in_year(self, y: int) -> int: ...
    def count_days_in_month(self, y: int, m: int) -> int: ...
    def count_days_in_year_before_month(self, y: int, m: int) -> int: ...

    # ---------------------------------------------------------
    # 3. Conversions
    # ---------------------------------------------------------
    def count_days_since_epoch(self, y: int, m: int, d: int) -> int: ...
    def count_days_since_epoch_ordinal(self, y: int, doy: int) -> int: ...
    def get_date_parts(self, days_since_epoch: int) -> DateParts: ...
    def get_year(self, days_since_epoch: int) -> int: ...
    def get_year_doy(self, days_since_epoch: int) -> OrdinalParts: ...
    def get_month(self, y: int, doy: int) -> Tuple[int, int]: ...
    def get_day_of_year(self, y: int, m: int, d: int) -> int: ...
    def get_start_of_year(self, y: int) -> int: ...
    def get_end_of_year(self, y: int) -> int: ...
    def get_date_parts_at_end_of_year(self, y: int) -> DateParts: ...

    def count_months_since_epoch(self, y: int, m: int) -> int: ...
    def get_month_parts(self, months_since_epoch: int) -> MonthParts: ...
    def get_start_of_year_in_months(self, y: int) -> int: ...
    def get_end_of_year_in_months(self, y: int) -> int: ...


class ArithmeticProtocol(Protocol):
    """
    Adds day/month/year deltas to parts, raising ArithmeticOverflowError
    when the result leaves the segment.
    """

    @property
    def schema(self) -> SchemaProtocol: ...

    @property
    def segment(self) -> CalendricalSegment: ...

    def add_days(self, parts: DateParts, days: int) -> DateParts: ...
    def next_day(self, parts: DateParts) -> DateParts: ...
    def previous_day(self, parts: DateParts) -> DateParts: ...
    def count_days_between(self, start: DateParts, end: DateParts) -> int: ...

    def add_days_ordinal(self, parts: OrdinalParts, days: int) -> OrdinalParts: ...
    def next_day_ordinal(self, parts: OrdinalParts) -> OrdinalParts: ...
    def previous_day_ordinal(self, parts: OrdinalParts) -> OrdinalParts: ...
    def count_days_between_ordinal(self, start: OrdinalParts, end: OrdinalParts) -> int: ...

    def add_months(self, parts: MonthParts, months: int) -> MonthParts: ...
    def next_month(self, parts: MonthParts) -> MonthParts: ...
    def previous_month(self, parts: MonthParts) -> MonthParts: ...
    def count_months_between(self, start: MonthParts, end: MonthParts) -> int: ...

    def add_years(self, parts: DateParts, years: int) -> Tuple[DateParts, int]: ...
    def add_months_to_date(self, parts: DateParts, months: int) -> Tuple[DateParts, int]: ...
    def add_years_ordinal(self, parts: OrdinalParts, years: int) -> Tuple[OrdinalParts, int]: ...
    def add_years_month(self, parts: MonthParts, years: int) -> Tuple[MonthParts, int]: ...
