"""
calschema.engines.calendar_math
-------------------------------
Year and month additions on full dates, under an addition rule.

Adding months or years to a date may land on a day that does not exist
(31 May + 1 month, 29 February + 1 year). The arithmetic layer clamps to
the last day of the target month and reports the roundoff; the rule
chooses what happens next:

  truncate   keep the clamped date              31/05 + 1 month -> 30/06
  overspill  move one day past the clamped date 31/05 + 1 month -> 01/07
  exact      move roundoff days past it         31/05/2014 + 9 months -> 03/03/2015
  overflow   raise RoundoffError
"""

from __future__ import annotations

from typing import Tuple

from ..core.errors import RoundoffError
from ..core.types import AdditionRule, DateParts, MonthParts, OrdinalParts, check_addition_rule
from .interfaces import ArithmeticProtocol


class CalendarMath:
    def __init__(self, arithmetic: ArithmeticProtocol, rule: AdditionRule = "truncate"):
        self.arithmetic = arithmetic
        self.rule = check_addition_rule(rule)

    def __repr__(self) -> str:
        return f"CalendarMath({type(self.arithmetic).__name__}, rule={self.rule!r})"

    # ---------------------------------------------------------
    # Rule application
    # ---------------------------------------------------------

    def _adjust(self, result: DateParts, roundoff: int) -> DateParts:
        if roundoff == 0 or self.rule == "truncate":
            return result
        if self.rule == "overspill":
            return self.arithmetic.next_day(result)
        if self.rule == "exact":
            return self.arithmetic.add_days(result, roundoff)
        raise RoundoffError(f"result {result} was clamped by {roundoff}")

    def _adjust_ordinal(self, result: OrdinalParts, roundoff: int) -> OrdinalParts:
        if roundoff == 0 or self.rule == "truncate":
            return result
        if self.rule == "overspill":
            return self.arithmetic.next_day_ordinal(result)
        if self.rule == "exact":
            return self.arithmetic.add_days_ordinal(result, roundoff)
        raise RoundoffError(f"result {result} was clamped by {roundoff}")

    def _adjust_month(self, result: MonthParts, roundoff: int) -> MonthParts:
        if roundoff == 0 or self.rule == "truncate":
            return result
        if self.rule == "overspill":
            return self.arithmetic.next_month(result)
        if self.rule == "exact":
            return self.arithmetic.add_months(result, roundoff)
        raise RoundoffError(f"result {result} was clamped by {roundoff}")

    # ---------------------------------------------------------
    # Additions
    # ---------------------------------------------------------

    def add_years(self, parts: DateParts, years: int) -> DateParts:
        return self._adjust(*self.arithmetic.add_years(parts, years))

    def add_months(self, parts: DateParts, months: int) -> DateParts:
        return self._adjust(*self.arithmetic.add_months_to_date(parts, months))

    def add_years_ordinal(self, parts: OrdinalParts, years: int) -> OrdinalParts:
        return self._adjust_ordinal(*self.arithmetic.add_years_ordinal(parts, years))

    def add_years_month(self, parts: MonthParts, years: int) -> MonthParts:
        return self._adjust_month(*self.arithmetic.add_years_month(parts, years))

    # ---------------------------------------------------------
    # Differences
    # ---------------------------------------------------------

    def count_years_between(self, start: DateParts, end: DateParts) -> Tuple[int, DateParts]:
        """
        Returns (years, new_start) where years is the largest count such that
        new_start = add_years(start, years) does not go past end.
        """
        years = end.year - start.year
        new_start = self.add_years(start, years)
        if start < end:
            if new_start > end:
                years -= 1
                new_start = self.add_years(start, years)
        elif new_start < end:
            years += 1
            new_start = self.add_years(start, years)
        return years, new_start

    def count_months_between_dates(self, start: DateParts, end: DateParts) -> Tuple[int, DateParts]:
        """Same as count_years_between, counting months."""
        months = self.arithmetic.count_months_between(
            MonthParts(start.year, start.month), MonthParts(end.year, end.month)
        )
        new_start = self.add_months(start, months)
        if start < end:
            if new_start > end:
                months -= 1
                new_start = self.add_months(start, months)
        elif new_start < end:
            months += 1
            new_start = self.add_months(start, months)
        return months, new_start
