from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Literal, Tuple

AdditionRule = Literal["truncate", "overspill", "exact", "overflow"]
ADDITION_RULES: Tuple[str, ...] = ("truncate", "overspill", "exact", "overflow")

def check_addition_rule(rule: str) -> str:
    if rule not in ADDITION_RULES:
        raise ValueError(f"Unknown addition rule '{rule}'. Expected one of {ADDITION_RULES}")
    return rule

def _fmt_year(y: int) -> str:
    return f"-{-y:04d}" if y < 0 else f"{y:04d}"

@dataclass(frozen=True, order=True)
class DateParts:
    year: int
    month: int
    day: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.year, self.month, self.day))

    def __str__(self) -> str:
        return f"{_fmt_year(self.year)}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True, order=True)
class OrdinalParts:
    year: int
    day_of_year: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.year, self.day_of_year))

    def __str__(self) -> str:
        return f"{_fmt_year(self.year)}-{self.day_of_year:03d}"

@dataclass(frozen=True, order=True)
class MonthParts:
    year: int
    month: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.year, self.month))

    def __str__(self) -> str:
        return f"{_fmt_year(self.year)}-{self.month:02d}"

@dataclass(frozen=True)
class CalendarId:
    family: Literal["gj", "ptolemaic", "persian", "lunar", "blank_day", "custom"]
    name: str
