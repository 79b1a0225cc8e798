from __future__ import annotations

from typing import Any, Dict, List, Optional

from .core.engine import CalendarRegistry
from .core.types import AdditionRule, DateParts
from .engines.calendar import Calendar, DateLike
from .engines.factory import make_calendar as _make_calendar
from .engines.specs import CalendarSpec

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def get_calendar(name: str) -> Calendar:
    return _reg().get(name)

def make_calendar(spec: CalendarSpec) -> Calendar:
    return _make_calendar(spec)

def register_calendar(name: str, calendar: Calendar, *, overwrite: bool = False) -> None:
    _reg().register(name, calendar, overwrite=overwrite)

# ============================================================
# Conversions
# ============================================================

def day_number(parts: DateLike, *, calendar: str = "gregorian") -> int:
    return _reg().get(calendar).to_day_number(parts)

def from_day_number(n: int, *, calendar: str = "gregorian") -> DateParts:
    return _reg().get(calendar).from_day_number(n)

def convert(parts: DateLike, *, source: str, target: str) -> DateParts:
    """Same day expressed in another calendar."""
    reg = _reg()
    return reg.get(target).from_day_number(reg.get(source).to_day_number(parts))

def describe(parts: DateLike, *, calendar: str = "gregorian") -> Dict[str, Any]:
    return _reg().get(calendar).describe(parts)

# ============================================================
# Arithmetic
# ============================================================

def add_days(parts: DateLike, days: int, *, calendar: str = "gregorian") -> DateParts:
    return _reg().get(calendar).add_days(parts, days)

def add_months(
    parts: DateLike, months: int, *, calendar: str = "gregorian", rule: Optional[AdditionRule] = None
) -> DateParts:
    return _reg().get(calendar).add_months(parts, months, rule=rule)

def add_years(
    parts: DateLike, years: int, *, calendar: str = "gregorian", rule: Optional[AdditionRule] = None
) -> DateParts:
    return _reg().get(calendar).add_years(parts, years, rule=rule)

def days_between(start: DateLike, end: DateLike, *, calendar: str = "gregorian") -> int:
    return _reg().get(calendar).days_between(start, end)
