"""calschema public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    get_calendar,
    make_calendar,
    register_calendar,
    day_number,
    from_day_number,
    convert,
    describe,
    add_days,
    add_months,
    add_years,
    days_between,
)
from .core.errors import (
    CalschemaError,
    InvalidConstructionError,
    InvalidPartsError,
    ArithmeticOverflowError,
    RoundoffError,
)
from .core.types import DateParts, OrdinalParts, MonthParts

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_calendar",
    "register_calendar",
    "day_number",
    "from_day_number",
    "convert",
    "describe",
    "add_days",
    "add_months",
    "add_years",
    "days_between",
    "CalschemaError",
    "InvalidConstructionError",
    "InvalidPartsError",
    "ArithmeticOverflowError",
    "RoundoffError",
    "DateParts",
    "OrdinalParts",
    "MonthParts",
]
