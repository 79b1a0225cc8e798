from __future__ import annotations
import logging
from calschema.core.engine import CalendarRegistry
from calschema.engines.specs import ALL_SPECS
from calschema.engines.factory import make_calendar

log = logging.getLogger(__name__)

def build_registry() -> CalendarRegistry:
    calendars = {}
    for name, spec in ALL_SPECS.items():
        calendars[name] = make_calendar(spec)
    log.debug("built calendar registry with %d calendars", len(calendars))
    return CalendarRegistry(calendars)
