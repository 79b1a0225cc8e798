"""
calschema.engines.factory
-------------------------
Transforms pure data specifications into live Calendar objects.
"""

from __future__ import annotations

from typing import Union

from .arithmetic import NakedArithmetic
from .calendar import Calendar
from .gregorian import GregorianSchema, JulianSchema
from .schema import CalendricalSchema
from .specs import OLD_STYLE, CalendarSpec, EpochAnchor

_GREGORIAN = GregorianSchema()
_JULIAN = JulianSchema()


def resolve_epoch(epoch: Union[int, EpochAnchor]) -> int:
    """Day number of the first day of year 1."""
    if isinstance(epoch, bool):
        raise TypeError("epoch must be an int or an EpochAnchor, got a bool")
    if isinstance(epoch, int):
        return epoch
    if isinstance(epoch, EpochAnchor):
        if epoch.calendar == "gregorian":
            return _GREGORIAN.count_days_since_epoch(epoch.year, epoch.month, epoch.day)
        return resolve_epoch(OLD_STYLE) + _JULIAN.count_days_since_epoch(epoch.year, epoch.month, epoch.day)
    raise TypeError(f"Unknown epoch type: {type(epoch)}")


def make_calendar(spec: CalendarSpec) -> Calendar:
    """The universal entry point."""
    if not (isinstance(spec.schema, type) and issubclass(spec.schema, CalendricalSchema)):
        raise TypeError(f"Unknown schema type: {spec.schema!r}")
    schema = spec.schema()
    # 1. Segment + arithmetic strategy
    arithmetic = NakedArithmetic.create_default(schema, spec.years)
    # 2. Orchestrate
    return Calendar(
        id=spec.id,
        schema=schema,
        epoch=resolve_epoch(spec.epoch),
        arithmetic=arithmetic,
        rule=spec.rule,
        meta=spec.meta,
    )
