from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Literal, Optional, Type, Union

from ..core.types import AdditionRule, CalendarId, check_addition_rule
from .blank_day import InternationalFixedSchema, PositivistSchema, WorldSchema
from .gregorian import CivilSchema, GregorianSchema, JulianSchema
from .persian import Persian2820Schema
from .ptolemaic import (
    Coptic12Schema,
    Coptic13Schema,
    Egyptian12Schema,
    Egyptian13Schema,
    FrenchRepublican12Schema,
    FrenchRepublican13Schema,
)
from .schema import CalendricalSchema
from .segment import Range
from .tabular_islamic import TabularIslamicSchema


@dataclass(frozen=True)
class EpochAnchor:
    """First day of year 1, given as a date of the proleptic Gregorian or Julian calendar."""
    calendar: Literal["gregorian", "julian"]
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if self.calendar not in ("gregorian", "julian"):
            raise ValueError("calendar must be 'gregorian' or 'julian'")
        if not (1 <= self.month <= 12) or not (1 <= self.day <= 31):
            raise ValueError(f"Invalid anchor date {self.year}-{self.month}-{self.day}")


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a Calendar."""
    id: CalendarId
    schema: Type[CalendricalSchema]
    epoch: Union[int, EpochAnchor]
    years: Optional[Range] = None  # None: every year supported by the schema
    rule: AdditionRule = "truncate"
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        check_addition_rule(self.rule)
        if not (isinstance(self.schema, type) and issubclass(self.schema, CalendricalSchema)):
            raise TypeError(f"schema must be a CalendricalSchema subclass, got {self.schema!r}")
        if not isinstance(self.epoch, (int, EpochAnchor)):
            raise TypeError(f"epoch must be an int or an EpochAnchor, got {self.epoch!r}")

    def tweak(self, **changes: Any) -> "CalendarSpec":
        return replace(self, **changes)


# ============================================================
# EPOCHS
# ============================================================

NEW_STYLE = 0                                        # 1 January 1, Gregorian
OLD_STYLE = EpochAnchor("gregorian", 0, 12, 30)      # 1 January 1, Julian
COPTIC = EpochAnchor("julian", 284, 8, 29)
ETHIOPIC = EpochAnchor("julian", 8, 8, 29)
EGYPTIAN = EpochAnchor("julian", -746, 2, 26)        # Era of Nabonassar
ARMENIAN = EpochAnchor("julian", 552, 7, 11)
FRENCH_REPUBLICAN = EpochAnchor("gregorian", 1792, 9, 22)
PERSIAN = EpochAnchor("julian", 622, 3, 19)
TABULAR_ISLAMIC = EpochAnchor("julian", 622, 7, 16)  # civil epoch
POSITIVIST = EpochAnchor("gregorian", 1789, 1, 1)


def _spec(family: str, name: str, schema: Type[CalendricalSchema], epoch: Union[int, EpochAnchor], **meta: Any) -> CalendarSpec:
    return CalendarSpec(id=CalendarId(family, name), schema=schema, epoch=epoch, meta=meta)


# ============================================================
# REGISTRY PAYLOAD
# ============================================================

ALL_SPECS: Dict[str, CalendarSpec] = {
    "gregorian": _spec("gj", "gregorian", GregorianSchema, NEW_STYLE),
    "julian": _spec("gj", "julian", JulianSchema, OLD_STYLE),
    "civil": _spec("gj", "civil", CivilSchema, NEW_STYLE),
    "coptic": _spec("ptolemaic", "coptic", Coptic12Schema, COPTIC),
    "coptic13": _spec("ptolemaic", "coptic13", Coptic13Schema, COPTIC, epagomenal="month 13"),
    "ethiopic": _spec("ptolemaic", "ethiopic", Coptic12Schema, ETHIOPIC),
    "egyptian": _spec("ptolemaic", "egyptian", Egyptian12Schema, EGYPTIAN),
    "egyptian13": _spec("ptolemaic", "egyptian13", Egyptian13Schema, EGYPTIAN, epagomenal="month 13"),
    "armenian": _spec("ptolemaic", "armenian", Egyptian12Schema, ARMENIAN),
    "french_republican": _spec("ptolemaic", "french_republican", FrenchRepublican12Schema, FRENCH_REPUBLICAN),
    "french_republican13": _spec(
        "ptolemaic", "french_republican13", FrenchRepublican13Schema, FRENCH_REPUBLICAN, epagomenal="month 13"
    ),
    "persian": _spec("persian", "persian", Persian2820Schema, PERSIAN, cycle=2820),
    "tabular_islamic": _spec("lunar", "tabular_islamic", TabularIslamicSchema, TABULAR_ISLAMIC, cycle=30),
    "world": _spec("blank_day", "world", WorldSchema, NEW_STYLE),
    "positivist": _spec("blank_day", "positivist", PositivistSchema, POSITIVIST),
    "international_fixed": _spec("blank_day", "international_fixed", InternationalFixedSchema, NEW_STYLE),
}
