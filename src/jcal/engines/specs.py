"""
jcal.engines.specs
------------------
Pure data specifications for the bundled calendars. These are the only
calendar constants in the package; engines are built from them once.
"""

from __future__ import annotations

from typing import Dict

from jcal.core.types import CalendarSystem, EngineId, EngineSpec
from .gregorian import GregorianParams
from .jalali import JalaliParams


GREGORIAN_SPEC = EngineSpec(
    id=EngineId(system=CalendarSystem.GREGORIAN, name="proleptic", version="1"),
    params=GregorianParams(),
    meta={"description": "Proleptic Gregorian calendar, no reform cutover."},
)

JALALI_SPEC = EngineSpec(
    id=EngineId(system=CalendarSystem.JALALI, name="arithmetic-33", version="1"),
    params=JalaliParams(),
    meta={
        "description": "Jalali calendar on the 33-year arithmetic leap cycle.",
        "anchor": "1403-01-01 = 2024-03-20 (Gregorian)",
    },
)

ALL_SPECS: Dict[CalendarSystem, EngineSpec] = {
    CalendarSystem.GREGORIAN: GREGORIAN_SPEC,
    CalendarSystem.JALALI: JALALI_SPEC,
}
