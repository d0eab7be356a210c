"""
jcal.engines.gregorian
----------------------
Proleptic Gregorian calendar. No reform cutover: the 4/100/400 rule is applied
to every year, including those before 1582.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from jcal.core.types import EngineId
from ._linear import LinearDayCalendar


@dataclass(frozen=True)
class GregorianParams:
    epoch_jdn: int = 1721426   # 0001-01-01
    cycle_years: int = 400
    cycle_days: int = 146097

    def __post_init__(self) -> None:
        if self.cycle_days != 365 * self.cycle_years + self.cycle_years // 4 - 3:
            raise ValueError("cycle_days does not match the 4/100/400 rule")

    @property
    def mean_year(self) -> Fraction:
        return Fraction(self.cycle_days, self.cycle_years)


class GregorianEngine(LinearDayCalendar):
    common_month_lengths = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
    leap_month = 2

    def __init__(self, id: EngineId, params: GregorianParams):
        super().__init__(id, params.epoch_jdn, params.mean_year)
        self.p = params

    def is_leap(self, year: int) -> bool:
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    def leap_years_before(self, year: int) -> int:
        y = year - 1
        return y // 4 - y // 100 + y // 400
