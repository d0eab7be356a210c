"""
jcal.engines.jalali
-------------------
Jalali (Persian solar Hijri) calendar on the 33-year arithmetic cycle.

Six months of 31 days, five of 30, and Esfand with 29 days (30 in a leap
year). A year is leap when its position in the 33-year cycle is one of the
eight leap residues. With the default residues the count of leap years in
1..n is (8n + 29) // 33.

The astronomical (vernal-equinox) rule agrees with this cycle in the modern
era but not at every year far from it; `epoch_jdn` is anchored so that
1 Farvardin 1403 falls on 2024-03-20.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from fractions import Fraction
from typing import Tuple

from jcal.core.types import EngineId
from ._linear import LinearDayCalendar


@dataclass(frozen=True)
class JalaliParams:
    epoch_jdn: int = 1948320   # 1 Farvardin 1
    cycle_years: int = 33
    leap_residues: Tuple[int, ...] = (1, 5, 9, 13, 17, 22, 26, 30)

    def __post_init__(self) -> None:
        if self.cycle_years <= 0:
            raise ValueError("cycle_years must be positive")
        if tuple(sorted(set(self.leap_residues))) != tuple(self.leap_residues):
            raise ValueError("leap_residues must be strictly increasing")
        if not all(0 <= r < self.cycle_years for r in self.leap_residues):
            raise ValueError("leap_residues must be in 0..cycle_years-1")

    @property
    def leaps_per_cycle(self) -> int:
        return len(self.leap_residues)

    @property
    def cycle_days(self) -> int:
        return 365 * self.cycle_years + self.leaps_per_cycle

    @property
    def mean_year(self) -> Fraction:
        return Fraction(self.cycle_days, self.cycle_years)


class JalaliEngine(LinearDayCalendar):
    common_month_lengths = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)
    leap_month = 12

    def __init__(self, id: EngineId, params: JalaliParams):
        super().__init__(id, params.epoch_jdn, params.mean_year)
        self.p = params
        self._residues = frozenset(params.leap_residues)
        # Residue 0 is the last year of a cycle; it is covered by the full-cycle count.
        self._partial = tuple(r for r in params.leap_residues if r > 0)

    def is_leap(self, year: int) -> bool:
        return year % self.p.cycle_years in self._residues

    def leap_years_before(self, year: int) -> int:
        full, rem = divmod(year - 1, self.p.cycle_years)
        return full * self.p.leaps_per_cycle + bisect_right(self._partial, rem)

    def cycle_position(self, year: int) -> Tuple[int, int]:
        """(cycle index, 1-based year within the cycle)."""
        q, r = divmod(year - 1, self.p.cycle_years)
        return q, r + 1
