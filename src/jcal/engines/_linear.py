"""
jcal.engines._linear
--------------------
Shared arithmetic for solar calendars that are a fixed month table plus one
intercalary day. Subclasses provide the leap rule; everything else, including
the epoch-day mapping in both directions, lives here once.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Dict, Tuple

from jcal.core.types import CalendarSystem, EngineId

COMMON_YEAR_DAYS = 365


class LinearDayCalendar:
    """
    Base for the concrete engines. Implements CalendarEngineProtocol given
    `is_leap`, `leap_years_before`, a common-year month table and the month
    that receives the leap day.
    """
    common_month_lengths: Tuple[int, ...] = ()
    leap_month: int = 12

    def __init__(self, id: EngineId, epoch_jdn: int, mean_year: Fraction):
        if sum(self.common_month_lengths) != COMMON_YEAR_DAYS:
            raise ValueError("common month table must add up to 365 days")
        self.id = id
        self._epoch_jdn = epoch_jdn
        # Mean year length, only used to seed the year search in from_epoch_day.
        self.mean_year = Fraction(mean_year)

        leap = list(self.common_month_lengths)
        leap[self.leap_month - 1] += 1
        self._leap_month_lengths = tuple(leap)

    # ---------------------------------------------------------
    # Protocol Properties
    # ---------------------------------------------------------
    @property
    def system(self) -> CalendarSystem:
        return self.id.system

    @property
    def epoch_jdn(self) -> int:
        return self._epoch_jdn

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "epoch_jdn": self.epoch_jdn,
            "mean_year": str(self.mean_year),
        }

    # ---------------------------------------------------------
    # Leap rule (subclass responsibility)
    # ---------------------------------------------------------
    def is_leap(self, year: int) -> bool:
        raise NotImplementedError

    def leap_years_before(self, year: int) -> int:
        raise NotImplementedError

    # ---------------------------------------------------------
    # Year structure
    # ---------------------------------------------------------
    def month_lengths(self, year: int) -> Tuple[int, ...]:
        return self._leap_month_lengths if self.is_leap(year) else self.common_month_lengths

    def month_length(self, year: int, month: int) -> int:
        return self.month_lengths(year)[month - 1]

    def year_length(self, year: int) -> int:
        return COMMON_YEAR_DAYS + (1 if self.is_leap(year) else 0)

    # ---------------------------------------------------------
    # Forward: (year, month, day) -> epoch day
    # ---------------------------------------------------------
    def days_before_year(self, year: int) -> int:
        return COMMON_YEAR_DAYS * (year - 1) + self.leap_years_before(year)

    def days_before_month(self, year: int, month: int) -> int:
        return sum(self.month_lengths(year)[: month - 1])

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return self.days_before_month(year, month) + day

    def to_epoch_day(self, year: int, month: int, day: int) -> int:
        return self.epoch_jdn + self.days_before_year(year) + self.day_of_year(year, month, day) - 1

    # ---------------------------------------------------------
    # Inverse: epoch day -> (year, month, day)
    # ---------------------------------------------------------
    def year_of_epoch_day(self, epoch_day: int) -> int:
        n = epoch_day - self.epoch_jdn
        # Seed from the mean year, then walk to the enclosing year.
        year = int(n // self.mean_year) + 1
        while self.days_before_year(year) > n:
            year -= 1
        while self.days_before_year(year + 1) <= n:
            year += 1
        return year

    def from_epoch_day(self, epoch_day: int) -> Tuple[int, int, int]:
        year = self.year_of_epoch_day(epoch_day)
        # 0-based offset inside the year
        remaining = epoch_day - self.epoch_jdn - self.days_before_year(year)
        for month, length in enumerate(self.month_lengths(year), start=1):
            if remaining < length:
                return year, month, remaining + 1
            remaining -= length
        raise AssertionError(f"epoch day {epoch_day} overflowed year {year}")
