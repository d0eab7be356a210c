"""
jcal.engines.interfaces
-----------------------
Defines the boundary every calendar engine honours so that the date entity,
the grid builder and the week numberer never need to know which calendar
they are looking at.

Standard Reference Frame:
All epoch days are Julian Day Numbers (JDN) of the civil day. A JDN is an
integer day count shared by every calendar, so converting between two
calendars is always `to_epoch_day` in one and `from_epoch_day` in the other.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, Tuple

from jcal.core.types import CalendarSystem


class CalendarEngineProtocol(Protocol):
    """
    Pure arithmetic for one solar calendar with twelve months.
    Engines never validate; callers go through `jcal.core.types.check_ymd`.
    """
    @property
    def system(self) -> CalendarSystem:
        ...

    @property
    def epoch_jdn(self) -> int:
        """JDN of day 1 of month 1 of year 1."""
        ...

    def info(self) -> Dict[str, Any]:
        ...

    # ---------------------------------------------------------
    # 1. Year structure
    # ---------------------------------------------------------
    def is_leap(self, year: int) -> bool:
        ...

    def leap_years_before(self, year: int) -> int:
        """Number of leap years in 1 .. year-1."""
        ...

    def month_lengths(self, year: int) -> Tuple[int, ...]:
        ...

    def month_length(self, year: int, month: int) -> int:
        ...

    def year_length(self, year: int) -> int:
        ...

    # ---------------------------------------------------------
    # 2. Linear day count
    # ---------------------------------------------------------
    def days_before_year(self, year: int) -> int:
        ...

    def days_before_month(self, year: int, month: int) -> int:
        ...

    def day_of_year(self, year: int, month: int, day: int) -> int:
        """1-based ordinal of the day within its year."""
        ...

    def to_epoch_day(self, year: int, month: int, day: int) -> int:
        ...

    def from_epoch_day(self, epoch_day: int) -> Tuple[int, int, int]:
        """Inverse of to_epoch_day. May return years outside 1..9999."""
        ...
