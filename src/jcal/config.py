from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from .core.errors import OutOfRangeError
from .core.time import SUNDAY
from .core.types import MAX_YEAR, MIN_YEAR, MONTHS_IN_YEAR, CalendarSystem, MonthGrid, YearGrid
from .layout.grid import check_week_start


@dataclass(frozen=True)
class CalendarConfig:
    """What to lay out: a whole year, or one month when `month` is given."""
    calendar: CalendarSystem
    year: int
    month: Optional[int] = None
    week_start: int = SUNDAY
    show_week_numbers: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "calendar", CalendarSystem.coerce(self.calendar))
        check_week_start(self.week_start)
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise TypeError(f"year must be an integer, got {type(self.year).__name__}")
        if not (MIN_YEAR <= self.year <= MAX_YEAR):
            raise OutOfRangeError(f"year {self.year} is outside {MIN_YEAR}..{MAX_YEAR}")
        if self.month is not None:
            if isinstance(self.month, bool) or not isinstance(self.month, int):
                raise TypeError(f"month must be an integer, got {type(self.month).__name__}")
            if not (1 <= self.month <= MONTHS_IN_YEAR):
                raise OutOfRangeError(f"month {self.month} is outside 1..{MONTHS_IN_YEAR}")

    def build(self) -> Union[MonthGrid, YearGrid]:
        from .api import build_month, build_year
        if self.month is None:
            return build_year(self.calendar, self.year, self.week_start, week_numbers=self.show_week_numbers)
        return build_month(self.calendar, self.year, self.month, self.week_start, week_numbers=self.show_week_numbers)
