from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional, Tuple, Union

from .errors import OutOfRangeError

MIN_YEAR = 1
MAX_YEAR = 9999
MONTHS_IN_YEAR = 12


class CalendarSystem(str, Enum):
    JALALI = "jalali"
    GREGORIAN = "gregorian"

    @classmethod
    def coerce(cls, value: Union["CalendarSystem", str]) -> "CalendarSystem":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise KeyError(f"Unknown calendar '{value}'. Available: {[c.value for c in cls]}") from None

    @property
    def months(self) -> int:
        return MONTHS_IN_YEAR

    def is_leap(self, year: int) -> bool:
        return _engine(self).is_leap(year)

    def month_length(self, year: int, month: int) -> int:
        return _engine(self).month_length(year, month)


def _engine(calendar: CalendarSystem):
    from ..api import get_engine
    return get_engine(calendar)


def _require_int(name: str, value: Any) -> int:
    # bool is an int subclass; True is not a month.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def check_ymd(calendar: CalendarSystem, year: int, month: int, day: int) -> None:
    """Raise OutOfRangeError unless (year, month, day) names a real day of `calendar`."""
    _require_int("year", year)
    _require_int("month", month)
    _require_int("day", day)
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise OutOfRangeError(f"year {year} is outside {MIN_YEAR}..{MAX_YEAR}")
    if not (1 <= month <= MONTHS_IN_YEAR):
        raise OutOfRangeError(f"month {month} is outside 1..{MONTHS_IN_YEAR}")
    last = _engine(calendar).month_length(year, month)
    if not (1 <= day <= last):
        raise OutOfRangeError(
            f"day {day} is outside 1..{last} for {calendar.value} {year}-{month:02d}"
        )


@dataclass(frozen=True)
class Date:
    """A validated civil date in one calendar system.

    Construction fails with OutOfRangeError instead of clamping, so every
    instance is a day that exists.
    """
    calendar: CalendarSystem
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "calendar", CalendarSystem.coerce(self.calendar))
        check_ymd(self.calendar, self.year, self.month, self.day)

    @property
    def epoch_day(self) -> int:
        return _engine(self.calendar).to_epoch_day(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        from .time import weekday_of_jdn
        return weekday_of_jdn(self.epoch_day)

    @property
    def day_of_year(self) -> int:
        return _engine(self.calendar).day_of_year(self.year, self.month, self.day)

    def convert(self, target: Union[CalendarSystem, str]) -> "Date":
        target = CalendarSystem.coerce(target)
        if target is self.calendar:
            return self
        y, m, d = _engine(target).from_epoch_day(self.epoch_day)
        return Date(target, y, m, d)

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


# Empty padding is None; a real day is its Date.
Cell = Optional[Date]
WeekRow = Tuple[Cell, ...]


@dataclass(frozen=True)
class MonthGrid:
    calendar: CalendarSystem
    year: int
    month: int
    week_start: int
    weeks: Tuple[WeekRow, ...]
    week_numbers: Optional[Tuple[Optional[int], ...]] = None

    def days(self) -> Iterator[Date]:
        for row in self.weeks:
            for cell in row:
                if cell is not None:
                    yield cell


@dataclass(frozen=True)
class YearGrid:
    calendar: CalendarSystem
    year: int
    week_start: int
    months: Tuple[MonthGrid, ...]

    @property
    def has_week_numbers(self) -> bool:
        return all(m.week_numbers is not None for m in self.months)


@dataclass(frozen=True)
class EngineId:
    system: CalendarSystem
    name: str
    version: str


@dataclass(frozen=True)
class EngineSpec:
    """Pure data payload for constructing a calendar engine."""
    id: EngineId
    params: Any  # GregorianParams | JalaliParams
    meta: dict
