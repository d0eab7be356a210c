from __future__ import annotations

import logging
from datetime import date as _pydate
from typing import Any, Dict, List, Optional, Tuple, Union

from .core.engine import CalendarEngine, EngineRegistry
from .core.errors import OutOfRangeError
from .core.time import SUNDAY, to_jdn, weekday_of_jdn
from .core.types import MAX_YEAR, MIN_YEAR, MONTHS_IN_YEAR, CalendarSystem, Date, EngineSpec, MonthGrid, YearGrid
from .engines.factory import make_engine as _make_engine

logger = logging.getLogger(__name__)

CalendarLike = Union[CalendarSystem, str]
YearMonth = Tuple[int, int]

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def get_engine(calendar: CalendarLike) -> CalendarEngine:
    return _reg().get(calendar)

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(calendar: CalendarLike) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(calendar: CalendarLike, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(CalendarSystem.coerce(calendar), engine, overwrite=overwrite)

# ============================================================
# Calendar math
# ============================================================

def _check_year(year: int) -> None:
    if isinstance(year, bool) or not isinstance(year, int):
        raise TypeError(f"year must be an integer, got {type(year).__name__}")
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise OutOfRangeError(f"year {year} is outside {MIN_YEAR}..{MAX_YEAR}")

def is_leap(calendar: CalendarLike, year: int) -> bool:
    _check_year(year)
    return get_engine(calendar).is_leap(year)

def month_length(calendar: CalendarLike, year: int, month: int) -> int:
    _check_year(year)
    if isinstance(month, bool) or not isinstance(month, int):
        raise TypeError(f"month must be an integer, got {type(month).__name__}")
    if not (1 <= month <= MONTHS_IN_YEAR):
        raise OutOfRangeError(f"month {month} is outside 1..{MONTHS_IN_YEAR}")
    return get_engine(calendar).month_length(year, month)

def validate(calendar: CalendarLike, year: int, month: int, day: int) -> Date:
    return Date(CalendarSystem.coerce(calendar), year, month, day)

def parse_and_validate(
    calendar: CalendarLike,
    year: int,
    month: Optional[int] = None,
    day: Optional[int] = None,
) -> Date:
    """Validated Date; a missing month or day means the first one. A day needs its month."""
    if month is None and day is not None:
        raise ValueError(f"day {day} given without a month")
    return validate(calendar, year, 1 if month is None else month, 1 if day is None else day)

def to_epoch_day(d: Date) -> int:
    return d.epoch_day

def from_epoch_day(calendar: CalendarLike, epoch_day: int) -> Date:
    """Date of `calendar` on the given JDN. Raises OutOfRangeError outside years 1..9999."""
    calendar = CalendarSystem.coerce(calendar)
    y, m, d = get_engine(calendar).from_epoch_day(epoch_day)
    return Date(calendar, y, m, d)

def convert(d: Date, target: CalendarLike) -> Date:
    out = d.convert(target)
    logger.debug("convert %s %s -> %s %s (jdn %d)", d.calendar.value, d, out.calendar.value, out, d.epoch_day)
    return out

def weekday(d: Union[Date, int]) -> int:
    """0=Sunday .. 6=Saturday, from a Date or an epoch day."""
    if isinstance(d, Date):
        return d.weekday
    return weekday_of_jdn(d)

def day_of_year(d: Date) -> int:
    return d.day_of_year

def week_number(d: Date, week_start: int = SUNDAY) -> Optional[int]:
    from .layout.grid import check_week_start
    from .layout.weeknum import week_number as _week_number
    return _week_number(d, check_week_start(week_start))

def iso_week(d: Date) -> Tuple[int, int]:
    """(week-based year, week) with ISO 8601 rules applied to the date's own calendar."""
    from .layout.weeknum import iso_week as _iso_week
    return _iso_week(d)

def today(calendar: CalendarLike = CalendarSystem.JALALI) -> Date:
    """Today's local date in `calendar`."""
    return from_epoch_day(calendar, to_jdn(_pydate.today()))

def from_timestamp(calendar: CalendarLike, timestamp: Union[int, float]) -> Date:
    """Local date of a POSIX timestamp in `calendar`."""
    try:
        local = _pydate.fromtimestamp(timestamp)
    except (OverflowError, OSError, ValueError) as e:
        raise OutOfRangeError(f"timestamp {timestamp} is out of range: {e}") from None
    return from_epoch_day(calendar, to_jdn(local))

# ============================================================
# Grids
# ============================================================

def build_month(
    calendar: CalendarLike,
    year: int,
    month: int,
    week_start: int = SUNDAY,
    *,
    week_numbers: bool = False,
    iso_weeks: bool = False,
) -> MonthGrid:
    from .layout.grid import build_month as _build_month
    return _build_month(calendar, year, month, week_start, week_numbers=week_numbers, iso_weeks=iso_weeks)

def build_year(
    calendar: CalendarLike,
    year: int,
    week_start: int = SUNDAY,
    *,
    week_numbers: bool = False,
    iso_weeks: bool = False,
) -> YearGrid:
    from .layout.grid import build_year as _build_year
    return _build_year(calendar, year, week_start, week_numbers=week_numbers, iso_weeks=iso_weeks)

# ============================================================
# Month navigation
# ============================================================

def shift_month(calendar: CalendarLike, year: int, month: int, offset: int) -> YearMonth:
    """(year, month) `offset` months away. Both calendars have 12 months a year."""
    CalendarSystem.coerce(calendar)
    month_length(calendar, year, month)  # validates year and month
    q, r = divmod((month - 1) + offset, MONTHS_IN_YEAR)
    y2 = year + q
    if not (MIN_YEAR <= y2 <= MAX_YEAR):
        raise OutOfRangeError(f"{year}-{month:02d} shifted by {offset} months leaves {MIN_YEAR}..{MAX_YEAR}")
    return y2, r + 1

def prev_month(calendar: CalendarLike, year: int, month: int) -> YearMonth:
    return shift_month(calendar, year, month, -1)

def next_month(calendar: CalendarLike, year: int, month: int) -> YearMonth:
    return shift_month(calendar, year, month, 1)

def month_span(calendar: CalendarLike, year: int, month: int, count: int, *, span: bool = False) -> List[YearMonth]:
    """
    `count` consecutive months starting at (year, month).

    With span=True the given month sits in the middle of the window; when
    `count` is even the extra month goes before it (as `cal -3` / `cal --span`).
    A window that would leave years 1..9999 is slid back inside, so it still
    holds `count` months including the given one.
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    month_length(calendar, year, month)  # validates year and month
    first = MIN_YEAR * MONTHS_IN_YEAR
    last = MAX_YEAR * MONTHS_IN_YEAR + MONTHS_IN_YEAR - 1
    if count > last - first + 1:
        raise ValueError(f"count {count} is more months than years {MIN_YEAR}..{MAX_YEAR} hold")

    start = year * MONTHS_IN_YEAR + month - 1
    if span:
        start -= count // 2
    start = max(first, min(start, last - count + 1))
    return [(i // MONTHS_IN_YEAR, i % MONTHS_IN_YEAR + 1) for i in range(start, start + count)]
