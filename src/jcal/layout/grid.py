"""
jcal.layout.grid
----------------
Lays a month out as week rows of seven cells. Padding cells are None, every
other cell is the Date it shows. Rows always begin on `week_start`
(0=Sunday .. 6=Saturday), so consecutive months of a year line up.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple, Union

from jcal.core.errors import InvalidWeekStartError
from jcal.core.time import DAYS_IN_WEEK, SUNDAY, weekday_offset
from jcal.core.types import MONTHS_IN_YEAR, CalendarSystem, Cell, Date, MonthGrid, WeekRow, YearGrid
from .weeknum import annotate_year, number_month, number_month_iso

logger = logging.getLogger(__name__)

CalendarLike = Union[CalendarSystem, str]


def check_week_start(week_start: int) -> int:
    if isinstance(week_start, bool) or not isinstance(week_start, int) or not (0 <= week_start < DAYS_IN_WEEK):
        raise InvalidWeekStartError(f"week start must be 0 (Sunday) .. 6 (Saturday), got {week_start!r}")
    return week_start


def chunk_weeks(cells: Sequence[Cell]) -> Tuple[WeekRow, ...]:
    """Split cells into rows of 7, padding the last row with None."""
    padded = list(cells)
    padded.extend([None] * (-len(padded) % DAYS_IN_WEEK))
    return tuple(tuple(padded[i : i + DAYS_IN_WEEK]) for i in range(0, len(padded), DAYS_IN_WEEK))


def build_month(
    calendar: CalendarLike,
    year: int,
    month: int,
    week_start: int = SUNDAY,
    *,
    week_numbers: bool = False,
    iso_weeks: bool = False,
) -> MonthGrid:
    """Month grid; `iso_weeks` numbers rows by ISO 8601 and needs a Monday start."""
    calendar = CalendarSystem.coerce(calendar)
    week_start = check_week_start(week_start)
    first = Date(calendar, year, month, 1)

    cells: List[Cell] = [None] * weekday_offset(first.weekday, week_start)
    cells.extend(Date(calendar, year, month, d) for d in range(1, calendar.month_length(year, month) + 1))

    grid = MonthGrid(calendar, year, month, week_start, chunk_weeks(cells))
    if iso_weeks:
        grid = number_month_iso(grid)
    elif week_numbers:
        grid = number_month(grid)
    logger.debug("built %s %04d-%02d (week start %d): %d rows", calendar.value, year, month, week_start, len(grid.weeks))
    return grid


def build_year(
    calendar: CalendarLike,
    year: int,
    week_start: int = SUNDAY,
    *,
    week_numbers: bool = False,
    iso_weeks: bool = False,
) -> YearGrid:
    calendar = CalendarSystem.coerce(calendar)
    week_start = check_week_start(week_start)
    months = tuple(build_month(calendar, year, m, week_start, iso_weeks=iso_weeks) for m in range(1, MONTHS_IN_YEAR + 1))
    grid = YearGrid(calendar, year, week_start, months)
    if week_numbers and not iso_weeks:
        grid = annotate_year(grid)
    return grid
