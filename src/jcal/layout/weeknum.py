"""
jcal.layout.weeknum
-------------------
Week numbers in year context: the first week whose seven days all belong to
the year is week 1. Days before it are in no week (None). Numbering then
runs on without reset to the end of the year, so the trailing partial week
still gets the next number. This is not ISO 8601: there is no "week with four
days" rule and nothing carries over from the neighbouring years.

ISO 8601 numbering is available separately (`iso_week`, `number_month_iso`)
for Monday-start grids. It is applied to each calendar's own year, so a
Jalali ISO week 1 is the Monday week holding the first Thursday of Farvardin.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from jcal.core.errors import InvalidWeekStartError
from jcal.core.time import DAYS_IN_WEEK, MONDAY, THURSDAY, weekday_offset
from jcal.core.types import Cell, Date, MonthGrid, WeekRow, YearGrid

MAX_WEEK = 54


def number_weeks(rows: Sequence[WeekRow]) -> Tuple[Optional[int], ...]:
    """Number chronologically ordered rows: first full row is 1, earlier rows None."""
    out: List[Optional[int]] = []
    current: Optional[int] = None
    for row in rows:
        if current is not None:
            current += 1
        elif all(cell is not None for cell in row):
            current = 1
        out.append(current)
    return tuple(out)


def _merge(prev: WeekRow, row: WeekRow) -> WeekRow:
    if any((a is None) == (b is None) for a, b in zip(prev, row)):
        raise ValueError("adjacent month rows do not interleave; were they built with the same week start?")
    return tuple(a if a is not None else b for a, b in zip(prev, row))


def year_weeks(year: YearGrid) -> Tuple[Tuple[WeekRow, ...], Tuple[Tuple[int, ...], ...]]:
    """
    Flatten a year grid into its calendar weeks.

    A month's last row and the next month's first row are one week when the
    first ends in padding; they are merged. Returns the weeks and, per month,
    the index into the weeks of each of its rows.
    """
    weeks: List[WeekRow] = []
    index: List[Tuple[int, ...]] = []
    for grid in year.months:
        positions = []
        for r, row in enumerate(grid.weeks):
            if r == 0 and weeks and weeks[-1][-1] is None:
                weeks[-1] = _merge(weeks[-1], row)
            else:
                weeks.append(row)
            positions.append(len(weeks) - 1)
        index.append(tuple(positions))
    return tuple(weeks), tuple(index)


def annotate_year(year: YearGrid) -> YearGrid:
    """Attach week numbers to every month row of a year grid."""
    weeks, index = year_weeks(year)
    numbers = number_weeks(weeks)
    months = tuple(
        replace(grid, week_numbers=tuple(numbers[i] for i in positions))
        for grid, positions in zip(year.months, index)
    )
    return replace(year, months=months)


def _lead(d: Date, week_start: int) -> int:
    # days at the start of the year that belong to no full week
    new_year = Date(d.calendar, d.year, 1, 1)
    return (week_start - new_year.weekday) % DAYS_IN_WEEK


def week_number(d: Date, week_start: int) -> Optional[int]:
    """Week number of a single day, same rule as `number_weeks` over its year."""
    n = (d.day_of_year - 1 - _lead(d, week_start)) // DAYS_IN_WEEK + 1
    return n if n >= 1 else None


def week_start_date(d: Date, week: int, week_start: int, *, iso: bool = False) -> Date:
    """
    First day of week `week` (1..54) of the year of `d`, kept inside that
    year: weeks past its end give the last day, and an ISO week 1 that
    begins in the previous year gives the first day.
    """
    from jcal.api import from_epoch_day, get_engine

    if not (1 <= week <= MAX_WEEK):
        raise ValueError(f"week {week} is outside 1..{MAX_WEEK}")
    new_year = Date(d.calendar, d.year, 1, 1)
    year_days = get_engine(d.calendar).year_length(d.year)
    if iso:
        # Monday of the week holding the first Thursday, as an offset from day 1
        off = weekday_offset(new_year.weekday, MONDAY)
        lead = -off if off <= THURSDAY - MONDAY else DAYS_IN_WEEK - off
    else:
        lead = _lead(d, week_start)
    ordinal = max(1, min(lead + DAYS_IN_WEEK * (week - 1) + 1, year_days))
    return from_epoch_day(d.calendar, new_year.epoch_day + ordinal - 1)


def iso_week(d: Date) -> Tuple[int, int]:
    """
    (week-based year, week) under ISO 8601: weeks start on Monday and the
    week holding the year's first Thursday is week 1. Raises OutOfRangeError
    when that Thursday falls outside years 1..9999.
    """
    from jcal.api import from_epoch_day

    thursday = d.epoch_day - weekday_offset(d.weekday, MONDAY) + (THURSDAY - MONDAY)
    t = from_epoch_day(d.calendar, thursday)
    return t.year, (t.day_of_year - 1) // DAYS_IN_WEEK + 1


def _first_day(row: WeekRow) -> Cell:
    return next((cell for cell in row if cell is not None), None)


def number_month(grid: MonthGrid) -> MonthGrid:
    """Attach year-context week numbers to a single month grid."""
    numbers = []
    for row in grid.weeks:
        day = _first_day(row)
        numbers.append(week_number(day, grid.week_start) if day is not None else None)
    return replace(grid, week_numbers=tuple(numbers))


def number_month_iso(grid: MonthGrid) -> MonthGrid:
    """ISO week numbers for a Monday-start month grid; every row is one ISO week."""
    if grid.week_start != MONDAY:
        raise InvalidWeekStartError(f"ISO week numbers need weeks that start on Monday (1), got {grid.week_start}")
    numbers = []
    for row in grid.weeks:
        day = _first_day(row)
        numbers.append(iso_week(day)[1] if day is not None else None)
    return replace(grid, week_numbers=tuple(numbers))
