#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

import jcal
from jcal.api import get_engine
from jcal.engines.jalali import JalaliEngine


def leap_years(calendar: jcal.CalendarSystem, start_year: int, end_year: int) -> List[int]:
    return [y for y in range(start_year, end_year + 1) if jcal.is_leap(calendar, y)]


def cycle_rows(start_year: int, end_year: int) -> List[str]:
    """
    One line per 33-year Jalali cycle touching the range: the first year of
    the cycle, then one mark per year ('L' leap, '.' common, ' ' outside range).
    """
    eng = get_engine(jcal.JALALI)
    if not isinstance(eng, JalaliEngine):
        raise SystemExit("the registered Jalali engine has no leap cycle")
    size = eng.p.cycle_years
    first, _ = eng.cycle_position(start_year)
    last, _ = eng.cycle_position(end_year)

    rows = []
    for q in range(first, last + 1):
        y0 = q * size + 1
        marks = []
        for y in range(y0, y0 + size):
            if not (start_year <= y <= end_year):
                marks.append(" ")
            else:
                marks.append("L" if eng.is_leap(y) else ".")
        rows.append(f"{y0:>5}  {''.join(marks)}".rstrip())
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="List Jalali leap years and their place in the 33-year cycle.")
    p.add_argument("--start-year", type=int, default=1343)
    p.add_argument("--end-year", type=int, default=1441)
    p.add_argument(
        "--calendar",
        choices=("jalali", "gregorian"),
        default="jalali",
        help="Calendar whose leap years are listed (default: jalali).",
    )
    p.add_argument("--cycles", action="store_true", help="Also print a per-cycle leap pattern (jalali only).")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    calendar = jcal.CalendarSystem.coerce(args.calendar)
    years = leap_years(calendar, start_year, end_year)
    print(f"{calendar.value} leap years in {start_year}..{end_year}: {len(years)}")
    for y in years:
        if calendar is jcal.JALALI:
            # Esfand 30 of a leap year, in Gregorian
            g = jcal.convert(jcal.validate(calendar, y, 12, 30), jcal.GREGORIAN)
            print(f"{y}  (30 Esfand = {g.isoformat()})")
        else:
            print(y)

    if args.cycles and calendar is jcal.JALALI:
        print()
        for row in cycle_rows(start_year, end_year):
            print(row)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
