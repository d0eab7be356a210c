from __future__ import annotations

import argparse
from collections import Counter
from typing import List, Tuple

import jcal
from jcal.names import WEEKDAYS


def mmdd(d: jcal.Date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def nowruz(year: int) -> jcal.Date:
    """Gregorian date of 1 Farvardin of Jalali `year`."""
    return jcal.convert(jcal.parse_and_validate(jcal.JALALI, year), jcal.GREGORIAN)


def nowruz_rows(from_year: int, to_year: int) -> List[Tuple[int, jcal.Date, bool]]:
    """(jalali year, gregorian date of 1 Farvardin, jalali leap flag) per year."""
    return [(y, nowruz(y), jcal.is_leap(jcal.JALALI, y)) for y in range(from_year, to_year + 1)]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of Nowruz (1 Farvardin) for a range of Jalali years."
    )
    p.add_argument("--from-year", type=int, default=1390)
    p.add_argument("--to-year", type=int, default=1420)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian column (default: iso).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: jcal.Date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    headers = ["Jalali", "Gregorian", "Weekday", "Leap"]
    colw = [6, 10, 9, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    days: Counter = Counter()
    for Y, d, leap in nowruz_rows(Y0, Y1):
        days[mmdd(d)] += 1
        cells = [str(Y), fmt(d), WEEKDAYS[d.weekday], "*" if leap else ""]
        print("  ".join(c.ljust(w) for c, w in zip(cells, colw)).rstrip())

    print("\nNowruz falls on:")
    for key in sorted(days):
        print(f"{key}  {days[key]} year(s)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
