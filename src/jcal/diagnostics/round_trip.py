from __future__ import annotations

import argparse
import random
from datetime import date

import jcal
from jcal.core.time import to_jdn


def parse_calendars(s: str) -> list[jcal.CalendarSystem]:
    # "jalali,gregorian" -> [JALALI, GREGORIAN]
    return [jcal.CalendarSystem.coerce(x.strip()) for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: jcal.CalendarSystem,
    N: int,
    start_jdn: int,
    end_jdn: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """
    Pick random days, read them in `calendar`, convert to the other calendar
    and back. Every step must land on the same epoch day.
    """
    random.seed(seed)
    other = jcal.GREGORIAN if calendar is jcal.JALALI else jcal.JALALI
    failures = 0

    for _ in range(N):
        jdn = random.randint(start_jdn, end_jdn)
        d0 = jcal.from_epoch_day(calendar, jdn)
        d1 = jcal.convert(d0, other)
        back = jcal.convert(d1, calendar)

        if d0.epoch_day != jdn or d1.epoch_day != jdn or back != d0 or d0.weekday != d1.weekday:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar.value)
            print("jdn:", jdn)
            print("d0:", d0, "->", other.value, d1, "-> back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: calendar -> other calendar -> calendar.")
    p.add_argument("--calendars", type=str, default="jalali,gregorian", help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=str, default="0622-03-22", help="Start Gregorian date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="9999-12-31", help="End Gregorian date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars)
    start = to_jdn(date.fromisoformat(args.start))
    end = to_jdn(date.fromisoformat(args.end))

    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for cal in calendars:
        print(f"Testing {cal.value} ...")
        f = roundtrip_test(cal, N=args.N, start_jdn=start, end_jdn=end, seed=args.seed, max_failures=args.max_failures)
        total_fail += f

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
