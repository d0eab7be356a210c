from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

_DATE_RE = re.compile(r"^\d{1,4}[-/]\d{1,2}[-/]\d{1,2}$")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _calendar_arg(s: str):
    from jcal.core.types import CalendarSystem
    try:
        return CalendarSystem.coerce(s)
    except KeyError as e:
        raise argparse.ArgumentTypeError(e.args[0]) from None


def _weekday_arg(s: str) -> int:
    from jcal.parser import parse_weekday
    return parse_weekday(s)


def _positive_int(s: str) -> int:
    n = int(s)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {s}")
    return n


def _week_arg(s: str) -> int:
    n = int(s)
    if not (1 <= n <= 54):
        raise argparse.ArgumentTypeError(f"a week number must be in 1..54, got {s}")
    return n


def _columns_arg(s: str):
    """A positive count, or 'auto' (None) to fit the terminal width."""
    if s == "auto":
        return None
    return _positive_int(s)


def cmd_convert(argv: list[str]) -> int:
    import jcal
    from jcal.core.errors import JcalError
    from jcal.names import WEEKDAYS
    from jcal.parser import parse_ymd

    p = argparse.ArgumentParser(prog="jcal convert", description="Convert a date between the Jalali and Gregorian calendars")
    p.add_argument("date", help="YYYY-MM-DD or YYYY/MM/DD")
    p.add_argument("--from", dest="source", type=_calendar_arg, default=jcal.JALALI, help="calendar of DATE (default: jalali)")
    p.add_argument("--to", dest="target", type=_calendar_arg, default=None, help="target calendar (default: the other one)")
    args = p.parse_args(argv)

    target = args.target
    if target is None:
        target = jcal.GREGORIAN if args.source is jcal.JALALI else jcal.JALALI

    try:
        y, m, d = parse_ymd(args.date)
        out = jcal.convert(jcal.validate(args.source, y, m, d), target)
    except JcalError as e:
        p.error(str(e))

    print(f"{out.isoformat()} {WEEKDAYS[out.weekday]}")
    return 0


def _date_arg(calendar, text: str):
    """A Date from 'Y-M-D' / 'Y/M/D' in `calendar`, or '@TIMESTAMP' (local date)."""
    import jcal
    from jcal.core.errors import ParseError
    from jcal.parser import parse_ymd

    text = text.strip()
    if text.startswith("@"):
        try:
            ts = int(text[1:])
        except ValueError:
            raise ParseError(f"timestamp is invalid: {text!r}") from None
        return jcal.from_timestamp(calendar, ts)
    y, m, d = parse_ymd(text)
    return jcal.validate(calendar, y, m, d)


def cmd_date(argv: list[str]) -> int:
    import jcal
    from jcal.core.errors import JcalError
    from jcal.strftime import DEFAULT_FORMAT, format_date

    p = argparse.ArgumentParser(prog="jcal date", description="Print a date, optionally in Jalali, with a strftime-style format")
    p.add_argument("-j", "--jalali", action="store_true", help="print the date in Jalali")
    src = p.add_mutually_exclusive_group()
    src.add_argument("-d", "--date", metavar="DATE", help="Gregorian YYYY-MM-DD or @TIMESTAMP instead of today")
    src.add_argument("-g", "--gregorian", metavar="JDATE", help="print the given Jalali YYYY/MM/DD in Gregorian")
    src.add_argument("-f", "--file", metavar="FILE", help="one DATE per line from FILE ('-' for stdin)")
    p.add_argument("format", nargs="?", metavar="+FORMAT", help="output format (default: '+" + DEFAULT_FORMAT.replace("%", "%%") + "')")
    args = p.parse_args(argv)

    fmt = DEFAULT_FORMAT
    if args.format is not None:
        if not args.format.startswith("+"):
            p.error(f"format must start with '+', got {args.format!r}")
        fmt = args.format[1:]

    target = jcal.JALALI if args.jalali else jcal.GREGORIAN
    if args.gregorian is not None:
        target = jcal.GREGORIAN

    if args.file is not None:
        return _date_lines(p, args.file, fmt, target)

    try:
        if args.gregorian is not None:
            d = _date_arg(jcal.JALALI, args.gregorian)
        elif args.date is not None:
            d = _date_arg(jcal.GREGORIAN, args.date)
        else:
            d = jcal.today(jcal.GREGORIAN)
        print(format_date(jcal.convert(d, target), fmt))
    except JcalError as e:
        p.error(str(e))
    return 0


def _date_lines(p: argparse.ArgumentParser, path: str, fmt: str, target) -> int:
    """Format every date of a file; bad lines are reported on stderr and make the exit status 1."""
    import jcal
    from jcal.core.errors import JcalError
    from jcal.strftime import format_date

    if path == "-":
        lines = sys.stdin.read().splitlines()
    else:
        try:
            with open(path, encoding="utf-8") as f:
                lines = f.read().splitlines()
        except OSError as e:
            p.error(f"cannot read {path}: {e.strerror}")

    ok = True
    for lineno, line in enumerate(lines, 1):
        if not line.strip():
            continue
        try:
            d = _date_arg(jcal.GREGORIAN, line)
            print(format_date(jcal.convert(d, target), fmt))
        except JcalError as e:
            print(f"jcal date: {path}:{lineno}: invalid date {line.strip()!r}: {e}", file=sys.stderr)
            ok = False
    return 0 if ok else 1


def _resolve_when(p: argparse.ArgumentParser, calendar, words: list[str], now):
    """(year, month, day or None, year_only) from the [[DAY] MONTH] YEAR, MONTH or @TIMESTAMP words."""
    from jcal.parser import parse_month

    if len(words) > 3:
        p.error("expected at most [[DAY] MONTH] YEAR")
    if not words:
        return now.year, now.month, None, False
    if any(w.startswith("@") for w in words):
        if len(words) > 1:
            p.error("given a @TIMESTAMP, no other words can set the date")
        d = _date_arg(calendar, words[0])
        return d.year, d.month, d.day, False
    if len(words) == 1:
        w = words[0]
        if w.isdigit():
            return int(w), 1, None, True
        return now.year, parse_month(calendar, w), None, False

    if not words[-1].isdigit():
        p.error(f"year must be a number, got {words[-1]!r}")
    year = int(words[-1])
    month = parse_month(calendar, words[-2])
    day = None
    if len(words) == 3:
        if not words[0].isdigit():
            p.error(f"day must be a number, got {words[0]!r}")
        day = int(words[0])
    return year, month, day, False


def cmd_cal(argv: list[str]) -> int:
    import shutil

    import jcal
    from jcal.core.errors import JcalError
    from jcal.core.time import SATURDAY, SUNDAY, MONDAY
    from jcal.layout.render import DEFAULT_COLUMNS, fit_columns, render_month, render_months, render_year
    from jcal.layout.weeknum import week_start_date

    p = argparse.ArgumentParser(prog="jcal cal", description="Display a Jalali or Gregorian calendar")
    p.add_argument("-J", "--jalali", action="store_true", help="use the Jalali calendar (week starts on Saturday)")

    g = p.add_mutually_exclusive_group()
    g.add_argument("-1", "--one", dest="months", action="store_const", const=1, help="show a single month")
    g.add_argument("-3", "--three", dest="months", action="store_const", const=3, help="show previous, current and next month")
    g.add_argument("-Y", "--twelve", dest="months", action="store_const", const=12, help="show this month and the 11 after it")
    g.add_argument("-n", "--months", dest="months", type=_positive_int, metavar="N", help="show N months")
    g.add_argument("-y", "--year", dest="whole_year", action="store_true", help="show the whole year")

    p.add_argument("-S", "--span", action="store_true", help="center the shown months on the given month")
    p.add_argument("-j", "--julian", dest="ordinal", action="store_true", help="show day of year instead of day of month")
    p.add_argument("-w", "--week", nargs="?", type=_week_arg, const=0, default=None, metavar="N",
                   help="show week numbers; with N, show and highlight week N")
    p.add_argument("-v", "--vertical", action="store_true", help="print each week as a column")

    ws = p.add_mutually_exclusive_group()
    ws.add_argument("-s", "--sunday", dest="week_start", action="store_const", const=SUNDAY, help="weeks start on Sunday")
    ws.add_argument("-m", "--monday", dest="week_start", action="store_const", const=MONDAY, help="weeks start on Monday")
    ws.add_argument("--weekday", dest="week_start", type=_weekday_arg, metavar="W", help="weeks start on W (name or 0=Sunday..6)")
    ws.add_argument("--iso", action="store_true", help="ISO 8601 week numbers, weeks start on Monday")

    p.add_argument("-c", "--columns", type=_columns_arg, default=DEFAULT_COLUMNS, metavar="COLS",
                   help="months per row, or 'auto' to fit the terminal (default: 3)")
    p.add_argument("--color", choices=("auto", "always", "never"), default="auto", help="highlight the given day or today")
    p.add_argument("when", nargs="*", metavar="[[DAY] MONTH] YEAR", help="a month name alone means this year; @TIMESTAMP is a moment")
    args = p.parse_args(argv)

    calendar = jcal.JALALI if args.jalali else jcal.GREGORIAN
    week_start = args.week_start
    if args.iso:
        week_start = MONDAY
    elif week_start is None:
        week_start = SATURDAY if args.jalali else SUNDAY
    numbered = args.week is not None or args.iso
    mark_week = args.week or None

    try:
        now = jcal.today(calendar)
        year, month, day, year_only = _resolve_when(p, calendar, list(args.when), now)
        mark = jcal.validate(calendar, year, month, day) if day is not None else now
        if mark_week is not None:
            anchor = week_start_date(jcal.validate(calendar, year, 1, 1), mark_week, week_start, iso=args.iso)
            month = anchor.month
            mark = None

        if args.color == "always":
            use_color = True
        elif args.color == "never":
            use_color = False
        else:
            use_color = sys.stdout.isatty()
        if not use_color:
            mark = mark_week = None

        if args.whole_year or (year_only and args.months is None):
            grid = jcal.build_year(calendar, year, week_start, week_numbers=numbered, iso_weeks=args.iso)
            grids = list(grid.months)
        else:
            grid = None
            count = args.months or 1
            span = args.span or args.months == 3
            grids = [
                jcal.build_month(calendar, y, m, week_start, week_numbers=numbered, iso_weeks=args.iso)
                for y, m in jcal.month_span(calendar, year, month, count, span=span)
            ]
    except (JcalError, ValueError) as e:
        p.error(str(e))

    columns = args.columns
    if columns is None:
        width = shutil.get_terminal_size().columns
        columns = fit_columns(grids[0], width, ordinal=args.ordinal, vertical=args.vertical)

    opts = dict(ordinal=args.ordinal, vertical=args.vertical, mark=mark, mark_week=mark_week)
    if grid is not None:
        print(render_year(grid, columns=columns, **opts))
    elif len(grids) == 1:
        print(render_month(grids[0], **opts))
    else:
        print(render_months(grids, columns=columns, **opts))
    return 0


def main(argv: list[str] | None = None) -> int:
    from jcal.logging_setup import setup_logging

    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `jcal YYYY-MM-DD ...` converts a Jalali date
    if argv and _DATE_RE.match(argv[0]):
        setup_logging()
        return cmd_convert(argv)

    p = argparse.ArgumentParser(prog="jcal", description="Jalali/Gregorian calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("cal", help="Display a calendar (cal-like)", add_help=False)
    sub.add_parser("convert", help="Convert a date between calendars", add_help=False)
    sub.add_parser("date", help="Print a date with a strftime-style format (date-like)", add_help=False)

    # diagnostics
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["new-years", "round-trip", "leap-years", "nowruz-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.cmd == "cal":
        return cmd_cal(rest)

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "date":
        return cmd_date(rest)

    if args.cmd == "diag":
        tool_map = {
            "new-years": "jcal.diagnostics.new_years_table",
            "round-trip": "jcal.diagnostics.round_trip",
            "leap-years": "jcal.diagnostics.leap_years",
            "nowruz-scatter": "jcal.diagnostics.nowruz_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
