"""
jcal.strftime
-------------
`strftime`-style formatting of a Date in its own calendar.

Only date-level directives exist here; there is no time of day or time zone.
Month names come from `jcal.names`, so a Jalali date prints "Ordibehesht"
for %B and "Ord" for %b. Unknown directives are copied through unchanged.

Directives:

    %Y year (4 digits)     %y last two digits     %C century
    %m month 01..12        %d day 01..31          %e day, space padded
    %j day of year 001..366
    %B month name          %b, %h abbreviated month name
    %A weekday name        %a abbreviated weekday name
    %u weekday 1..7 (Monday = 1)                  %w weekday 0..6 (Sunday = 0)
    %U week of year, Sunday first (00..53)        %W same, Monday first
    %V ISO 8601 week       %G ISO week-based year %g its last two digits
    %F %Y-%m-%d            %D %m/%d/%y
    %n newline             %t tab                 %% a literal %

Flags between % and the letter: ^ upper-cases, - drops padding, _ pads with
spaces instead of zeros.
"""

from __future__ import annotations

import re
from typing import Callable, Dict

from .core.time import DAYS_IN_WEEK, MONDAY, SUNDAY, weekday_offset
from .core.types import Date
from .names import WEEKDAYS, month_name

DEFAULT_FORMAT = "%a %b %e %Y"

_DIRECTIVE_RE = re.compile(r"%([-_^#0]*)([A-Za-z%])")


def _week_of_year(d: Date, first: int) -> int:
    # days before the first `first`-weekday of the year are week 0
    return (d.day_of_year - 1 + DAYS_IN_WEEK - weekday_offset(d.weekday, first)) // DAYS_IN_WEEK


def _iso(d: Date):
    from .layout.weeknum import iso_week
    return iso_week(d)


# letter -> (value, zero-padded width); width 0 means text
_NUMERIC: Dict[str, Callable[[Date], tuple]] = {
    "Y": lambda d: (d.year, 4),
    "y": lambda d: (d.year % 100, 2),
    "C": lambda d: (d.year // 100, 2),
    "m": lambda d: (d.month, 2),
    "d": lambda d: (d.day, 2),
    "e": lambda d: (d.day, -2),
    "j": lambda d: (d.day_of_year, 3),
    "u": lambda d: ((d.weekday - MONDAY) % DAYS_IN_WEEK + 1, 1),
    "w": lambda d: (d.weekday, 1),
    "U": lambda d: (_week_of_year(d, SUNDAY), 2),
    "W": lambda d: (_week_of_year(d, MONDAY), 2),
    "V": lambda d: (_iso(d)[1], 2),
    "G": lambda d: (_iso(d)[0], 4),
    "g": lambda d: (_iso(d)[0] % 100, 2),
}

_TEXT: Dict[str, Callable[[Date], str]] = {
    "B": lambda d: month_name(d.calendar, d.month),
    "b": lambda d: month_name(d.calendar, d.month)[:3],
    "h": lambda d: month_name(d.calendar, d.month)[:3],
    "A": lambda d: WEEKDAYS[d.weekday],
    "a": lambda d: WEEKDAYS[d.weekday][:3],
    "n": lambda d: "\n",
    "t": lambda d: "\t",
}

_COMPOSITE = {
    "F": "%Y-%m-%d",
    "D": "%m/%d/%y",
}


def _numeric(value: int, width: int, flags: str) -> str:
    # negative width: space padding by default (%e)
    pad = " " if width < 0 else "0"
    width = abs(width)
    if "-" in flags:
        return str(value)
    if "_" in flags:
        pad = " "
    elif "0" in flags:
        pad = "0"
    return str(value).rjust(width, pad)


def format_date(d: Date, fmt: str = DEFAULT_FORMAT) -> str:
    """Format `d` with strftime-style directives over its own calendar's fields."""

    def repl(m: "re.Match[str]") -> str:
        flags, letter = m.group(1), m.group(2)
        if letter == "%":
            return "%"
        if letter in _COMPOSITE:
            out = format_date(d, _COMPOSITE[letter])
        elif letter in _NUMERIC:
            value, width = _NUMERIC[letter](d)
            out = _numeric(value, width, flags)
        elif letter in _TEXT:
            out = _TEXT[letter](d)
        else:
            return m.group(0)
        return out.upper() if "^" in flags else out

    return _DIRECTIVE_RE.sub(repl, fmt)
