"""
jcal.parser
-----------
Turns command-line text into numbers: months and weekdays by number or by
(abbreviated) English name, and dates written as Y-M-D or Y/M/D.

Names match case-insensitively on any prefix that is not shared with another
name, so "f" is February but "ju" is ambiguous between June and July.
"""

from __future__ import annotations

import re
from typing import Sequence, Tuple, Union

from .core.errors import ParseError
from .core.types import MONTHS_IN_YEAR, CalendarSystem
from .names import WEEKDAYS, month_names

_YMD_RE = re.compile(r"^\s*(\d{1,4})([-/])(\d{1,2})\2(\d{1,2})\s*$")


def _match_name(text: str, names: Sequence[str], what: str) -> int:
    """0-based index of the single name `text` abbreviates."""
    key = text.strip().lower()
    if not key:
        raise ParseError(f"empty {what}")
    hits = [i for i, name in enumerate(names) if name.lower().startswith(key)]
    exact = [i for i in hits if names[i].lower() == key]
    if exact:
        return exact[0]
    if len(hits) == 1:
        return hits[0]
    if not hits:
        raise ParseError(f"unknown {what} {text!r}")
    candidates = ", ".join(names[i] for i in hits)
    raise ParseError(f"ambiguous {what} {text!r}: could be {candidates}")


def parse_month(calendar: Union[CalendarSystem, str], text: str) -> int:
    """Month number 1..12 from a number or a month name of `calendar`."""
    text = str(text).strip()
    if text.isdigit():
        month = int(text)
        if not (1 <= month <= MONTHS_IN_YEAR):
            raise ParseError(f"month {month} is outside 1..{MONTHS_IN_YEAR}")
        return month
    return _match_name(text, month_names(calendar), "month") + 1


def parse_weekday(text: str) -> int:
    """Weekday 0 (Sunday) .. 6 (Saturday) from a number or a weekday name."""
    text = str(text).strip()
    if text.isdigit():
        wd = int(text)
        if not (0 <= wd < len(WEEKDAYS)):
            raise ParseError(f"weekday {wd} is outside 0..6 (0 = Sunday)")
        return wd
    return _match_name(text, WEEKDAYS, "weekday")


def parse_ymd(text: str) -> Tuple[int, int, int]:
    """(year, month, day) from 'Y-M-D' or 'Y/M/D'. Range checks are left to Date."""
    m = _YMD_RE.match(str(text))
    if m is None:
        raise ParseError(f"expected YYYY-MM-DD or YYYY/MM/DD, got {text!r}")
    return int(m.group(1)), int(m.group(3)), int(m.group(4))
