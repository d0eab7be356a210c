from __future__ import annotations
from datetime import date

# Weekdays are Sunday based: 0=Sun .. 6=Sat, regardless of the calendar.
SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)
DAYS_IN_WEEK = 7


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def weekday_of_jdn(jdn: int) -> int:
    """Weekday of a civil day, 0=Sunday .. 6=Saturday (JDN 0 was a Monday)."""
    return (jdn + 1) % DAYS_IN_WEEK

def weekday_offset(weekday: int, start: int) -> int:
    """Column of `weekday` in a week row that begins on `start` (0..6)."""
    return (weekday - start) % DAYS_IN_WEEK
