from __future__ import annotations
from typing import Tuple, Union

from .core.types import CalendarSystem

WEEKDAYS: Tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

GREGORIAN_MONTHS: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Latin transliteration; no Farsi script.
JALALI_MONTHS: Tuple[str, ...] = (
    "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
    "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
)


def month_names(calendar: Union[CalendarSystem, str]) -> Tuple[str, ...]:
    calendar = CalendarSystem.coerce(calendar)
    return JALALI_MONTHS if calendar is CalendarSystem.JALALI else GREGORIAN_MONTHS


def month_name(calendar: Union[CalendarSystem, str], month: int) -> str:
    return month_names(calendar)[month - 1]


def weekday_abbr(weekday: int, width: int = 3) -> str:
    """'Sun', 'Mon', ... cut to `width` characters."""
    return WEEKDAYS[weekday][:width]
