"""jcal public API.

Jalali and Gregorian calendar math, month/year grids and week numbers.
Most callers only need the functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_engines,
    engine_info,
    make_engine,
    register_engine,
    is_leap,
    month_length,
    validate,
    parse_and_validate,
    to_epoch_day,
    from_epoch_day,
    convert,
    weekday,
    day_of_year,
    week_number,
    iso_week,
    today,
    from_timestamp,
    build_month,
    build_year,
    shift_month,
    prev_month,
    next_month,
    month_span,
)
from .config import CalendarConfig
from .strftime import format_date
from .core.errors import InvalidWeekStartError, JcalError, OutOfRangeError, ParseError
from .core.types import CalendarSystem, Date, MonthGrid, YearGrid

JALALI = CalendarSystem.JALALI
GREGORIAN = CalendarSystem.GREGORIAN

__all__ = [
    "list_engines",
    "engine_info",
    "make_engine",
    "register_engine",
    "is_leap",
    "month_length",
    "validate",
    "parse_and_validate",
    "to_epoch_day",
    "from_epoch_day",
    "convert",
    "weekday",
    "day_of_year",
    "week_number",
    "iso_week",
    "today",
    "from_timestamp",
    "build_month",
    "build_year",
    "shift_month",
    "prev_month",
    "next_month",
    "month_span",
    "CalendarConfig",
    "format_date",
    "CalendarSystem",
    "Date",
    "MonthGrid",
    "YearGrid",
    "JALALI",
    "GREGORIAN",
    "JcalError",
    "OutOfRangeError",
    "InvalidWeekStartError",
    "ParseError",
]
