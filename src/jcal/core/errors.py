class JcalError(Exception):
    """Base error."""

class OutOfRangeError(JcalError, ValueError):
    """Raised when a year, month or day falls outside its calendar's bounds."""

class InvalidWeekStartError(JcalError, ValueError):
    """Raised when a week-start day is not one of 0 (Sunday) .. 6 (Saturday)."""

class ParseError(JcalError, ValueError):
    """Raised when a month, weekday or date string cannot be understood."""
