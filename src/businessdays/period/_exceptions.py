class PeriodError(Exception):
    """Base exception for all business-day period errors."""


class InvalidMagnitude(PeriodError, ValueError):
    """A magnitude cannot be read as a signed 64-bit integer."""


class CalendarMismatch(PeriodError, ValueError):
    """Two periods measured against different calendars were combined."""


class InexactResult(PeriodError, ArithmeticError):
    """A scaled or divided magnitude is not an exact 64-bit integer."""
