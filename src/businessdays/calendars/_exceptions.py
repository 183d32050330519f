class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class UnknownCalendar(CalendarError, LookupError):
    """A calendar name or symbol does not resolve to a registered calendar."""
