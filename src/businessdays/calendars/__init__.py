# src/businessdays/calendars/__init__.py
"""
businessdays.calendars
~~~~~~~~~~~~~~~~~~~~~~

Holiday calendars and business-day date arithmetic.  A calendar is a
handle compared by value: a weekly business-day mask plus the holiday
rules of one market or jurisdiction.

Basic usage::

    from datetime import date
    from businessdays.calendars import USNYSE, advance_bdays

    nyse = USNYSE()
    nyse.advance_bdays(date(2023, 1, 13), 1)          # → date(2023, 1, 17)
    advance_bdays("USNYSE", date(2023, 1, 7), 0)      # → date(2023, 1, 9)

NumPy arrays are accepted everywhere a scalar is::

    import numpy as np
    anchors = np.array(["2023-01-03", "2023-01-04"], dtype="datetime64[D]")
    nyse.advance_bdays(anchors, 5)

Public API
----------
HolidayCalendar      Base class of all calendars.
resolve_calendar     Name / symbol → calendar handle.
register_calendar    Make an extra calendar resolvable by name.
advance_bdays        Roll forward, then walk N business days.
CalendarError        Base exception for all calendar-related errors.
UnknownCalendar      Raised when a name does not resolve.
"""

from __future__ import annotations

from businessdays.calendars._exceptions import CalendarError, UnknownCalendar
from businessdays.calendars.calendar import HolidayCalendar
from businessdays.calendars.markets import (
    Australia,
    BRSettlement,
    NullHolidayCalendar,
    USNYSE,
    USSettlement,
    WeekendsOnly,
)
from businessdays.calendars.oracle import (
    advance_bdays,
    bdays,
    calendar_equals,
    calendar_hash,
    display_name,
    is_bday,
    is_holiday,
    list_holidays,
    to_bday,
)
from businessdays.calendars.registry import (
    CalendarLike,
    CalendarName,
    register_calendar,
    registered_calendars,
    resolve_calendar,
)

__all__ = [
    "HolidayCalendar",
    "WeekendsOnly",
    "NullHolidayCalendar",
    "USSettlement",
    "USNYSE",
    "BRSettlement",
    "Australia",
    "CalendarLike",
    "CalendarName",
    "register_calendar",
    "registered_calendars",
    "resolve_calendar",
    "calendar_equals",
    "calendar_hash",
    "display_name",
    "advance_bdays",
    "is_holiday",
    "is_bday",
    "to_bday",
    "bdays",
    "list_holidays",
    "CalendarError",
    "UnknownCalendar",
]
